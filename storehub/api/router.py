"""
API router aggregating every domain router under API_V1_STR.
"""

from fastapi import APIRouter

from storehub.domains.store.api.routes import router as store_router

api_router = APIRouter()
api_router.include_router(store_router)
