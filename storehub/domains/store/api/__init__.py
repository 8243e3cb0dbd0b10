"""
Store API Layer

FastAPI adapter, request envelope and error mapping.
"""
