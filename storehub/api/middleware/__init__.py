from .logging_middleware import CORRELATION_HEADER, RequestLoggingMiddleware

__all__ = ["CORRELATION_HEADER", "RequestLoggingMiddleware"]
