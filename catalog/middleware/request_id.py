"""
Request ID Middleware for request tracing
Ensures every request has a unique request ID
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.core.config import config
from catalog.utils.request_id import create_request_id, set_request_id


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle request IDs for request tracing

    - Extracts the request ID from request headers (or generates a new one)
    - Stores it in context for use throughout the request lifecycle
    - Adds it to response headers
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(config.request_id_header) or create_request_id()

        set_request_id(request_id)
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers[config.request_id_header] = request_id
        return response
