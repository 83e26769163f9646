"""
Access log middleware
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.core.logger import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status, latency and client IP for every request"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()

        response = await call_next(request)

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        logger.info(
            "Request processed",
            metadata={
                "status": response.status_code,
                "latency_ms": round((time.perf_counter() - start) * 1000, 2),
                "client_ip": request.client.host if request.client else None,
                "method": request.method,
                "path": path,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return response
