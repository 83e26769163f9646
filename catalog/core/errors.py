"""
Error types and FastAPI exception handlers for the Product Catalog Service
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException

from catalog.core.logger import logger


class ErrorResponse(Exception):
    """Base exception for application errors carrying an HTTP status"""

    status_code = 400

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(ErrorResponse):
    """Malformed client input"""
    status_code = 400


class InvalidIdentifier(ErrorResponse):
    """Identifier is not in the store's expected format"""
    status_code = 400

    def __init__(self, product_id: str):
        super().__init__("Invalid product ID format", details={"product_id": product_id})


class Unauthorized(ErrorResponse):
    status_code = 401


class NotFound(ErrorResponse):
    status_code = 404


class RateLimited(ErrorResponse):
    status_code = 429


class StoreUnavailable(ErrorResponse):
    """Backing document store could not complete the operation"""
    status_code = 500


class DeadlineExceeded(ErrorResponse):
    """Store operation did not finish within its deadline"""
    status_code = 504


class CacheUnavailable(ErrorResponse):
    """Cache could not complete the operation; never surfaced to clients"""
    status_code = 500


class PublishUnavailable(ErrorResponse):
    """Broker rejected or could not accept a publish; never surfaced to clients"""
    status_code = 500


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    status: int
    error: str
    details: dict = None


def _error_body(status_code: int, message: str, details: dict = None) -> dict:
    body = {"status": status_code, "error": message}
    if details:
        body["details"] = details
    return body


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse and its subclasses"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if exc.status_code >= 500:
        logger.error(f"Error: {exc.message}", metadata=metadata, error=exc)
    else:
        logger.warning(f"Error: {exc.message}", metadata=metadata)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.message, exc.details),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as 400"""
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning(
        "Validation error",
        metadata={"event": "validation_error", "errors": errors, "url": str(request.url)},
    )

    return JSONResponse(
        status_code=400,
        content=_error_body(400, "Invalid request", {"errors": errors}),
    )


def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Handler for slowapi rate limit violations"""
    logger.warning(
        "Rate limit exceeded",
        metadata={
            "event": "rate_limit_exceeded",
            "client_ip": request.client.host if request.client else None,
            "url": str(request.url),
            "limit": str(exc.detail),
        },
    )

    return JSONResponse(
        status_code=RateLimited.status_code,
        content=_error_body(RateLimited.status_code, "Rate limit exceeded"),
    )
