"""
Request ID utilities for request tracing
"""

import uuid
from contextvars import ContextVar
from typing import Optional

# Context variable to store the request ID across async operations
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the request ID from the current context"""
    return request_id_context.get()


def set_request_id(request_id: str) -> None:
    """Set the request ID in the current context"""
    request_id_context.set(request_id)


def create_request_id() -> str:
    """Create a new request ID"""
    return f"req-{uuid.uuid4().hex}"
