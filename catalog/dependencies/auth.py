"""
Authentication dependencies for FastAPI
Provides JWT bearer token validation
"""

from typing import Optional
import jwt
from fastapi import Header

from catalog.core.config import config
from catalog.core.errors import Unauthorized
from catalog.core.logger import logger
from catalog.models.user import User


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        Unauthorized: If token is invalid or expired
    """
    try:
        return jwt.decode(
            token,
            config.auth_jwt_secret,
            algorithms=[config.auth_jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token", metadata={"event": "invalid_token"}, error=e)
        raise Unauthorized("Invalid or expired token")


async def get_current_user(
    authorization: Optional[str] = Header(None)
) -> User:
    """
    Dependency that requires a valid bearer token.
    Any valid token is sufficient; no role checks are made.
    """
    if not authorization:
        logger.warning("Authentication required: No token provided")
        raise Unauthorized("Authorization header is required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise Unauthorized("Invalid authorization format. Expected 'Bearer <token>'")

    payload = decode_jwt(parts[1])

    user_id = payload.get("user_id")
    return User(id=str(user_id) if user_id is not None else None, claims=payload)
