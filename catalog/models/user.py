"""
User model for authentication
"""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    """Caller identity taken from a validated JWT"""

    id: Optional[str] = None
    claims: dict = {}
