"""
Token schemas.

Decoded session token claims and the identity attached to guarded requests.
"""

from typing import Optional

from pydantic import BaseModel


class TokenPayload(BaseModel):
    """Claims carried by a session token."""
    id: int
    username: str
    email: Optional[str] = None
    exp: int
