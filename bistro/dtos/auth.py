from typing import Optional

from pydantic import BaseModel

from .base import OpenDocument


class TokenRequest(OpenDocument):
    """Identity payload to embed in the token; any extra fields become claims."""

    email: Optional[str] = None


class TokenResponse(BaseModel):
    token: str


class AdminStatusResponse(BaseModel):
    admin: bool
