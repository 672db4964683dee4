"""User DTOs"""

from .base import OpenDocument


class UserUpsertRequest(OpenDocument):
    email: str
