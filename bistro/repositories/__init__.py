from .base import BaseRepository
from .cart import CartRepository
from .user import UserRepository

__all__ = ["BaseRepository", "CartRepository", "UserRepository"]
