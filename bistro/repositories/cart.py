from typing import Any, Dict, List

from pymongo.database import Database

from .base import BaseRepository


class CartRepository(BaseRepository):
    def __init__(self, db: Database):
        super().__init__(db, "carts")

    def find_by_email(self, email: str) -> List[Dict[str, Any]]:
        return self.find_many({"email": email})
