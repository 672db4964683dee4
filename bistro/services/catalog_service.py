"""Read-only menu and review listings."""

from typing import Any, Dict, List

from pymongo.database import Database

from bistro.repositories.base import BaseRepository
from bistro_common.models.base import to_jsonable

MENU_COLLECTION = "menu"
REVIEWS_COLLECTION = "reviews"


class CatalogService:
    def __init__(self, db: Database):
        self.db = db

    def list_menu(self) -> List[Dict[str, Any]]:
        return to_jsonable(BaseRepository(self.db, MENU_COLLECTION).find_all())

    def list_reviews(self) -> List[Dict[str, Any]]:
        return to_jsonable(BaseRepository(self.db, REVIEWS_COLLECTION).find_all())
