"""Read access to a fixed set of collections by name.

Only collections listed in ``COLLECTION_ACCESS`` can be read, each with its
own guard requirement. Names are never passed through to the database
unchecked.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pymongo.database import Database

from bistro.core.errors import BadRequest, NotFound
from bistro.repositories.base import BaseRepository
from bistro_common.models.base import to_jsonable


class CollectionAccess(str, Enum):
    PUBLIC = "public"
    ADMIN = "admin"


COLLECTION_ACCESS: Dict[str, CollectionAccess] = {
    "menu": CollectionAccess.PUBLIC,
    "reviews": CollectionAccess.PUBLIC,
    "users": CollectionAccess.ADMIN,
    "carts": CollectionAccess.ADMIN,
}


def resolve_access(name: Optional[str]) -> CollectionAccess:
    if not name:
        raise BadRequest("collection name required")
    access = COLLECTION_ACCESS.get(name)
    if access is None:
        raise NotFound("unknown collection")
    return access


class CollectionService:
    def __init__(self, db: Database):
        self.db = db

    def dump(self, name: str) -> List[Dict[str, Any]]:
        resolve_access(name)
        return to_jsonable(BaseRepository(self.db, name).find_all())
