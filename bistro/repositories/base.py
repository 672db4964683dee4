"""Base repository pattern for MongoDB operations"""

from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from bistro_common.models.base import to_object_id


class BaseRepository:
    """Single-call CRUD over one collection of schemaless documents"""

    def __init__(self, db: Database, collection_name: str):
        self.db = db
        self.collection: Collection = db[collection_name]

    def find_all(self) -> List[Dict[str, Any]]:
        """Return every document in the collection"""
        return list(self.collection.find())

    def find_many(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Find multiple documents matching the query"""
        return list(self.collection.find(query))

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find a single document matching the query"""
        return self.collection.find_one(query)

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        """Insert a single document"""
        # insert_one adds _id to the dict it is given
        return self.collection.insert_one(dict(document))

    def update_by_id(
        self, entity_id: str | ObjectId, update: Dict[str, Any]
    ) -> Optional[UpdateResult]:
        """Update one document by id; None when the id is not an ObjectId"""
        identifier = to_object_id(entity_id)
        if identifier is None:
            return None
        return self.collection.update_one({"_id": identifier}, update)

    def delete_by_id(self, entity_id: str | ObjectId) -> Optional[DeleteResult]:
        """Delete one document by id; None when the id is not an ObjectId"""
        identifier = to_object_id(entity_id)
        if identifier is None:
            return None
        return self.collection.delete_one({"_id": identifier})
