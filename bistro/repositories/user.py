import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, OperationFailure
from pymongo.results import UpdateResult

from .base import BaseRepository

logger = logging.getLogger(__name__)

ROLE_ADMIN = "admin"

# Refreshed on every sign-in; everything else is written only on insert.
SIGN_IN_FIELDS = ("updatedAt", "updatedLocal")


def _promotion() -> Dict[str, Any]:
    return {
        "$set": {
            "role": ROLE_ADMIN,
            "roleUpdated": datetime.now(timezone.utc).isoformat(),
        }
    }


class UserRepository(BaseRepository):
    def __init__(self, db: Database):
        super().__init__(db, "users")

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index(
                [("email", ASCENDING)], unique=True, name="email_unique"
            )
        except OperationFailure:
            # Duplicate emails can predate the index; upserts still match the first one.
            logger.exception(
                "Could not create unique index on users.email; "
                "the users collection likely contains duplicate emails"
            )

    def find_by_email(self, email: Optional[str]) -> Optional[Dict[str, Any]]:
        return self.find_one({"email": email})

    def is_admin(self, email: Optional[str]) -> bool:
        if not email:
            return False
        user = self.find_by_email(email)
        return bool(user) and user.get("role") == ROLE_ADMIN

    def upsert_by_email(self, document: Dict[str, Any]) -> UpdateResult:
        """
        Insert the user if no record has this email, otherwise refresh only
        the sign-in timestamps. One atomic update_one(upsert=True).
        """
        email = document["email"]
        on_every_sign_in = {
            key: document[key] for key in SIGN_IN_FIELDS if key in document
        }
        on_insert = {
            key: value
            for key, value in document.items()
            if key not in SIGN_IN_FIELDS and key != "role"
        }
        update: Dict[str, Any] = {"$setOnInsert": on_insert}
        if on_every_sign_in:
            update["$set"] = on_every_sign_in

        try:
            return self.collection.update_one({"email": email}, update, upsert=True)
        except DuplicateKeyError:
            # A concurrent upsert inserted the same email first; this now matches it.
            return self.collection.update_one({"email": email}, update, upsert=True)

    def promote_to_admin(self, user_id: str | ObjectId) -> Optional[UpdateResult]:
        return self.update_by_id(user_id, _promotion())

    def promote_by_email(self, email: str) -> UpdateResult:
        return self.collection.update_one({"email": email}, _promotion())
