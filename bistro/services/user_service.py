"""User account service using repository pattern"""

from typing import Any, Dict, List, Union

from pymongo.database import Database

from bistro.dtos import (
    DeleteResultResponse,
    ExistingUserResponse,
    InsertResultResponse,
    UpdateResultResponse,
    UserUpsertRequest,
)
from bistro.repositories.user import UserRepository
from bistro_common.models.base import to_jsonable


class UserService:
    def __init__(self, db: Database):
        self.repo = UserRepository(db)

    def list_users(self) -> List[Dict[str, Any]]:
        """List all users"""
        return to_jsonable(self.repo.find_all())

    def is_admin(self, email: str) -> bool:
        return self.repo.is_admin(email)

    def register(
        self, payload: UserUpsertRequest
    ) -> Union[InsertResultResponse, List[Union[ExistingUserResponse, UpdateResultResponse]]]:
        """
        Create the user on first sign-in. A known email only gets its sign-in
        timestamps refreshed and is reported as already existing.
        """
        result = self.repo.upsert_by_email(payload.to_document())
        if result.upserted_id is not None:
            return InsertResultResponse(
                acknowledged=result.acknowledged, inserted_id=result.upserted_id
            )
        return [ExistingUserResponse(), UpdateResultResponse.from_result(result)]

    def make_admin(self, user_id: str) -> UpdateResultResponse:
        return UpdateResultResponse.from_result(self.repo.promote_to_admin(user_id))

    def delete_user(self, user_id: str) -> DeleteResultResponse:
        return DeleteResultResponse.from_result(self.repo.delete_by_id(user_id))
