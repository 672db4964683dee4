"""Write results in the shape the MongoDB drivers report them."""

from typing import Optional

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from bistro_common.models.base import PyObjectIdStr

from .base import CamelModel


class InsertResultResponse(CamelModel):
    acknowledged: bool
    inserted_id: Optional[PyObjectIdStr] = None

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=result.inserted_id)


class UpdateResultResponse(CamelModel):
    acknowledged: bool
    matched_count: int = 0
    modified_count: int = 0
    upserted_count: int = 0
    upserted_id: Optional[PyObjectIdStr] = None

    @classmethod
    def from_result(cls, result: Optional[UpdateResult]) -> "UpdateResultResponse":
        if result is None:
            return cls(acknowledged=True)
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if result.upserted_id is None else 1,
            upserted_id=result.upserted_id,
        )


class DeleteResultResponse(CamelModel):
    acknowledged: bool
    deleted_count: int = 0

    @classmethod
    def from_result(cls, result: Optional[DeleteResult]) -> "DeleteResultResponse":
        if result is None:
            return cls(acknowledged=True)
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class ExistingUserResponse(CamelModel):
    message: str = "User already exists"
    inserted_id: Optional[str] = None
