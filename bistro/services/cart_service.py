from typing import Any, Dict, List

from pymongo.database import Database

from bistro.dtos import CartItemCreateRequest, DeleteResultResponse, InsertResultResponse
from bistro.repositories.cart import CartRepository
from bistro_common.models.base import to_jsonable


class CartService:
    def __init__(self, db: Database):
        self.repo = CartRepository(db)

    def list_items(self, email: str) -> List[Dict[str, Any]]:
        return to_jsonable(self.repo.find_by_email(email))

    def add_item(self, payload: CartItemCreateRequest) -> InsertResultResponse:
        return InsertResultResponse.from_result(self.repo.insert_one(payload.to_document()))

    def remove_item(self, item_id: str) -> DeleteResultResponse:
        return DeleteResultResponse.from_result(self.repo.delete_by_id(item_id))
