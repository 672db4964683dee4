from .auth import AdminStatusResponse, TokenRequest, TokenResponse
from .cart import CartItemCreateRequest
from .results import (
    DeleteResultResponse,
    ExistingUserResponse,
    InsertResultResponse,
    UpdateResultResponse,
)
from .user import UserUpsertRequest

__all__ = [
    "AdminStatusResponse",
    "CartItemCreateRequest",
    "DeleteResultResponse",
    "ExistingUserResponse",
    "InsertResultResponse",
    "TokenRequest",
    "TokenResponse",
    "UpdateResultResponse",
    "UserUpsertRequest",
]
