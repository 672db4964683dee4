from typing import Annotated, Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder
from pydantic import BeforeValidator


def validate_object_id_str(v: Any) -> Optional[str]:
    """Validate and convert to string for DTOs."""
    if v is None:
        return None
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, str):
        if not ObjectId.is_valid(v):
            raise ValueError(f"Invalid ObjectId: {v}")
        return v
    raise ValueError(f"Invalid ObjectId: {v}")


# PyObjectIdStr for DTOs - converts ObjectId to str (for JSON)
PyObjectIdStr = Annotated[str, BeforeValidator(validate_object_id_str)]


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a path identifier to an ObjectId, or None when it is not one."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def to_jsonable(document: Any) -> Any:
    """Render raw documents (nested ObjectIds included) as JSON-safe values."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})
