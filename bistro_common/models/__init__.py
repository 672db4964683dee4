from .base import PyObjectIdStr, to_object_id, to_jsonable

__all__ = ["PyObjectIdStr", "to_object_id", "to_jsonable"]
