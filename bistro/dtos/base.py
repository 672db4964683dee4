"""Common DTO base classes."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OpenDocument(BaseModel):
    """Request body that keeps every posted field, declared or not."""

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> Dict[str, Any]:
        document = self.model_dump(exclude_unset=True)
        # Ids are always assigned by the database
        document.pop("_id", None)
        return document


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys, like the MongoDB shell."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
