"""
Shared base for portal domain models.

Models use snake_case attributes in Python and the camelCase field names
of the stored documents as aliases.
"""
import time
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic_core import to_jsonable_python


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def merge_documents(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Merge updates into a copy of base the way a document store merge does.

    Nested mappings merge key by key; lists and scalars replace.
    """
    merged = dict(base)
    for key, value in updates.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_documents(current, value)
        else:
            merged[key] = value
    return merged


class PortalModel(BaseModel):
    """Base model that reads and writes stored documents."""

    model_config = ConfigDict(populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Dump to a storable document using the stored field names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]):
        """Build a model from a stored document, ignoring unknown fields."""
        return cls.model_validate(doc)

    @classmethod
    def document_fields(cls, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Rename attribute names in a partial update to stored field names.

        Keys that are already stored names pass through. Enum and model
        values become plain JSON values.
        """
        aliases = {
            name: field.alias
            for name, field in cls.model_fields.items()
            if field.alias
        }
        renamed = {aliases.get(key, key): value for key, value in updates.items()}
        return to_jsonable_python(renamed, by_alias=True)
