from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class BatchOperation(BaseModel):
    """One write inside an atomic batch."""
    op: Literal["set", "delete"] = Field(..., description="Write kind")
    collection: str = Field(..., description="Target collection")
    id: str = Field(..., description="Target document id")
    data: Optional[Dict[str, Any]] = Field(
        None, description="Document body for set operations")
    merge: bool = Field(False, description="Merge instead of replace")


class DataStorageProvider(ABC):
    """Interface for document storage providers."""

    @abstractmethod
    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by id."""
        pass

    @abstractmethod
    def get_all_documents(self, collection: str) -> List[Dict[str, Any]]:
        """Get every document in a collection."""
        pass

    @abstractmethod
    def query_documents(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        """Find documents whose field equals value."""
        pass

    @abstractmethod
    def set_document(
        self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False
    ) -> None:
        """Write a document, replacing it or merging into it."""
        pass

    @abstractmethod
    def delete_document(self, collection: str, doc_id: str) -> bool:
        """Delete a document. Returns whether it existed."""
        pass

    @abstractmethod
    def commit_batch(self, operations: List[BatchOperation]) -> None:
        """Apply all operations or none."""
        pass
