"""
MongoDB adapter for the PB Portal.

This adapter implements the DataStorageProvider interface for MongoDB.
Document ids are stored as `_id` and stripped from returned documents.
"""
import logging
from typing import Any, Dict, List, Optional

from pymongo import MongoClient

from pb_portal.interfaces.providers.data_storage import BatchOperation, DataStorageProvider

logger = logging.getLogger(__name__)


def _is_path_key(key: str) -> bool:
    return bool(key) and "." not in key and not key.startswith("$")


def flatten_for_merge(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Turn nested mappings into dotted paths so a $set merges them.

    Lists and scalars are written whole. An empty mapping adds nothing and
    is dropped. A mapping with a key that cannot be part of a path (one
    containing "." or starting with "$") is written whole, replacing the
    stored mapping.
    """
    flat = {}
    for key, value in data.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            if not value:
                continue
            if all(_is_path_key(k) for k in value):
                flat.update(flatten_for_merge(value, f"{path}."))
                continue
        flat[path] = value
    return flat


class MongoDBAdapter(DataStorageProvider):
    """MongoDB implementation of DataStorageProvider."""

    def __init__(
        self,
        connection_string: str,
        database_name: str,
        transactions: bool = True,
    ):
        self.client = MongoClient(connection_string)
        self.db = self.client[database_name]
        self.transactions = transactions

    @staticmethod
    def _strip_id(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if doc is None:
            return None
        doc = dict(doc)
        doc.pop("_id", None)
        return doc

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        return self._strip_id(self.db[collection].find_one({"_id": doc_id}))

    def get_all_documents(self, collection: str) -> List[Dict[str, Any]]:
        return [self._strip_id(doc) for doc in self.db[collection].find({})]

    def query_documents(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        return [self._strip_id(doc) for doc in self.db[collection].find({field: value})]

    def set_document(
        self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False
    ) -> None:
        self._write(BatchOperation(
            op="set", collection=collection, id=doc_id, data=data, merge=merge))

    def delete_document(self, collection: str, doc_id: str) -> bool:
        result = self.db[collection].delete_one({"_id": doc_id})
        return result.deleted_count == 1

    def commit_batch(self, operations: List[BatchOperation]) -> None:
        if not operations:
            return
        if not self.transactions:
            for operation in operations:
                self._write(operation)
            return

        def apply(session):
            for operation in operations:
                self._write(operation, session=session)

        with self.client.start_session() as session:
            session.with_transaction(apply)
        logger.debug(f"Committed batch of {len(operations)} writes")

    def _write(self, operation: BatchOperation, session=None) -> None:
        # mongomock rejects an explicit session=None
        kwargs = {"session": session} if session is not None else {}
        coll = self.db[operation.collection]
        query = {"_id": operation.id}

        if operation.op == "delete":
            coll.delete_one(query, **kwargs)
            return

        data = {k: v for k, v in (operation.data or {}).items() if k != "_id"}
        if not operation.merge:
            coll.replace_one(query, data, upsert=True, **kwargs)
            return

        fields = flatten_for_merge(data)
        if fields:
            coll.update_one(query, {"$set": fields}, upsert=True, **kwargs)
        elif coll.find_one(query, **kwargs) is None:
            coll.insert_one({"_id": operation.id}, **kwargs)
