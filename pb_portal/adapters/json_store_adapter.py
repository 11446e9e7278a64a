"""
Local JSON store adapter for the PB Portal.

A flat string-keyed map of JSON arrays, persisted to a single JSON file
or kept in memory when no path is given.
"""
import copy
import json
import os
import tempfile
from typing import Any, Dict, List, Optional

from pb_portal.interfaces.providers.key_value import KeyValueStoreProvider


class JsonFileStore(KeyValueStoreProvider):
    """JSON file implementation of KeyValueStoreProvider."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._data: Dict[str, List[Dict[str, Any]]] = {}
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                self._data = json.load(f)

    def has_key(self, key: str) -> bool:
        return key in self._data

    def get_list(self, key: str) -> List[Dict[str, Any]]:
        # Callers mutate what they get back
        return copy.deepcopy(self._data.get(key, []))

    def set_list(self, key: str, items: List[Dict[str, Any]]) -> None:
        self._data[key] = copy.deepcopy(items)
        self._flush()

    def _flush(self) -> None:
        if not self.path:
            return
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            f = os.fdopen(fd, "w", encoding="utf-8")
        except BaseException:
            os.close(fd)
            os.unlink(tmp_path)
            raise
        try:
            with f:
                json.dump(self._data, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise
