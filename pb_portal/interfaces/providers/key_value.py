from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class KeyValueStoreProvider(ABC):
    """Interface for the flat local store of JSON arrays."""

    @abstractmethod
    def has_key(self, key: str) -> bool:
        """Check whether a key has ever been written."""
        pass

    @abstractmethod
    def get_list(self, key: str) -> List[Dict[str, Any]]:
        """Get the array stored under key, empty if absent."""
        pass

    @abstractmethod
    def set_list(self, key: str, items: List[Dict[str, Any]]) -> None:
        """Replace the array stored under key."""
        pass

    def get_first(self, key: str) -> Optional[Dict[str, Any]]:
        """First element of the array under key, for single-record keys."""
        items = self.get_list(key)
        return items[0] if items else None
