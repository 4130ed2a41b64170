"""List-backed keystore."""

from typing import List, Optional

from .base import Keystore
from .validation import is_valid_index, is_valid_key


class ListKeystore(Keystore):
    """
    Keystore backed by a single list.

    Duplicate checks scan the list, which is cheap at MAX_CAPACITY keys.
    """

    def __init__(self) -> None:
        self._keys: List[str] = []

    def insert(self, key: Optional[str]) -> bool:
        if not is_valid_key(key):
            return False
        if len(self._keys) >= self.MAX_CAPACITY:
            return False
        if key in self._keys:
            return False
        self._keys.append(key)
        return True

    def clear(self) -> None:
        self._keys.clear()

    def contains(self, key: Optional[str]) -> bool:
        return isinstance(key, str) and key in self._keys

    def get(self, index: int) -> Optional[str]:
        if not is_valid_index(index, len(self._keys)):
            return None
        return self._keys[index]

    def size(self) -> int:
        return len(self._keys)
