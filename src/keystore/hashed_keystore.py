"""Keystore with a hash set mirroring its ordered keys."""

from typing import List, Optional, Set

from .base import Keystore
from .validation import is_valid_index, is_valid_key


class HashedKeystore(Keystore):
    """
    Keystore that keeps a set next to the ordered list.

    The list holds insertion order for positional lookup, the set answers
    membership in constant time. Both always hold the same keys.
    """

    def __init__(self) -> None:
        self._order: List[str] = []
        self._members: Set[str] = set()

    def insert(self, key: Optional[str]) -> bool:
        if not is_valid_key(key):
            return False
        if len(self._order) >= self.MAX_CAPACITY or key in self._members:
            return False
        self._order.append(key)
        self._members.add(key)
        return True

    def clear(self) -> None:
        self._order.clear()
        self._members.clear()

    def contains(self, key: Optional[str]) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._members

    def get(self, index: int) -> Optional[str]:
        if is_valid_index(index, len(self._order)):
            return self._order[index]
        return None

    def size(self) -> int:
        return len(self._order)
