"""
Keystore

Bounded, insertion-ordered, duplicate-free containers of validated text keys.
"""

from .base import Keystore, MAX_CAPACITY
from .list_keystore import ListKeystore
from .hashed_keystore import HashedKeystore
from .registry import (
    UnknownImplementationError,
    available_implementations,
    create_keystore,
    get_implementation,
)

__all__ = [
    "Keystore",
    "MAX_CAPACITY",
    "ListKeystore",
    "HashedKeystore",
    "UnknownImplementationError",
    "available_implementations",
    "create_keystore",
    "get_implementation",
]
