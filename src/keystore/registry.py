"""Lookup of keystore implementations by short name."""

from typing import Dict, List, Optional, Type

from .base import Keystore
from .hashed_keystore import HashedKeystore
from .list_keystore import ListKeystore
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_IMPLEMENTATION = "list"

IMPLEMENTATIONS: Dict[str, Type[Keystore]] = {
    "list": ListKeystore,
    "hashed": HashedKeystore,
}


class UnknownImplementationError(KeyError):
    """Raised when no keystore implementation is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"unknown keystore implementation: {name!r}. "
            f"Available: {available_implementations()}"
        )

    def __str__(self) -> str:
        return self.args[0]


def available_implementations() -> List[str]:
    return sorted(IMPLEMENTATIONS)


def get_implementation(name: str) -> Type[Keystore]:
    try:
        return IMPLEMENTATIONS[name]
    except KeyError:
        raise UnknownImplementationError(name) from None


def create_keystore(name: Optional[str] = None) -> Keystore:
    """
    Instantiate an empty keystore.

    Args:
        name: Registered implementation name, DEFAULT_IMPLEMENTATION if None

    Returns:
        A new, empty keystore

    Raises:
        UnknownImplementationError: If name is not registered
    """
    implementation = get_implementation(name or DEFAULT_IMPLEMENTATION)
    logger.debug(f"Creating {implementation.__name__} for {name or DEFAULT_IMPLEMENTATION!r}")
    return implementation()
