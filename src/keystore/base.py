"""
Keystore contract.

A keystore is a set-like container of strings with a fixed capacity of
MAX_CAPACITY keys. It holds neither None nor blank strings, and no pair of
keys that compare equal. Keys keep the order in which they were inserted.

Every operation reports rejection through its return value: ``insert``
answers False, ``get`` answers None. Nothing raises for any input.

An implementation has a single constructor and it takes no arguments.
Subclasses declaring ``__new__`` or ``__init__`` with parameters are refused
when the class is created.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, List, Optional

MAX_CAPACITY = 32


class Keystore(ABC):
    """Abstract bounded, insertion-ordered set of validated keys."""

    MAX_CAPACITY = MAX_CAPACITY

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for method in ("__new__", "__init__"):
            if method not in cls.__dict__:
                continue
            extra = _extra_parameters(getattr(cls, method))
            if extra:
                raise TypeError(
                    f"{cls.__name__}.{method} must take no arguments, got: {', '.join(extra)}"
                )

    @abstractmethod
    def insert(self, key: Optional[str]) -> bool:
        """
        Add key if it fulfils all criteria.

        The key is added only if it is not None, not blank, not already
        present, and the keystore holds fewer than MAX_CAPACITY keys.
        Otherwise the keystore is left unchanged.

        Args:
            key: Candidate key

        Returns:
            True if and only if the key was added
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove all keys. The keystore is empty afterwards."""

    @abstractmethod
    def contains(self, key: Optional[str]) -> bool:
        """Return True if a stored key equals key."""

    @abstractmethod
    def get(self, index: int) -> Optional[str]:
        """
        Return the key at a zero-based position.

        Args:
            index: Position to look up, any integer

        Returns:
            The key at index, or None when index is out of bounds
        """

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored keys."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, capacity={self.MAX_CAPACITY})"


def _extra_parameters(method: Any) -> List[str]:
    """
    Names of the parameters a constructor method takes beyond its receiver.

    The receiver (``self`` or ``cls``) must be a plain positional parameter;
    a variadic first parameter counts as extra.
    """
    parameters = list(inspect.signature(method).parameters.values())
    receiver_kinds = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if parameters and parameters[0].kind in receiver_kinds:
        parameters = parameters[1:]
    return [
        f"*{p.name}" if p.kind is inspect.Parameter.VAR_POSITIONAL
        else f"**{p.name}" if p.kind is inspect.Parameter.VAR_KEYWORD
        else p.name
        for p in parameters
    ]
