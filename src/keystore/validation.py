"""Key validation predicates shared by keystore implementations."""

import operator
from typing import Any


def is_blank(key: str) -> bool:
    """Check if a key is empty or made only of whitespace."""
    return not key.strip()


def is_valid_key(key: Any) -> bool:
    """
    Check whether a candidate may ever be stored in a keystore.

    Args:
        key: Candidate key, possibly None or not a string at all

    Returns:
        True for non-blank strings, False for everything else
    """
    if not isinstance(key, str):
        return False
    return not is_blank(key)


def is_valid_index(index: Any, size: int) -> bool:
    """
    Check if index addresses an occupied position (zero-based).

    Any integer type implementing ``__index__`` is accepted, bool is not.
    """
    if isinstance(index, bool):
        return False
    try:
        position = operator.index(index)
    except TypeError:
        return False
    return 0 <= position < size
