"""Shared Utilities"""

from .hashing import (
    canonicalize,
    canonicalize_and_hash,
    hash_answers,
    normalize_answers,
)
from .disclaimer import (
    DISCLAIMER_VERSION,
    get_disclaimer,
)

__all__ = [
    "canonicalize",
    "canonicalize_and_hash",
    "hash_answers",
    "normalize_answers",
    "DISCLAIMER_VERSION",
    "get_disclaimer",
]
