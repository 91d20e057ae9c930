"""Generic element-wise combination of two collections."""

from pairwise.functional import (
    LengthMismatchError,
    merge_collections,
    zip_collections,
)

__all__ = [
    "LengthMismatchError",
    "merge_collections",
    "zip_collections",
]
