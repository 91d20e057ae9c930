"""Functional primitives for pairwise.

This module provides the element-wise combinators used across the project.
Utilities are stateless and side-effect-free so they can be composed freely
with any binary function.
"""

from pairwise.functional.combine import (
    LengthMismatchError,
    merge_collections,
    zip_collections,
)

__all__ = [
    "LengthMismatchError",
    "merge_collections",
    "zip_collections",
]
