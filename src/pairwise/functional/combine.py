"""Element-wise combination of two collections through a binary function.

Two flavours are provided:
    - **merge_collections**: strict, both collections must have the same size.
    - **zip_collections**: lenient, stops as soon as the shorter collection
      runs out.

Both functions are pure: the inputs are never mutated, the combiner is called
once per output element in index order, and a fresh list is returned. If the
combiner raises, the exception propagates unchanged and nothing is returned.

Note:
    Python does not enforce the element types. The only contract is that
    ``merge_function(first[i], second[i])`` is a valid call for every index
    that is visited.

Examples:
    >>> from pairwise.functional.combine import merge_collections, zip_collections
    >>> merge_collections([1, 2, 3], ["a", "b", "c"], lambda n, s: f"{n}{s}")
    ['1a', '2b', '3c']
    >>> zip_collections([1, 2, 3, 4, 5], [10, 20, 30], lambda a, b: a * b)
    [10, 40, 90]
"""

import typing as tp

from pairwise.core.types import Combiner, R, S, T

__all__ = [
    "LengthMismatchError",
    "merge_collections",
    "zip_collections",
]


class LengthMismatchError(ValueError):
    """Raised when an element-wise merge receives collections of different sizes.

    Attributes:
        first_size: Size of the first collection.
        second_size: Size of the second collection.
    """

    def __init__(self, first_size: int, second_size: int) -> None:
        self.first_size = first_size
        self.second_size = second_size
        super().__init__(
            "Collections must have the same size for element-wise merging. "
            f"First collection size: {first_size}, "
            f"Second collection size: {second_size}"
        )


def merge_collections(
    first: tp.Collection[T],
    second: tp.Collection[S],
    merge_function: Combiner[T, S, R],
) -> tp.List[R]:
    """Merge two collections of the same size element by element.

    Args:
        first: First collection, elements of type ``T``.
        second: Second collection, elements of type ``S``.
        merge_function: How to merge one ``T`` and one ``S`` into an ``R``.

    Returns:
        A new list where ``result[i] == merge_function(first[i], second[i])``.

    Raises:
        LengthMismatchError: If the two collections differ in size. The
            combiner is not called in that case.
    """
    size1 = len(first)
    size2 = len(second)
    if size1 != size2:
        raise LengthMismatchError(size1, size2)

    # Snapshot so any ordered collection can be indexed
    list1 = list(first)
    list2 = list(second)

    result: tp.List[R] = []
    for i in range(size1):
        result.append(merge_function(list1[i], list2[i]))
    return result


def zip_collections(
    first: tp.Collection[T],
    second: tp.Collection[S],
    merge_function: Combiner[T, S, R],
) -> tp.List[R]:
    """Zip two collections, merging elements until either one runs out.

    Args:
        first: First collection, elements of type ``T``.
        second: Second collection, elements of type ``S``.
        merge_function: How to merge one ``T`` and one ``S`` into an ``R``.

    Returns:
        A new list of length ``min(len(first), len(second))``. Empty when
        either input is empty.
    """
    result: tp.List[R] = []
    for first_elem, second_elem in zip(first, second):
        result.append(merge_function(first_elem, second_elem))
    return result
