"""Reusable type definitions for the pairwise package.

Type Variables:
    T: Element type of the first collection.
    S: Element type of the second collection.
    R: Element type produced by a combiner.

Type Aliases:
    Combiner: A binary function mapping one ``T`` and one ``S`` to an ``R``.
    Name: A non-empty string, kept exactly as given.
    Age: A non-negative integer.
"""

from typing import Annotated, Callable, TypeVar

import annotated_types as at
from pydantic import StringConstraints

__all__ = [
    "T",
    "S",
    "R",
    "Combiner",
    "Name",
    "Age",
]

T = TypeVar("T")
S = TypeVar("S")
R = TypeVar("R")

# A pure binary function, called once per output element
Combiner = Callable[[T, S], R]

Name = Annotated[str, StringConstraints(min_length=1)]

Age = Annotated[int, at.Ge(0)]
