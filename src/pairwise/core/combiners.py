"""Ready-made binary combiners for merge_collections and zip_collections.

Every function here takes one element from each collection and returns the
combined value. None of them keep state.
"""

import typing as tp

from pairwise.core.models import Person

__all__ = [
    "number_word",
    "create_person",
    "add",
    "multiply",
    "compare",
    "positioned_letter",
]

Number = tp.Union[int, float]


def number_word(num: int, word: str) -> str:
    """Pair a number with its spelled-out word, e.g. ``"1 = one"``."""
    return f"{num} = {word}"


def create_person(name: str, age: int) -> Person:
    """Build a :class:`Person` from a name and an age.

    Raises:
        pydantic.ValidationError: If the name is empty or the age negative.
    """
    return Person(name=name, age=age)


def add(a: Number, b: Number) -> Number:
    return a + b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def compare(a: Number, b: Number) -> str:
    """Describe which of two numbers is larger.

    Returns:
        A string such as ``"1.5 vs 0.5: First is larger"``.
    """
    if a > b:
        verdict = "First is larger"
    elif a < b:
        verdict = "Second is larger"
    else:
        verdict = "Both are equal"
    return f"{a} vs {b}: {verdict}"


def positioned_letter(letter: str, position: int) -> str:
    """Prefix a letter with its position, e.g. ``"1. A"``."""
    return f"{position}. {letter}"
