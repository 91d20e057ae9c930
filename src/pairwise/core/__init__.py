"""Records, combiners and settings used around the functional core."""

from pairwise.core.config import Settings
from pairwise.core.models import Person
from pairwise.core.combiners import (
    add,
    compare,
    create_person,
    multiply,
    number_word,
    positioned_letter,
)

__all__ = [
    "Settings",
    "Person",
    "add",
    "compare",
    "create_person",
    "multiply",
    "number_word",
    "positioned_letter",
]
