"""Demonstration of merge_collections and zip_collections.

Runs four small examples and prints the results:
    1. Merging numbers with their word representations.
    2. Creating Person records from names and ages.
    3. Arithmetic and comparison combiners over two float lists.
    4. Zipping collections of different sizes.
"""

import sys
import typing as tp

from pairwise.core import (
    Settings,
    add,
    compare,
    create_person,
    multiply,
    number_word,
    positioned_letter,
)
from pairwise.functional import merge_collections, zip_collections
from pairwise.logger.logger import setup_logger


def _heading(out: tp.TextIO, title: str, show: bool, first: bool = False) -> None:
    if not show:
        return
    if not first:
        print(file=out)
    print(title, file=out)


def run_examples(out: tp.TextIO | None = None, show_headers: bool = True) -> None:
    """Print every example to ``out`` (stdout by default)."""
    out = out or sys.stdout

    # Example 1: numbers and words
    numbers = [1, 2, 3, 4, 5]
    words = ["one", "two", "three", "four", "five"]
    combined = merge_collections(numbers, words, number_word)
    _heading(
        out,
        "Example 1: Merging numbers with their word representations",
        show_headers,
        first=True,
    )
    for line in combined:
        print(line, file=out)

    # Example 2: Person records
    names = ["Alice", "Bob", "Charlie"]
    ages = [25, 30, 22]
    people = merge_collections(names, ages, create_person)
    _heading(
        out, "Example 2: Creating Person objects from names and ages", show_headers
    )
    for person in people:
        print(person, file=out)

    # Example 3: arithmetic
    first_numbers = [1.5, 2.5, 3.5]
    second_numbers = [0.5, 1.0, 1.5]
    sums = zip_collections(first_numbers, second_numbers, add)
    products = zip_collections(first_numbers, second_numbers, multiply)
    comparisons = zip_collections(first_numbers, second_numbers, compare)
    _heading(out, "Example 3: Mathematical operations", show_headers)
    print(f"Sums: {sums}", file=out)
    print(f"Products: {products}", file=out)
    print("Comparisons:", file=out)
    for line in comparisons:
        print(line, file=out)

    # Example 4: different sizes, truncated to the shorter one
    letters = ["A", "B", "C", "D", "E"]
    positions = [1, 2, 3]
    lettered = zip_collections(letters, positions, positioned_letter)
    _heading(out, "Example 4: Using different sized collections", show_headers)
    for line in lettered:
        print(line, file=out)


def main() -> None:
    """Entry point for the ``pairwise-demo`` script."""
    settings = Settings.load()
    logger = setup_logger(level=settings.LOG_LEVEL)

    logger.info("Running pairwise examples...")
    run_examples(show_headers=settings.SHOW_HEADERS)
    logger.info("Done.")


if __name__ == "__main__":
    main()
