"""Word-square finders: exhaustive search and row-by-row search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product
from typing import Optional

from .builder import BuilderError, SolutionBuilder
from .puzzle import Solution
from .words import WordList

__all__ = [
    "TrivialFinder",
    "TopDownFinder",
    "find_solutions_new",
    "find_subsolutions",
    "solution_validator",
]

SIZE = 5


def solution_validator(
    words: Iterable[str], candidate: Sequence[str]
) -> Optional[Solution]:
    """The candidate rows as a solution, if rows and columns are ten distinct words."""
    if len(candidate) != SIZE:
        return None
    if any(len(word) != SIZE for word in candidate):
        return None
    columns = ["".join(row[i] for row in candidate) for i in range(SIZE)]
    known = set(words)
    used = [*candidate, *columns]
    if any(word not in known for word in used):
        return None
    if len(set(used)) != 2 * SIZE:
        return None
    return Solution(tuple(candidate))


class TrivialFinder:
    """Tries every ordered choice of five words."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)

    def find(self) -> list[Solution]:
        known = set(self.words)
        return [
            solution
            for candidate in product(self.words, repeat=SIZE)
            if (solution := solution_validator(known, candidate)) is not None
        ]


def find_subsolutions(
    possible_rows: Sequence[str], builder: SolutionBuilder
) -> list[Solution]:
    """Every completion of ``builder`` using rows from ``possible_rows``."""
    solutions: list[Solution] = []
    for word in possible_rows:
        try:
            finished = builder.add(word)
        except BuilderError:
            continue
        if finished is None:
            solutions.extend(find_subsolutions(possible_rows, builder))
        else:
            solutions.extend(finished)
        builder.pop()
    return solutions


def find_solutions_new(
    possible_columns: WordList, possible_rows: Sequence[str]
) -> list[Solution]:
    """All squares, starting a fresh builder from each possible first row."""
    solutions: list[Solution] = []
    for word in possible_rows:
        builder = SolutionBuilder(possible_columns)
        try:
            builder.add(word)
        except BuilderError:
            continue
        solutions.extend(find_subsolutions(possible_rows, builder))
    return solutions


class TopDownFinder:
    """Builds squares row by row, pruning on column prefixes."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)
        self.word_list = WordList(self.words)

    def find(self) -> list[Solution]:
        return find_solutions_new(self.word_list, self.words)