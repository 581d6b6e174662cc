"""Scoring first guesses by the information they reveal."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from .puzzle import Puzzle, PuzzleViewModel, Solution

__all__ = ["entropy", "distribution_for"]


def entropy(distribution: Iterable[int]) -> float:
    """Shannon entropy, in bits, of a distribution given as counts."""
    counts = list(distribution)
    size = sum(counts)
    total = 0.0
    for count in counts:
        ratio = size / count
        total += math.log2(ratio) / ratio
    return total


def distribution_for(solutions: Iterable[Solution], word: str) -> list[int]:
    """How many solutions fall into each distinct view after guessing ``word``."""
    views: Counter[PuzzleViewModel] = Counter()
    for solution in solutions:
        puzzle = Puzzle(solution)
        puzzle.guess(word)
        views[puzzle.view()] += 1
    return list(views.values())