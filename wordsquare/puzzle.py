"""The word-square puzzle: solutions, guesses and what a player gets to see."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = [
    "LetterPlayed",
    "Solution",
    "RowHint",
    "PuzzleViewModel",
    "Puzzle",
    "row_hint",
]

SIZE = 5

Cell = Optional[str]
GridRow = tuple[Cell, ...]
Grid = tuple[GridRow, ...]


def _word(value: str) -> str:
    """Check that ``value`` is a five-character ASCII word and return it."""
    if not isinstance(value, str):
        raise TypeError(f"a word must be a string, not {type(value).__name__}")
    if not value.isascii():
        raise ValueError(f"{value!r} is not an ASCII word")
    if len(value) != SIZE:
        raise ValueError(f"{value!r} is not {SIZE} characters long")
    return value


class LetterPlayed(Enum):
    """How a guessed letter relates to the solution."""

    NOT_PLAYED = 0
    NOT_IN_SOLUTION = 1
    PARTIALLY_USED = 2
    ALL_USED = 3


@dataclass(frozen=True, order=True)
class Solution:
    """Five rows of five letters each."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        rows = tuple(_word(row) for row in self.rows)
        if len(rows) != SIZE:
            raise ValueError(f"a solution needs {SIZE} rows, got {len(rows)}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def parse(cls, text: str) -> Solution:
        """Build a solution from comma-separated rows."""
        words = [word for word in text.split(",") if word.isascii()]
        if len(words) != SIZE:
            raise ValueError(f"expected {SIZE} comma-separated words in {text!r}")
        return cls(tuple(words))

    def does_match(self, view: PuzzleViewModel) -> bool:
        """Whether replaying the view's guesses on this solution gives that view."""
        puzzle = Puzzle(self)
        for guess in view.guesses:
            puzzle.guess(guess)
        return puzzle.view() == view

    def __str__(self) -> str:
        return ",".join(self.rows)


@dataclass(frozen=True, order=True)
class RowHint:
    """Letters known to be in a row but not yet placed."""

    text: str = ""

    def __init__(self, letters: Iterable[str] = "") -> None:
        text = "".join(letters)
        if not text.isascii():
            raise ValueError(f"{text!r} is not ASCII")
        object.__setattr__(self, "text", text)

    def letters(self) -> list[str]:
        return list(self.text)

    def is_equivalent_to(self, other: RowHint) -> bool:
        """Same number of letters, and every letter here appears in ``other``."""
        return len(self.text) == len(other.text) and all(
            letter in other.text for letter in self.text
        )


def _empty_grid() -> Grid:
    return tuple((None,) * SIZE for _ in range(SIZE))


def _empty_hints() -> tuple[RowHint, ...]:
    return tuple(RowHint() for _ in range(SIZE))


@dataclass(frozen=True)
class PuzzleViewModel:
    """Everything a player can see of a puzzle in progress."""

    guesses: tuple[str, ...] = ()
    is_finished: bool = False
    grid: Grid = field(default_factory=_empty_grid)
    hints: tuple[RowHint, ...] = field(default_factory=_empty_hints)
    alphabet: Mapping[str, LetterPlayed] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "guesses", tuple(self.guesses))
        object.__setattr__(self, "grid", tuple(tuple(row) for row in self.grid))
        object.__setattr__(self, "hints", tuple(self.hints))
        object.__setattr__(self, "alphabet", dict(self.alphabet))

    def __hash__(self) -> int:
        return hash(
            (
                self.guesses,
                self.is_finished,
                self.grid,
                self.hints,
                tuple(sorted(self.alphabet.items())),
            )
        )

    def is_equivalent_to(self, other: PuzzleViewModel) -> bool:
        """Same grid, and each row's hint is equivalent to the other's."""
        return self.grid == other.grid and all(
            mine.is_equivalent_to(theirs)
            for mine, theirs in zip(self.hints, other.hints)
        )


def row_hint(
    row: str, known_letters: Sequence[Cell], guesses: Iterable[str]
) -> RowHint:
    """Guessed letters that belong in ``row`` at positions not yet revealed."""
    possible = {
        letter for letter, known in zip(row, known_letters) if known is None
    }
    seen: dict[str, None] = {}
    for guess in guesses:
        for letter in guess:
            seen.setdefault(letter, None)
    return RowHint(letter for letter in seen if letter in possible)


class Puzzle:
    """A hidden solution and the guesses made against it."""

    def __init__(self, solution: Solution) -> None:
        self.solution = solution
        self._guesses: list[str] = []

    def guess(self, word: str) -> None:
        self._guesses.append(_word(word))

    def view(self) -> PuzzleViewModel:
        grid = self._grid()
        hints = tuple(
            row_hint(row, grid_row, self._guesses)
            for row, grid_row in zip(self.solution.rows, grid)
        )
        return PuzzleViewModel(
            guesses=tuple(self._guesses),
            is_finished=all(cell is not None for row in grid for cell in row),
            grid=grid,
            hints=hints,
            alphabet=self._alphabet(hints),
        )

    def _grid(self) -> Grid:
        return tuple(
            tuple(
                letter
                if any(guess[x] == letter for guess in self._guesses)
                else None
                for x, letter in enumerate(row)
            )
            for row in self.solution.rows
        )

    def _alphabet(self, hints: Iterable[RowHint]) -> dict[str, LetterPlayed]:
        in_solution = set("".join(self.solution.rows))
        in_hints = {letter for hint in hints for letter in hint.text}
        alphabet: dict[str, LetterPlayed] = {}
        for letter in sorted(set("".join(self._guesses))):
            if letter not in in_solution:
                alphabet[letter] = LetterPlayed.NOT_IN_SOLUTION
            elif letter in in_hints:
                alphabet[letter] = LetterPlayed.PARTIALLY_USED
            else:
                alphabet[letter] = LetterPlayed.ALL_USED
        return alphabet