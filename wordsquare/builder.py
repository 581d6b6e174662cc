"""Row-by-row construction of word squares whose columns are also words."""

from __future__ import annotations

from typing import Optional

from .puzzle import Solution
from .words import WordList

__all__ = [
    "BuilderError",
    "DuplicateWordError",
    "WrongOrderError",
    "InvalidColumnsError",
    "FinishedDuplicateError",
    "TooManyRowsError",
    "EmptyBuilderError",
    "IncompleteError",
    "SolutionBuilder",
]

SIZE = 5


class BuilderError(Exception):
    """Base class for errors raised by :class:`SolutionBuilder`."""

    message = "The builder could not complete the operation"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class DuplicateWordError(BuilderError):
    message = "The same word has been added twice"


class WrongOrderError(BuilderError):
    message = "This solution will be covered by a different path"


class InvalidColumnsError(BuilderError):
    message = "There are no possible valid solutions if this words were to be added"


class FinishedDuplicateError(BuilderError):
    message = "By finishing this, a duplicate would be created"


class TooManyRowsError(BuilderError):
    message = f"More than {SIZE} rows have been added"


class EmptyBuilderError(BuilderError):
    message = "This is already empty, so you can't take from it"


class IncompleteError(BuilderError):
    message = f"Not enough words have been added to this builder, {SIZE} are needed"


class SolutionBuilder:
    """Stacks rows one at a time, keeping every column a prefix of a known word."""

    def __init__(self, columns: WordList) -> None:
        self.words: list[str] = []
        self._possible_columns = columns

    def add(self, word: str) -> Optional[tuple[Solution, Solution]]:
        """Add a row.

        Returns ``None`` while the square is incomplete, or the pair of
        solutions (rows, then columns) once the fifth row completes it.
        Raises a :class:`BuilderError` subclass when the row is rejected.
        A row rejected for wrong order or impossible columns is not kept;
        a fifth row that would create a duplicate word stays in place.
        """
        if word in self.words:
            raise DuplicateWordError()
        if len(self.words) >= SIZE:
            raise TooManyRowsError()
        self.words.append(word)
        columns = self.columns()
        first_column = columns[0]
        if first_column < self.words[0][: len(first_column)]:
            self.words.pop()
            raise WrongOrderError()
        if not all(self._possible_columns.contains(column) for column in columns):
            self.words.pop()
            raise InvalidColumnsError()
        if len(self.words) < SIZE:
            return None
        if len(set(self.words) | set(columns)) != 2 * SIZE:
            raise FinishedDuplicateError()
        return self.build()

    def pop(self) -> None:
        """Remove the last row added."""
        if not self.words:
            raise EmptyBuilderError()
        self.words.pop()

    def build(self) -> tuple[Solution, Solution]:
        """The rows and the columns of a complete square as two solutions."""
        if len(self.words) != SIZE:
            raise IncompleteError()
        return Solution(tuple(self.words)), Solution(tuple(self.columns()))

    def columns(self) -> list[str]:
        """The five columns read down the rows added so far."""
        return ["".join(row[i] for row in self.words) for i in range(SIZE)]