"""Word-square search that fills rows and columns alternately from the corner."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Optional, Protocol

from .puzzle import Solution
from .words import BinSearchRange

__all__ = ["DoubleSidedFinder", "except_for"]

SIZE = 5


class _RangeFinder(Protocol):
    def range(self, prefix: str) -> range: ...


def except_for(indexes: Iterable[int], skip: Iterable[int]) -> Iterator[int]:
    """Yield the ascending ``indexes`` that are not in ``skip``.

    ``skip`` is sorted and walked alongside ``indexes``, so ``indexes`` must
    come in ascending order for every skipped value to be dropped.
    """
    pending = sorted(skip)
    position = 0
    for index in indexes:
        while position < len(pending) and pending[position] < index:
            position += 1
        if position < len(pending) and pending[position] == index:
            continue
        yield index


class _Search:
    """Depth-first filling of one square whose first row is fixed."""

    def __init__(
        self, first_row: int, words: Sequence[str], ranges: _RangeFinder
    ) -> None:
        self.rows: list[int] = [first_row]
        self.columns: list[int] = []
        self.words = words
        self.ranges = ranges

    def _letters(self, indexes: Sequence[int], position: int) -> str:
        return "".join(self.words[index][position] for index in indexes)

    def _has_words(self, prefix: str) -> bool:
        return len(self.ranges.range(prefix)) > 0

    def _place(
        self,
        slots: list[int],
        prefix: str,
        then: Callable[[], Iterator[Solution]],
    ) -> Iterator[Solution]:
        placed = [*self.rows, *self.columns]
        for index in except_for(self.ranges.range(prefix), placed):
            slots.append(index)
            yield from then()
            slots.pop()

    def solutions(self) -> Iterator[Solution]:
        first = self.rows[0]
        for index in self.ranges.range(self.words[first][0]):
            if index > first:
                self.columns.append(index)
                yield from self._fill_row_1()
                self.columns.pop()

    def _fill_row_1(self) -> Iterator[Solution]:
        prefix = self._letters(self.columns[:1], 1)
        return self._place(self.rows, prefix, self._fill_column_1)

    def _fill_column_1(self) -> Iterator[Solution]:
        prefix = self._letters(self.rows[:2], 1)
        return self._place(self.columns, prefix, self._fill_row_2)

    def _fill_row_2(self) -> Iterator[Solution]:
        if not all(
            self._has_words(self._letters(self.rows[:2], column))
            for column in (2, 3, 4)
        ):
            return iter(())
        prefix = self._letters(self.columns[:2], 2)
        return self._place(self.rows, prefix, self._fill_column_2)

    def _fill_column_2(self) -> Iterator[Solution]:
        if not all(
            self._has_words(self._letters(self.columns[:2], row)) for row in (3, 4)
        ):
            return iter(())
        prefix = self._letters(self.rows[:3], 2)
        return self._place(self.columns, prefix, self._fill_row_3)

    def _fill_row_3(self) -> Iterator[Solution]:
        prefix = self._letters(self.columns[:3], 3)
        return self._place(self.rows, prefix, self._fill_column_3)

    def _fill_column_3(self) -> Iterator[Solution]:
        prefix = self._letters(self.rows[:4], 3)
        return self._place(self.columns, prefix, self._fill_last_slot)

    def _fill_last_slot(self) -> Iterator[Solution]:
        prefix = self._letters(self.columns[:4], 4)
        for index in self.ranges.range(prefix):
            self.rows.append(index)
            last = self._last_column()
            if last is not None and self._is_valid(last):
                columns = [*self.columns, last]
                yield Solution(tuple(self.words[i] for i in columns))
                yield Solution(tuple(self.words[i] for i in self.rows))
            self.rows.pop()

    def _last_column(self) -> Optional[int]:
        found = self.ranges.range(self._letters(self.rows, 4))
        return found.start if len(found) == 1 else None

    def _is_valid(self, last: int) -> bool:
        if len(self.ranges.range(self.words[last])) != 1:
            return False
        return last not in self.rows and last not in self.columns


class DoubleSidedFinder:
    """Finds word squares by placing rows and columns in turn.

    Each square is found once and reported as two solutions: its columns
    read as rows, then its rows.
    """

    def __init__(
        self,
        words: Iterable[str],
        range_finder: Callable[[list[str]], _RangeFinder] = BinSearchRange,
    ) -> None:
        self.words = sorted(
            word for word in words if word.isascii() and len(word) == SIZE
        )
        self.range_finder = range_finder(self.words)

    def find(self) -> list[Solution]:
        return [
            solution
            for first_row in range(len(self.words))
            for solution in _Search(
                first_row, self.words, self.range_finder
            ).solutions()
        ]