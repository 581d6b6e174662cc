"""Word lists, prefix tries and prefix-range lookups over sorted word lists."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from os import PathLike
from pathlib import Path

__all__ = [
    "WordList",
    "range_for",
    "BinSearchRange",
    "HashSearchRange",
    "LinearSearchRange",
    "five_letter_words",
    "get_words",
]

_FIVE_LETTERS = re.compile(r"[a-z]{5}")


class WordList:
    """A prefix trie: ``contains`` is true for any prefix of an inserted word."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._children: dict[str, WordList] = {}
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word`` and, implicitly, all of its prefixes."""
        node = self
        for letter in word:
            node = node._children.setdefault(letter, WordList())

    def contains(self, word: str) -> bool:
        """Return whether ``word`` is a prefix of some inserted word."""
        node = self
        for letter in word:
            child = node._children.get(letter)
            if child is None:
                return False
            node = child
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)


def _partition_point(items: Sequence[str], predicate: Callable[[str], bool]) -> int:
    """Index of the first item for which ``predicate`` is false.

    The sequence must be partitioned: all true items before all false ones.
    """
    low, high = 0, len(items)
    while low < high:
        mid = (low + high) // 2
        if predicate(items[mid]):
            low = mid + 1
        else:
            high = mid
    return low


def range_for(words: Sequence[str], prefix: str) -> range:
    """Indexes of the words in sorted ``words`` that start with ``prefix``."""
    start = _partition_point(words, lambda word: word < prefix)
    end = _partition_point(
        words, lambda word: word.startswith(prefix) or word < prefix
    )
    return range(start, end)


class BinSearchRange:
    """Prefix ranges found by binary search over a sorted word list."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)

    def range(self, prefix: str) -> range:
        return range_for(self._words, prefix)


class HashSearchRange:
    """Prefix ranges precomputed for every prefix of length one to four."""

    def __init__(self, words: Iterable[str]) -> None:
        word_list = list(words)
        self._ranges: dict[str, range] = {}
        for length in range(1, 5):
            for word in word_list:
                prefix = word[:length]
                self._ranges[prefix] = range_for(word_list, prefix)

    def range(self, prefix: str) -> range:
        return self._ranges.get(prefix, range(0, 0))


class LinearSearchRange:
    """Prefix ranges found by scanning a sorted word list from the start.

    When the matching run reaches the end of the list, the range returned
    is empty and starts at the first match.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)

    def range(self, prefix: str) -> range:
        size = len(prefix)
        start = next(
            (i for i, word in enumerate(self._words) if word[:size] == prefix),
            None,
        )
        if start is None:
            return range(0, 0)
        offset = next(
            (
                i
                for i, word in enumerate(self._words[start:])
                if word[:size] != prefix
            ),
            None,
        )
        if offset is None:
            return range(start, start)
        return range(start, start + offset)


def five_letter_words(text: str) -> list[str]:
    """Return the lines of ``text`` that are exactly five lowercase letters."""
    lines = (line.removesuffix("\r") for line in text.split("\n"))
    return [line for line in lines if _FIVE_LETTERS.fullmatch(line)]


def get_words(path: str | PathLike[str] = "all_words.txt") -> list[str]:
    """Read ``path`` and return its five-letter words."""
    return five_letter_words(Path(path).read_text())