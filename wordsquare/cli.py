"""Command-line entry points: solving, playing and analysing word squares."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Optional

from .double_sided import DoubleSidedFinder
from .first_guess import distribution_for, entropy
from .puzzle import Puzzle, PuzzleViewModel, RowHint, Solution
from .words import BinSearchRange, get_words

__all__ = [
    "load_solutions",
    "solve_main",
    "play_main",
    "information_main",
    "tui_main",
]

SIZE = 5
DEFAULT_SOLUTIONS = "solutions.txt"
DEFAULT_WORDS = "words.txt"
DEFAULT_ALL_WORDS = "all_words.txt"


def load_solutions(path: str | PathLike[str] = DEFAULT_SOLUTIONS) -> list[Solution]:
    """Read one comma-separated solution per line from ``path``."""
    text = Path(path).read_text()
    return [Solution(tuple(line.split(","))) for line in text.splitlines()]


def _read_line() -> str:
    """Read a trimmed line from standard input, raising EOFError at end of input."""
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.strip()


def solve_main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every word square made from the first N words of the word list."""
    parser = argparse.ArgumentParser(
        prog="wordsquare-solve", description="Find all five-by-five word squares."
    )
    parser.add_argument(
        "count", nargs="?", help="how many words of the list to use (default: all)"
    )
    parser.add_argument(
        "--words", default=DEFAULT_ALL_WORDS, help="file holding one word per line"
    )
    args = parser.parse_args(argv)

    words = get_words(args.words)
    count = len(words)
    if args.count is not None:
        try:
            requested = int(args.count)
        except ValueError:
            requested = -1
        if requested >= 0:
            count = requested

    finder = DoubleSidedFinder(words[:count], BinSearchRange)
    for solution in finder.find():
        print(solution)
    return 0


def _render_view(view: PuzzleViewModel) -> None:
    print()
    print(f"Guesses: {len(view.guesses)}")
    print("#" * 10)
    for row, hint in zip(view.grid, view.hints):
        cells = "".join(cell if cell is not None else "-" for cell in row)
        print(f"{cells}|{hint.text}")


def play_main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the first puzzle of the solutions file interactively."""
    parser = argparse.ArgumentParser(
        prog="wordsquare-play", description="Guess the hidden word square."
    )
    parser.add_argument(
        "--solutions", default=DEFAULT_SOLUTIONS, help="file of solutions to play"
    )
    args = parser.parse_args(argv)

    lines = Path(args.solutions).read_text().splitlines()
    if not lines:
        raise ValueError(f"{args.solutions} holds no solutions")
    puzzle = Puzzle(Solution(tuple(lines[0].split(","))))
    view = puzzle.view()

    while not view.is_finished:
        _render_view(view)
        try:
            guess = _read_line()
        except EOFError:
            return 1
        if not guess.isascii():
            print("C'mon now, just regular letters")
            continue
        if len(guess) != SIZE:
            print("it has to be five letters")
            continue
        puzzle.guess(guess)
        view = puzzle.view()
    return 0


def information_main(argv: Optional[Sequence[str]] = None) -> int:
    """Score each candidate first guess by the entropy of the views it yields."""
    parser = argparse.ArgumentParser(
        prog="wordsquare-information",
        description="Rank first guesses by the information they reveal.",
    )
    parser.add_argument(
        "--solutions", default=DEFAULT_SOLUTIONS, help="file of possible solutions"
    )
    parser.add_argument(
        "--words", default=DEFAULT_WORDS, help="file of candidate guesses"
    )
    args = parser.parse_args(argv)

    solutions = load_solutions(args.solutions)
    candidates = Path(args.words).read_text().splitlines()

    scores = [
        (word, entropy(distribution_for(solutions, word))) for word in candidates
    ]
    scores.sort(key=lambda pair: pair[1])
    print(scores)
    return 0


def _grid_row(line: str) -> tuple[Optional[str], ...]:
    return tuple(
        letter.lower() if letter.isascii() and letter.isalpha() else None
        for letter in line
    )


def tui_main(argv: Optional[Sequence[str]] = None) -> int:
    """List the solutions consistent with a first guess and the board it produced."""
    parser = argparse.ArgumentParser(
        prog="wordsquare-tui",
        description="Narrow down solutions from an observed first guess.",
    )
    parser.add_argument(
        "--solutions", default=DEFAULT_SOLUTIONS, help="file of possible solutions"
    )
    args = parser.parse_args(argv)

    try:
        print("First guess:")
        guess = _read_line()
        if not guess.isascii() or len(guess) != SIZE:
            print("the guess must be five ASCII letters", file=sys.stderr)
            return 1

        print("What's in your grid?")
        print("Use '.', '_', or ' ' for empty spaces")
        grid = []
        for number in range(1, SIZE + 1):
            while True:
                line = _read_line()
                if len(line) == SIZE:
                    break
                print(f"line must be 5 long, please enter line {number} again")
            grid.append(_grid_row(line))

        hints = []
        for number in range(1, SIZE + 1):
            print(f"hint {number}")
            hints.append(RowHint(_read_line()))
    except EOFError:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    observed = PuzzleViewModel(
        guesses=(guess,),
        is_finished=False,
        grid=tuple(grid),
        hints=tuple(hints),
        alphabet={},
    )

    for solution in load_solutions(args.solutions):
        puzzle = Puzzle(solution)
        puzzle.guess(guess)
        if puzzle.view().is_equivalent_to(observed):
            print(solution)
    return 0