# wordsquare

Tools for five-by-five word squares: grids whose five rows and five
columns are ten different five-letter words.

The package can

- search a word list for every valid square,
- let you play a guessing game against a known square,
- rank opening guesses by how much information they reveal,
- narrow down the candidate squares from a board you are looking at.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command reads plain-text files, by default from the current
directory. No word lists or solution lists come with the package; you
supply them.

### Finding squares

```
wordsquare-solve [COUNT] [--words FILE]
```

Reads `FILE` (default `all_words.txt`, one word per line; only lines of
exactly five lower-case letters are kept), restricts the search to the
first `COUNT` words if a non-negative number is given (otherwise all
words are used), and prints every square found, one per line, as five
comma-separated rows. Each square is printed twice: once read by its
columns and once read by its rows.

### Playing

```
wordsquare-play [--solutions FILE]
```

Takes the first square in `FILE` (default `solutions.txt`, one square
per line as five comma-separated words) and asks for five-letter
guesses on standard input. After each guess the board shows the letters
found in place (`-` for unknown) and, after the `|`, the guessed letters
that are in that row but not yet placed. Guesses that are not ASCII or
not five characters long are refused. The game ends with exit status 0
when the board is full, or with status 1 at end of input.

### Ranking first guesses

```
wordsquare-information [--solutions FILE] [--words FILE]
```

For every word in the `--words` file (default `words.txt`, one per
line), computes the entropy in bits of the boards that guessing it
would produce across all squares in the `--solutions` file (default
`solutions.txt`), and prints a list of `(word, score)` pairs in
ascending order of score.

### Narrowing down a real puzzle

```
wordsquare-tui [--solutions FILE]
```

A line-by-line prompt. It asks for your first guess, then the five rows
of the board you see (any character other than a letter, such as `.`,
`_` or a space, marks an empty cell; upper-case letters are taken as
lower case), then the hint letters for each row. It prints every square
in `FILE` (default `solutions.txt`) that, after the same guess, shows
the same board and, row by row, equivalent hints (same number of
letters, in any order).

## Library use

```python
from wordsquare.puzzle import Puzzle, Solution
from wordsquare.double_sided import DoubleSidedFinder
from wordsquare.words import BinSearchRange
from wordsquare.first_guess import distribution_for, entropy

words = ["grime", "honor", "outdo", "steed", "terse",
         "ghost", "route", "inter", "modes", "erode"]
for square in DoubleSidedFinder(words, BinSearchRange).find():
    print(square)

solution = Solution.parse("grime,honor,outdo,steed,terse")
puzzle = Puzzle(solution)
puzzle.guess("arose")
view = puzzle.view()
print(view.grid, view.hints, view.alphabet)

print(entropy(distribution_for([solution], "arose")))  # 0.0
```

Modules:

- `wordsquare.puzzle`: `Solution`, `Puzzle`, `PuzzleViewModel`,
  `RowHint`, `LetterPlayed` and `row_hint`. `Solution.does_match`
  checks whether a solution would produce a given view.
- `wordsquare.words`: `WordList` (a prefix trie), `range_for`, the
  prefix-range lookups `BinSearchRange`, `HashSearchRange` and
  `LinearSearchRange`, and `five_letter_words` / `get_words` for
  reading word files. `LinearSearchRange` returns an empty range when
  the matching words run to the end of the list.
- `wordsquare.double_sided`: `DoubleSidedFinder`, which takes a word
  list and a range-lookup class (default `BinSearchRange`), and the
  helper `except_for`.
- `wordsquare.simple_finders`: `TopDownFinder` and `TrivialFinder`,
  slower and simpler searches, plus `find_solutions_new`,
  `find_subsolutions` and `solution_validator`.
- `wordsquare.builder`: `SolutionBuilder` builds a square one row at a
  time; `add` returns `None` until the fifth row, then the pair of
  solutions (rows, columns), and raises a `BuilderError` subclass
  (`DuplicateWordError`, `WrongOrderError`, `InvalidColumnsError`,
  `FinishedDuplicateError`, `TooManyRowsError`) when a row cannot be
  added. `pop` raises `EmptyBuilderError` and `build` raises
  `IncompleteError`.
- `wordsquare.first_guess`: `entropy` and `distribution_for`.
- `wordsquare.cli`: the command functions and `load_solutions`.

## What it does not do

The package does not suggest a next guess during play, has no
full-screen or graphical interface (the commands read and write plain
lines), and ships no word or solution files.