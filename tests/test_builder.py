import pytest

from wordsquare.builder import (
    DuplicateWordError,
    EmptyBuilderError,
    FinishedDuplicateError,
    IncompleteError,
    InvalidColumnsError,
    SolutionBuilder,
    TooManyRowsError,
    WrongOrderError,
)
from wordsquare.puzzle import Solution
from wordsquare.words import WordList

COLUMNS = ["grime", "honor", "outdo", "steed", "terse"]
ROWS = ["ghost", "route", "inter", "modes", "erode"]


def sample_wordlist():
    return WordList(COLUMNS + ROWS)


def test_adding_five_letter_word_works():
    builder = SolutionBuilder(sample_wordlist())
    assert builder.add(ROWS[0]) is None
    assert builder.words == [ROWS[0]]


def test_same_word_twice_raises_duplicate():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(ROWS[0])
    with pytest.raises(DuplicateWordError):
        builder.add(ROWS[0])


def test_word_out_of_alphabetical_order_raises():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(COLUMNS[0])
    with pytest.raises(WrongOrderError):
        builder.add(COLUMNS[1])
    assert builder.words == [COLUMNS[0]]


def test_word_in_correct_order_is_fine():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(ROWS[0])
    assert builder.add(ROWS[1]) is None
    assert builder.words == ROWS[:2]


def test_word_not_in_possible_columns_is_rejected():
    builder = SolutionBuilder(sample_wordlist())
    with pytest.raises(InvalidColumnsError):
        builder.add("dummy")
    assert builder.words == []


def test_correct_puzzle_builds_two_solutions():
    builder = SolutionBuilder(WordList(COLUMNS))
    for row in ROWS[:4]:
        assert builder.add(row) is None
    assert builder.add(ROWS[4]) == (Solution(ROWS), Solution(COLUMNS))


def test_pop_on_empty_raises():
    builder = SolutionBuilder(WordList([]))
    with pytest.raises(EmptyBuilderError):
        builder.pop()


def test_popping_from_non_empty_is_ok():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(ROWS[0])
    assert builder.pop() is None
    assert builder.words == []


def test_solutions_should_not_have_duplicate_words():
    words = "which,hydra,odium,arose,sates,whoas,hydra,idiot,cruse,hames".split(",")
    builder = SolutionBuilder(WordList(words))
    with pytest.raises(FinishedDuplicateError):
        for row in ["which", "hydra", "odium", "arose", "sates"]:
            builder.add(row)


def test_adding_to_full_solution_raises():
    builder = SolutionBuilder(WordList(COLUMNS))
    for row in ROWS:
        builder.add(row)
    with pytest.raises(TooManyRowsError):
        builder.add("place")
    assert builder.build() == (Solution(ROWS), Solution(COLUMNS))


def test_build_incomplete_raises():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(ROWS[0])
    with pytest.raises(IncompleteError):
        builder.build()


def test_columns_read_down_rows():
    builder = SolutionBuilder(sample_wordlist())
    builder.add(ROWS[0])
    builder.add(ROWS[1])
    assert builder.columns() == ["gr", "ho", "ou", "st", "te"]


def test_error_messages():
    assert str(DuplicateWordError()) == "The same word has been added twice"
    assert str(EmptyBuilderError()) == "This is already empty, so you can't take from it"