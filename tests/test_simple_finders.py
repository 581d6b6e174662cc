from wordsquare.builder import SolutionBuilder
from wordsquare.puzzle import Solution
from wordsquare.simple_finders import (
    TopDownFinder,
    TrivialFinder,
    find_solutions_new,
    find_subsolutions,
    solution_validator,
)
from wordsquare.words import WordList

COLUMNS = ["grime", "honor", "outdo", "steed", "terse"]
ROWS = ["ghost", "route", "inter", "modes", "erode"]
WORDS = COLUMNS + ROWS
EXPECTED = sorted([Solution(ROWS), Solution(COLUMNS)])


def test_validator_accepts_valid_square():
    assert solution_validator(WORDS, ROWS) == Solution(ROWS)


def test_validator_rejects_wrong_count():
    assert solution_validator(WORDS, ROWS[:4]) is None


def test_validator_rejects_short_word():
    assert solution_validator(WORDS, ["ghos", *ROWS[1:]]) is None


def test_validator_rejects_unknown_column():
    assert solution_validator(ROWS, ROWS) is None


def test_validator_rejects_duplicate_words():
    words = "which,hydra,odium,arose,sates,whoas,hydra,idiot,cruse,hames".split(",")
    assert solution_validator(words, words[:5]) is None


def test_trivial_finder_finds_both_orientations():
    assert sorted(TrivialFinder(WORDS).find()) == EXPECTED


def test_top_down_finder_finds_both_orientations():
    assert sorted(TopDownFinder(WORDS).find()) == EXPECTED


def test_top_down_yields_rows_then_columns():
    assert TopDownFinder(WORDS).find() == [Solution(ROWS), Solution(COLUMNS)]


def test_find_solutions_new_matches_finder():
    assert find_solutions_new(WordList(WORDS), WORDS) == TopDownFinder(WORDS).find()


def test_find_subsolutions_completes_builder():
    builder = SolutionBuilder(WordList(COLUMNS))
    builder.add(ROWS[0])
    result = find_subsolutions(ROWS, builder)
    assert result == [Solution(ROWS), Solution(COLUMNS)]
    assert builder.words == [ROWS[0]]


def test_trivial_solutions_are_valid_squares():
    words = [
        "event", "clues", "angel", "scent", "larva", "pests",
        "lance", "pelts", "salts", "clasp", "urges",
    ]
    for solution in TrivialFinder(words).find():
        columns = ["".join(row[i] for row in solution.rows) for i in range(5)]
        used = [*solution.rows, *columns]
        assert all(word in words for word in used)
        assert len(set(used)) == 10


def test_no_words_no_solutions():
    assert TopDownFinder([]).find() == []
    assert TrivialFinder([]).find() == []