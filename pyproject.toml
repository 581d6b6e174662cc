[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsquare"
version = "0.1.0"
description = "Find, play and analyse five-by-five word squares whose rows and columns are all words"
requires-python = ">=3.10"
dependencies = []
keywords = ["word square", "puzzle", "crossword", "solver", "entropy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordsquare-solve = "wordsquare.cli:solve_main"
wordsquare-play = "wordsquare.cli:play_main"
wordsquare-information = "wordsquare.cli:information_main"
wordsquare-tui = "wordsquare.cli:tui_main"

[tool.hatch.build.targets.wheel]
packages = ["wordsquare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
