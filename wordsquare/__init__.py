"""Find, play and analyse five-by-five word squares whose rows and columns are all words."""

__version__ = "0.1.0"