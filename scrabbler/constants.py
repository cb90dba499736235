"""Game constants and built-in defaults."""

from __future__ import annotations

import string
from enum import IntEnum

ALPHABET = string.ascii_uppercase
RACK_SIZE = 7
BINGO_BONUS = 50  # 50 points for placing 7 or more tiles in one turn

EMPTY = "."
BLANK = "*"
BLANK_ALIASES = ("*", "?")

# Minimum word length marking a square that can never start a connected word
UNUSABLE = -1


class SquareType(IntEnum):
    TRIPLE_WORD = 0
    DOUBLE_WORD = 1
    TRIPLE_LETTER = 2
    DOUBLE_LETTER = 3
    REGULAR = 4
    OUTSIDE = 5


# Layout file codes
SQUARE_CODES: dict[str, SquareType] = {
    "W": SquareType.TRIPLE_WORD,
    "w": SquareType.DOUBLE_WORD,
    "L": SquareType.TRIPLE_LETTER,
    "l": SquareType.DOUBLE_LETTER,
    ".": SquareType.REGULAR,
    "x": SquareType.OUTSIDE,
}

# Short labels used when rendering empty bonus squares
SQUARE_LABELS: dict[SquareType, str] = {
    SquareType.TRIPLE_WORD: "TW",
    SquareType.DOUBLE_WORD: "DW",
    SquareType.TRIPLE_LETTER: "TL",
    SquareType.DOUBLE_LETTER: "DL",
    SquareType.REGULAR: ".",
    SquareType.OUTSIDE: "x",
}

LETTER_MULTIPLIERS: dict[SquareType, int] = {
    SquareType.DOUBLE_LETTER: 2,
    SquareType.TRIPLE_LETTER: 3,
}

WORD_MULTIPLIERS: dict[SquareType, int] = {
    SquareType.DOUBLE_WORD: 2,
    SquareType.TRIPLE_WORD: 3,
}

# Standard tile point values
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10, BLANK: 0,
}

# Standard 100-tile distribution
TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3,
    "H": 2, "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6,
    "O": 8, "P": 2, "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4,
    "V": 2, "W": 2, "X": 1, "Y": 2, "Z": 1, BLANK: 2,
}

# Standard 15x15 bonus layout without the outside border.
# Key: W = triple word, w = double word, L = triple letter,
#      l = double letter, . = regular
# fmt: off
STANDARD_LAYOUT: list[str] = [
    "W..l...W...l..W",
    ".w...L...L...w.",
    "..w...l.l...w..",
    "l..w...l...w..l",
    "....w.....w....",
    ".L...L...L...L.",
    "..l...l.l...l..",
    "W..l...w...l..W",
    "..l...l.l...l..",
    ".L...L...L...L.",
    "....w.....w....",
    "l..w...l...w..l",
    "..w...l.l...w..",
    ".w...L...L...w.",
    "W..l...W...l..W",
]
# fmt: on
