"""Game board surrounded by a ring of outside squares."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator

import numpy as np

from scrabbler.constants import (
    ALPHABET,
    EMPTY,
    SQUARE_CODES,
    SQUARE_LABELS,
    STANDARD_LAYOUT,
    UNUSABLE,
    SquareType,
)

log = logging.getLogger("scrabbler")

OUTSIDE = int(SquareType.OUTSIDE)


class Board:
    """Grid of squares framed by one row/column of OUTSIDE squares per side.

    Each square is spread over four parallel arrays indexed ``[row, col]``
    in the bordered frame, so a 15x15 board uses rows and columns 1..15:

    * ``types``        -- :class:`SquareType` codes (int8)
    * ``letters``      -- ``'.'`` (empty), ``'A'-'Z'`` (tile) or
      ``'a'-'z'`` (blank used as that letter)
    * ``cross_checks`` -- ``[row, col, i]`` is True when letter ``i`` may be
      placed on the empty square without breaking the vertical word
    * ``min_lengths``  -- fewest tiles a word starting here and running right
      must contain to touch existing tiles, or ``UNUSABLE``

    The last two are only meaningful after :func:`scrabbler.annotate.annotate`.
    """

    def __init__(self, types, letters=None):
        self.types: np.ndarray = np.array(types, dtype=np.int8)
        if self.types.ndim != 2:
            raise ValueError("board layout must be two-dimensional")
        if letters is None:
            self.letters: np.ndarray = np.full(self.types.shape, EMPTY, dtype="<U1")
        else:
            self.letters = np.array(letters, dtype="<U1")
            if self.letters.shape != self.types.shape:
                raise ValueError("letters and layout differ in shape")
        self.cross_checks: np.ndarray = np.zeros(self.types.shape + (len(ALPHABET),), dtype=bool)
        self.cross_checks[self.types != OUTSIDE] = True
        self.min_lengths: np.ndarray = np.full(self.types.shape, UNUSABLE, dtype=np.int16)

    # construction

    @classmethod
    def from_layout(cls, lines: Iterable[str]) -> Board:
        """Parse a bordered layout (``W w L l . x`` codes, one row per line)."""
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("empty board layout")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("board layout rows differ in length")
        try:
            types = [[SQUARE_CODES[ch] for ch in r] for r in rows]
        except KeyError as exc:
            raise ValueError(f"unknown square code {exc.args[0]!r}") from None

        board = cls(types)
        if board.types.shape[0] < 3 or board.types.shape[1] < 3:
            raise ValueError("board layout has no playable squares")
        ring = np.concatenate([
            board.types[0, :], board.types[-1, :], board.types[:, 0], board.types[:, -1],
        ])
        if (ring != OUTSIDE).any():
            raise ValueError("board layout must be surrounded by outside ('x') squares")
        return board

    @classmethod
    def from_interior(cls, lines: Iterable[str]) -> Board:
        """Parse an unbordered layout and add the outside ring."""
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise ValueError("empty board layout")
        width = len(rows[0])
        edge = "x" * (width + 2)
        return cls.from_layout([edge] + [f"x{r}x" for r in rows] + [edge])

    @classmethod
    def standard(cls) -> Board:
        """Empty standard 15x15 board."""
        return cls.from_interior(STANDARD_LAYOUT)

    @classmethod
    def load_layout(cls, path: str | None) -> Board:
        """Read a bordered layout file, or use the standard board."""
        if not path or not os.path.exists(path):
            if path:
                log.warning("Board file %s not found -- using the standard layout.", path)
            return cls.standard()
        with open(path, "r", encoding="utf-8") as f:
            board = cls.from_layout(f)
        log.info("Loaded %dx%d board from %s", board.n_rows, board.n_cols, path)
        return board

    def fill(self, rows: Iterable[str]) -> None:
        """Copy interior letters (``.`` = empty) onto the board, top-left first."""
        for r, line in enumerate((line.strip() for line in rows if line.strip()), start=1):
            for c, ch in enumerate(line, start=1):
                self.set(r, c, ch)

    # access

    @property
    def n_rows(self) -> int:
        """Playable rows (border excluded)."""
        return self.types.shape[0] - 2

    @property
    def n_cols(self) -> int:
        return self.types.shape[1] - 2

    @property
    def center(self) -> tuple[int, int]:
        return self.n_rows // 2 + 1, self.n_cols // 2 + 1

    def squares(self) -> Iterator[tuple[int, int]]:
        """Playable ``(row, col)`` pairs, row-major."""
        for r in range(1, self.n_rows + 1):
            for c in range(1, self.n_cols + 1):
                yield r, c

    def get(self, row: int, col: int) -> str:
        return str(self.letters[row, col])

    def set(self, row: int, col: int, letter: str) -> None:
        """Place a letter (lowercase for a blank) or clear with ``'.'``."""
        if not (0 <= row < self.types.shape[0] and 0 <= col < self.types.shape[1]):
            raise ValueError(f"({row},{col}) is off the board")
        if self.types[row, col] == OUTSIDE:
            raise ValueError(f"({row},{col}) is outside the playable area")
        if letter != EMPTY and not (len(letter) == 1 and letter.upper() in ALPHABET):
            raise ValueError(f"invalid tile {letter!r}")
        self.letters[row, col] = letter

    def square_type(self, row: int, col: int) -> SquareType:
        return SquareType(int(self.types[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        return bool(self.letters[row, col] == EMPTY)

    def is_occupied(self, row: int, col: int) -> bool:
        return not self.is_empty(row, col)

    def is_board_empty(self) -> bool:
        return bool((self.letters == EMPTY).all())

    def count_tiles(self) -> int:
        return int((self.letters != EMPTY).sum())

    def tiles(self) -> list[str]:
        """Every letter on the board, row-major."""
        return [str(ch) for ch in self.letters[self.letters != EMPTY]]

    def allowed(self, row: int, col: int) -> str:
        """Letters the cross-check allows on (row, col)."""
        mask = self.cross_checks[row, col]
        return "".join(ch for ch, ok in zip(ALPHABET, mask) if ok)

    # transformation

    def copy(self) -> Board:
        b = Board(self.types, self.letters)
        b.cross_checks = self.cross_checks.copy()
        b.min_lengths = self.min_lengths.copy()
        return b

    def transposed(self) -> Board:
        """Board with rows and columns swapped.

        Annotations are transposed too, but cross-checks and minimum lengths
        are direction dependent: re-annotate before searching the result.
        """
        b = Board(self.types.T, self.letters.T)
        b.cross_checks = self.cross_checks.transpose(1, 0, 2).copy()
        b.min_lengths = self.min_lengths.T.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            np.array_equal(self.types, other.types)
            and np.array_equal(self.letters, other.letters)
            and np.array_equal(self.cross_checks, other.cross_checks)
            and np.array_equal(self.min_lengths, other.min_lengths)
        )

    __hash__ = None

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(1, self.n_cols + 1))
        sep = "   " + "---" * self.n_cols
        lines = [header, sep]
        for r in range(1, self.n_rows + 1):
            parts = [f"{r:>2} |"]
            for c in range(1, self.n_cols + 1):
                val = self.get(r, c)
                if val != EMPTY:
                    parts.append(f" {val} ")
                else:
                    label = SQUARE_LABELS[self.square_type(r, c)]
                    parts.append(f" {label} " if len(label) == 1 else f"{label:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
