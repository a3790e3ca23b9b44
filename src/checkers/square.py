"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.core.exceptions import InvalidRequestError, OutOfRangeError

# Checkers board is always 8x8 (rows, columns).
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """Row 0 is Black's back rank, row 7 is Red's back rank."""

    row: int
    col: int

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> Square:
        """The [row, col] pairs callers send us."""
        if len(pair) != 2:
            raise InvalidRequestError(f"Expected a [row, col] pair, got {pair!r}.")
        return cls(int(pair[0]), int(pair[1]))

    def to_pair(self) -> list[int]:
        return [self.row, self.col]

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def assert_within_bounds(self) -> None:
        if not self.is_within_bounds():
            raise OutOfRangeError(
                f"Square ({self.row}, {self.col}) is not on the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )

    def is_dark(self) -> bool:
        """Pieces only ever stand on the dark squares."""
        return (self.row + self.col) % 2 == 1

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Square) -> Square:
        """Only meaningful for squares two diagonal steps apart (so the result is a whole square)."""
        return Square((self.row + other.row) // 2, (self.col + other.col) // 2)


def dark_squares() -> list[Square]:
    return [
        Square(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
        if Square(row, col).is_dark()
    ]
