"""The Board holds which piece stands on which square. It knows nothing about the rules of checkers."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.pieces import Piece
from src.checkers.square import BOARD_DIMENSIONS, Square, dark_squares
from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Side

# Serialized token for a square without a piece
EMPTY_TOKEN = ""

# Starting rows for each side. Black sits at the top of the board (row 0), Red at the bottom (row 7).
STARTING_ROWS: dict[Side, range] = {
    Side.BLACK: range(0, 3),
    Side.RED: range(5, 8),
}


@dataclass
class Board:
    """Only occupied squares are stored. A square missing from `position` is empty."""

    position: dict[Square, Piece]

    @classmethod
    def empty(cls) -> Self:
        return cls({})

    @classmethod
    def starting_position(cls) -> Self:
        """12 men per side on the dark squares of their three home rows. The two middle rows are empty."""
        position: dict[Square, Piece] = {}
        for square in dark_squares():
            for side, rows in STARTING_ROWS.items():
                if square.row in rows:
                    position[square] = Piece(side)
        return cls(position)

    @classmethod
    def from_tokens(cls, rows: list[list[str]]) -> Self:
        """Parse the 8x8 grid of tokens ("", "R", "R*", "B", "B*"), read row by row from row 0."""
        if len(rows) != BOARD_DIMENSIONS[0] or any(
            len(row) != BOARD_DIMENSIONS[1] for row in rows
        ):
            raise InvalidBoardError(
                f"Board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} tokens."
            )

        position: dict[Square, Piece] = {}
        for row_idx, row in enumerate(rows):
            for col_idx, token in enumerate(row):
                if token == EMPTY_TOKEN:
                    continue
                square = Square(row_idx, col_idx)
                if not square.is_dark():
                    raise InvalidBoardError(
                        f"Piece {token!r} on light square ({row_idx}, {col_idx})."
                    )
                position[square] = Piece.from_token(token)
        return cls(position)

    def to_tokens(self) -> list[list[str]]:
        return [
            [self._token(Square(row, col)) for col in range(BOARD_DIMENSIONS[1])]
            for row in range(BOARD_DIMENSIONS[0])
        ]

    def _token(self, square: Square) -> str:
        piece = self.position.get(square)
        return piece.to_token() if piece else EMPTY_TOKEN

    def piece(self, square: Square) -> Optional[Piece]:
        square.assert_within_bounds()
        return self.position.get(square)

    def get(self, row: int, col: int) -> Optional[Piece]:
        return self.piece(Square(row, col))

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def locate_side(self, side: Side) -> list[Square]:
        return [square for square, piece in self.position.items() if piece.side == side]

    def count_pieces(self) -> dict[Side, int]:
        return {side: len(self.locate_side(side)) for side in Side}

    # --- mutation primitives. NOTE: no rule checks here, the rules engine decides what is allowed ---
    def place_piece(self, piece: Piece, square: Square) -> None:
        square.assert_within_bounds()
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        square.assert_within_bounds()
        return self.position.pop(square, None)

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Relocate whatever stands on from_square"""
        to_square.assert_within_bounds()
        piece = self.remove_piece(from_square)
        if piece is not None:
            self.position[to_square] = piece

    def promote_piece(self, square: Square) -> None:
        piece = self.piece(square)
        if piece is not None:
            piece.promote()

    def copy(self) -> Self:
        return deepcopy(self)
