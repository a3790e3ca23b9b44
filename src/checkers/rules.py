"""
Movement and capturing rules

A move is checked against a list of preconditions, in a fixed order. The first one that fails decides the error raised.

NOTE: simplified rule set.
* men may move backwards
* capturing is never mandatory
* kings move exactly like men (no flying kings)
* a single jump per move. Another jump is a new move, after the opponent had their turn.
"""

from dataclasses import dataclass, replace
from typing import Optional, Protocol, Self

from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.exceptions import (
    DestinationOccupiedError,
    EmptySourceError,
    IllegalMoveError,
    InvalidRequestError,
    NoPieceToCaptureError,
    NotDiagonalError,
    NotYourPieceError,
    TooFarError,
)
from src.core.shared_types import Side

STEP_DISTANCE = 1
JUMP_DISTANCE = 2
DIAGONALS: list[tuple[int, int]] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

# A man reaching this row becomes a king.
PROMOTION_ROW: dict[Side, int] = {
    Side.RED: 0,
    Side.BLACK: 7,
}


class Board(Protocol):
    """Just the parts the rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def locate_side(self, side: Side) -> list[Square]: ...
    def move_piece(self, from_square: Square, to_square: Square) -> None: ...
    def remove_piece(self, square: Square) -> Optional[Piece]: ...
    def promote_piece(self, square: Square) -> None: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """
        "<row><col>-<row><col>", ex) "54-32": the piece on (5, 4) jumps to (3, 2)
        """
        try:
            start, end = notation.split("-")
            from_square = Square(int(start[0]), int(start[1]))
            to_square = Square(int(end[0]), int(end[1]))
        except (ValueError, IndexError) as error:
            raise InvalidRequestError(f"Cannot read move {notation!r}") from error
        return cls(from_square, to_square)

    def to_notation(self) -> str:
        start, end = self.from_square, self.to_square
        return f"{start.row}{start.col}-{end.row}{end.col}"

    @property
    def distance(self) -> int:
        return abs(self.to_square.row - self.from_square.row)

    def is_diagonal(self) -> bool:
        d_row = abs(self.to_square.row - self.from_square.row)
        d_col = abs(self.to_square.col - self.from_square.col)
        return d_row == d_col and d_row > 0


@dataclass(frozen=True)
class AcceptedMove:
    """A move that passed validation + snapshot of the pieces involved (taken before the board gets updated)."""

    move: Move
    moving_piece: Piece
    captured_square: Optional[Square] = None
    captured_piece: Optional[Piece] = None

    @property
    def is_capture(self) -> bool:
        return self.captured_square is not None


def validate(board: Board, move: Move, side_to_move: Side) -> AcceptedMove:
    """
    Check a move, for the side whose turn it is.
    ----

    1. There must be a piece of your own on the starting square
    2. The target square must be empty
    3. Moves are diagonal
    4. One step, or a jump of two
    5. A jump must go over an opponent's piece, which gets captured

    Raises the IllegalMoveError subclass of the first failing check.
    Out of range squares raise OutOfRangeError (from the board).
    """
    moving_piece = board.piece(move.from_square)
    if moving_piece is None:
        raise EmptySourceError(
            f"No piece on ({move.from_square.row}, {move.from_square.col})."
        )
    if moving_piece.side != side_to_move:
        raise NotYourPieceError(
            f"Piece on ({move.from_square.row}, {move.from_square.col}) belongs to {moving_piece.side.name.lower()}; it is {side_to_move.name.lower()}'s turn."
        )

    if board.piece(move.to_square) is not None:
        raise DestinationOccupiedError(
            f"Square ({move.to_square.row}, {move.to_square.col}) is occupied."
        )

    if not move.is_diagonal():
        raise NotDiagonalError(f"Move {move.to_notation()} is not diagonal.")

    if move.distance > JUMP_DISTANCE:
        raise TooFarError(
            f"Move {move.to_notation()} covers {move.distance} squares; at most {JUMP_DISTANCE} allowed."
        )

    if move.distance == STEP_DISTANCE:
        return AcceptedMove(move, replace(moving_piece))

    # A jump: the square in between must hold an opponent's piece
    jumped_square = move.from_square.midpoint(move.to_square)
    jumped_piece = board.piece(jumped_square)
    if jumped_piece is None or jumped_piece.side != side_to_move.opponent:
        raise NoPieceToCaptureError(
            f"Jump {move.to_notation()} does not go over an opponent's piece."
        )
    return AcceptedMove(
        move, replace(moving_piece), jumped_square, replace(jumped_piece)
    )


def apply_move(board: Board, accepted_move: AcceptedMove) -> None:
    """
    Update the board with a validated move
    ----

    1. Relocate the piece
    2. Remove the captured piece (if any)
    3. Promote when the piece now stands on the opponent's back rank
    """
    move = accepted_move.move
    board.move_piece(move.from_square, move.to_square)

    if accepted_move.captured_square is not None:
        board.remove_piece(accepted_move.captured_square)

    # NOTE promotion is checked AFTER relocating, using the destination row
    if is_promotion_square(move.to_square, accepted_move.moving_piece.side):
        board.promote_piece(move.to_square)


def is_promotion_square(square: Square, side: Side) -> bool:
    return square.row == PROMOTION_ROW[side]


def candidate_moves(square: Square) -> list[Move]:
    """All steps and jumps from a square that stay on the board. Legality is checked by validate()."""
    moves: list[Move] = []
    for distance in (STEP_DISTANCE, JUMP_DISTANCE):
        for d_row, d_col in DIAGONALS:
            target = square.offset(d_row * distance, d_col * distance)
            if target.is_within_bounds():
                moves.append(Move(square, target))
    return moves


def legal_moves(board: Board, side: Side) -> list[Move]:
    """Every move validate() would accept for the given side."""
    moves: list[Move] = []
    for square in board.locate_side(side):
        for move in candidate_moves(square):
            try:
                validate(board, move, side)
            except IllegalMoveError:
                continue
            moves.append(move)
    return moves
