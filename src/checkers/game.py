"""
The Match class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of checkers -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.rules import AcceptedMove, Move, apply_move, legal_moves, validate
from src.core.exceptions import (
    GameOverError,
    GameStateError,
    InvalidBoardError,
    InvalidRequestError,
)
from src.core.models import MatchModel
from src.core.shared_types import WINNING_STATUS, Side, Status, winner_of

# Red always opens the match
STARTING_SIDE = Side.RED


def _no_captures() -> dict[Side, int]:
    return {side: 0 for side in Side}


@dataclass
class Match:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Side = STARTING_SIDE
    captures: dict[Side, int] = field(default_factory=_no_captures)
    status: Status = Status.IN_PROGRESS
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def new_match(cls) -> Self:
        return cls(board=Board.starting_position())

    @classmethod
    def from_model(cls, model: MatchModel) -> Self:
        """Define how to construct a Match from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {', '.join(Status)}"
            )
        if model.turn not in [side.value for side in Side]:
            raise GameStateError(
                f"Invalid turn: {model.turn!r}. \nPick one from {', '.join(Side)}"
            )
        try:
            board = Board.from_tokens(model.board)
        except InvalidBoardError as error:
            raise GameStateError(f"Stored board is corrupt: {error}") from error
        try:
            moves = [Move.from_notation(notation) for notation in model.moves]
        except InvalidRequestError as error:
            raise GameStateError(f"Stored move history is corrupt: {error}") from error

        return cls(
            board=board,
            turn=Side(model.turn),
            captures={side: model.captures.get(side.value, 0) for side in Side},
            status=Status(model.status),
            moves=moves,
        )

    def to_model(self) -> MatchModel:
        """Encode back into a format the Service layer uses"""
        return MatchModel(
            board=self.board.to_tokens(),
            turn=self.turn.value,
            captures={side.value: count for side, count in self.captures.items()},
            status=self.status.value,
            moves=[move.to_notation() for move in self.moves],
        )

    @property
    def winner(self) -> Optional[Side]:
        return winner_of(self.status)

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def legal_moves(self) -> list[Move]:
        """Moves the side to move can choose from. Can be used by callers to highlight options."""
        self._assert_in_progress()
        return legal_moves(self.board, self.turn)

    def make_move(self, move: Move) -> AcceptedMove:
        """
        Attempt to make a move
        -----

        1. make sure nobody has won yet
        2. validate the move (raises on an illegal move; nothing has been changed at that point)
        3. update the board (relocate, capture, promote)
        4. update the capture tally and the list of moves
        5. pass the turn to the opponent
        6. update game status (if needed)
        """
        self._assert_in_progress()

        accepted_move = validate(self.board, move, self.turn)

        apply_move(self.board, accepted_move)

        if accepted_move.is_capture:
            self.captures[self.turn] += 1
        self.moves.append(accepted_move.move)

        self.turn = self.turn.opponent

        self._update_status()
        return accepted_move

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameOverError(f"Match is over. status: {self.status}")

    def _update_status(self) -> None:
        """A side without any pieces left has lost."""
        piece_count = self.board.count_pieces()
        for side, count in piece_count.items():
            if count == 0:
                self.status = WINNING_STATUS[side.opponent]
