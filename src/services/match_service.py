"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from typing import Optional

from src.api.models import (
    CreateOrFetchRequest,
    DeleteMatchRequest,
    GetMatchRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MatchResponse,
    MoveRequest,
)
from src.checkers.game import Match
from src.checkers.rules import Move
from src.checkers.square import Square
from src.core.exceptions import (
    GameOverError,
    IllegalMoveError,
    MatchNotFoundError,
    RepositoryError,
)
from src.core.models import MatchModel
from src.core.shared_types import Side, Status, winner_of
from src.db.repository import MatchRepository

_log = logging.getLogger(__name__)


class MatchService:
    """
    Orchestration of layers for checkers matches.

    ---
    Writes to one match (creating it, making a move, deleting it) are serialized with a lock per match ID,
    so two moves submitted at the same time can never both be checked against the same board.
    Reads take no lock: the repository only ever hands out complete snapshots.
    Locks only exist for matches that are stored; deleting a match drops its lock.
    NOTE: the locks live on the service instance, so share one service per repository.
    """

    def __init__(self, repository: MatchRepository) -> None:
        self.repo = repository
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # -- API routes logic ---
    def create_or_fetch(self, request: CreateOrFetchRequest) -> MatchResponse:
        """
        Open the match if it does not exist yet, otherwise return where it stands.
        ----
        Safe to call as often as you like (and from both players at once).
        """
        stored_model = self.repo.get_match(request.match_id)
        if stored_model is not None:
            return self._create_match_response(request.match_id, stored_model)

        with self._match_lock(request.match_id):
            # someone else may have created it while we waited for the lock
            stored_model = self.repo.get_match(request.match_id)
            if stored_model is None:
                new_match = Match.new_match()
                stored_model = self.repo.create_match(
                    request.match_id, new_match.to_model()
                )
                _log.info("Created match %s", request.match_id)

        return self._create_match_response(request.match_id, stored_model)

    def get_match_state(self, request: GetMatchRequest) -> MatchResponse:
        """
        Retrieve current match state.
        ----
        Used in "polling" loop by frontend to see the opponent's moves.
        """
        match_model = self._fetch_match(request.match_id)
        return self._create_match_response(request.match_id, match_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves for the side to move."""
        match = Match.from_model(self._fetch_match(request.match_id))
        return LegalMovesResponse(
            match_id=request.match_id,
            turn=match.turn,
            legal_moves=[
                (move.from_square.to_pair(), move.to_square.to_pair())
                for move in match.legal_moves()
            ],
        )

    def submit_move(self, request: MoveRequest) -> MatchResponse:
        """Make a move attempt. Either the whole move gets stored, or (on any error) nothing changes."""
        move = Move(
            from_square=Square.from_pair(request.from_square),
            to_square=Square.from_pair(request.to_square),
        )

        # Unknown IDs are turned away before a lock gets registered for them
        self._fetch_match(request.match_id)

        with self._match_lock(request.match_id):
            # Retrieve persisted MatchModel from repository (it may have been deleted in the meantime)
            stored_model = self._fetch_match(request.match_id)

            # Create a new Match instance from the retrieved MatchModel
            match = Match.from_model(stored_model)

            # Attempt the move
            try:
                accepted_move = match.make_move(move)
            except (IllegalMoveError, GameOverError) as error:
                _log.info(
                    "Rejected move %s in match %s: %s",
                    move.to_notation(),
                    request.match_id,
                    error.code,
                )
                raise

            # Capture updated state in MatchModel and store it
            after_move = match.to_model()
            if self.repo.update_match(request.match_id, after_move) is None:
                raise RepositoryError(
                    f"Match with match_id={request.match_id!r} disappeared while moving."
                )

        _log.info(
            "Match %s: %s played %s%s",
            request.match_id,
            accepted_move.moving_piece.side.name.lower(),
            move.to_notation(),
            " (capture)" if accepted_move.is_capture else "",
        )
        if match.is_over:
            _log.info("Match %s finished: %s", request.match_id, match.status)

        captured_piece = (
            accepted_move.captured_piece.to_token()
            if accepted_move.captured_piece
            else None
        )
        return self._create_match_response(
            request.match_id, after_move, captured_piece=captured_piece
        )

    def delete_match(self, request: DeleteMatchRequest) -> None:
        """Handle a request to delete a Match record."""
        self._fetch_match(request.match_id)

        with self._match_lock(request.match_id):
            deleted = self.repo.delete_match(request.match_id)
            if deleted is not None:
                self._discard_lock(request.match_id)
        if deleted is None:
            raise MatchNotFoundError(f"Match with match_id={request.match_id!r} not found.")
        _log.info("Deleted match %s", request.match_id)

    # -- Internal helpers --
    def _match_lock(self, match_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(match_id, threading.Lock())

    def _discard_lock(self, match_id: str) -> None:
        with self._locks_guard:
            self._locks.pop(match_id, None)

    def _create_match_response(
        self,
        match_id: str,
        model: MatchModel,
        captured_piece: Optional[str] = None,
    ) -> MatchResponse:
        """Convert info in MatchModel to a MatchResponse (for match with given ID.)"""
        status = Status(model.status)
        return MatchResponse(
            match_id=match_id,
            board=model.board,
            turn=Side(model.turn),
            status=status,
            winner=winner_of(status),
            captures=model.captures,
            move_history=model.moves,
            captured_piece=captured_piece,
        )

    def _fetch_match(self, match_id: str) -> MatchModel:
        """Attempt to find the match in the repository and raise error if it fails."""
        match_model = self.repo.get_match(match_id)
        if match_model is None:
            raise MatchNotFoundError(f"Match with {match_id=} not found.")
        return match_model
