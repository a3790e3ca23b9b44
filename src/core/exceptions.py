"""
Custom exceptions shared by all layers.

Every exception carries a stable `code`, so the boundary layer can report a structured reason to the caller.
"""


class GameError(Exception):
    """Top-level custom exception. Catch this one to handle anything raised by the application on purpose."""

    code = "game_error"


# --- REQUESTS ---
class InvalidRequestError(GameError):
    code = "invalid_request"


class OutOfRangeError(InvalidRequestError):
    """Coordinates outside of the board."""

    code = "out_of_range"


class InvalidBoardError(GameError):
    """A serialized board that cannot be parsed into a Board."""

    code = "invalid_board"


# --- GAME STATE ---
class GameStateError(GameError):
    code = "invalid_state"


class GameOverError(GameStateError):
    """Move submitted after the match already has a winner."""

    code = "game_over"


# --- MOVE VALIDATION ---
class IllegalMoveError(GameError):
    code = "illegal_move"


class EmptySourceError(IllegalMoveError):
    code = "empty_source"


class NotYourPieceError(IllegalMoveError):
    code = "not_your_piece"


class DestinationOccupiedError(IllegalMoveError):
    code = "destination_occupied"


class NotDiagonalError(IllegalMoveError):
    code = "not_diagonal"


class TooFarError(IllegalMoveError):
    code = "too_far"


class NoPieceToCaptureError(IllegalMoveError):
    code = "no_piece_to_capture"


# --- PERSISTENCE ---
class RepositoryError(GameError):
    code = "repository_error"


class MatchNotFoundError(RepositoryError):
    """Unknown match identifier."""

    code = "not_found"
