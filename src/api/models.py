"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)

from src.checkers.square import Square
from src.core.exceptions import GameError, InvalidRequestError
from src.core.shared_types import Side, Status

SideToken = str
Token = str

# The browser client sends camelCase "gameId" and the move squares as "from" / "to".
MATCH_ID_ALIASES = AliasChoices("match_id", "gameId")


# --- REQUEST MODELS ---
class MatchRequest(BaseModel):
    """Every request names the match it is about."""

    match_id: str = Field(validation_alias=MATCH_ID_ALIASES)

    @field_validator("match_id")
    @classmethod
    def validate_match_id(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Match ID cannot be empty.")
        return value


class CreateOrFetchRequest(MatchRequest):
    pass


class GetMatchRequest(MatchRequest):
    pass


class LegalMovesRequest(MatchRequest):
    pass


class DeleteMatchRequest(MatchRequest):
    pass


class MoveRequest(MatchRequest):
    from_square: list[Any] = Field(validation_alias=AliasChoices("from_square", "from"))
    to_square: list[Any] = Field(validation_alias=AliasChoices("to_square", "to"))

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: list[Any]) -> list[int]:
        def _is_coordinate(item: Any) -> bool:
            # bools are ints in Python, but [True, False] is not a square
            return isinstance(item, int) and not isinstance(item, bool)

        if len(value) != 2 or not all(_is_coordinate(item) for item in value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a [row, col] pair of integers."
            )
        Square.from_pair(value).assert_within_bounds()
        return value


# --- RESPONSE MODELS ---
class MatchResponse(BaseModel):
    match_id: str
    board: list[list[Token]]
    turn: Side
    status: Status
    winner: Optional[Side] = None
    captures: dict[SideToken, int]
    move_history: list[str]
    captured_piece: Optional[Token] = None

    @model_serializer(mode="wrap")
    def omit_captured_piece(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """captured_piece only shows up in the payload after a capture."""
        data = handler(self)
        if self.captured_piece is None:
            data.pop("captured_piece", None)
        return data


class LegalMovesResponse(BaseModel):
    match_id: str
    turn: Side
    legal_moves: list[tuple[list[int], list[int]]]


class ErrorResponse(BaseModel):
    """Structured reason returned to the caller when a request gets rejected."""

    code: str
    message: str

    @classmethod
    def from_exception(cls, error: GameError) -> Self:
        return cls(code=error.code, message=str(error))
