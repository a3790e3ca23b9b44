"""Defines the checkers pieces and their board tokens"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Side

KING_MARKER = "*"


class Rank(Enum):
    MAN = auto()
    KING = auto()


@dataclass
class Piece:
    side: Side
    rank: Rank = Rank.MAN

    @classmethod
    def from_token(cls, token: str) -> Self:
        """'R', 'R*', 'B', 'B*'. The star marks a king."""
        if not token or token[0] not in [side.value for side in Side]:
            raise InvalidBoardError(f"Unknown piece token: {token!r}")

        side = Side(token[0])
        marker = token[1:]
        if marker == "":
            return cls(side, Rank.MAN)
        if marker == KING_MARKER:
            return cls(side, Rank.KING)
        raise InvalidBoardError(f"Unknown piece token: {token!r}")

    def to_token(self) -> str:
        return f"{self.side.value}{KING_MARKER if self.is_king else ''}"

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def promote(self) -> None:
        self.rank = Rank.KING
