"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Optional


class Side(StrEnum):
    """The two sides of a match. Values are the tokens used on the serialized board."""

    RED = "R"
    BLACK = "B"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self == Side.RED else Side.RED


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    RED_WON = "red won"
    BLACK_WON = "black won"


# NOTE: No draw / stalemate status. A side without legal moves is simply stuck (see DESIGN.md).
WINNING_STATUS: dict[Side, Status] = {
    Side.RED: Status.RED_WON,
    Side.BLACK: Status.BLACK_WON,
}


def winner_of(status: Status) -> Optional[Side]:
    return next((side for side, won in WINNING_STATUS.items() if won == status), None)
