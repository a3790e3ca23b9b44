"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBMatch(Base):
    __tablename__ = "matches"
    id: Mapped[str] = mapped_column(primary_key=True)
    board: Mapped[list[list[str]]] = mapped_column(JSON)
    turn: Mapped[str]
    captures: Mapped[dict[str, int]] = mapped_column(JSON)
    status: Mapped[str]
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
