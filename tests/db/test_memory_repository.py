"""Unit tests for src/db/memory_repository.py"""

import pytest

from src.core.exceptions import RepositoryError
from src.db.memory_repository import InMemoryMatchRepository, MatchModel


def _model(turn: str = "R") -> MatchModel:
    return MatchModel(
        board=[[""] * 8 for _ in range(8)],
        turn=turn,
        captures={"R": 0, "B": 0},
        status="in progress",
        moves=[],
    )


def test_create_and_get() -> None:
    repo = InMemoryMatchRepository()
    stored = repo.create_match("abc", _model())
    assert stored == _model()
    assert repo.get_match("abc") == _model()


def test_get_unknown_match() -> None:
    assert InMemoryMatchRepository().get_match("unknown") is None


def test_create_twice() -> None:
    repo = InMemoryMatchRepository()
    repo.create_match("abc", _model())
    with pytest.raises(RepositoryError):
        repo.create_match("abc", _model("B"))
    assert repo.get_match("abc") == _model()


def test_update() -> None:
    repo = InMemoryMatchRepository()
    repo.create_match("abc", _model())
    updated = repo.update_match("abc", _model("B"))
    assert updated == _model("B")
    assert repo.get_match("abc") == _model("B")


def test_update_unknown_match() -> None:
    repo = InMemoryMatchRepository()
    assert repo.update_match("abc", _model()) is None
    assert repo.get_match("abc") is None


def test_delete() -> None:
    repo = InMemoryMatchRepository()
    repo.create_match("abc", _model())
    assert repo.delete_match("abc") == _model()
    assert repo.get_match("abc") is None
    assert repo.delete_match("abc") is None


def test_records_are_copies() -> None:
    """Neither the model handed in nor the one handed out is the stored record."""
    repo = InMemoryMatchRepository()
    model = _model()
    repo.create_match("abc", model)
    model.board[5][0] = "R"

    fetched = repo.get_match("abc")
    assert fetched is not None
    assert fetched.board[5][0] == ""
    fetched.turn = "B"
    assert repo.get_match("abc") == _model()
