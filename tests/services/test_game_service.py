"""Unit tests for src/services/game_service.py"""

from typing import Optional

import pytest

from src.core.exceptions import (
    ConflictError,
    GameNotFoundError,
    GameStoreError,
    IncompleteDataError,
    TitleConflictError,
    ValidationError,
)
from src.core.models import GameModel
from src.db.memory_repository import InMemoryGameRepository
from src.services.game_service import (
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GameService,
)


@pytest.fixture
def service(memory_repository: InMemoryGameRepository) -> GameService:
    return GameService(memory_repository)


# --- SERVICE - CREATE GAME ----
def test_create_a_new_game(service: GameService) -> None:
    """New game is persisted in the repository and the response only carries the id."""
    response = service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre"))

    assert response == CreateGameResponse(id=1)
    stored = service.repo.get_game(1)
    assert stored is not None
    assert (stored.title, stored.genre) == ("Test Game", "Test Genre")


@pytest.mark.parametrize(
    "title, genre",
    [
        (None, None),
        ("Test Game", None),
        (None, "Test Genre"),
        ("", "Test Genre"),  # empty counts as missing
        ("Test Game", ""),
    ],
)
def test_create_with_incomplete_data(
    service: GameService, title: Optional[str], genre: Optional[str]
) -> None:
    """Nothing is stored, and the next successful create still gets id 1."""
    with pytest.raises(IncompleteDataError):
        service.create_game(CreateGameRequest(title=title, genre=genre))

    assert service.repo.list_games() == []
    assert service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre")).id == 1


def test_create_with_title_conflict(service: GameService) -> None:
    """A second game with the same title is refused and the store is left as it was."""
    service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre"))
    before = service.repo.list_games()

    with pytest.raises(TitleConflictError):
        service.create_game(CreateGameRequest(title="Test Game", genre="Other Genre"))

    assert service.repo.list_games() == before
    assert service.create_game(CreateGameRequest(title="Other", genre="Test Genre")).id == 2


def test_domain_error_names() -> None:
    """Errors are recognisable under their domain names and share one base class."""
    assert ValidationError is IncompleteDataError
    assert ConflictError is TitleConflictError
    for error in (GameNotFoundError, IncompleteDataError, TitleConflictError):
        assert issubclass(error, GameStoreError)

    assert (GameNotFoundError().status_code, GameNotFoundError().message) == (404, "not found")
    assert (IncompleteDataError().status_code, IncompleteDataError().message) == (422, "incomplete data")
    assert (TitleConflictError().status_code, TitleConflictError().message) == (405, "title conflict")


# --- SERVICE - LIST / GET ----
def test_list_games(service: GameService) -> None:
    for n in (1, 2, 3):
        service.create_game(CreateGameRequest(title=f"Test Game {n}", genre="Test Genre"))

    games = service.list_games().games
    assert [(game.id, game.title) for game in games] == [
        (1, "Test Game 1"),
        (2, "Test Game 2"),
        (3, "Test Game 3"),
    ]


def test_get_game(service: GameService) -> None:
    service.repo.create_game(GameModel(title="Test Game 1", genre="Test Genre"))
    service.repo.create_game(GameModel(title="Test Game 2", genre="Test Genre"))

    assert service.get_game(2) == GameResponse(id=2, title="Test Game 2", genre="Test Genre")


def test_get_unknown_game(service: GameService) -> None:
    with pytest.raises(GameNotFoundError):
        service.get_game(3)


# --- SERVICE - DELETE ----
def test_delete_game(service: GameService) -> None:
    service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre"))

    deleted = service.delete_game(1)
    assert deleted == GameResponse(id=1, title="Test Game", genre="Test Genre")
    assert service.list_games().games == []

    with pytest.raises(GameNotFoundError):
        service.delete_game(1)


def test_clear(service: GameService) -> None:
    service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre"))
    service.clear()

    assert service.list_games().games == []
    assert service.create_game(CreateGameRequest(title="Test Game", genre="Test Genre")).id == 1
