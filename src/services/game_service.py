"""Orchestration of communication from API router to the persistence layer (and the reverse direction)."""

import logging

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GamesListResponse,
)
from src.core.exceptions import (
    GameNotFoundError,
    IncompleteDataError,
    TitleConflictError,
)
from src.core.models import GameModel, GameRecord
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class GameService:
    """Checks applied on top of the repository: required fields, unique titles, existing ids."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """
        Store a new game and return its id.
        ----
        Nothing is written (and no id is used up) when the request is rejected.
        """
        if not request.title or not request.genre:
            logger.warning("Rejected new game with incomplete data: %r", request)
            raise IncompleteDataError()

        if self.repo.get_game_by_title(request.title) is not None:
            logger.warning("Rejected new game, title %r already exists", request.title)
            raise TitleConflictError()

        record = self.repo.create_game(GameModel(title=request.title, genre=request.genre))
        logger.info("Created game %d (%r)", record.id, record.title)
        return CreateGameResponse(id=record.id)

    def list_games(self) -> GamesListResponse:
        """Show all recorded games, oldest first."""
        return GamesListResponse(
            games=[GameResponse.from_record(game) for game in self.repo.list_games()]
        )

    def get_game(self, game_id: int) -> GameResponse:
        return GameResponse.from_record(self._fetch_game(game_id))

    def delete_game(self, game_id: int) -> GameResponse:
        """Handle a request to delete a Game record. Returns the deleted game."""
        deleted = self.repo.delete_game(game_id)
        if deleted is None:
            raise GameNotFoundError()
        logger.info("Deleted game %d (%r)", deleted.id, deleted.title)
        return GameResponse.from_record(deleted)

    def clear(self) -> None:
        """Drop every game and restart ids at 1. Only used for setup (tests, fresh processes)."""
        self.repo.clear()
        logger.info("Cleared all games")

    # -- Internal helpers --
    def _fetch_game(self, game_id: int) -> GameRecord:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            logger.debug("Game %d not found", game_id)
            raise GameNotFoundError()
        return game
