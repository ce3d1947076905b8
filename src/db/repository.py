"""Protocol repository: the data store contract, implemented in memory and with SQLAlchemy."""

from typing import Protocol

from src.core.models import GameModel, GameRecord


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def create_game(self, game: GameModel) -> GameRecord:
        """Store new game under the next sequential id and return the stored record."""
        ...

    def list_games(self) -> list[GameRecord]:
        """All stored games, in insertion order."""
        ...

    def get_game(self, game_id: int) -> GameRecord | None:
        """Get game by ID, if record exists."""
        ...

    def get_game_by_title(self, title: str) -> GameRecord | None:
        """Get game by its (unique) title, if record exists."""
        ...

    def delete_game(self, game_id: int) -> GameRecord | None:
        """Remove a game's record and return it."""
        ...

    def clear(self) -> None:
        """Remove all records and restart the id sequence at 1."""
        ...
