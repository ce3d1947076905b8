"""Implementation of (Game)Repository keeping records in a list. Data is lost when the process exits."""

from src.core.models import GameModel, GameRecord


class InMemoryGameRepository:
    """Ordered collection of games plus an id counter."""

    def __init__(self) -> None:
        self._games: list[GameRecord] = []
        self._last_id = 0

    def create_game(self, game: GameModel) -> GameRecord:
        """Store new game under the next sequential id and return the stored record."""
        self._last_id += 1
        record = GameRecord(id=self._last_id, title=game.title, genre=game.genre)
        self._games.append(record)
        return self._copy(record)

    def list_games(self) -> list[GameRecord]:
        """All stored games, in insertion order."""
        return [self._copy(game) for game in self._games]

    def get_game(self, game_id: int) -> GameRecord | None:
        """Get game by ID, if record exists."""
        for game in self._games:
            if game.id == game_id:
                return self._copy(game)
        return None

    def get_game_by_title(self, title: str) -> GameRecord | None:
        """Get game by its (unique) title, if record exists."""
        for game in self._games:
            if game.title == title:
                return self._copy(game)
        return None

    def delete_game(self, game_id: int) -> GameRecord | None:
        """Remove a game's record and return it."""
        for index, game in enumerate(self._games):
            if game.id == game_id:
                return self._games.pop(index)
        return None

    def clear(self) -> None:
        """Remove all records and restart the id sequence at 1."""
        self._games.clear()
        self._last_id = 0

    def _copy(self, game: GameRecord) -> GameRecord:
        # callers must not be able to mutate stored records
        return GameRecord(id=game.id, title=game.title, genre=game.genre)
