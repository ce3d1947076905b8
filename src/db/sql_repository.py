"""Implementation of (Game)Repository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameModel, GameRecord
from src.db.schema import Base, DBGame

# SQLite INTEGER PRIMARY KEY is a signed 64-bit value
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def create_game(self, game: GameModel) -> GameRecord:
        """Store new game under the next sequential id and return the stored record."""
        game_db = DBGame(title=game.title, genre=game.genre)
        self.db.add(game_db)
        self._commit()
        self.db.refresh(game_db)
        return self._to_record(game_db)

    def list_games(self) -> list[GameRecord]:
        """All stored games, in insertion order (ids only ever increase)."""
        query = select(DBGame).order_by(DBGame.id)
        return [self._to_record(game_db) for game_db in self.db.scalars(query)]

    def get_game(self, game_id: int) -> GameRecord | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_record(game_db)
        return None

    def get_game_by_title(self, title: str) -> GameRecord | None:
        """Get game by its (unique) title, if record exists."""
        game_db = self.db.scalar(select(DBGame).where(DBGame.title == title))
        if game_db:
            return self._to_record(game_db)
        return None

    def delete_game(self, game_id: int) -> GameRecord | None:
        """Remove a game's record and return it."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        record = self._to_record(game_db)
        self.db.delete(game_db)
        self._commit()
        return record

    def clear(self) -> None:
        """
        Remove all records and restart the id sequence at 1.

        NOTE dropping the table also drops SQLite's AUTOINCREMENT bookkeeping, which a plain DELETE would keep.
        """
        bind = self.db.get_bind()
        self.db.close()
        Base.metadata.drop_all(bind=bind)
        Base.metadata.create_all(bind=bind)

    def _fetch_game(self, game_id: int) -> DBGame | None:
        if not MIN_ID <= game_id <= MAX_ID:
            return None
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not write to the database: {exc}") from exc

    def _to_record(self, game_db: DBGame) -> GameRecord:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRecord(id=game_db.id, title=game_db.title, genre=game_db.genre)
