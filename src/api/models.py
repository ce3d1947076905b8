"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel

from src.core.models import GameRecord


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Body of POST /games. Presence of both fields is checked by the service, so a missing field maps to 'incomplete data'."""

    title: Optional[str] = None
    genre: Optional[str] = None


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: int
    title: str
    genre: str

    @classmethod
    def from_record(cls, record: GameRecord) -> "GameResponse":
        return cls(id=record.id, title=record.title, genre=record.genre)


class GamesListResponse(BaseModel):
    games: list[GameResponse]


class CreateGameResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str
