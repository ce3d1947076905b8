"""HTTP routes for the games resource."""

from typing import Generator

from fastapi import APIRouter, Depends, Request, status

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GamesListResponse,
    MessageResponse,
)
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}

router = APIRouter(prefix="/games", tags=["games"])


def get_game_service(request: Request) -> Generator[GameService, None, None]:
    """
    A service over the app's data store (see src/main.py).

    With the SQL store every request gets its own session, closed once the request is done.
    """
    state = request.app.state
    if state.session_factory is None:
        yield GameService(state.repository)
        return

    db = state.session_factory()
    try:
        yield GameService(SQLGameRepository(db))
    finally:
        db.close()


@router.get("", response_model=GamesListResponse)
def list_games(service: GameService = Depends(get_game_service)) -> GamesListResponse:
    return service.list_games()


@router.get("/{game_id}", response_model=GameResponse, responses=NOT_FOUND)
def get_game(game_id: int, service: GameService = Depends(get_game_service)) -> GameResponse:
    return service.get_game(game_id)


@router.post(
    "",
    response_model=CreateGameResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        405: {"model": MessageResponse, "description": "Title conflict"},
        422: {"model": MessageResponse, "description": "Incomplete data"},
    },
)
def create_game(
    body: CreateGameRequest, service: GameService = Depends(get_game_service)
) -> CreateGameResponse:
    return service.create_game(body)


@router.delete("/{game_id}", response_model=GameResponse, responses=NOT_FOUND)
def delete_game(game_id: int, service: GameService = Depends(get_game_service)) -> GameResponse:
    return service.delete_game(game_id)
