"""
Entrypoint of the Games API.

Builds the FastAPI app around an explicit data store. Run with::

    uvicorn src.main:app --reload

or ``python -m src.main``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from src.api.errors import register_exception_handlers
from src.api.routes import router as games_router
from src.core.config import STORAGE_MEMORY, STORAGE_SQL, Settings, settings
from src.core.logging_config import setup_logging
from src.db.database import build_engine, build_session_factory
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


def configure_storage(
    app: FastAPI, config: Settings, repository: Optional[GameRepository] = None
) -> None:
    """
    Attach the data store named by ``config.storage_backend`` to the app.

    The in-memory store (or a given ``repository``) lives on ``app.state.repository``.
    The SQL store only keeps a session factory there; sessions are opened per request, see src/api/routes.py.
    """
    app.state.repository = repository
    app.state.session_factory = None
    if repository is not None:
        return

    if config.storage_backend == STORAGE_MEMORY:
        app.state.repository = InMemoryGameRepository()
    elif config.storage_backend == STORAGE_SQL:
        app.state.session_factory = build_session_factory(build_engine(config.database_url))
    else:
        raise ValueError(
            f"Unknown storage backend {config.storage_backend!r}, expected {STORAGE_MEMORY!r} or {STORAGE_SQL!r}."
        )


def create_app(
    repository: Optional[GameRepository] = None, config: Optional[Settings] = None
) -> FastAPI:
    """
    Create and configure the app.

    Each call gets its own store: the given ``repository``, or a new one built from the settings.
    """
    config = config or settings
    setup_logging(config.log_level, config.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        storage = "sql" if app.state.session_factory else type(app.state.repository).__name__
        logger.info("%s started with %s storage", config.project_name, storage)
        yield

    app = FastAPI(title=config.project_name, version=config.api_version, lifespan=lifespan)
    configure_storage(app, config, repository)
    register_exception_handlers(app)
    app.include_router(games_router)

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": config.project_name}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
