"""Generate database sessions for the SQL backend"""

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine and make sure all tables exist."""
    if database_url.startswith("sqlite"):
        # one shared connection, otherwise every connection to sqlite:///:memory: is a new empty database
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo)

    Base.metadata.create_all(bind=engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autoflush=False, bind=engine)