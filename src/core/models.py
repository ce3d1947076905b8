"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) send/receive these, so neither depends on the other's representation.
"""

from dataclasses import dataclass


@dataclass
class GameModel:
    """Payload of a game that has not been stored yet."""

    title: str
    genre: str


@dataclass
class GameRecord:
    """A stored game. The id is assigned by the repository and never changes."""

    id: int
    title: str
    genre: str
