"""
Session Module - Game operations and queries.

A game is one exchange between a host and an opponent:
- Started by the host, who submits the first move
- Finished when the opponent answers
- Kept in the store afterwards

Writes go through GameManager; reads go through GameQueries.
"""

from .manager import GameManager, GameEvent
from .queries import GameQueries

__all__ = [
    "GameManager",
    "GameEvent",
    "GameQueries",
]
