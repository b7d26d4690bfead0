"""
Game State - Moves, outcomes and the session record.

Design principles:
- Immutable-friendly: all mutations return a new Session
- Serializable: records round-trip through plain dicts for storage
- Directional keys: (host, opponent) and (opponent, host) are different games
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class Move(Enum):
    """A player's choice. NO_MOVE marks a move not yet submitted."""
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"
    NO_MOVE = "NoMove"

    @property
    def is_played(self) -> bool:
        return self is not Move.NO_MOVE

    @classmethod
    def parse(cls, text: str) -> Move:
        """
        Parse a move from user input.

        Accepts the stored value or the enum name in any case
        ("rock", "Rock", "NO_MOVE", "nomove").
        """
        normalized = text.strip().replace("_", "").lower()
        for move in cls:
            if normalized == move.value.lower():
                return move
        raise ValueError(f"Unknown move: {text!r}")


class Outcome(Enum):
    """Result of a game. IN_PROGRESS is stored as "Started"."""
    IN_PROGRESS = "Started"
    STARTED = "Started"  # alias of IN_PROGRESS
    HOST_WINS = "HostWins"
    OPPONENT_WINS = "OpponentWins"
    TIE = "Tie"

    @property
    def is_resolved(self) -> bool:
        return self is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class SessionKey:
    """
    Storage key for a game: the ordered (host, opponent) pair.

    Both identifiers are expected to be canonical already
    (see identifiers.validate_identifier).
    """
    host_id: str
    opponent_id: str

    def __str__(self) -> str:
        return f"{self.host_id}/{self.opponent_id}"


@dataclass(frozen=True)
class Session:
    """
    One game between a host and an opponent.

    The host's move is submitted when the game starts; the opponent's
    move stays NO_MOVE until they answer, at which point the result
    is computed and the game is finished.
    """
    host_move: Move
    opponent_move: Move = Move.NO_MOVE
    result: Outcome = Outcome.IN_PROGRESS

    @classmethod
    def start(cls, host_move: Move) -> Session:
        """Create a fresh game waiting for the opponent."""
        return cls(host_move=host_move)

    @property
    def is_resolved(self) -> bool:
        return self.result.is_resolved

    def with_opponent_move(self, move: Move, result: Outcome) -> Session:
        """Return new session with the opponent's move and the final result."""
        return replace(self, opponent_move=move, result=result)

    def to_dict(self) -> dict[str, Any]:
        return {
            "host_move": self.host_move.value,
            "opponent_move": self.opponent_move.value,
            "result": self.result.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        return cls(
            host_move=Move(data["host_move"]),
            opponent_move=Move(data["opponent_move"]),
            result=Outcome(data["result"]),
        )
