"""
Engine Core - Game records, rules and identifier validation.

The core defines:
1. Move and Outcome enumerations
2. SessionKey and Session records
3. The Rock/Paper/Scissors outcome rules
4. Identifier validation
5. The error taxonomy shared by every layer
"""

from .state import Move, Outcome, Session, SessionKey
from .rules import beats, resolve_outcome
from .identifiers import validate_identifier
from .errors import (
    GameError,
    InvalidIdentifier,
    InvalidMove,
    GameInProgress,
    NoSuchGame,
    GameAlreadyResolved,
)

__all__ = [
    "Move",
    "Outcome",
    "Session",
    "SessionKey",
    "beats",
    "resolve_outcome",
    "validate_identifier",
    "GameError",
    "InvalidIdentifier",
    "InvalidMove",
    "GameInProgress",
    "NoSuchGame",
    "GameAlreadyResolved",
]
