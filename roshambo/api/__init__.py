"""
API Module - Client interface.

Exposes the engine over REST:
1. Host starts a game with their move
2. Opponent answers with theirs
3. Anyone can list all games, or one host's games

The caller identity (sender) is supplied by the transport: the
X-Sender header over HTTP, a positional argument on the CLI.
"""

from .schemas import (
    # Requests
    StartGameRequest,
    SubmitMoveRequest,
    # Responses
    StartGameResponse,
    SubmitMoveResponse,
    GamesResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    GameEntry,
    SessionInfo,
    MoveChoice,
    GameResult,
    ErrorCode,
)
from .service import APIService

__all__ = [
    # Requests
    "StartGameRequest",
    "SubmitMoveRequest",
    # Responses
    "StartGameResponse",
    "SubmitMoveResponse",
    "GamesResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "GameEntry",
    "SessionInfo",
    "MoveChoice",
    "GameResult",
    "ErrorCode",
    # Service
    "APIService",
]
