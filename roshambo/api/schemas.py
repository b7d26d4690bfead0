"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between clients and the engine.
Moves and results use the stored values ("Rock", "HostWins", ...).

Error Codes:
- INVALID_IDENTIFIER: A participant identifier is malformed
- INVALID_MOVE: NoMove submitted as a player's choice
- GAME_IN_PROGRESS: A game already exists for the (host, opponent) pair
- NO_SUCH_GAME: No game exists for the pair
- GAME_ALREADY_RESOLVED: The game already has a result
- VALIDATION_ERROR: Request is missing data (e.g. sender header)
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.state import Move as EngineMove


# =============================================================================
# Enums
# =============================================================================

class MoveChoice(str, Enum):
    """Moves a player can submit."""
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"
    NO_MOVE = "NoMove"

    def to_engine(self) -> EngineMove:
        return EngineMove(self.value)


class GameResult(str, Enum):
    """Game result values."""
    STARTED = "Started"
    HOST_WINS = "HostWins"
    OPPONENT_WINS = "OpponentWins"
    TIE = "Tie"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_MOVE = "INVALID_MOVE"
    GAME_IN_PROGRESS = "GAME_IN_PROGRESS"
    NO_SUCH_GAME = "NO_SUCH_GAME"
    GAME_ALREADY_RESOLVED = "GAME_ALREADY_RESOLVED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class SessionInfo(BaseModel):
    """A game's moves and result."""
    host_move: MoveChoice
    opponent_move: MoveChoice = MoveChoice.NO_MOVE
    result: GameResult = GameResult.STARTED

    @classmethod
    def from_session(cls, session) -> "SessionInfo":
        return cls(
            host_move=session.host_move.value,
            opponent_move=session.opponent_move.value,
            result=session.result.value,
        )


class GameEntry(BaseModel):
    """A stored game and its key."""
    key: str = Field(description="Hex of the encoded (host, opponent) key")
    host_id: str
    opponent_id: str
    game: SessionInfo

    @classmethod
    def from_record(cls, record) -> "GameEntry":
        return cls(
            key=record.encoded_key.hex(),
            host_id=record.key.host_id,
            opponent_id=record.key.opponent_id,
            game=SessionInfo.from_session(record.session),
        )


# =============================================================================
# Request Models
# =============================================================================

class StartGameRequest(BaseModel):
    """Start a game against an opponent. The sender is the host."""
    opponent_id: str = Field(..., description="Identifier of the opponent")
    first_move: MoveChoice = Field(..., description="Host's move")


class SubmitMoveRequest(BaseModel):
    """Answer a game. The sender is the opponent."""
    move: MoveChoice = Field(..., description="Opponent's move")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class StartGameResponse(BaseModel):
    """Acknowledgement of a started game."""
    method: str = "start_game"
    host_id: str
    opponent_id: str
    api_version: str = "v1"


class SubmitMoveResponse(BaseModel):
    """Result of answering a game."""
    method: str = "submit_move"
    host_id: str
    opponent_id: str
    result: GameResult
    game: SessionInfo
    api_version: str = "v1"


class GamesResponse(BaseModel):
    """Ordered list of games."""
    games: list[GameEntry] = Field(default_factory=list)
    count: int = 0
    api_version: str = "v1"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    store: str = Field(description="memory or file")
