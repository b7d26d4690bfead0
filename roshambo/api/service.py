"""
API Service - Business logic layer between API and engine.

The service:
1. Validates the caller identity (sender)
2. Translates request models to engine calls
3. Converts engine errors into ErrorResponse
4. Formats query results

This layer is framework-agnostic (can be used with FastAPI, a CLI, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..engine_core.errors import GameError
from ..engine_core.identifiers import validate_identifier
from ..session import GameManager, GameQueries
from ..storage import KVStore, MemoryKVStore, SessionStore, get_contract_version
from .schemas import (
    ErrorCode,
    ErrorResponse,
    GameEntry,
    GamesResponse,
    SessionInfo,
    StartGameRequest,
    StartGameResponse,
    SubmitMoveRequest,
    SubmitMoveResponse,
)


def error_response(error: GameError) -> ErrorResponse:
    """Convert an engine error into an ErrorResponse."""
    return ErrorResponse(
        error=error.message,
        error_code=ErrorCode(error.error_code),
        details=error.details or None,
    )


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Host starts a game
        service.start_game("alice", StartGameRequest(opponent_id="bob", first_move="Rock"))

        # Opponent answers
        service.submit_move("bob", "alice", SubmitMoveRequest(move="Paper"))

        # Queries
        service.query_host_games("alice")
    """
    backend: KVStore = field(default_factory=MemoryKVStore)
    owner: str = "admin"

    def __post_init__(self):
        self.store = SessionStore(self.backend)
        self.manager = GameManager(self.store)
        self.queries = GameQueries(self.store)
        if get_contract_version(self.backend) is None:
            self.manager.instantiate(self.owner)

    def start_game(
        self,
        sender: str,
        request: StartGameRequest,
    ) -> StartGameResponse | ErrorResponse:
        """
        Start a game hosted by sender.
        """
        try:
            host_id = validate_identifier(sender)
            event = self.manager.start_game(
                host_id,
                request.opponent_id,
                request.first_move.to_engine(),
            )
        except GameError as e:
            return error_response(e)

        return StartGameResponse(
            method=event.method,
            host_id=event.attributes["host"],
            opponent_id=event.attributes["opponent"],
        )

    def submit_move(
        self,
        sender: str,
        host_id: str,
        request: SubmitMoveRequest,
    ) -> SubmitMoveResponse | ErrorResponse:
        """
        Answer the game host_id started against sender.
        """
        try:
            opponent_id = validate_identifier(sender)
            event = self.manager.submit_opponent_move(
                host_id,
                opponent_id,
                request.move.to_engine(),
            )
        except GameError as e:
            return error_response(e)

        return SubmitMoveResponse(
            method=event.method,
            host_id=event.attributes["host"],
            opponent_id=event.attributes["opponent"],
            result=event.attributes["result"],
            game=SessionInfo.from_session(event.session),
        )

    def query_all_games(self) -> GamesResponse:
        records = self.queries.query_all_games()
        return self._games_response(records)

    def query_host_games(self, host_id: str) -> GamesResponse | ErrorResponse:
        try:
            records = self.queries.query_host_games(host_id)
        except GameError as e:
            return error_response(e)
        return self._games_response(records)

    def get_game(self, host_id: str, opponent_id: str) -> GameEntry | ErrorResponse:
        """
        Get a single game.
        """
        try:
            record = self.queries.query_game(host_id, opponent_id)
        except GameError as e:
            return error_response(e)

        if record is None:
            return ErrorResponse(
                error=f"No game between {host_id} and {opponent_id}",
                error_code=ErrorCode.NO_SUCH_GAME,
            )
        return GameEntry.from_record(record)

    def _games_response(self, records) -> GamesResponse:
        games = [GameEntry.from_record(record) for record in records]
        return GamesResponse(games=games, count=len(games))
