"""
FastAPI Application - REST API for game clients.

Endpoints:
    POST   /api/v1/games                          Start a game (sender is host)
    POST   /api/v1/games/{host_id}/move           Answer a game (sender is opponent)
    GET    /api/v1/games                          List all games
    GET    /api/v1/games/{host_id}/{opponent_id}  Get one game
    GET    /api/v1/hosts/{host_id}/games          List one host's games
    GET    /health                                Health check

The caller identity comes from the X-Sender header, which an upstream
gateway is expected to set after authenticating the caller.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging

from fastapi import FastAPI, Header
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..storage import FileKVStore, open_store
from .service import APIService
from .schemas import (
    StartGameRequest,
    SubmitMoveRequest,
    StartGameResponse,
    SubmitMoveResponse,
    GamesResponse,
    GameEntry,
    ErrorResponse,
    HealthResponse,
    ErrorCode,
)


logger = logging.getLogger("roshambo.api")

ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_IDENTIFIER: 400,
    ErrorCode.INVALID_MOVE: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NO_SUCH_GAME: 404,
    ErrorCode.GAME_IN_PROGRESS: 409,
    ErrorCode.GAME_ALREADY_RESOLVED: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: Optional[APIService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (built from settings if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or Settings.from_env()
    api_service = service or APIService(
        backend=open_store(settings.store_path),
        owner=settings.owner,
    )

    app = FastAPI(
        title="Roshambo API",
        description="""
Rock/Paper/Scissors games between pairs of players.

## Flow

1. The host calls `POST /api/v1/games` with their move and the opponent's id
2. The opponent calls `POST /api/v1/games/{host_id}/move` with their answer
3. The response carries the result (`HostWins`, `OpponentWins` or `Tie`)

Only one game can exist per (host, opponent) pair.

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_IDENTIFIER` | Malformed player identifier |
| `INVALID_MOVE` | `NoMove` submitted as a move |
| `GAME_IN_PROGRESS` | A game already exists for the pair |
| `NO_SUCH_GAME` | No game exists for the pair |
| `GAME_ALREADY_RESOLVED` | The game is already finished |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=ERROR_STATUS.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    def missing_sender() -> JSONResponse:
        return make_error_response(ErrorResponse(
            error="X-Sender header is required",
            error_code=ErrorCode.VALIDATION_ERROR,
        ))

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=StartGameResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid identifier or move"},
            409: {"model": ErrorResponse, "description": "Game already exists"},
        },
        tags=["Games"],
        summary="Start a game",
    )
    def start_game(
        request: StartGameRequest,
        x_sender: Annotated[Optional[str], Header(description="Host identifier")] = None,
    ) -> Union[StartGameResponse, JSONResponse]:
        """
        Start a game against `opponent_id` with the host's `first_move`.
        """
        if not x_sender:
            return missing_sender()

        response = api_service.start_game(x_sender, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/games/{host_id}/move",
        response_model=SubmitMoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid identifier or move"},
            404: {"model": ErrorResponse, "description": "Game not found"},
            409: {"model": ErrorResponse, "description": "Game already finished"},
        },
        tags=["Games"],
        summary="Answer a game",
    )
    def submit_move(
        host_id: str,
        request: SubmitMoveRequest,
        x_sender: Annotated[Optional[str], Header(description="Opponent identifier")] = None,
    ) -> Union[SubmitMoveResponse, JSONResponse]:
        """
        Submit the opponent's move for the game `host_id` started.
        """
        if not x_sender:
            return missing_sender()

        response = api_service.submit_move(x_sender, host_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/games",
        response_model=GamesResponse,
        tags=["Queries"],
        summary="List all games",
    )
    def query_all_games() -> GamesResponse:
        return api_service.query_all_games()

    @app.get(
        "/api/v1/games/{host_id}/{opponent_id}",
        response_model=GameEntry,
        responses={404: {"model": ErrorResponse}},
        tags=["Queries"],
        summary="Get one game",
    )
    def get_game(host_id: str, opponent_id: str) -> Union[GameEntry, JSONResponse]:
        response = api_service.get_game(host_id, opponent_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/hosts/{host_id}/games",
        response_model=GamesResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Queries"],
        summary="List one host's games",
    )
    def query_host_games(host_id: str) -> Union[GamesResponse, JSONResponse]:
        """Games hosted by `host_id`, ordered by opponent."""
        response = api_service.query_host_games(host_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="roshambo",
            version=__version__,
            store="file" if isinstance(api_service.backend, FileKVStore) else "memory",
        )

    logger.info("api ready (store=%s)", settings.store_path or "memory")
    return app
