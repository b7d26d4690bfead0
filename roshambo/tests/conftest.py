"""
Pytest fixtures for Roshambo tests.
"""

import pytest

from ..engine_core.state import Move
from ..storage import MemoryKVStore, SessionStore
from ..session import GameManager, GameQueries
from ..api.service import APIService
from .concurrency import SlowMemoryKVStore


@pytest.fixture
def backend() -> MemoryKVStore:
    """Empty in-memory backend."""
    return MemoryKVStore()


@pytest.fixture
def store(backend: MemoryKVStore) -> SessionStore:
    """Session store on an empty backend."""
    return SessionStore(backend)


@pytest.fixture
def manager(store: SessionStore) -> GameManager:
    return GameManager(store)


@pytest.fixture
def queries(store: SessionStore) -> GameQueries:
    return GameQueries(store)


@pytest.fixture
def populated(manager: GameManager) -> GameManager:
    """
    Three games:
    - creator vs an_opponent (Scissors)
    - creator vs diff_opponent (Rock)
    - user vs diff_opponent (Rock)
    """
    manager.start_game("creator", "an_opponent", Move.SCISSORS)
    manager.start_game("creator", "diff_opponent", Move.ROCK)
    manager.start_game("user", "diff_opponent", Move.ROCK)
    return manager


@pytest.fixture
def service() -> APIService:
    """Fresh API service on an in-memory store."""
    return APIService()


@pytest.fixture
def slow_store() -> SessionStore:
    """Session store whose backend reads are slow."""
    return SessionStore(SlowMemoryKVStore())
