"""
Schema Export - Writes JSON Schema files for the API contract.

One file per model, named after the model in snake_case, so client
code generators can consume the contract without running the server.
"""

from __future__ import annotations
import json
import re
from pathlib import Path

from pydantic import BaseModel

from .schemas import (
    StartGameRequest,
    SubmitMoveRequest,
    StartGameResponse,
    SubmitMoveResponse,
    GamesResponse,
    GameEntry,
    ErrorResponse,
)


EXPORTED_MODELS: list[type[BaseModel]] = [
    StartGameRequest,
    SubmitMoveRequest,
    StartGameResponse,
    SubmitMoveResponse,
    GamesResponse,
    GameEntry,
    ErrorResponse,
]


def _file_name(model: type[BaseModel]) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", model.__name__).lower() + ".json"


def export_schemas(out_dir: str | Path) -> list[Path]:
    """
    Write one JSON Schema per exported model into out_dir.

    Any .json file already in out_dir is removed first, so schemas of
    models that no longer exist don't linger. Returns the written paths.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for stale in out_dir.glob("*.json"):
        stale.unlink()

    written = []
    for model in EXPORTED_MODELS:
        path = out_dir / _file_name(model)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        written.append(path)
    return written
