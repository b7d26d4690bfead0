"""
Storage Module - Ordered key-value persistence for games.

Everything the engine persists lives in one ordered byte-keyed store:
- The "games" namespace, keyed by (host, opponent)
- A single contract_info record with name and version

Key layout is length-delimited so one host's games are a single
contiguous range, which is what makes per-host queries a prefix scan.
"""

from .kv import KVStore, MemoryKVStore, FileKVStore, StoreCorrupted, open_store
from .games import SessionStore, GameRecord, AlreadyExists, GAMES_NAMESPACE
from .metadata import ContractVersion, get_contract_version, set_contract_version

__all__ = [
    "KVStore",
    "MemoryKVStore",
    "FileKVStore",
    "StoreCorrupted",
    "open_store",
    "SessionStore",
    "GameRecord",
    "AlreadyExists",
    "GAMES_NAMESPACE",
    "ContractVersion",
    "get_contract_version",
    "set_contract_version",
]
