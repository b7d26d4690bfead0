"""
Contract metadata - name and version of the code that owns a store.

Written once on instantiation so a store opened later can tell which
release created it.
"""

from __future__ import annotations
import json
from dataclasses import dataclass

from .kv import KVStore


CONTRACT_INFO_KEY = b"contract_info"


@dataclass(frozen=True)
class ContractVersion:
    contract: str
    version: str


def set_contract_version(backend: KVStore, contract: str, version: str):
    payload = {"contract": contract, "version": version}
    backend.set(CONTRACT_INFO_KEY, json.dumps(payload).encode("utf-8"))


def get_contract_version(backend: KVStore) -> ContractVersion | None:
    raw = backend.get(CONTRACT_INFO_KEY)
    if raw is None:
        return None
    data = json.loads(raw.decode("utf-8"))
    return ContractVersion(contract=data["contract"], version=data["version"])
