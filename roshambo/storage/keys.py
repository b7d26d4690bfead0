"""
Key Encoding - Byte layout for namespaced, composite keys.

Layout:
    namespace prefix = len(namespace) as u16 big-endian + namespace
    session key      = len(host) as u16 big-endian + host + opponent
    storage key      = namespace prefix + session key

The host is length-delimited, so the prefix for host "ab" can never
match a key belonging to host "abc". All of one host's games form a
contiguous range ordered by opponent.
"""

from __future__ import annotations

from ..engine_core.state import SessionKey


MAX_COMPONENT_LENGTH = 0xFFFF


def encode_length(component: bytes) -> bytes:
    """Encode a component's length as 2 big-endian bytes."""
    if len(component) > MAX_COMPONENT_LENGTH:
        raise ValueError(
            f"Key component too long ({len(component)} bytes, max {MAX_COMPONENT_LENGTH})"
        )
    return len(component).to_bytes(2, "big")


def length_prefixed(component: bytes) -> bytes:
    return encode_length(component) + component


def namespace_prefix(namespace: str) -> bytes:
    return length_prefixed(namespace.encode("utf-8"))


def encode_session_key(key: SessionKey) -> bytes:
    """Encode a SessionKey (without namespace)."""
    return length_prefixed(key.host_id.encode("utf-8")) + key.opponent_id.encode("utf-8")


def decode_session_key(encoded: bytes) -> SessionKey:
    """Decode bytes produced by encode_session_key."""
    if len(encoded) < 2:
        raise ValueError("Encoded key too short")
    host_length = int.from_bytes(encoded[:2], "big")
    host_end = 2 + host_length
    if len(encoded) < host_end:
        raise ValueError("Encoded key truncated")
    return SessionKey(
        host_id=encoded[2:host_end].decode("utf-8"),
        opponent_id=encoded[host_end:].decode("utf-8"),
    )


def host_prefix(host_id: str) -> bytes:
    """Prefix shared by every session key hosted by host_id."""
    return length_prefixed(host_id.encode("utf-8"))


def prefix_upper_bound(prefix: bytes) -> bytes | None:
    """
    Smallest key greater than every key starting with prefix.

    Returns None when no such key exists (prefix is empty or all 0xFF).
    """
    trimmed = prefix.rstrip(b"\xff")
    if not trimmed:
        return None
    return trimmed[:-1] + bytes([trimmed[-1] + 1])
