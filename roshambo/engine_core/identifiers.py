"""
Identifier validation.

Participant identifiers are opaque. The only requirement is that they
are already in canonical form: 3-64 characters of lowercase ASCII
letters, digits, "_", "-" or ".". Input is stripped but never
lowercased, so "Alice" is rejected rather than silently becoming "alice".
"""

from __future__ import annotations
import re

from .errors import InvalidIdentifier


MIN_LENGTH = 3
MAX_LENGTH = 64

_CANONICAL = re.compile(r"[a-z0-9_.\-]+")


def validate_identifier(raw: str) -> str:
    """
    Validate a raw identifier and return its canonical form.

    Raises InvalidIdentifier on malformed input.
    """
    if not isinstance(raw, str):
        raise InvalidIdentifier("Identifier must be a string", identifier=repr(raw))

    identifier = raw.strip()
    if len(identifier) < MIN_LENGTH:
        raise InvalidIdentifier(
            f"Identifier too short (min {MIN_LENGTH} characters)",
            identifier=identifier,
        )
    if len(identifier) > MAX_LENGTH:
        raise InvalidIdentifier(
            f"Identifier too long (max {MAX_LENGTH} characters)",
            identifier=identifier,
        )
    if not _CANONICAL.fullmatch(identifier):
        raise InvalidIdentifier(
            "Identifier not normalized: use lowercase letters, digits, '_', '-' or '.'",
            identifier=identifier,
        )
    return identifier
