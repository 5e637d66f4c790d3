"""Identifier format checks.

An identifier is exactly five ASCII digits. Identifiers are opaque: they are
compared and sent over the wire, never used in arithmetic.
"""

from __future__ import annotations

import re
from typing import Iterable

_IDENTIFIER_RE = re.compile(r"[0-9]{5}")


def is_identifier(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return _IDENTIFIER_RE.fullmatch(value) is not None


def are_identifiers(values: Iterable[object]) -> bool:
    """True when every value is an identifier (vacuously true for no values)."""

    return all(is_identifier(v) for v in values)
