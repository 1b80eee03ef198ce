from __future__ import annotations

import re
from typing import Tuple

from core.errors import InvalidKeyError

"""
Key utilities used by the store and its callers.

Validates the key format accepted by every store operation and builds
'<namespace>:<id>' keys used to emulate separate tables in one flat space.
"""


MAX_KEY_LENGTH = 250

_KEY_RE = re.compile(r"^[a-zA-Z0-9_\-:.]+$")


def validate_key(key: object) -> str:
    """Return the key unchanged if it is acceptable, else raise InvalidKeyError."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(
            key,
            "empty",
            "Storage key must be a non-empty string",
            code="INVALID_KEY",
        )

    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyError(
            key,
            "too_long",
            f"Storage key must not exceed {MAX_KEY_LENGTH} characters (got {len(key)})",
            code="KEY_TOO_LONG",
        )

    # fullmatch so a trailing newline cannot slip past '$'
    if not _KEY_RE.fullmatch(key):
        raise InvalidKeyError(
            key,
            "illegal_characters",
            f"Storage key {key!r} must only contain letters, digits, dashes, underscores, colons and dots",
            code="INVALID_KEY_FORMAT",
        )

    return key


def namespaced_key(namespace: str, key: str) -> str:
    return f"{namespace}:{key}"


def split_namespaced_key(key: str) -> Tuple[str, str]:
    """Split 'ns:rest' at the first colon; keys without a colon have an empty namespace."""
    ns, sep, rest = key.partition(":")
    if not sep:
        return "", key
    return ns, rest
