"""Serialization safety helpers.

Values accepted by the store must survive a JSON round trip through a
future network or disk backed store, so the in-memory store enforces the
same contract. check_serializable walks a value over a closed set of
permitted shapes and reports the first offending location.
"""

from __future__ import annotations

import datetime as dt
import json
import math
from dataclasses import dataclass
from typing import Any, Optional, Set

from core.errors import SerializationError


@dataclass(frozen=True, slots=True)
class SerializationCheck:
    ok: bool
    path: Optional[str] = None
    reason: Optional[str] = None


_OK = SerializationCheck(ok=True)


def check_serializable(value: Any, path: str = "$") -> SerializationCheck:
    """Validate value recursively.

    Permitted: None, bool, int, finite float, str, date/datetime,
    list/tuple of permitted values, and dicts with str keys and permitted
    values. Containers that reach themselves are rejected.
    """
    try:
        return _check(value, path, set())
    except RecursionError:
        return SerializationCheck(ok=False, path=path, reason="nesting too deep")


def _check(value: Any, path: str, active: Set[int]) -> SerializationCheck:
    # active holds ids of the containers on the current path
    if value is None or isinstance(value, (str, int, bool)):
        return _OK

    if isinstance(value, float):
        if math.isfinite(value):
            return _OK
        return SerializationCheck(ok=False, path=path, reason=f"non-finite number {value!r}")

    # datetime is a subclass of date
    if isinstance(value, dt.date):
        return _OK

    if isinstance(value, (list, tuple, dict)):
        if id(value) in active:
            return SerializationCheck(ok=False, path=path, reason="circular reference")
        active.add(id(value))
        try:
            return _check_container(value, path, active)
        finally:
            active.discard(id(value))

    return SerializationCheck(
        ok=False,
        path=path,
        reason=f"unsupported type {type(value).__name__}",
    )


def _check_container(value: Any, path: str, active: Set[int]) -> SerializationCheck:
    if isinstance(value, dict):
        for k, item in value.items():
            if not isinstance(k, str):
                return SerializationCheck(
                    ok=False,
                    path=path,
                    reason=f"mapping key {k!r} is not a string",
                )
            res = _check(item, f"{path}.{k}", active)
            if not res.ok:
                return res
        return _OK

    for i, item in enumerate(value):
        res = _check(item, f"{path}[{i}]", active)
        if not res.ok:
            return res
    return _OK


def ensure_serializable(value: Any) -> None:
    res = check_serializable(value)
    if not res.ok:
        raise SerializationError(
            f"Value is not serializable at {res.path}: {res.reason}",
            path=res.path,
        )


def _json_default(obj: Any) -> Any:
    if isinstance(obj, dt.date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def safe_serialize(value: Any) -> str:
    ensure_serializable(value)
    try:
        return json.dumps(value, default=_json_default, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize value: {e}") from e


def safe_deserialize(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to deserialize value: {e}",
            code="DESERIALIZATION_ERROR",
        ) from e
