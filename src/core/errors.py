from __future__ import annotations

from typing import Literal, Optional


KeyProblem = Literal["empty", "too_long", "illegal_characters"]


class StoreError(Exception):
    """Base error for the key-value store."""

    code = "STORE_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ValidationError(StoreError):
    """Raised when an argument other than a key or value is invalid."""

    code = "VALIDATION_ERROR"


class InvalidKeyError(StoreError):
    """Raised when a key fails the format constraint."""

    code = "INVALID_KEY"

    def __init__(self, key: object, reason: KeyProblem, message: str, *, code: Optional[str] = None) -> None:
        super().__init__(message, code=code)
        self.key = key
        self.reason = reason


class SerializationError(StoreError):
    """Raised when a value cannot be serialized, or stored text cannot be parsed back."""

    code = "SERIALIZATION_ERROR"

    def __init__(self, message: str, *, path: Optional[str] = None, code: Optional[str] = None) -> None:
        super().__init__(message, code=code)
        self.path = path


class QuotaExceededError(StoreError):
    """Raised when a new key is offered to a store that is already full."""

    code = "QUOTA_EXCEEDED"

    def __init__(self, max_size: int) -> None:
        super().__init__(f"Maximum storage size of {max_size} items exceeded")
        self.max_size = max_size
