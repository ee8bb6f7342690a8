"""Validation errors shared across GenString."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Configuration or input error with a machine-readable type.

    Attributes:
        error_type: Short identifier such as ``missing_target``
        message: Human-readable description
        details: Extra context supplied by the raising site
    """

    def __init__(self, error_type: str, message: str, **details: Any) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details: dict[str, Any] = dict(details)

    def __str__(self) -> str:
        return f"[{self.error_type}] {self.message}"


__all__ = ["ValidationError"]
