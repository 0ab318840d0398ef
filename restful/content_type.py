"""Helpers for MIME content type keys."""

from __future__ import annotations

from typing import Any

from restful.errors import InvalidArgumentError


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def media_type(value: str) -> str:
    """Return the bare, lowercased media type without parameters."""
    parts = _split_parameters(value)
    return parts[0].lower() if parts else ""


def validate_content_type(value: Any) -> str:
    """Raise InvalidArgumentError unless ``value`` is a usable registry key."""
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Content type must be a string, got {type(value).__name__}"
        )
    if not value.strip():
        raise InvalidArgumentError("Content type must not be empty")
    return value
