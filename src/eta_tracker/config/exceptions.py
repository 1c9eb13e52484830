"""Errors raised while building a tracker configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError


class ConfigError(Exception):
    """Base exception for tracker configuration errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible config error context
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible config error context


class ConfigValidationError(ConfigError):
    """A configuration value was rejected by the tracker's config model.

    The message names every failing field. ``context`` holds the field
    names under ``"fields"`` and, for bounded fields, the accepted range
    under ``"<field>_range"``.
    """

    def __init__(
        self,
        error: ValidationError,
        limits: Mapping[str, tuple[int, int]] | None = None,
    ) -> None:
        """Initialize ConfigValidationError.

        Args:
            error: Validation error raised by pydantic
            limits: Inclusive ``(min, max)`` bounds of numeric fields
        """
        self.field_errors: dict[str, str] = {}
        for err in error.errors():
            field = ".".join(str(loc) for loc in err["loc"]) or "__root__"
            self.field_errors.setdefault(field, err["msg"])

        context: dict[str, Any] = {"fields": sorted(self.field_errors)}  # pyright: ignore[reportAny]
        for field in self.field_errors:
            if limits and field in limits:
                context[f"{field}_range"] = limits[field]

        details = "; ".join(f"{field}: {msg}" for field, msg in self.field_errors.items())
        super().__init__(f"Invalid tracker configuration ({details})", context)
        self.pydantic_error: ValidationError = error

    @property
    def fields(self) -> list[str]:
        """Names of the fields that failed validation."""
        return sorted(self.field_errors)
