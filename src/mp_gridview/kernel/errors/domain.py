"""Domain errors — out-of-range values handed to pagination and sorting state."""

from __future__ import annotations

from typing import Any

from mp_gridview.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value violates a pagination or sorting rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures, e.g.
    ``{"field": "page_size", "value": 0, "reason": "must be >= 1"}``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: Any, reason: str) -> "ValidationError":
        """Build an error describing a single invalid field."""
        return cls(
            f"{field} {reason}",
            errors=[{"field": field, "value": value, "reason": reason}],
        )

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
