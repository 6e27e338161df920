"""Root error class for the mp-gridview error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``str(err)`` is the message followed by the detail context, so a failed
    sort registration reads ``Sort attribute 'x' is not registered
    (attribute='x', registered=['age'])`` in a traceback or a log line.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context such as the offending attribute or parameter.
        cause: Exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.detail.items())
        return f"{self.message} ({context})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form, suitable as structlog event fields."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
