"""Application-layer errors — misuse of the toolkit by calling code."""

from __future__ import annotations

from mp_gridview.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised when the toolkit is wired or configured incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
