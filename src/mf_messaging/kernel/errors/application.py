"""Application-layer errors — raised at the broker's public seams."""

from __future__ import annotations

from mf_messaging.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
