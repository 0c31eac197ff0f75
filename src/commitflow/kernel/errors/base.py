"""Root error class for the commitflow error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured context, e.g. the offending attempt count or
            binding name. Chain the triggering exception with
            ``raise ... from exc``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Keyword arguments describing this error in a structured log entry.

        ``detail`` stays nested under ``error_detail`` so its keys can never
        collide with the logger's own arguments (``event``, ``exc_info``).
        """
        fields: dict[str, Any] = {"error_code": self.code}
        if self.detail:
            fields["error_detail"] = self.detail
        return fields


__all__ = ["BaseError"]
