"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping

from commitflow.config.settings.commitflow import CommitflowSettings
from commitflow.config.validation import InvalidSettingValueError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class EnvSettingsLoader:
    """Build :class:`CommitflowSettings` from ``{PREFIX}_{FIELD}`` variables.

    Unset variables keep the field default. A variable carrying the prefix
    but naming no field is rejected, so a typo such as
    ``COMMITFLOW_UOW_ATEMPTS`` cannot silently fall back to the default.

    *environ* defaults to :data:`os.environ`; pass a mapping in tests.
    """

    def __init__(self, environ: Mapping[str, str] | None = None, prefix: str = "COMMITFLOW") -> None:
        self._environ = environ
        self._prefix = f"{prefix.upper()}_"

    def load(self) -> CommitflowSettings:
        environ = self._environ if self._environ is not None else os.environ
        fields = {f"{self._prefix}{field.name.upper()}": field for field in dataclasses.fields(CommitflowSettings)}

        for key in environ:
            if key.startswith(self._prefix) and key not in fields:
                raise InvalidSettingValueError(key, environ[key], "not a commitflow setting")

        values: dict[str, Any] = {}
        for key, field in fields.items():
            raw = environ.get(key)
            if raw is not None:
                values[field.name] = self._coerce(key, raw.strip(), field.type)
        return CommitflowSettings(**values)

    @staticmethod
    def _coerce(key: str, raw: str, type_name: Any) -> Any:
        if type_name == "int":
            try:
                return int(raw)
            except ValueError:
                raise InvalidSettingValueError(key, raw, "expected an integer") from None
        if type_name == "bool":
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise InvalidSettingValueError(key, raw, f"expected one of {sorted(_TRUE | _FALSE)}")
        return raw


__all__ = ["EnvSettingsLoader"]
