from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

# Defaults
_DEFAULT_MAX_PROBLEMS = 1000
_DEFAULT_LOG_LEVEL = "WARNING"

# Key of this server's section in the client's configuration payload
SETTINGS_SECTION = "funlet"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_log_level() -> int:
    raw = os.environ.get("FUNLET_LOG_LEVEL", _DEFAULT_LOG_LEVEL)
    level = getattr(logging, raw.strip().upper(), None)
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class Settings:
    max_number_of_problems: int = _DEFAULT_MAX_PROBLEMS

    @classmethod
    def from_env(cls) -> Settings:
        return cls(max_number_of_problems=int_from_env("FUNLET_MAX_PROBLEMS", _DEFAULT_MAX_PROBLEMS))

    def merge(self, payload: Optional[Mapping[str, Any]]) -> Settings:
        """Apply a client configuration payload; unknown or malformed values are ignored.

        Accepts either the whole settings object ({"funlet": {...}}) or the
        section itself.
        """
        if not isinstance(payload, Mapping):
            return self
        section = payload.get(SETTINGS_SECTION, payload)
        if not isinstance(section, Mapping):
            return self
        value = section.get("maxNumberOfProblems")
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return self
        return replace(self, max_number_of_problems=value)
