from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("repl_snippets")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class AppSettings:
    """Runtime configuration for the command line and MCP surfaces."""

    settings_path: str | None
    log_level: str
    output_window_active: bool

    @classmethod
    def from_env(cls) -> "AppSettings":
        def _bool_env(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if raw is None:
                return default
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                return True
            if value in _FALSE_VALUES:
                return False
            logger.warning("Invalid boolean for %s: %s", name, raw)
            return default

        return cls(
            settings_path=os.getenv("REPL_SNIPPETS_SETTINGS") or None,
            log_level=os.getenv("REPL_SNIPPETS_LOG_LEVEL", "WARNING"),
            output_window_active=_bool_env("REPL_SNIPPETS_OUTPUT_WINDOW_ACTIVE", False),
        )


@dataclass(slots=True, frozen=True)
class StaticSession:
    """Session state whose output-window flag is fixed at construction."""

    output_window_active: bool = False


__all__ = ["AppSettings", "StaticSession"]
