from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

if TYPE_CHECKING:
    from .snippet.model import SnippetValidationError

SETTINGS_NAME = "customREPLCommandSnippets"


class SnippetError(Exception):
    """Base class for errors raised by the snippet command pipeline."""


class SnippetConfigurationError(SnippetError):
    """One or more configured snippets are missing required values."""

    def __init__(self, errors: Sequence[SnippetValidationError]):
        self.errors = list(errors)
        super().__init__(format_configuration_errors(self.errors))


class SelectionCancelled(SnippetError):
    """Raised by a picker when the user dismisses the selection."""


def format_configuration_errors(errors: Sequence[SnippetValidationError]) -> str:
    payload = []
    for error in errors:
        entry: Dict[str, Any] = {"keys": error.missing_fields}
        if error.name is not None:
            entry = {"name": error.name, **entry}
        payload.append(entry)
    return (
        f"Errors found in the `{SETTINGS_NAME}` setting. Values missing for: "
        + json.dumps(payload, separators=(",", ":"))
    )


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the project logger with a stream handler."""
    logger = logging.getLogger("repl_snippets")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class ErrorHandler:
    """Collects snippet configuration errors and renders them for humans."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("repl_snippets")
        self.errors: List[Dict[str, Any]] = []

    def collect(self, error: SnippetConfigurationError) -> None:
        for entry in error.errors:
            self.errors.append({"name": entry.name, "missing": list(entry.missing_fields)})
        self.logger.error("%d invalid snippet definitions", len(error.errors))

    def clear_errors(self) -> None:
        self.errors.clear()

    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        if not self.errors:
            return ""

        lines = [f"\n⚠️  {len(self.errors)} snippet(s) in `{SETTINGS_NAME}` are invalid", ""]
        for error in self.errors[:5]:
            name = error["name"] if error["name"] else "<unnamed>"
            lines.append(f"  • {name}: missing {', '.join(error['missing'])}")
        if len(self.errors) > 5:
            lines.append(f"  ... and {len(self.errors) - 5} more")

        return "\n".join(lines)


__all__ = [
    "ErrorHandler",
    "SelectionCancelled",
    "SnippetConfigurationError",
    "SnippetError",
    "format_configuration_errors",
    "setup_logging",
]
