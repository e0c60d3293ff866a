from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Sequence

logger = logging.getLogger("repl_snippets")

SETTING_GLOBAL = "customREPLCommandSnippetsGlobal"
SETTING_WORKSPACE = "customREPLCommandSnippetsWorkspace"
SETTING_WORKSPACE_FOLDER = "customREPLCommandSnippetsWorkspaceFolder"
SETTING_LEGACY = "customREPLCommandSnippets"


@dataclass(slots=True, frozen=True)
class SnippetScopes:
    """Raw snippet entries for each configuration scope, in merge order."""

    global_snippets: Sequence[Any] = field(default_factory=tuple)
    workspace_snippets: Sequence[Any] = field(default_factory=tuple)
    workspace_folder_snippets: Sequence[Any] = field(default_factory=tuple)
    legacy_snippets: Sequence[Any] = field(default_factory=tuple)

    def merged(self) -> List[Any]:
        """Concatenate global, workspace and folder scopes, else the legacy list."""
        snippets = [
            *self.global_snippets,
            *self.workspace_snippets,
            *self.workspace_folder_snippets,
        ]
        if not snippets:
            snippets = list(self.legacy_snippets)
        return snippets

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "SnippetScopes":
        return cls(
            global_snippets=_as_list(settings, SETTING_GLOBAL),
            workspace_snippets=_as_list(settings, SETTING_WORKSPACE),
            workspace_folder_snippets=_as_list(settings, SETTING_WORKSPACE_FOLDER),
            legacy_snippets=_as_list(settings, SETTING_LEGACY),
        )


def load_settings_file(path: str | Path) -> SnippetScopes:
    """Read snippet scopes from a JSON settings file."""
    settings_path = Path(path)
    with settings_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, Mapping):
        raise ValueError(f"Settings file must contain a JSON object: {settings_path}")
    logger.debug("Loaded snippet settings from %s", settings_path)
    return SnippetScopes.from_settings(data)


def _as_list(settings: Mapping[str, Any], name: str) -> tuple[Any, ...]:
    value = settings.get(name)
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    logger.warning("Ignoring %s: expected a list, got %s", name, type(value).__name__)
    return ()


__all__ = [
    "SETTING_GLOBAL",
    "SETTING_LEGACY",
    "SETTING_WORKSPACE",
    "SETTING_WORKSPACE_FOLDER",
    "SnippetScopes",
    "load_settings_file",
]
