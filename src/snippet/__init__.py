"""Snippet definitions, configuration scopes and the merged registry."""

from .config import SnippetScopes, load_settings_file
from .model import ResolvedSnippet, SnippetDefinition, SnippetValidationError
from .registry import DEFAULT_REPL, SnippetIndex, SnippetRegistry

__all__ = [
    "DEFAULT_REPL",
    "ResolvedSnippet",
    "SnippetDefinition",
    "SnippetIndex",
    "SnippetRegistry",
    "SnippetScopes",
    "SnippetValidationError",
    "load_settings_file",
]
