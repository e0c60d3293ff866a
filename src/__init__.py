"""Core package for custom REPL command snippets."""

from .snippet import SnippetDefinition, SnippetRegistry, SnippetScopes
from .context import ContextRecord, StaticContextProvider
from .orchestration import CustomSnippetCommand, evaluate_snippet, interpolate_code

__all__ = [
    "ContextRecord",
    "CustomSnippetCommand",
    "SnippetDefinition",
    "SnippetRegistry",
    "SnippetScopes",
    "StaticContextProvider",
    "evaluate_snippet",
    "interpolate_code",
]
