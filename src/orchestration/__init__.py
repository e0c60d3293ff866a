"""Orchestration components for resolving and evaluating snippets."""

from .command import CustomSnippetCommand, evaluate_custom_snippet
from .dispatch import EvaluationDispatcher, evaluate_snippet
from .interpolation import TOKEN_FIELDS, interpolate_code
from .options import EvaluationOptions, derive_options
from .selector import Selection, select_snippet

__all__ = [
    "CustomSnippetCommand",
    "EvaluationDispatcher",
    "EvaluationOptions",
    "Selection",
    "TOKEN_FIELDS",
    "derive_options",
    "evaluate_custom_snippet",
    "evaluate_snippet",
    "interpolate_code",
    "select_snippet",
]
