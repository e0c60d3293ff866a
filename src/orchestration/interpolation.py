from __future__ import annotations

import re
from typing import Any, Mapping

from ..context import ContextRecord

# Placeholder token -> ContextRecord attribute.
TOKEN_FIELDS: Mapping[str, str] = {
    "$line": "current_line",
    "$hover-line": "hover_line",
    "$column": "current_column",
    "$hover-column": "hover_column",
    "$file": "current_filename",
    "$hover-file": "hover_filename",
    "$ns": "ns",
    "$repl": "repl",
    "$selection": "selection",
    "$hover-text": "hover_text",
    "$current-form": "current_form",
    "$enclosing-form": "enclosing_form",
    "$top-level-form": "top_level_form",
    "$current-fn": "current_fn",
    "$top-level-defined-symbol": "top_level_defined_symbol",
    "$head": "head",
    "$tail": "tail",
}

# Longest first so a token never loses to a shorter prefix of itself.
_TOKEN_PATTERN = re.compile(
    "|".join(re.escape(token) for token in sorted(TOKEN_FIELDS, key=len, reverse=True))
)


def _render(value: Any) -> str:
    # Unset fields are substituted as the literal text "undefined".
    if value is None:
        return "undefined"
    return str(value)


def interpolate_code(code: str, context: ContextRecord) -> str:
    """Replace every placeholder token in ``code`` with its context value.

    Substituted values are not scanned again, so a selection that itself
    contains ``$ns`` is inserted verbatim.
    """
    return _TOKEN_PATTERN.sub(
        lambda match: _render(getattr(context, TOKEN_FIELDS[match.group(0)])),
        code,
    )


__all__ = ["TOKEN_FIELDS", "interpolate_code"]
