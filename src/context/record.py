from __future__ import annotations

from dataclasses import dataclass

from ..ports import ContextProvider, HoverInfo


@dataclass(slots=True, frozen=True)
class ContextRecord:
    """Snapshot of the editing context for one command invocation."""

    current_line: int | None = None
    current_column: int | None = None
    current_filename: str | None = None
    ns: str | None = None
    repl: str | None = None
    selection: str | None = None
    current_form: str | None = None
    enclosing_form: str | None = None
    top_level_form: str | None = None
    current_fn: str | None = None
    top_level_defined_symbol: str | None = None
    head: str | None = None
    tail: str | None = None
    hover_line: int | None = None
    hover_column: int | None = None
    hover_filename: str | None = None
    hover_text: str | None = None


def build_context_record(
    provider: ContextProvider,
    *,
    ns: str | None,
    repl: str | None,
    hover: HoverInfo | None = None,
) -> ContextRecord:
    """Query the provider once for every field the templates can reference."""
    return ContextRecord(
        current_line=provider.cursor_line(),
        current_column=provider.cursor_column(),
        current_filename=provider.file_path(),
        ns=ns,
        repl=repl,
        selection=provider.selection_text(),
        current_form=provider.current_form(),
        enclosing_form=provider.enclosing_form(),
        top_level_form=provider.top_level_form(),
        current_fn=provider.current_function(),
        top_level_defined_symbol=provider.top_level_defined_symbol(),
        head=provider.head(),
        tail=provider.tail(),
        hover_line=hover.line if hover else None,
        hover_column=hover.column if hover else None,
        hover_filename=hover.file if hover else None,
        hover_text=hover.text if hover else None,
    )


__all__ = ["ContextRecord", "build_context_record"]
