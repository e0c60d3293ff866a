from __future__ import annotations

from dataclasses import dataclass

from ..ports import HoverInfo


@dataclass(slots=True)
class StaticContextProvider:
    """Context provider backed by fixed values.

    Used by the command line and MCP surfaces, where there is no live editor
    to ask; every span is whatever the caller passed in.
    """

    line: int = 0
    column: int = 0
    file: str = ""
    selection: str = ""
    ns: str | None = None
    repl: str | None = None
    target_language: bool = True
    form: str | None = None
    enclosing: str | None = None
    top_level: str | None = None
    function: str | None = None
    defined_symbol: str | None = None
    list_head: str | None = None
    list_tail: str | None = None
    hover_info: HoverInfo | None = None

    def cursor_line(self) -> int:
        return self.line

    def cursor_column(self) -> int:
        return self.column

    def file_path(self) -> str:
        return self.file

    def selection_text(self) -> str:
        return self.selection

    def current_form(self) -> str | None:
        return self.form

    def enclosing_form(self) -> str | None:
        return self.enclosing

    def top_level_form(self) -> str | None:
        return self.top_level

    def current_function(self) -> str | None:
        return self.function

    def top_level_defined_symbol(self) -> str | None:
        return self.defined_symbol

    def head(self) -> str | None:
        return self.list_head

    def tail(self) -> str | None:
        return self.list_tail

    def is_target_language(self) -> bool:
        return self.target_language

    def namespace(self) -> str | None:
        return self.ns

    def repl_session_type(self) -> str | None:
        return self.repl

    def hover(self) -> HoverInfo | None:
        return self.hover_info


__all__ = ["StaticContextProvider"]
