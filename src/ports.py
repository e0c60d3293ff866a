"""Contracts for the collaborators the snippet command talks to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Protocol, Sequence

if TYPE_CHECKING:
    from .orchestration.options import EvaluationOptions
    from .snippet.config import SnippetScopes


@dataclass(slots=True, frozen=True)
class HoverInfo:
    """Position and text of the symbol under the mouse pointer."""

    line: int
    column: int
    file: str
    text: str


class ContextProvider(Protocol):
    """Positional and syntactic facts about the current editing location.

    Span extractors return ``None`` when no enclosing construct exists at the
    cursor.
    """

    def cursor_line(self) -> int: ...

    def cursor_column(self) -> int: ...

    def file_path(self) -> str: ...

    def selection_text(self) -> str: ...

    def current_form(self) -> str | None: ...

    def enclosing_form(self) -> str | None: ...

    def top_level_form(self) -> str | None: ...

    def current_function(self) -> str | None: ...

    def top_level_defined_symbol(self) -> str | None: ...

    def head(self) -> str | None: ...

    def tail(self) -> str | None: ...

    def is_target_language(self) -> bool: ...

    def namespace(self) -> str | None: ...

    def repl_session_type(self) -> str | None: ...

    def hover(self) -> HoverInfo | None: ...


class SessionState(Protocol):
    @property
    def output_window_active(self) -> bool: ...


class QuickPick(Protocol):
    async def pick(
        self,
        values: Sequence[str],
        *,
        placeholder: str,
        save_as: str | None = None,
    ) -> str | None: ...


class Messenger(Protocol):
    def show_error(self, message: str) -> None: ...

    def show_info(self, message: str) -> None: ...


class EvaluationBackend(Protocol):
    async def evaluate_in_output_window(
        self,
        code: str,
        repl: str | None,
        ns: str | None,
        options: "EvaluationOptions",
    ) -> Any: ...


class OutputSurface(Protocol):
    def append_prompt(self) -> None: ...


SnippetConfigSource = Callable[[], "SnippetScopes"]


__all__ = [
    "ContextProvider",
    "EvaluationBackend",
    "HoverInfo",
    "Messenger",
    "OutputSurface",
    "QuickPick",
    "SessionState",
    "SnippetConfigSource",
]
