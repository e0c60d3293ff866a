from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exception_handler import SelectionCancelled
from ..ports import Messenger, QuickPick
from ..snippet import ResolvedSnippet, SnippetIndex

logger = logging.getLogger("repl_snippets")

PICK_PLACEHOLDER = "Choose a command to run at the REPL"
PICK_SAVE_AS = "runCustomREPLCommand"
NO_SNIPPETS_MESSAGE = (
    "No snippets configured. Configure snippets in `customREPLCommandSnippetsGlobal`, "
    "`customREPLCommandSnippetsWorkspace` or `customREPLCommandSnippetsWorkspaceFolder`."
)


@dataclass(slots=True, frozen=True)
class Selection:
    """Outcome of resolving a key or interactive pick.

    Exactly one of ``snippet`` and ``code`` is set, or neither when there is
    nothing to evaluate.
    """

    snippet: ResolvedSnippet | None = None
    code: str | None = None

    @property
    def is_noop(self) -> bool:
        return self.snippet is None and self.code is None


NOOP = Selection()


async def select_snippet(
    code_or_key: str | None,
    index: SnippetIndex,
    *,
    picker: QuickPick,
    messenger: Messenger,
) -> Selection:
    if code_or_key is None:
        if index.is_empty:
            messenger.show_info(NO_SNIPPETS_MESSAGE)
            return NOOP
        label = await _pick_label(index, picker)
        if not label:
            return NOOP
        snippet = index.by_label.get(label)
        if snippet is None:
            logger.warning("Picked label %r is not a known snippet", label)
            return NOOP
        return Selection(snippet=snippet)

    snippet = index.lookup_key(code_or_key)
    if snippet is not None:
        return Selection(snippet=snippet)
    logger.debug("No snippet with key %r, evaluating it as code", code_or_key)
    return Selection(code=code_or_key)


async def _pick_label(index: SnippetIndex, picker: QuickPick) -> str | None:
    try:
        return await picker.pick(
            list(index.menu_items),
            placeholder=PICK_PLACEHOLDER,
            save_as=PICK_SAVE_AS,
        )
    except SelectionCancelled:
        return None
    except Exception:
        logger.exception("Snippet selection failed")
        return None


__all__ = [
    "NOOP",
    "NO_SNIPPETS_MESSAGE",
    "PICK_PLACEHOLDER",
    "PICK_SAVE_AS",
    "Selection",
    "select_snippet",
]
