from __future__ import annotations

import dataclasses
import logging
from typing import Any

from ..context import build_context_record
from ..exception_handler import SnippetConfigurationError
from ..ports import (
    ContextProvider,
    EvaluationBackend,
    Messenger,
    OutputSurface,
    QuickPick,
    SessionState,
    SnippetConfigSource,
)
from ..snippet import DEFAULT_REPL, SnippetRegistry
from .dispatch import EvaluationDispatcher
from .options import derive_options
from .selector import select_snippet

logger = logging.getLogger("repl_snippets")


class CustomSnippetCommand:
    """The "run custom REPL command" entry point.

    Every invocation re-reads the configuration and snapshots the editing
    context before anything can suspend, so a user moving the cursor while the
    picker is open does not change what gets evaluated.
    """

    def __init__(
        self,
        *,
        config_source: SnippetConfigSource,
        context_provider: ContextProvider,
        session: SessionState,
        picker: QuickPick,
        messenger: Messenger,
        backend: EvaluationBackend,
        output: OutputSurface,
    ) -> None:
        self.config_source = config_source
        self.context_provider = context_provider
        self.session = session
        self.picker = picker
        self.messenger = messenger
        self.dispatcher = EvaluationDispatcher(backend, output)

    async def run(self, code_or_key: str | None = None) -> Any:
        provider = self.context_provider
        if provider.is_target_language():
            editor_ns = provider.namespace()
            editor_repl = provider.repl_session_type() or DEFAULT_REPL
        else:
            editor_ns = None
            editor_repl = DEFAULT_REPL
        output_window_active = bool(self.session.output_window_active)
        context = build_context_record(
            provider,
            ns=editor_ns,
            repl=editor_repl,
            hover=provider.hover(),
        )

        index = SnippetRegistry(self.config_source()).build(
            editor_ns=editor_ns,
            editor_repl=editor_repl,
        )
        try:
            index.raise_for_errors()
        except SnippetConfigurationError as exc:
            logger.warning("Snippet settings are invalid: %s", exc)
            self.messenger.show_error(str(exc))
            return None

        selection = await select_snippet(
            code_or_key,
            index,
            picker=self.picker,
            messenger=self.messenger,
        )
        if selection.is_noop:
            return None

        if selection.snippet is not None:
            code = selection.snippet.snippet
            ns = selection.snippet.ns
            repl = selection.snippet.repl
        else:
            assert selection.code is not None
            code = selection.code
            ns = editor_ns
            repl = editor_repl

        options = derive_options(selection.snippet, output_window_active=output_window_active)
        context = dataclasses.replace(context, ns=ns, repl=repl)
        return await self.dispatcher.dispatch(code, context, options, ns=ns, repl=repl)


async def evaluate_custom_snippet(command: CustomSnippetCommand, code_or_key: str | None = None) -> Any:
    """Run ``command`` for a key, literal code, or an interactive pick."""
    return await command.run(code_or_key)


__all__ = ["CustomSnippetCommand", "evaluate_custom_snippet"]
