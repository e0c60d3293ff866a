from __future__ import annotations

import logging
from typing import Any

from ..context import ContextRecord
from ..ports import EvaluationBackend, OutputSurface
from .interpolation import interpolate_code
from .options import EvaluationOptions

logger = logging.getLogger("repl_snippets")


async def evaluate_snippet(
    code: str,
    context: ContextRecord,
    options: EvaluationOptions,
    *,
    backend: EvaluationBackend,
    ns: str | None = None,
    repl: str | None = None,
) -> Any:
    """Interpolate ``code`` against ``context`` and send it to the backend.

    ``ns`` and ``repl`` fall back to the values captured in ``context``.
    """
    target_ns = ns if ns is not None else context.ns
    target_repl = repl if repl is not None else context.repl
    interpolated = interpolate_code(code, context)
    logger.debug("Evaluating snippet in %s (ns=%s)", target_repl, target_ns)
    return await backend.evaluate_in_output_window(
        interpolated,
        target_repl,
        target_ns,
        options,
    )


class EvaluationDispatcher:
    """Send interpolated code to the backend and re-prompt the output surface."""

    def __init__(self, backend: EvaluationBackend, output: OutputSurface) -> None:
        self.backend = backend
        self.output = output

    async def dispatch(
        self,
        code: str,
        context: ContextRecord,
        options: EvaluationOptions,
        *,
        ns: str | None = None,
        repl: str | None = None,
    ) -> Any:
        try:
            return await evaluate_snippet(
                code,
                context,
                options,
                backend=self.backend,
                ns=ns,
                repl=repl,
            )
        finally:
            self.output.append_prompt()


__all__ = ["EvaluationDispatcher", "evaluate_snippet"]
