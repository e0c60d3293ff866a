from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..orchestration.options import EvaluationOptions


class RenderedEvaluation(BaseModel):
    """What would have been sent to a REPL."""

    code: str
    repl: str | None = None
    ns: str | None = None
    options: dict[str, bool] = Field(default_factory=dict)


class EchoBackend:
    """Evaluation backend that records requests instead of talking to a REPL."""

    def __init__(self) -> None:
        self.requests: List[RenderedEvaluation] = []

    async def evaluate_in_output_window(
        self,
        code: str,
        repl: str | None,
        ns: str | None,
        options: EvaluationOptions,
    ) -> RenderedEvaluation:
        rendered = RenderedEvaluation(code=code, repl=repl, ns=ns, options=options.as_dict())
        self.requests.append(rendered)
        return rendered


class NullOutput:
    def __init__(self) -> None:
        self.prompts = 0

    def append_prompt(self) -> None:
        self.prompts += 1


__all__ = ["EchoBackend", "NullOutput", "RenderedEvaluation"]
