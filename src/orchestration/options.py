from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..snippet import ResolvedSnippet


@dataclass(slots=True, frozen=True)
class EvaluationOptions:
    """Options forwarded to the evaluation backend; ``None`` means backend default."""

    evaluation_send_code_to_output_window: bool | None = None
    add_to_history: bool | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.evaluation_send_code_to_output_window is not None:
            data["evaluationSendCodeToOutputWindow"] = self.evaluation_send_code_to_output_window
        if self.add_to_history is not None:
            data["addToHistory"] = self.add_to_history
        return data


def derive_options(
    snippet: ResolvedSnippet | None,
    *,
    output_window_active: bool,
) -> EvaluationOptions:
    if snippet is None:
        return EvaluationOptions()

    send_code = snippet.evaluation_send_code_to_output_window
    # No history entry for a result shown in the output window without its code.
    add_to_history = False if output_window_active and not send_code else None
    return EvaluationOptions(
        evaluation_send_code_to_output_window=send_code,
        add_to_history=add_to_history,
    )


__all__ = ["EvaluationOptions", "derive_options"]
