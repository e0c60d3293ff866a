from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_FIELDS = ("name", "snippet")


class SnippetDefinition(BaseModel):
    """A user-configured REPL command template as read from settings."""

    name: str | None = None
    snippet: str | None = None
    key: str | None = None
    ns: str | None = None
    repl: str | None = None
    evaluation_send_code_to_output_window: bool | None = Field(
        default=None, alias="evaluationSendCodeToOutputWindow"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator("key", mode="before")
    @classmethod
    def _stringify_key(cls, value: Any) -> Any:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def missing_fields(self) -> list[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]


class ResolvedSnippet(BaseModel):
    """A valid definition with its namespace and REPL target filled in."""

    name: str
    snippet: str
    key: str | None = None
    ns: str | None = None
    repl: str
    evaluation_send_code_to_output_window: bool | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        prefix = f"{self.key}: " if self.key is not None else ""
        return f"{prefix}{self.name} ({self.repl})"


class SnippetValidationError(BaseModel):
    """One offending entry in the snippet settings."""

    name: str | None = None
    missing_fields: list[str] = Field(default_factory=list, alias="missingFields")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = [
    "REQUIRED_FIELDS",
    "ResolvedSnippet",
    "SnippetDefinition",
    "SnippetValidationError",
]
