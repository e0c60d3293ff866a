"""Merge configured snippet scopes into an indexed, validated collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from pydantic import ValidationError

from ..exception_handler import SnippetConfigurationError
from .config import SnippetScopes
from .model import REQUIRED_FIELDS, ResolvedSnippet, SnippetDefinition, SnippetValidationError

logger = logging.getLogger("repl_snippets")

DEFAULT_REPL = "clj"


@dataclass(slots=True, frozen=True)
class SnippetIndex:
    """Lookup structures for one command invocation."""

    snippets: Tuple[SnippetDefinition | None, ...]
    menu_items: Tuple[str, ...]
    by_label: Mapping[str, ResolvedSnippet]
    label_by_key: Mapping[str, str]
    errors: Tuple[SnippetValidationError, ...]

    @property
    def is_empty(self) -> bool:
        return not self.snippets

    def lookup_key(self, key: str) -> ResolvedSnippet | None:
        label = self.label_by_key.get(key)
        if label is None:
            return None
        return self.by_label[label]

    def raise_for_errors(self) -> None:
        if self.errors:
            raise SnippetConfigurationError(self.errors)


class SnippetRegistry:
    """Build a ``SnippetIndex`` from the configured scopes."""

    def __init__(self, scopes: SnippetScopes) -> None:
        self.scopes = scopes

    def build(
        self,
        *,
        editor_ns: str | None = None,
        editor_repl: str | None = None,
    ) -> SnippetIndex:
        repl_default = editor_repl or DEFAULT_REPL
        raw_entries = self.scopes.merged()

        snippets: List[SnippetDefinition | None] = []
        menu_items: List[str] = []
        by_label: dict[str, ResolvedSnippet] = {}
        label_by_key: dict[str, str] = {}
        errors: List[SnippetValidationError] = []

        for raw in raw_entries:
            definition, error = _parse_definition(raw)
            snippets.append(definition)
            if error is not None:
                errors.append(error)
                continue

            assert definition is not None
            entry = ResolvedSnippet(
                name=definition.name,
                snippet=definition.snippet,
                key=definition.key,
                ns=definition.ns or editor_ns,
                repl=definition.repl or repl_default,
                evaluation_send_code_to_output_window=definition.evaluation_send_code_to_output_window,
            )
            label = entry.label
            if label in by_label:
                logger.debug("Menu label %r registered twice, keeping the later entry", label)
            menu_items.append(label)
            by_label[label] = entry
            if entry.key is not None:
                label_by_key[entry.key] = label

        if errors:
            logger.warning("Found %d invalid snippet definitions", len(errors))
        else:
            logger.debug("Indexed %d snippets", len(by_label))

        return SnippetIndex(
            snippets=tuple(snippets),
            menu_items=tuple(menu_items),
            by_label=MappingProxyType(by_label),
            label_by_key=MappingProxyType(label_by_key),
            errors=tuple(errors),
        )


def _parse_definition(raw: Any) -> tuple[SnippetDefinition | None, SnippetValidationError | None]:
    if isinstance(raw, SnippetDefinition):
        definition = raw
    elif isinstance(raw, Mapping):
        try:
            definition = SnippetDefinition.model_validate(dict(raw))
        except ValidationError as exc:
            name = raw.get("name")
            fields = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
            fields |= {field for field in REQUIRED_FIELDS if not raw.get(field)}
            return None, SnippetValidationError(
                name=name if isinstance(name, str) else None,
                missing_fields=sorted(fields),
            )
    else:
        return None, SnippetValidationError(name=None, missing_fields=["name", "snippet"])

    missing = definition.missing_fields()
    if missing:
        return definition, SnippetValidationError(name=definition.name, missing_fields=missing)
    return definition, None


__all__ = ["DEFAULT_REPL", "SnippetIndex", "SnippetRegistry"]
