"""FastMCP server exposing the configured REPL snippets as MCP tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..context import StaticContextProvider
from ..exception_handler import SelectionCancelled, setup_logging
from ..orchestration import CustomSnippetCommand
from ..settings import AppSettings, StaticSession
from ..snippet import SnippetRegistry, SnippetScopes, load_settings_file
from ..surfaces import EchoBackend, NullOutput

logger = logging.getLogger("repl_snippets")


class ServiceContext:
    """Lazy settings holder for MCP tool handlers."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings.from_env()
        return self._settings

    def scopes(self) -> SnippetScopes:
        path = self.settings.settings_path
        if not path:
            return SnippetScopes()
        return load_settings_file(path)


class _CollectingMessenger:
    def __init__(self) -> None:
        self.errors: List[str] = []
        self.infos: List[str] = []

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_info(self, message: str) -> None:
        self.infos.append(message)


class _NoPicker:
    async def pick(self, values: Sequence[str], *, placeholder: str, save_as: str | None = None) -> str | None:
        raise SelectionCancelled()


def _handle_generic_exception(exc: Exception, *, default_message: str) -> ToolError:
    logger.exception(default_message)
    return ToolError(f"{default_message}: {exc}")


def create_server(services: ServiceContext | None = None) -> FastMCP:
    """Create a FastMCP server wired to the snippet settings file."""

    services = services or ServiceContext()
    server = FastMCP("REPL Snippets MCP Server")

    @server.tool(
        name="list_snippets",
        description="List the configured REPL command snippets with their menu labels and keys.",
        tags={"snippets"},
    )
    def list_snippets(ns: str | None = None, repl: str | None = None) -> Dict[str, Any]:
        try:
            index = SnippetRegistry(services.scopes()).build(editor_ns=ns, editor_repl=repl)
        except (OSError, ValueError) as exc:
            raise _handle_generic_exception(exc, default_message="Reading snippet settings failed")
        return {
            "snippets": [
                {**index.by_label[label].model_dump(), "label": label}
                for label in dict.fromkeys(index.menu_items)
            ],
            "errors": [error.model_dump(by_alias=True) for error in index.errors],
        }

    @server.tool(
        name="render_snippet",
        description=(
            "Resolve a snippet by key (or treat the input as literal code) and return the"
            " interpolated code with its REPL target, namespace and evaluation options."
        ),
        tags={"snippets", "render"},
    )
    async def render_snippet(
        code_or_key: str,
        ns: str | None = None,
        repl: str | None = None,
        line: int = 0,
        column: int = 0,
        file: str = "",
        selection: str = "",
        current_form: str | None = None,
        enclosing_form: str | None = None,
        top_level_form: str | None = None,
        current_fn: str | None = None,
        top_level_defined_symbol: str | None = None,
        head: str | None = None,
        tail: str | None = None,
    ) -> Dict[str, Any]:
        if not code_or_key:
            raise ToolError("A snippet key or code is required.")

        messenger = _CollectingMessenger()
        command = CustomSnippetCommand(
            config_source=services.scopes,
            context_provider=StaticContextProvider(
                line=line,
                column=column,
                file=file,
                selection=selection,
                ns=ns,
                repl=repl,
                form=current_form,
                enclosing=enclosing_form,
                top_level=top_level_form,
                function=current_fn,
                defined_symbol=top_level_defined_symbol,
                list_head=head,
                list_tail=tail,
            ),
            session=StaticSession(services.settings.output_window_active),
            picker=_NoPicker(),
            messenger=messenger,
            backend=EchoBackend(),
            output=NullOutput(),
        )
        try:
            result = await command.run(code_or_key)
        except (OSError, ValueError) as exc:
            raise _handle_generic_exception(exc, default_message="Reading snippet settings failed")

        if messenger.errors:
            raise ToolError(messenger.errors[0])
        if result is None:
            raise ToolError("Nothing to evaluate.")
        return result.model_dump()

    return server


def main() -> None:
    settings = AppSettings.from_env()
    setup_logging(settings.log_level)
    create_server(ServiceContext(settings)).run()


__all__ = ["ServiceContext", "create_server", "main"]


if __name__ == "__main__":
    main()
