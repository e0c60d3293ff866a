import argparse
import asyncio
import json
import logging
import sys

from src.context import StaticContextProvider
from src.exception_handler import ErrorHandler, SnippetConfigurationError, setup_logging
from src.orchestration import CustomSnippetCommand
from src.settings import AppSettings, StaticSession
from src.snippet import SnippetRegistry, SnippetScopes, load_settings_file
from src.surfaces import ConsoleMessenger, ConsoleOutput, ConsolePicker, EchoBackend


logger = logging.getLogger("repl_snippets")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve a custom REPL command snippet and print the code it would evaluate"
    )
    parser.add_argument(
        "code_or_key",
        nargs="?",
        default=None,
        help="Snippet key or literal code (omit to choose from a menu)",
    )
    parser.add_argument(
        "--settings",
        "-s",
        type=str,
        default=None,
        help="JSON settings file (defaults to REPL_SNIPPETS_SETTINGS env variable)",
    )
    parser.add_argument("--list", action="store_true", help="List configured snippets and exit")
    parser.add_argument("--ns", type=str, default=None, help="Namespace of the current document")
    parser.add_argument("--repl", type=str, default=None, help="Active REPL session type (clj or cljs)")
    parser.add_argument("--line", type=int, default=0, help="Cursor line (default: 0)")
    parser.add_argument("--column", type=int, default=0, help="Cursor column (default: 0)")
    parser.add_argument("--file", type=str, default="", help="Path of the current file")
    parser.add_argument("--selection", type=str, default="", help="Currently selected text")
    parser.add_argument("--current-form", dest="current_form", default=None)
    parser.add_argument("--enclosing-form", dest="enclosing_form", default=None)
    parser.add_argument("--top-level-form", dest="top_level_form", default=None)
    parser.add_argument("--current-fn", dest="current_fn", default=None)
    parser.add_argument("--top-level-defined-symbol", dest="top_level_defined_symbol", default=None)
    parser.add_argument("--head", default=None, help="Text from the list start to the cursor")
    parser.add_argument("--tail", default=None, help="Text from the cursor to the list end")
    parser.add_argument(
        "--output-window-active",
        action="store_true",
        default=None,
        help="Treat the output window as the active REPL surface",
    )
    return parser


def _print_listing(scopes: SnippetScopes, args: argparse.Namespace, handler: ErrorHandler) -> int:
    index = SnippetRegistry(scopes).build(editor_ns=args.ns, editor_repl=args.repl)
    try:
        index.raise_for_errors()
    except SnippetConfigurationError as exc:
        handler.collect(exc)
        print(handler.format_error_report(), file=sys.stderr)
        return 1
    if index.is_empty:
        print("No snippets configured.", file=sys.stderr)
        return 0
    for label in index.menu_items:
        print(label)
    return 0


def main() -> None:
    args = build_parser().parse_args()
    settings = AppSettings.from_env()
    setup_logging(settings.log_level)

    settings_path = args.settings or settings.settings_path

    def config_source() -> SnippetScopes:
        if not settings_path:
            return SnippetScopes()
        return load_settings_file(settings_path)

    handler = ErrorHandler()
    try:
        if args.list:
            sys.exit(_print_listing(config_source(), args, handler))

        output_window_active = (
            args.output_window_active
            if args.output_window_active is not None
            else settings.output_window_active
        )
        command = CustomSnippetCommand(
            config_source=config_source,
            context_provider=StaticContextProvider(
                line=args.line,
                column=args.column,
                file=args.file,
                selection=args.selection,
                ns=args.ns,
                repl=args.repl,
                form=args.current_form,
                enclosing=args.enclosing_form,
                top_level=args.top_level_form,
                function=args.current_fn,
                defined_symbol=args.top_level_defined_symbol,
                list_head=args.head,
                list_tail=args.tail,
            ),
            session=StaticSession(output_window_active),
            picker=ConsolePicker(),
            messenger=ConsoleMessenger(),
            backend=EchoBackend(),
            output=ConsoleOutput(),
        )
        result = asyncio.run(command.run(args.code_or_key))
    except KeyboardInterrupt:
        print("\n⚠️ Interrupted", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Fatal error while running snippet")
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        sys.exit(1)

    if result is None:
        sys.exit(0)
    print(json.dumps(result.model_dump(), indent=2))


if __name__ == "__main__":
    main()
