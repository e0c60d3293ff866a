import logging

import pytest

from src.exception_handler import SelectionCancelled
from src.orchestration.selector import (
    NO_SNIPPETS_MESSAGE,
    PICK_PLACEHOLDER,
    PICK_SAVE_AS,
    select_snippet,
)
from src.snippet import SnippetRegistry, SnippetScopes


class _StubPicker:
    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    async def pick(self, values, *, placeholder, save_as=None):
        self.calls.append({"values": list(values), "placeholder": placeholder, "save_as": save_as})
        if self.error is not None:
            raise self.error
        return self.answer


class _StubMessenger:
    def __init__(self):
        self.errors = []
        self.infos = []

    def show_error(self, message):
        self.errors.append(message)

    def show_info(self, message):
        self.infos.append(message)


def _index(*entries):
    return SnippetRegistry(SnippetScopes(global_snippets=list(entries))).build(editor_ns="my.app")


RESET = {"name": "Reset", "snippet": "(reset!)", "key": "r"}


@pytest.mark.asyncio
async def test_key_resolves_to_snippet_without_picking():
    picker = _StubPicker()

    selection = await select_snippet("r", _index(RESET), picker=picker, messenger=_StubMessenger())

    assert selection.snippet.name == "Reset"
    assert selection.code is None
    assert picker.calls == []


@pytest.mark.asyncio
async def test_unknown_key_is_literal_code():
    selection = await select_snippet(
        "(+ 1 2)", _index(RESET), picker=_StubPicker(), messenger=_StubMessenger()
    )

    assert selection.snippet is None
    assert selection.code == "(+ 1 2)"


@pytest.mark.asyncio
async def test_literal_code_works_with_empty_registry():
    messenger = _StubMessenger()

    selection = await select_snippet("(+ 1 2)", _index(), picker=_StubPicker(), messenger=messenger)

    assert selection.code == "(+ 1 2)"
    assert messenger.infos == []


@pytest.mark.asyncio
async def test_interactive_pick_presents_menu_labels():
    picker = _StubPicker(answer="r: Reset (clj)")

    selection = await select_snippet(None, _index(RESET), picker=picker, messenger=_StubMessenger())

    assert selection.snippet.snippet == "(reset!)"
    assert picker.calls == [
        {"values": ["r: Reset (clj)"], "placeholder": PICK_PLACEHOLDER, "save_as": PICK_SAVE_AS}
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("answer", [None, ""])
async def test_empty_pick_is_noop_without_message(answer):
    messenger = _StubMessenger()

    selection = await select_snippet(
        None, _index(RESET), picker=_StubPicker(answer=answer), messenger=messenger
    )

    assert selection.is_noop
    assert messenger.infos == [] and messenger.errors == []


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [SelectionCancelled(), RuntimeError("ui went away")])
async def test_picker_failures_are_swallowed(error):
    messenger = _StubMessenger()

    selection = await select_snippet(
        None, _index(RESET), picker=_StubPicker(error=error), messenger=messenger
    )

    assert selection.is_noop
    assert messenger.errors == []


@pytest.mark.asyncio
async def test_empty_registry_shows_guidance():
    messenger = _StubMessenger()
    picker = _StubPicker()

    selection = await select_snippet(None, _index(), picker=picker, messenger=messenger)

    assert selection.is_noop
    assert messenger.infos == [NO_SNIPPETS_MESSAGE]
    assert picker.calls == []


@pytest.mark.asyncio
async def test_picker_failure_is_logged(caplog):
    picker = _StubPicker(error=RuntimeError("ui went away"))

    with caplog.at_level(logging.ERROR, logger="repl_snippets"):
        selection = await select_snippet(None, _index(RESET), picker=picker, messenger=_StubMessenger())

    assert selection.is_noop
    failures = [record for record in caplog.records if record.message == "Snippet selection failed"]
    assert len(failures) == 1
    assert failures[0].exc_info[0] is RuntimeError


@pytest.mark.asyncio
async def test_cancelled_pick_is_not_logged_as_failure(caplog):
    picker = _StubPicker(error=SelectionCancelled())

    with caplog.at_level(logging.ERROR, logger="repl_snippets"):
        await select_snippet(None, _index(RESET), picker=picker, messenger=_StubMessenger())

    assert caplog.records == []
