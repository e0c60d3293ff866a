import pytest

from src.exception_handler import SnippetConfigurationError
from src.snippet import SnippetRegistry, SnippetScopes
from src.snippet.config import load_settings_file


def _build(scopes, **kwargs):
    return SnippetRegistry(scopes).build(**kwargs)


def test_scopes_concatenate_in_precedence_order():
    scopes = SnippetScopes(
        global_snippets=[{"name": "G", "snippet": "(g)"}],
        workspace_snippets=[{"name": "W", "snippet": "(w)"}],
        workspace_folder_snippets=[{"name": "F", "snippet": "(f)"}],
        legacy_snippets=[{"name": "L", "snippet": "(l)"}],
    )

    index = _build(scopes)

    assert index.menu_items == ("G (clj)", "W (clj)", "F (clj)")


def test_legacy_list_used_when_all_scopes_empty():
    legacy = [{"name": "Legacy", "snippet": "(legacy)", "key": "l"}]
    scopes = SnippetScopes(legacy_snippets=legacy)

    index = _build(scopes)

    assert [definition.name for definition in index.snippets] == ["Legacy"]
    assert index.lookup_key("l").snippet == "(legacy)"


def test_defaults_come_from_editor_context():
    scopes = SnippetScopes(
        global_snippets=[
            {"name": "Plain", "snippet": "(a)"},
            {"name": "Pinned", "snippet": "(b)", "ns": "other.ns", "repl": "cljs"},
        ]
    )

    index = _build(scopes, editor_ns="my.app", editor_repl=None)

    plain = index.by_label["Plain (clj)"]
    pinned = index.by_label["Pinned (cljs)"]
    assert (plain.ns, plain.repl) == ("my.app", "clj")
    assert (pinned.ns, pinned.repl) == ("other.ns", "cljs")


def test_menu_label_includes_key_prefix():
    scopes = SnippetScopes(global_snippets=[{"name": "Reset", "snippet": "(reset)", "key": "r"}])

    index = _build(scopes, editor_repl="cljs")

    assert index.menu_items == ("r: Reset (cljs)",)
    assert index.label_by_key == {"r": "r: Reset (cljs)"}


def test_numeric_key_is_stringified():
    scopes = SnippetScopes(global_snippets=[{"name": "One", "snippet": "1", "key": 1}])

    index = _build(scopes)

    assert index.lookup_key("1").name == "One"


def test_duplicate_key_resolves_to_later_entry():
    scopes = SnippetScopes(
        global_snippets=[{"name": "First", "snippet": "(first)", "key": "x"}],
        workspace_snippets=[{"name": "Second", "snippet": "(second)", "key": "x"}],
    )

    index = _build(scopes)

    assert index.lookup_key("x").name == "Second"
    assert len(index.menu_items) == 2


def test_identical_labels_keep_last_entry_for_menu_pick():
    scopes = SnippetScopes(
        global_snippets=[
            {"name": "Same", "snippet": "(one)"},
            {"name": "Same", "snippet": "(two)"},
        ]
    )

    index = _build(scopes)

    assert index.by_label["Same (clj)"].snippet == "(two)"


def test_missing_fields_are_collected_and_block_execution():
    scopes = SnippetScopes(
        global_snippets=[
            {"name": "Ok", "snippet": "(ok)", "key": "o"},
            {"name": "No code"},
            {"snippet": "(anonymous)"},
            {"name": "", "snippet": ""},
        ]
    )

    index = _build(scopes)

    assert [(error.name, error.missing_fields) for error in index.errors] == [
        ("No code", ["snippet"]),
        (None, ["name"]),
        ("", ["name", "snippet"]),
    ]
    assert len(index.snippets) == 4
    assert list(index.by_label) == ["o: Ok (clj)"]
    with pytest.raises(SnippetConfigurationError) as excinfo:
        index.raise_for_errors()
    message = str(excinfo.value)
    assert "No code" in message
    assert '"keys":["name","snippet"]' in message


def test_non_mapping_entry_is_reported():
    scopes = SnippetScopes(global_snippets=["(not a snippet)"])

    index = _build(scopes)

    assert len(index.errors) == 1
    assert index.errors[0].missing_fields == ["name", "snippet"]


def test_load_settings_file_reads_all_scopes(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(
        '{"customREPLCommandSnippetsGlobal": [{"name": "G", "snippet": "(g)"}],'
        ' "customREPLCommandSnippetsWorkspaceFolder": [{"name": "F", "snippet": "(f)"}],'
        ' "customREPLCommandSnippets": [{"name": "L", "snippet": "(l)"}]}',
        encoding="utf-8",
    )

    scopes = load_settings_file(settings)

    assert [entry["name"] for entry in scopes.merged()] == ["G", "F"]


def test_load_settings_file_rejects_non_object(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings_file(settings)


def test_wrong_typed_entry_also_reports_absent_required_fields():
    scopes = SnippetScopes(global_snippets=[{"name": 5}])

    index = _build(scopes)

    assert len(index.errors) == 1
    assert index.errors[0].name is None
    assert index.errors[0].missing_fields == ["name", "snippet"]


def test_wrong_typed_optional_field_keeps_valid_required_fields_out():
    scopes = SnippetScopes(global_snippets=[{"name": "N", "snippet": "(n)", "ns": ["not", "a", "string"]}])

    index = _build(scopes)

    assert [(error.name, error.missing_fields) for error in index.errors] == [("N", ["ns"])]


@pytest.mark.parametrize("key, expected", [(1.0, "1"), (2.5, "2.5"), (3, "3")])
def test_numeric_keys_render_like_settings_values(key, expected):
    scopes = SnippetScopes(global_snippets=[{"name": "K", "snippet": "(k)", "key": key}])

    index = _build(scopes)

    assert index.lookup_key(expected).name == "K"
