import json

from tetris_input import DEFAULT_KEYBINDS, KeyMap, load_keybinds, save_keybinds
from tetris_match import Command, SideId


def test_default_keymap_routes_both_players():
    km = KeyMap()
    assert km.command_for("left") == (SideId.FIRST, Command.MOVE_LEFT)
    assert km.command_for("space") == (SideId.FIRST, Command.HARD_DROP)
    assert km.command_for("w") == (SideId.SECOND, Command.ROTATE)
    assert km.command_for("right shift") == (SideId.SECOND, Command.HARD_DROP)
    assert km.command_for("q") is None


def test_unbound_action_is_skipped():
    binds = {"p1": dict(DEFAULT_KEYBINDS["p1"], hard=""), "p2": DEFAULT_KEYBINDS["p2"]}
    km = KeyMap(binds)
    assert km.command_for("space") is None
    assert km.command_for("") is None


def test_missing_file_gives_defaults(tmp_path):
    assert load_keybinds(str(tmp_path / "nope.json")) == DEFAULT_KEYBINDS


def test_stored_bindings_merge_over_defaults(tmp_path):
    path = tmp_path / "keys.json"
    path.write_text(json.dumps({"p2": {"hard": "e", "bogus": "x"}}))
    binds = load_keybinds(str(path))
    assert binds["p2"]["hard"] == "e"
    assert "bogus" not in binds["p2"]
    assert binds["p1"] == DEFAULT_KEYBINDS["p1"]
    assert DEFAULT_KEYBINDS["p2"]["hard"] == "right shift"


def test_unreadable_file_falls_back(tmp_path, caplog):
    path = tmp_path / "keys.json"
    path.write_text("{not json")
    assert load_keybinds(str(path)) == DEFAULT_KEYBINDS
    assert "ignoring key bindings" in caplog.text


def test_saved_bindings_load_back(tmp_path):
    path = tmp_path / "sub" / "keys.json"
    binds = load_keybinds(str(path))
    binds["p1"]["rotate"] = "x"
    save_keybinds(str(path), binds)
    assert KeyMap(load_keybinds(str(path))).command_for("x") == (SideId.FIRST, Command.ROTATE)


def test_wrong_shape_falls_back(tmp_path, caplog):
    path = tmp_path / "keys.json"
    for stored in ([], {"p1": "x"}, {"p2": ["a"]}):
        path.write_text(json.dumps(stored))
        assert load_keybinds(str(path)) == DEFAULT_KEYBINDS
    assert caplog.text.count("ignoring key bindings") == 3
