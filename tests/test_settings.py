# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import json
import logging
import pathlib

import pytest

from keyinput.commontypes import KeyInputError, Platform
from keyinput.inputtypes import Character, Keyboard, Pointer
from keyinput.keycodes import KeyCode, PointerButton
from keyinput.parsing import parse_key_input
from keyinput.settings import KEYMAP, Keymap, Settings, settings_converter


def test_for_test():
    settings = Settings.for_test()
    assert settings.display_platform is Platform.OTHER
    assert set(settings.keymap.bindings) == set(KEYMAP)
    assert settings.keymap.rejected == ()
    assert settings.keymap.bindings_for("cancel") == (parse_key_input("escape"),)
    assert settings.labels_for("cursor_up") == ["Up", "K"]
    assert settings.labels_for("jump_back") == ["MouseBackward", "BrowserBack"]


def test_commands_for():
    keymap = Settings.for_test().keymap
    assert keymap.commands_for(parse_key_input("arrowup")) == ("cursor_up",)
    # Bound by position, so the key in the "k" slot matches whatever it types.
    assert keymap.commands_for(Keyboard(Character("κ"), KeyCode.KeyK)) == ("cursor_up",)
    assert keymap.commands_for(Pointer(PointerButton.AUXILIARY)) == ("paste_selection",)
    assert keymap.commands_for(parse_key_input("f2")) == ()
    assert keymap.bindings_for("no_such_command") == ()
    assert keymap.labels_for("no_such_command") == []


def test_shared_binding():
    keymap = settings_converter.structure({"save": ["s"], "sort": ["S"]}, Keymap)
    assert keymap.commands_for(parse_key_input("s")) == ("save", "sort")


def test_single_token_binding():
    keymap = settings_converter.structure({"cancel": "esc"}, Keymap)
    assert keymap.bindings_for("cancel") == (parse_key_input("escape"),)


def test_unrecognized_tokens_are_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="keyinput.settings"):
        keymap = settings_converter.structure(
            {
                "cancel": ["esc", "ctrl+g"],
                "quit": ["nonsense"],
                "help": ["f1", 12],
            },
            Keymap,
        )
    assert keymap.bindings_for("cancel") == (parse_key_input("escape"),)
    assert keymap.bindings_for("quit") == ()
    assert keymap.bindings_for("help") == (parse_key_input("f1"),)
    assert keymap.rejected == (("cancel", "ctrl+g"), ("quit", "nonsense"), ("help", "12"))
    messages = [record.getMessage() for record in caplog.records]
    assert "Skipping binding for cancel: Unrecognized key token: 'ctrl+g'" in messages
    assert "Skipping binding for quit: Unrecognized key token: 'nonsense'" in messages
    assert "Skipping binding for help: 12 is not a key name" in messages


@pytest.mark.parametrize("value", (5, None, {"key": "esc"}, True))
def test_non_list_bindings_are_skipped(caplog, value):
    with caplog.at_level(logging.WARNING, logger="keyinput.settings"):
        keymap = settings_converter.structure({"cancel": ["esc"], "quit": value}, Keymap)
    assert keymap.bindings_for("cancel") == (parse_key_input("escape"),)
    assert keymap.bindings_for("quit") == ()
    assert keymap.rejected == (("quit", repr(value)),)
    assert [record.getMessage() for record in caplog.records] == [
        f"Skipping bindings for quit: {value!r} is not a key name or list of key names"
    ]


def test_same_key_bound_twice_by_one_command():
    keymap = settings_converter.structure({"cancel": ["esc", "escape"], "close": ["ESC"]}, Keymap)
    assert keymap.commands_for(parse_key_input("esc")) == ("cancel", "close")


def test_save_keeps_unpositioned_characters(tmp_path: pathlib.Path):
    settings = Settings.for_test()
    settings.keymap = settings_converter.structure({"insert_blank": [" "], "insert_space": ["space"], "accent": ["é"]}, Keymap)
    dest = tmp_path / "settings.json"
    settings.save(dest)
    assert json.loads(dest.read_text(encoding="utf-8"))["keymap"] == {
        "insert_blank": [" "],
        "insert_space": ["space"],
        "accent": ["é"],
    }
    loaded = Settings.load(dest)
    assert loaded.keymap == settings.keymap
    assert loaded.keymap.bindings_for("insert_blank")[0].code is KeyCode.Fn
    assert loaded.keymap.bindings_for("insert_space")[0].code is KeyCode.Space


def test_save_and_load_json(tmp_path: pathlib.Path):
    settings = Settings.for_test()
    dest = tmp_path / "settings.json"
    settings.save(dest)
    raw = json.loads(dest.read_text())
    assert raw["display_platform"] == "other"
    assert raw["keymap"]["cancel"] == ["escape"]
    assert raw["keymap"]["cursor_up"] == ["arrowup", "k"]
    assert raw["keymap"]["jump_back"] == ["mousebackward", "browserback"]
    assert "_path" not in raw

    loaded = Settings.load(dest)
    assert loaded._path == dest
    assert loaded.display_platform is Platform.OTHER
    assert loaded.keymap == settings.keymap


def test_save_to_own_path(tmp_path: pathlib.Path):
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"keymap": {"cancel": ["esc"]}}))
    settings = Settings.load(src)
    assert settings.display_platform is None
    settings.display_platform = Platform.MACOS
    settings.save()
    assert Settings.load(src).display_platform is Platform.MACOS


def test_load_toml(tmp_path: pathlib.Path):
    src = tmp_path / "settings.toml"
    src.write_text(
        """
display_platform = "macos"

[keymap]
cancel = ["esc"]
open_palette = ["meta"]
broken = ["hyperspace"]
""",
        encoding="utf-8",
    )
    settings = Settings.load(src)
    assert settings.display_platform is Platform.MACOS
    assert settings.labels_for("open_palette") == ["Cmd"]
    assert settings.render(parse_key_input("super")) == "Cmd"
    assert settings.keymap.bindings_for("broken") == ()
    assert settings.keymap.rejected == (("broken", "hyperspace"),)

    with pytest.raises(KeyInputError):
        settings.save()
    settings.save(tmp_path / "converted.json")
    assert Settings.load(tmp_path / "converted.json").keymap == settings.keymap


def test_missing_keymap(tmp_path: pathlib.Path):
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"display_platform": "windows"}))
    settings = Settings.load(src)
    assert settings.keymap == Keymap()
    assert settings.render(parse_key_input("meta")) == "Win"
