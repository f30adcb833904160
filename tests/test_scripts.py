# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import json
import pathlib

import pytest

from keyinput.scripts import check_keymap_cli, render_cli


def test_render_cli(capsys):
    assert render_cli(["enter", "A", "bs", "mousemiddle", "super", "--platform", "macos"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "enter\tEnter",
        "A\tA",
        "bs\tbackspace",
        "mousemiddle\tMouseMiddle",
        "super\tCmd",
    ]
    assert captured.err == ""


def test_render_cli_unrecognized(capsys):
    assert render_cli(["esc", "ctrl+x", "--platform", "other"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["esc\tEscape"]
    assert captured.err.splitlines() == ["Unrecognized key token: 'ctrl+x'"]


def test_render_cli_bad_platform():
    with pytest.raises(SystemExit):
        render_cli(["esc", "--platform", "beos"])


def test_check_keymap_cli(tmp_path: pathlib.Path, capsys):
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"display_platform": "windows", "keymap": {"cancel": ["esc"], "palette": ["meta", "f1"]}}))
    assert check_keymap_cli([str(src)]) == 0
    assert capsys.readouterr().out.splitlines() == ["cancel: Escape", "palette: Win, F1"]


def test_check_keymap_cli_rejected(tmp_path: pathlib.Path, capsys):
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"display_platform": "other", "keymap": {"cancel": ["esc", "escape key"]}}))
    assert check_keymap_cli([str(src)]) == 1
    assert capsys.readouterr().out.splitlines() == ["cancel: Escape"]
