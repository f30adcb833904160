# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# A keybinding file names keys with tokens such as "enter", "a" or "mousemiddle".
# parse: token -> KeyInput, compared and hashed by physical key position
# render: KeyInput -> label for menus and hints
# key_input_token: KeyInput -> token, for writing keybinding files back out
from .commontypes import KeyInputError, Platform, UnrecognizedToken, current_platform
from .inputtypes import Character, Dead, KeyInput, Keyboard, LogicalKey, Pointer, Unidentified
from .keycodes import KeyCode, NamedKey, PointerButton
from .parsing import key_input_token, parse_key_input
from .rendering import render_key_input
