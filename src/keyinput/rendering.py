# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Labels for showing a KeyInput to the user, in menus and binding hints.

These labels are for reading, not for writing back into a keybinding file: "Ctrl"
and "Cmd" are not tokens the parser accepts. Use parsing.key_input_token for that.
"""
import types
import typing

from .commontypes import Platform, current_platform
from .inputtypes import KeyInput, Keyboard, Pointer
from .keycodes import KeyCode, PointerButton

UNIDENTIFIED_LABEL = "Unidentified"
UNIMPLEMENTED_POINTER_LABEL = "MouseUnimplemented"

# The OS key, labelled the way each platform's own keyboards are.
META_LABELS = types.MappingProxyType(
    {
        Platform.MACOS: "Cmd",
        Platform.WINDOWS: "Win",
        Platform.OTHER: "Meta",
    }
)
META_KEYCODES = frozenset({KeyCode.SuperLeft, KeyCode.SuperRight, KeyCode.Meta})

DISPLAY_NAMES = types.MappingProxyType(
    {
        KeyCode.Unidentified: UNIDENTIFIED_LABEL,
        KeyCode.Backquote: "`",
        KeyCode.Backslash: "\\",
        KeyCode.BracketLeft: "[",
        KeyCode.BracketRight: "]",
        KeyCode.Comma: ",",
        KeyCode.Digit0: "0",
        KeyCode.Digit1: "1",
        KeyCode.Digit2: "2",
        KeyCode.Digit3: "3",
        KeyCode.Digit4: "4",
        KeyCode.Digit5: "5",
        KeyCode.Digit6: "6",
        KeyCode.Digit7: "7",
        KeyCode.Digit8: "8",
        KeyCode.Digit9: "9",
        KeyCode.Equal: "=",
        KeyCode.IntlBackslash: "<",
        KeyCode.IntlRo: "IntlRo",
        KeyCode.IntlYen: "IntlYen",
        KeyCode.KeyA: "A",
        KeyCode.KeyB: "B",
        KeyCode.KeyC: "C",
        KeyCode.KeyD: "D",
        KeyCode.KeyE: "E",
        KeyCode.KeyF: "F",
        KeyCode.KeyG: "G",
        KeyCode.KeyH: "H",
        KeyCode.KeyI: "I",
        KeyCode.KeyJ: "J",
        KeyCode.KeyK: "K",
        KeyCode.KeyL: "L",
        KeyCode.KeyM: "M",
        KeyCode.KeyN: "N",
        KeyCode.KeyO: "O",
        KeyCode.KeyP: "P",
        KeyCode.KeyQ: "Q",
        KeyCode.KeyR: "R",
        KeyCode.KeyS: "S",
        KeyCode.KeyT: "T",
        KeyCode.KeyU: "U",
        KeyCode.KeyV: "V",
        KeyCode.KeyW: "W",
        KeyCode.KeyX: "X",
        KeyCode.KeyY: "Y",
        KeyCode.KeyZ: "Z",
        KeyCode.Minus: "-",
        KeyCode.Period: ".",
        KeyCode.Quote: "'",
        KeyCode.Semicolon: ";",
        KeyCode.Slash: "/",
        KeyCode.AltLeft: "Alt",
        KeyCode.AltRight: "Alt",
        # Lowercase, unlike every other named key. Existing menus and docs show it this way.
        KeyCode.Backspace: "backspace",
        KeyCode.CapsLock: "CapsLock",
        KeyCode.ContextMenu: "ContextMenu",
        KeyCode.ControlLeft: "Ctrl",
        KeyCode.ControlRight: "Ctrl",
        KeyCode.Enter: "Enter",
        KeyCode.ShiftLeft: "Shift",
        KeyCode.ShiftRight: "Shift",
        KeyCode.Space: "Space",
        KeyCode.Tab: "Tab",
        KeyCode.Convert: "Convert",
        KeyCode.KanaMode: "KanaMode",
        KeyCode.Lang1: "Lang1",
        KeyCode.Lang2: "Lang2",
        KeyCode.Lang3: "Lang3",
        KeyCode.Lang4: "Lang4",
        KeyCode.Lang5: "Lang5",
        KeyCode.NonConvert: "NonConvert",
        KeyCode.Delete: "Delete",
        KeyCode.End: "End",
        KeyCode.Help: "Help",
        KeyCode.Home: "Home",
        KeyCode.Insert: "Insert",
        KeyCode.PageDown: "PageDown",
        KeyCode.PageUp: "PageUp",
        KeyCode.ArrowDown: "Down",
        KeyCode.ArrowLeft: "Left",
        KeyCode.ArrowRight: "Right",
        KeyCode.ArrowUp: "Up",
        KeyCode.NumLock: "NumLock",
        KeyCode.Numpad0: "Numpad0",
        KeyCode.Numpad1: "Numpad1",
        KeyCode.Numpad2: "Numpad2",
        KeyCode.Numpad3: "Numpad3",
        KeyCode.Numpad4: "Numpad4",
        KeyCode.Numpad5: "Numpad5",
        KeyCode.Numpad6: "Numpad6",
        KeyCode.Numpad7: "Numpad7",
        KeyCode.Numpad8: "Numpad8",
        KeyCode.Numpad9: "Numpad9",
        KeyCode.NumpadAdd: "NumpadAdd",
        KeyCode.NumpadBackspace: "NumpadBackspace",
        KeyCode.NumpadClear: "NumpadClear",
        KeyCode.NumpadClearEntry: "NumpadClearEntry",
        KeyCode.NumpadComma: "NumpadComma",
        KeyCode.NumpadDecimal: "NumpadDecimal",
        KeyCode.NumpadDivide: "NumpadDivide",
        KeyCode.NumpadEnter: "NumpadEnter",
        KeyCode.NumpadEqual: "NumpadEqual",
        KeyCode.NumpadHash: "NumpadHash",
        KeyCode.NumpadMemoryAdd: "NumpadMemoryAdd",
        KeyCode.NumpadMemoryClear: "NumpadMemoryClear",
        KeyCode.NumpadMemoryRecall: "NumpadMemoryRecall",
        KeyCode.NumpadMemoryStore: "NumpadMemoryStore",
        KeyCode.NumpadMemorySubtract: "NumpadMemorySubtract",
        KeyCode.NumpadMultiply: "NumpadMultiply",
        KeyCode.NumpadParenLeft: "NumpadParenLeft",
        KeyCode.NumpadParenRight: "NumpadParenRight",
        KeyCode.NumpadStar: "NumpadStar",
        KeyCode.NumpadSubtract: "NumpadSubtract",
        KeyCode.Escape: "Escape",
        KeyCode.Fn: "Fn",
        KeyCode.FnLock: "FnLock",
        KeyCode.PrintScreen: "PrintScreen",
        KeyCode.ScrollLock: "ScrollLock",
        KeyCode.Pause: "Pause",
        KeyCode.BrowserBack: "BrowserBack",
        KeyCode.BrowserFavorites: "BrowserFavorites",
        KeyCode.BrowserForward: "BrowserForward",
        KeyCode.BrowserHome: "BrowserHome",
        KeyCode.BrowserRefresh: "BrowserRefresh",
        KeyCode.BrowserSearch: "BrowserSearch",
        KeyCode.BrowserStop: "BrowserStop",
        KeyCode.Eject: "Eject",
        KeyCode.LaunchApp1: "LaunchApp1",
        KeyCode.LaunchApp2: "LaunchApp2",
        KeyCode.LaunchMail: "LaunchMail",
        KeyCode.MediaPlayPause: "MediaPlayPause",
        KeyCode.MediaSelect: "MediaSelect",
        KeyCode.MediaStop: "MediaStop",
        KeyCode.MediaTrackNext: "MediaTrackNext",
        KeyCode.MediaTrackPrevious: "MediaTrackPrevious",
        KeyCode.Power: "Power",
        KeyCode.Sleep: "Sleep",
        KeyCode.AudioVolumeDown: "AudioVolumeDown",
        KeyCode.AudioVolumeMute: "AudioVolumeMute",
        KeyCode.AudioVolumeUp: "AudioVolumeUp",
        KeyCode.WakeUp: "WakeUp",
        KeyCode.Hyper: "Hyper",
        KeyCode.Turbo: "Turbo",
        KeyCode.Abort: "Abort",
        KeyCode.Resume: "Resume",
        KeyCode.Suspend: "Suspend",
        KeyCode.Again: "Again",
        KeyCode.Copy: "Copy",
        KeyCode.Cut: "Cut",
        KeyCode.Find: "Find",
        KeyCode.Open: "Open",
        KeyCode.Paste: "Paste",
        KeyCode.Props: "Props",
        KeyCode.Select: "Select",
        KeyCode.Undo: "Undo",
        KeyCode.Hiragana: "Hiragana",
        KeyCode.Katakana: "Katakana",
        **{KeyCode[f"F{n}"]: f"F{n}" for n in range(1, 36)},
    }
)

POINTER_DISPLAY_NAMES = types.MappingProxyType(
    {
        PointerButton.AUXILIARY: "MouseMiddle",
        PointerButton.X2: "MouseForward",
        PointerButton.X1: "MouseBackward",
    }
)


def render_keycode(code: KeyCode, platform: Platform) -> str:
    if code in META_KEYCODES:
        return META_LABELS[platform]
    return DISPLAY_NAMES.get(code, UNIDENTIFIED_LABEL)


def render_key_input(key_input: KeyInput, platform: typing.Optional[Platform] = None) -> str:
    """The label to show for key_input.

    Keyboard keys are labelled by physical position only; the logical key is never
    looked at, so "a" and "A" both show as "A". Pass platform to label the OS key as
    some other platform would; by default the running platform is used.
    """
    match key_input:
        case Keyboard(code=code):
            if platform is None:
                platform = current_platform()
            return render_keycode(code, platform)
        case Pointer(button=button):
            return POINTER_DISPLAY_NAMES.get(button, UNIMPLEMENTED_POINTER_LABEL)
    raise TypeError(f"Not a KeyInput: {key_input!r}")
