# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Turn the key names used in keybinding files into KeyInput values.

A token names exactly one key or pointer button; splitting "ctrl+shift+x" or
multi-key sequences into tokens happens before anything here is called. Tokens are
matched case-insensitively, against these tables in order:

1. a single character, such as "a", "=" or "é";
2. the canonical names in NAMED_KEYS, such as "enter", "arrowup" or "f5";
3. the shorthand names in KEY_ALIASES, such as "esc" or "del";
4. the pointer buttons in POINTER_BUTTONS.
"""
import types
import unicodedata

from .commontypes import KeyInputError, UnrecognizedToken
from .inputtypes import Character, Dead, KeyInput, Keyboard, LogicalKey, Pointer, Unidentified
from .keycodes import KeyCode, NamedKey, PointerButton

# Physical positions for the characters found on a US layout. Any other character
# still parses, but with KeyCode.Fn as its code.
CHARACTER_KEYCODES = types.MappingProxyType(
    {
        "a": KeyCode.KeyA,
        "b": KeyCode.KeyB,
        "c": KeyCode.KeyC,
        "d": KeyCode.KeyD,
        "e": KeyCode.KeyE,
        "f": KeyCode.KeyF,
        "g": KeyCode.KeyG,
        "h": KeyCode.KeyH,
        "i": KeyCode.KeyI,
        "j": KeyCode.KeyJ,
        "k": KeyCode.KeyK,
        "l": KeyCode.KeyL,
        "m": KeyCode.KeyM,
        "n": KeyCode.KeyN,
        "o": KeyCode.KeyO,
        "p": KeyCode.KeyP,
        "q": KeyCode.KeyQ,
        "r": KeyCode.KeyR,
        "s": KeyCode.KeyS,
        "t": KeyCode.KeyT,
        "u": KeyCode.KeyU,
        "v": KeyCode.KeyV,
        "w": KeyCode.KeyW,
        "x": KeyCode.KeyX,
        "y": KeyCode.KeyY,
        "z": KeyCode.KeyZ,
        "=": KeyCode.Equal,
        "-": KeyCode.Minus,
        "0": KeyCode.Digit0,
        "1": KeyCode.Digit1,
        "2": KeyCode.Digit2,
        "3": KeyCode.Digit3,
        "4": KeyCode.Digit4,
        "5": KeyCode.Digit5,
        "6": KeyCode.Digit6,
        "7": KeyCode.Digit7,
        "8": KeyCode.Digit8,
        "9": KeyCode.Digit9,
        "`": KeyCode.Backquote,
        "/": KeyCode.Slash,
        "\\": KeyCode.Backslash,
        ",": KeyCode.Comma,
        ".": KeyCode.Period,
        "*": KeyCode.NumpadMultiply,
        "+": KeyCode.NumpadAdd,
        ";": KeyCode.Semicolon,
        "'": KeyCode.Quote,
        "[": KeyCode.BracketLeft,
        "]": KeyCode.BracketRight,
        "<": KeyCode.IntlBackslash,
    }
)

# Named keys with no physical position of their own; all of them share KeyCode.Fn,
# so bindings cannot tell them apart. Each one's token is its lowercased name.
_UNPOSITIONED_KEYS = (
    NamedKey.Fn,
    NamedKey.Symbol,
    NamedKey.SymbolLock,
    NamedKey.Clear,
    NamedKey.CrSel,
    NamedKey.EraseEof,
    NamedKey.ExSel,
    NamedKey.Redo,
    NamedKey.Accept,
    NamedKey.Attn,
    NamedKey.Cancel,
    NamedKey.Execute,
    NamedKey.ZoomIn,
    NamedKey.ZoomOut,
    NamedKey.BrightnessDown,
    NamedKey.BrightnessUp,
    NamedKey.LogOff,
    NamedKey.PowerOff,
    NamedKey.Hibernate,
    NamedKey.Standby,
    NamedKey.AllCandidates,
    NamedKey.Alphanumeric,
    NamedKey.CodeInput,
    NamedKey.Compose,
    NamedKey.FinalMode,
    NamedKey.GroupFirst,
    NamedKey.GroupLast,
    NamedKey.GroupNext,
    NamedKey.GroupPrevious,
    NamedKey.ModeChange,
    NamedKey.NextCandidate,
    NamedKey.PreviousCandidate,
    NamedKey.Process,
    NamedKey.SingleCandidate,
    NamedKey.HangulMode,
    NamedKey.HanjaMode,
    NamedKey.JunjaMode,
    NamedKey.Eisu,
    NamedKey.Hankaku,
    NamedKey.HiraganaKatakana,
    NamedKey.KanjiMode,
    NamedKey.Romaji,
    NamedKey.Zenkaku,
    NamedKey.ZenkakuHankaku,
    NamedKey.Soft1,
    NamedKey.Soft2,
    NamedKey.Soft3,
    NamedKey.Soft4,
    NamedKey.ChannelDown,
    NamedKey.ChannelUp,
    NamedKey.Close,
    NamedKey.MailForward,
    NamedKey.MailReply,
    NamedKey.MailSend,
    NamedKey.MediaClose,
    NamedKey.MediaFastForward,
    NamedKey.MediaPause,
    NamedKey.MediaPlay,
    NamedKey.MediaRecord,
    NamedKey.MediaRewind,
    NamedKey.New,
    NamedKey.Print,
    NamedKey.Save,
    NamedKey.SpellCheck,
    NamedKey.Key11,
    NamedKey.Key12,
    NamedKey.AudioBalanceLeft,
    NamedKey.AudioBalanceRight,
    NamedKey.AudioBassBoostDown,
    NamedKey.AudioBassBoostToggle,
    NamedKey.AudioBassBoostUp,
    NamedKey.AudioFaderFront,
    NamedKey.AudioFaderRear,
    NamedKey.AudioSurroundModeNext,
    NamedKey.AudioTrebleDown,
    NamedKey.AudioTrebleUp,
    NamedKey.MicrophoneToggle,
    NamedKey.MicrophoneVolumeDown,
    NamedKey.MicrophoneVolumeUp,
    NamedKey.MicrophoneVolumeMute,
    NamedKey.SpeechCorrectionList,
    NamedKey.SpeechInputToggle,
    NamedKey.LaunchApplication1,
    NamedKey.LaunchApplication2,
    NamedKey.LaunchCalendar,
    NamedKey.LaunchContacts,
    NamedKey.LaunchMediaPlayer,
    NamedKey.LaunchMusicPlayer,
    NamedKey.LaunchPhone,
    NamedKey.LaunchScreenSaver,
    NamedKey.LaunchSpreadsheet,
    NamedKey.LaunchWebBrowser,
    NamedKey.LaunchWebCam,
    NamedKey.LaunchWordProcessor,
    NamedKey.AppSwitch,
    NamedKey.Call,
    NamedKey.Camera,
    NamedKey.CameraFocus,
    NamedKey.EndCall,
    NamedKey.GoBack,
    NamedKey.GoHome,
    NamedKey.HeadsetHook,
    NamedKey.LastNumberRedial,
    NamedKey.Notification,
    NamedKey.MannerMode,
    NamedKey.VoiceDial,
    NamedKey.TV,
    NamedKey.TV3DMode,
    NamedKey.TVAntennaCable,
    NamedKey.TVAudioDescription,
    NamedKey.TVAudioDescriptionMixDown,
    NamedKey.TVAudioDescriptionMixUp,
    NamedKey.TVContentsMenu,
    NamedKey.TVDataService,
    NamedKey.TVInput,
    NamedKey.TVInputComponent1,
    NamedKey.TVInputComponent2,
    NamedKey.TVInputComposite1,
    NamedKey.TVInputComposite2,
    NamedKey.TVInputHDMI1,
    NamedKey.TVInputHDMI2,
    NamedKey.TVInputHDMI3,
    NamedKey.TVInputHDMI4,
    NamedKey.TVInputVGA1,
    NamedKey.TVMediaContext,
    NamedKey.TVNetwork,
    NamedKey.TVNumberEntry,
    NamedKey.TVPower,
    NamedKey.TVRadioService,
    NamedKey.TVSatellite,
    NamedKey.TVSatelliteBS,
    NamedKey.TVSatelliteCS,
    NamedKey.TVSatelliteToggle,
    NamedKey.TVTerrestrialAnalog,
    NamedKey.TVTerrestrialDigital,
    NamedKey.TVTimer,
    NamedKey.AVRInput,
    NamedKey.AVRPower,
    NamedKey.ColorF0Red,
    NamedKey.ColorF1Green,
    NamedKey.ColorF2Yellow,
    NamedKey.ColorF3Blue,
    NamedKey.ColorF4Grey,
    NamedKey.ColorF5Brown,
    NamedKey.ClosedCaptionToggle,
    NamedKey.Dimmer,
    NamedKey.DisplaySwap,
    NamedKey.DVR,
    NamedKey.Exit,
    NamedKey.FavoriteClear0,
    NamedKey.FavoriteClear1,
    NamedKey.FavoriteClear2,
    NamedKey.FavoriteClear3,
    NamedKey.FavoriteRecall0,
    NamedKey.FavoriteRecall1,
    NamedKey.FavoriteRecall2,
    NamedKey.FavoriteRecall3,
    NamedKey.FavoriteStore0,
    NamedKey.FavoriteStore1,
    NamedKey.FavoriteStore2,
    NamedKey.FavoriteStore3,
    NamedKey.Guide,
    NamedKey.GuideNextDay,
    NamedKey.GuidePreviousDay,
    NamedKey.Info,
    NamedKey.InstantReplay,
    NamedKey.Link,
    NamedKey.ListProgram,
    NamedKey.LiveContent,
    NamedKey.Lock,
    NamedKey.MediaApps,
    NamedKey.MediaAudioTrack,
    NamedKey.MediaLast,
    NamedKey.MediaSkipBackward,
    NamedKey.MediaSkipForward,
    NamedKey.MediaStepBackward,
    NamedKey.MediaStepForward,
    NamedKey.MediaTopMenu,
    NamedKey.NavigateIn,
    NamedKey.NavigateNext,
    NamedKey.NavigateOut,
    NamedKey.NavigatePrevious,
    NamedKey.NextFavoriteChannel,
    NamedKey.NextUserProfile,
    NamedKey.OnDemand,
    NamedKey.Pairing,
    NamedKey.PinPDown,
    NamedKey.PinPMove,
    NamedKey.PinPToggle,
    NamedKey.PinPUp,
    NamedKey.PlaySpeedDown,
    NamedKey.PlaySpeedReset,
    NamedKey.PlaySpeedUp,
    NamedKey.RandomToggle,
    NamedKey.RcLowBattery,
    NamedKey.RecordSpeedNext,
    NamedKey.RfBypass,
    NamedKey.ScanChannelsToggle,
    NamedKey.ScreenModeNext,
    NamedKey.Settings,
    NamedKey.SplitScreenToggle,
    NamedKey.STBInput,
    NamedKey.STBPower,
    NamedKey.Subtitle,
    NamedKey.Teletext,
    NamedKey.VideoModeNext,
    NamedKey.Wink,
    NamedKey.ZoomToggle,
)

NAMED_KEYS: types.MappingProxyType[str, tuple[LogicalKey, KeyCode]] = types.MappingProxyType(
    {
        "unidentified": (Unidentified(), KeyCode.Fn),
        "dead": (Dead(), KeyCode.Fn),
        **{key.name.lower(): (key, KeyCode.Fn) for key in _UNPOSITIONED_KEYS},
        "alt": (NamedKey.Alt, KeyCode.AltLeft),
        "altgraph": (NamedKey.AltGraph, KeyCode.AltRight),
        "capslock": (NamedKey.CapsLock, KeyCode.CapsLock),
        "control": (NamedKey.Control, KeyCode.ControlLeft),
        "fnlock": (NamedKey.FnLock, KeyCode.FnLock),
        "meta": (NamedKey.Meta, KeyCode.Meta),
        "numlock": (NamedKey.NumLock, KeyCode.NumLock),
        "scrolllock": (NamedKey.ScrollLock, KeyCode.ScrollLock),
        "shift": (NamedKey.Shift, KeyCode.ShiftLeft),
        "hyper": (NamedKey.Hyper, KeyCode.Hyper),
        "super": (NamedKey.Super, KeyCode.Meta),
        "enter": (NamedKey.Enter, KeyCode.Enter),
        "tab": (NamedKey.Tab, KeyCode.Tab),
        "arrowdown": (NamedKey.ArrowDown, KeyCode.ArrowDown),
        "arrowleft": (NamedKey.ArrowLeft, KeyCode.ArrowLeft),
        "arrowright": (NamedKey.ArrowRight, KeyCode.ArrowRight),
        "arrowup": (NamedKey.ArrowUp, KeyCode.ArrowUp),
        "end": (NamedKey.End, KeyCode.End),
        "home": (NamedKey.Home, KeyCode.Home),
        "pagedown": (NamedKey.PageDown, KeyCode.PageDown),
        "pageup": (NamedKey.PageUp, KeyCode.PageUp),
        "backspace": (NamedKey.Backspace, KeyCode.Backspace),
        "copy": (NamedKey.Copy, KeyCode.Copy),
        "cut": (NamedKey.Cut, KeyCode.Cut),
        "delete": (NamedKey.Delete, KeyCode.Delete),
        "insert": (NamedKey.Insert, KeyCode.Insert),
        "paste": (NamedKey.Paste, KeyCode.Paste),
        "undo": (NamedKey.Undo, KeyCode.Undo),
        "again": (NamedKey.Again, KeyCode.Again),
        "contextmenu": (NamedKey.ContextMenu, KeyCode.ContextMenu),
        "escape": (NamedKey.Escape, KeyCode.Escape),
        "find": (NamedKey.Find, KeyCode.Find),
        "help": (NamedKey.Help, KeyCode.Help),
        "pause": (NamedKey.Pause, KeyCode.Pause),
        "play": (NamedKey.Play, KeyCode.MediaPlayPause),
        "props": (NamedKey.Props, KeyCode.Props),
        "select": (NamedKey.Select, KeyCode.Select),
        "eject": (NamedKey.Eject, KeyCode.Eject),
        "power": (NamedKey.Power, KeyCode.Power),
        "printscreen": (NamedKey.PrintScreen, KeyCode.PrintScreen),
        "wakeup": (NamedKey.WakeUp, KeyCode.WakeUp),
        "convert": (NamedKey.Convert, KeyCode.Convert),
        "nonconvert": (NamedKey.NonConvert, KeyCode.NonConvert),
        "hiragana": (NamedKey.Hiragana, KeyCode.Hiragana),
        "kanamode": (NamedKey.KanaMode, KeyCode.KanaMode),
        "katakana": (NamedKey.Katakana, KeyCode.Katakana),
        "f1": (NamedKey.F1, KeyCode.F1),
        "f2": (NamedKey.F2, KeyCode.F2),
        "f3": (NamedKey.F3, KeyCode.F3),
        "f4": (NamedKey.F4, KeyCode.F4),
        "f5": (NamedKey.F5, KeyCode.F5),
        "f6": (NamedKey.F6, KeyCode.F6),
        "f7": (NamedKey.F7, KeyCode.F7),
        "f8": (NamedKey.F8, KeyCode.F8),
        "f9": (NamedKey.F9, KeyCode.F9),
        "f10": (NamedKey.F10, KeyCode.F10),
        "f11": (NamedKey.F11, KeyCode.F11),
        "f12": (NamedKey.F12, KeyCode.F12),
        "mediaplaypause": (NamedKey.MediaPlayPause, KeyCode.MediaPlayPause),
        "mediastop": (NamedKey.MediaStop, KeyCode.MediaStop),
        "mediatracknext": (NamedKey.MediaTrackNext, KeyCode.MediaTrackNext),
        "mediatrackprevious": (NamedKey.MediaTrackPrevious, KeyCode.MediaTrackPrevious),
        "open": (NamedKey.Open, KeyCode.Open),
        "audiovolumedown": (NamedKey.AudioVolumeDown, KeyCode.AudioVolumeDown),
        "audiovolumeup": (NamedKey.AudioVolumeUp, KeyCode.AudioVolumeUp),
        "audiovolumemute": (NamedKey.AudioVolumeMute, KeyCode.AudioVolumeMute),
        "launchmail": (NamedKey.LaunchMail, KeyCode.LaunchMail),
        "browserback": (NamedKey.BrowserBack, KeyCode.BrowserBack),
        "browserfavorites": (NamedKey.BrowserFavorites, KeyCode.BrowserFavorites),
        "browserforward": (NamedKey.BrowserForward, KeyCode.BrowserForward),
        "browserhome": (NamedKey.BrowserHome, KeyCode.BrowserHome),
        "browserrefresh": (NamedKey.BrowserRefresh, KeyCode.BrowserRefresh),
        "browsersearch": (NamedKey.BrowserSearch, KeyCode.BrowserSearch),
        "browserstop": (NamedKey.BrowserStop, KeyCode.BrowserStop),
    }
)

# Shorter spellings accepted in keybinding files. Only consulted when nothing in
# NAMED_KEYS matched.
KEY_ALIASES: types.MappingProxyType[str, tuple[LogicalKey, KeyCode]] = types.MappingProxyType(
    {
        "esc": (NamedKey.Escape, KeyCode.Escape),
        "space": (Character(" "), KeyCode.Space),
        "bs": (NamedKey.Backspace, KeyCode.Backspace),
        "up": (NamedKey.ArrowUp, KeyCode.ArrowUp),
        "down": (NamedKey.ArrowDown, KeyCode.ArrowDown),
        "right": (NamedKey.ArrowRight, KeyCode.ArrowRight),
        "left": (NamedKey.ArrowLeft, KeyCode.ArrowLeft),
        "del": (NamedKey.Delete, KeyCode.Delete),
    }
)

# Primary and secondary clicks are deliberately absent.
POINTER_BUTTONS = types.MappingProxyType(
    {
        "mousemiddle": PointerButton.AUXILIARY,
        "mouseforward": PointerButton.X2,
        "mousebackward": PointerButton.X1,
    }
)


def is_character_token(token: str) -> bool:
    """Whether a token names the key for a single character.

    Every character must be printable, and everything after the first must be
    non-ASCII: "é" written with a combining accent qualifies, "ab" does not.
    """
    return all(unicodedata.category(c) != "Cc" for c in token) and all(not c.isascii() for c in token[1:])


def parse_keyboard(token: str) -> tuple[LogicalKey, KeyCode] | None:
    if is_character_token(token):
        return (Character(token), CHARACTER_KEYCODES.get(token, KeyCode.Fn))
    if token in NAMED_KEYS:
        return NAMED_KEYS[token]
    return KEY_ALIASES.get(token)


def parse_key_input(token: str) -> KeyInput:
    token = token.lower()
    keyboard = parse_keyboard(token)
    if keyboard is not None:
        return Keyboard(*keyboard)
    if token in POINTER_BUTTONS:
        return Pointer(POINTER_BUTTONS[token])
    raise UnrecognizedToken(token)


_NAMED_KEY_TOKENS = {logical: token for token, (logical, _code) in NAMED_KEYS.items()}
_POINTER_BUTTON_TOKENS = {button: token for token, button in POINTER_BUTTONS.items()}


def key_input_token(key_input: KeyInput) -> str:
    """The token to write to a keybinding file for key_input.

    Parsing the result gives back a KeyInput equal to key_input for anything
    parse_key_input can produce. Keys that only ever come from the windowing layer,
    such as NamedKey.F20 or multi-character text from an input method, may have no
    token at all; those raise KeyInputError.
    """
    match key_input:
        case Keyboard(key=Character(text=" "), code=KeyCode.Space):
            return "space"
        case Keyboard(key=Character(text=text)) if is_character_token(text.lower()):
            return text
        case Keyboard(key=key) if key in _NAMED_KEY_TOKENS:
            return _NAMED_KEY_TOKENS[key]
        case Pointer(button=button) if button in _POINTER_BUTTON_TOKENS:
            return _POINTER_BUTTON_TOKENS[button]
    raise KeyInputError(f"No token names {key_input!r}")
