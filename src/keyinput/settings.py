# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import json
import logging
import pathlib
import typing

import attr
import cattrs
import tomli

from .commontypes import KeyInputError, Platform, UnrecognizedToken
from .inputtypes import KeyInput
from .parsing import key_input_token, parse_key_input
from .rendering import render_key_input

logger = logging.getLogger(__name__)

KEYMAP = {
    "cursor_up": ["up", "k"],
    "cursor_down": ["down", "j"],
    "cursor_left": ["left", "h"],
    "cursor_right": ["right", "l"],
    "page_up": ["pageup"],
    "page_down": ["pagedown"],
    "delete_backward": ["bs"],
    "delete_forward": ["del"],
    "insert_newline": ["enter"],
    "indent": ["tab"],
    "cancel": ["esc"],
    "open_context_menu": ["contextmenu"],
    "show_help": ["f1"],
    "jump_back": ["mousebackward", "browserback"],
    "jump_forward": ["mouseforward", "browserforward"],
    "paste_selection": ["mousemiddle"],
}


@attr.frozen
class Keymap:
    """Which keys and buttons are bound to each command.

    A command may have several alternative bindings. Tokens that failed to parse
    when the keymap was loaded are kept in `rejected` as (command, token) pairs.
    """

    bindings: dict[str, tuple[KeyInput, ...]] = attr.field(factory=dict)
    rejected: tuple[tuple[str, str], ...] = attr.field(default=(), eq=False)
    _by_input: dict[KeyInput, tuple[str, ...]] = attr.field(init=False, eq=False, repr=False)

    @_by_input.default
    def _index_by_input(self):
        index: dict[KeyInput, list[str]] = {}
        for command, key_inputs in self.bindings.items():
            for key_input in key_inputs:
                commands = index.setdefault(key_input, [])
                if command not in commands:
                    commands.append(command)
        return {key_input: tuple(commands) for key_input, commands in index.items()}

    def bindings_for(self, command: str) -> tuple[KeyInput, ...]:
        return self.bindings.get(command, ())

    def commands_for(self, key_input: KeyInput) -> tuple[str, ...]:
        return self._by_input.get(key_input, ())

    def labels_for(self, command: str, platform: typing.Optional[Platform] = None) -> list[str]:
        return [render_key_input(key_input, platform) for key_input in self.bindings_for(command)]


def structure_keymap(d: dict, typ: type[Keymap]):
    bindings = {}
    rejected = []
    for command, tokens in d.items():
        if isinstance(tokens, str):
            tokens = [tokens]
        elif not isinstance(tokens, list):
            logger.warning("Skipping bindings for %s: %r is not a key name or list of key names", command, tokens)
            rejected.append((command, repr(tokens)))
            continue
        key_inputs = []
        for token in tokens:
            if not isinstance(token, str):
                logger.warning("Skipping binding for %s: %r is not a key name", command, token)
                rejected.append((command, repr(token)))
                continue
            try:
                key_inputs.append(parse_key_input(token))
            except UnrecognizedToken as e:
                logger.warning("Skipping binding for %s: %s", command, e)
                rejected.append((command, token))
        bindings[command] = tuple(key_inputs)
    return typ(bindings=bindings, rejected=tuple(rejected))


def unstructure_keymap(keymap: Keymap):
    return {command: [key_input_token(key_input) for key_input in key_inputs] for command, key_inputs in keymap.bindings.items()}


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(Keymap, unstructure_keymap)
settings_converter.register_structure_hook(Keymap, structure_keymap)


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: pathlib.Path
    # Label the OS key as this platform would; None means the running platform.
    display_platform: typing.Optional[Platform] = None
    keymap: Keymap = dataclasses.field(default_factory=Keymap)

    def render(self, key_input: KeyInput) -> str:
        return render_key_input(key_input, self.display_platform)

    def labels_for(self, command: str) -> list[str]:
        return self.keymap.labels_for(command, self.display_platform)

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest.suffix == ".toml":
            raise KeyInputError(f"Settings can only be saved as JSON, not to {dest}")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        if src.suffix == ".toml":
            with src.open("rb") as f:
                raw = tomli.load(f)
        else:
            with src.open() as f:
                raw = json.load(f)
        raw["_path"] = src
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "display_platform": "other",
                "keymap": KEYMAP,
            },
            cls,
        )


settings_converter.register_structure_hook(Settings, cattrs.gen.make_dict_structure_fn(Settings, settings_converter))
