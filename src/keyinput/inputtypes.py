# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import attr
import msgspec

from .keycodes import KeyCode, NamedKey, PointerButton

if typing.TYPE_CHECKING:
    from .commontypes import Platform


class Character(msgspec.Struct, frozen=True):
    text: str


class Dead(msgspec.Struct, frozen=True):
    # The accent the dead key will combine with, if the platform reported one.
    char: typing.Optional[str] = None


class Unidentified(msgspec.Struct, frozen=True):
    native: typing.Optional[int] = None


LogicalKey = NamedKey | Character | Dead | Unidentified


class KeyInput:
    """A single key or pointer button, as a keybinding refers to it.

    Concrete values are either Keyboard or Pointer. Both are immutable and hashable,
    so they can be used as dictionary keys by whatever matches bindings against live
    input.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, token: str) -> KeyInput:
        from .parsing import parse_key_input

        return parse_key_input(token)

    def render(self, platform: typing.Optional[Platform] = None) -> str:
        from .rendering import render_key_input

        return render_key_input(self, platform)

    def __str__(self):
        return self.render()


@attr.frozen
class Keyboard(KeyInput):
    """A keyboard key.

    Identity is the physical code alone: two Keyboard values are equal (and hash
    alike) whenever their codes match, even if their logical keys differ. That
    keeps a binding to the A key working whatever the current layout produces
    there. The logical key is carried along but never compared.
    """

    key: LogicalKey
    code: KeyCode

    def __eq__(self, other):
        if isinstance(other, Keyboard):
            return self.code == other.code
        if isinstance(other, KeyInput):
            return False
        return NotImplemented

    def __hash__(self):
        return hash(self.code)


@attr.frozen
class Pointer(KeyInput):
    button: PointerButton

    def __eq__(self, other):
        if isinstance(other, Pointer):
            return self.button == other.button
        if isinstance(other, KeyInput):
            return False
        return NotImplemented

    def __hash__(self):
        # PointerButton values are small integers; hashing the integer is enough
        # to keep equal buttons together.
        return hash(int(self.button))
