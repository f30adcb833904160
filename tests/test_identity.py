# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import random

import attr
import pytest

from keyinput.inputtypes import Character, Dead, Keyboard, Pointer, Unidentified
from keyinput.keycodes import KeyCode, NamedKey, PointerButton
from keyinput.parsing import KEY_ALIASES, NAMED_KEYS, POINTER_BUTTONS, parse_key_input


def random_logical_key(rng: random.Random):
    match rng.randrange(4):
        case 0:
            return rng.choice(list(NamedKey))
        case 1:
            return Character(chr(rng.randrange(0x20, 0x3000)))
        case 2:
            return Dead(rng.choice([None, "`", "´", "^"]))
        case _:
            return Unidentified(rng.choice([None, rng.randrange(1 << 16)]))


def test_logical_key_is_not_part_of_identity():
    a = Keyboard(Character("a"), KeyCode.KeyA)
    q = Keyboard(Character("q"), KeyCode.KeyA)
    assert a == q
    assert hash(a) == hash(q)
    assert a != Keyboard(Character("a"), KeyCode.KeyQ)


def test_layout_independent_matching():
    bindings = {parse_key_input("a"): "select_all"}
    # An AZERTY layout reports "q" from the key in the US "a" position.
    assert bindings[Keyboard(Character("q"), KeyCode.KeyA)] == "select_all"


@pytest.mark.parametrize(
    "first,second",
    (
        ("meta", "super"),
        ("play", "mediaplaypause"),
        ("fn", "tvpower"),
        ("fn", "é"),
        ("esc", "escape"),
        ("Escape", "ESC"),
        ("a", "A"),
    ),
)
def test_routes_to_the_same_code_are_equal(first: str, second: str):
    assert parse_key_input(first) == parse_key_input(second)
    assert hash(parse_key_input(first)) == hash(parse_key_input(second))


def test_space_character_and_space_alias_differ():
    assert parse_key_input(" ") != parse_key_input("space")


def test_pointer_inputs():
    pointers = [parse_key_input(token) for token in POINTER_BUTTONS]
    assert len(set(pointers)) == 3
    for i, a in enumerate(pointers):
        for j, b in enumerate(pointers):
            assert (a == b) is (i == j)


def test_pointers_never_equal_keyboards():
    keyboards = [parse_key_input(token) for token in [*NAMED_KEYS, *KEY_ALIASES]]
    keyboards.extend(Keyboard(Unidentified(), code) for code in KeyCode)
    for token in POINTER_BUTTONS:
        pointer = parse_key_input(token)
        for keyboard in keyboards:
            assert pointer != keyboard
            assert keyboard != pointer
            assert not pointer == keyboard
            assert not keyboard == pointer


def test_pointer_hash_is_button_value():
    for button in PointerButton:
        assert hash(Pointer(button)) == hash(int(button))


def test_comparison_with_other_types():
    enter = parse_key_input("enter")
    assert enter != "enter"
    assert enter != KeyCode.Enter
    assert Pointer(PointerButton.X1) != 4
    assert enter is not None


def test_equal_inputs_hash_alike():
    rng = random.Random(20211015)
    codes = list(KeyCode)
    buttons = list(PointerButton)
    for _ in range(10_000):
        if rng.random() < 0.8:
            code = rng.choice(codes)
            a = Keyboard(random_logical_key(rng), code)
            b = Keyboard(random_logical_key(rng), code)
        else:
            button = rng.choice(buttons)
            a = Pointer(button)
            b = Pointer(PointerButton(int(button)))
        assert a == b
        assert hash(a) == hash(b)


def test_set_and_dict_membership():
    inputs = {parse_key_input(token) for token in ("esc", "escape", "ESC", "up", "arrowup", "mousemiddle", "MouseMiddle")}
    assert inputs == {parse_key_input("escape"), parse_key_input("arrowup"), Pointer(PointerButton.AUXILIARY)}


def test_key_inputs_are_immutable():
    enter = parse_key_input("enter")
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        enter.code = KeyCode.Tab
    pointer = parse_key_input("mousemiddle")
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        pointer.button = PointerButton.X1
