# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse
import logging
import pathlib
import sys

from .commontypes import Platform, UnrecognizedToken
from .parsing import parse_key_input
from .rendering import render_key_input
from .settings import Settings

render_parser = argparse.ArgumentParser(prog="keyinput-render", description="Show the display label for key names.")
render_parser.add_argument("tokens", nargs="+", metavar="TOKEN")
render_parser.add_argument("--platform", type=Platform, choices=list(Platform), default=None)


def render_tokens(tokens, platform=None):
    failed = 0
    for token in tokens:
        try:
            key_input = parse_key_input(token)
        except UnrecognizedToken as e:
            print(e, file=sys.stderr)
            failed += 1
            continue
        print(f"{token}\t{render_key_input(key_input, platform)}")
    return failed


def render_cli(argv=None):
    args = render_parser.parse_args(argv)
    return 1 if render_tokens(args.tokens, args.platform) else 0


check_keymap_parser = argparse.ArgumentParser(prog="keyinput-check-keymap", description="Load a keymap and list its bindings.")
check_keymap_parser.add_argument("settings", type=pathlib.Path)


def check_keymap_cli(argv=None):
    logging.basicConfig(level=logging.INFO)
    settings = Settings.load(check_keymap_parser.parse_args(argv).settings)
    for command in sorted(settings.keymap.bindings):
        print(f"{command}: {', '.join(settings.labels_for(command))}")
    return 1 if settings.keymap.rejected else 0
