#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="keyinput",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Key and mouse button names for keybinding files",
    long_description="Parses the key names used in keybinding files into hashable key inputs, and labels them for display.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: User Interfaces",
        "Topic :: Text Editors",
    ],
    keywords=["keybindings", "keyboard", "keymap"],
    # match statements and X | Y unions
    python_requires=">=3.10",
    install_requires=[
        "attrs>=22.2.0",
        "cattrs>=22.2.0",
        "msgspec",
        "tomli>=1.1.0",
    ],
    tests_require=["pytest>=6.2.4"],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
    entry_points={
        "console_scripts": [
            "keyinput-render = keyinput.scripts:render_cli",
            "keyinput-check-keymap = keyinput.scripts:check_keymap_cli",
        ],
    },
)
