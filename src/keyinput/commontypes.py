# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum
import platform


@enum.unique
class Platform(enum.Enum):
    MACOS = "macos"
    WINDOWS = "windows"
    OTHER = "other"

    @classmethod
    def from_system(cls, system: str):
        "Map a platform.system() result onto the platforms which label keys differently."
        match system:
            case "Darwin":
                return cls.MACOS
            case "Windows":
                return cls.WINDOWS
            case _:
                return cls.OTHER


def current_platform():
    return Platform.from_system(platform.system())


class KeyInputError(Exception):
    pass


class UnrecognizedToken(KeyInputError, ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized key token: {token!r}")
