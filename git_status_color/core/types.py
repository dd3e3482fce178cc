"""Shared types for git-status-color: Color, Brightness."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Brightness(enum.Enum):
    """Perceived brightness of a colour."""

    LIGHT = 'light'
    DARK = 'dark'


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (('r', self.r), ('g', self.g), ('b', self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f'channel {name}={value} outside 0..255')

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
