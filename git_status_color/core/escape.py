"""ANSI SGR escape sequences for 24-bit colour.

See https://en.wikipedia.org/wiki/ANSI_escape_code#24-bit

LIGHT colours are used as the foreground:    ESC[38;2;R;G;Bm
DARK colours become the background, followed by a white foreground:
                                             ESC[48;2;R;G;BmESC[37m

No reset is emitted; the prompt that embeds the sequence owns that.
"""

import sys
from typing import TextIO

from git_status_color.core.brightness import classify_color
from git_status_color.core.types import Brightness, Color

# Control Sequence Introducer
CSI = '\x1b['
# Select Graphic Rendition
SGR = 'm'

SET_24BIT_FOREGROUND = 38
SET_24BIT_BACKGROUND = 48
SET_WHITE_FOREGROUND = 37


def sgr_24bit(mode: int, color: Color) -> str:
    return f'{CSI}{mode};2;{color.r};{color.g};{color.b}{SGR}'


def escape_sequence(color: Color, brightness: Brightness | None = None) -> str:
    """Escape string for `color`, classifying it if `brightness` is not given."""
    if brightness is None:
        brightness = classify_color(color)

    if brightness is Brightness.LIGHT:
        return sgr_24bit(SET_24BIT_FOREGROUND, color)

    # Background first, then the white foreground so it is not overwritten
    return sgr_24bit(SET_24BIT_BACKGROUND, color) + f'{CSI}{SET_WHITE_FOREGROUND}{SGR}'


def emit(color: Color, stream: TextIO | None = None) -> None:
    """Write the escape sequence for `color` to `stream` (stdout), no newline."""
    out = stream if stream is not None else sys.stdout
    out.write(escape_sequence(color))
    out.flush()
