"""Perceived brightness of a colour: integer luminance and LIGHT/DARK split.

Luminance uses the W3C AERT weights (299, 587, 114) per mille, truncated:

    luminance = (299*r + 587*g + 114*b) // 1000

A colour is LIGHT when luminance > 127, otherwise DARK. 127 itself is DARK.
"""

import numpy as np

from git_status_color.core.types import Brightness, Color

LUMA_WEIGHTS = np.array([299, 587, 114], dtype=np.int64)
LUMA_SCALE = 1000
LIGHT_THRESHOLD = 0xFF // 2


def luminance(r: int, g: int, b: int) -> int:
    """Integer luminance in 0..255."""
    # Color validates the channel range; int64 keeps 587*255 from wrapping
    rgb = np.array(Color(r, g, b).as_tuple(), dtype=np.int64)
    value = int(LUMA_WEIGHTS @ rgb) // LUMA_SCALE
    assert 0 <= value <= 255, f'luminance {value} out of range for {(r, g, b)}'
    return value


def classify(r: int, g: int, b: int) -> Brightness:
    if luminance(r, g, b) > LIGHT_THRESHOLD:
        return Brightness.LIGHT
    return Brightness.DARK


def classify_color(color: Color) -> Brightness:
    return classify(color.r, color.g, color.b)
