"""Decode the leading hex octets of a commit identifier into a Color.

Only lowercase digits are accepted ('0'-'9', 'a'-'f'). git prints object
names in lowercase; an uppercase identifier is rejected rather than
folded, so 'A' fails exactly like 'g'.
"""

from git_status_color.core.errors import InvalidDigitError, ShortReadError
from git_status_color.core.types import Color

# Offsets of the red, green and blue octets within the identifier
_CHANNEL_OFFSETS = (0, 2, 4)


def decode_hex_digit(c: str, offset: int = 0) -> int:
    """Value of a single lowercase hex digit. `offset` is only used in errors."""
    if len(c) == 1 and '0' <= c <= '9':
        return ord(c) - ord('0')
    if len(c) == 1 and 'a' <= c <= 'f':
        return ord(c) - ord('a') + 10
    raise InvalidDigitError(c, offset)


def decode_octet(text: str, offset: int = 0) -> int:
    """Big-endian byte from the two characters at text[offset:offset + 2]."""
    pair = text[offset : offset + 2]
    if len(pair) < 2:
        raise ShortReadError(f'need 2 hex digits at offset {offset}, got {len(pair)}')
    upper = decode_hex_digit(pair[0], offset)
    lower = decode_hex_digit(pair[1], offset + 1)
    return (upper << 4) | lower


def decode_color(identifier: str) -> Color:
    """Color from the first six characters of `identifier`.

    Anything after the sixth character (the rest of the hash, a trailing
    newline) is ignored. Raises on the first invalid digit.
    """
    r, g, b = (decode_octet(identifier, offset) for offset in _CHANNEL_OFFSETS)
    return Color(r, g, b)
