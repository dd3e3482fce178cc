"""git-status-color — print a stable 24-bit colour for the current git commit.

Usage: git-status-color

Takes the first six hex digits of `git rev-parse HEAD` as an RGB colour
and writes the ANSI escape sequence for it to stdout, with no newline.
Light colours set the foreground; dark colours set the background and
force a white foreground so the prompt text stays readable.

Meant to be embedded in a shell prompt, e.g. for bash:

    PS1='\\[$(git-status-color)\\]\\W\\[\\e[0m\\] \\$ '

On any failure (not a git repository, git missing, unexpected output)
nothing is printed and the exit status is 1, so the prompt simply keeps
its default colour.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from git_status_color.core.errors import GitStatusColorError
from git_status_color.core.escape import emit, escape_sequence
from git_status_color.core.hexcode import decode_color
from git_status_color.core.source import read_head
from git_status_color.core.types import Color

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog='git-status-color',
        description='Print a 24-bit ANSI colour derived from the current git commit.',
        epilog='Nothing is printed and the exit status is 1 if the commit cannot be read.',
    )


def current_color(read_identifier: Callable[[], str] = read_head) -> Color:
    """Color for the identifier returned by `read_identifier`.

    Raises a GitStatusColorError subclass on any failure; nothing is written.
    """
    identifier = read_identifier()
    return decode_color(identifier)


def prompt_color(read_identifier: Callable[[], str] = read_head) -> str:
    """Escape sequence for the current commit, without writing it."""
    return escape_sequence(current_color(read_identifier))


def main(argv: list[str] | None = None) -> None:
    _build_parser().parse_args(argv)

    try:
        color = current_color(read_head)
    except GitStatusColorError as e:
        logger.debug('no colour: %s', e)
        sys.exit(1)

    emit(color)


if __name__ == '__main__':
    main()
