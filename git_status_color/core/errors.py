"""Failure types for git-status-color.

Every expected failure collapses to the same outcome (no output, exit 1),
but each stage raises its own subclass so the reason can be logged.
"""


class GitStatusColorError(Exception):
    """Base class for every failure that aborts a run."""


class SourceUnavailableError(GitStatusColorError):
    """`git rev-parse HEAD` could not be started or exited nonzero."""


class ShortReadError(GitStatusColorError):
    """Fewer characters than required arrived before newline/EOF."""


class InvalidDigitError(GitStatusColorError):
    """A character in the hex region is not a lowercase hex digit."""

    def __init__(self, char: str, offset: int):
        super().__init__(f'invalid hex digit {char!r} at offset {offset}')
        self.char = char
        self.offset = offset
