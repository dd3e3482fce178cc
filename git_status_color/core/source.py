"""Read the current commit identifier from `git rev-parse HEAD`.

git's own stderr is discarded. The first line of stdout must carry at
least a full SHA-1 in hex (40 characters); anything shorter is treated as
failure, never as partial data. At most 41 bytes (hash + newline) are read.
"""

import logging
import subprocess

from git_status_color.core.errors import ShortReadError, SourceUnavailableError

logger = logging.getLogger(__name__)

HEAD_COMMAND = ['git', 'rev-parse', 'HEAD']
SHA1_HEX_LENGTH = 40
EXPECTED_OUTPUT_LENGTH = SHA1_HEX_LENGTH + len('\n')


def read_head(command: list[str] | None = None) -> str:
    """Return the first line printed by `command` (default: git rev-parse HEAD).

    Raises SourceUnavailableError if the command cannot start or exits
    nonzero, ShortReadError if fewer than 40 characters arrive.
    """
    cmd = command if command is not None else HEAD_COMMAND
    try:
        proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL)
    except OSError as e:
        logger.debug('could not start %s: %s', cmd, e)
        raise SourceUnavailableError(f'could not start {cmd[0]}: {e}') from e

    # Exiting the context closes the pipe and waits, on every path
    with proc:
        raw = proc.stdout.readline(EXPECTED_OUTPUT_LENGTH)
        status = proc.wait()

    if status != 0:
        logger.debug('%s exited with status %d', cmd, status)
        raise SourceUnavailableError(f'{cmd[0]} exited with status {status}')

    try:
        line = raw.decode('ascii').rstrip('\n')
    except UnicodeDecodeError as e:
        raise ShortReadError(f'non-ASCII output from {cmd[0]}') from e

    if len(line) < SHA1_HEX_LENGTH:
        logger.debug('short read from %s: %r', cmd, line)
        raise ShortReadError(f'expected {SHA1_HEX_LENGTH} characters, got {len(line)}')

    return line
