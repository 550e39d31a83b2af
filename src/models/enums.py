"""Enumerations shared by the checker and the command-line entry point."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes for a spell-check run.

    ``IO_ERROR`` is also used for invalid command lines, which is what
    ``argparse`` exits with by default.
    """

    OK = 0
    SPELLING_ERRORS = 1
    IO_ERROR = 2
