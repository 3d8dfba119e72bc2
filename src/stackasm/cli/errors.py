"""
smasm Error Reporting
=====================

Maps the ways an smasm run can fail onto a message on stderr and an exit
code.

Exit Codes
----------
| Code | Meaning                                               |
|------|-------------------------------------------------------|
| 0    | Program assembled and written                         |
| 1    | The program did not assemble (any CompileError)       |
| 2    | Bad option value, -D define or SMASM_* setting        |
| 3    | Input could not be read or output could not be written|
| 4    | Anything else: a bug in smasm                         |

Compile errors are printed exactly as the compiler formats them
("file:line:col: error: ..." plus an optional hint line). Everything else
is prefixed with the program name.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from stackasm.errors import CompileError, ConfigError

PROG_NAME = "smasm"


class ExitCode(IntEnum):
    """Exit codes of the smasm command."""
    SUCCESS = 0
    COMPILE_ERROR = 1
    USAGE_ERROR = 2
    IO_ERROR = 3
    INTERNAL_ERROR = 4


def describe_os_error(error: OSError) -> str:
    """
    Describe a failed file access without the errno noise.

    >>> describe_os_error(FileNotFoundError(2, "No such file or directory", "out/a.bin"))
    "cannot access 'out/a.bin': No such file or directory"
    """
    reason = error.strerror or str(error)
    if error.filename is None:
        return f"I/O error: {reason}"
    return f"cannot access '{error.filename}': {reason}"


def classify_error(error: Exception) -> tuple[ExitCode, str]:
    """Return the exit code and stderr message for an error."""
    if isinstance(error, CompileError):
        return ExitCode.COMPILE_ERROR, str(error)
    if isinstance(error, ConfigError):
        return ExitCode.USAGE_ERROR, f"{PROG_NAME}: configuration error: {error}"
    if isinstance(error, OSError):
        return ExitCode.IO_ERROR, f"{PROG_NAME}: {describe_os_error(error)}"
    return ExitCode.INTERNAL_ERROR, f"{PROG_NAME}: internal error: {error!r}"


def exit_with_error(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an error that ended the run and exit.

    click's own usage errors are re-raised so click prints the usage line
    and exits with status 2, same as for options it rejects itself.

    Args:
        error: The exception that ended the run
        verbose: Print the traceback of internal errors

    Raises:
        SystemExit: Always, with the code from classify_error
        click.ClickException: Re-raised unchanged
    """
    if isinstance(error, click.ClickException):
        raise error

    code, message = classify_error(error)
    click.echo(message, err=True)
    if verbose and code is ExitCode.INTERNAL_ERROR:
        traceback.print_exception(error)
    sys.exit(code)
