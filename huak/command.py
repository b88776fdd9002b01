"""Running external commands."""

from __future__ import annotations

import os
import subprocess

from huak.errors import CliError, ErrorKind, wrap

_MUTE_VALUES = frozenset({"TRUE", "True", "true", "1"})


def should_mute():
    """Whether HUAK_MUTE_COMMAND asks for subcommand output to be captured."""
    return os.environ.get("HUAK_MUTE_COMMAND", "False") in _MUTE_VALUES


def create_msg(stdout, stderr):
    """Combine captured stdout and stderr into one message."""
    if stderr:
        return f"{stdout}\n{stderr}"
    return stdout


def _exit_code(returncode):
    # A process ended by a signal has no exit code; report it as 0.
    return returncode if returncode >= 0 else 0


def _run_captured(argv, cwd):
    result = subprocess.run(argv, cwd=cwd, capture_output=True, check=False)
    try:
        stdout = result.stdout.decode("utf-8")
        stderr = result.stderr.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise wrap(exc) from exc
    return _exit_code(result.returncode), create_msg(stdout, stderr)


def _run_inherited(argv, cwd):
    result = subprocess.run(argv, cwd=cwd, check=False)
    return _exit_code(result.returncode), ""


def run_command(cmd, args, cwd):
    """Run cmd with args inside cwd and return (exit code, message).

    Raises CliError carrying the exit code when the command fails.
    """
    argv = [str(cmd), *(str(arg) for arg in args)]
    runner = _run_captured if should_mute() else _run_inherited
    try:
        code, msg = runner(argv, cwd)
    except OSError as exc:
        raise wrap(exc) from exc
    if code != 0:
        raise CliError(ErrorKind.OTHER, code, msg)
    return code, msg