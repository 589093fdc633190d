"""Shell command executor: runs `<shell> -c <command>` and captures the outcome."""

from __future__ import annotations

import os
import subprocess

from shells.outcome import ExecutionOutcome


# Reported when the shell binary could not be started at all ("command not found").
NOT_FOUND_EXIT_CODE = 127


def decode_output(data: bytes) -> str:
    """Decode captured output as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


def normalize_exit_code(returncode: int) -> int:
    """Map a subprocess return code to the exit code reported to callers.

    Explicit exit codes pass through unchanged. On POSIX a negative return code
    means the process was killed by a signal and has no exit code of its own;
    that never counts as success, so it is reported as 1.
    """
    if returncode < 0 and os.name == "posix":
        return 1
    return returncode


def launch_failure(error: Exception) -> ExecutionOutcome:
    """Outcome reported when the shell could not be started."""
    return ExecutionOutcome(
        exit_code=NOT_FOUND_EXIT_CODE,
        stdout="",
        stderr=str(error),
    )


def spawn(shell: str, command: str) -> ExecutionOutcome:
    """Run ``command`` with ``shell -c``, raising if the shell cannot be started.

    Raises OSError (missing binary, permission denied, exec format error) or
    ValueError (embedded NUL byte in argv).
    """
    proc = subprocess.run(
        [shell, "-c", command],
        stdin=subprocess.DEVNULL,
        capture_output=True,
    )
    return ExecutionOutcome(
        exit_code=normalize_exit_code(proc.returncode),
        stdout=decode_output(proc.stdout),
        stderr=decode_output(proc.stderr),
    )


def execute(shell: str, command: str) -> ExecutionOutcome:
    """Run ``command`` with ``shell -c`` and wait for it to finish.

    The command string is handed to the shell as a single argument; the shell
    does all parsing. stdin is the null device. If the shell cannot be started
    nothing is raised: the outcome carries NOT_FOUND_EXIT_CODE, empty stdout
    and the launch error in stderr.
    """
    try:
        return spawn(shell, command)
    except (OSError, ValueError) as e:
        return launch_failure(e)
