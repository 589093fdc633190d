"""Outcome types shared by the executor and the wrap_* call forms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionOutcome:
    """Exit code, stdout and stderr of one shell invocation.

    Iterates as ``(exit_code, stdout, stderr)``: stdout and stderr sit at the
    positions of their standard stream numbers, 1 and 2.
    """
    exit_code: int
    stdout: str
    stderr: str

    def __iter__(self):
        return iter((self.exit_code, self.stdout, self.stderr))

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def wrap(self) -> str:
        return wrap_outcome(self)


class CommandFailure(Exception):
    """Unix command failed.

    Raised by the wrap_* call forms when the shell exits non-zero. Carries the
    full outcome; ``str()`` of the failure is exactly the captured stderr.
    """

    def __init__(self, exit_code: int, stdout: str, stderr: str):
        super().__init__(exit_code, stdout, stderr)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

    @classmethod
    def from_outcome(cls, outcome: ExecutionOutcome) -> CommandFailure:
        return cls(outcome.exit_code, outcome.stdout, outcome.stderr)

    def __str__(self) -> str:
        return self.stderr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommandFailure):
            return NotImplemented
        return (self.exit_code, self.stdout, self.stderr) == (
            other.exit_code, other.stdout, other.stderr)

    def __hash__(self) -> int:
        return hash((self.exit_code, self.stdout, self.stderr))


def wrap_outcome(outcome: ExecutionOutcome) -> str:
    """Return stdout on exit code 0, raise CommandFailure otherwise."""
    if outcome.exit_code == 0:
        return outcome.stdout
    raise CommandFailure.from_outcome(outcome)
