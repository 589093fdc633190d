"""Run log: timestamped file + colored stderr."""

from __future__ import annotations

import os
import re
import sys
from datetime import datetime


# ── ANSI color constants ────────────────────────────────────

GRAY = "\033[90m"
GREEN = "\033[32m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def _color_enabled() -> bool:
    """Check whether colored output should be used on stderr."""
    if os.environ.get("NO_COLOR") or os.environ.get("SHELLS_NO_COLOR"):
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def colorize(text: str, color: str) -> str:
    """Wrap text in ANSI color codes."""
    return f"{color}{text}{RESET}"


# Patterns for auto-detecting message color
_COLOR_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"launch failed"), YELLOW),
    (re.compile(r"exit_code=(?!0\b)"), RED),        # non-zero exit code
    (re.compile(r"exit_code=0\b"), GREEN),
    (re.compile(r"▸"), CYAN),                        # command line
]


def _detect_color(message: str) -> str | None:
    """Return the ANSI color for a message based on pattern matching."""
    for pattern, color in _COLOR_RULES:
        if pattern.search(message):
            return color
    return None


class ProgressLog:
    """Run log for the CLI.

    Plain ``[HH:MM:SS] message`` lines go to ``path`` (appended) when given;
    with ``echo`` the same lines go to stderr, colored when it is a terminal.
    ``color`` forces colors on or off instead of detecting them.
    """

    def __init__(self, path: str | None = None, echo: bool = False,
                 color: bool | None = None):
        self.path = path
        self.echo = echo
        self._file = None
        if path:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            self._file = open(path, "a")
        self._use_color = _color_enabled() if color is None else color

    def log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")

        # Plain text to file
        plain_line = f"[{timestamp}] {message}\n"
        if self._file:
            self._file.write(plain_line)
            self._file.flush()

        if not self.echo:
            return

        # Colored text to terminal
        if self._use_color:
            ts = colorize(f"[{timestamp}]", GRAY)
            color = _detect_color(message)
            msg = colorize(message, color) if color else message
            print(f"{ts} {msg}", file=sys.stderr)
        else:
            print(plain_line, end="", file=sys.stderr)

    def close(self) -> None:
        if self._file:
            self._file.close()
            self._file = None
