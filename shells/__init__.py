"""Run one-line shell commands and get back (exit_code, stdout, stderr).

    >>> from shells import sh, wrap_sh
    >>> code, stdout, stderr = sh("echo '{} + {}' | cat", 1, 3)
    >>> (code, stdout, stderr)
    (0, '1 + 3\\n', '')
    >>> wrap_sh("echo '{} + {}' | cat", 1, 3)
    '1 + 3\\n'

Every shell call form works the same way: the arguments go through
``str.format`` and the resulting string is passed to the shell with ``-c``.
The wrap_* variants return stdout or raise CommandFailure.
"""

from __future__ import annotations

from shells.executor import NOT_FOUND_EXIT_CODE, execute
from shells.outcome import CommandFailure, ExecutionOutcome, wrap_outcome
from shells.registry import SHELL_NAMES, Shell, ShellRegistry

__version__ = "0.3.0"

default_registry = ShellRegistry()

sh = default_registry.get("sh")
ash = default_registry.get("ash")
csh = default_registry.get("csh")
ksh = default_registry.get("ksh")
zsh = default_registry.get("zsh")
bash = default_registry.get("bash")
dash = default_registry.get("dash")
fish = default_registry.get("fish")
mksh = default_registry.get("mksh")
tcsh = default_registry.get("tcsh")

wrap_sh = sh.wrap
wrap_ash = ash.wrap
wrap_csh = csh.wrap
wrap_ksh = ksh.wrap
wrap_zsh = zsh.wrap
wrap_bash = bash.wrap
wrap_dash = dash.wrap
wrap_fish = fish.wrap
wrap_mksh = mksh.wrap
wrap_tcsh = tcsh.wrap

__all__ = [
    "NOT_FOUND_EXIT_CODE",
    "SHELL_NAMES",
    "CommandFailure",
    "ExecutionOutcome",
    "Shell",
    "ShellRegistry",
    "default_registry",
    "execute",
    "wrap_outcome",
    *SHELL_NAMES,
    *(f"wrap_{name}" for name in SHELL_NAMES),
]
