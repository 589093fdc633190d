"""Shell registry: one call-site object per supported shell name."""

from __future__ import annotations

from shells.executor import execute
from shells.outcome import ExecutionOutcome, wrap_outcome


SHELL_NAMES: tuple[str, ...] = (
    "sh",     # POSIX shell
    "ash",    # Almquist shell
    "csh",    # C shell
    "ksh",    # Korn shell
    "zsh",    # Z shell
    "bash",   # Bourne Again shell
    "dash",   # Debian Almquist shell
    "fish",   # Friendly interactive shell
    "mksh",   # MirBSD Korn shell
    "tcsh",   # TENEX C shell
)


class Shell:
    """Runs formatted commands with one shell.

    Call pattern: shell(template, *args) → <executable> -c template.format(*args)
    Without arguments the template is passed through untouched, so braces in
    awk programs or ${VAR} expansions need no escaping. With arguments the
    usual str.format rules apply: literal braces must be doubled, and "{{"
    and "}}" come out as "{" and "}". Without arguments they stay doubled.
    """

    def __init__(self, name: str, executable: str | None = None):
        self.name = name
        self.executable = executable or name

    def __repr__(self) -> str:
        return f"Shell({self.name!r}, executable={self.executable!r})"

    def command(self, template: str, *args, **kwargs) -> str:
        if not args and not kwargs:
            return template
        return template.format(*args, **kwargs)

    def __call__(self, template: str, *args, **kwargs) -> ExecutionOutcome:
        return execute(self.executable, self.command(template, *args, **kwargs))

    def wrap(self, template: str, *args, **kwargs) -> str:
        """Run the command; return stdout, or raise CommandFailure on non-zero exit."""
        return wrap_outcome(self(template, *args, **kwargs))


class ShellRegistry:
    """Maps shell names to Shell instances.

    Every name in SHELL_NAMES is registered. ``executables`` adds extra names
    or points a built-in name at a different binary. Built once, never mutated.
    Unregistered names still resolve: get() returns an ad-hoc Shell whose
    executable is the name itself.
    """

    def __init__(self, executables: dict[str, str] | None = None):
        executables = executables or {}
        self._shells: dict[str, Shell] = {}
        for name in SHELL_NAMES:
            self._shells[name] = Shell(name, executables.get(name))
        for name, executable in executables.items():
            if name not in self._shells:
                self._shells[name] = Shell(name, executable)

    def get(self, name: str) -> Shell:
        if name in self._shells:
            return self._shells[name]
        return Shell(name)

    def names(self) -> list[str]:
        return list(self._shells)

    def __contains__(self, name: object) -> bool:
        return name in self._shells

    def __iter__(self):
        return iter(self._shells.values())

    def __len__(self) -> int:
        return len(self._shells)
