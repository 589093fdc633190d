"""CLI entry point: shells run / shells list / shells validate."""

from __future__ import annotations

import argparse
import shutil
import sys

from shells import __version__
from shells.config import ConfigError, resolve_config
from shells.executor import launch_failure, spawn
from shells.progress import ProgressLog


def cmd_run(args) -> int:
    config = resolve_config(args.config)
    shell = config.registry().get(args.shell or config.default)

    try:
        command = shell.command(args.template, *args.args)
    except (IndexError, KeyError, ValueError) as e:
        print(f"Format error: {e}", file=sys.stderr)
        return 2

    log = ProgressLog(args.log, echo=args.verbose, color=False if args.no_color else None)
    try:
        log.log(f"▸ {shell.executable} -c {command}")
        try:
            outcome = spawn(shell.executable, command)
        except (OSError, ValueError) as e:
            outcome = launch_failure(e)
            log.log(f"  launch failed: {outcome.stderr} (exit_code={outcome.exit_code})")
        else:
            log.log(f"  exit_code={outcome.exit_code}")
    finally:
        log.close()

    sys.stdout.write(outcome.stdout)
    sys.stdout.flush()
    sys.stderr.write(outcome.stderr)
    sys.stderr.flush()
    return outcome.exit_code


def cmd_list(args) -> int:
    config = resolve_config(args.config)
    registry = config.registry()

    print(f"Shells ({len(registry)} registered, default={config.default}):")
    for shell in registry:
        found = shutil.which(shell.executable) is not None
        mark = "✓" if found else "✗"
        print(f"  {shell.name + ':':<10s}{shell.executable} {mark}")
    return 0


def cmd_validate(args) -> int:
    config = resolve_config(args.config)
    print(f"✓ Valid: {len(config.shells)} shells, default={config.default}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shells",
        description="Run one-line commands through a shell's -c option",
    )
    parser.add_argument("--version", "-V", action="version",
                        version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # shells run
    run_parser = sub.add_parser("run", help="Run a command")
    run_parser.add_argument("--shell", "-s", default=None,
                            help="Shell to use (default: config 'default', else sh)")
    run_parser.add_argument("--config", default=None)
    run_parser.add_argument("--log", default=None, metavar="FILE",
                            help="Append a run log to FILE")
    run_parser.add_argument("--verbose", "-v", action="store_true",
                            help="Echo the run log to stderr")
    run_parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    run_parser.add_argument("template", help="Command text; '{}' placeholders are filled from ARGS")
    run_parser.add_argument("args", nargs="*", metavar="ARGS")

    # shells list
    list_parser = sub.add_parser("list", help="List registered shells")
    list_parser.add_argument("--config", default=None)

    # shells validate
    validate_parser = sub.add_parser("validate", help="Validate shells.yaml")
    validate_parser.add_argument("--config", default=None)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "run":
            code = cmd_run(args)
        elif args.command == "list":
            code = cmd_list(args)
        else:
            code = cmd_validate(args)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)

    sys.exit(code)


if __name__ == "__main__":
    main()
