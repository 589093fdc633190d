"""YAML config parsing, defaults, validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import yaml

from shells.registry import SHELL_NAMES, ShellRegistry


DEFAULT_CONFIG = "shells.yaml"
CONFIG_ENV = "SHELLS_CONFIG"

_TOP_LEVEL_KEYS = {"version", "default", "shells"}


class ConfigError(Exception):
    pass


@dataclass
class ShellsConfig:
    version: str = "1"
    default: str = "sh"
    shells: dict[str, str] = field(default_factory=dict)   # name -> executable
    source: str | None = None                              # file loaded from, None = built-in

    def registry(self) -> ShellRegistry:
        return ShellRegistry(self.shells)


def validate_version(raw: dict) -> None:
    version = raw.get("version")
    if not version:
        raise ConfigError("Missing 'version' field in config")
    if str(version) not in ("1.0", "1"):
        raise ConfigError(f"Unsupported config version: {version}")


def parse_shells(raw_shells) -> dict[str, str]:
    if raw_shells is None:
        return {}
    if not isinstance(raw_shells, dict):
        raise ConfigError("'shells' must be a mapping of name to executable")

    shells: dict[str, str] = {}
    for name, executable in raw_shells.items():
        name = str(name)
        if not name.strip() or any(c.isspace() for c in name):
            raise ConfigError(f"Invalid shell name: {name!r}")
        if not isinstance(executable, str) or not executable.strip():
            raise ConfigError(f"Shell '{name}': executable must be a non-empty string")
        shells[name] = executable
    return shells


def parse_config(raw: dict, source: str | None = None) -> ShellsConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping")

    unknown = set(raw.keys()) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(sorted(map(str, unknown)))}")

    validate_version(raw)
    shells = parse_shells(raw.get("shells"))

    default = raw.get("default", "sh")
    if not isinstance(default, str) or (default not in SHELL_NAMES and default not in shells):
        raise ConfigError(f"Default shell '{default}' is not a known or configured shell")

    return ShellsConfig(
        version=str(raw["version"]),
        default=default,
        shells=shells,
        source=source,
    )


def load_config(path: str) -> ShellsConfig:
    """Load and validate shells.yaml."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if not raw:
        raise ConfigError(f"Empty config file: {path}")

    return parse_config(raw, source=path)


def resolve_config(path: str | None = None) -> ShellsConfig:
    """Load the config the CLI should use.

    Lookup: explicit path > $SHELLS_CONFIG > ./shells.yaml > built-in defaults.
    An explicit or environment path that does not exist is an error.
    """
    path = path or os.environ.get(CONFIG_ENV)
    if path:
        if not os.path.isfile(path):
            raise ConfigError(f"Config file not found: {path}")
        return load_config(path)
    if os.path.isfile(DEFAULT_CONFIG):
        return load_config(DEFAULT_CONFIG)
    return ShellsConfig()
