from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .errors import ConfigError

PACKAGE_TEMPLATES = Path(__file__).parent / "templates"
CONFIG_NAME = "config.yaml"

DEFAULT_CONFIG = {
    "version": "0.1.0",
    "paths": {
        "solutions_dir": "./Solutions",
    },
    "defaults": {
        "test": False,
    },
}


@dataclass
class Config:
    solutions_dir: Path
    template_dir: Path
    default_test: bool
    version: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base_dir: Path) -> "Config":
        paths = _section(data, "paths")
        defaults = _section(data, "defaults")

        solutions_dir = base_dir / paths.get("solutions_dir", DEFAULT_CONFIG["paths"]["solutions_dir"])
        # Templates ship with the package unless the project overrides them.
        template_dir = paths.get("template_dir")
        return cls(
            solutions_dir=solutions_dir.resolve(),
            template_dir=(base_dir / template_dir).resolve() if template_dir else PACKAGE_TEMPLATES,
            default_test=bool(defaults.get("test", False)),
            version=str(data.get("version", DEFAULT_CONFIG["version"])),
        )


def _section(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping in {CONFIG_NAME}")
    return value


def load_config(config_path: Path | None = None) -> Config:
    """Read ``config.yaml`` from the working directory, or fall back to defaults.

    Relative paths in the file are resolved against the directory holding it.
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_NAME
    if not config_path.exists():
        return Config.from_mapping(DEFAULT_CONFIG, Path.cwd())

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config format: {config_path}")
    return Config.from_mapping(data, config_path.parent)


def write_default_config(path: Path) -> None:
    path.write_text(yaml.safe_dump(DEFAULT_CONFIG, sort_keys=False), encoding="utf-8")
