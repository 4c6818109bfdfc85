"""Configuration loading for depcheck-lite."""

import json
from pathlib import Path

from depcheck_lite.errors import ConfigurationError
from depcheck_lite.paths import get_config_path

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")


def load_config(config_path: Path) -> dict:
    """Load a .depcheck-lite.json configuration file."""
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_project_config(project_path: Path) -> dict:
    """Load the project's config file, or an empty config if there is none.

    Raises:
        ConfigurationError: If the file exists but is not a valid JSON object.
    """
    config_path = get_config_path(project_path)
    if not config_path.exists():
        return {}

    try:
        config = load_config(config_path)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"{config_path} must contain a JSON object")
    return config


def get_ignore(config: dict) -> list[str]:
    """Get package names to leave out of the analysis."""
    return _string_list(config, "ignore", [])


def get_dirs(config: dict) -> list[str] | None:
    """Get directories to scan, or None to use the defaults."""
    dirs = _string_list(config, "dirs", [])
    return dirs or None


def get_excludes(config: dict) -> list[str]:
    """Get gitignore-style exclude patterns."""
    return _string_list(config, "exclude", [])


def get_package_manager(config: dict) -> str | None:
    """Get the package manager to use for removals, if pinned."""
    manager = config.get("packageManager")
    if manager is None:
        return None
    if manager not in PACKAGE_MANAGERS:
        raise ConfigurationError(
            f'"packageManager" must be one of {", ".join(PACKAGE_MANAGERS)}, got {manager!r}'
        )
    return manager


def _string_list(config: dict, key: str, default: list[str]) -> list[str]:
    value = config.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f'"{key}" must be a list of strings')
    return value
