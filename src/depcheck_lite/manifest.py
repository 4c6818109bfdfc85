"""Loading declared dependencies from package.json."""

import json
from pathlib import Path

from depcheck_lite.errors import ConfigurationError
from depcheck_lite.filesystem import FileSystem, LocalFileSystem
from depcheck_lite.models.manifest import Manifest
from depcheck_lite.paths import MANIFEST_FILE, get_manifest_path

# package.json keys holding the runtime and development groups
DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


def load_manifest(project_path: Path, fs: FileSystem | None = None) -> Manifest:
    """Load package.json from the project root.

    Args:
        project_path: Root directory of the project.
        fs: File system to read from (default: the local disk).

    Returns:
        Manifest with both dependency groups; absent groups are empty.

    Raises:
        ConfigurationError: If package.json is missing or cannot be parsed.
    """
    fs = fs or LocalFileSystem()
    manifest_path = get_manifest_path(project_path)

    if not fs.exists(manifest_path):
        raise ConfigurationError(f"{MANIFEST_FILE} not found in {project_path}")

    try:
        data = json.loads(fs.read_text(manifest_path))
    except OSError as e:
        raise ConfigurationError(f"Could not read {manifest_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{manifest_path} must contain a JSON object")

    groups: dict[str, dict[str, str]] = {}
    for key in DEPENDENCY_GROUPS:
        group = data.get(key)
        if group is None:
            group = {}
        if not isinstance(group, dict):
            raise ConfigurationError(f'"{key}" in {manifest_path} must be an object')
        groups[key] = group

    return Manifest(
        path=manifest_path,
        dependencies=groups["dependencies"],
        dev_dependencies=groups["devDependencies"],
    )
