"""Well-known file names inside an analyzed project."""

from pathlib import Path

# Manifest declaring the project's dependencies
MANIFEST_FILE = "package.json"

# Optional depcheck-lite settings
CONFIG_FILE = ".depcheck-lite.json"

# Lock files, checked in this order to pick a package manager
LOCK_FILES = {
    "pnpm": "pnpm-lock.yaml",
    "yarn": "yarn.lock",
}

# Dependency cache directory that is never scanned
DEPENDENCY_CACHE_DIR = "node_modules"


def get_manifest_path(project_path: Path) -> Path:
    """Get the package.json path for a project."""
    return project_path / MANIFEST_FILE


def get_config_path(project_path: Path) -> Path:
    """Get the .depcheck-lite.json path for a project."""
    return project_path / CONFIG_FILE


def get_lock_file_path(project_path: Path, package_manager: str) -> Path:
    """Get the lock file path written by the given package manager."""
    return project_path / LOCK_FILES[package_manager]
