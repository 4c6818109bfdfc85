"""Package manager detection and uninstall commands."""

from pathlib import Path

from depcheck_lite.filesystem import FileSystem, LocalFileSystem
from depcheck_lite.paths import LOCK_FILES, get_lock_file_path

UNINSTALL_COMMANDS = {
    "npm": ["uninstall", "--save"],
    "yarn": ["remove"],
    "pnpm": ["remove"],
}


def detect_package_manager(project_path: Path, fs: FileSystem | None = None) -> str:
    """Pick the package manager from the lock files present, defaulting to npm."""
    fs = fs or LocalFileSystem()
    for manager in LOCK_FILES:
        if fs.exists(get_lock_file_path(project_path, manager)):
            return manager
    return "npm"


def get_uninstall_command(package_manager: str) -> list[str]:
    """Get the arguments that uninstall packages with the given manager."""
    return list(UNINSTALL_COMMANDS.get(package_manager, UNINSTALL_COMMANDS["npm"]))


def build_removal_command(package_manager: str, packages: list[str]) -> list[str]:
    """Build the full command line removing packages."""
    return [package_manager, *get_uninstall_command(package_manager), *packages]
