"""Interactive removal of unused dependencies."""

from depcheck_lite.removal.package_manager import detect_package_manager, get_uninstall_command
from depcheck_lite.removal.prompts import parse_selection
from depcheck_lite.removal.runner import ProcessRunner, SubprocessRunner
from depcheck_lite.removal.session import InteractiveRemover, RemovalOutcome

__all__ = [
    "InteractiveRemover",
    "ProcessRunner",
    "RemovalOutcome",
    "SubprocessRunner",
    "detect_package_manager",
    "get_uninstall_command",
    "parse_selection",
]
