"""Process invocation for package manager commands."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from depcheck_lite.errors import RemovalError


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs an external command and reports its exit code."""

    def run(self, args: list[str], cwd: Path) -> int:
        """Run args in cwd and return the exit code.

        Raises:
            RemovalError: If the command cannot be started.
        """
        ...


class SubprocessRunner:
    """ProcessRunner that inherits the terminal so the package manager's output is visible."""

    def run(self, args: list[str], cwd: Path) -> int:
        executable = shutil.which(args[0])
        if executable is None:
            raise RemovalError(f"'{args[0]}' not found in PATH")

        try:
            result = subprocess.run(
                [executable, *args[1:]],
                cwd=cwd,
                check=False,
            )
        except OSError as e:
            raise RemovalError(f"Failed to run {args[0]}: {e}") from e

        return result.returncode
