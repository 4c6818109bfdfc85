"""Interactive removal of unused dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, InvalidResponse, Prompt

from depcheck_lite.errors import RemovalError
from depcheck_lite.removal.package_manager import build_removal_command
from depcheck_lite.removal.prompts import parse_selection
from depcheck_lite.removal.runner import ProcessRunner, SubprocessRunner


class YesNoConfirm(Confirm):
    """Confirm prompt that also takes the long forms yes and no."""

    choices = ["y", "yes", "n", "no"]

    def process_response(self, value: str) -> bool:
        value = value.strip().lower()
        if value not in self.choices:
            raise InvalidResponse(self.validate_error_message)
        return value in ("y", "yes")


@dataclass
class RemovalOutcome:
    """What an interactive session ended up doing."""

    removed: list[str] = field(default_factory=list)
    cancelled: bool = False
    command: list[str] | None = None


class InteractiveRemover:
    """Lets the user pick unused packages and uninstalls them."""

    def __init__(
        self,
        project_path: Path,
        package_manager: str = "npm",
        console: Console | None = None,
        runner: ProcessRunner | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the remover.

        Args:
            project_path: Directory the package manager runs in.
            package_manager: One of npm, yarn or pnpm.
            console: Console used for output and prompts.
            runner: Runs the package manager command.
            stream: Input stream for prompts (default: stdin).
        """
        self.project_path = project_path
        self.package_manager = package_manager
        self.console = console or Console()
        self.runner = runner or SubprocessRunner()
        self.stream = stream

    def run(self, unused: list[str]) -> RemovalOutcome:
        """Prompt for a selection and remove the chosen packages.

        Raises:
            RemovalError: If the package manager fails.
        """
        if not unused:
            self.console.print("[green]✓[/] No unused dependencies to remove!")
            return RemovalOutcome()

        self._show_choices(unused)

        answer = Prompt.ask(
            "[bold]Your choice[/]",
            console=self.console,
            default="",
            show_default=False,
            stream=self.stream,
        )
        selection = parse_selection(answer, len(unused))
        for token in selection.invalid:
            self.console.print(
                f"[yellow]Warning:[/] Invalid selection \"{token}\" (must be 1-{len(unused)})"
            )

        if not selection.indices:
            return self._cancel()

        packages = [unused[i] for i in selection.indices]
        self.console.print(f"\nRemoving {len(packages)} package(s):")
        for package in packages:
            self.console.print(f"  • [cyan]{package}[/]")
        self.console.print()

        proceed = YesNoConfirm.ask(
            "[bold]Proceed?[/] (y/N)",
            console=self.console,
            default=False,
            show_choices=False,
            show_default=False,
            stream=self.stream,
        )
        if not proceed:
            return self._cancel()

        command = self._remove(packages)
        return RemovalOutcome(removed=packages, command=command)

    def _show_choices(self, unused: list[str]) -> None:
        self.console.print(f"\nFound {len(unused)} unused dependencies:\n")
        for index, package in enumerate(unused, start=1):
            self.console.print(f"  {index}. [cyan]{package}[/]")

        self.console.print("\n[bold]Select packages to remove:[/]")
        self.console.print('  - Enter numbers separated by spaces (e.g., "1 3 5")')
        self.console.print('  - Enter "all" to remove all unused packages')
        self.console.print("  - Press Enter to cancel\n")

    def _remove(self, packages: list[str]) -> list[str]:
        command = build_removal_command(self.package_manager, packages)
        self.console.print(f"[dim]Running:[/] {' '.join(command)}\n")

        code = self.runner.run(command, self.project_path)
        if code != 0:
            raise RemovalError(f"{self.package_manager} exited with code {code}")

        self.console.print(f"\n[green]✓[/] Successfully removed {len(packages)} package(s)")
        return command

    def _cancel(self) -> RemovalOutcome:
        self.console.print("\n[yellow]Cancelled.[/] No packages removed.")
        return RemovalOutcome(cancelled=True)
