"""depcheck-lite CLI - Find unused dependencies fast."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from depcheck_lite import __version__
from depcheck_lite.analysis.analyzer import DependencyAnalyzer
from depcheck_lite.config import (
    PACKAGE_MANAGERS,
    get_dirs,
    get_excludes,
    get_ignore,
    get_package_manager,
    load_project_config,
)
from depcheck_lite.errors import DepcheckError
from depcheck_lite.exclusion import PathExcluder
from depcheck_lite.output.json_writer import format_results, write_results
from depcheck_lite.output.report import display_result, display_summary
from depcheck_lite.paths import get_config_path
from depcheck_lite.removal.package_manager import detect_package_manager
from depcheck_lite.removal.session import InteractiveRemover

app = typer.Typer(
    name="depcheck-lite",
    help="Find unused dependencies in JavaScript and TypeScript projects",
    no_args_is_help=False,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"depcheck-lite version {__version__}")
        raise typer.Exit()


@app.command()
def check(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the project containing package.json",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output results as JSON",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Ignore a specific package (repeatable)",
    ),
    dirs: Optional[str] = typer.Option(
        None,
        "--dirs",
        "-d",
        help="Comma-separated list of directories to scan",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Gitignore-style pattern of paths to skip (repeatable)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON results to this file",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        help="Select unused packages to uninstall after the analysis",
    ),
    package_manager: Optional[str] = typer.Option(
        None,
        "--package-manager",
        "-p",
        help="Package manager used for removal (npm, yarn, pnpm; default: detected)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show scan statistics",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Find declared dependencies that no source file imports.

    Exits with code 1 when unused dependencies are found, so it can gate CI.
    """
    path = path.resolve()

    if package_manager is not None and package_manager not in PACKAGE_MANAGERS:
        err_console.print(
            f"[red]Error:[/] --package-manager must be one of {', '.join(PACKAGE_MANAGERS)}"
        )
        raise typer.Exit(1)

    # Keep stdout to the JSON document alone in JSON mode
    status_console = err_console if json_output else console

    try:
        config = load_project_config(path)
        if verbose and config:
            status_console.print(f"[dim]Using config:[/] {get_config_path(path)}")

        ignore_list = get_ignore(config) + list(ignore or [])
        dir_list = _split_dirs(dirs) or get_dirs(config)
        excluder = PathExcluder(path, get_excludes(config), list(exclude or []))

        analyzer = DependencyAnalyzer(
            path,
            ignore=ignore_list,
            dirs=dir_list,
            excluder=excluder,
        )
        result = analyzer.analyze()

        if output is not None:
            write_results(result, output)

        if json_output:
            typer.echo(format_results(result))
        else:
            if verbose:
                display_summary(result, analyzer.stats, console)
            display_result(result, console)
            if output is not None:
                console.print(f"\n[green]Results saved to:[/] {output}")

        remaining = list(result.unused)
        if interactive and remaining:
            manager = package_manager or get_package_manager(config) or detect_package_manager(path)
            remover = InteractiveRemover(path, manager, console=status_console)
            outcome = remover.run(remaining)
            remaining = [name for name in remaining if name not in outcome.removed]

    except DepcheckError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    raise typer.Exit(1 if remaining else 0)


def _split_dirs(value: Optional[str]) -> Optional[list[str]]:
    """Split a comma-separated --dirs value, dropping empty entries."""
    if not value:
        return None
    dirs = [part.strip() for part in value.split(",") if part.strip()]
    return dirs or None


def main() -> None:
    app()


if __name__ == "__main__":
    main()
