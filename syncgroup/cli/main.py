"""
Main CLI entry point for syncgroup.
"""

# Standard library imports
import importlib.metadata
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from loguru import logger

# Local imports
from syncgroup.environment import SyncOptions
from syncgroup.errors import SyncError
from syncgroup.project.xcode import load_project
from syncgroup.sync import Synchronizer, SyncResult
from syncgroup.utils.output import SEPARATOR, error_text, summary_line, yellow
from syncgroup.utils.paths import find_project_container
from syncgroup.utils.rich_console import configure_logging, print_table


app = typer.Typer(
    help="syncgroup - keep Xcode project groups in step with folders on disk.\n\n"
    "Adds references for new files and removes references to deleted ones.",
    no_args_is_help=True,
)


def report_error(error: SyncError) -> None:
    """Print the error block and stop the process."""
    logger.debug(f"{type(error).__name__}: {error.message}")
    typer.echo(error_text(error.description, error.display_value), err=True)
    raise typer.Exit(1)


def ask_for_project(directory: Path = Path(".")) -> Path | None:
    """Offer the project container found in ``directory``; ``None`` unless the user answers ``y``."""
    typer.echo("\nYou need to provide the path of the .xcodeproj folder.")
    candidate = find_project_container(directory)
    if candidate is not None:
        typer.echo(f"Found {yellow(str(candidate))}.")
        answer = typer.prompt("Use that? (y/N)", default="n", show_default=False)
        if answer.strip().lower() == "y":
            return candidate
    typer.echo("No .xcodeproj folder specified.")
    return None


def print_summary(result: SyncResult, verbose: bool = False) -> None:
    if verbose and result.changed:
        rows = [["+", name] for name in result.to_add] + [["-", name] for name in result.to_remove]
        print_table(["", "File"], rows, title="Changes")

    typer.echo(f"\n{SEPARATOR}")
    typer.echo(summary_line("Would add" if result.dry_run else "Added", len(result.to_add)))
    typer.echo(summary_line("Would remove" if result.dry_run else "Removed", len(result.to_remove)))
    typer.echo(SEPARATOR)

    if result.saved:
        typer.echo("\nSaving project...")
    elif result.dry_run and result.changed:
        typer.echo("\nDry run, the project was not modified.")
    else:
        typer.echo("\nNo changes were made to the project.")
    typer.echo("\nDone!\n")


@app.command()
def sync(
    project: Optional[Path] = typer.Argument(None, help="Path of the .xcodeproj folder"),
    targets: Optional[str] = typer.Option(
        None, "--targets", "-t", help="Comma-separated target names [env: SYNCGROUP_TARGETS]"
    ),
    file_filter: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Glob filter for files, e.g. '*.swift' [env: SYNCGROUP_FILTER]"
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Directory to read files from [env: SYNCGROUP_PATH]"
    ),
    group: Optional[str] = typer.Option(
        None, "--group", "-g", help="Project group path, defaults to --path [env: SYNCGROUP_GROUP]"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report changes without saving"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Run verbosely"),
):
    """Synchronize a project group with the files in a directory."""
    configure_logging(verbose=verbose)

    if project is None:
        project = ask_for_project()
        if project is None:
            return

    try:
        options = SyncOptions.build(
            project_path=project,
            targets=targets,
            filesystem_path=path,
            group_path=group,
            file_filter=file_filter,
            verbose=verbose,
            dry_run=dry_run,
        )
        result = Synchronizer(load_project).run(options)
    except SyncError as error:
        report_error(error)
        return

    print_summary(result, verbose=options.verbose)


@app.command()
def version():
    """Show the syncgroup version."""
    try:
        installed = importlib.metadata.version("syncgroup")
    except importlib.metadata.PackageNotFoundError:
        from syncgroup import __version__ as installed
    typer.echo(f"syncgroup version: {installed}")


if __name__ == "__main__":
    app()
