"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.models import BuildConfig, BuildReport
from ..core.settings import Settings
from ..tree import builder, watch as watcher
from .parsers import parse_dir, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="sitegen",
    help="Static site generator with one-level HTML template inclusion.",
)


def print_processed(src: Path, dest: Path) -> None:
    typer.echo(f"Processed: {src} -> {dest}")


def print_summary(report: BuildReport) -> None:
    """Print the colored end-of-run summary."""
    if report.ok:
        typer.secho("Static site generation complete.", fg=typer.colors.GREEN)
        return

    typer.secho("Static site generation completed with errors:", fg=typer.colors.RED)
    for message in report.errors:
        typer.echo(f"- {message}")
    if report.dropped_errors:
        typer.echo(f"- ... {report.dropped_errors} more error(s) not shown")
    typer.secho("Generation failed due to errors.", fg=typer.colors.RED)
    typer.secho("Fix the errors and run again. :)", fg=typer.colors.YELLOW)


def run_build(config: BuildConfig) -> BuildReport:
    report = builder.generate_site(config, on_processed=print_processed)
    print_summary(report)
    return report


@app.command()
def build(
    source: Annotated[
        str,
        typer.Option(
            "--source",
            "-s",
            help="Source directory (default: ./src or SITEGEN_SOURCE_DIR).",
            metavar="DIR",
        ),
    ] = "",
    dest: Annotated[
        str,
        typer.Option(
            "--dest",
            "-d",
            help="Output directory (default: ./generated or SITEGEN_DEST_DIR).",
            metavar="DIR",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="Permissions for created files in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    max_errors: Annotated[
        Optional[int],
        typer.Option(
            "--max-errors",
            help="Maximum number of errors to record (default: 100).",
            min=1,
        ),
    ] = None,
    watch: Annotated[
        bool,
        typer.Option(
            "--watch",
            "-w",
            help="Rebuild whenever the source tree changes. Stop with Ctrl+C.",
        ),
    ] = False,
    interval: Annotated[
        Optional[float],
        typer.Option(
            "--interval",
            help="Seconds between change checks in watch mode (default: 0.5).",
            min=0.01,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Copy the source tree to the output tree, inlining HTML templates."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting sitegen")

    try:
        settings = Settings()
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid SITEGEN_* settings: {e}") from e

    config = BuildConfig(
        source_dir=parse_dir(source, settings.source_dir),
        dest_dir=parse_dir(dest, settings.dest_dir),
        max_errors=max_errors if max_errors is not None else settings.max_errors,
        file_mode=parse_file_mode(file_mode or settings.file_mode),
    )

    logger.debug(f"Config: {config.source_dir} -> {config.dest_dir}")

    if watch:
        typer.echo("Running in watch mode. Press Ctrl+C to stop.")
        watcher.watch(
            config.source_dir,
            lambda: run_build(config),
            interval=interval if interval is not None else settings.watch_interval,
        )
        return

    report = run_build(config)
    if not report.ok:
        raise typer.Exit(code=report.exit_code)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
