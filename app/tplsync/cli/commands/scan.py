"""Scan command implementation.

Lists the PNG files of the source tree with the action a sync would
take on each, without touching the filesystem.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from tplsync.cli.display import create_classification_table
from tplsync.cli.types import OutputFormat, load_cli_config
from tplsync.sync.classifier import classify
from tplsync.sync.models import Classification, FileEntry, TraversalError
from tplsync.sync.scanner import PathScanner
from tplsync.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Preview how source images would be handled.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def scan(
    ctx: typer.Context,
    src: Annotated[
        Path | None,
        typer.Option("--src", "-s", help="Source directory path. [default: tasks]"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List source images marked for deletion or promotion."""
    config = load_cli_config(ctx)
    source = src if src is not None else config.source

    rows: list[tuple[FileEntry, Classification]] = []
    for item in PathScanner(source).scan():
        if isinstance(item, TraversalError):
            print_error(f"Error traversing directory: {item}")
            raise typer.Exit(code=1)

        classification = classify(item.name, item.extension)
        if classification != Classification.IGNORED:
            rows.append((item, classification))

    if output_format == OutputFormat.JSON:
        _print_json(rows)
        return

    if not rows:
        print_success(f"No PNG files found under {source}.")
        return

    console.print(create_classification_table(rows))

    ephemeral = sum(1 for _, c in rows if c == Classification.EPHEMERAL)
    candidates = len(rows) - ephemeral
    console.print(f"\n[dim]{ephemeral} to delete, {candidates} to promote[/dim]")


def _print_json(rows: list[tuple[FileEntry, Classification]]) -> None:
    """Display scanned images as JSON."""
    data = [
        {
            "path": str(entry.path),
            "name": entry.name,
            "classification": classification.value,
        }
        for entry, classification in rows
    ]
    console.print_json(json.dumps(data))
