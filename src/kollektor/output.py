"""Output formatting for kollektor results."""

import json
from pathlib import Path

import typer

from kollektor.models import DirectoryRecord


def print_records(records: list[DirectoryRecord], root: Path) -> None:
    """Print per-directory records to stdout.

    Args:
        records: Records produced by aggregating with the file-listing handler
        root: Directory that was scanned
    """
    typer.secho(f"Scanned {_display_path(root)}", fg=typer.colors.BRIGHT_BLACK)
    for record in records:
        typer.secho(f"{record['dir']}/", bold=True)
        for name in record.get("files", []):
            typer.secho(f"  {name}", fg=typer.colors.BRIGHT_BLACK)

    num_files = sum(len(record.get("files", [])) for record in records)
    num_dirs = len(records)
    typer.secho(
        f"✓ {num_files} file{'s' if num_files != 1 else ''} in "
        f"{num_dirs} director{'ies' if num_dirs != 1 else 'y'}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_records_json(records: list[DirectoryRecord]) -> None:
    """Print records as a JSON array, with paths rendered as strings."""
    typer.echo(json.dumps(records, indent=2, default=_json_default))


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory."""
    try:
        return f"~/{path.relative_to(Path.home())}"
    except ValueError:
        return str(path)


def _json_default(value: object) -> str:
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
