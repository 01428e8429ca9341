"""Command-line interface for kollektor."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from kollektor import __version__
from kollektor.exceptions import HandlerError
from kollektor.exceptions import KollektorError
from kollektor.models import DirectoryRecord
from kollektor.operations import aggregate_sync
from kollektor.operations import normalize_cwd
from kollektor.output import print_error
from kollektor.output import print_records
from kollektor.output import print_records_json

app = typer.Typer(help="Collect files matching glob patterns, grouped by directory")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"kollektor {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each handler call")
    ] = False,
) -> None:
    """Collect files matching glob patterns, grouped by directory."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def list_file(path: Path, data: DirectoryRecord) -> DirectoryRecord | None:
    """Handler that appends the matched file's name to the record."""
    files = data.get("files", [])
    # A file matched by several patterns is listed once
    if path.name in files:
        return None
    return {"files": [*files, path.name]}


@app.command()
def scan(
    root: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan (default: current directory)"),
    ] = None,
    pattern: Annotated[
        list[str],
        typer.Option("--pattern", "-p", help="Glob matched against file names"),
    ] = ["*"],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print records as JSON")
    ] = False,
) -> None:
    """List matching files grouped by the directory that contains them."""
    root = normalize_cwd(root)
    handlers = {p: list_file for p in dict.fromkeys(pattern)}

    try:
        records = aggregate_sync(handlers, root)
    except HandlerError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except PermissionError as e:
        print_error(f"Permission denied: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Filesystem error: {e}")
        raise typer.Exit(1) from None
    except KollektorError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None

    if as_json:
        print_records_json(records)
    else:
        print_records(records, root)


def main() -> None:
    """Main entry point for the kollektor CLI."""
    app()


if __name__ == "__main__":
    main()
