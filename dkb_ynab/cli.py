"""CLI for the ``dkb_ynab`` package.

Exposes the callable command handler :func:`cmd_convert` and a Typer-based
console interface (``dkb-ynab INPUT OUTPUT``). The log level may be provided
via ``DKB_YNAB_LOG_LEVEL``, including from a ``.env`` file in the current
working directory loaded with ``python-dotenv``. Conversion logic lives in
:mod:`dkb_ynab.api`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from . import __version__
from .errors import ConversionError
from .logging_setup import configure_logging, get_logger

logger = get_logger("dkb_ynab.cli")


def cmd_convert(input_path: str, output_path: str) -> int:
    """Convert ``input_path`` into YNAB CSV at ``output_path``.

    Errors are written to stderr as a single ``Error: ...`` line and the
    function returns a non-zero exit status. On success nothing is printed
    and ``0`` is returned.
    """

    from .api import convert_file

    try:
        result = convert_file(input_path, output_path)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename or input_path}", file=sys.stderr)
        return 1
    except PermissionError as e:
        print(f"Error: Permission denied: {e.filename or output_path}", file=sys.stderr)
        return 1
    except ConversionError as e:
        print(f"Error: Failed to convert '{input_path}': {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: I/O failure: {e}", file=sys.stderr)
        return 1

    logger.debug("Converted %s export with %d records", result.dialect.name, len(result.records))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Convert a DKB CSV export (checking account or credit card) into YNAB's CSV format.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dkb-ynab {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_path: Annotated[
        Path,
        typer.Argument(
            metavar="INPUT",
            help="DKB CSV export to read.",
            dir_okay=False,
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Argument(
            metavar="OUTPUT",
            help="Destination of the YNAB CSV file.",
            dir_okay=False,
        ),
    ],
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Convert INPUT into YNAB CSV written to OUTPUT."""

    # Load environment from .env in CWD (override=False to keep existing env)
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()

    rc = cmd_convert(str(input_path), str(output_path))
    if rc:
        raise typer.Exit(rc)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
