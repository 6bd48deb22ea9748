#!/usr/bin/env python3
"""
office2pdf.cli.cli

Typer-based CLI that exports every Office document under a directory to PDF.

Each document family (Excel, Word, PowerPoint) is converted by its own
application instance, and the three families run concurrently. PDFs are
written next to their source files.

Examples
--------
Convert a folder, excluding sheets whose name starts with ``_``:

    office2pdf ./reports

Export whole workbooks (no sheet exclusion):

    office2pdf -g "" ./reports
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from office2pdf import __version__
from office2pdf.errors import Office2PdfError

app = typer.Typer(
    name="office2pdf",
    help="Export Excel, Word and PowerPoint documents to PDF via their applications.",
    add_completion=False,
)

USAGE = "Usage: office2pdf [OPTIONS] TARGET_DIR"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
IGNORE_PREFIX_HELP = (
    "Excel sheets whose name starts with this prefix are left out of the PDF. "
    'Pass "" to export whole workbooks.'
)


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(level_name: str) -> None:
    """Configure root logging for a CLI run.

    Parameters
    ----------
    level_name : str
        Standard logging level name, case-insensitive.

    Raises
    ------
    typer.BadParameter
        If the level name is unknown.
    """
    level = logging.getLevelNamesMapping().get(level_name.upper())
    if level is None:
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def _print_conversion_error(exc: BaseException, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : BaseException
        Exception raised or collected during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"office2pdf {__version__}")
        raise typer.Exit()


# -----------------------------
# Command
# -----------------------------
@app.command()
def convert_cmd(
    target_dir: Path | None = typer.Argument(
        None,
        show_default=False,
        help="Folder searched recursively for .xlsx/.xls/.docx/.pptx/.ppt files.",
    ),
    ignore_prefix: str = typer.Option(
        "_",
        "-g",
        "--ignore-prefix",
        envvar="OFFICE2PDF_IGNORE_PREFIX",
        help=IGNORE_PREFIX_HELP,
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", envvar="OFFICE2PDF_LOG_LEVEL", help="Logging level."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    """Convert every Office document under TARGET_DIR to PDF.

    Parameters
    ----------
    target_dir : Path | None
        Folder to convert; required.
    ignore_prefix : str, default="_"
        Sheet-name prefix excluded from spreadsheet exports.
    log_level : str, default="INFO"
        Logging level name.
    debug : bool, default=False
        Whether to print tracebacks for errors.

    Notes
    -----
    - Requires Windows with Microsoft Office and the `pywin32` package.
    - Exits 1 if any document family failed; families that did not fail
      still convert all their files.
    """
    del version
    if target_dir is None:
        typer.echo("A target folder for PDF conversion is required.", err=True)
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1)

    _configure_logging(log_level)

    try:
        from office2pdf.api import convert_directory_to_pdf

        report = convert_directory_to_pdf(target_dir, sheet_ignore_prefix=ignore_prefix)
    except Office2PdfError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if not report.families:
        typer.echo(f"No files to convert under {target_dir}.")
        return

    if report.errors:
        codes = [_print_conversion_error(error, debug) for error in report.errors]
        raise typer.Exit(code=max(codes))

    typer.echo(f"✓ Converted {len(report.converted)} file(s).")


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
