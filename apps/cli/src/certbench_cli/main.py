from __future__ import annotations
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import typer

import certbench
from certbench.errors import CertBenchError, CertDirectoryNotFound
from .report import render_ratio_table, render_size_table
from .runners.common import RESULTS_FILENAME, export_json, run_benchmarks

app = typer.Typer(add_completion=False, help="Certificate compression benchmark CLI")

class _ConsoleFormatter(logging.Formatter):
    """Plain progress lines; level prefix for warnings and above."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname.capitalize()}: {message}"
        return message


@contextmanager
def _console_logging(verbose: bool) -> Iterator[None]:
    """Route `certbench` log records to stdout for the duration of a run."""
    logger = logging.getLogger("certbench")
    previous_level = logger.level
    # bind to the current stdout so redirected/captured streams are honoured
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_ConsoleFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"certbench {certbench.__version__}")
        raise typer.Exit()


@app.command()
def main(
    cert_dir: Path = typer.Option(
        Path("certs"),
        "--cert-dir",
        "-c",
        envvar="CERTBENCH_CERT_DIR",
        help="Directory containing certificates",
        show_default=True,
    ),
    verify: bool = typer.Option(
        True,
        "--verify/--no-verify",
        help="Decompress every output and check it matches the input.",
        show_default=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-algorithm sizes."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    Compress each sample certificate with zstd, zlib (gzip) and brotli and
    report sizes and ratios.
    """
    try:
        with _console_logging(verbose):
            results = run_benchmarks(cert_dir, verify=verify)
    except CertDirectoryNotFound as exc:
        typer.echo(str(exc), err=True)
        typer.echo(exc.hint, err=True)
        raise typer.Exit(code=1)
    except CertBenchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(render_size_table(results))
    typer.echo(render_ratio_table(results))

    try:
        export_json(results, RESULTS_FILENAME)
    except OSError as exc:
        typer.echo(f"Failed to write {RESULTS_FILENAME}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"\nResults saved to {RESULTS_FILENAME}")

def app_main():
    app()

if __name__ == "__main__":
    app_main()
