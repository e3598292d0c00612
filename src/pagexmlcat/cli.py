"""pagexmlcat CLI."""

import logging
import sys
from typing import Optional, TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pagexmlcat import __version__
from pagexmlcat.config import settings
from pagexmlcat.errors import PageXMLCatError
from pagexmlcat.models import CatOptions, Granularity, parse_indices
from pagexmlcat.pipeline import cat_sources

app = typer.Typer(
    name="pagexmlcat",
    help="Print the text content of PAGE-XML documents",
    add_completion=False,
)
err_console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def prepare_output(out: TextIO) -> TextIO:
    """Switch out to the configured encoding when the stream supports it."""
    encoding = getattr(out, "encoding", None) or ""
    if encoding.lower() != settings.encoding.lower() and hasattr(out, "reconfigure"):
        out.reconfigure(encoding=settings.encoding)
    return out


def _index_callback(value: Optional[str]) -> str:
    if value is None:
        value = settings.default_index
    try:
        parse_indices(value)
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err
    return value


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pagexmlcat {__version__}")
        raise typer.Exit()


@app.command()
def cat(
    paths: Optional[list[str]] = typer.Argument(
        None, help="PAGE-XML files to print ('-' or none for stdin)"
    ),
    words: bool = typer.Option(False, "--words", help="Print words"),
    regions: bool = typer.Option(False, "--regions", help="Print regions (ignored with --words)"),
    print_id: bool = typer.Option(False, "--id", help="Prefix lines with segment id@index"),
    conf: bool = typer.Option(False, "--conf", help="Print confidence when present"),
    serial: bool = typer.Option(False, "--serial", help="Ignore region reading order"),
    filename: bool = typer.Option(False, "--filename", help="Prefix lines with the file name"),
    norm: bool = typer.Option(False, "--norm", help="Replace spaces with underscores"),
    index: Optional[str] = typer.Option(
        None,
        "--index",
        help="Comma-separated TextEquiv indices (negative counts from the end; default 0)",
        callback=_index_callback,
    ),
    keep_going: bool = typer.Option(
        False, "--keep-going", help="Continue with the next file on errors"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit", callback=_version_callback, is_eager=True
    ),
) -> None:
    """Print the text of PAGE-XML documents, one TextEquiv per line."""
    setup_logging(verbose)

    options = CatOptions(
        granularity=Granularity.from_flags(words=words, regions=regions),
        print_id=print_id,
        print_conf=conf,
        print_filename=filename,
        serial=serial,
        normalize=norm,
        indices=parse_indices(index),
        keep_going=keep_going or settings.keep_going,
    )

    out = prepare_output(sys.stdout)

    try:
        cat_sources(paths or [], out, options)
    except PageXMLCatError as err:
        out.flush()
        err_console.print(f"[bold red]error:[/bold red] {escape(str(err))}", soft_wrap=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
