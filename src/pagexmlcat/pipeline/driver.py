"""Pipeline driver - Cat one or more PAGE-XML sources to a text stream.

Output is written line by line as each alternative is resolved, so a failure
part way through a document leaves the lines written so far in place.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, TextIO, Union
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from pagexmlcat.errors import BatchError, PageXMLCatError, SourceError
from pagexmlcat.models import CatOptions
from pagexmlcat.pipeline.stage_format import format_line
from pagexmlcat.pipeline.stage_load import STDIN, load_document, open_source
from pagexmlcat.pipeline.stage_order import resolve_scopes
from pagexmlcat.pipeline.stage_resolve import read_segment, resolve_alternatives
from pagexmlcat.pipeline.stage_select import select_segments

logger = logging.getLogger(__name__)


def _write(out: TextIO, line: str) -> None:
    try:
        out.write(line)
    except OSError as err:
        raise SourceError(f"cannot write output: {err}") from err


def cat_scope(
    scope: Element,
    out: TextIO,
    options: CatOptions,
    filename: Optional[str] = None,
) -> int:
    """Print every selected segment within scope.

    Returns:
        Number of lines written.
    """
    written = 0
    for element in select_segments(scope, options.granularity):
        segment = read_segment(element, options.granularity)
        try:
            for resolved in resolve_alternatives(segment, options.indices):
                _write(out, format_line(resolved, options, filename))
                written += 1
        except PageXMLCatError as err:
            raise err.with_context(f"cannot print {segment.label}") from err
    return written


def cat_document(
    document: Union[ElementTree.ElementTree, Element],
    out: TextIO,
    options: CatOptions,
    filename: Optional[str] = None,
) -> int:
    """Print a parsed document in reading order.

    Args:
        document: Parsed tree or its root element.
        out: Text stream to write to.
        options: Run options.
        filename: Source path shown with ``print_filename``; None for stdin.

    Returns:
        Number of lines written.
    """
    root = document.getroot() if isinstance(document, ElementTree.ElementTree) else document
    written = 0
    for ref, scope in resolve_scopes(root, options):
        try:
            written += cat_scope(scope, out, options, filename)
        except PageXMLCatError as err:
            if ref is None:
                raise
            raise err.with_context(f"cannot print region {ref.ref}") from err
    return written


def cat_source(
    path: Union[str, Path],
    out: TextIO,
    options: CatOptions,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """Open, parse and print a single source (``-`` for stdin).

    Returns:
        Number of lines written.
    """
    path = str(path)
    is_stdin = path == STDIN
    source = "<stdin>" if is_stdin else path
    logger.debug("Processing %s", source)

    with open_source(path, stdin=stdin) as stream:
        document = load_document(stream, source)
        try:
            return cat_document(
                document, out, options, filename=None if is_stdin else path
            )
        except PageXMLCatError as err:
            raise err.with_context(source) from err


def cat_sources(
    paths: Sequence[Union[str, Path]],
    out: TextIO,
    options: CatOptions,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """Print all sources in order; no paths means stdin.

    By default the first error aborts the run. With ``options.keep_going``
    failing sources are logged and skipped, and a BatchError listing them is
    raised after the last source.

    Returns:
        Total number of lines written.
    """
    paths = list(paths) or [STDIN]
    written = 0
    failures: dict[str, str] = {}
    for path in paths:
        try:
            written += cat_source(path, out, options, stdin=stdin)
        except PageXMLCatError as err:
            if not options.keep_going:
                raise
            logger.warning("Skipping %s: %s", path, err)
            failures[str(path)] = str(err)

    if failures:
        raise BatchError(
            f"{len(failures)} of {len(paths)} sources failed: {', '.join(failures)}",
            failures=failures,
        )
    return written
