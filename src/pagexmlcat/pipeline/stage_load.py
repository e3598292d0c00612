"""Load Stage - Parse PAGE-XML sources into element trees.

Uses the standard library ElementTree parser. PAGE-XML files come in several
schema versions with different namespaces, so every lookup in the pipeline
matches tags and attributes by their local name only.
"""

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from pagexmlcat.errors import DocumentParseError, SourceError

logger = logging.getLogger(__name__)

STDIN = "-"


def local_name(name) -> str:
    """Strip the ``{namespace}`` prefix from a tag or attribute name."""
    if not isinstance(name, str):
        # Comments and processing instructions
        return ""
    return name.rsplit("}", 1)[-1]


def get_attribute(element: Element, name: str) -> Optional[str]:
    """Get an attribute value by local name, ignoring any namespace."""
    if name in element.attrib:
        return element.attrib[name]
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return value
    return None


def find_descendants(node: Element, name: str) -> Iterator[Element]:
    """Yield node and all its descendants with the given local tag name.

    Elements are yielded in document order.
    """
    for element in node.iter():
        if local_name(element.tag) == name:
            yield element


def find_children(node: Element, name: str) -> list[Element]:
    """Direct children of node with the given local tag name."""
    return [child for child in node if local_name(child.tag) == name]


def load_document(stream: BinaryIO, source: str = "<stdin>") -> ElementTree.ElementTree:
    """Parse a byte stream into an element tree.

    Args:
        stream: Binary stream containing the XML document.
        source: Name of the source, used in error messages.

    Returns:
        Parsed ElementTree.

    Raises:
        DocumentParseError: If the stream is not well-formed XML.
    """
    try:
        tree = ElementTree.parse(stream)
    except ElementTree.ParseError as err:
        raise DocumentParseError(f"cannot parse {source}: {err}") from err
    logger.debug("Parsed %s (root element %s)", source, local_name(tree.getroot().tag))
    return tree


@contextmanager
def open_source(
    path: Union[str, Path],
    stdin: Optional[BinaryIO] = None,
) -> Iterator[BinaryIO]:
    """Open an input source for reading.

    Args:
        path: File path, or ``-`` for standard input.
        stdin: Stream used for ``-`` (default: the process's stdin).

    Yields:
        Binary stream. Files are closed when the context exits; stdin is not.

    Raises:
        SourceError: If the file cannot be opened.
    """
    if str(path) == STDIN:
        yield stdin if stdin is not None else sys.stdin.buffer
        return

    try:
        stream = open(path, "rb")
    except OSError as err:
        raise SourceError(f"cannot open {path}: {err.strerror or err}") from err
    with stream:
        yield stream
