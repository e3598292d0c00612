"""Pytest configuration and fixtures."""

import pytest

from .helpers import line, page_xml, reading_order, region


@pytest.fixture
def simple_page() -> bytes:
    """One region with two lines: 'ab' (0.9) and 'cd' (0.8)."""
    return page_xml(region("r1", line("l1", ("ab", "0.9")), line("l2", ("cd", "0.8"))))


@pytest.fixture
def ordered_page() -> bytes:
    """Regions A then B in markup, reading order B before A."""
    return page_xml(
        region("A", line("a1", ("first in markup", None)))
        + region("B", line("b1", ("first in reading order", None))),
        reading_order=reading_order(("B", 0), ("A", 1)),
    )


@pytest.fixture
def write_page(tmp_path):
    """Write PAGE-XML bytes to a file in tmp_path and return its path."""

    def _write(content: bytes, name: str = "page.xml"):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write
