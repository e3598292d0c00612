"""Pipeline stages for PAGE-XML text extraction.

Stages, in the order a document flows through them:
1. stage_load - Parse the source into an element tree
2. stage_order - Resolve the explicit reading order (or document order)
3. stage_select - Select regions, lines or words within each scope
4. stage_resolve - Pick TextEquiv alternatives by (negative) index
5. stage_format - Render each alternative as one output line

The driver composes the stages per input source.
"""

from .driver import cat_document, cat_scope, cat_source, cat_sources
from .stage_format import format_line, normalize_text
from .stage_load import (
    find_children,
    find_descendants,
    get_attribute,
    load_document,
    local_name,
    open_source,
)
from .stage_order import find_region_refs, region_ref_from_element, resolve_scopes
from .stage_resolve import (
    find_alternatives,
    read_segment,
    resolve_alternatives,
    resolve_index,
)
from .stage_select import select_segments

__all__ = [
    # Load
    "load_document",
    "open_source",
    "local_name",
    "get_attribute",
    "find_children",
    "find_descendants",
    # Order
    "find_region_refs",
    "region_ref_from_element",
    "resolve_scopes",
    # Select
    "select_segments",
    # Resolve
    "find_alternatives",
    "read_segment",
    "resolve_alternatives",
    "resolve_index",
    # Format
    "format_line",
    "normalize_text",
    # Driver
    "cat_document",
    "cat_scope",
    "cat_source",
    "cat_sources",
]
