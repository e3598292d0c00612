"""Order Stage - Resolve the explicit reading order of text regions.

A PAGE-XML document may declare its reading order as a list of
RegionRefIndexed elements inside an OrderedGroup. When present, regions are
printed in ascending rank instead of markup order. Documents without such a
declaration (or runs in serial mode) are printed in document order.
"""

import logging
from typing import Optional
from xml.etree.ElementTree import Element

from pagexmlcat.errors import OrderingError
from pagexmlcat.models import CatOptions, RegionRef
from pagexmlcat.pipeline.stage_load import find_descendants, get_attribute, local_name

logger = logging.getLogger(__name__)

ORDERED_GROUP = "OrderedGroup"
REGION_REF_INDEXED = "RegionRefIndexed"
TEXT_REGION = "TextRegion"

# (reading order entry or None for serial mode, scope element)
Scope = tuple[Optional[RegionRef], Element]


def find_region_ref_elements(root: Element) -> list[Element]:
    """Find RegionRefIndexed children of OrderedGroup elements in document order."""
    parents = {child: parent for parent in root.iter() for child in parent}
    return [
        element
        for element in find_descendants(root, REGION_REF_INDEXED)
        if element in parents and local_name(parents[element].tag) == ORDERED_GROUP
    ]


def region_ref_from_element(element: Element) -> RegionRef:
    """Build a RegionRef from a RegionRefIndexed element.

    Raises:
        OrderingError: If regionRef or index is missing, or index is not an integer.
    """
    ref = get_attribute(element, "regionRef")
    rank = get_attribute(element, "index")
    if ref is None:
        raise OrderingError("invalid RegionRefIndexed: missing regionRef attribute")
    if rank is None:
        raise OrderingError("invalid RegionRefIndexed: missing index attribute")
    try:
        index = int(rank)
    except ValueError:
        raise OrderingError(f"invalid RegionRefIndexed: invalid index {rank!r}") from None
    return RegionRef(ref=ref, index=index)


def find_region_refs(root: Element) -> list[RegionRef]:
    """Collect the declared reading order, sorted by rank (stable)."""
    refs = [region_ref_from_element(element) for element in find_region_ref_elements(root)]
    return sorted(refs, key=lambda ref: ref.index)


def find_regions(root: Element, ref: RegionRef) -> list[Element]:
    """All TextRegion elements whose id matches the reference."""
    return [
        region
        for region in find_descendants(root, TEXT_REGION)
        if get_attribute(region, "id") == ref.ref
    ]


def resolve_scopes(root: Element, options: CatOptions) -> list[Scope]:
    """Determine the subtrees to print, in reading order.

    Args:
        root: Document root element.
        options: Run options; ``serial`` disables reading order.

    Returns:
        List of (ref, scope) pairs. In serial mode (or when the document has no
        reading order) this is the single pair (None, root).

    Raises:
        OrderingError: If any RegionRefIndexed element is invalid.
    """
    if options.serial:
        logger.debug("Serial mode: ignoring reading order")
        return [(None, root)]

    refs = find_region_refs(root)
    if not refs:
        logger.debug("No reading order declared, using document order")
        return [(None, root)]

    logger.debug("Reading order with %d region refs", len(refs))
    scopes: list[Scope] = []
    for ref in refs:
        regions = find_regions(root, ref)
        if not regions:
            logger.debug("No TextRegion with id %r", ref.ref)
        scopes.extend((ref, region) for region in regions)
    return scopes
