"""Select Stage - Find the segments of the requested granularity."""

from typing import Iterator
from xml.etree.ElementTree import Element

from pagexmlcat.models import Granularity
from pagexmlcat.pipeline.stage_load import find_descendants


def select_segments(scope: Element, granularity: Granularity) -> Iterator[Element]:
    """Yield TextRegion, TextLine or Word elements within scope.

    The scope element itself is included if it matches. Nesting depth and
    namespaces are ignored; order is document order.
    """
    return find_descendants(scope, granularity.tag)
