"""Resolve Stage - Pick TextEquiv alternatives of a segment by index.

A segment may carry several TextEquiv readings (for example the outputs of
different OCR engines). Callers request them by 0-based index; negative
indices count from the end, so -1 is the last alternative.
"""

from typing import Iterator, Optional, Sequence
from xml.etree.ElementTree import Element

from pagexmlcat.errors import AlternativeIndexError
from pagexmlcat.models import Granularity, ResolvedAlternative, Segment, TextAlternative
from pagexmlcat.pipeline.stage_load import find_children, get_attribute

TEXT_EQUIV = "TextEquiv"
UNICODE = "Unicode"


def read_alternative(text_equiv: Element) -> TextAlternative:
    """Extract confidence and Unicode text from a TextEquiv element."""
    unicode = find_children(text_equiv, UNICODE)
    text = "".join(unicode[0].itertext()) if unicode else None
    return TextAlternative(conf=get_attribute(text_equiv, "conf"), text=text)


def find_alternatives(element: Element) -> list[TextAlternative]:
    """Direct TextEquiv children of a segment element, in document order."""
    return [read_alternative(te) for te in find_children(element, TEXT_EQUIV)]


def read_segment(element: Element, granularity: Granularity) -> Segment:
    """Build a Segment from a TextRegion, TextLine or Word element."""
    return Segment(
        granularity=granularity,
        id=get_attribute(element, "id"),
        alternatives=find_alternatives(element),
    )


def resolve_index(index: int, count: int, segment_id: Optional[str] = None) -> int:
    """Resolve a possibly negative index against count alternatives.

    Args:
        index: Requested index.
        count: Number of alternatives.
        segment_id: Segment id for error messages.

    Returns:
        Non-negative index into the alternatives.

    Raises:
        AlternativeIndexError: If index >= count or -index >= count.
    """
    if index >= count or -index >= count:
        raise AlternativeIndexError(
            f"invalid index {index} ({count} alternatives)",
            index=index,
            count=count,
            segment_id=segment_id,
        )
    if index < 0:
        index = count + index
    return index


def resolve_alternatives(
    segment: Segment,
    indices: Sequence[int],
) -> Iterator[ResolvedAlternative]:
    """Yield the segment's alternatives for each requested index, in order.

    Raises:
        AlternativeIndexError: On the first index out of range. Alternatives for
            earlier indices have already been yielded.
    """
    count = len(segment.alternatives)
    for requested in indices:
        index = resolve_index(requested, count, segment.id)
        yield ResolvedAlternative(
            segment=segment,
            index=index,
            alternative=segment.alternatives[index],
        )
