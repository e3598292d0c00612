"""Segment-level models extracted from PAGE-XML elements."""

from typing import Optional

from pydantic import Field

from .base import FrozenModel, Granularity


class RegionRef(FrozenModel):
    """Entry of an explicit reading order (RegionRefIndexed)."""

    ref: str = Field(..., description="Identifier of the referenced TextRegion")
    index: int = Field(..., description="Rank in reading order")


class TextAlternative(FrozenModel):
    """One TextEquiv reading of a segment."""

    conf: Optional[str] = Field(None, description="Verbatim conf attribute")
    text: Optional[str] = Field(
        None, description="Unicode content; None if the Unicode element is missing"
    )


class Segment(FrozenModel):
    """A TextRegion, TextLine or Word with its alternatives in document order."""

    granularity: Granularity
    id: Optional[str] = None
    alternatives: list[TextAlternative] = Field(default_factory=list)

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return f"{self.granularity.tag} {self.id or '<no id>'}"


class ResolvedAlternative(FrozenModel):
    """A requested index resolved against a segment's alternatives."""

    segment: Segment
    index: int = Field(..., ge=0, description="Resolved, non-negative index")
    alternative: TextAlternative
