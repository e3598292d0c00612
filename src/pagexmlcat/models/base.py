"""Base models and common types for PAGE-XML text extraction."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Granularity(str, Enum):
    """Segment kinds that can be printed."""

    REGION = "region"
    LINE = "line"
    WORD = "word"

    @property
    def tag(self) -> str:
        """Local PAGE-XML tag name for this granularity."""
        return _SEGMENT_TAGS[self]

    @classmethod
    def from_flags(cls, words: bool = False, regions: bool = False) -> "Granularity":
        """Pick a granularity from CLI flags; words wins over regions."""
        if words:
            return cls.WORD
        if regions:
            return cls.REGION
        return cls.LINE


_SEGMENT_TAGS = {
    Granularity.REGION: "TextRegion",
    Granularity.LINE: "TextLine",
    Granularity.WORD: "Word",
}


class FrozenModel(BaseModel):
    """Base class for the read-only models derived from a document."""

    model_config = ConfigDict(frozen=True)
