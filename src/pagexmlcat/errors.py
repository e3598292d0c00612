"""Error types raised while extracting text from PAGE-XML documents."""

import copy
from typing import Optional


class PageXMLCatError(Exception):
    """Base class for all pagexmlcat errors."""

    def with_context(self, context: str) -> "PageXMLCatError":
        """Return a copy of this error with its message prefixed by context."""
        wrapped = copy.copy(self)
        wrapped.args = (f"{context}: {self}",)
        return wrapped


class DocumentParseError(PageXMLCatError):
    """Input is not well-formed XML."""


class OrderingError(PageXMLCatError):
    """A RegionRefIndexed declaration is missing or has invalid attributes."""


class AlternativeIndexError(PageXMLCatError, IndexError):
    """Requested TextEquiv index is out of range for a segment."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        count: Optional[int] = None,
        segment_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.index = index
        self.count = count
        self.segment_id = segment_id


class MissingTextError(PageXMLCatError):
    """A TextEquiv has no Unicode child."""


class SourceError(PageXMLCatError, OSError):
    """An input source could not be opened or read."""


class BatchError(PageXMLCatError):
    """One or more sources failed while running in keep-going mode."""

    def __init__(self, message: str, failures: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.failures = failures or {}
