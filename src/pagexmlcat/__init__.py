"""PAGE-XML text extraction."""

__version__ = "0.1.0"
