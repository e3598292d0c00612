"""Data models for PAGE-XML text extraction.

All models are frozen pydantic models rebuilt from scratch for every
input document; nothing is mutated after creation.

Model Hierarchy:
- Segment → TextAlternative
- ResolvedAlternative → Segment + TextAlternative
- RegionRef (reading order)
- CatOptions (per-run configuration)
"""

from .base import FrozenModel, Granularity
from .options import CatOptions, parse_indices
from .segment import RegionRef, ResolvedAlternative, Segment, TextAlternative

__all__ = [
    # Base types
    "FrozenModel",
    "Granularity",
    # Options
    "CatOptions",
    "parse_indices",
    # Segment
    "RegionRef",
    "ResolvedAlternative",
    "Segment",
    "TextAlternative",
]
