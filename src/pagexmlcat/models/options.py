"""Run configuration threaded through every pipeline stage."""

import re

from pydantic import Field, field_validator

from .base import FrozenModel, Granularity

_INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_indices(value: str) -> tuple[int, ...]:
    """Parse a comma-separated list of (possibly negative) integers.

    Only plain decimal integers are accepted: no surrounding whitespace and
    no digit-group underscores.

    Raises:
        ValueError: If any element is not an integer.
    """
    indices = []
    for part in value.split(","):
        if not _INDEX_PATTERN.fullmatch(part):
            raise ValueError(f"invalid index: cannot convert {part!r}")
        indices.append(int(part))
    return tuple(indices)


class CatOptions(FrozenModel):
    """Immutable options for one pagexmlcat run."""

    granularity: Granularity = Granularity.LINE
    print_id: bool = False
    print_conf: bool = False
    print_filename: bool = False
    serial: bool = False
    normalize: bool = False
    indices: tuple[int, ...] = Field(default=(0,), min_length=1)
    keep_going: bool = False

    @field_validator("indices", mode="before")
    @classmethod
    def _split_indices(cls, value):
        if isinstance(value, str):
            return parse_indices(value)
        return value
