"""Format Stage - Render resolved alternatives as output lines."""

from typing import Optional

from pagexmlcat.errors import MissingTextError
from pagexmlcat.models import CatOptions, ResolvedAlternative


def normalize_text(text: str) -> str:
    """Replace every space with an underscore."""
    return text.replace(" ", "_")


def format_line(
    resolved: ResolvedAlternative,
    options: CatOptions,
    filename: Optional[str] = None,
) -> str:
    """Render one alternative as a newline-terminated line.

    Fields are space separated, in this order: filename, ``id@index``,
    confidence, text. Each decoration is only emitted when enabled in options
    and available (no filename for stdin, no confidence without a conf
    attribute, no id field for segments without an id).

    Args:
        resolved: Alternative to render.
        options: Run options selecting decorations and normalization.
        filename: Source file path, None for stdin.

    Returns:
        Formatted line including the trailing newline.

    Raises:
        MissingTextError: If the alternative has no Unicode element.
    """
    segment = resolved.segment
    alternative = resolved.alternative
    if alternative.text is None:
        raise MissingTextError(f"missing Unicode in TextEquiv {resolved.index}")

    fields = []
    if options.print_filename and filename:
        fields.append(filename)
    if options.print_id and segment.id is not None:
        fields.append(f"{segment.id}@{resolved.index}")
    if options.print_conf and alternative.conf is not None:
        fields.append(alternative.conf)

    text = alternative.text
    if options.normalize:
        text = normalize_text(text)
    fields.append(text)

    return " ".join(fields) + "\n"
