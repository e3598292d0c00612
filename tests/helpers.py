"""PAGE-XML builders shared by the tests."""

PAGE_NS = "http://schema.primaresearch.org/PAGE/gts/pagecontent/2019-07-15"


def page_xml(body: str, reading_order: str = "") -> bytes:
    """Wrap regions (and an optional ReadingOrder) in a PAGE-XML document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<PcGts xmlns="{PAGE_NS}">'
        '<Page imageFilename="page.png" imageWidth="100" imageHeight="100">'
        f"{reading_order}{body}"
        "</Page></PcGts>"
    ).encode("utf-8")


def line(line_id: str, *alternatives: tuple) -> str:
    """TextLine with (text, conf) alternatives; text None omits Unicode."""
    equivs = []
    for text, conf in alternatives:
        conf_attr = f' conf="{conf}"' if conf is not None else ""
        unicode = f"<Unicode>{text}</Unicode>" if text is not None else ""
        equivs.append(f"<TextEquiv{conf_attr}>{unicode}</TextEquiv>")
    return f'<TextLine id="{line_id}">{"".join(equivs)}</TextLine>'


def region(region_id: str, *lines: str) -> str:
    return f'<TextRegion id="{region_id}">{"".join(lines)}</TextRegion>'


def reading_order(*refs: tuple) -> str:
    """OrderedGroup of RegionRefIndexed (region id, rank) pairs."""
    items = "".join(
        f'<RegionRefIndexed index="{rank}" regionRef="{ref}"/>' for ref, rank in refs
    )
    return f'<ReadingOrder><OrderedGroup id="ro1">{items}</OrderedGroup></ReadingOrder>'
