"""HTML segmenter: flatten a tagged content tree into comparable segments."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from docdelta.errors import ParseFailure

from .base import TEXTLESS_KINDS, Segment, SegmentKind

logger = logging.getLogger(__name__)

# html.parser keeps fragments as-is instead of wrapping them in <html><body>.
PARSER = "html.parser"

BLOCK_TAGS = (
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "li", "td", "th", "div", "blockquote", "pre",
    "img", "table", "tr",
)
MEDIA_TAGS = ("hr",)

_HEADING_RE = re.compile(r"^h[1-6]$")

_KIND_BY_TAG = {
    "p": SegmentKind.PARAGRAPH,
    "li": SegmentKind.LIST_ITEM,
    "td": SegmentKind.TABLE_CELL,
    "th": SegmentKind.TABLE_CELL,
    "table": SegmentKind.TABLE,
    "tr": SegmentKind.TABLE_ROW,
    "img": SegmentKind.IMAGE,
    "blockquote": SegmentKind.QUOTE,
    "pre": SegmentKind.PREFORMATTED,
    "div": SegmentKind.BLOCK,
    "hr": SegmentKind.MEDIA,
}


class HTMLSegmenter:
    """Parse HTML markup into an ordered list of segments."""

    def __init__(self, collect_media: bool = True) -> None:
        self.collect_media = collect_media

    def parse(self, markup: str | bytes | None) -> list[Segment]:
        if markup is None:
            return []
        if isinstance(markup, bytes):
            try:
                markup = markup.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ParseFailure(f"Markup is not valid UTF-8: {exc}") from exc
        if not isinstance(markup, str):
            raise ParseFailure(f"Expected markup as str or bytes, got {type(markup).__name__}")
        if not markup.strip():
            return []

        try:
            soup = BeautifulSoup(markup, PARSER)
        except Exception as exc:
            raise ParseFailure(f"Could not parse markup: {exc}") from exc

        tags = BLOCK_TAGS + MEDIA_TAGS if self.collect_media else BLOCK_TAGS
        elements = soup.find_all(list(tags))
        segments: list[Segment] = []
        for element in elements:
            segment = _element_to_segment(element, len(segments))
            if segment is not None:
                segments.append(segment)

        logger.debug("Visited %d elements, kept %d segments", len(elements), len(segments))
        return segments

    def parse_file(self, input_path: Path) -> list[Segment]:
        input_path = Path(input_path)
        return self.parse(input_path.read_text(encoding="utf-8", errors="ignore"))


def element_kind(tag_name: str) -> SegmentKind:
    if _HEADING_RE.match(tag_name):
        return SegmentKind.HEADING
    return _KIND_BY_TAG.get(tag_name, SegmentKind.TEXT)


def _element_to_segment(element: Tag, position: int) -> Segment | None:
    tag_name = element.name.lower()
    kind = element_kind(tag_name)
    text = _element_text(element, kind)

    # Empty wrappers would only add noise to the alignment.
    if not text and kind not in TEXTLESS_KINDS:
        return None

    parent = element.parent
    parent_tag = parent.name.lower() if isinstance(parent, Tag) and parent.name != "[document]" else None

    return Segment(
        id=position,
        kind=kind,
        tag_name=tag_name,
        text=text,
        markup=str(element),
        style=str(element.get("style") or ""),
        class_name=_class_attr(element),
        parent_tag=parent_tag,
    )


def _element_text(element: Tag, kind: SegmentKind) -> str:
    if kind is SegmentKind.IMAGE:
        return (element.get("alt") or element.get("title") or "[img]").strip() or "[img]"
    if kind is SegmentKind.MEDIA:
        return (element.get("title") or f"[{element.name.lower()}]").strip()
    return element.get_text().strip()


def _class_attr(element: Tag) -> str:
    value = element.get("class")
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)
