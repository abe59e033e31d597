"""Core intermediate representation (IR) for segmented documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class SegmentKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"
    TABLE_CELL = "table-cell"
    TABLE = "table"
    TABLE_ROW = "table-row"
    IMAGE = "image"
    QUOTE = "quote"
    PREFORMATTED = "preformatted"
    BLOCK = "block"
    MEDIA = "media"
    TEXT = "text"


# Kinds that may legitimately carry no text.
TEXTLESS_KINDS = frozenset({SegmentKind.IMAGE, SegmentKind.TABLE, SegmentKind.TABLE_ROW, SegmentKind.MEDIA})

# Kinds listed in the image section of a detailed report.
MEDIA_KINDS = frozenset({SegmentKind.IMAGE, SegmentKind.TABLE, SegmentKind.MEDIA})


@dataclass(frozen=True, slots=True)
class Segment:
    id: int
    kind: SegmentKind
    tag_name: str
    text: str
    markup: str
    style: str = ""
    class_name: str = ""
    parent_tag: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        """Identity used for equality and lookahead matching."""
        return (self.text, self.tag_name)

    @property
    def is_table_cell(self) -> bool:
        return self.kind is SegmentKind.TABLE_CELL

    @property
    def is_media(self) -> bool:
        return self.kind in MEDIA_KINDS


class Segmenter(Protocol):
    def parse(self, markup: str | bytes | None) -> list[Segment]:  # pragma: no cover - structural protocol
        """Split a document into an ordered list of segments."""
