"""Annotated output records produced by the block aligner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from docdelta.parser.base import Segment, SegmentKind


class DiffKind(str, Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class DiffOp:
    kind: DiffKind
    text: str


class Operation(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    PLACEHOLDER = "placeholder"


class ChangeType(str, Enum):
    NONE = "none"
    STRUCTURAL_ADD = "structural_add"
    STRUCTURAL_REMOVE = "structural_remove"
    CONTENT_CHANGE = "content_change"
    REPLACEMENT = "replacement"
    PLACEHOLDER_ADDED = "placeholder_added"
    PLACEHOLDER_REMOVED = "placeholder_removed"


@dataclass(frozen=True, slots=True)
class AnnotatedSegment:
    """A segment with its classification.

    For placeholders ``segment`` is ``None`` and ``counterpart`` is the real
    segment on the opposite side.
    """

    operation: Operation
    change_type: ChangeType = ChangeType.NONE
    segment: Segment | None = None
    word_diff: str | None = None
    diff_ops: tuple[DiffOp, ...] = ()
    counterpart: Segment | None = None
    placeholder_for: Operation | None = None
    highlighted_markup: str = ""

    @classmethod
    def placeholder(cls, placeholder_for: Operation, counterpart: Segment) -> AnnotatedSegment:
        change_type = (
            ChangeType.PLACEHOLDER_ADDED if placeholder_for is Operation.ADDED else ChangeType.PLACEHOLDER_REMOVED
        )
        return cls(
            operation=Operation.PLACEHOLDER,
            change_type=change_type,
            counterpart=counterpart,
            placeholder_for=placeholder_for,
        )

    @property
    def is_placeholder(self) -> bool:
        return self.operation is Operation.PLACEHOLDER

    @property
    def id(self) -> int | str:
        if self.segment is None:
            return f"placeholder_{self.counterpart.id if self.counterpart else ''}"
        return self.segment.id

    @property
    def text(self) -> str:
        return self.segment.text if self.segment else ""

    @property
    def tag_name(self) -> str:
        if self.segment is not None:
            return self.segment.tag_name
        return self.counterpart.tag_name if self.counterpart else ""

    @property
    def kind(self) -> SegmentKind | None:
        return self.segment.kind if self.segment else None

    @property
    def markup(self) -> str:
        return self.segment.markup if self.segment else ""
