"""Change summaries and per-line detailed reports."""

from __future__ import annotations

import html
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from docdelta.parser.base import Segment

from .base import AnnotatedSegment, Operation


class ReportStatus(str, Enum):
    UNCHANGED = "UNCHANGED"
    ADDED = "ADDED"
    REMOVED = "REMOVED"
    MODIFIED = "MODIFIED"


@dataclass(frozen=True, slots=True)
class Summary:
    additions: int = 0
    deletions: int = 0
    modifications: int = 0
    changes: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ReportLine:
    v1: int | None
    v2: int | None
    status: ReportStatus
    diff_html: str
    format_changes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TableChange:
    status: ReportStatus
    table: int
    row: int
    col: int
    diff_html: str


@dataclass(frozen=True, slots=True)
class ImageChange:
    status: ReportStatus
    index: int


@dataclass(slots=True)
class ComparisonReport:
    lines: list[ReportLine] = field(default_factory=list)
    tables: list[TableChange] = field(default_factory=list)
    images: list[ImageChange] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [_line_dict(line) for line in self.lines],
            "tables": [{**asdict(t), "status": t.status.value} for t in self.tables],
            "images": [{**asdict(i), "status": i.status.value} for i in self.images],
        }


def summarize_target(sequence: list[AnnotatedSegment]) -> Summary:
    """Tally a single target sequence by its own classifications."""
    additions = sum(1 for seg in sequence if seg.operation is Operation.ADDED)
    deletions = sum(1 for seg in sequence if seg.operation is Operation.REMOVED)
    modifications = sum(1 for seg in sequence if seg.operation is Operation.MODIFIED)
    return Summary(additions, deletions, modifications, additions + deletions + modifications)


def summarize_mutual(left: list[AnnotatedSegment], right: list[AnnotatedSegment]) -> Summary:
    """Additions and modifications come from the right side, deletions from the left.

    Replacement pairs therefore count once as an addition and once as a deletion.
    """
    additions = sum(1 for seg in right if seg.operation is Operation.ADDED)
    modifications = sum(1 for seg in right if seg.operation is Operation.MODIFIED)
    deletions = sum(1 for seg in left if seg.operation is Operation.REMOVED)
    return Summary(additions, deletions, modifications, additions + deletions + modifications)


def build_report(
    left: list[AnnotatedSegment],
    right: list[AnnotatedSegment],
    *,
    table_columns: int = 3,
) -> ComparisonReport:
    """Build one report line per aligned row of a mutual comparison.

    Table cells get a row/column guessed from the row index and a fixed
    column count. This is positional only and knows nothing about the real
    table layout.
    """
    report = ComparisonReport()
    left_line = 0
    right_line = 0

    for index, (left_seg, right_seg) in enumerate(zip(left, right)):
        v1 = v2 = None
        if not left_seg.is_placeholder:
            left_line += 1
            v1 = left_line
        if not right_seg.is_placeholder:
            right_line += 1
            v2 = right_line

        status, diff_html = _line_status(left_seg, right_seg)
        report.lines.append(
            ReportLine(
                v1=v1,
                v2=v2,
                status=status,
                diff_html=diff_html,
                format_changes=_format_changes(left_seg.segment, right_seg.segment),
            )
        )

        real = [seg.segment for seg in (left_seg, right_seg) if seg.segment is not None]
        if any(seg.is_table_cell for seg in real):
            report.tables.append(
                TableChange(
                    status=status,
                    table=1,
                    row=index // table_columns + 1,
                    col=index % table_columns + 1,
                    diff_html=diff_html,
                )
            )
        if any(seg.is_media for seg in real):
            report.images.append(ImageChange(status=status, index=index + 1))

    return report


def _line_status(left_seg: AnnotatedSegment, right_seg: AnnotatedSegment) -> tuple[ReportStatus, str]:
    left_op = left_seg.operation
    right_op = right_seg.operation

    if left_op is Operation.REMOVED and right_op is Operation.PLACEHOLDER:
        return ReportStatus.REMOVED, _span("inline-removed", left_seg.text)
    if left_op is Operation.PLACEHOLDER and right_op is Operation.ADDED:
        return ReportStatus.ADDED, _span("inline-added", right_seg.text)
    if left_op is Operation.MODIFIED and right_op is Operation.MODIFIED:
        return ReportStatus.MODIFIED, right_seg.word_diff or html.escape(right_seg.text, quote=False)
    if left_op is Operation.REMOVED and right_op is Operation.ADDED:
        # Replacement pair.
        return ReportStatus.MODIFIED, _span("inline-removed", left_seg.text) + _span("inline-added", right_seg.text)
    return ReportStatus.UNCHANGED, html.escape(left_seg.text, quote=False)


def _format_changes(left: Segment | None, right: Segment | None) -> tuple[str, ...]:
    if left is None or right is None:
        return ()
    notes: list[str] = []
    if left.style != right.style:
        notes.append("Style changes detected")
    if left.class_name != right.class_name:
        notes.append("Class changes detected")
    return tuple(notes)


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{html.escape(text, quote=False)}</span>'


def _line_dict(line: ReportLine) -> dict[str, Any]:
    return {
        "v1": line.v1,
        "v2": line.v2,
        "status": line.status.value,
        "diff_html": line.diff_html,
        "format_changes": list(line.format_changes),
    }
