"""Block-level alignment of two segment sequences.

The aligner walks both sequences with one cursor each. Every step resolves
to exactly one of the outcomes below, which is then turned into annotated
records for one side (target-only mode) or both sides (mutual mode).

Lookahead only looks forward from the current cursors and only for exact
``(text, tag_name)`` matches, so the walk is linear apart from those scans.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from docdelta.parser.base import Segment

from .base import AnnotatedSegment, ChangeType, DiffOp, Operation
from .words import WordDiffer

logger = logging.getLogger(__name__)

NOT_FOUND = -1


@dataclass(frozen=True, slots=True)
class Unchanged:
    left: Segment
    right: Segment


@dataclass(frozen=True, slots=True)
class Modified:
    left: Segment
    right: Segment
    ops: tuple[DiffOp, ...]


@dataclass(frozen=True, slots=True)
class Added:
    right: Segment


@dataclass(frozen=True, slots=True)
class Removed:
    left: Segment


@dataclass(frozen=True, slots=True)
class Replacement:
    left: Segment
    right: Segment


Step = Unchanged | Modified | Added | Removed | Replacement


@dataclass(slots=True)
class Alignment:
    left: list[AnnotatedSegment] = field(default_factory=list)
    right: list[AnnotatedSegment] = field(default_factory=list)


def find_match(segment: Segment, segments: list[Segment], start: int) -> int:
    """Return the offset from ``start`` of the first segment matching ``segment``, or -1."""
    key = segment.key
    for idx in range(start, len(segments)):
        if segments[idx].key == key:
            return idx - start
    return NOT_FOUND


class BlockAligner:
    def __init__(self, word_differ: WordDiffer | None = None) -> None:
        self.word_differ = word_differ or WordDiffer()

    def steps(self, left: list[Segment], right: list[Segment], *, stop_at_right_end: bool = False) -> Iterator[Step]:
        """Yield one step per cursor move until both sides (or only the right side) are exhausted."""
        left_index = 0
        right_index = 0

        while left_index < len(left) or right_index < len(right):
            if stop_at_right_end and right_index >= len(right):
                return

            left_segment = left[left_index] if left_index < len(left) else None
            right_segment = right[right_index] if right_index < len(right) else None

            step = self._decide(left, right, left_index, right_index, left_segment, right_segment)
            if isinstance(step, (Unchanged, Modified, Replacement)):
                left_index += 1
                right_index += 1
            elif isinstance(step, Added):
                right_index += 1
            else:
                left_index += 1
            yield step

    def _decide(
        self,
        left: list[Segment],
        right: list[Segment],
        left_index: int,
        right_index: int,
        left_segment: Segment | None,
        right_segment: Segment | None,
    ) -> Step:
        if left_segment is None:
            return Added(right_segment)
        if right_segment is None:
            return Removed(left_segment)

        if left_segment.key == right_segment.key:
            return Unchanged(left_segment, right_segment)

        right_match = find_match(left_segment, right, right_index + 1)
        left_match = find_match(right_segment, left, left_index + 1)

        if right_match != NOT_FOUND and (left_match == NOT_FOUND or right_match <= left_match):
            # The current left segment shows up later on the right: the right one was inserted.
            return Added(right_segment)
        if left_match != NOT_FOUND:
            return Removed(left_segment)

        # Without a resync point, same tag means a content edit however unrelated the text.
        if left_segment.tag_name == right_segment.tag_name:
            ops = tuple(self.word_differ.diff(left_segment.text, right_segment.text))
            return Modified(left_segment, right_segment, ops)
        return Replacement(left_segment, right_segment)

    def align_mutual(self, left: list[Segment], right: list[Segment]) -> Alignment:
        """Annotate both sequences, padding with placeholders so they stay index-aligned."""
        result = Alignment()

        for step in self.steps(left, right):
            if isinstance(step, Unchanged):
                result.left.append(_unchanged(step.left))
                result.right.append(_unchanged(step.right))
            elif isinstance(step, Modified):
                inline = self.word_differ.render_inline(step.ops)
                result.left.append(_modified(step.left, step.ops, inline.left))
                result.right.append(_modified(step.right, step.ops, inline.right))
            elif isinstance(step, Added):
                result.left.append(AnnotatedSegment.placeholder(Operation.ADDED, step.right))
                result.right.append(_added(step.right, ChangeType.STRUCTURAL_ADD))
            elif isinstance(step, Removed):
                result.left.append(_removed(step.left, ChangeType.STRUCTURAL_REMOVE))
                result.right.append(AnnotatedSegment.placeholder(Operation.REMOVED, step.left))
            elif isinstance(step, Replacement):
                result.left.append(_removed(step.left, ChangeType.REPLACEMENT))
                result.right.append(_added(step.right, ChangeType.REPLACEMENT))
            else:  # pragma: no cover - closed set of steps
                raise TypeError(f"Unknown alignment step: {step!r}")

        logger.debug("Mutual alignment produced %d aligned rows", len(result.right))
        return result

    def align_target(self, left: list[Segment], right: list[Segment]) -> list[AnnotatedSegment]:
        """Annotate only the right sequence relative to the left one."""
        target: list[AnnotatedSegment] = []

        for step in self.steps(left, right, stop_at_right_end=True):
            if isinstance(step, Unchanged):
                target.append(_unchanged(step.right))
            elif isinstance(step, Modified):
                inline = self.word_differ.render_inline(step.ops)
                target.append(_modified(step.right, step.ops, inline.right))
            elif isinstance(step, Added):
                target.append(_added(step.right, ChangeType.STRUCTURAL_ADD))
            elif isinstance(step, Replacement):
                target.append(_added(step.right, ChangeType.REPLACEMENT))
            elif isinstance(step, Removed):
                # Left-only content has no place in the target document.
                continue
            else:  # pragma: no cover - closed set of steps
                raise TypeError(f"Unknown alignment step: {step!r}")

        logger.debug("Target alignment produced %d segments", len(target))
        return target


def _unchanged(segment: Segment) -> AnnotatedSegment:
    return AnnotatedSegment(operation=Operation.UNCHANGED, segment=segment)


def _modified(segment: Segment, ops: tuple[DiffOp, ...], word_diff: str) -> AnnotatedSegment:
    return AnnotatedSegment(
        operation=Operation.MODIFIED,
        change_type=ChangeType.CONTENT_CHANGE,
        segment=segment,
        word_diff=word_diff,
        diff_ops=ops,
    )


def _added(segment: Segment, change_type: ChangeType) -> AnnotatedSegment:
    return AnnotatedSegment(operation=Operation.ADDED, change_type=change_type, segment=segment)


def _removed(segment: Segment, change_type: ChangeType) -> AnnotatedSegment:
    return AnnotatedSegment(operation=Operation.REMOVED, change_type=change_type, segment=segment)
