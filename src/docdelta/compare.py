"""Comparison entry points: HTML in, annotated and highlighted sequences out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from docdelta.config import CompareMode, CompareOptions
from docdelta.diff.aligner import BlockAligner
from docdelta.diff.base import AnnotatedSegment
from docdelta.diff.report import ComparisonReport, Summary, build_report, summarize_mutual, summarize_target
from docdelta.diff.words import WordDiffer
from docdelta.errors import ComparisonFailure
from docdelta.parser.html_parser import HTMLSegmenter
from docdelta.renderer.highlight import highlight_sequence, render_markup

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    mode: CompareMode
    summary: Summary
    right: list[AnnotatedSegment]
    left: list[AnnotatedSegment] | None = None
    report: ComparisonReport | None = None

    def render_left(self) -> str:
        return render_markup(self.left or [])

    def render_right(self) -> str:
        return render_markup(self.right)


def compare_documents(
    left_html: str | bytes | None,
    right_html: str | bytes | None,
    options: CompareOptions | None = None,
) -> ComparisonResult:
    """Compare two HTML documents.

    Any failure aborts the run and is raised as a single ``ComparisonFailure``;
    no partial result is ever returned.
    """
    options = options or CompareOptions()
    logger.info("Starting %s comparison", options.mode.value)

    try:
        return _run(left_html, right_html, options)
    except Exception as exc:
        logger.exception("Comparison failed")
        raise ComparisonFailure(exc) from exc


async def compare_documents_async(
    left_html: str | bytes | None,
    right_html: str | bytes | None,
    options: CompareOptions | None = None,
) -> ComparisonResult:
    """Run ``compare_documents`` off the event loop thread."""
    return await asyncio.to_thread(compare_documents, left_html, right_html, options)


def _run(left_html: str | bytes | None, right_html: str | bytes | None, options: CompareOptions) -> ComparisonResult:
    segmenter = HTMLSegmenter(collect_media=options.collect_media)
    left_segments = segmenter.parse(left_html)
    right_segments = segmenter.parse(right_html)
    logger.info("Left document: %d segments", len(left_segments))
    logger.info("Right document: %d segments", len(right_segments))

    differ = WordDiffer(
        timeout=options.diff_timeout,
        edit_cost=options.diff_edit_cost,
        preview_chars=options.preview_chars,
    )
    aligner = BlockAligner(differ)

    if options.mode is CompareMode.TARGET:
        target = highlight_sequence(aligner.align_target(left_segments, right_segments))
        summary = summarize_target(target)
        logger.info("Summary: %s", summary)
        return ComparisonResult(mode=options.mode, summary=summary, right=target)

    alignment = aligner.align_mutual(left_segments, right_segments)
    left = highlight_sequence(alignment.left)
    right = highlight_sequence(alignment.right)
    summary = summarize_mutual(left, right)
    report = build_report(left, right, table_columns=options.table_columns) if options.include_report else None
    logger.info("Summary: %s", summary)
    return ComparisonResult(mode=options.mode, summary=summary, right=right, left=left, report=report)
