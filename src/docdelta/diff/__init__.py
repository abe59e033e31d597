"""Block alignment, word diffs and change reports."""

from .aligner import Alignment, BlockAligner
from .base import AnnotatedSegment, ChangeType, DiffKind, DiffOp, Operation
from .report import ComparisonReport, Summary, build_report, summarize_mutual, summarize_target
from .words import InlineDiff, WordDiffer

__all__ = [
    "Alignment",
    "BlockAligner",
    "AnnotatedSegment",
    "ChangeType",
    "DiffKind",
    "DiffOp",
    "Operation",
    "ComparisonReport",
    "Summary",
    "build_report",
    "summarize_mutual",
    "summarize_target",
    "InlineDiff",
    "WordDiffer",
]
