"""docdelta: block- and word-level comparison of HTML documents."""

from .compare import ComparisonResult, compare_documents, compare_documents_async
from .config import CompareMode, CompareOptions
from .errors import ComparisonFailure, DocDeltaError, ParseFailure
from .renderer.highlight import render_markup

__all__ = [
    "ComparisonResult",
    "compare_documents",
    "compare_documents_async",
    "CompareMode",
    "CompareOptions",
    "ComparisonFailure",
    "DocDeltaError",
    "ParseFailure",
    "render_markup",
]
