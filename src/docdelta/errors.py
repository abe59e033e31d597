"""Error types raised by the comparison core."""

from __future__ import annotations


class DocDeltaError(Exception):
    """Base class for docdelta failures."""


class ParseFailure(DocDeltaError, ValueError):
    """Input markup could not be turned into a content tree."""


class ComparisonFailure(DocDeltaError, RuntimeError):
    """A comparison run aborted; the underlying error is kept as ``__cause__``."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Failed to compare documents: {cause}")
        self.cause = cause
