"""Word-level diff between two strings, built on diff-match-patch."""

from __future__ import annotations

import html
from dataclasses import dataclass

from diff_match_patch import diff_match_patch

from .base import DiffKind, DiffOp

_KIND_BY_DMP = {
    diff_match_patch.DIFF_EQUAL: DiffKind.EQUAL,
    diff_match_patch.DIFF_INSERT: DiffKind.INSERT,
    diff_match_patch.DIFF_DELETE: DiffKind.DELETE,
}


@dataclass(frozen=True, slots=True)
class InlineDiff:
    left: str
    right: str


class WordDiffer:
    """Character diff with semantic cleanup, plus inline markup for both sides."""

    def __init__(self, timeout: float = 1.0, edit_cost: int = 4, preview_chars: int = 20) -> None:
        self._dmp = diff_match_patch()
        self._dmp.Diff_Timeout = timeout
        self._dmp.Diff_EditCost = edit_cost
        self.preview_chars = preview_chars

    def diff(self, left: str, right: str) -> list[DiffOp]:
        diffs = self._dmp.diff_main(left or "", right or "")
        # Merge tiny fragmented edits into readable runs.
        self._dmp.diff_cleanupSemantic(diffs)
        return [DiffOp(_KIND_BY_DMP[op], text) for op, text in diffs]

    def render_inline(self, ops: list[DiffOp] | tuple[DiffOp, ...]) -> InlineDiff:
        left_parts: list[str] = []
        right_parts: list[str] = []

        for op in ops:
            escaped = html.escape(op.text, quote=False)
            if op.kind is DiffKind.EQUAL:
                left_parts.append(escaped)
                right_parts.append(escaped)
            elif op.kind is DiffKind.DELETE:
                left_parts.append(f'<span class="inline-removed">{escaped}</span>')
                right_parts.append(self._stand_in("removed", op.text))
            else:
                left_parts.append(self._stand_in("added", op.text))
                right_parts.append(f'<span class="inline-added">{escaped}</span>')

        return InlineDiff(left="".join(left_parts), right="".join(right_parts))

    def _stand_in(self, label: str, text: str) -> str:
        preview = text[: self.preview_chars]
        if len(text) > self.preview_chars:
            preview += "..."
        return f'<span class="inline-placeholder">[{label}: {html.escape(preview, quote=False)}]</span>'


def left_text(ops: list[DiffOp] | tuple[DiffOp, ...]) -> str:
    """Rebuild the left input from a diff."""
    return "".join(op.text for op in ops if op.kind is not DiffKind.INSERT)


def right_text(ops: list[DiffOp] | tuple[DiffOp, ...]) -> str:
    """Rebuild the right input from a diff."""
    return "".join(op.text for op in ops if op.kind is not DiffKind.DELETE)
