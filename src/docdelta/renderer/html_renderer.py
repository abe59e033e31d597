"""Render a comparison result into a self-contained HTML page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from docdelta.compare import ComparisonResult
from docdelta.config import CompareMode
from docdelta.diff.base import Operation


@dataclass(slots=True)
class RenderedRow:
    left_html: str
    right_html: str
    operation: str


class HTMLRenderer:
    """Render a comparison into the side-by-side template."""

    def __init__(self, template_path: Path | None = None) -> None:
        if template_path is None:
            template_path = Path(__file__).resolve().parent.parent / "template" / "compare.html"

        loader = FileSystemLoader(str(template_path.parent))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)
        self._template_name = template_path.name

    def render(
        self,
        result: ComparisonResult,
        *,
        title: str | None = None,
        left_title: str = "Original",
        right_title: str = "Modified",
        dark_mode: bool = False,
        show_report: bool = True,
    ) -> str:
        page_title = title or "Document comparison"
        mutual = result.mode is CompareMode.MUTUAL and result.left is not None

        if mutual:
            rows = self._render_rows(result)
            target_html = ""
        else:
            rows = []
            target_html = result.render_right()

        report = result.report.to_dict() if show_report and result.report is not None else None

        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=page_title,
            generated=date.today().isoformat(),
            mode=result.mode.value,
            summary=result.summary.to_dict(),
            left_title=left_title,
            right_title=right_title,
            rows=rows,
            target_html=target_html,
            report=report,
            dark_mode=dark_mode,
        )

    def _render_rows(self, result: ComparisonResult) -> list[RenderedRow]:
        rows: list[RenderedRow] = []
        for left_seg, right_seg in zip(result.left or [], result.right):
            operation = right_seg.operation
            if operation is Operation.PLACEHOLDER:
                operation = left_seg.operation
            rows.append(
                RenderedRow(
                    left_html=left_seg.highlighted_markup,
                    right_html=right_seg.highlighted_markup,
                    operation=operation.value,
                )
            )
        return rows
