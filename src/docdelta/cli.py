"""docdelta CLI entrypoint."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from docdelta.compare import compare_documents
from docdelta.config import CompareMode, CompareOptions
from docdelta.errors import DocDeltaError
from docdelta.logconfig import configure_logging
from docdelta.renderer.html_renderer import HTMLRenderer

_HTML_EXTENSIONS = (".html", ".htm", ".xhtml")


@click.command(context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "DOCDELTA"})
@click.argument("left_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("right_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in CompareMode], case_sensitive=False),
    default=CompareMode.MUTUAL.value,
    show_default=True,
    help="mutual: both documents side by side; target: only the second document",
)
@click.option("--title", type=str, default=None, help="Page title")
@click.option("--report/--no-report", default=True, show_default=True, help="Include the detailed report")
@click.option("--json", "json_path", type=click.Path(path_type=Path), default=None, help="Also write summary and report as JSON")
@click.option("--table-columns", type=click.IntRange(min=1), default=3, show_default=True, help="Columns assumed for table cells")
@click.option("--diff-timeout", type=click.FloatRange(min=0), default=1.0, show_default=True, help="Word diff time limit in seconds (0 = none)")
@click.option("--no-media", is_flag=True, help="Do not collect horizontal rules as media segments")
@click.option("--dark-mode", is_flag=True, help="Enable dark mode stylesheet")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Also write logs to this file")
def main(
    left_path: Path,
    right_path: Path,
    output: Path,
    mode: str,
    title: str | None,
    report: bool,
    json_path: Path | None,
    table_columns: int,
    diff_timeout: float,
    no_media: bool,
    dark_mode: bool,
    verbose: bool,
    log_file: Path | None,
) -> None:
    """Compare two HTML documents and write a highlighted HTML page."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file)

    left_html = _read_html(left_path)
    right_html = _read_html(right_path)

    options = CompareOptions(
        mode=CompareMode(mode.lower()),
        collect_media=not no_media,
        diff_timeout=diff_timeout,
        table_columns=table_columns,
        include_report=report,
    )

    try:
        result = compare_documents(left_html, right_html, options)
    except DocDeltaError as exc:
        raise click.ClickException(str(exc)) from exc

    html = HTMLRenderer().render(
        result,
        title=title,
        left_title=left_path.name,
        right_title=right_path.name,
        dark_mode=dark_mode,
        show_report=report,
    )

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    if json_path is not None:
        payload = {
            "mode": result.mode.value,
            "summary": result.summary.to_dict(),
            "report": result.report.to_dict() if result.report is not None else None,
        }
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    summary = result.summary
    click.echo(
        f"Rendered: {output} ({summary.additions} added, {summary.deletions} removed, "
        f"{summary.modifications} modified)"
    )


def _read_html(input_path: Path) -> str:
    if not input_path.name.lower().endswith(_HTML_EXTENSIONS):
        raise click.ClickException(
            f"Unsupported input type: {input_path.name} (expected .html or .htm; convert other formats first)"
        )
    return input_path.read_text(encoding="utf-8", errors="ignore")


if __name__ == "__main__":  # pragma: no cover
    main()
