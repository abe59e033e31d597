from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from docdelta.cli import main


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_cli_writes_html_and_json(tmp_path: Path) -> None:
    left = _write(tmp_path, "old.html", "<h1>Doc</h1><p>Hello world</p>")
    right = _write(tmp_path, "new.html", "<h1>Doc</h1><p>Hello there</p><p>New line</p>")
    out = tmp_path / "out" / "diff.html"
    report = tmp_path / "diff.json"

    result = CliRunner().invoke(main, [str(left), str(right), "-o", str(out), "--json", str(report)])

    assert result.exit_code == 0, result.output
    assert "Rendered:" in result.output
    assert "1 added, 0 removed, 1 modified" in result.output
    assert "line-modified" in out.read_text(encoding="utf-8")

    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["mode"] == "mutual"
    assert payload["summary"] == {"additions": 1, "deletions": 0, "modifications": 1, "changes": 2}
    assert [line["status"] for line in payload["report"]["lines"]] == ["UNCHANGED", "MODIFIED", "ADDED"]


def test_cli_target_mode_without_report(tmp_path: Path) -> None:
    left = _write(tmp_path, "old.html", "<p>A</p><p>B</p>")
    right = _write(tmp_path, "new.htm", "<p>B</p>")
    out = tmp_path / "diff.html"
    report = tmp_path / "diff.json"

    result = CliRunner().invoke(
        main,
        [str(left), str(right), "-o", str(out), "--mode", "target", "--no-report", "--json", str(report)],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(report.read_text(encoding="utf-8"))
    assert payload["mode"] == "target"
    assert payload["report"] is None
    assert "Detailed report" not in out.read_text(encoding="utf-8")


def test_cli_reads_options_from_environment(tmp_path: Path) -> None:
    left = _write(tmp_path, "old.html", "<p>A</p>")
    right = _write(tmp_path, "new.html", "<p>A</p><p>B</p>")
    out = tmp_path / "diff.html"
    report = tmp_path / "diff.json"

    result = CliRunner().invoke(
        main,
        [str(left), str(right), "-o", str(out), "--json", str(report)],
        env={"DOCDELTA_MODE": "target"},
    )

    assert result.exit_code == 0, result.output
    assert json.loads(report.read_text(encoding="utf-8"))["mode"] == "target"


def test_cli_rejects_non_html_input(tmp_path: Path) -> None:
    left = _write(tmp_path, "old.docx", "binary")
    right = _write(tmp_path, "new.html", "<p>x</p>")

    result = CliRunner().invoke(main, [str(left), str(right), "-o", str(tmp_path / "out.html")])

    assert result.exit_code == 1
    assert "Unsupported input type: old.docx" in result.output


def test_cli_writes_debug_log_file(tmp_path: Path) -> None:
    left = _write(tmp_path, "old.html", "<p>A</p>")
    right = _write(tmp_path, "new.html", "<p>A</p><p>B</p>")
    log_file = tmp_path / "logs" / "docdelta.log"

    result = CliRunner().invoke(
        main,
        [str(left), str(right), "-o", str(tmp_path / "diff.html"), "--verbose", "--log-file", str(log_file)],
    )

    assert result.exit_code == 0, result.output
    logged = log_file.read_text(encoding="utf-8")
    assert "Left document: 1 segments" in logged
    assert "Right document: 2 segments" in logged
    assert "| INFO | docdelta.compare |" in logged
