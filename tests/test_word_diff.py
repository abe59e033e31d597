from __future__ import annotations

import pytest

from docdelta.diff.base import DiffKind, DiffOp
from docdelta.diff.words import WordDiffer, left_text, right_text


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("", ""),
        ("", "added only"),
        ("removed only", ""),
        ("abc", "xyz"),
        ("The quick brown fox", "The quick red fox jumps"),
        ("same", "same"),
    ],
)
def test_diff_rebuilds_both_inputs(left: str, right: str) -> None:
    ops = WordDiffer().diff(left, right)

    assert left_text(ops) == left
    assert right_text(ops) == right


def test_semantic_cleanup_keeps_whole_words() -> None:
    ops = WordDiffer().diff("Hello world", "Hello there")

    assert ops[0] == DiffOp(DiffKind.EQUAL, "Hello ")
    assert DiffOp(DiffKind.DELETE, "world") in ops
    assert DiffOp(DiffKind.INSERT, "there") in ops
    assert len(ops) == 3


def test_disjoint_inputs_are_whole_string_edits() -> None:
    ops = WordDiffer().diff("abc", "xyz")

    assert sorted(op.kind.value for op in ops) == ["delete", "insert"]


def test_identical_inputs_are_single_equal() -> None:
    assert WordDiffer().diff("same", "same") == [DiffOp(DiffKind.EQUAL, "same")]
    assert WordDiffer().diff("", "") == []


def test_render_inline_marks_each_side() -> None:
    ops = [
        DiffOp(DiffKind.EQUAL, "Hello "),
        DiffOp(DiffKind.DELETE, "world"),
        DiffOp(DiffKind.INSERT, "there"),
    ]
    inline = WordDiffer().render_inline(ops)

    assert inline.left == (
        'Hello <span class="inline-removed">world</span>'
        '<span class="inline-placeholder">[added: there]</span>'
    )
    assert inline.right == (
        'Hello <span class="inline-placeholder">[removed: world]</span>'
        '<span class="inline-added">there</span>'
    )


def test_render_inline_escapes_text_and_truncates_previews() -> None:
    ops = [DiffOp(DiffKind.EQUAL, "a<b & c"), DiffOp(DiffKind.INSERT, "<script>alert(1)</script>")]
    inline = WordDiffer(preview_chars=8).render_inline(ops)

    assert inline.left.startswith("a&lt;b &amp; c")
    assert "[added: &lt;script&gt;...]" in inline.left
    assert '<span class="inline-added">&lt;script&gt;alert(1)&lt;/script&gt;</span>' in inline.right
    assert "<script>" not in inline.right
