"""Inject change classes into segment markup."""

from __future__ import annotations

import html
from dataclasses import replace

from bs4 import BeautifulSoup, NavigableString, Tag

from docdelta.diff.base import AnnotatedSegment, Operation

PARSER = "html.parser"

LINE_CLASSES = {
    Operation.ADDED: "line-added",
    Operation.REMOVED: "line-removed",
    Operation.MODIFIED: "line-modified",
}

_PLACEHOLDER_LABELS = {
    Operation.ADDED: "+ Content added in modified document",
    Operation.REMOVED: "- Content removed from original document",
}


def highlight(segment: AnnotatedSegment) -> str:
    """Return the display markup for one annotated segment."""
    operation = segment.operation

    if operation is Operation.PLACEHOLDER:
        return render_placeholder(segment.placeholder_for or Operation.ADDED)

    if operation is Operation.UNCHANGED:
        return segment.markup

    if operation is Operation.MODIFIED:
        return render_modified(segment.markup, segment.text, segment.word_diff or "")

    return add_class(segment.markup, LINE_CLASSES[operation])


def highlight_sequence(sequence: list[AnnotatedSegment]) -> list[AnnotatedSegment]:
    """Return copies of ``sequence`` with ``highlighted_markup`` filled in."""
    return [replace(seg, highlighted_markup=highlight(seg)) for seg in sequence]


def render_markup(sequence: list[AnnotatedSegment]) -> str:
    """Join the highlighted fragments of a sequence in order."""
    if not sequence:
        return ""
    return "\n".join(seg.highlighted_markup or highlight(seg) for seg in sequence)


def render_placeholder(placeholder_for: Operation) -> str:
    side = "added" if placeholder_for is Operation.ADDED else "removed"
    label = html.escape(_PLACEHOLDER_LABELS[placeholder_for])
    return (
        f'<div class="line-placeholder placeholder-{side}">'
        f'<span class="placeholder-label">{label}</span>'
        "</div>"
    )


def add_class(markup: str, css_class: str) -> str:
    """Add ``css_class`` to the outermost element of ``markup``.

    Markup without any element (plain text) is wrapped in a div carrying the class.
    """
    soup = BeautifulSoup(markup, PARSER)
    element = soup.find(True)
    if not isinstance(element, Tag):
        return f'<div class="{css_class}">{markup}</div>'

    _add_class_to(element, css_class)
    return str(soup)


def render_modified(markup: str, text: str, word_diff: str, css_class: str = LINE_CLASSES[Operation.MODIFIED]) -> str:
    """Swap the segment text for its word diff inside the parsed tree, then add ``css_class``.

    The text node holding ``text`` is replaced in place so child tags and
    attributes survive. When the text is split over several inline children,
    the outer element's content is replaced by the diff as a whole.
    """
    soup = BeautifulSoup(markup, PARSER)
    element = soup.find(True)
    if not isinstance(element, Tag):
        return f'<div class="{css_class}">{word_diff or html.escape(markup, quote=False)}</div>'

    if text and word_diff:
        fragment = list(BeautifulSoup(word_diff, PARSER).contents)
        node = _find_text_node(element, text)
        if node is not None:
            value = str(node)
            start = value.find(text)
            before, after = value[:start], value[start + len(text):]
            replacement = [NavigableString(before)] if before else []
            replacement.extend(fragment)
            if after:
                replacement.append(NavigableString(after))
            node.replace_with(*replacement)
        else:
            element.clear()
            for child in fragment:
                element.append(child)

    _add_class_to(element, css_class)
    return str(soup)


def _find_text_node(element: Tag, text: str) -> NavigableString | None:
    for node in element.find_all(string=True):
        # Comments, CDATA and doctypes are NavigableString subclasses.
        if type(node) is NavigableString and text in node:
            return node
    return None


def _add_class_to(element: Tag, css_class: str) -> None:
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    if css_class not in classes:
        element["class"] = [*classes, css_class]
