from docdelta.compare import compare_documents
from docdelta.config import CompareOptions
from docdelta.renderer.html_renderer import HTMLRenderer


def test_renderer_generates_columns_summary_and_report() -> None:
    result = compare_documents(
        '<h1>Plan</h1><p>Ship in May.</p><table><tr><td>Owner</td></tr></table>',
        '<h1>Plan</h1><p>Ship in June.</p><p>Extra note</p><table><tr><td>Team</td></tr></table>',
    )

    html = HTMLRenderer().render(result, title="Plan diff", left_title="v1.html", right_title="v2.html")

    assert "<title>Plan diff</title>" in html
    assert 'class="docdelta-light-mode"' in html
    assert 'class="docdelta-grid"' in html
    assert "v1.html" in html and "v2.html" in html
    assert '<p class="line-modified">' in html
    assert '<p class="line-added">Extra note</p>' in html
    assert "line-placeholder placeholder-added" in html
    assert "Detailed report" in html
    assert "Table changes" in html
    assert 'class="inline-added"' in html


def test_renderer_target_mode_and_dark_mode() -> None:
    result = compare_documents("<p>A</p>", "<p>A</p><p>B</p>", CompareOptions(mode="target"))

    html = HTMLRenderer().render(result, dark_mode=True)

    assert 'class="docdelta-dark-mode"' in html
    assert "docdelta-target" in html
    assert 'class="docdelta-grid"' not in html
    assert "Detailed report" not in html
    assert '<p class="line-added">B</p>' in html


def test_renderer_escapes_titles_and_can_hide_report() -> None:
    result = compare_documents("<p>A</p>", "<p>B</p>")

    html = HTMLRenderer().render(result, title="<script>x</script>", show_report=False)

    assert "<title>&lt;script&gt;x&lt;/script&gt;</title>" in html
    assert "Detailed report" not in html
