"""Unit tests for core/render.py"""

from mdblog.core.render import make_parser, render_markdown, render_tokens


def test_heading_ids_injected():
    """Each heading element carries a slug id derived from its text."""
    html = render_markdown("# Hello World\n\n## Second, part\n")
    assert '<h1 id="hello-world">Hello World</h1>' in html
    assert '<h2 id="second-part">Second, part</h2>' in html


def test_heading_id_uses_plain_text():
    """Inline markup is dropped from the id but kept in the element."""
    html = render_markdown("## The `code` *part*\n")
    assert '<h2 id="the-code-part">' in html
    assert "<em>part</em>" in html


def test_duplicate_heading_text_repeats_id():
    """Two headings with the same text get the same id."""
    html = render_markdown("# Notes\n\n## Notes\n")
    assert html.count('id="notes"') == 2


def test_non_heading_content_untouched():
    """Paragraphs and code blocks render without id attributes."""
    html = render_markdown("Just text.\n\n```\ncode\n```\n")
    assert "<p>Just text.</p>" in html
    assert "id=" not in html


def test_render_tokens_matches_render(parser):
    """Rendering a parsed token stream equals rendering the source directly."""
    src = "# A\n\ntext\n\n## B\n"
    assert render_tokens(parser, parser.parse(src)) == make_parser().render(src)
