"""Markdown-to-HTML conversion with slug ids on heading elements"""

from markdown_it import MarkdownIt

from mdblog.core.utils.slug import heading_slug
from mdblog.core.utils.tokens import inline_text


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance whose heading_open rule writes an id attribute."""
    md = MarkdownIt(preset, options_update={"linkify": False})
    default_render_token = md.renderer.renderToken

    def heading_open(tokens, idx, options, env):
        token = tokens[idx]
        inline = tokens[idx + 1] if idx + 1 < len(tokens) else None
        if inline is not None and inline.type == 'inline':
            token.attrSet("id", heading_slug(inline_text(inline)))
        return default_render_token(tokens, idx, options, env)

    md.renderer.rules["heading_open"] = heading_open
    return md


def render_tokens(md: MarkdownIt, tokens: list) -> str:
    """Render an already parsed token stream to HTML."""
    return md.renderer.render(tokens, md.options, {})


def render_markdown(source: str, preset: str = 'gfm-like') -> str:
    """Convert Markdown source to HTML; headings carry slug ids."""
    return make_parser(preset).render(source)
