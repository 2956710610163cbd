"""Post rendering context: owns rendered HTML, heading tree, TOC state and tracking"""

import logging
from typing import Optional

from mdblog.core.extract.headings import extract_headings
from mdblog.core.models import Heading, Post, RenderedPost
from mdblog.core.render import make_parser, render_tokens
from mdblog.core.toc import TocState, render_toc
from mdblog.core.tracker import DEFAULT_ROOT_MARGIN, DEFAULT_THRESHOLD, ActiveSectionTracker, Viewport


log = logging.getLogger(__name__)


def render_post(post: Post, parser_config: str = 'gfm-like', max_level: int = 3) -> RenderedPost:
    """Convert the post source to HTML and extract its heading forest.

    A missing source is logged and yields empty HTML with no headings.
    """
    if not post.source:
        log.warning("Post source is undefined: %s", post.slug)
        return RenderedPost(post=post, html="", headings=[])

    md = make_parser(parser_config)
    tokens = md.parse(post.source)
    return RenderedPost(
        post=post,
        html=render_tokens(md, tokens),
        headings=extract_headings(tokens, max_level),
    )


class PostView:
    """One mounted post: recomputes on source change, releases watches on unmount."""

    def __init__(
        self,
        post: Post,
        viewport: Optional[Viewport] = None,
        parser_config: str = 'gfm-like',
        max_level: int = 3,
        root_margin: str = DEFAULT_ROOT_MARGIN,
        threshold: float = DEFAULT_THRESHOLD,
        ):
        self.post = post
        self.viewport = viewport
        self.parser_config = parser_config
        self.max_level = max_level
        self.state = TocState()
        self.tracker = (
            ActiveSectionTracker(viewport, self.state, root_margin, threshold)
            if viewport is not None else None
        )
        self.rendered: Optional[RenderedPost] = None

    @property
    def html(self) -> str:
        return self.rendered.html if self.rendered else ""

    @property
    def headings(self) -> list[Heading]:
        return self.rendered.headings if self.rendered else []

    def mount(self) -> RenderedPost:
        """Render the current source, reset TOC state, and start observing anchors."""
        self.rendered = render_post(self.post, self.parser_config, self.max_level)
        self.state.reset()
        if self.tracker is not None:
            self.tracker.observe(self.rendered.headings)
        return self.rendered

    def set_source(self, source: Optional[str]) -> RenderedPost:
        """Replace the post source; the heading set changes so the view remounts."""
        self.post = self.post.model_copy(update={"source": source})
        return self.mount()

    def unmount(self) -> None:
        if self.tracker is not None:
            self.tracker.disconnect()

    def toggle(self, heading_id: str) -> bool:
        return self.state.toggle(heading_id)

    def scroll_to(self, heading_id: str) -> None:
        """Scroll to a heading; active is set immediately even without a viewport."""
        if self.tracker is not None:
            self.tracker.scroll_to(heading_id)
        else:
            self.state.active = heading_id

    def toc_html(self) -> str:
        return render_toc(self.headings, self.state)

    def __enter__(self) -> "PostView":
        self.mount()
        return self

    def __exit__(self, *exc) -> None:
        self.unmount()
