"""Heading extraction and stack-based tree construction"""

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup

from mdblog.core.models import Heading
from mdblog.core.utils.slug import heading_slug
from mdblog.core.utils.tokens import heading_level, inline_text


log = logging.getLogger(__name__)

TOC_LEVELS = (1, 2, 3)


def build_tree(flat: Iterable[Heading]) -> list[Heading]:
    """Nest headings by level using a stack of open ancestors.

    A heading becomes the child of the nearest preceding heading with a
    strictly smaller level; with no such ancestor it becomes a root.
    Level gaps are allowed (an h3 directly after an h1 nests under it).
    """
    roots: list[Heading] = []
    stack: list[Heading] = []

    for heading in flat:
        while stack and stack[-1].level >= heading.level:
            stack.pop()
        if stack:
            stack[-1].subheadings.append(heading)
        else:
            roots.append(heading)
        stack.append(heading)

    return roots


def extract_headings(tokens: list, max_level: int = 3) -> list[Heading]:
    """Build the heading forest straight from a markdown-it token stream."""
    flat = []
    for i, tok in enumerate(tokens):
        level = heading_level(tok)
        if level not in TOC_LEVELS or level > max_level:
            continue
        inline = tokens[i + 1] if i + 1 < len(tokens) else None
        text = inline_text(inline) if inline is not None and inline.type == 'inline' else ''
        flat.append(Heading(id=heading_slug(text), text=text, level=level))
    return build_tree(flat)


def headings_from_html(html: Optional[str], max_level: int = 3) -> list[Heading]:
    """Build the heading forest from rendered HTML (h1-h3 elements with ids).

    Absent or malformed markup yields an empty or partial forest; parsing
    anomalies never raise.
    """
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    names = [f"h{n}" for n in TOC_LEVELS if n <= max_level]
    flat = [
        Heading(id=tag.get("id") or "", text=tag.get_text(), level=int(tag.name[1]))
        for tag in soup.find_all(names)
    ]
    log.debug("Found %d heading(s) in HTML", len(flat))
    return build_tree(flat)


def iter_headings(headings: list[Heading]) -> Iterable[Heading]:
    """Yield every heading in the forest in document (pre-)order."""
    for heading in headings:
        yield heading
        yield from iter_headings(heading.subheadings)
