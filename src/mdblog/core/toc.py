"""Table of contents: expand/collapse state and nested list rendering"""

from dataclasses import dataclass, field
from html import escape

from mdblog.core.models import Heading


NO_HEADINGS_MESSAGE = "No headings found in this post."


@dataclass
class TocState:
    """Per-mount TOC state: expanded heading ids and the active heading id."""
    expanded: set[str] = field(default_factory=set)
    active:   str = ""

    def toggle(self, heading_id: str) -> bool:
        """Flip heading_id in the expanded set. Returns the new expanded flag."""
        if heading_id in self.expanded:
            self.expanded.discard(heading_id)
            return False
        self.expanded.add(heading_id)
        return True

    def is_expanded(self, heading_id: str) -> bool:
        return heading_id in self.expanded

    def is_active(self, heading_id: str) -> bool:
        return bool(self.active) and self.active == heading_id

    def reset(self) -> None:
        self.expanded.clear()
        self.active = ""


def _render_item(heading: Heading, state: TocState, depth: int) -> str:
    parts = ['<li><div class="toc-row">']
    hid = escape(heading.id, quote=True)
    if heading.subheadings:
        expanded = state.is_expanded(heading.id)
        label = "Collapse section" if expanded else "Expand section"
        icon = "&#9652;" if expanded else "&#9662;"
        parts.append(
            f'<button type="button" class="toc-toggle" data-toggle="{hid}" '
            f'aria-label="{label}" aria-expanded="{str(expanded).lower()}">{icon}</button>'
        )
    css = "toc-link active" if state.is_active(heading.id) else "toc-link"
    parts.append(
        f'<button type="button" class="{css}" data-target="{hid}">{escape(heading.text)}</button>'
    )
    parts.append('</div>')
    if heading.subheadings and state.is_expanded(heading.id):
        parts.append(_render_list(heading.subheadings, state, depth + 1))
    parts.append('</li>')
    return ''.join(parts)


def _render_list(headings: list[Heading], state: TocState, depth: int) -> str:
    css = "toc-list nested" if depth > 0 else "toc-list"
    items = ''.join(_render_item(h, state, depth) for h in headings)
    return f'<ul class="{css}">{items}</ul>'


def render_toc(headings: list[Heading], state: TocState = None) -> str:
    """Render the heading forest as a collapsible nested list.

    Children appear only under expanded headings; the active heading's label
    gets the ``active`` class. An empty forest renders the fallback notice.
    """
    state = state or TocState()
    if not headings:
        return f'<p class="toc-empty">{NO_HEADINGS_MESSAGE}</p>'
    return _render_list(headings, state, 0)
