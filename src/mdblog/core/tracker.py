"""Active-section tracking over heading anchors in a viewport"""

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from mdblog.core.extract.headings import iter_headings
from mdblog.core.models import Heading
from mdblog.core.toc import TocState


log = logging.getLogger(__name__)

DEFAULT_ROOT_MARGIN = "-20% 0px -80% 0px"
DEFAULT_THRESHOLD = 0.1


class Viewport(Protocol):
    """Rendering environment that exposes heading anchors by id."""

    def has_anchor(self, anchor_id: str) -> bool: ...

    def scroll_into_view(self, anchor_id: str, *, smooth: bool = True, block: str = "start") -> None: ...


@dataclass(frozen=True)
class IntersectionEntry:
    """One visibility change reported for an observed anchor."""
    target_id: str
    is_intersecting: bool


class ActiveSectionTracker:
    """Marks the heading whose anchor enters the trigger band as active.

    The trigger band is set by ``root_margin`` (default: the top 20% of the
    viewport). Watches are released by ``disconnect()``, on context exit, or
    when ``observe()`` is called with a new heading set.
    """

    def __init__(
        self,
        viewport: Viewport,
        state: TocState,
        root_margin: str = DEFAULT_ROOT_MARGIN,
        threshold: float = DEFAULT_THRESHOLD,
        ):
        self.viewport = viewport
        self.state = state
        self.root_margin = root_margin
        self.threshold = threshold
        self._watched: set[str] = set()

    @property
    def watched(self) -> frozenset[str]:
        return frozenset(self._watched)

    def observe(self, headings: list[Heading]) -> int:
        """Watch every heading anchor present in the viewport. Returns the watch count."""
        self.disconnect()
        for heading in iter_headings(headings):
            if self.viewport.has_anchor(heading.id):
                self._watched.add(heading.id)
        log.debug("Observing %d heading anchor(s)", len(self._watched))
        return len(self._watched)

    def handle(self, entries: Iterable[IntersectionEntry]) -> str:
        """Apply a batch of intersection entries; the last intersecting one wins."""
        for entry in entries:
            if entry.is_intersecting and entry.target_id in self._watched:
                self.state.active = entry.target_id
        return self.state.active

    def scroll_to(self, heading_id: str) -> None:
        """Scroll the anchor to the viewport top and mark it active without waiting for observation."""
        if self.viewport.has_anchor(heading_id):
            self.viewport.scroll_into_view(heading_id, smooth=True, block="start")
        self.state.active = heading_id

    def disconnect(self) -> None:
        self._watched.clear()

    def __enter__(self) -> "ActiveSectionTracker":
        return self

    def __exit__(self, *exc) -> None:
        self.disconnect()
