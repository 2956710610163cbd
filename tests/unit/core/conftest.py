"""Shared fixtures for core unit tests"""

import pytest

from mdblog.core.render import make_parser


SAMPLE_MD = """\
# Getting Started

Intro paragraph with **bold** text.

## Install

```bash
pip install mdblog
```

### From source

Clone it.

## Usage

- item one
- item two

# Reference

#### Too deep for the TOC
"""


class FakeViewport:
    """Viewport stand-in: a fixed set of anchors and a log of scroll calls."""

    def __init__(self, anchors=()):
        self.anchors = set(anchors)
        self.scrolled: list[tuple[str, bool, str]] = []

    def has_anchor(self, anchor_id: str) -> bool:
        return anchor_id in self.anchors

    def scroll_into_view(self, anchor_id: str, *, smooth: bool = True, block: str = "start") -> None:
        self.scrolled.append((anchor_id, smooth, block))


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)


@pytest.fixture(name="make_viewport")
def make_viewport_fixture():
    return FakeViewport


@pytest.fixture(name="viewport")
def viewport_fixture():
    return FakeViewport({"getting-started", "install", "from-source", "usage", "reference"})
