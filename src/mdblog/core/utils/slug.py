"""Slug generation for post identifiers and heading anchors"""

import re


_NON_WORD_RE = re.compile(r'[^\w]+', re.ASCII)


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def heading_slug(text: str) -> str:
    """Lowercase text and collapse each run of non-word characters into one hyphen.

    Leading/trailing hyphens are kept and repeated text yields repeated ids;
    callers must not assume anchors are unique within a post.
    """
    return _NON_WORD_RE.sub('-', text.lower())
