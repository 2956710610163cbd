"""Post discovery, frontmatter extraction, and Post loading"""

import re
from pathlib import Path
from typing import Any

import yaml

from mdblog.core.models import Post, PostMetadata
from mdblog.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_post(text: str, default_slug: str) -> Post:
    """Build a Post from raw file text; frontmatter supplies metadata and optional slug."""
    frontmatter, body = _strip_frontmatter(text)
    slug = str(frontmatter.get('slug') or default_slug)
    return Post(
        slug=slug,
        metadata=PostMetadata.model_validate(frontmatter),
        source=body if body.strip() else None,
    )


def load_post(path: Path) -> Post:
    """Read a single markdown file into a Post."""
    raw = path.read_text(encoding='utf-8')
    return parse_post(raw, slugify(path.stem))
