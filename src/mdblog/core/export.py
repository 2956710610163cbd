"""Export: sidecar JSON and output files for rendered posts"""

import json
from pathlib import Path

from mdblog.config import Settings
from mdblog.core.models import Post, RenderedPost
from mdblog.core.page import BLOG_PATH, render_index, render_page


def build_sidecar(rendered: RenderedPost) -> dict:
    """Build the sidecar JSON dict: slug, source path, metadata, and heading tree."""
    post = rendered.post
    return {
        "slug": post.slug,
        "path": str(rendered.path) if rendered.path else None,
        "metadata": post.metadata.model_dump(by_alias=True),
        "has_content": bool(rendered.html),
        "headings": [h.model_dump() for h in rendered.headings],
    }


def write_post(rendered: RenderedPost, output_dir: Path, settings: Settings) -> tuple[Path, Path]:
    """Write HTML page + sidecar JSON for a single post.

    Layout: output_dir/blog/<slug>/index.html and output_dir/blog/<slug>.json.
    Returns (html_path, json_path).
    """
    blog_dir = output_dir / BLOG_PATH.strip('/')
    page_dir = blog_dir / rendered.post.slug
    page_dir.mkdir(parents=True, exist_ok=True)

    html_path = page_dir / "index.html"
    json_path = blog_dir / f"{rendered.post.slug}.json"
    html_path.write_text(render_page(rendered, settings), encoding='utf-8')
    json_path.write_text(json.dumps(build_sidecar(rendered), indent=2, ensure_ascii=False), encoding='utf-8')
    return html_path, json_path


def write_index(posts: list[Post], output_dir: Path, settings: Settings) -> Path:
    """Write the blog list page to output_dir/blog/index.html."""
    blog_dir = output_dir / BLOG_PATH.strip('/')
    blog_dir.mkdir(parents=True, exist_ok=True)
    index_path = blog_dir / "index.html"
    index_path.write_text(render_index(posts, settings), encoding='utf-8')
    return index_path
