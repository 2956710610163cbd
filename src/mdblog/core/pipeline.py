"""Pipeline step functions: load, render, and export orchestration"""

import logging
from pathlib import Path

from mdblog.config import Settings
from mdblog.core.export import write_index, write_post
from mdblog.core.parse import discover_files, load_post
from mdblog.core.view import render_post
from mdblog.core.models import RenderedPost


log = logging.getLogger(__name__)


def run_render(path: str, settings: Settings) -> list[RenderedPost]:
    """Load and render every post under path. Per-file failures raise RuntimeError."""
    results = []
    for p in discover_files(Path(path)):
        try:
            rendered = render_post(load_post(p), settings.parser_config, settings.toc_max_level)
        except Exception as e:
            raise RuntimeError(f"Failed to build {p}: {e}") from e
        rendered.path = p
        results.append(rendered)
    log.info("Rendered %d post(s) from %s", len(results), path)
    return results


def run_build(path: str, settings: Settings, output_dir: Path) -> list[tuple[str, Path]]:
    """Render posts under path and write pages, sidecars, and the blog index.

    Returns (slug, html_path) pairs; the index is written only when posts exist.
    """
    rendered = run_render(path, settings)
    results = []
    for r in rendered:
        html_path, _ = write_post(r, output_dir, settings)
        results.append((r.post.slug, html_path))
    if rendered:
        write_index([r.post for r in rendered], output_dir, settings)
    return results
