"""Unit tests for core/pipeline.py and core/export.py"""

import json

import pytest

from mdblog.config import Settings
from mdblog.core.export import build_sidecar
from mdblog.core.pipeline import run_build, run_render


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    (d / "first.md").write_text(
        "---\ntitle: First\npublishedAt: 2024-01-01\n---\n# One\n## Two\n", encoding="utf-8"
    )
    (d / "second.md").write_text("---\ntitle: Second\n---\n", encoding="utf-8")
    return d


def test_run_render_loads_all(posts_dir):
    rendered = run_render(str(posts_dir), Settings())
    assert [r.post.slug for r in rendered] == ["first", "second"]
    assert rendered[0].path == posts_dir / "first.md"
    assert rendered[0].headings[0].subheadings[0].id == "two"
    assert rendered[1].html == ""


def test_run_render_respects_toc_max_level(posts_dir):
    rendered = run_render(str(posts_dir), Settings(toc_max_level=1))
    assert rendered[0].headings[0].subheadings == []


def test_run_render_wraps_errors(tmp_path):
    """Bad frontmatter surfaces as RuntimeError naming the file."""
    f = tmp_path / "bad.md"
    f.write_text("---\n- not\n- a map\n---\n# X\n")
    with pytest.raises(RuntimeError, match="Failed to build"):
        run_render(str(f), Settings())


def test_build_sidecar(posts_dir):
    data = build_sidecar(run_render(str(posts_dir), Settings())[0])
    assert data["slug"] == "first"
    assert data["metadata"]["publishedAt"] == "2024-01-01"
    assert data["has_content"] is True
    assert data["headings"][0]["text"] == "One"


def test_run_build_writes_outputs(posts_dir, tmp_path):
    out = tmp_path / "dist"
    results = run_build(str(posts_dir), Settings(), out)
    assert [slug for slug, _ in results] == ["first", "second"]
    assert (out / "blog" / "first" / "index.html").exists()
    assert (out / "blog" / "second" / "index.html").exists()
    assert (out / "blog" / "index.html").exists()
    sidecar = json.loads((out / "blog" / "second.json").read_text(encoding="utf-8"))
    assert sidecar["has_content"] is False
    assert sidecar["headings"] == []


def test_run_build_empty_dir(tmp_path):
    out = tmp_path / "dist"
    assert run_build(str(tmp_path), Settings(), out) == []
    assert not (out / "blog" / "index.html").exists()


def test_run_render_numeric_title(tmp_path):
    """A numeric title does not abort the build."""
    f = tmp_path / "orwell.md"
    f.write_text("---\ntitle: 1984\n---\n# Big Brother\n")
    rendered = run_render(str(f), Settings())
    assert rendered[0].post.metadata.title == "1984"
