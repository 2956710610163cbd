"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.models import Heading
from mdblog.core.parse import load_post
from mdblog.core.pipeline import run_build
from mdblog.core.toc import NO_HEADINGS_MESSAGE
from mdblog.core.view import render_post


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
    return settings


def _echo_tree(headings: list[Heading], depth: int = 0) -> None:
    for h in headings:
        typer.echo(f"{'  ' * depth}- {h.text} (#{h.id})")
        _echo_tree(h.subheadings, depth + 1)


def build_cmd(
    path: Annotated[str, typer.Argument(help="Post file or directory of posts")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Absolute site URL for structured data")] = None,
    ):
    """Render posts to static HTML pages with a table of contents."""
    settings = _settings(overrides={"output_dir": out, "parser_config": parser, "site_url": site_url})
    output_dir = Path(settings.output_dir)

    try:
        results = run_build(path, settings, output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .md/.mdx files found under {path}.")
        raise typer.Exit(1)

    for slug, html_path in results:
        typer.echo(f"  {slug} -> {html_path}")
    typer.echo(f"Built {len(results)} post(s) to {output_dir}/")


def toc_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Post file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the heading tree as JSON")] = False,
    ):
    """Print the table of contents of a single post."""
    settings = _settings()
    try:
        rendered = render_post(load_post(path), settings.parser_config, settings.toc_max_level)
    except ValueError as e:
        _fail(f"Failed to read {path}", e)

    if as_json:
        typer.echo(json.dumps([h.model_dump() for h in rendered.headings], indent=2, ensure_ascii=False))
    elif rendered.headings:
        _echo_tree(rendered.headings)
    else:
        typer.echo(NO_HEADINGS_MESSAGE)
