"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import build_cmd, toc_cmd


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog renderer with tables of contents")

app.command(name="build")(build_cmd)
app.command(name="toc")(toc_cmd)
