"""CLI entrypoint: Typer app definition and command registration"""

import typer

from fencelight.cli.commands import filter_cmd


app = typer.Typer(name="fencelight", add_completion=False, help="Pandoc JSON filter that syntax-highlights fenced code blocks")

# A single command, so `pandoc --filter fencelight` can call `fencelight <format>` directly.
app.command(name="filter")(filter_cmd)
