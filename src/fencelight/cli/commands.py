"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from fencelight.config import Settings, load_config
from fencelight.core.codec import MalformedInputError
from fencelight.core.highlight import GrammarRegistry
from fencelight.core.pipeline import run_filter
from fencelight.util.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _registry(settings: Settings) -> GrammarRegistry:
    try:
        return GrammarRegistry.from_names(settings.languages, settings.aliases)
    except ValueError as e:
        _fail(str(e))


def filter_cmd(
    fmt: Annotated[str, typer.Argument(metavar="FORMAT", help="Output format passed in by pandoc")] = "",
    languages: Annotated[Optional[str], typer.Option("--languages", help="Comma-separated language ids to register")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Diagnostics level (stderr)")] = None,
    list_languages: Annotated[bool, typer.Option("--list-languages", help="Print registered language ids and exit")] = False,
    ):
    """Highlight fenced code blocks in a pandoc JSON AST read from stdin."""
    settings = _settings(overrides={"languages": languages, "log_level": log_level})
    configure_logging(settings.log_level)
    registry = _registry(settings)

    if list_languages:
        for lang in registry.languages:
            typer.echo(lang)
        return

    raw = typer.get_binary_stream("stdin").read()
    try:
        output = run_filter(raw, fmt, registry)
    except MalformedInputError as e:
        _fail("Malformed input", e)

    stdout = typer.get_binary_stream("stdout")
    stdout.write(output)
    stdout.flush()
