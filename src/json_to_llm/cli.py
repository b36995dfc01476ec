"""CLI for json-to-llm - render JSON documents as LLM-friendly text."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="json-to-llm",
    help="Render JSON documents as compact, indentation-structured text for language models.",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from json_to_llm import __version__

        typer.echo(f"json-to-llm v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Render JSON documents as LLM-friendly text."""


@app.command()
def info() -> None:
    """Show the default formatting configuration."""
    from json_to_llm import __version__
    from json_to_llm.settings import settings

    console.print(f"[bold]json-to-llm[/bold] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Ignore Falsy: {settings.ignore_falsy}")
    console.print(f"  Max Depth: {settings.max_depth}")
    console.print(f"  Sort Keys: {settings.sort_keys}")
    console.print(f"  Max Chars: {settings.max_chars or 'unbounded'}")
    console.print(f"  Log Level: {settings.log_level}")
    console.print(f"  JSON Logs: {settings.json_logs}")


def _print_stats(comparison: dict[str, Any]) -> None:
    table = Table(title="Size comparison")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("JSON chars", str(comparison["json_size"]))
    table.add_row("LLM text chars", str(comparison["llm_size"]))
    table.add_row("Saved chars", str(comparison["savings_bytes"]))
    table.add_row("Savings", f"{comparison['savings_percent']}%")
    table.add_row("Recommendation", comparison["recommendation"])
    error_console.print(table)


@app.command()
def convert(
    path: Annotated[
        Path | None,
        typer.Argument(help="JSON file to convert. Reads stdin when omitted or '-'."),
    ] = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-d", help="Nesting depth before the max-depth marker"),
    ] = None,
    sort_keys: Annotated[
        str | None,
        typer.Option("--sort-keys", "-s", help="Object key order: none or asc"),
    ] = None,
    max_chars: Annotated[
        int | None,
        typer.Option("--max-chars", "-c", help="Truncate output to this many characters"),
    ] = None,
    keep_null: Annotated[
        bool,
        typer.Option("--keep-null", help="Render null properties and array items"),
    ] = False,
    stats: Annotated[
        bool,
        typer.Option("--stats", help="Print a JSON vs LLM text size comparison to stderr"),
    ] = False,
) -> None:
    """Convert a JSON document to LLM text."""
    from json_to_llm.formatter import get_size_comparison, json_to_llm_string
    from json_to_llm.logging import bind_context, clear_context, configure_logging, get_logger
    from json_to_llm.models import FormatConfig
    from json_to_llm.settings import settings

    configure_logging(json_output=settings.json_logs, log_level=settings.log_level)
    logger = get_logger(__name__)

    source = "-" if path is None or str(path) == "-" else str(path)
    bind_context(source=source)
    try:
        try:
            raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Failed to read input", error=str(e))
            error_console.print(f"Cannot read {source}: {e}", style="red", markup=False)
            raise typer.Exit(1) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON input", error=str(e))
            error_console.print(f"Invalid JSON in {source}: {e}", style="red", markup=False)
            raise typer.Exit(1) from e

        overrides: dict[str, Any] = {
            name: value
            for name, value in (
                ("max_depth", max_depth),
                ("sort_keys", sort_keys),
                ("max_chars", max_chars),
            )
            if value is not None
        }
        if keep_null:
            overrides["ignore_falsy"] = False

        try:
            config = FormatConfig.resolve(settings.format_config(), **overrides)
        except ValidationError as e:
            error_console.print(f"Invalid options: {e}", style="red", markup=False)
            raise typer.Exit(2) from e

        text = json_to_llm_string(data, config)
        typer.echo(text)
        logger.info("Converted input", input_chars=len(raw), output_chars=len(text))

        if stats:
            _print_stats(get_size_comparison(data, config))
    finally:
        clear_context()
