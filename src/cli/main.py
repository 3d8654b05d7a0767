"""CLI de demostración (Typer + Rich).

Comandos:
- `convert`: convierte un literal y muestra el valor o el motivo del fallo.
- `types`: lista los tipos destino soportados.
- `batch`: convierte un archivo con un literal por línea.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.logging_setup import configure_logging
from cli.ui_components import (
    add_result_row,
    build_results_table,
    build_types_table,
    format_failure,
)
from core.config import AppSettings
from core.domain.integer_types import resolve_type, supported_types
from core.domain.models import ConversionFailure
from core.services.conversion import convert_with_base

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help="Convert integer literals into fixed-width integer types with range checks.",
)

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _resolve_options(
    settings: AppSettings, type_name: str | None, base: int | None
) -> tuple[str, int]:
    name = type_name or settings.default_type
    resolved = resolve_type(name, char_signed=settings.char_signed)
    # Un tipo no soportado no es un error de uso: el motor lo reporta.
    logger.debug(
        "destination %r: class=%s bounds=[%d, %d]",
        name,
        resolved.type_class.value,
        resolved.bounds.min,
        resolved.bounds.max,
    )
    return name, settings.default_base if base is None else base


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = _load_settings()
    ctx.obj = settings
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def convert(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Integer literal (use `--` before negative values)."),
    type_name: str | None = typer.Option(None, "--type", "-t", help="Destination type."),
    base: int | None = typer.Option(None, "--base", "-b", help="0 (auto) or 2..36."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Convert TEXT into the destination type."""

    settings: AppSettings = ctx.obj
    name, base = _resolve_options(settings, type_name, base)
    logger.debug("convert text=%r type=%s base=%d", text, name, base)

    result = convert_with_base(text, base, name, char_signed=settings.char_signed)

    if as_json:
        typer.echo(result.model_dump_json())
    elif isinstance(result, ConversionFailure):
        _console.print(format_failure(result, name))
    else:
        _console.print(str(result.value))

    if isinstance(result, ConversionFailure):
        raise typer.Exit(code=1)


@app.command()
def types(ctx: typer.Context) -> None:
    """List supported destination types and their ranges."""

    settings: AppSettings = ctx.obj
    _console.print(build_types_table(supported_types(char_signed=settings.char_signed)))


@app.command()
def batch(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    type_name: str | None = typer.Option(None, "--type", "-t", help="Destination type."),
    base: int | None = typer.Option(None, "--base", "-b", help="0 (auto) or 2..36."),
) -> None:
    """Convert one literal per line (blank lines and `#` comments are skipped)."""

    settings: AppSettings = ctx.obj
    name, base = _resolve_options(settings, type_name, base)

    table = build_results_table(name)
    failures = 0
    for line_no, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        result = convert_with_base(line, base, name, char_signed=settings.char_signed)
        if isinstance(result, ConversionFailure):
            failures += 1
        add_result_row(table, line_no, result)

    _console.print(table)
    logger.debug("batch %s: %d failure(s)", path, failures)
    if failures:
        _console.print(f"[yellow]{failures} line(s) failed.[/yellow]")
        raise typer.Exit(code=1)


def run() -> None:
    app()
