"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en `types` y `batch`.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from core.domain.models import ConversionFailure, ConversionResult, ResolvedType


def build_types_table(types: list[ResolvedType]) -> Table:
    """Tabla de tipos soportados con sus cotas."""

    table = Table(title="Supported Types")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Class", style="white")
    table.add_column("Bits", style="white", justify="right")
    table.add_column("Min", style="magenta", justify="right")
    table.add_column("Max", style="magenta", justify="right")
    for resolved in types:
        table.add_row(
            resolved.name,
            resolved.type_class.value,
            str(resolved.bits),
            str(resolved.bounds.min),
            str(resolved.bounds.max),
        )
    return table


def build_results_table(type_name: str) -> Table:
    table = Table(title=Text(f"Conversions → {type_name}"))
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Input", style="white")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Error", style="red")
    return table


def add_result_row(table: Table, line_no: int, result: ConversionResult) -> None:
    if isinstance(result, ConversionFailure):
        table.add_row(str(line_no), Text(result.text), "", result.kind.label())
    else:
        table.add_row(str(line_no), Text(result.text), str(result.value), "")


def format_failure(result: ConversionFailure, type_name: str) -> Text:
    """Mensaje de error de una línea para `convert`."""

    text = Text()
    text.append("error: ", style="bold red")
    text.append(f"{result.text!r} → {type_name}: {result.kind.label()}")
    text.append(f" ({result.return_code})", style="dim")
    return text
