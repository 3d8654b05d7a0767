"""Motor de conversión texto → entero de ancho fijo.

Flujo:
- `resolve_type` traduce el destino a clase + cotas.
- `convert_magnitude` parsea a una magnitud de 64 bits y la valida contra
  las cotas.
- `convert_with_base` / `convert` estrechan la magnitud al destino.

El motor es puro: no loguea, no lanza por entrada inválida y no guarda
estado entre llamadas.
"""

from __future__ import annotations

from typing import Any

from adapters.strto_scanner import DEFAULT_SCANNER
from core.domain.integer_types import resolve_type
from core.domain.models import (
    I64_MAX,
    U64_MAX,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    ErrorKind,
    ParseOutcome,
    TypeBounds,
    TypeClass,
)
from core.interfaces.raw_scanner import RawScanner, ScanError


def _as_i64(value: int) -> int:
    """Reinterpreta un u64 como i64 (complemento a dos)."""

    return value - 2**64 if value > I64_MAX else value


def _as_u64(value: int) -> int:
    return value & U64_MAX


def convert_magnitude(
    text: str,
    base: int,
    type_class: TypeClass,
    bounds: TypeBounds,
    *,
    scanner: RawScanner = DEFAULT_SCANNER,
) -> ParseOutcome:
    """Parsea `text` y valida la magnitud i64 contra `bounds`.

    `value` en el éxito es la magnitud i64: las magnitudes sin signo por
    encima de `2**63 - 1` viajan en complemento a dos.
    """

    def fail(kind: ErrorKind) -> ConversionFailure:
        return ConversionFailure(text=text, base=base, kind=kind)

    if type_class is TypeClass.UNSUPPORTED:
        return fail(ErrorKind.UNSUPPORTED_TYPE)

    unsigned = type_class is TypeClass.UNSIGNED
    scan = scanner.scan_unsigned(text, base) if unsigned else scanner.scan_signed(text, base)

    if scan.consumed == 0 or scan.consumed != len(text) or scan.error is ScanError.INVALID:
        return fail(ErrorKind.INVALID_FORMAT)
    if scan.error is ScanError.RANGE:
        return fail(ErrorKind.OUT_OF_RANGE)

    magnitude = _as_i64(scan.value)
    if unsigned:
        # strtoull() acepta "-1" y lo convierte en 2**64 - 1: se rechaza aquí.
        if "-" in text or _as_u64(magnitude) > bounds.max:
            return fail(ErrorKind.OUT_OF_RANGE)
    elif magnitude < bounds.min or (magnitude > 0 and _as_u64(magnitude) > bounds.max):
        return fail(ErrorKind.OUT_OF_RANGE)

    return ConversionSuccess(text=text, base=base, value=magnitude)


def convert_with_base(
    text: str,
    base: int,
    destination: Any,
    *,
    char_signed: bool = True,
    scanner: RawScanner = DEFAULT_SCANNER,
) -> ConversionResult:
    """Convierte `text` en base `base` a un valor del tipo `destination`.

    `destination` es un `IntegerType`, su nombre o una clase entera de
    `ctypes`. En el éxito, `value` ya está estrechado al destino.
    """

    resolved = resolve_type(destination, char_signed=char_signed)
    outcome = convert_magnitude(
        text, base, resolved.type_class, resolved.bounds, scanner=scanner
    )
    if isinstance(outcome, ConversionSuccess):
        return outcome.model_copy(update={"value": resolved.narrow(outcome.value)})
    return outcome


def convert(text: str, destination: Any, *, char_signed: bool = True) -> ConversionResult:
    """Igual que `convert_with_base(text, 0, destination)` (base autodetectada)."""

    return convert_with_base(text, 0, destination, char_signed=char_signed)


def parse_int(text: str, destination: Any, base: int = 0, *, char_signed: bool = True) -> int:
    """Variante que lanza `ConversionError` en lugar de devolver el fallo."""

    return convert_with_base(text, base, destination, char_signed=char_signed).unwrap()
