"""Primitivo de parseo crudo con semántica de `strtoll` / `strtoull` (C).

Por qué no `int(text, base)` directamente:
- `int()` no informa cuánto del texto consumió, acepta `_` y `0o`/`0b`, y
  nunca desborda. El motor necesita el contrato de C: valor, offset
  consumido y `ERANGE` al salir del dominio de 64 bits.
- Los dígitos se acumulan uno a uno, como `strtoull`: la magnitud deja de
  crecer al salir de 64 bits, pero el offset sigue avanzando. Así no se
  choca con el límite de dígitos de `int()` en textos largos.

Reglas:
- Se saltan espacios iniciales (`isspace` de C), luego un `+`/`-` opcional.
- Base 0: `0x`/`0X` → 16, `0` inicial → 8, si no → 10. Base 16 acepta el
  prefijo `0x` opcional. Un `0x` sin dígito hexadecimal detrás solo consume
  el `0`.
- Base fuera de `{0} ∪ [2, 36]` → `ScanError.INVALID` sin consumir nada.
"""

from __future__ import annotations

import string

from core.domain.models import I64_MAX, I64_MIN, U64_MAX
from core.interfaces.raw_scanner import RawScan, ScanError

_C_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS: dict[str, int] = {
    **{c: i for i, c in enumerate(string.digits + string.ascii_lowercase)},
    **{c: i + 10 for i, c in enumerate(string.ascii_uppercase)},
}
_NOT_A_DIGIT = 99
_SATURATED = U64_MAX + 1


def _digit(ch: str) -> int:
    return _DIGITS.get(ch, _NOT_A_DIGIT)


def _valid_base(base: int) -> bool:
    return base == 0 or 2 <= base <= 36


def _scan_magnitude(text: str, base: int) -> tuple[bool, int, int]:
    """Devuelve `(negativo, magnitud, consumido)`; consumido es 0 sin dígitos."""

    i = 0
    n = len(text)
    while i < n and text[i] in _C_SPACE:
        i += 1

    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1

    has_hex_prefix = (
        text[i : i + 2] in ("0x", "0X") and i + 2 < n and _digit(text[i + 2]) < 16
    )
    if base in (0, 16) and has_hex_prefix:
        base = 16
        i += 2
    elif base == 0:
        base = 8 if text[i : i + 1] == "0" else 10

    start = i
    magnitude = 0
    while i < n:
        digit = _digit(text[i])
        if digit >= base:
            break
        # Saturado en U64_MAX + 1: basta para que ambos primitivos den RANGE.
        if magnitude <= U64_MAX:
            magnitude = magnitude * base + digit
        i += 1
    if i == start:
        return False, 0, 0

    return negative, min(magnitude, _SATURATED), i


class StrtoScanner:
    """Implementación de `RawScanner` sobre `str` de Python."""

    def scan_signed(self, text: str, base: int) -> RawScan:
        if not _valid_base(base):
            return RawScan(value=0, consumed=0, error=ScanError.INVALID)

        negative, magnitude, consumed = _scan_magnitude(text, base)
        value = -magnitude if negative else magnitude
        if value > I64_MAX:
            return RawScan(value=I64_MAX, consumed=consumed, error=ScanError.RANGE)
        if value < I64_MIN:
            return RawScan(value=I64_MIN, consumed=consumed, error=ScanError.RANGE)
        return RawScan(value=value, consumed=consumed)

    def scan_unsigned(self, text: str, base: int) -> RawScan:
        if not _valid_base(base):
            return RawScan(value=0, consumed=0, error=ScanError.INVALID)

        negative, magnitude, consumed = _scan_magnitude(text, base)
        if magnitude > U64_MAX:
            return RawScan(value=U64_MAX, consumed=consumed, error=ScanError.RANGE)
        # Como strtoull(): "-N" se niega en aritmética sin signo.
        value = (-magnitude) & U64_MAX if negative else magnitude
        return RawScan(value=value, consumed=consumed)


DEFAULT_SCANNER = StrtoScanner()
