"""Contrato del primitivo de parseo crudo (estilo `strtoll`/`strtoull`).

Por qué Protocol:
- El motor solo necesita tres hechos: valor, cuánto se consumió y si hubo
  error. Cualquier escáner que los reporte es intercambiable y testeable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class ScanError(str, Enum):
    """Errores que el propio primitivo puede reportar (equivalente a errno)."""

    RANGE = "range"
    INVALID = "invalid"


@dataclass(frozen=True)
class RawScan:
    """Salida del primitivo.

    - `value`: valor parseado (saturado si hubo `RANGE`).
    - `consumed`: caracteres consumidos del texto; 0 si no hubo dígitos.
    - `error`: `None`, `RANGE` o `INVALID`.
    """

    value: int
    consumed: int
    error: ScanError | None = None


@runtime_checkable
class RawScanner(Protocol):
    """Par de primitivos con y sin signo, como `strtoll` / `strtoull`."""

    def scan_signed(self, text: str, base: int) -> RawScan:
        ...

    def scan_unsigned(self, text: str, base: int) -> RawScan:
        ...
