"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los invariantes de rango (min <= 0 <= max, dominio de 64 bits) se validan
  una sola vez, al construir el modelo, y no en cada conversión.
- Los resultados se serializan sin esfuerzo (`--json` en la CLI).

Nota:
- Estos modelos describen *qué* es una conversión, no *cómo* se parsea.
"""

from __future__ import annotations

import errno
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import ConversionError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


class TypeClass(str, Enum):
    """Clase de signo del tipo destino."""

    UNSUPPORTED = "unsupported"
    SIGNED = "signed"
    UNSIGNED = "unsigned"

    @property
    def supported(self) -> bool:
        return self is not TypeClass.UNSUPPORTED


class ErrorKind(str, Enum):
    """Taxonomía cerrada de fallos de conversión."""

    UNSUPPORTED_TYPE = "unsupported_type"
    OUT_OF_RANGE = "out_of_range"
    INVALID_FORMAT = "invalid_format"

    @property
    def errno_code(self) -> int:
        """Código negativo estilo C (`-ENOTSUP`, `-ERANGE`, `-EINVAL`)."""

        return -_ERRNO_BY_KIND[self]

    def label(self) -> str:
        return self.value.replace("_", " ")


_ERRNO_BY_KIND = {
    ErrorKind.UNSUPPORTED_TYPE: errno.ENOTSUP,
    ErrorKind.OUT_OF_RANGE: errno.ERANGE,
    ErrorKind.INVALID_FORMAT: errno.EINVAL,
}


class TypeBounds(BaseModel):
    """Rango representable `[min, max]` en el dominio de comparación de 64 bits.

    `min` vive en i64 (extendido en signo) y `max` en u64 (ensanchado).
    """

    model_config = ConfigDict(frozen=True)

    min: int = Field(default=0, ge=I64_MIN, le=0, description="Mínimo inclusivo (i64).")
    max: int = Field(default=0, ge=0, le=U64_MAX, description="Máximo inclusivo (u64).")

    @classmethod
    def sentinel(cls) -> "TypeBounds":
        """Cotas de un tipo no soportado; el motor nunca las consulta."""

        return cls(min=0, max=0)

    @classmethod
    def for_width(cls, bits: int, *, signed: bool) -> "TypeBounds":
        if signed:
            return cls(min=-(2 ** (bits - 1)), max=2 ** (bits - 1) - 1)
        return cls(min=0, max=2**bits - 1)


class ResolvedType(BaseModel):
    """Identidad resuelta de un tipo destino: clase, cotas y ancho."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre canónico del tipo.")
    type_class: TypeClass = Field(..., description="Signed / Unsigned / Unsupported.")
    bounds: TypeBounds = Field(default_factory=TypeBounds.sentinel)
    bits: int = Field(default=0, ge=0, le=64, description="Ancho en bits (0 si no soportado).")

    @model_validator(mode="after")
    def _check_class_bounds(self) -> "ResolvedType":
        if self.type_class is TypeClass.UNSIGNED and self.bounds.min != 0:
            raise ValueError("unsigned types must have min == 0")
        if self.type_class is TypeClass.SIGNED and self.bounds.max > I64_MAX:
            raise ValueError("signed types cannot exceed the i64 domain")
        return self

    @property
    def supported(self) -> bool:
        return self.type_class.supported

    def narrow(self, magnitude: int) -> int:
        """Estrecha la magnitud i64 al tipo destino (sin pérdida tras el chequeo de rango)."""

        if self.type_class is TypeClass.UNSIGNED:
            return magnitude & U64_MAX
        return magnitude


class ConversionSuccess(BaseModel):
    """Resultado correcto: `value` ya está dentro del rango del destino."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    text: str
    base: int
    value: int

    ok: Literal[True] = True

    @property
    def return_code(self) -> int:
        return 0

    def unwrap(self) -> int:
        return self.value

    def unwrap_or(self, default: Any) -> int:
        return self.value


class ConversionFailure(BaseModel):
    """Resultado fallido: exactamente una `ErrorKind`, sin valor."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    text: str
    base: int
    kind: ErrorKind

    ok: Literal[False] = False

    @property
    def return_code(self) -> int:
        return self.kind.errno_code

    def to_exception(self) -> ConversionError:
        return ConversionError.for_kind(self.kind.value, text=self.text, base=self.base)

    def unwrap(self) -> int:
        raise self.to_exception()

    def unwrap_or(self, default: Any) -> Any:
        return default


ConversionResult = Annotated[
    Union[ConversionSuccess, ConversionFailure],
    Field(discriminator="status"),
]
"""Unión discriminada devuelta por el motor y por la fachada pública."""

# El motor produce el mismo tipo de resultado; el alias documenta que aquí
# `value` es todavía la magnitud i64 sin estrechar.
ParseOutcome = ConversionResult
