"""Excepciones del dominio.

El motor nunca lanza: devuelve un resultado discriminado. Estas excepciones
existen para los call-sites que prefieren `try/except` (`parse_int`,
`ConversionFailure.unwrap`).
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Fallo de conversión texto → entero."""

    kind = "conversion_error"
    reason = "conversion failed"

    def __init__(self, text: str, base: int = 0) -> None:
        self.text = text
        self.base = base
        super().__init__(f"{self.reason}: {text!r} (base {base})")

    @staticmethod
    def for_kind(kind: str, *, text: str, base: int = 0) -> "ConversionError":
        cls = _BY_KIND.get(kind, ConversionError)
        return cls(text, base)


class UnsupportedTypeError(ConversionError):
    kind = "unsupported_type"
    reason = "unsupported destination type"


class OutOfRangeError(ConversionError):
    kind = "out_of_range"
    reason = "value out of range for destination type"


class InvalidFormatError(ConversionError):
    kind = "invalid_format"
    reason = "invalid integer literal"


_BY_KIND: dict[str, type[ConversionError]] = {
    cls.kind: cls for cls in (UnsupportedTypeError, OutOfRangeError, InvalidFormatError)
}
