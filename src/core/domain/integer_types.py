"""Resolución de la identidad del tipo destino.

Python no tiene dispatch por tipo en tiempo de compilación, así que el caller
nombra el destino explícitamente (miembro de `IntegerType`, su nombre, o una
clase entera de `ctypes`) y la resolución es una tabla en tiempo de ejecución.

Modelo de datos: LP64 (short 16, int 32, long 64, long long 64). El `char`
plano es de 8 bits y su signo depende de la plataforma (`char_signed`).
"""

from __future__ import annotations

import ctypes
from enum import Enum
from typing import Any

from core.domain.models import ResolvedType, TypeBounds, TypeClass


class IntegerType(str, Enum):
    """Tipos destino reconocidos, más el marcador `OTHER` (no soportado)."""

    OTHER = "other"

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    CHAR = "char"
    SIGNED_CHAR = "signed char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    LONG_LONG = "long long"
    UNSIGNED_CHAR = "unsigned char"
    UNSIGNED_SHORT = "unsigned short"
    UNSIGNED_INT = "unsigned int"
    UNSIGNED_LONG = "unsigned long"
    UNSIGNED_LONG_LONG = "unsigned long long"


# (signed, bits); CHAR se resuelve aparte.
_WIDTHS: dict[IntegerType, tuple[bool, int]] = {
    IntegerType.INT8: (True, 8),
    IntegerType.INT16: (True, 16),
    IntegerType.INT32: (True, 32),
    IntegerType.INT64: (True, 64),
    IntegerType.UINT8: (False, 8),
    IntegerType.UINT16: (False, 16),
    IntegerType.UINT32: (False, 32),
    IntegerType.UINT64: (False, 64),
    IntegerType.SIGNED_CHAR: (True, 8),
    IntegerType.SHORT: (True, 16),
    IntegerType.INT: (True, 32),
    IntegerType.LONG: (True, 64),
    IntegerType.LONG_LONG: (True, 64),
    IntegerType.UNSIGNED_CHAR: (False, 8),
    IntegerType.UNSIGNED_SHORT: (False, 16),
    IntegerType.UNSIGNED_INT: (False, 32),
    IntegerType.UNSIGNED_LONG: (False, 64),
    IntegerType.UNSIGNED_LONG_LONG: (False, 64),
}

# Sinónimos C habituales que no son el nombre canónico del enum.
_ALIASES: dict[str, IntegerType] = {
    "short int": IntegerType.SHORT,
    "signed short": IntegerType.SHORT,
    "signed short int": IntegerType.SHORT,
    "signed": IntegerType.INT,
    "signed int": IntegerType.INT,
    "long int": IntegerType.LONG,
    "signed long": IntegerType.LONG,
    "signed long int": IntegerType.LONG,
    "long long int": IntegerType.LONG_LONG,
    "signed long long": IntegerType.LONG_LONG,
    "signed long long int": IntegerType.LONG_LONG,
    "unsigned": IntegerType.UNSIGNED_INT,
    "unsigned short int": IntegerType.UNSIGNED_SHORT,
    "unsigned long int": IntegerType.UNSIGNED_LONG,
    "unsigned long long int": IntegerType.UNSIGNED_LONG_LONG,
    "int8_t": IntegerType.INT8,
    "int16_t": IntegerType.INT16,
    "int32_t": IntegerType.INT32,
    "int64_t": IntegerType.INT64,
    "uint8_t": IntegerType.UINT8,
    "uint16_t": IntegerType.UINT16,
    "uint32_t": IntegerType.UINT32,
    "uint64_t": IntegerType.UINT64,
}

# ctypes.c_char es un carácter de 1 byte, no un entero con signo/sin signo
# explícito: se trata igual que el `char` plano.
_CTYPES_SIGNED = (
    ctypes.c_byte,
    ctypes.c_short,
    ctypes.c_int,
    ctypes.c_long,
    ctypes.c_longlong,
    ctypes.c_int8,
    ctypes.c_int16,
    ctypes.c_int32,
    ctypes.c_int64,
    ctypes.c_ssize_t,
)
_CTYPES_UNSIGNED = (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_uint8,
    ctypes.c_uint16,
    ctypes.c_uint32,
    ctypes.c_uint64,
    ctypes.c_size_t,
)


def _normalize_name(name: str) -> str:
    return " ".join(name.strip().lower().split())


def _unsupported(name: str) -> ResolvedType:
    return ResolvedType(
        name=name or IntegerType.OTHER.value,
        type_class=TypeClass.UNSUPPORTED,
        bounds=TypeBounds.sentinel(),
        bits=0,
    )


def _from_width(name: str, *, signed: bool, bits: int) -> ResolvedType:
    return ResolvedType(
        name=name,
        type_class=TypeClass.SIGNED if signed else TypeClass.UNSIGNED,
        bounds=TypeBounds.for_width(bits, signed=signed),
        bits=bits,
    )


def lookup_integer_type(name: str) -> IntegerType | None:
    """Busca un `IntegerType` por nombre (tolerante a mayúsculas y separadores)."""

    key = _normalize_name(name)
    # `uint8_t` tal cual; `unsigned_long` / `unsigned-long` con separadores.
    for candidate in (key, _normalize_name(key.replace("_", " ").replace("-", " "))):
        if candidate in _ALIASES:
            return _ALIASES[candidate]
        try:
            return IntegerType(candidate)
        except ValueError:
            continue
    return None


def _resolve_member(member: IntegerType, *, char_signed: bool) -> ResolvedType:
    if member is IntegerType.CHAR:
        return _from_width(member.value, signed=char_signed, bits=8)
    width = _WIDTHS.get(member)
    if width is None:
        return _unsupported(member.value)
    signed, bits = width
    return _from_width(member.value, signed=signed, bits=bits)


def _resolve_ctype(ctype: type, *, char_signed: bool) -> ResolvedType:
    name = ctype.__name__
    if issubclass(ctype, ctypes.c_char):
        return _from_width(name, signed=char_signed, bits=8)
    bits = ctypes.sizeof(ctype) * 8
    if issubclass(ctype, _CTYPES_UNSIGNED):
        return _from_width(name, signed=False, bits=bits)
    if issubclass(ctype, _CTYPES_SIGNED):
        return _from_width(name, signed=True, bits=bits)
    return _unsupported(name)


def resolve_type(destination: Any, *, char_signed: bool = True) -> ResolvedType:
    """Resuelve la identidad del destino a clase + cotas.

    Nunca lanza: cualquier cosa fuera del conjunto cerrado resuelve a
    `TypeClass.UNSUPPORTED` con cotas centinela `(0, 0)`.
    """

    if isinstance(destination, ResolvedType):
        return destination
    if isinstance(destination, IntegerType):
        return _resolve_member(destination, char_signed=char_signed)
    if isinstance(destination, str):
        member = lookup_integer_type(destination)
        if member is None:
            return _unsupported(destination.strip())
        return _resolve_member(member, char_signed=char_signed)
    if isinstance(destination, type) and issubclass(destination, ctypes._SimpleCData):
        return _resolve_ctype(destination, char_signed=char_signed)

    name = getattr(destination, "__name__", None) or type(destination).__name__
    return _unsupported(str(name))


def supported_types(*, char_signed: bool = True) -> list[ResolvedType]:
    """Todos los tipos soportados, en el orden del enum."""

    return [
        _resolve_member(member, char_signed=char_signed)
        for member in IntegerType
        if member is not IntegerType.OTHER
    ]
