from __future__ import annotations

import ctypes
import errno
import json

import pytest
from pydantic import TypeAdapter, ValidationError

from core.domain.errors import InvalidFormatError, OutOfRangeError, UnsupportedTypeError
from core.domain.integer_types import IntegerType, lookup_integer_type, resolve_type, supported_types
from core.domain.models import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    ErrorKind,
    ResolvedType,
    TypeBounds,
    TypeClass,
)


@pytest.mark.parametrize(
    "destination,type_class,lo,hi,bits",
    [
        (IntegerType.INT8, TypeClass.SIGNED, -128, 127, 8),
        (IntegerType.UINT8, TypeClass.UNSIGNED, 0, 255, 8),
        (IntegerType.SHORT, TypeClass.SIGNED, -32768, 32767, 16),
        (IntegerType.UNSIGNED_INT, TypeClass.UNSIGNED, 0, 2**32 - 1, 32),
        (IntegerType.LONG, TypeClass.SIGNED, -(2**63), 2**63 - 1, 64),
        (IntegerType.UINT64, TypeClass.UNSIGNED, 0, 2**64 - 1, 64),
        (ctypes.c_int16, TypeClass.SIGNED, -32768, 32767, 16),
        (ctypes.c_uint64, TypeClass.UNSIGNED, 0, 2**64 - 1, 64),
        (ctypes.c_char, TypeClass.SIGNED, -128, 127, 8),
    ],
)
def test_resolve_type_bounds(destination, type_class, lo, hi, bits):
    resolved = resolve_type(destination)
    assert resolved.type_class is type_class
    assert (resolved.bounds.min, resolved.bounds.max, resolved.bits) == (lo, hi, bits)


def test_unsupported_resolves_to_sentinel():
    resolved = resolve_type("double")
    assert resolved.type_class is TypeClass.UNSUPPORTED
    assert resolved.bounds == TypeBounds.sentinel()
    assert not resolved.supported


def test_supported_types_cover_all_members():
    names = {resolved.name for resolved in supported_types()}
    assert names == {t.value for t in IntegerType if t is not IntegerType.OTHER}
    assert all(r.bounds.min <= 0 <= r.bounds.max for r in supported_types())


def test_lookup_aliases():
    assert lookup_integer_type("long long int") is IntegerType.LONG_LONG
    assert lookup_integer_type("signed-char") is IntegerType.SIGNED_CHAR
    assert lookup_integer_type("INT64_T") is IntegerType.INT64
    assert lookup_integer_type("quad") is None


@pytest.mark.parametrize(
    "kwargs",
    [{"min": 1, "max": 5}, {"min": 0, "max": -1}, {"min": 0, "max": 2**64}, {"min": -(2**63) - 1, "max": 0}],
)
def test_bounds_invariants(kwargs):
    with pytest.raises(ValidationError):
        TypeBounds(**kwargs)


def test_resolved_type_invariants():
    with pytest.raises(ValidationError):
        ResolvedType(name="bad", type_class=TypeClass.UNSIGNED, bounds=TypeBounds(min=-1, max=1), bits=8)
    with pytest.raises(ValidationError):
        ResolvedType(name="bad", type_class=TypeClass.SIGNED, bounds=TypeBounds(min=-1, max=2**64 - 1), bits=64)


def test_errno_codes():
    assert ErrorKind.UNSUPPORTED_TYPE.errno_code == -errno.ENOTSUP
    assert ErrorKind.OUT_OF_RANGE.errno_code == -errno.ERANGE
    assert ErrorKind.INVALID_FORMAT.errno_code == -errno.EINVAL
    assert len({kind.errno_code for kind in ErrorKind}) == 3


@pytest.mark.parametrize(
    "kind,exc_type",
    [
        (ErrorKind.UNSUPPORTED_TYPE, UnsupportedTypeError),
        (ErrorKind.OUT_OF_RANGE, OutOfRangeError),
        (ErrorKind.INVALID_FORMAT, InvalidFormatError),
    ],
)
def test_failure_unwrap_raises_matching_error(kind, exc_type):
    failure = ConversionFailure(text="x", base=0, kind=kind)
    assert failure.return_code == kind.errno_code
    assert failure.unwrap_or(7) == 7
    with pytest.raises(exc_type) as excinfo:
        failure.unwrap()
    assert excinfo.value.kind == kind.value


def test_success_unwrap():
    success = ConversionSuccess(text="42", base=0, value=42)
    assert success.unwrap() == success.unwrap_or(0) == 42
    assert success.return_code == 0


def test_result_json_is_discriminated():
    adapter = TypeAdapter(ConversionResult)
    failure = ConversionFailure(text="-1", base=0, kind=ErrorKind.OUT_OF_RANGE)
    payload = json.loads(failure.model_dump_json())
    assert payload["status"] == "error"
    assert payload["kind"] == "out_of_range"
    assert adapter.validate_python(payload) == failure


def test_models_are_frozen():
    success = ConversionSuccess(text="42", base=0, value=42)
    with pytest.raises(ValidationError):
        success.value = 1
