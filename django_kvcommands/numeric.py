"""Numeric operand handling for increment/decrement commands.

A command declares the kind of number it works with. The kind selects one of
two families, and the family selects exactly one backend primitive: the
signed 64-bit integer increment (``INCRBY``/``HINCRBY``) or the
double-precision one (``INCRBYFLOAT``/``HINCRBYFLOAT``). Amounts arrive as
text and fail soft: anything unparseable becomes zero.
"""

from __future__ import annotations

import decimal
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from django_kvcommands.exceptions import UnsupportedNumericKindError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class NumericKind(StrEnum):
    BOOLEAN = "boolean"
    BYTE = "byte"
    SBYTE = "sbyte"
    CHAR = "char"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    DECIMAL = "decimal"
    DOUBLE = "double"
    FLOAT = "float"


class NumericFamily(StrEnum):
    INTEGRAL = "integral"
    FLOATING = "floating"


FAMILIES: dict[NumericKind, NumericFamily] = {
    NumericKind.BOOLEAN: NumericFamily.INTEGRAL,
    NumericKind.BYTE: NumericFamily.INTEGRAL,
    NumericKind.SBYTE: NumericFamily.INTEGRAL,
    NumericKind.CHAR: NumericFamily.INTEGRAL,
    NumericKind.INT16: NumericFamily.INTEGRAL,
    NumericKind.UINT16: NumericFamily.INTEGRAL,
    NumericKind.INT32: NumericFamily.INTEGRAL,
    NumericKind.UINT32: NumericFamily.INTEGRAL,
    NumericKind.INT64: NumericFamily.INTEGRAL,
    NumericKind.UINT64: NumericFamily.INTEGRAL,
    NumericKind.DECIMAL: NumericFamily.FLOATING,
    NumericKind.DOUBLE: NumericFamily.FLOATING,
    NumericKind.FLOAT: NumericFamily.FLOATING,
}

if set(FAMILIES) != set(NumericKind):
    msg = "every NumericKind must belong to a NumericFamily"
    raise RuntimeError(msg)

# Python types accepted in place of a NumericKind
_PYTHON_TYPES: dict[type, NumericKind] = {
    bool: NumericKind.BOOLEAN,
    int: NumericKind.INT64,
    float: NumericKind.DOUBLE,
    decimal.Decimal: NumericKind.DECIMAL,
}

type NumericKindT = NumericKind | str | type


@dataclass(frozen=True, slots=True)
class IntegralAmount:
    value: int


@dataclass(frozen=True, slots=True)
class FloatingAmount:
    value: float


type Amount = IntegralAmount | FloatingAmount


def resolve_kind(kind: NumericKindT) -> NumericKind:
    """Resolve a kind given as enum member, its name, or a Python number type.

    Raises:
        UnsupportedNumericKindError: ``kind`` is outside the supported set.
    """
    if isinstance(kind, type):
        try:
            return _PYTHON_TYPES[kind]
        except KeyError:
            raise UnsupportedNumericKindError(kind) from None
    try:
        return NumericKind(kind)
    except ValueError:
        raise UnsupportedNumericKindError(kind) from None


def family_of(kind: NumericKindT) -> NumericFamily:
    return FAMILIES[resolve_kind(kind)]


def _parse_integral(raw: Any) -> int:
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return 0
    if not INT64_MIN <= value <= INT64_MAX:
        return 0
    return value


def _parse_floating(raw: Any) -> float:
    try:
        value = float(str(raw).strip()) if not isinstance(raw, (int, float)) else float(raw)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def parse_amount(kind: NumericKindT, raw: Any) -> Amount:
    """Parse ``raw`` into the amount type of ``kind``'s family."""
    match family_of(kind):
        case NumericFamily.INTEGRAL:
            return IntegralAmount(_parse_integral(raw))
        case NumericFamily.FLOATING:
            return FloatingAmount(_parse_floating(raw))


def coerce(kind: NumericKindT, result: Any) -> Any:
    """Convert a primitive backend result back to ``kind``."""
    kind = resolve_kind(kind)
    match kind:
        case NumericKind.BOOLEAN:
            return bool(int(result))
        case NumericKind.CHAR:
            try:
                return chr(int(result))
            except (ValueError, OverflowError):
                return "\x00"
        case NumericKind.DECIMAL:
            return decimal.Decimal(str(result))
        case NumericKind.DOUBLE | NumericKind.FLOAT:
            return float(result)
        case _:
            return int(result)


def numeric_call(
    kind: NumericKindT,
    raw: Any,
    *,
    integral: str,
    floating: str,
    negate: bool = False,
) -> tuple[str, int | float]:
    """Select the backend method and signed amount for an increment.

    ``integral`` and ``floating`` name the two primitives; the family of
    ``kind`` picks exactly one of them. A decrement negates the amount
    (``DECRBY`` has no float or hash counterpart, so both go through the
    increment primitives).
    """
    match parse_amount(kind, raw):
        case IntegralAmount(value=value):
            return integral, -value if negate else value
        case FloatingAmount(value=value):
            return floating, -value if negate else value
