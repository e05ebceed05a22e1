from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from django_kvcommands.commands.base import Command, KeyCommand, Response
from django_kvcommands.numeric import NumericKind, NumericKindT
from django_kvcommands.types import Bitwise, When


@dataclass(frozen=True, slots=True)
class StringSetItem:
    key: str
    value: str
    expiry: timedelta | None = None
    when: When = When.ALWAYS


@dataclass(frozen=True, slots=True)
class StringSetResult:
    key: str
    set_success: bool


@dataclass(frozen=True, slots=True)
class StringEntry:
    name: str
    # bytes when the stored value is not UTF-8
    value: str | bytes | None


# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSetRangeResponse(Response):
    new_value_length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSetBitResponse(Response):
    old_bit_value: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSetResponse(Response):
    results: tuple[StringSetResult, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class StringLengthResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringIncrementResponse(Response):
    key: str = ""
    new_value: Any = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringDecrementResponse(Response):
    key: str = ""
    new_value: Any = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetWithExpiryResponse(Response):
    value: str | bytes | None = None
    expiry: timedelta | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetSetResponse(Response):
    old_value: str | bytes | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetRangeResponse(Response):
    value: str | bytes = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetBitResponse(Response):
    bit: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetResponse(Response):
    values: tuple[StringEntry, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitPositionResponse(Response):
    position: int = 0
    has_value: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitOperationResponse(Response):
    destination_value_length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitCountResponse(Response):
    bit_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class StringAppendResponse(Response):
    new_value_length: int = 0


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSetRange(KeyCommand):
    """Overwrite part of a string starting at ``offset``."""

    response_class = StringSetRangeResponse

    offset: int
    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSetBit(KeyCommand):
    response_class = StringSetBitResponse

    offset: int
    bit: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class StringSet(Command):
    """Set several keys, each with its own expiry and condition."""

    response_class = StringSetResponse

    items: tuple[StringSetItem, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class StringLength(KeyCommand):
    response_class = StringLengthResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class StringIncrement(KeyCommand):
    """Increment a numeric string; ``value`` is parsed according to ``kind``."""

    response_class = StringIncrementResponse

    value: str
    kind: NumericKindT = NumericKind.INT64


@dataclass(frozen=True, slots=True, kw_only=True)
class StringDecrement(KeyCommand):
    response_class = StringDecrementResponse

    value: str
    kind: NumericKindT = NumericKind.INT64


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetWithExpiry(KeyCommand):
    response_class = StringGetWithExpiryResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetSet(KeyCommand):
    response_class = StringGetSetResponse

    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetRange(KeyCommand):
    """Substring between two inclusive offsets; negative offsets count from the end."""

    response_class = StringGetRangeResponse

    start: int = 0
    end: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGetBit(KeyCommand):
    response_class = StringGetBitResponse

    offset: int


@dataclass(frozen=True, slots=True, kw_only=True)
class StringGet(Command):
    response_class = StringGetResponse

    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitPosition(KeyCommand):
    response_class = StringBitPositionResponse

    bit: bool
    start: int = 0
    end: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitOperation(Command):
    """Bitwise operation over ``keys`` stored at ``destination_key``.

    ``Bitwise.NOT`` only reads the first key.
    """

    response_class = StringBitOperationResponse

    bitwise: Bitwise
    destination_key: str
    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class StringBitCount(KeyCommand):
    response_class = StringBitCountResponse

    start: int = 0
    end: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class StringAppend(KeyCommand):
    response_class = StringAppendResponse

    value: str
