from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django_kvcommands.commands.base import KeyCommand, Response
from django_kvcommands.numeric import NumericKind, NumericKindT

# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class HashValuesResponse(Response):
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class HashSetResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class HashLengthResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class HashKeysResponse(Response):
    hash_fields: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class HashIncrementResponse(Response):
    key: str = ""
    hash_field: str = ""
    new_value: Any = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class HashDecrementResponse(Response):
    key: str = ""
    hash_field: str = ""
    new_value: Any = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class HashGetResponse(Response):
    value: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HashGetAllResponse(Response):
    values: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class HashExistsResponse(Response):
    has_field: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class HashDeleteResponse(Response):
    delete_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class HashScanResponse(Response):
    values: dict[str, str] = field(default_factory=dict)
    cursor: int = 0


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class HashValues(KeyCommand):
    response_class = HashValuesResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class HashSet(KeyCommand):
    """Set fields from an ordered collection of ``(field, value)`` pairs."""

    response_class = HashSetResponse

    items: tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class HashLength(KeyCommand):
    response_class = HashLengthResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class HashKeys(KeyCommand):
    response_class = HashKeysResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class HashIncrement(KeyCommand):
    response_class = HashIncrementResponse

    hash_field: str
    value: str
    kind: NumericKindT = NumericKind.INT64


@dataclass(frozen=True, slots=True, kw_only=True)
class HashDecrement(KeyCommand):
    response_class = HashDecrementResponse

    hash_field: str
    value: str
    kind: NumericKindT = NumericKind.INT64


@dataclass(frozen=True, slots=True, kw_only=True)
class HashGet(KeyCommand):
    response_class = HashGetResponse

    hash_field: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HashGetAll(KeyCommand):
    response_class = HashGetAllResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class HashExists(KeyCommand):
    response_class = HashExistsResponse

    hash_field: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HashDelete(KeyCommand):
    response_class = HashDeleteResponse

    hash_fields: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class HashScan(KeyCommand):
    """One page of fields matching ``pattern``; pass the returned cursor back to continue."""

    response_class = HashScanResponse

    pattern: str = "*"
    page_size: int = 10
    cursor: int = 0
