"""Translation between canonical option enums and redis-py native options.

Clients work on bytes; :func:`decode_reply` turns raw replies into text
wherever they are valid UTF-8.

Every table is exhaustive: building an :class:`EnumTable` fails if a
canonical member has no native counterpart. Values that are not members of
the canonical enum (a stale string from configuration, a member of a newer
enum revision) degrade to the table's default and log a warning, unless the
translator is strict.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, NamedTuple

from django_kvcommands.types import (
    Aggregate,
    Bitwise,
    CommandFlags,
    KeyType,
    MigrateOption,
    RangeExclude,
    SetOperation,
    SortedOrder,
    SortType,
    When,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from enum import StrEnum

logger = logging.getLogger(__name__)


class Exclusion(NamedTuple):
    """Exclusive flags for the two ends of a range."""

    start: bool
    stop: bool


class Condition(NamedTuple):
    """``SET``-style NX/XX switches."""

    nx: bool
    xx: bool


class MigrateFlags(NamedTuple):
    copy: bool
    replace: bool


class ExecutionOptions(NamedTuple):
    """Native execution hints derived from :class:`CommandFlags`.

    ``target`` is ``"primary"``, ``"replica"`` or ``"any"``; a server identity
    names a single node so it is informational only. ``fire_and_forget``
    makes the dispatcher discard the reply.
    """

    target: str
    fire_and_forget: bool


class EnumTable[E: StrEnum, N]:
    """One canonical enum mapped onto its native values."""

    def __init__(
        self,
        name: str,
        enum_class: type[E],
        table: Mapping[E, N],
        default: E,
        *,
        strict: bool = False,
    ) -> None:
        missing = [member for member in enum_class if member not in table]
        if missing:
            msg = f"{name} table does not map {', '.join(m.name for m in missing)}"
            raise ValueError(msg)

        self.name = name
        self.enum_class = enum_class
        self.default = default
        self.strict = strict
        self._table = dict(table)
        self._reverse = {native: member for member, native in self._table.items()}

    def __contains__(self, value: object) -> bool:
        return value in self._table

    def _degrade(self, value: Any) -> E:
        if self.strict:
            msg = f"{value!r} is not a valid {self.name} value"
            raise ValueError(msg)
        logger.warning("Unrecognized %s value %r, using %s", self.name, value, self.default.name)
        return self.default

    def canonical(self, value: Any) -> E:
        """Coerce ``value`` to a canonical member, degrading to the default."""
        if value is None:
            return self.default
        try:
            return self.enum_class(value)
        except ValueError:
            return self._degrade(value)

    def to_native(self, value: Any) -> N:
        return self._table[self.canonical(value)]

    def to_canonical(self, native: Any) -> E:
        try:
            return self._reverse[native]
        except (KeyError, TypeError):
            return self._degrade(native)


class EnumTranslator:
    """All option tables used when shaping backend calls."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self.order = EnumTable(
            "order",
            SortedOrder,
            {SortedOrder.ASCENDING: "ASC", SortedOrder.DESCENDING: "DESC"},
            SortedOrder.ASCENDING,
            strict=strict,
        )
        self.exclude = EnumTable(
            "exclude",
            RangeExclude,
            {
                RangeExclude.NONE: Exclusion(start=False, stop=False),
                RangeExclude.START: Exclusion(start=True, stop=False),
                RangeExclude.STOP: Exclusion(start=False, stop=True),
                RangeExclude.BOTH: Exclusion(start=True, stop=True),
            },
            RangeExclude.NONE,
            strict=strict,
        )
        self.set_operation = EnumTable(
            "set operation",
            SetOperation,
            {SetOperation.UNION: "UNION", SetOperation.INTERSECT: "INTER", SetOperation.DIFFERENCE: "DIFF"},
            SetOperation.UNION,
            strict=strict,
        )
        self.aggregate = EnumTable(
            "aggregate",
            Aggregate,
            {Aggregate.SUM: "SUM", Aggregate.MIN: "MIN", Aggregate.MAX: "MAX"},
            Aggregate.SUM,
            strict=strict,
        )
        self.flags = EnumTable(
            "command flags",
            CommandFlags,
            {
                CommandFlags.NONE: ExecutionOptions("primary", fire_and_forget=False),
                CommandFlags.HIGH_PRIORITY: ExecutionOptions("primary", fire_and_forget=False),
                CommandFlags.FIRE_AND_FORGET: ExecutionOptions("primary", fire_and_forget=True),
                CommandFlags.PREFER_MASTER: ExecutionOptions("any", fire_and_forget=False),
                CommandFlags.DEMAND_MASTER: ExecutionOptions("primary", fire_and_forget=False),
                CommandFlags.PREFER_REPLICA: ExecutionOptions("any", fire_and_forget=False),
                CommandFlags.DEMAND_REPLICA: ExecutionOptions("replica", fire_and_forget=False),
                CommandFlags.NO_REDIRECT: ExecutionOptions("primary", fire_and_forget=False),
                CommandFlags.NO_SCRIPT_CACHE: ExecutionOptions("primary", fire_and_forget=False),
            },
            CommandFlags.NONE,
            strict=strict,
        )
        self.when = EnumTable(
            "when",
            When,
            {
                When.ALWAYS: Condition(nx=False, xx=False),
                When.EXISTS: Condition(nx=False, xx=True),
                When.NOT_EXISTS: Condition(nx=True, xx=False),
            },
            When.ALWAYS,
            strict=strict,
        )
        self.bitwise = EnumTable(
            "bitwise",
            Bitwise,
            {Bitwise.AND: "AND", Bitwise.OR: "OR", Bitwise.XOR: "XOR", Bitwise.NOT: "NOT"},
            Bitwise.AND,
            strict=strict,
        )
        self.sort_type = EnumTable(
            "sort type",
            SortType,
            {SortType.NUMERIC: "NUMERIC", SortType.ALPHABETIC: "ALPHA"},
            SortType.NUMERIC,
            strict=strict,
        )
        self.key_type = EnumTable(
            "key type",
            KeyType,
            {
                KeyType.STRING: "string",
                KeyType.LIST: "list",
                KeyType.HASH: "hash",
                KeyType.SET: "set",
                KeyType.SORTED_SET: "zset",
            },
            KeyType.STRING,
            strict=strict,
        )
        self.migrate = EnumTable(
            "migrate option",
            MigrateOption,
            {
                MigrateOption.NONE: MigrateFlags(copy=False, replace=False),
                MigrateOption.COPY: MigrateFlags(copy=True, replace=False),
                MigrateOption.REPLACE: MigrateFlags(copy=False, replace=True),
            },
            MigrateOption.NONE,
            strict=strict,
        )

    @property
    def tables(self) -> tuple[EnumTable, ...]:
        return (
            self.order,
            self.exclude,
            self.set_operation,
            self.aggregate,
            self.flags,
            self.when,
            self.bitwise,
            self.sort_type,
            self.key_type,
            self.migrate,
        )


def score_bound(value: float, *, exclusive: bool) -> str:
    """Render a sorted-set score bound (``1.5``, ``(1.5``, ``-inf``)."""
    if math.isinf(value):
        return "+inf" if value > 0 else "-inf"
    text = repr(float(value))
    return f"({text}" if exclusive else text


def lex_bound(value: str | None, *, exclusive: bool, low: bool) -> str:
    """Render a lexicographical bound; an empty value is the open end."""
    if not value:
        return "-" if low else "+"
    return f"({value}" if exclusive else f"[{value}"


def decode_reply(value: Any) -> Any:
    """Decode the ``bytes`` in a raw reply; values that are not UTF-8 stay ``bytes``."""
    match value:
        case bytes():
            try:
                return value.decode()
            except UnicodeDecodeError:
                return value
        case list():
            return [decode_reply(item) for item in value]
        case tuple():
            return tuple(decode_reply(item) for item in value)
        case set():
            return {decode_reply(item) for item in value}
        case dict():
            return {decode_reply(key): decode_reply(item) for key, item in value.items()}
        case _:
            return value


def reply_sort_key(value: str | bytes) -> bytes:
    # UTF-8 byte order matches code point order, so text and binary members sort together
    return value.encode() if isinstance(value, str) else value
