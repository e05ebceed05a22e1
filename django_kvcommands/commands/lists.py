from __future__ import annotations

from dataclasses import dataclass

from django_kvcommands.commands.base import Command, KeyCommand, Response

# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class ListTrimResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ListSetByIndexResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPushResponse(Response):
    new_list_length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLeftPushResponse(Response):
    new_list_length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPopLeftPushResponse(Response):
    pop_value: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPopResponse(Response):
    pop_value: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLeftPopResponse(Response):
    pop_value: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRemoveResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRangeResponse(Response):
    values: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLengthResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class ListInsertBeforeResponse(Response):
    new_list_length: int = 0
    has_insert: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ListInsertAfterResponse(Response):
    new_list_length: int = 0
    has_insert: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ListGetByIndexResponse(Response):
    value: str | None = None


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class ListTrim(KeyCommand):
    """Keep only the elements between ``start`` and ``stop`` (inclusive)."""

    response_class = ListTrimResponse

    start: int = 0
    stop: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class ListSetByIndex(KeyCommand):
    response_class = ListSetByIndexResponse

    index: int
    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPush(KeyCommand):
    response_class = ListRightPushResponse

    values: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLeftPush(KeyCommand):
    response_class = ListLeftPushResponse

    values: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPopLeftPush(Command):
    response_class = ListRightPopLeftPushResponse

    source_key: str
    destination_key: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRightPop(KeyCommand):
    response_class = ListRightPopResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLeftPop(KeyCommand):
    response_class = ListLeftPopResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRemove(KeyCommand):
    """Remove ``count`` occurrences of ``value``.

    A positive count removes from the head, a negative one from the tail and
    zero removes all of them.
    """

    response_class = ListRemoveResponse

    value: str
    count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class ListRange(KeyCommand):
    response_class = ListRangeResponse

    start: int = 0
    stop: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class ListLength(KeyCommand):
    response_class = ListLengthResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class ListInsertBefore(KeyCommand):
    response_class = ListInsertBeforeResponse

    pivot: str
    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ListInsertAfter(KeyCommand):
    response_class = ListInsertAfterResponse

    pivot: str
    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ListGetByIndex(KeyCommand):
    response_class = ListGetByIndexResponse

    index: int
