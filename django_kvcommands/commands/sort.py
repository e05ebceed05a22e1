from __future__ import annotations

from dataclasses import dataclass

from django_kvcommands.commands.base import KeyCommand, Response
from django_kvcommands.types import SortedOrder, SortType


@dataclass(frozen=True, slots=True, kw_only=True)
class SortResponse(Response):
    values: tuple[str | None, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortAndStoreResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class Sort(KeyCommand):
    """Sort a list, set or sorted set.

    ``by`` and ``gets`` are external key patterns (``weight_*``, ``#``).
    ``offset``/``count`` are only sent when a limit is requested.
    """

    response_class = SortResponse

    offset: int = 0
    count: int = -1
    order: SortedOrder = SortedOrder.ASCENDING
    sort_type: SortType = SortType.NUMERIC
    by: str | None = None
    gets: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortAndStore(KeyCommand):
    response_class = SortAndStoreResponse

    destination_key: str
    offset: int = 0
    count: int = -1
    order: SortedOrder = SortedOrder.ASCENDING
    sort_type: SortType = SortType.NUMERIC
    by: str | None = None
    gets: tuple[str, ...] = ()
