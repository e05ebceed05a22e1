from __future__ import annotations

import math
from dataclasses import dataclass

from django_kvcommands.commands.base import Command, KeyCommand, Response
from django_kvcommands.types import Aggregate, RangeExclude, SetOperation, SortedOrder


@dataclass(frozen=True, slots=True)
class SortedSetMember:
    member: str
    score: float


# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetScoreResponse(Response):
    score: float | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByValueResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByScoreResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByRankResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveResponse(Response):
    remove_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRankResponse(Response):
    rank: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByValueResponse(Response):
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByScoreResponse(Response):
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByScoreWithScoresResponse(Response):
    members: tuple[SortedSetMember, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByRankResponse(Response):
    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByRankWithScoresResponse(Response):
    members: tuple[SortedSetMember, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetLengthByValueResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetLengthResponse(Response):
    length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetIncrementResponse(Response):
    new_score: float = 0.0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetDecrementResponse(Response):
    new_score: float = 0.0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetCombineAndStoreResponse(Response):
    new_set_length: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetAddResponse(Response):
    add_count: int = 0


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetScore(KeyCommand):
    response_class = SortedSetScoreResponse

    member: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByValue(KeyCommand):
    """Remove members between two lexicographical bounds; empty bounds are open."""

    response_class = SortedSetRemoveRangeByValueResponse

    min_value: str = ""
    max_value: str = ""
    exclude: RangeExclude = RangeExclude.NONE


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByScore(KeyCommand):
    response_class = SortedSetRemoveRangeByScoreResponse

    start: float
    stop: float
    exclude: RangeExclude = RangeExclude.NONE


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemoveRangeByRank(KeyCommand):
    response_class = SortedSetRemoveRangeByRankResponse

    start: int
    stop: int


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRemove(KeyCommand):
    response_class = SortedSetRemoveResponse

    members: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRank(KeyCommand):
    response_class = SortedSetRankResponse

    member: str
    order: SortedOrder = SortedOrder.ASCENDING


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByValue(KeyCommand):
    """Members between two lexicographical bounds.

    ``offset``/``count`` page through the range; a negative count returns
    everything after the offset.
    """

    response_class = SortedSetRangeByValueResponse

    min_value: str = ""
    max_value: str = ""
    exclude: RangeExclude = RangeExclude.NONE
    order: SortedOrder = SortedOrder.ASCENDING
    offset: int = 0
    count: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByScore(KeyCommand):
    response_class = SortedSetRangeByScoreResponse

    start: float = -math.inf
    stop: float = math.inf
    exclude: RangeExclude = RangeExclude.NONE
    order: SortedOrder = SortedOrder.ASCENDING
    offset: int = 0
    count: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByScoreWithScores(KeyCommand):
    response_class = SortedSetRangeByScoreWithScoresResponse

    start: float = -math.inf
    stop: float = math.inf
    exclude: RangeExclude = RangeExclude.NONE
    order: SortedOrder = SortedOrder.ASCENDING
    offset: int = 0
    count: int = -1


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByRank(KeyCommand):
    response_class = SortedSetRangeByRankResponse

    start: int = 0
    stop: int = -1
    order: SortedOrder = SortedOrder.ASCENDING


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetRangeByRankWithScores(KeyCommand):
    response_class = SortedSetRangeByRankWithScoresResponse

    start: int = 0
    stop: int = -1
    order: SortedOrder = SortedOrder.ASCENDING


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetLengthByValue(KeyCommand):
    response_class = SortedSetLengthByValueResponse

    min_value: str = ""
    max_value: str = ""
    exclude: RangeExclude = RangeExclude.NONE


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetLength(KeyCommand):
    response_class = SortedSetLengthResponse

    min_score: float = -math.inf
    max_score: float = math.inf
    exclude: RangeExclude = RangeExclude.NONE


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetIncrement(KeyCommand):
    response_class = SortedSetIncrementResponse

    member: str
    value: float


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetDecrement(KeyCommand):
    response_class = SortedSetDecrementResponse

    member: str
    value: float


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetCombineAndStore(Command):
    """Combine ``source_keys`` into ``destination_key``.

    ``weights`` pair positionally with ``source_keys``; difference takes
    neither weights nor an aggregate.
    """

    response_class = SortedSetCombineAndStoreResponse

    operation_type: SetOperation
    destination_key: str
    source_keys: tuple[str, ...]
    weights: tuple[float, ...] = ()
    aggregate: Aggregate = Aggregate.SUM


@dataclass(frozen=True, slots=True, kw_only=True)
class SortedSetAdd(KeyCommand):
    response_class = SortedSetAddResponse

    members: tuple[SortedSetMember, ...]
