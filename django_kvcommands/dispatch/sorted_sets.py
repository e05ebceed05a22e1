"""Sorted set commands.

Score bounds are rendered as ``1.5`` / ``(1.5`` / ``-inf``, lexicographical
bounds as ``[a`` / ``(a`` / ``-`` / ``+``. Start is always the low end of the
range; a descending order only swaps the argument order on the wire.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.commands.sorted_sets import SortedSetMember
from django_kvcommands.dispatch.base import Call, Plan, call, plan, require, returns
from django_kvcommands.translate import lex_bound, score_bound

if TYPE_CHECKING:
    from django_kvcommands.commands import sorted_sets
    from django_kvcommands.translate import EnumTranslator
    from django_kvcommands.types import RangeExclude, SortedOrder


def _limit(offset: int, count: int) -> dict[str, int]:
    """``LIMIT`` kwargs; omitted when the whole range is wanted."""
    if offset <= 0 and count < 0:
        return {}
    return {"start": max(offset, 0), "num": count}


def _members_with_scores(pairs: list[tuple[str, float]]) -> tuple[SortedSetMember, ...]:
    return tuple(SortedSetMember(member, float(score)) for member, score in pairs)


class SortedSetDispatchMixin:
    """Mixin providing sorted set operations for dispatchers."""

    translator: EnumTranslator

    def _descending(self, order: SortedOrder) -> bool:
        return self.translator.order.to_native(order) == "DESC"

    def _score_range(self, start: float, stop: float, exclude: RangeExclude) -> tuple[str, str]:
        exclusion = self.translator.exclude.to_native(exclude)
        return score_bound(start, exclusive=exclusion.start), score_bound(stop, exclusive=exclusion.stop)

    def _lex_range(self, low: str, high: str, exclude: RangeExclude) -> tuple[str, str]:
        exclusion = self.translator.exclude.to_native(exclude)
        return (
            lex_bound(low, exclusive=exclusion.start, low=True),
            lex_bound(high, exclusive=exclusion.stop, low=False),
        )

    def _plan_sorted_set_score(self, command: sorted_sets.SortedSetScore) -> Plan:
        return plan(call("zscore", command.key, command.member), decode=returns("score"))

    def _plan_sorted_set_remove_range_by_value(self, command: sorted_sets.SortedSetRemoveRangeByValue) -> Plan:
        low, high = self._lex_range(command.min_value, command.max_value, command.exclude)
        return plan(call("zremrangebylex", command.key, low, high), decode=returns("remove_count"))

    def _plan_sorted_set_remove_range_by_score(self, command: sorted_sets.SortedSetRemoveRangeByScore) -> Plan:
        low, high = self._score_range(command.start, command.stop, command.exclude)
        return plan(call("zremrangebyscore", command.key, low, high), decode=returns("remove_count"))

    def _plan_sorted_set_remove_range_by_rank(self, command: sorted_sets.SortedSetRemoveRangeByRank) -> Plan:
        return plan(
            call("zremrangebyrank", command.key, command.start, command.stop),
            decode=returns("remove_count"),
        )

    def _plan_sorted_set_remove(self, command: sorted_sets.SortedSetRemove) -> Plan:
        require(command.members, "members is null or empty")
        return plan(call("zrem", command.key, *command.members), decode=returns("remove_count"))

    def _plan_sorted_set_rank(self, command: sorted_sets.SortedSetRank) -> Plan:
        method = "zrevrank" if self._descending(command.order) else "zrank"
        return plan(call(method, command.key, command.member), decode=returns("rank"))

    def _plan_sorted_set_range_by_value(self, command: sorted_sets.SortedSetRangeByValue) -> Plan:
        low, high = self._lex_range(command.min_value, command.max_value, command.exclude)
        limit = _limit(command.offset, command.count)
        if self._descending(command.order):
            return plan(call("zrevrangebylex", command.key, high, low, **limit), decode=returns("members", tuple))
        return plan(call("zrangebylex", command.key, low, high, **limit), decode=returns("members", tuple))

    def _score_range_call(self, command: Any, *, withscores: bool) -> Call:
        low, high = self._score_range(command.start, command.stop, command.exclude)
        limit = _limit(command.offset, command.count)
        if self._descending(command.order):
            return call("zrevrangebyscore", command.key, high, low, withscores=withscores, **limit)
        return call("zrangebyscore", command.key, low, high, withscores=withscores, **limit)

    def _plan_sorted_set_range_by_score(self, command: sorted_sets.SortedSetRangeByScore) -> Plan:
        return plan(self._score_range_call(command, withscores=False), decode=returns("members", tuple))

    def _plan_sorted_set_range_by_score_with_scores(
        self,
        command: sorted_sets.SortedSetRangeByScoreWithScores,
    ) -> Plan:
        return plan(self._score_range_call(command, withscores=True), decode=returns("members", _members_with_scores))

    def _plan_sorted_set_range_by_rank(self, command: sorted_sets.SortedSetRangeByRank) -> Plan:
        return plan(
            call("zrange", command.key, command.start, command.stop, desc=self._descending(command.order)),
            decode=returns("members", tuple),
        )

    def _plan_sorted_set_range_by_rank_with_scores(
        self,
        command: sorted_sets.SortedSetRangeByRankWithScores,
    ) -> Plan:
        return plan(
            call(
                "zrange",
                command.key,
                command.start,
                command.stop,
                desc=self._descending(command.order),
                withscores=True,
            ),
            decode=returns("members", _members_with_scores),
        )

    def _plan_sorted_set_length_by_value(self, command: sorted_sets.SortedSetLengthByValue) -> Plan:
        low, high = self._lex_range(command.min_value, command.max_value, command.exclude)
        return plan(call("zlexcount", command.key, low, high), decode=returns("length"))

    def _plan_sorted_set_length(self, command: sorted_sets.SortedSetLength) -> Plan:
        low, high = self._score_range(command.min_score, command.max_score, command.exclude)
        return plan(call("zcount", command.key, low, high), decode=returns("length"))

    def _plan_sorted_set_increment(self, command: sorted_sets.SortedSetIncrement) -> Plan:
        return plan(call("zincrby", command.key, command.value, command.member), decode=returns("new_score", float))

    def _plan_sorted_set_decrement(self, command: sorted_sets.SortedSetDecrement) -> Plan:
        return plan(call("zincrby", command.key, -command.value, command.member), decode=returns("new_score", float))

    def _plan_sorted_set_combine_and_store(self, command: sorted_sets.SortedSetCombineAndStore) -> Plan:
        source_keys = command.source_keys
        require(source_keys, "source keys is null or empty")
        native = self.translator.set_operation.to_native(command.operation_type)

        if native == "DIFF":
            require(not command.weights, "weights are not supported for difference")
            return plan(
                call("zdiffstore", command.destination_key, list(source_keys)),
                decode=returns("new_set_length"),
            )

        keys: list[str] | dict[str, float] = list(source_keys)
        if command.weights:
            require(len(command.weights) == len(source_keys), "weights must pair with source keys")
            require(len(set(source_keys)) == len(source_keys), "weighted source keys must be distinct")
            keys = dict(zip(source_keys, command.weights, strict=True))

        method = "zunionstore" if native == "UNION" else "zinterstore"
        return plan(
            call(method, command.destination_key, keys, aggregate=self.translator.aggregate.to_native(command.aggregate)),
            decode=returns("new_set_length"),
        )

    def _plan_sorted_set_add(self, command: sorted_sets.SortedSetAdd) -> Plan:
        require(command.members, "members is null or empty")
        mapping = {item.member: item.score for item in command.members}
        return plan(call("zadd", command.key, mapping), decode=returns("add_count"))
