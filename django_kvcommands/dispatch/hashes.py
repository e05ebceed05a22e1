"""Hash commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import Plan, call, numeric_kind, plan, require, returns
from django_kvcommands.numeric import coerce, numeric_call

if TYPE_CHECKING:
    from django_kvcommands.commands import hashes


class HashDispatchMixin:
    """Mixin providing hash operations for dispatchers."""

    def _plan_hash_values(self, command: hashes.HashValues) -> Plan:
        return plan(call("hvals", command.key), decode=returns("values", tuple))

    def _plan_hash_set(self, command: hashes.HashSet) -> Plan:
        require(command.items, "hash values is null or empty")
        # Later pairs win for repeated fields, as with sequential HSETs
        return plan(call("hset", command.key, mapping=dict(command.items)))

    def _plan_hash_length(self, command: hashes.HashLength) -> Plan:
        return plan(call("hlen", command.key), decode=returns("length"))

    def _plan_hash_keys(self, command: hashes.HashKeys) -> Plan:
        return plan(call("hkeys", command.key), decode=returns("hash_fields", tuple))

    def _hash_numeric(self, command: hashes.HashIncrement | hashes.HashDecrement, *, negate: bool) -> Plan:
        kind = numeric_kind(command.kind)
        method, amount = numeric_call(kind, command.value, integral="hincrby", floating="hincrbyfloat", negate=negate)

        def decode(results: list[Any]) -> dict[str, Any]:
            return {"key": command.key, "hash_field": command.hash_field, "new_value": coerce(kind, results[0])}

        return plan(call(method, command.key, command.hash_field, amount), decode=decode)

    def _plan_hash_increment(self, command: hashes.HashIncrement) -> Plan:
        return self._hash_numeric(command, negate=False)

    def _plan_hash_decrement(self, command: hashes.HashDecrement) -> Plan:
        return self._hash_numeric(command, negate=True)

    def _plan_hash_get(self, command: hashes.HashGet) -> Plan:
        return plan(call("hget", command.key, command.hash_field), decode=returns("value"))

    def _plan_hash_get_all(self, command: hashes.HashGetAll) -> Plan:
        return plan(call("hgetall", command.key), decode=returns("values", dict))

    def _plan_hash_exists(self, command: hashes.HashExists) -> Plan:
        return plan(call("hexists", command.key, command.hash_field), decode=returns("has_field", bool))

    def _plan_hash_delete(self, command: hashes.HashDelete) -> Plan:
        require(command.hash_fields, "hash fields is null or empty")
        return plan(call("hdel", command.key, *command.hash_fields), decode=returns("delete_count"))

    def _plan_hash_scan(self, command: hashes.HashScan) -> Plan:
        def decode(results: list[Any]) -> dict[str, Any]:
            cursor, values = results[0]
            return {"values": dict(values), "cursor": int(cursor)}

        return plan(
            call("hscan", command.key, cursor=command.cursor, match=command.pattern, count=max(command.page_size, 1)),
            decode=decode,
        )
