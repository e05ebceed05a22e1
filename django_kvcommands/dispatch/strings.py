"""String commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.commands.strings import StringEntry, StringSetResult
from django_kvcommands.dispatch.base import Plan, call, millis_to_timedelta, numeric_kind, plan, require, returns
from django_kvcommands.numeric import coerce, numeric_call
from django_kvcommands.types import Bitwise

if TYPE_CHECKING:
    from django_kvcommands.commands import strings
    from django_kvcommands.translate import EnumTranslator


class StringDispatchMixin:
    """Mixin providing string operations for dispatchers."""

    translator: EnumTranslator

    def _plan_string_set_range(self, command: strings.StringSetRange) -> Plan:
        return plan(
            call("setrange", command.key, command.offset, command.value),
            decode=returns("new_value_length"),
        )

    def _plan_string_set_bit(self, command: strings.StringSetBit) -> Plan:
        return plan(
            call("setbit", command.key, command.offset, int(command.bit)),
            decode=returns("old_bit_value", bool),
        )

    def _plan_string_set(self, command: strings.StringSet) -> Plan:
        items = command.items
        require(items, "not have any data items")

        calls = []
        for item in items:
            condition = self.translator.when.to_native(item.when)
            calls.append(call("set", item.key, item.value, ex=item.expiry, nx=condition.nx, xx=condition.xx))

        def decode(results: list[Any]) -> dict[str, Any]:
            return {
                "results": tuple(
                    StringSetResult(item.key, bool(result)) for item, result in zip(items, results, strict=True)
                ),
            }

        return plan(*calls, decode=decode)

    def _plan_string_length(self, command: strings.StringLength) -> Plan:
        return plan(call("strlen", command.key), decode=returns("length"))

    def _string_numeric(self, command: strings.StringIncrement | strings.StringDecrement, *, negate: bool) -> Plan:
        kind = numeric_kind(command.kind)
        method, amount = numeric_call(kind, command.value, integral="incrby", floating="incrbyfloat", negate=negate)

        def decode(results: list[Any]) -> dict[str, Any]:
            return {"key": command.key, "new_value": coerce(kind, results[0])}

        return plan(call(method, command.key, amount), decode=decode)

    def _plan_string_increment(self, command: strings.StringIncrement) -> Plan:
        return self._string_numeric(command, negate=False)

    def _plan_string_decrement(self, command: strings.StringDecrement) -> Plan:
        return self._string_numeric(command, negate=True)

    def _plan_string_get_with_expiry(self, command: strings.StringGetWithExpiry) -> Plan:
        def decode(results: list[Any]) -> dict[str, Any]:
            value, ttl = results
            return {"value": value, "expiry": millis_to_timedelta(ttl)}

        return plan(call("get", command.key), call("pttl", command.key), decode=decode)

    def _plan_string_get_set(self, command: strings.StringGetSet) -> Plan:
        return plan(call("getset", command.key, command.value), decode=returns("old_value"))

    def _plan_string_get_range(self, command: strings.StringGetRange) -> Plan:
        return plan(
            call("getrange", command.key, command.start, command.end),
            decode=returns("value", lambda value: value or ""),
        )

    def _plan_string_get_bit(self, command: strings.StringGetBit) -> Plan:
        return plan(call("getbit", command.key, command.offset), decode=returns("bit", bool))

    def _plan_string_get(self, command: strings.StringGet) -> Plan:
        keys = command.keys
        require(keys, "keys is null or empty")

        def decode(results: list[Any]) -> dict[str, Any]:
            values = results[0]
            return {"values": tuple(StringEntry(key, value) for key, value in zip(keys, values, strict=True))}

        return plan(call("mget", list(keys)), decode=decode)

    def _plan_string_bit_position(self, command: strings.StringBitPosition) -> Plan:
        def decode(results: list[Any]) -> dict[str, Any]:
            position = results[0]
            return {"position": position, "has_value": position >= 0}

        return plan(call("bitpos", command.key, int(command.bit), command.start, command.end), decode=decode)

    def _plan_string_bit_operation(self, command: strings.StringBitOperation) -> Plan:
        require(command.keys, "keys is null or empty")
        bitwise = self.translator.bitwise.canonical(command.bitwise)
        # NOT takes exactly one source
        keys = command.keys[:1] if bitwise is Bitwise.NOT else command.keys
        return plan(
            call("bitop", self.translator.bitwise.to_native(bitwise), command.destination_key, *keys),
            decode=returns("destination_value_length"),
        )

    def _plan_string_bit_count(self, command: strings.StringBitCount) -> Plan:
        return plan(call("bitcount", command.key, command.start, command.end), decode=returns("bit_count"))

    def _plan_string_append(self, command: strings.StringAppend) -> Plan:
        return plan(call("append", command.key, command.value), decode=returns("new_value_length"))
