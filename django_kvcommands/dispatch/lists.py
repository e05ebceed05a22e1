"""List commands. Indexes are passed through unchanged, so -1 is the last element."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import Plan, call, plan, require, returns

if TYPE_CHECKING:
    from django_kvcommands.commands import lists


def _insert_decoder(results: list[Any]) -> dict[str, Any]:
    # LINSERT replies -1 for a missing pivot and 0 for a missing key
    length = results[0]
    return {"new_list_length": length, "has_insert": length > 0}


class ListDispatchMixin:
    """Mixin providing list operations for dispatchers."""

    def _plan_list_trim(self, command: lists.ListTrim) -> Plan:
        return plan(call("ltrim", command.key, command.start, command.stop))

    def _plan_list_set_by_index(self, command: lists.ListSetByIndex) -> Plan:
        return plan(call("lset", command.key, command.index, command.value))

    def _plan_list_right_push(self, command: lists.ListRightPush) -> Plan:
        require(command.values, "values is null or empty")
        return plan(call("rpush", command.key, *command.values), decode=returns("new_list_length"))

    def _plan_list_left_push(self, command: lists.ListLeftPush) -> Plan:
        require(command.values, "values is null or empty")
        return plan(call("lpush", command.key, *command.values), decode=returns("new_list_length"))

    def _plan_list_right_pop_left_push(self, command: lists.ListRightPopLeftPush) -> Plan:
        return plan(
            call("rpoplpush", command.source_key, command.destination_key),
            decode=returns("pop_value"),
        )

    def _plan_list_right_pop(self, command: lists.ListRightPop) -> Plan:
        return plan(call("rpop", command.key), decode=returns("pop_value"))

    def _plan_list_left_pop(self, command: lists.ListLeftPop) -> Plan:
        return plan(call("lpop", command.key), decode=returns("pop_value"))

    def _plan_list_remove(self, command: lists.ListRemove) -> Plan:
        return plan(call("lrem", command.key, command.count, command.value), decode=returns("remove_count"))

    def _plan_list_range(self, command: lists.ListRange) -> Plan:
        return plan(call("lrange", command.key, command.start, command.stop), decode=returns("values", tuple))

    def _plan_list_length(self, command: lists.ListLength) -> Plan:
        return plan(call("llen", command.key), decode=returns("length"))

    def _plan_list_insert_before(self, command: lists.ListInsertBefore) -> Plan:
        return plan(call("linsert", command.key, "BEFORE", command.pivot, command.value), decode=_insert_decoder)

    def _plan_list_insert_after(self, command: lists.ListInsertAfter) -> Plan:
        return plan(call("linsert", command.key, "AFTER", command.pivot, command.value), decode=_insert_decoder)

    def _plan_list_get_by_index(self, command: lists.ListGetByIndex) -> Plan:
        return plan(call("lindex", command.key, command.index), decode=returns("value"))
