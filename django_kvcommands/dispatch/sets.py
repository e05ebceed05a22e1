"""Set commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import Plan, call, plan, require, returns
from django_kvcommands.translate import reply_sort_key

if TYPE_CHECKING:
    from django_kvcommands.commands import sets
    from django_kvcommands.translate import EnumTranslator
    from django_kvcommands.types import SetOperation

# Native set operation -> command prefix (SUNION, SINTER, SDIFF)
_SET_COMMANDS = {"UNION": "sunion", "INTER": "sinter", "DIFF": "sdiff"}


def _sorted_tuple(members: Any) -> tuple[str | bytes, ...]:
    return tuple(sorted(members or (), key=reply_sort_key))


class SetDispatchMixin:
    """Mixin providing set operations for dispatchers."""

    translator: EnumTranslator

    def _set_command(self, operation: SetOperation) -> str:
        return _SET_COMMANDS[self.translator.set_operation.to_native(operation)]

    def _plan_set_remove(self, command: sets.SetRemove) -> Plan:
        require(command.members, "members is null or empty")
        return plan(call("srem", command.key, *command.members), decode=returns("remove_count"))

    def _plan_set_random_members(self, command: sets.SetRandomMembers) -> Plan:
        return plan(call("srandmember", command.key, command.count), decode=returns("members", tuple))

    def _plan_set_random_member(self, command: sets.SetRandomMember) -> Plan:
        return plan(call("srandmember", command.key), decode=returns("member"))

    def _plan_set_pop(self, command: sets.SetPop) -> Plan:
        return plan(call("spop", command.key), decode=returns("pop_value"))

    def _plan_set_move(self, command: sets.SetMove) -> Plan:
        return plan(
            call("smove", command.source_key, command.destination_key, command.member),
            decode=returns("move_success", bool),
        )

    def _plan_set_members(self, command: sets.SetMembers) -> Plan:
        return plan(call("smembers", command.key), decode=returns("members", _sorted_tuple))

    def _plan_set_length(self, command: sets.SetLength) -> Plan:
        return plan(call("scard", command.key), decode=returns("length"))

    def _plan_set_contains(self, command: sets.SetContains) -> Plan:
        return plan(call("sismember", command.key, command.member), decode=returns("exists", bool))

    def _plan_set_combine(self, command: sets.SetCombine) -> Plan:
        require(command.keys, "keys is null or empty")
        return plan(
            call(self._set_command(command.operation_type), list(command.keys)),
            decode=returns("combine_values", _sorted_tuple),
        )

    def _plan_set_combine_and_store(self, command: sets.SetCombineAndStore) -> Plan:
        require(command.source_keys, "source keys is null or empty")
        return plan(
            call(
                f"{self._set_command(command.operation_type)}store",
                command.destination_key,
                list(command.source_keys),
            ),
            decode=returns("count"),
        )

    def _plan_set_add(self, command: sets.SetAdd) -> Plan:
        require(command.members, "members is null or empty")
        return plan(call("sadd", command.key, *command.members), decode=returns("add_count"))
