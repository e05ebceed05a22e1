"""SORT and SORT ... STORE."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import Call, Plan, call, plan, returns

if TYPE_CHECKING:
    from django_kvcommands.commands import sort
    from django_kvcommands.translate import EnumTranslator


class SortDispatchMixin:
    """Mixin providing SORT for dispatchers."""

    translator: EnumTranslator

    def _sort_call(self, command: sort.Sort | sort.SortAndStore, **extra: Any) -> Call:
        kwargs: dict[str, Any] = {
            "desc": self.translator.order.to_native(command.order) == "DESC",
            "alpha": self.translator.sort_type.to_native(command.sort_type) == "ALPHA",
        }
        if command.offset > 0 or command.count >= 0:
            kwargs["start"] = max(command.offset, 0)
            kwargs["num"] = command.count
        if command.by:
            kwargs["by"] = command.by
        if command.gets:
            kwargs["get"] = list(command.gets)
        kwargs.update(extra)
        return call("sort", command.key, **kwargs)

    def _plan_sort(self, command: sort.Sort) -> Plan:
        return plan(self._sort_call(command), decode=returns("values", tuple))

    def _plan_sort_and_store(self, command: sort.SortAndStore) -> Plan:
        return plan(self._sort_call(command, store=command.destination_key), decode=returns("length"))
