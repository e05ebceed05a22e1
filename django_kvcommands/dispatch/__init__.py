from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from django_kvcommands import conf
from django_kvcommands.dispatch.base import BaseDispatcher, Call, Plan
from django_kvcommands.dispatch.hashes import HashDispatchMixin
from django_kvcommands.dispatch.keys import KeyDispatchMixin
from django_kvcommands.dispatch.lists import ListDispatchMixin
from django_kvcommands.dispatch.server import ServerDispatchMixin
from django_kvcommands.dispatch.sets import SetDispatchMixin
from django_kvcommands.dispatch.sort import SortDispatchMixin
from django_kvcommands.dispatch.sorted_sets import SortedSetDispatchMixin
from django_kvcommands.dispatch.strings import StringDispatchMixin
from django_kvcommands.introspection import ServerIntrospection
from django_kvcommands.pool import ConnectionRegistry
from django_kvcommands.translate import EnumTranslator

if TYPE_CHECKING:
    from collections.abc import Mapping


class CommandDispatcher(
    StringDispatchMixin,
    ListDispatchMixin,
    HashDispatchMixin,
    SetDispatchMixin,
    SortedSetDispatchMixin,
    KeyDispatchMixin,
    SortDispatchMixin,
    ServerDispatchMixin,
    BaseDispatcher,
):
    """Dispatcher for every command family.

    Example::

        registry = ConnectionRegistry()
        dispatcher = CommandDispatcher(registry)
        server = ServerIdentity(host="127.0.0.1", db=1)
        response = dispatcher.dispatch(StringAppend(server=server, key="greeting", value="!"))
        response.new_value_length
    """

    def __init__(self, registry: ConnectionRegistry, **kwargs: Any) -> None:
        super().__init__(registry, **kwargs)
        self.introspection = ServerIntrospection(registry, self.translator)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> Self:
        """Build a registry and dispatcher from an OPTIONS mapping."""
        return cls(
            ConnectionRegistry(options),
            translator=EnumTranslator(strict=options.get("strict_enums", False)),
            ignore_exceptions=options.get("ignore_exceptions", False),
            log_ignored_exceptions=options.get("log_ignored_exceptions", False),
        )

    @classmethod
    def from_settings(cls) -> Self:
        """Build a registry and dispatcher from ``settings.KVCOMMANDS['OPTIONS']``."""
        return cls.from_options(conf.get_options())


__all__ = [
    "BaseDispatcher",
    "Call",
    "CommandDispatcher",
    "HashDispatchMixin",
    "KeyDispatchMixin",
    "ListDispatchMixin",
    "Plan",
    "ServerDispatchMixin",
    "SetDispatchMixin",
    "SortDispatchMixin",
    "SortedSetDispatchMixin",
    "StringDispatchMixin",
]
