"""Key management commands."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import Plan, call, millis_to_timedelta, plan, require, returns
from django_kvcommands.types import When

if TYPE_CHECKING:
    from django_kvcommands.commands import keys
    from django_kvcommands.translate import EnumTranslator


class KeyDispatchMixin:
    """Mixin providing key operations for dispatchers."""

    translator: EnumTranslator

    def _plan_key_get_type(self, command: keys.KeyGetType) -> Plan:
        def decode(results: list[Any]) -> dict[str, Any]:
            native = results[0]
            if native in (None, "none"):
                return {"key_type": None}
            return {"key_type": self.translator.key_type.to_canonical(native)}

        return plan(call("type", command.key), decode=decode)

    def _plan_key_time_to_live(self, command: keys.KeyTimeToLive) -> Plan:
        return plan(call("pttl", command.key), decode=returns("time_to_live", millis_to_timedelta))

    def _plan_key_restore(self, command: keys.KeyRestore) -> Plan:
        # RESTORE takes the TTL in milliseconds, 0 for no expiry
        ttl = int(command.expiry.total_seconds() * 1000) if command.expiry else 0
        return plan(call("restore", command.key, ttl, command.value, replace=command.replace))

    def _plan_key_rename(self, command: keys.KeyRename) -> Plan:
        when = self.translator.when.canonical(command.when)
        require(when is not When.EXISTS, "rename only supports When.ALWAYS and When.NOT_EXISTS")
        if when is When.NOT_EXISTS:
            return plan(call("renamenx", command.key, command.new_key), decode=returns("renamed", bool))
        return plan(call("rename", command.key, command.new_key), decode=returns("renamed", bool))

    def _plan_key_random(self, command: keys.KeyRandom) -> Plan:
        return plan(call("randomkey"), decode=returns("key"))

    def _plan_key_persist(self, command: keys.KeyPersist) -> Plan:
        return plan(call("persist", command.key), decode=returns("persisted", bool))

    def _plan_key_move(self, command: keys.KeyMove) -> Plan:
        return plan(call("move", command.key, command.database), decode=returns("moved", bool))

    def _plan_key_migrate(self, command: keys.KeyMigrate) -> Plan:
        destination = command.destination
        flags = self.translator.migrate.to_native(command.option)
        return plan(
            call(
                "migrate",
                destination.host,
                destination.port,
                [command.key],
                destination.db,
                command.timeout,
                copy=flags.copy,
                replace=flags.replace,
                auth=destination.password,
            ),
        )

    def _plan_key_expire(self, command: keys.KeyExpire) -> Plan:
        expiry = command.expiry
        if expiry is None:
            expire_call = call("persist", command.key)
        elif isinstance(expiry, datetime):
            expire_call = call("expireat", command.key, expiry)
        else:
            expire_call = call("expire", command.key, expiry)
        return plan(expire_call, decode=returns("applied", bool))

    def _plan_key_dump(self, command: keys.KeyDump) -> Plan:
        return plan(call("dump", command.key), decode=returns("value"), raw=True)

    def _plan_key_delete(self, command: keys.KeyDelete) -> Plan:
        require(command.keys, "keys is null or empty")
        return plan(call("delete", *command.keys), decode=returns("delete_count"))

    def _plan_key_exists(self, command: keys.KeyExists) -> Plan:
        require(command.keys, "keys is null or empty")
        return plan(call("exists", *command.keys), decode=returns("key_count"))
