"""Server administration commands, backed by :class:`ServerIntrospection`.

Operations that read or change server configuration or flush data need
``ServerIdentity.allow_admin``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django_kvcommands.dispatch.base import require

if TYPE_CHECKING:
    from django_kvcommands.commands import server
    from django_kvcommands.commands.base import Command
    from django_kvcommands.introspection import ServerIntrospection


def _require_admin(command: Command) -> None:
    require(command.server.allow_admin, f"{command.operation} requires allow_admin on {command.server.endpoint}")


class ServerDispatchMixin:
    """Mixin providing administrative flows for dispatchers."""

    introspection: ServerIntrospection

    def _run_get_all_databases(self, command: server.GetAllDatabases) -> dict[str, Any]:
        _require_admin(command)
        return {"databases": self.introspection.get_databases(command.server)}

    def _run_get_keys(self, command: server.GetKeys) -> dict[str, Any]:
        return {"paging": self.introspection.get_keys(command.server, command.query)}

    def _run_clear_data(self, command: server.ClearData) -> dict[str, Any]:
        require(command.databases, "databaselist is null or empty")
        _require_admin(command)
        self.introspection.clear_data(command.server, command.databases)
        return {}

    def _run_get_key_detail(self, command: server.GetKeyDetail) -> dict[str, Any]:
        return {"item": self.introspection.key_detail(command.server, command.key)}

    def _run_get_server_config(self, command: server.GetServerConfig) -> dict[str, Any]:
        _require_admin(command)
        return {"config": self.introspection.read_config(command.server)}

    def _run_save_server_config(self, command: server.SaveServerConfig) -> dict[str, Any]:
        require(command.config is not None, "server config is null")
        _require_admin(command)
        self.introspection.save_config(command.server, command.config)
        return {}

    async def _arun_get_all_databases(self, command: server.GetAllDatabases) -> dict[str, Any]:
        _require_admin(command)
        return {"databases": await self.introspection.aget_databases(command.server)}

    async def _arun_get_keys(self, command: server.GetKeys) -> dict[str, Any]:
        return {"paging": await self.introspection.aget_keys(command.server, command.query)}

    async def _arun_clear_data(self, command: server.ClearData) -> dict[str, Any]:
        require(command.databases, "databaselist is null or empty")
        _require_admin(command)
        await self.introspection.aclear_data(command.server, command.databases)
        return {}

    async def _arun_get_key_detail(self, command: server.GetKeyDetail) -> dict[str, Any]:
        return {"item": await self.introspection.akey_detail(command.server, command.key)}

    async def _arun_get_server_config(self, command: server.GetServerConfig) -> dict[str, Any]:
        _require_admin(command)
        return {"config": await self.introspection.aread_config(command.server)}

    async def _arun_save_server_config(self, command: server.SaveServerConfig) -> dict[str, Any]:
        require(command.config is not None, "server config is null")
        _require_admin(command)
        await self.introspection.asave_config(command.server, command.config)
        return {}
