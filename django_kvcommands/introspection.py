"""Administrative flows: key listing, key detail, databases and server config.

These run several round trips per call and work on registry handles
directly. Faults propagate to the caller; the dispatcher's server family
applies its fault policy around them.
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import TYPE_CHECKING, Any

from django_kvcommands.commands.server import CacheDatabase, CacheDataItem, CachePaging, KeyQuery
from django_kvcommands.commands.sorted_sets import SortedSetMember
from django_kvcommands.config import ServerConfig, parse_config, parse_int, serialize_config
from django_kvcommands.translate import EnumTranslator, decode_reply, reply_sort_key
from django_kvcommands.types import KeyMatchMode, KeyType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from django_kvcommands.pool import ConnectionRegistry
    from django_kvcommands.server import ServerIdentity

logger = logging.getLogger(__name__)


def build_pattern(token: str, mode: KeyMatchMode = KeyMatchMode.CONTAINS) -> str:
    """Glob pattern for a key query: ``*token*``, ``token*`` or ``*token``."""
    if not token:
        return "*"
    match KeyMatchMode(mode):
        case KeyMatchMode.STARTS_WITH:
            return f"{token}*"
        case KeyMatchMode.ENDS_WITH:
            return f"*{token}"
        case _:
            return f"*{token}*"


def _sorted_list(members: Iterable[str | bytes]) -> list[str | bytes]:
    return sorted(members, key=reply_sort_key)


def _with_scores(pairs: Iterable[tuple[str, float]]) -> list[SortedSetMember]:
    return [SortedSetMember(member, float(score)) for member, score in pairs]


type Fetch = tuple[str, tuple[Any, ...], dict[str, Any], Callable[[Any], Any] | None]


def _detail_fetch(key: str, key_type: KeyType) -> Fetch:
    """The single fetch that materializes a key of ``key_type``: method, args, kwargs, converter."""
    match key_type:
        case KeyType.LIST:
            return "lrange", (key, 0, -1), {}, None
        case KeyType.SET:
            return "smembers", (key,), {}, _sorted_list
        case KeyType.SORTED_SET:
            return "zrange", (key, 0, -1), {"withscores": True}, _with_scores
        case KeyType.HASH:
            return "hgetall", (key,), {}, dict
        case _:
            return "get", (key,), {}, None


class ServerIntrospection:
    """Key scanning, key detail and server configuration for one registry.

    Key detail fully materializes lists, sets and hashes; it is meant for
    administrative use, not hot paths.
    """

    def __init__(self, registry: ConnectionRegistry, translator: EnumTranslator | None = None) -> None:
        self.registry = registry
        self.translator = translator or EnumTranslator()

    def _key_type(self, native: str | bytes | None) -> KeyType | None:
        native = decode_reply(native)
        if native in (None, "none"):
            return None
        return self.translator.key_type.to_canonical(native)

    def _paging(self, query: KeyQuery, total: int, typed: list[tuple[str, str]]) -> CachePaging:
        items = []
        for name, native in typed:
            key_type = self._key_type(native)
            if key_type is None:
                # expired between SCAN and TYPE
                logger.debug("Key %r vanished while listing", name)
                continue
            items.append(CacheDataItem(name, key_type))
        return CachePaging(query.page, query.page_size, int(total), tuple(items))

    # =========================================================================
    # Sync
    # =========================================================================

    def get_keys(self, identity: ServerIdentity, query: KeyQuery) -> CachePaging:
        """One page of keys matching ``query``, each with its type."""
        client = self.registry.acquire(identity)
        pattern = build_pattern(query.match_key, query.match_mode)
        scanned = client.scan_iter(match=pattern, count=query.page_size)
        keys = [decode_reply(key) for key in islice(scanned, query.offset, query.offset + query.page_size)]
        typed = [(key, client.type(key)) for key in keys]
        return self._paging(query, client.dbsize(), typed)

    def key_detail(self, identity: ServerIdentity, key: str) -> CacheDataItem | None:
        """The key's type and full value, or ``None`` if it does not exist."""
        client = self.registry.acquire(identity)
        key_type = self._key_type(client.type(key))
        if key_type is None:
            return None
        method, args, kwargs, convert = _detail_fetch(key, key_type)
        value = decode_reply(getattr(client, method)(*args, **kwargs))
        return CacheDataItem(key, key_type, convert(value) if convert is not None else value)

    def get_databases(self, identity: ServerIdentity) -> tuple[CacheDatabase, ...]:
        client = self.registry.acquire(identity)
        count = parse_int(decode_reply(client.config_get("databases")).get("databases", ""))
        return tuple(CacheDatabase(index, f"db{index}") for index in range(count))

    def clear_data(self, identity: ServerIdentity, databases: Iterable[int]) -> None:
        """Flush every listed database, each through its own handle."""
        for index in databases:
            self.registry.acquire(identity.with_database(index)).flushdb()
            logger.debug("Flushed %s", identity.with_database(index).endpoint)

    def read_config(self, identity: ServerIdentity) -> ServerConfig:
        client = self.registry.acquire(identity)
        return parse_config(decode_reply(client.config_get("*")))

    def save_config(self, identity: ServerIdentity, config: ServerConfig) -> None:
        """Write every writable setting, then persist them with ``CONFIG REWRITE``."""
        client = self.registry.acquire(identity)
        for name, value in serialize_config(config):
            client.config_set(name, value)
        client.config_rewrite()

    # =========================================================================
    # Async
    # =========================================================================

    async def aget_keys(self, identity: ServerIdentity, query: KeyQuery) -> CachePaging:
        client = await self.registry.aacquire(identity)
        pattern = build_pattern(query.match_key, query.match_mode)
        keys: list[str] = []
        position = 0
        async for key in client.scan_iter(match=pattern, count=query.page_size):
            if position >= query.offset:
                keys.append(decode_reply(key))
                if len(keys) == query.page_size:
                    break
            position += 1
        typed = [(key, await client.type(key)) for key in keys]
        return self._paging(query, await client.dbsize(), typed)

    async def akey_detail(self, identity: ServerIdentity, key: str) -> CacheDataItem | None:
        client = await self.registry.aacquire(identity)
        key_type = self._key_type(await client.type(key))
        if key_type is None:
            return None
        method, args, kwargs, convert = _detail_fetch(key, key_type)
        value = decode_reply(await getattr(client, method)(*args, **kwargs))
        return CacheDataItem(key, key_type, convert(value) if convert is not None else value)

    async def aget_databases(self, identity: ServerIdentity) -> tuple[CacheDatabase, ...]:
        client = await self.registry.aacquire(identity)
        count = parse_int(decode_reply(await client.config_get("databases")).get("databases", ""))
        return tuple(CacheDatabase(index, f"db{index}") for index in range(count))

    async def aclear_data(self, identity: ServerIdentity, databases: Iterable[int]) -> None:
        for index in databases:
            client = await self.registry.aacquire(identity.with_database(index))
            await client.flushdb()
            logger.debug("Flushed %s", identity.with_database(index).endpoint)

    async def aread_config(self, identity: ServerIdentity) -> ServerConfig:
        client = await self.registry.aacquire(identity)
        return parse_config(decode_reply(await client.config_get("*")))

    async def asave_config(self, identity: ServerIdentity, config: ServerConfig) -> None:
        client = await self.registry.aacquire(identity)
        for name, value in serialize_config(config):
            await client.config_set(name, value)
        await client.config_rewrite()
