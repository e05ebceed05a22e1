"""Connection registry: one client handle per server identity."""

from __future__ import annotations

import asyncio
import logging
import threading
import weakref
from collections import defaultdict
from typing import TYPE_CHECKING, Any

import redis
import redis.asyncio
from django.utils.module_loading import import_string
from redis.exceptions import ConnectionError as RedisConnectionError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from django_kvcommands.server import ServerIdentity

logger = logging.getLogger(__name__)

# Known options that we handle explicitly (not passed to the client)
_KNOWN_OPTIONS = frozenset(
    {
        "client_class",
        "async_client_class",
        "verify_connections",
        "ignore_exceptions",
        "log_ignored_exceptions",
        "strict_enums",
    },
)


class ConnectionRegistry:
    """Owns the mapping from server identity to an established client.

    Handles are created on first use and reused for every later command on an
    equal identity. Creation is serialized per identity, so concurrent first
    use builds exactly one handle while other identities connect in parallel.
    A failed connect is not cached; the next ``acquire`` tries again. Sync
    handles are closed by :meth:`invalidate` and :meth:`close`, async ones by
    :meth:`ainvalidate` and :meth:`aclose`.

    Async handles are cached per running event loop in a WeakKeyDictionary,
    so a loop that is garbage collected takes its handles with it.
    """

    client_class: Any = redis.Redis
    async_client_class: Any = redis.asyncio.Redis

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options = dict(options or {})

        # Client classes - accept class or string path
        client_class = self.options.get("client_class", self.client_class)
        if isinstance(client_class, str):
            client_class = import_string(client_class)
        self.client_class = client_class

        async_client_class = self.options.get("async_client_class", self.async_client_class)
        if isinstance(async_client_class, str):
            async_client_class = import_string(async_client_class)
        self.async_client_class = async_client_class

        self.verify_connections = self.options.get("verify_connections", True)

        self._handles: dict[str, Any] = {}
        self._lock = threading.Lock()
        self._key_locks: defaultdict[str, threading.Lock] = defaultdict(threading.Lock)
        self._async_handles: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, dict[str, Any]] = (
            weakref.WeakKeyDictionary()
        )
        self._async_locks: weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock] = (
            weakref.WeakKeyDictionary()
        )

    def __contains__(self, identity: ServerIdentity) -> bool:
        return identity.key in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def _get_client_options(self, identity: ServerIdentity) -> dict[str, Any]:
        """Constructor kwargs for ``identity``.

        Unknown options are passed through to the client, matching Django's
        behavior for cache OPTIONS. A failed DNS lookup is reported as a
        redis ``ConnectionError``.
        """
        try:
            client_options = identity.connection_kwargs()
        except OSError as e:
            msg = f"Error resolving {identity.host}: {e}"
            raise RedisConnectionError(msg) from e
        for key, value in self.options.items():
            if key not in _KNOWN_OPTIONS:
                client_options[key] = value
        return client_options

    # =========================================================================
    # Sync handles
    # =========================================================================

    def _key_lock(self, key: str) -> threading.Lock:
        with self._lock:
            return self._key_locks[key]

    def acquire(self, identity: ServerIdentity) -> Any:
        """Return the client for ``identity``, connecting on first use.

        Creation is serialized per identity; a slow server only blocks
        callers waiting for that same identity.
        """
        key = identity.key
        handle = self._handles.get(key)
        if handle is not None:
            return handle

        with self._key_lock(key):
            handle = self._handles.get(key)
            if handle is None:
                handle = self._connect(identity)
                with self._lock:
                    self._handles[key] = handle
                logger.debug("Created connection handle for %s", identity.endpoint)
            return handle

    def _connect(self, identity: ServerIdentity) -> Any:
        client = self.client_class(**self._get_client_options(identity))
        if self.verify_connections:
            try:
                client.ping()
            except Exception:
                client.close()
                raise
        return client

    def invalidate(self, identity: ServerIdentity) -> bool:
        """Drop and close the handle for ``identity``. Returns whether one existed."""
        with self._lock:
            handle = self._handles.pop(identity.key, None)
        if handle is None:
            return False
        handle.close()
        logger.debug("Invalidated connection handle for %s", identity.endpoint)
        return True

    def close(self) -> None:
        """Close every sync handle. Async handles are closed by :meth:`aclose`."""
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
        for handle in handles:
            handle.close()

    # =========================================================================
    # Async handles
    # =========================================================================

    def _loop_state(self) -> tuple[dict[str, Any], asyncio.Lock]:
        loop = asyncio.get_running_loop()
        if loop not in self._async_handles:
            self._async_handles[loop] = {}
            self._async_locks[loop] = asyncio.Lock()
        return self._async_handles[loop], self._async_locks[loop]

    async def aacquire(self, identity: ServerIdentity) -> Any:
        """Return the async client for ``identity`` on the running event loop."""
        handles, lock = self._loop_state()
        key = identity.key
        handle = handles.get(key)
        if handle is not None:
            return handle

        async with lock:
            handle = handles.get(key)
            if handle is None:
                handle = await self._aconnect(identity)
                handles[key] = handle
                logger.debug("Created async connection handle for %s", identity.endpoint)
            return handle

    async def _aconnect(self, identity: ServerIdentity) -> Any:
        client = self.async_client_class(**self._get_client_options(identity))
        if self.verify_connections:
            try:
                await client.ping()
            except Exception:
                await client.aclose()
                raise
        return client

    async def ainvalidate(self, identity: ServerIdentity) -> bool:
        handles, lock = self._loop_state()
        async with lock:
            handle = handles.pop(identity.key, None)
        if handle is None:
            return False
        await handle.aclose()
        logger.debug("Invalidated async connection handle for %s", identity.endpoint)
        return True

    async def aclose(self) -> None:
        """Close the async handles of the running event loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running event loop
            return

        handles = self._async_handles.pop(loop, None)
        if handles is not None:
            for handle in handles.values():
                await handle.aclose()
