"""Server identities: everything that decides which connection a command uses."""

from __future__ import annotations

import dataclasses
import hashlib
import logging
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self
from urllib.parse import parse_qs, unquote, urlencode, urlparse

from redis.connection import to_bool

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6379

# Upper-case settings keys understood by ServerIdentity.from_mapping
_MAPPING_KEYS = {
    "HOST": "host",
    "PORT": "port",
    "DB": "db",
    "PASSWORD": "password",
    "USERNAME": "username",
    "CLIENT_NAME": "client_name",
    "SSL": "ssl",
    "SSL_HOST": "ssl_host",
    "CONNECT_TIMEOUT": "connect_timeout",
    "SYNC_TIMEOUT": "sync_timeout",
    "ALLOW_ADMIN": "allow_admin",
    "RESOLVE_DNS": "resolve_dns",
    "TIE_BREAKER": "tie_breaker",
}

# URL query parameters and their parsers
_QUERY_PARSERS = {
    "client_name": str,
    "ssl_host": str,
    "connect_timeout": int,
    "sync_timeout": int,
    "allow_admin": to_bool,
    "resolve_dns": to_bool,
    "tie_breaker": str,
}


def _digest(secret: str) -> str:
    return hashlib.sha1(secret.encode(), usedforsecurity=False).hexdigest()[:12]


@dataclass(frozen=True, slots=True)
class ServerIdentity:
    """Connection parameters of one logical server and database.

    Timeouts are in milliseconds. Two identities with equal fields share one
    connection handle in a :class:`~django_kvcommands.pool.ConnectionRegistry`.
    """

    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    db: int = 0
    password: str | None = dataclasses.field(default=None, repr=False)
    username: str | None = None
    client_name: str | None = None
    ssl: bool = False
    ssl_host: str | None = None
    connect_timeout: int = 5000
    sync_timeout: int = 5000
    allow_admin: bool = False
    resolve_dns: bool = False
    tie_breaker: str | None = None

    @property
    def endpoint(self) -> str:
        """``host:port/db``, safe to log."""
        return f"{self.host}:{self.port}/{self.db}"

    @property
    def key(self) -> str:
        """Canonical registry key: the endpoint plus every discriminating field.

        Credentials only contribute a digest.
        """
        params: dict[str, Any] = {}
        if self.username:
            params["user"] = self.username
        if self.password:
            params["auth"] = _digest(self.password)
        if self.client_name:
            params["name"] = self.client_name
        if self.ssl:
            params["ssl"] = 1
        if self.ssl_host:
            params["ssl_host"] = self.ssl_host
        if self.tie_breaker:
            params["tie"] = self.tie_breaker
        params["connect"] = self.connect_timeout
        params["sync"] = self.sync_timeout
        if self.allow_admin:
            params["admin"] = 1
        if self.resolve_dns:
            params["dns"] = 1
        return f"{self.endpoint}?{urlencode(sorted(params.items()))}"

    def with_database(self, db: int) -> Self:
        return dataclasses.replace(self, db=db)

    def connection_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the redis-py client constructor."""
        host = self.host
        if self.resolve_dns:
            host = socket.gethostbyname(self.host)
            logger.debug("Resolved %s to %s", self.host, host)

        kwargs: dict[str, Any] = {
            "host": host,
            "port": self.port,
            "db": self.db,
            "password": self.password,
            "username": self.username,
            "client_name": self.client_name,
            "socket_connect_timeout": self.connect_timeout / 1000,
            "socket_timeout": self.sync_timeout / 1000,
        }
        if self.ssl:
            kwargs["ssl"] = True
            if self.ssl_host:
                kwargs["ssl_check_hostname"] = True
        return kwargs

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> Self:
        """Build an identity from a ``redis://`` or ``rediss://`` URL.

        Supported query parameters: ``db``, ``client_name``, ``ssl_host``,
        ``connect_timeout``, ``sync_timeout`` (milliseconds), ``allow_admin``,
        ``resolve_dns`` and ``tie_breaker``.
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("redis", "rediss"):
            msg = f"Unsupported URL scheme {parsed.scheme!r}, expected redis:// or rediss://"
            raise ValueError(msg)

        fields: dict[str, Any] = {
            "host": parsed.hostname or "127.0.0.1",
            "port": parsed.port or DEFAULT_PORT,
            "ssl": parsed.scheme == "rediss",
        }
        if parsed.username:
            fields["username"] = unquote(parsed.username)
        if parsed.password:
            fields["password"] = unquote(parsed.password)

        path = parsed.path.strip("/")
        if path:
            fields["db"] = int(path)

        for name, values in parse_qs(parsed.query).items():
            if name == "db":
                fields["db"] = int(values[0])
            elif name in _QUERY_PARSERS:
                fields[name] = _QUERY_PARSERS[name](values[0])

        fields.update(overrides)
        return cls(**fields)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Self:
        """Build an identity from a settings mapping with upper-case keys."""
        unknown = set(mapping) - set(_MAPPING_KEYS)
        if unknown:
            msg = f"Unknown server settings: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        return cls(**{_MAPPING_KEYS[name]: value for name, value in mapping.items()})
