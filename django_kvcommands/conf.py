"""Access to the ``KVCOMMANDS`` Django setting.

Example::

    KVCOMMANDS = {
        "SERVERS": {
            "default": {"HOST": "127.0.0.1", "PORT": 6379, "DB": 0, "ALLOW_ADMIN": True},
            "sessions": "rediss://:secret@cache.internal:6380/2?client_name=web",
        },
        "OPTIONS": {
            "ignore_exceptions": False,
            "health_check_interval": 30,
        },
    }
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from django_kvcommands.server import ServerIdentity


def get_settings() -> dict[str, Any]:
    return getattr(settings, "KVCOMMANDS", {})


def get_options() -> dict[str, Any]:
    """Registry and dispatcher options (client classes, fault policy, pass-through kwargs)."""
    return dict(get_settings().get("OPTIONS", {}))


def get_server(alias: str = "default") -> ServerIdentity:
    """The server identity configured under ``alias``."""
    servers = get_settings().get("SERVERS", {})
    try:
        server = servers[alias]
    except KeyError:
        msg = f"KVCOMMANDS['SERVERS'] has no server named {alias!r}"
        raise ImproperlyConfigured(msg) from None

    try:
        if isinstance(server, str):
            return ServerIdentity.from_url(server)
        return ServerIdentity.from_mapping(server)
    except (TypeError, ValueError) as e:
        msg = f"Invalid KVCOMMANDS server {alias!r}: {e}"
        raise ImproperlyConfigured(msg) from e
