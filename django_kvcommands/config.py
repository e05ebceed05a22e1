"""Structured projection of a server's ``CONFIG`` settings.

``CONFIG_SETTINGS`` is an ordered table; each entry parses one setting from
the text the server reports and, when the setting is writable, serializes
it back. Names the table does not know are ignored on read and never
written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from django_kvcommands.server import DEFAULT_PORT
from django_kvcommands.types import AppendFsync, LogLevel

logger = logging.getLogger(__name__)


class SavePoint(NamedTuple):
    """Snapshot after ``seconds`` if at least ``changes`` keys changed."""

    seconds: int
    changes: int


class MasterPointer(NamedTuple):
    host: str
    port: int = DEFAULT_PORT


@dataclass(slots=True)
class ServerConfig:
    daemonize: bool = False
    pid_file: str = ""
    port: int = DEFAULT_PORT
    host: str = ""
    timeout: int = 0
    log_level: LogLevel = LogLevel.NOTICE
    log_file: str = ""
    databases: int = 16
    save_points: list[SavePoint] = field(default_factory=list)
    rdb_compression: bool = True
    db_filename: str = "dump.rdb"
    dir: str = ""
    master: MasterPointer | None = None
    master_auth: str | None = field(default=None, repr=False)
    require_pass: str | None = field(default=None, repr=False)
    max_clients: int = 10000
    max_memory: int = 0
    append_only: bool = False
    append_filename: str = "appendonly.aof"
    append_fsync: AppendFsync = AppendFsync.EVERYSEC
    active_rehashing: bool = True
    include: str = ""


# =============================================================================
# Parse / serialize rules
# =============================================================================


def parse_bool(text: str) -> bool:
    return text.strip().lower() == "yes"


def parse_bool_default_true(text: str) -> bool:
    """``yes``/``no``, where an empty value means enabled."""
    return not text.strip() or parse_bool(text)


def serialize_bool(value: bool) -> str:
    return "yes" if value else "no"


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def parse_port(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return DEFAULT_PORT


def parse_log_level(text: str) -> LogLevel:
    try:
        return LogLevel(text.strip().lower())
    except ValueError:
        return LogLevel.VERBOSE


def parse_append_fsync(text: str) -> AppendFsync:
    try:
        return AppendFsync(text.strip().lower())
    except ValueError:
        return AppendFsync.EVERYSEC


def parse_save_points(text: str) -> list[SavePoint]:
    """``"3600 1 300 100"`` -> two save points; an unpaired tail is dropped."""
    parts = text.split()
    points = []
    for seconds, changes in zip(parts[::2], parts[1::2], strict=False):
        try:
            points.append(SavePoint(int(seconds), int(changes)))
        except ValueError:
            logger.warning("Skipping malformed save point %r %r", seconds, changes)
    return points


def serialize_save_points(points: list[SavePoint]) -> str:
    return " ".join(f"{point.seconds} {point.changes}" for point in points)


def parse_master(text: str) -> MasterPointer | None:
    """``"host port"`` -> master pointer; empty means this server is a primary."""
    parts = text.split()
    if not parts:
        return None
    port = parse_port(parts[1]) if len(parts) > 1 else DEFAULT_PORT
    return MasterPointer(parts[0], port)


def parse_optional(text: str) -> str | None:
    return text or None


def _always(value: Any) -> bool:
    return True


def _not_negative(value: int) -> bool:
    return value >= 0


def _not_empty(value: str) -> bool:
    return bool(value)


def _not_none(value: Any) -> bool:
    return value is not None


@dataclass(frozen=True, slots=True)
class ConfigSetting:
    name: str
    attribute: str
    parse: Callable[[str], Any]
    serialize: Callable[[Any], str] | None = None
    should_write: Callable[[Any], bool] = _always

    @property
    def writable(self) -> bool:
        return self.serialize is not None


CONFIG_SETTINGS: tuple[ConfigSetting, ...] = (
    ConfigSetting("daemonize", "daemonize", parse_bool),
    ConfigSetting("pidfile", "pid_file", str),
    ConfigSetting("port", "port", parse_port),
    ConfigSetting("bind", "host", str),
    ConfigSetting("timeout", "timeout", parse_int, str, _not_negative),
    ConfigSetting("loglevel", "log_level", parse_log_level, str),
    ConfigSetting("logfile", "log_file", str),
    ConfigSetting("databases", "databases", parse_int),
    ConfigSetting("save", "save_points", parse_save_points, serialize_save_points),
    ConfigSetting("rdbcompression", "rdb_compression", parse_bool_default_true, serialize_bool),
    ConfigSetting("dbfilename", "db_filename", str),
    ConfigSetting("dir", "dir", str, str, _not_empty),
    ConfigSetting("slaveof", "master", parse_master),
    ConfigSetting("replicaof", "master", parse_master),
    ConfigSetting("masterauth", "master_auth", parse_optional, str, _not_none),
    ConfigSetting("requirepass", "require_pass", parse_optional, str, _not_none),
    ConfigSetting("maxclients", "max_clients", parse_int, str, _not_negative),
    ConfigSetting("maxmemory", "max_memory", parse_int, str, _not_negative),
    ConfigSetting("appendonly", "append_only", parse_bool, serialize_bool),
    ConfigSetting("appendfilename", "append_filename", str),
    ConfigSetting("appendfsync", "append_fsync", parse_append_fsync, str),
    ConfigSetting("activerehashing", "active_rehashing", parse_bool, serialize_bool),
    ConfigSetting("include", "include", str),
)


def parse_config(values: dict[str, str]) -> ServerConfig:
    """Build a :class:`ServerConfig` from ``CONFIG GET *`` output."""
    config = ServerConfig()
    for setting in CONFIG_SETTINGS:
        if setting.name in values:
            setattr(config, setting.attribute, setting.parse(values[setting.name] or ""))
    return config


def serialize_config(config: ServerConfig) -> list[tuple[str, str]]:
    """Ordered ``(name, value)`` pairs to send with ``CONFIG SET``."""
    pairs = []
    for setting in CONFIG_SETTINGS:
        if setting.serialize is None:
            continue
        value = getattr(config, setting.attribute)
        if setting.should_write(value):
            pairs.append((setting.name, setting.serialize(value)))
    return pairs
