from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from django_kvcommands.commands.base import Command, KeyCommand, Response
from django_kvcommands.server import ServerIdentity
from django_kvcommands.types import ExpiryT, KeyType, MigrateOption, When

# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyGetTypeResponse(Response):
    key_type: KeyType | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyTimeToLiveResponse(Response):
    time_to_live: timedelta | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRestoreResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRenameResponse(Response):
    renamed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRandomResponse(Response):
    key: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyPersistResponse(Response):
    persisted: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyMoveResponse(Response):
    moved: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyMigrateResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyExpireResponse(Response):
    applied: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyDumpResponse(Response):
    value: bytes | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyDeleteResponse(Response):
    delete_count: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyExistsResponse(Response):
    key_count: int = 0


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyGetType(KeyCommand):
    """Type of the value at ``key``; ``None`` when the key does not exist."""

    response_class = KeyGetTypeResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyTimeToLive(KeyCommand):
    response_class = KeyTimeToLiveResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRestore(KeyCommand):
    """Recreate a key from a :class:`KeyDump` payload."""

    response_class = KeyRestoreResponse

    value: bytes
    expiry: timedelta | None = None
    replace: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRename(KeyCommand):
    response_class = KeyRenameResponse

    new_key: str
    when: When = When.ALWAYS


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyRandom(Command):
    response_class = KeyRandomResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyPersist(KeyCommand):
    response_class = KeyPersistResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyMove(KeyCommand):
    response_class = KeyMoveResponse

    database: int


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyMigrate(KeyCommand):
    """Move ``key`` to another server; ``timeout`` is in milliseconds."""

    response_class = KeyMigrateResponse

    destination: ServerIdentity
    timeout: int = 5000
    option: MigrateOption = MigrateOption.NONE


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyExpire(KeyCommand):
    """Expire after a timedelta, at a datetime, or never (``None``)."""

    response_class = KeyExpireResponse

    expiry: ExpiryT | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyDump(KeyCommand):
    response_class = KeyDumpResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyDelete(Command):
    response_class = KeyDeleteResponse

    keys: tuple[str, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyExists(Command):
    response_class = KeyExistsResponse

    keys: tuple[str, ...]
