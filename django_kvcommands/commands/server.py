from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from django_kvcommands.commands.base import Command, Response
from django_kvcommands.config import ServerConfig
from django_kvcommands.types import KeyMatchMode, KeyType


@dataclass(frozen=True, slots=True)
class KeyQuery:
    """One page of a key listing.

    ``page`` is 1-based. Both ``page`` and ``page_size`` are clamped to at
    least 1.
    """

    page: int = 1
    page_size: int = 20
    match_key: str = ""
    match_mode: KeyMatchMode = KeyMatchMode.CONTAINS

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", max(self.page, 1))
        object.__setattr__(self, "page_size", max(self.page_size, 1))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True, slots=True)
class CacheDataItem:
    name: str | bytes
    type: KeyType
    value: Any = None


@dataclass(frozen=True, slots=True)
class CachePaging:
    page: int
    page_size: int
    total_count: int
    items: tuple[CacheDataItem, ...] = ()

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


@dataclass(frozen=True, slots=True)
class CacheDatabase:
    index: int
    name: str


# Responses


@dataclass(frozen=True, slots=True, kw_only=True)
class GetAllDatabasesResponse(Response):
    databases: tuple[CacheDatabase, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class GetKeysResponse(Response):
    paging: CachePaging | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ClearDataResponse(Response):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class GetKeyDetailResponse(Response):
    item: CacheDataItem | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GetServerConfigResponse(Response):
    config: ServerConfig | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SaveServerConfigResponse(Response):
    pass


# Commands


@dataclass(frozen=True, slots=True, kw_only=True)
class GetAllDatabases(Command):
    response_class = GetAllDatabasesResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class GetKeys(Command):
    response_class = GetKeysResponse

    query: KeyQuery = KeyQuery()


@dataclass(frozen=True, slots=True, kw_only=True)
class ClearData(Command):
    """Flush each of the listed logical databases."""

    response_class = ClearDataResponse

    databases: tuple[int, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class GetKeyDetail(Command):
    response_class = GetKeyDetailResponse

    key: str


@dataclass(frozen=True, slots=True, kw_only=True)
class GetServerConfig(Command):
    response_class = GetServerConfigResponse


@dataclass(frozen=True, slots=True, kw_only=True)
class SaveServerConfig(Command):
    response_class = SaveServerConfigResponse

    config: ServerConfig | None
