"""Tests for key listing, key detail, databases and server configuration."""

from unittest.mock import MagicMock, call

import pytest

from django_kvcommands.commands import (
    ClearData,
    GetAllDatabases,
    GetKeyDetail,
    GetKeys,
    GetServerConfig,
    SaveServerConfig,
)
from django_kvcommands.commands.server import CacheDatabase, CacheDataItem, KeyQuery
from django_kvcommands.commands.sorted_sets import SortedSetMember
from django_kvcommands.config import SavePoint, ServerConfig
from django_kvcommands.introspection import ServerIntrospection, build_pattern
from django_kvcommands.pool import ConnectionRegistry
from django_kvcommands.server import ServerIdentity
from django_kvcommands.types import KeyMatchMode, KeyType


def make_config_client(stored):
    """Client storing ``CONFIG SET`` values in ``stored`` and reporting them from ``CONFIG GET``."""
    client = MagicMock(name="redis")
    client.config_set.side_effect = stored.__setitem__
    client.config_get.side_effect = lambda pattern="*": dict(stored)
    return client


class TestBuildPattern:
    @pytest.mark.parametrize(
        ("mode", "pattern"),
        [
            (KeyMatchMode.CONTAINS, "*user*"),
            (KeyMatchMode.STARTS_WITH, "user*"),
            (KeyMatchMode.ENDS_WITH, "*user"),
        ],
    )
    def test_modes(self, mode, pattern):
        assert build_pattern("user", mode) == pattern

    @pytest.mark.parametrize("mode", list(KeyMatchMode))
    def test_empty_token_matches_everything(self, mode):
        assert build_pattern("", mode) == "*"


class TestKeyQuery:
    def test_offset(self):
        assert KeyQuery(page=3, page_size=10).offset == 20

    def test_clamped(self):
        query = KeyQuery(page=0, page_size=-5)

        assert query.page == 1
        assert query.page_size == 1
        assert query.offset == 0


class TestGetKeys:
    def test_third_page(self, dispatcher, server, client):
        client.scan_iter.return_value = iter([f"key:{i}" for i in range(45)])
        client.type.return_value = "string"
        client.dbsize.return_value = 45

        response = dispatcher.dispatch(
            GetKeys(server=server, query=KeyQuery(page=3, page_size=10, match_key="key")),
        )

        client.scan_iter.assert_called_once_with(match="*key*", count=10)
        paging = response.paging
        assert [item.name for item in paging.items] == [f"key:{i}" for i in range(20, 30)]
        assert all(item.type is KeyType.STRING for item in paging.items)
        assert paging.total_count == 45
        assert paging.total_pages == 5

    def test_last_partial_page(self, dispatcher, server, client):
        client.scan_iter.return_value = iter(["a", "b", "c"])
        client.type.return_value = "list"
        client.dbsize.return_value = 3

        response = dispatcher.dispatch(GetKeys(server=server, query=KeyQuery(page=2, page_size=2)))

        assert response.paging.items == (CacheDataItem("c", KeyType.LIST),)
        assert client.type.call_count == 1

    def test_vanished_keys_are_skipped(self, dispatcher, server, client):
        client.scan_iter.return_value = iter(["a", "gone", "z"])
        client.type.side_effect = ["zset", "none", "hash"]
        client.dbsize.return_value = 3

        response = dispatcher.dispatch(GetKeys(server=server))

        assert response.paging.items == (
            CacheDataItem("a", KeyType.SORTED_SET),
            CacheDataItem("z", KeyType.HASH),
        )

    def test_byte_replies_are_decoded(self, dispatcher, server, client):
        client.scan_iter.return_value = iter([b"user:1", b"\x80raw"])
        client.type.side_effect = [b"hash", b"string"]
        client.dbsize.return_value = 2

        response = dispatcher.dispatch(GetKeys(server=server))

        assert response.paging.items == (
            CacheDataItem("user:1", KeyType.HASH),
            CacheDataItem(b"\x80raw", KeyType.STRING),
        )

    def test_listing_does_not_need_admin(self, dispatcher, client):
        client.scan_iter.return_value = iter([])
        client.dbsize.return_value = 0

        response = dispatcher.dispatch(GetKeys(server=ServerIdentity(db=1)))

        assert response.success is True
        assert response.paging.items == ()


class TestKeyDetail:
    @pytest.mark.parametrize(
        ("native", "method", "reply", "value"),
        [
            ("string", "get", "hello", "hello"),
            ("list", "lrange", ["a", "b"], ["a", "b"]),
            ("set", "smembers", {"b", "a"}, ["a", "b"]),
            ("zset", "zrange", [("a", 1.0), ("b", 2.0)], [SortedSetMember("a", 1.0), SortedSetMember("b", 2.0)]),
            ("hash", "hgetall", {"f": "v"}, {"f": "v"}),
        ],
    )
    def test_one_fetch_per_type(self, dispatcher, server, client, native, method, reply, value):
        client.type.return_value = native
        getattr(client, method).return_value = reply

        response = dispatcher.dispatch(GetKeyDetail(server=server, key="k"))

        getattr(client, method).assert_called_once()
        fetches = {"get", "lrange", "smembers", "zrange", "hgetall"} - {method}
        for other in fetches:
            getattr(client, other).assert_not_called()
        assert response.item.name == "k"
        assert response.item.value == value

    def test_sorted_set_fetch_includes_scores(self, dispatcher, server, client):
        client.type.return_value = "zset"
        client.zrange.return_value = []

        dispatcher.dispatch(GetKeyDetail(server=server, key="k"))

        client.zrange.assert_called_once_with("k", 0, -1, withscores=True)

    def test_binary_members_stay_bytes(self, dispatcher, server, client):
        client.type.return_value = b"set"
        client.smembers.return_value = {b"\xff", b"b", b"a"}

        response = dispatcher.dispatch(GetKeyDetail(server=server, key="k"))

        assert response.item == CacheDataItem("k", KeyType.SET, ["a", "b", b"\xff"])

    def test_missing_key(self, dispatcher, server, client):
        client.type.return_value = "none"

        response = dispatcher.dispatch(GetKeyDetail(server=server, key="k"))

        assert response.success is True
        assert response.item is None
        client.get.assert_not_called()


class TestDatabases:
    def test_get_all_databases(self, dispatcher, server, client):
        client.config_get.return_value = {"databases": "3"}

        response = dispatcher.dispatch(GetAllDatabases(server=server))

        client.config_get.assert_called_once_with("databases")
        assert response.databases == (CacheDatabase(0, "db0"), CacheDatabase(1, "db1"), CacheDatabase(2, "db2"))

    def test_byte_config_reply(self, dispatcher, server, client):
        client.config_get.return_value = {b"databases": b"2"}

        response = dispatcher.dispatch(GetAllDatabases(server=server))

        assert response.databases == (CacheDatabase(0, "db0"), CacheDatabase(1, "db1"))

    def test_clear_data_flushes_each_database(self, server, client):
        client_class = MagicMock(return_value=client)
        introspection = ServerIntrospection(ConnectionRegistry(options={"client_class": client_class}))

        introspection.clear_data(server, (0, 3))

        assert client.flushdb.call_count == 2
        assert [c.kwargs["db"] for c in client_class.call_args_list] == [0, 3]

    def test_clear_data_requires_databases(self, dispatcher, server, client):
        response = dispatcher.dispatch(ClearData(server=server, databases=()))

        assert response.success is False
        assert response.message == "databaselist is null or empty"
        client.flushdb.assert_not_called()


class TestAdminGate:
    @pytest.mark.parametrize(
        "command_class",
        [GetAllDatabases, GetServerConfig],
    )
    def test_reads_need_admin(self, dispatcher, client, command_class):
        response = dispatcher.dispatch(command_class(server=ServerIdentity(db=1)))

        assert response.success is False
        assert "allow_admin" in response.message
        assert client.mock_calls == []

    def test_writes_need_admin(self, dispatcher, client):
        identity = ServerIdentity(db=1)

        cleared = dispatcher.dispatch(ClearData(server=identity, databases=(1,)))
        saved = dispatcher.dispatch(SaveServerConfig(server=identity, config=ServerConfig()))

        assert cleared.success is False
        assert saved.success is False
        assert client.mock_calls == []


class TestServerConfig:
    def test_read(self, dispatcher, server, client):
        client.config_get.return_value = {
            "port": "6380",
            "loglevel": "warning",
            "save": "3600 1 300 100",
            "appendonly": "yes",
            "replicaof": "primary.internal 6379",
            "requirepass": "",
            "unknown-setting": "ignored",
        }

        config = dispatcher.dispatch(GetServerConfig(server=server)).config

        client.config_get.assert_called_once_with("*")
        assert config.port == 6380
        assert config.log_level == "warning"
        assert config.save_points == [SavePoint(3600, 1), SavePoint(300, 100)]
        assert config.append_only is True
        assert config.master.host == "primary.internal"
        assert config.require_pass is None

    def test_save_requires_config(self, dispatcher, server, client):
        response = dispatcher.dispatch(SaveServerConfig(server=server, config=None))

        assert response.success is False
        assert response.message == "server config is null"

    def test_save_rewrites_after_setting(self, dispatcher, server, client):
        dispatcher.dispatch(SaveServerConfig(server=server, config=ServerConfig()))

        names = [c.args[0] for c in client.config_set.call_args_list]
        assert "port" not in names
        assert "save" in names
        assert client.mock_calls[-1] == call.config_rewrite()

    def test_round_trip(self, server):
        stored = {}
        registry = ConnectionRegistry(options={"client_class": MagicMock(return_value=make_config_client(stored))})
        introspection = ServerIntrospection(registry)
        config = ServerConfig(append_only=True, save_points=[], max_memory=1024, timeout=30)

        introspection.save_config(server, config)
        restored = introspection.read_config(server)

        assert stored["save"] == ""
        assert stored["appendonly"] == "yes"
        assert restored.append_only is True
        assert restored.save_points == []
        assert restored.max_memory == 1024
        assert restored.timeout == 30
