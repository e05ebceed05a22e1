from datetime import UTC, datetime, timedelta

import pytest

from django_kvcommands.commands import (
    KeyDelete,
    KeyDump,
    KeyExists,
    KeyExpire,
    KeyGetType,
    KeyMigrate,
    KeyMove,
    KeyPersist,
    KeyRandom,
    KeyRename,
    KeyRestore,
    KeyTimeToLive,
)
from django_kvcommands.server import ServerIdentity
from django_kvcommands.types import KeyType, MigrateOption, When


class TestKeyType:
    @pytest.mark.parametrize(
        ("native", "key_type"),
        [
            ("string", KeyType.STRING),
            ("list", KeyType.LIST),
            ("hash", KeyType.HASH),
            ("set", KeyType.SET),
            ("zset", KeyType.SORTED_SET),
            ("none", None),
        ],
    )
    def test_get_type(self, dispatcher, server, client, native, key_type):
        client.type.return_value = native

        assert dispatcher.dispatch(KeyGetType(server=server, key="k")).key_type is key_type

    def test_type_reply_as_bytes(self, dispatcher, server, client):
        client.type.return_value = b"zset"

        assert dispatcher.dispatch(KeyGetType(server=server, key="k")).key_type is KeyType.SORTED_SET

    def test_unknown_native_type_degrades(self, dispatcher, server, client, caplog):
        client.type.return_value = "stream"

        assert dispatcher.dispatch(KeyGetType(server=server, key="k")).key_type is KeyType.STRING
        assert "Unrecognized key type value 'stream'" in caplog.text


class TestKeyExpiry:
    def test_time_to_live(self, dispatcher, server, client):
        client.pttl.return_value = 2500

        response = dispatcher.dispatch(KeyTimeToLive(server=server, key="k"))

        assert response.time_to_live == timedelta(milliseconds=2500)

    @pytest.mark.parametrize("reply", [-1, -2])
    def test_time_to_live_without_expiry(self, dispatcher, server, client, reply):
        client.pttl.return_value = reply

        assert dispatcher.dispatch(KeyTimeToLive(server=server, key="k")).time_to_live is None

    def test_expire_relative(self, dispatcher, server, client):
        client.expire.return_value = True

        response = dispatcher.dispatch(KeyExpire(server=server, key="k", expiry=timedelta(minutes=1)))

        client.expire.assert_called_once_with("k", timedelta(minutes=1))
        assert response.applied is True

    def test_expire_absolute(self, dispatcher, server, client):
        when = datetime(2030, 1, 1, tzinfo=UTC)
        client.expireat.return_value = True

        dispatcher.dispatch(KeyExpire(server=server, key="k", expiry=when))

        client.expireat.assert_called_once_with("k", when)
        client.expire.assert_not_called()

    def test_expire_none_persists(self, dispatcher, server, client):
        client.persist.return_value = False

        response = dispatcher.dispatch(KeyExpire(server=server, key="k"))

        client.persist.assert_called_once_with("k")
        assert response.applied is False

    def test_persist(self, dispatcher, server, client):
        client.persist.return_value = 1

        assert dispatcher.dispatch(KeyPersist(server=server, key="k")).persisted is True


class TestKeyRename:
    def test_always(self, dispatcher, server, client):
        client.rename.return_value = True

        assert dispatcher.dispatch(KeyRename(server=server, key="a", new_key="b")).renamed is True
        client.rename.assert_called_once_with("a", "b")

    def test_not_exists(self, dispatcher, server, client):
        client.renamenx.return_value = False

        response = dispatcher.dispatch(KeyRename(server=server, key="a", new_key="b", when=When.NOT_EXISTS))

        client.renamenx.assert_called_once_with("a", "b")
        assert response.renamed is False

    def test_exists_is_rejected(self, dispatcher, server, client):
        response = dispatcher.dispatch(KeyRename(server=server, key="a", new_key="b", when=When.EXISTS))

        assert response.success is False
        assert client.mock_calls == []


class TestKeyTransfer:
    def test_dump_and_restore(self, dispatcher, server, client):
        client.dump.return_value = b"\x00\x03abc"

        payload = dispatcher.dispatch(KeyDump(server=server, key="k")).value
        dispatcher.dispatch(
            KeyRestore(server=server, key="copy", value=payload, expiry=timedelta(seconds=2), replace=True),
        )

        client.restore.assert_called_once_with("copy", 2000, b"\x00\x03abc", replace=True)

    def test_dump_is_not_decoded(self, dispatcher, server, client):
        client.dump.return_value = b"abc"

        assert dispatcher.dispatch(KeyDump(server=server, key="k")).value == b"abc"

    def test_restore_without_expiry(self, dispatcher, server, client):
        dispatcher.dispatch(KeyRestore(server=server, key="copy", value=b"x"))

        client.restore.assert_called_once_with("copy", 0, b"x", replace=False)

    def test_move(self, dispatcher, server, client):
        client.move.return_value = True

        assert dispatcher.dispatch(KeyMove(server=server, key="k", database=4)).moved is True
        client.move.assert_called_once_with("k", 4)

    @pytest.mark.parametrize(
        ("option", "copy", "replace"),
        [
            (MigrateOption.NONE, False, False),
            (MigrateOption.COPY, True, False),
            (MigrateOption.REPLACE, False, True),
        ],
    )
    def test_migrate(self, dispatcher, server, client, option, copy, replace):
        destination = ServerIdentity(host="other", port=6380, db=2, password="pw")

        response = dispatcher.dispatch(
            KeyMigrate(server=server, key="k", destination=destination, timeout=1000, option=option),
        )

        client.migrate.assert_called_once_with(
            "other",
            6380,
            ["k"],
            2,
            1000,
            copy=copy,
            replace=replace,
            auth="pw",
        )
        assert response.success is True


class TestKeyQueries:
    def test_random(self, dispatcher, server, client):
        client.randomkey.return_value = None

        assert dispatcher.dispatch(KeyRandom(server=server)).key is None

    def test_delete_and_exists(self, dispatcher, server, client):
        client.delete.return_value = 2
        client.exists.return_value = 3

        assert dispatcher.dispatch(KeyDelete(server=server, keys=("a", "b"))).delete_count == 2
        assert dispatcher.dispatch(KeyExists(server=server, keys=("a", "a", "b"))).key_count == 3
        client.delete.assert_called_once_with("a", "b")
        client.exists.assert_called_once_with("a", "a", "b")

    @pytest.mark.parametrize("command_class", [KeyDelete, KeyExists])
    def test_empty_keys(self, dispatcher, server, client, command_class):
        response = dispatcher.dispatch(command_class(server=server, keys=()))

        assert response.success is False
        assert response.message == "keys is null or empty"
        assert client.mock_calls == []
