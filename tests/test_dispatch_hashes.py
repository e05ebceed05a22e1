import pytest

from django_kvcommands.commands import (
    HashDecrement,
    HashDelete,
    HashExists,
    HashGet,
    HashGetAll,
    HashIncrement,
    HashKeys,
    HashLength,
    HashScan,
    HashSet,
    HashValues,
)
from django_kvcommands.numeric import NumericKind


class TestHashSet:
    def test_pairs_become_a_mapping(self, dispatcher, server, client):
        response = dispatcher.dispatch(HashSet(server=server, key="h", items=(("name", "ada"), ("lang", "py"))))

        client.hset.assert_called_once_with("h", mapping={"name": "ada", "lang": "py"})
        assert response.success is True

    def test_repeated_field_keeps_last_value(self, dispatcher, server, client):
        dispatcher.dispatch(HashSet(server=server, key="h", items=(("a", "1"), ("a", "2"))))

        client.hset.assert_called_once_with("h", mapping={"a": "2"})

    def test_empty_items_fail(self, dispatcher, server, client):
        response = dispatcher.dispatch(HashSet(server=server, key="h", items=()))

        assert response.success is False
        client.hset.assert_not_called()


class TestHashNumeric:
    def test_integral_increment(self, dispatcher, server, client):
        client.hincrby.return_value = 3

        response = dispatcher.dispatch(
            HashIncrement(server=server, key="h", hash_field="visits", value="1", kind=NumericKind.UINT32),
        )

        client.hincrby.assert_called_once_with("h", "visits", 1)
        assert response.key == "h"
        assert response.hash_field == "visits"
        assert response.new_value == 3

    def test_floating_decrement(self, dispatcher, server, client):
        client.hincrbyfloat.return_value = 9.75

        response = dispatcher.dispatch(
            HashDecrement(server=server, key="h", hash_field="balance", value="0.25", kind=float),
        )

        client.hincrbyfloat.assert_called_once_with("h", "balance", -0.25)
        client.hincrby.assert_not_called()
        assert response.new_value == 9.75

    def test_boolean_kind(self, dispatcher, server, client):
        client.hincrby.return_value = 1

        response = dispatcher.dispatch(
            HashIncrement(server=server, key="h", hash_field="flag", value="1", kind=bool),
        )

        assert response.new_value is True

    def test_unsupported_kind(self, dispatcher, server, client):
        response = dispatcher.dispatch(HashIncrement(server=server, key="h", hash_field="f", value="1", kind="int128"))

        assert response.success is False
        assert response.hash_field == ""
        assert client.mock_calls == []


class TestHashReads:
    def test_reads(self, dispatcher, server, client):
        client.hvals.return_value = ["1", "2"]
        client.hkeys.return_value = ["a", "b"]
        client.hlen.return_value = 2
        client.hget.return_value = "1"
        client.hgetall.return_value = {"a": "1", "b": "2"}
        client.hexists.return_value = True

        assert dispatcher.dispatch(HashValues(server=server, key="h")).values == ("1", "2")
        assert dispatcher.dispatch(HashKeys(server=server, key="h")).hash_fields == ("a", "b")
        assert dispatcher.dispatch(HashLength(server=server, key="h")).length == 2
        assert dispatcher.dispatch(HashGet(server=server, key="h", hash_field="a")).value == "1"
        assert dispatcher.dispatch(HashGetAll(server=server, key="h")).values == {"a": "1", "b": "2"}
        assert dispatcher.dispatch(HashExists(server=server, key="h", hash_field="a")).has_field is True

    def test_get_all_failure_has_empty_mapping(self):
        assert HashGetAll.response_class.failed("boom").values == {}

    def test_scan(self, dispatcher, server, client):
        client.hscan.return_value = (17, {"user:1": "ada"})

        response = dispatcher.dispatch(HashScan(server=server, key="h", pattern="user:*", page_size=50, cursor=3))

        client.hscan.assert_called_once_with("h", cursor=3, match="user:*", count=50)
        assert response.values == {"user:1": "ada"}
        assert response.cursor == 17


class TestHashDelete:
    def test_delete(self, dispatcher, server, client):
        client.hdel.return_value = 2

        response = dispatcher.dispatch(HashDelete(server=server, key="h", hash_fields=("a", "b")))

        client.hdel.assert_called_once_with("h", "a", "b")
        assert response.delete_count == 2

    @pytest.mark.parametrize("fields", [(), []])
    def test_delete_nothing(self, dispatcher, server, client, fields):
        response = dispatcher.dispatch(HashDelete(server=server, key="h", hash_fields=fields))

        assert response.success is False
        client.hdel.assert_not_called()
