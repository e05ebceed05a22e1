from datetime import timedelta
from decimal import Decimal

import pytest

from django_kvcommands.commands import (
    StringAppend,
    StringBitCount,
    StringBitOperation,
    StringBitPosition,
    StringDecrement,
    StringGet,
    StringGetBit,
    StringGetRange,
    StringGetSet,
    StringGetWithExpiry,
    StringIncrement,
    StringLength,
    StringSet,
    StringSetBit,
    StringSetItem,
    StringSetRange,
)
from django_kvcommands.commands.strings import StringEntry, StringSetResult
from django_kvcommands.numeric import NumericKind
from django_kvcommands.types import Bitwise, When


class TestStringSet:
    def test_empty_items_fail_without_backend_call(self, dispatcher, server, registry, client, mocker):
        acquire = mocker.spy(registry, "acquire")

        response = dispatcher.dispatch(StringSet(server=server, items=()))

        assert response.success is False
        assert response.message == "not have any data items"
        assert response.results == ()
        acquire.assert_not_called()
        assert client.mock_calls == []

    def test_single_item_is_sent_directly(self, dispatcher, server, client):
        client.set.return_value = True

        response = dispatcher.dispatch(
            StringSet(server=server, items=(StringSetItem("a", "1", timedelta(seconds=30), When.NOT_EXISTS),)),
        )

        client.set.assert_called_once_with("a", "1", ex=timedelta(seconds=30), nx=True, xx=False)
        client.pipeline.assert_not_called()
        assert response.success is True
        assert response.results == (StringSetResult("a", True),)

    def test_several_items_are_pipelined(self, dispatcher, server, client):
        client.pipe.execute.return_value = [True, None]

        response = dispatcher.dispatch(
            StringSet(server=server, items=(StringSetItem("a", "1"), StringSetItem("b", "2", when=When.EXISTS))),
        )

        client.pipeline.assert_called_once_with(transaction=False)
        client.pipe.set.assert_any_call("a", "1", ex=None, nx=False, xx=False)
        client.pipe.set.assert_any_call("b", "2", ex=None, nx=False, xx=True)
        assert response.results == (StringSetResult("a", True), StringSetResult("b", False))


class TestStringNumeric:
    def test_integral_increment(self, dispatcher, server, client):
        client.incrby.return_value = 12

        response = dispatcher.dispatch(StringIncrement(server=server, key="n", value="2", kind=NumericKind.INT32))

        client.incrby.assert_called_once_with("n", 2)
        client.incrbyfloat.assert_not_called()
        assert response.new_value == 12
        assert response.key == "n"

    def test_floating_decrement(self, dispatcher, server, client):
        client.incrbyfloat.return_value = 0.5

        response = dispatcher.dispatch(StringDecrement(server=server, key="n", value="1.5", kind=Decimal))

        client.incrbyfloat.assert_called_once_with("n", -1.5)
        client.incrby.assert_not_called()
        assert response.new_value == Decimal("0.5")

    def test_unparseable_amount_is_zero(self, dispatcher, server, client):
        client.incrby.return_value = 5

        dispatcher.dispatch(StringIncrement(server=server, key="n", value="five"))

        client.incrby.assert_called_once_with("n", 0)

    def test_unsupported_kind_fails_without_backend_call(self, dispatcher, server, client):
        response = dispatcher.dispatch(StringIncrement(server=server, key="n", value="1", kind=complex))

        assert response.success is False
        assert "not supported" in response.message
        assert response.new_value == 0
        assert client.mock_calls == []


class TestStringReads:
    def test_get_preserves_key_order(self, dispatcher, server, client):
        client.mget.return_value = ["1", None, "3"]

        response = dispatcher.dispatch(StringGet(server=server, keys=("c", "a", "b")))

        client.mget.assert_called_once_with(["c", "a", "b"])
        assert response.values == (StringEntry("c", "1"), StringEntry("a", None), StringEntry("b", "3"))

    def test_get_empty_keys(self, dispatcher, server, client):
        response = dispatcher.dispatch(StringGet(server=server, keys=()))

        assert response.success is False
        assert response.message == "keys is null or empty"
        client.mget.assert_not_called()

    def test_get_with_expiry(self, dispatcher, server, client):
        client.pipe.execute.return_value = ["v", 1500]

        response = dispatcher.dispatch(StringGetWithExpiry(server=server, key="k"))

        client.pipe.get.assert_called_once_with("k")
        client.pipe.pttl.assert_called_once_with("k")
        assert response.value == "v"
        assert response.expiry == timedelta(milliseconds=1500)

    def test_get_with_expiry_without_ttl(self, dispatcher, server, client):
        client.pipe.execute.return_value = ["v", -1]

        assert dispatcher.dispatch(StringGetWithExpiry(server=server, key="k")).expiry is None

    def test_get_range_keeps_negative_offsets(self, dispatcher, server, client):
        client.getrange.return_value = "llo"

        response = dispatcher.dispatch(StringGetRange(server=server, key="k", start=-3, end=-1))

        client.getrange.assert_called_once_with("k", -3, -1)
        assert response.value == "llo"

    def test_scalars(self, dispatcher, server, client):
        client.strlen.return_value = 5
        client.getset.return_value = "old"
        client.getbit.return_value = 1

        assert dispatcher.dispatch(StringLength(server=server, key="k")).length == 5
        assert dispatcher.dispatch(StringGetSet(server=server, key="k", value="new")).old_value == "old"
        assert dispatcher.dispatch(StringGetBit(server=server, key="k", offset=7)).bit is True
        client.getbit.assert_called_once_with("k", 7)


class TestStringWrites:
    def test_set_range(self, dispatcher, server, client):
        client.setrange.return_value = 11

        response = dispatcher.dispatch(StringSetRange(server=server, key="k", offset=6, value="Redis"))

        client.setrange.assert_called_once_with("k", 6, "Redis")
        assert response.new_value_length == 11

    def test_set_bit_returns_old_bit(self, dispatcher, server, client):
        client.setbit.return_value = 0

        response = dispatcher.dispatch(StringSetBit(server=server, key="k", offset=3, bit=True))

        client.setbit.assert_called_once_with("k", 3, 1)
        assert response.old_bit_value is False

    def test_append(self, dispatcher, server, client):
        client.append.return_value = 9

        assert dispatcher.dispatch(StringAppend(server=server, key="k", value="!")).new_value_length == 9


class TestBinaryValues:
    def test_value_written_by_set_bit_reads_back_as_bytes(self, dispatcher, server, client):
        client.setbit.return_value = 0
        client.mget.return_value = [b"\x80"]

        dispatcher.dispatch(StringSetBit(server=server, key="bits", offset=0, bit=True))
        response = dispatcher.dispatch(StringGet(server=server, keys=("bits",)))

        assert response.success is True
        assert response.values == (StringEntry("bits", b"\x80"),)

    def test_text_replies_are_decoded(self, dispatcher, server, client):
        client.mget.return_value = [b"caf\xc3\xa9", None]

        response = dispatcher.dispatch(StringGet(server=server, keys=("a", "b")))

        assert response.values == (StringEntry("a", "caf\u00e9"), StringEntry("b", None))

    def test_binary_value_in_pipelined_read(self, dispatcher, server, client):
        client.pipe.execute.return_value = [b"\xff\xfe", 1500]

        response = dispatcher.dispatch(StringGetWithExpiry(server=server, key="k"))

        assert response.value == b"\xff\xfe"
        assert response.expiry == timedelta(milliseconds=1500)


class TestStringBits:
    def test_bit_position_found(self, dispatcher, server, client):
        client.bitpos.return_value = 12

        response = dispatcher.dispatch(StringBitPosition(server=server, key="k", bit=True, start=1, end=-1))

        client.bitpos.assert_called_once_with("k", 1, 1, -1)
        assert response.position == 12
        assert response.has_value is True

    def test_bit_position_not_found(self, dispatcher, server, client):
        client.bitpos.return_value = -1

        response = dispatcher.dispatch(StringBitPosition(server=server, key="k", bit=False))

        assert response.has_value is False

    def test_bit_count(self, dispatcher, server, client):
        client.bitcount.return_value = 26

        assert dispatcher.dispatch(StringBitCount(server=server, key="k")).bit_count == 26
        client.bitcount.assert_called_once_with("k", 0, -1)

    @pytest.mark.parametrize(
        ("bitwise", "native"),
        [(Bitwise.AND, "AND"), (Bitwise.OR, "OR"), (Bitwise.XOR, "XOR")],
    )
    def test_bit_operation_uses_all_keys_in_order(self, dispatcher, server, client, bitwise, native):
        client.bitop.return_value = 4

        response = dispatcher.dispatch(
            StringBitOperation(server=server, bitwise=bitwise, destination_key="dest", keys=("b", "a", "c")),
        )

        client.bitop.assert_called_once_with(native, "dest", "b", "a", "c")
        assert response.destination_value_length == 4

    def test_bit_not_uses_only_first_key(self, dispatcher, server, client):
        client.bitop.return_value = 4

        dispatcher.dispatch(
            StringBitOperation(server=server, bitwise=Bitwise.NOT, destination_key="dest", keys=("b", "a")),
        )

        client.bitop.assert_called_once_with("NOT", "dest", "b")
