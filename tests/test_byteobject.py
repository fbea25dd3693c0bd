import pytest

from rtdata.byteobject import ByteObject
from rtdata.serialized import Serializable, serialize
from rtdata.timing import Timestamp


class _Sample(Serializable):
    def __init__(self, timestamp=Timestamp.EPOCH, origin=""):
        self.timestamp = timestamp
        self.origin = origin

    def serialize(self, obj):
        obj.put_long_int("timestamp", self.timestamp.to_nanos())
        obj.put_string("origin", self.origin)

    def deserialize(self, obj):
        self.timestamp = Timestamp(obj.get_long_int("timestamp"))
        self.origin = obj.get_string("origin")


def test_data_serialization_round_trip():
    epoch = Timestamp.EPOCH
    d = _Sample(epoch, "test")
    byte_serialized = serialize(d, ByteObject)
    d2 = _Sample()
    d2.deserialize(byte_serialized)
    assert d2.timestamp == epoch
    assert d2.origin == "test"


def test_int_wire_format():
    obj = ByteObject()
    obj.put_int("value", 1)
    assert obj.get_bytes() == bytes([5, 0, 0, 0, 4, 1, 0, 0, 0])


def test_string_wire_format():
    obj = ByteObject()
    obj.put_string("name", "ab")
    assert obj.get_bytes() == bytes([3, 0, 0, 0, 2, ord("a"), ord("b")])


def test_topic_is_stored_first():
    obj = ByteObject("sensor")
    assert obj.get_string("topic") == "sensor"


def test_all_types_survive_bytes_round_trip():
    obj = ByteObject()
    obj.put_int("a", -7)
    obj.put_uint("b", 7)
    obj.put_float("c", 1.5)
    obj.put_double("d", 2.25)
    obj.put_bool("e", True)
    obj.put_string("f", "héllo")
    obj.put_long_int("g", 2**40)
    restored = ByteObject.from_bytes(obj.get_bytes())
    assert restored.get_int("a") == -7
    assert restored.get_uint("b") == 7
    assert restored.get_float("c") == 1.5
    assert restored.get_double("d") == 2.25
    assert restored.get_bool("e") is True
    assert restored.get_string("f") == "héllo"
    assert restored.get_long_int("g") == 2**40


def test_empty_string_round_trip():
    obj = ByteObject()
    obj.put_string("s", "")
    obj.put_int("n", 3)
    assert obj.get_string("s") == ""
    assert obj.get_int("n") == 3


def test_reading_consumes_values():
    obj = ByteObject()
    obj.put_int("a", 1)
    obj.put_int("b", 2)
    obj.get_int("a")
    assert obj.get_bytes() == bytes([5, 0, 0, 0, 4, 2, 0, 0, 0])


def test_from_bytes_rejects_wrong_declared_length():
    with pytest.raises(ValueError):
        ByteObject.from_bytes(bytes([9, 0, 0, 0, 4, 1, 0, 0, 0]))


def test_from_bytes_rejects_missing_header():
    with pytest.raises(ValueError):
        ByteObject.from_bytes(bytes([1, 0]))


def test_size_mismatch_is_reported():
    obj = ByteObject()
    obj.put_double("d", 1.0)
    with pytest.raises(ValueError):
        obj.get_int("d")


def test_reading_empty_container_fails():
    obj = ByteObject()
    with pytest.raises(IndexError):
        obj.get_int("a")
    with pytest.raises(IndexError):
        obj.get_string("s")


def test_not_enough_bytes_for_type():
    obj = ByteObject()
    obj.put_bool("b", False)
    with pytest.raises(IndexError):
        obj.get_double("b")


def test_out_of_range_int_is_rejected():
    obj = ByteObject()
    with pytest.raises(ValueError):
        obj.put_int("a", 2**31)


def test_too_long_string_is_rejected():
    obj = ByteObject()
    with pytest.raises(ValueError):
        obj.put_string("s", "x" * 256)