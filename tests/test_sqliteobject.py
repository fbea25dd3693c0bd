import sqlite3

import pytest

from rtdata.serialized import Serializable, deserialize, serialize
from rtdata.sqliteobject import SQLiteObject
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
    sqlite_object = serialize(d, SQLiteObject)
    d2 = deserialize(sqlite_object, _Sample)
    assert d2.timestamp == epoch
    assert d2.origin == "test"
    assert sqlite_object.insert_statement() == (
        "INSERT INTO default (origin, timestamp) VALUES (:origin, :timestamp);"
    )
    assert sqlite_object.create_table_statement() == "CREATE TABLE default (origin, timestamp);"


def test_custom_table_name():
    obj = SQLiteObject("readings")
    obj.put_int("value", 1)
    assert obj.table == "readings"
    assert obj.insert_statement() == "INSERT INTO readings (value) VALUES (:value);"


def test_columns_are_sorted():
    obj = SQLiteObject("t")
    obj.put_int("z", 1)
    obj.put_int("a", 2)
    assert obj.create_table_statement() == "CREATE TABLE t (a, z);"


def test_overwriting_keeps_one_column():
    obj = SQLiteObject("t")
    obj.put_int("n", 1)
    obj.put_int("n", 2)
    assert obj.create_table_statement() == "CREATE TABLE t (n);"
    assert obj.get_int("n") == 2


def test_strings_are_quoted_when_bound():
    obj = SQLiteObject()
    obj.put_string("origin", "test")
    assert obj.bind_values() == {"origin": '"test"'}
    assert obj.get_string("origin") == "test"


def test_bind_converts_bool_and_long_int():
    obj = SQLiteObject()
    obj.put_bool("flag", True)
    obj.put_long_int("big", 2**64 - 1)
    obj.put_double("ratio", 0.5)
    assert obj.bind_values() == {"big": -1, "flag": 1, "ratio": 0.5}
    assert obj.get_long_int("big") == 2**64 - 1
    assert obj.get_bool("flag") is True


def test_statements_run_against_sqlite():
    obj = serialize(_Sample(Timestamp(1500), "test"), SQLiteObject)
    table_obj = SQLiteObject("readings")
    _Sample(Timestamp(1500), "test").serialize(table_obj)
    with sqlite3.connect(":memory:") as connection:
        connection.execute(table_obj.create_table_statement())
        connection.execute(table_obj.insert_statement(), table_obj.bind_values())
        rows = connection.execute("SELECT origin, timestamp FROM readings").fetchall()
    assert rows == [('"test"', 1500)]
    assert obj.bind_values() == table_obj.bind_values()


def test_missing_key_raises():
    with pytest.raises(KeyError):
        SQLiteObject().get_int("absent")


def test_wrong_type_raises():
    obj = SQLiteObject()
    obj.put_int("n", 1)
    with pytest.raises(TypeError):
        obj.get_uint("n")


def test_float_and_uint_round_trip():
    obj = SQLiteObject()
    obj.put_float("gain", 1.5)
    obj.put_uint("count", 7)
    assert obj.get_float("gain") == 1.5
    assert obj.get_uint("count") == 7


def test_bytes_are_empty():
    obj = SQLiteObject()
    obj.put_int("n", 1)
    assert obj.get_bytes() == b""