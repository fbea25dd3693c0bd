# rtdata

Building blocks for applications that acquire, serialize and forward
sensor data in real time. The package is pure Python and has no runtime
dependencies.

## Modules

- `rtdata.timing`: `TimeUnit` (with `SECONDS`, `MILLISECONDS`,
  `MICROSECONDS`, `NANOSECONDS`), `Duration` and `Timestamp`. Time points
  and durations are unsigned 64-bit nanosecond counts; conversions truncate.
  `Timestamp.EPOCH` is time zero and `Timestamp.now()` reads the system clock.
- `rtdata.serialized`: the `SerializedObject` container interface
  (`put_*` / `get_*` for int, uint, float, double, bool, string and long int,
  plus `get_bytes()`), the `Serializable` interface, and the
  `serialize(serializable, destination)` / `deserialize(obj, destination)`
  helpers, which take the class to build.
- `rtdata.byteobject.ByteObject`: an order-based binary container. Keys are
  ignored; each value is prefixed by its size in one byte, and `get_bytes()`
  prefixes the whole buffer with its length as a little-endian 32-bit integer.
  `ByteObject.from_bytes()` reads that back. Strings are limited to 255 bytes.
- `rtdata.jsonobject.JSONObject`: values stored under their keys in a JSON
  object; `to_json()`, `to_json_string()` (compact, keys sorted) and
  `get_bytes()` (the text as UTF-8). `JSONObject.from_json()` wraps a parsed
  document.
- `rtdata.sqliteobject.SQLiteObject`: values kept as named columns of a row,
  listed in sorted order, with `insert_statement()`,
  `create_table_statement()` and `bind_values()` (a dict of named parameters).
  Its `get_bytes()` is always empty.
- `rtdata.configuration`: lazily loaded configuration trees.
  `JSONObjectConfiguration` (also available as `JSONConfiguration`) and
  `JSONArrayConfiguration` wrap a JSON document or load one with
  `from_file()`. Index nodes with `[]`; read a leaf with `get(kind)` and
  replace it with `set(value)` (same type only; the file is not rewritten).
  A missing property yields an empty leaf holding `None`.
- `rtdata.listener`: the `Listener` interface and `LambdaListener`, which
  passes every `(topic, data)` event to a function.
- `rtdata.xbus`: Xbus messages for inertial motion trackers.
  - `utility`: framing constants and `read_u8/16/32`, `write_u8/16/32`
    (big-endian; readers return the value and the next offset).
  - `deviceid`: `DeviceFunction`, `is_mt_mk4_x`, `get_function`,
    `function_description`.
  - `message`: `MessageId`, `DataIdentifier`, `LowLevelFormat`,
    `OutputConfiguration`, `XbusMessage`, `format_message`, `get_data_item`,
    `data_description`.
  - `parser`: `XbusParser`, which assembles messages from a byte stream and
    hands each one with a valid checksum to a callback.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Time arithmetic:

```python
from rtdata.timing import Duration, TimeUnit, Timestamp

t = Timestamp(100)
later = t.plus(100, TimeUnit.NANOSECONDS)
assert later.to_nanos() == 200
assert (later - t).to_nanos() == 100
assert Duration.of(1, TimeUnit.SECONDS).to_millis() == 1000
```

Binary round trip:

```python
from rtdata.byteobject import ByteObject

obj = ByteObject()
obj.put_int("count", 5)
obj.put_string("origin", "test")
restored = ByteObject.from_bytes(obj.get_bytes())
assert restored.get_int("count") == 5
assert restored.get_string("origin") == "test"
```

SQL statements for a row:

```python
from rtdata.sqliteobject import SQLiteObject

row = SQLiteObject()
row.put_string("origin", "test")
row.put_long_int("timestamp", 0)
assert row.insert_statement() == (
    "INSERT INTO default (origin, timestamp) VALUES (:origin, :timestamp);"
)
assert row.create_table_statement() == "CREATE TABLE default (origin, timestamp);"
```

Reading configuration:

```python
from rtdata.configuration import JSONObjectConfiguration

config = JSONObjectConfiguration({"sensor": {"rate": 10}, "ids": [3, 4]})
assert config["sensor"]["rate"].get(int) == 10
assert config["ids"][1].get(int) == 4
```

Formatting and parsing Xbus traffic:

```python
from rtdata.xbus.message import LowLevelFormat, MessageId, XbusMessage, format_message
from rtdata.xbus.parser import XbusParser

frame = format_message(XbusMessage(MessageId.WAKEUP), LowLevelFormat.UART)
assert frame == bytes([0xFA, 0xFF, 0x3E, 0x00, 0xC3])

received = []
parser = XbusParser(received.append)
messages = parser.parse_buffer(frame)
assert messages[0].mid == MessageId.WAKEUP
assert received == messages
```

## What it does not do

This package provides the pieces only. It has no event broker, no sensor
drivers or sensor manager, no threads or scheduling, no writers that store
data in files, databases or over the network, and no command-line program.
`SQLiteObject` builds statements and parameters but does not open a
database, and the Xbus modules format and parse bytes but do not talk to a
device.