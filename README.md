# respvalue

Two building blocks for code that talks to a Redis server: a family of
immutable reply values, and the encoding of Python values into command
arguments.

## Reply values: `respvalue.value`

`Value` is the base class of six frozen dataclasses:

| Class    | Holds                                                      |
|----------|------------------------------------------------------------|
| `Nil`    | nothing; a nil reply                                       |
| `Int`    | `value`, an `int` in the signed 64-bit range               |
| `Data`   | `value`, `bytes` (a `bytearray` or `memoryview` is copied) |
| `Bulk`   | `items`, a tuple of `Value` (any iterable is accepted)     |
| `Status` | `value`, a `str`                                           |
| `Okay`   | nothing; the status reply `OK`                             |

Construction checks its input: `Int(True)` or `Data("text")` raises
`TypeError`, and an `Int` outside the 64-bit range raises `ValueError`.
Values compare by content and can be hashed.

Every value has three helpers:

- `looks_like_cursor()` is true for a two-item `Bulk` whose first item is
  `Data` and whose second is a `Bulk`, the shape of a `SCAN`-style reply.
- `as_sequence()` returns the items of a `Bulk`, an empty tuple for `Nil`,
  and `None` for anything else.
- `as_map_iter()` returns, for a `Bulk`, an iterator of `(key, value)` pairs
  taken two items at a time (an unpaired last item is dropped), and `None`
  for anything else.

`repr()` gives a compact dump such as `bulk(int(7), string-data('"a"'), nil)`.
Data that is not valid UTF-8 is shown as `binary-data([...])`.

```python
from respvalue.value import Bulk, Data, Int, Nil

reply = Bulk([Data(b"0"), Bulk([Data(b"a"), Data(b"1")])])
reply.looks_like_cursor()                 # True
list(reply.items[1].as_map_iter())        # [(Data(b"a"), Data(b"1"))]
Nil().as_sequence()                       # ()
Int(5).as_sequence()                      # None
```

## Command arguments: `respvalue.args`

`to_redis_args(value)` returns the list of byte strings that `value` turns
into. `write_redis_args(value, out)` does the same work but appends to any
object with an `append` method.

- `bool` becomes `b"1"` or `b"0"`.
- `int` becomes its decimal digits.
- `float` becomes its shortest round-trip text, such as `b"1.5"`, `b"0.0"`,
  `b"1e-7"`, `b"inf"` or `b"NaN"`.
- `str` is encoded as UTF-8, and `bytes`, `bytearray` or `memoryview` is
  passed through unchanged.
- `None` produces no argument.
- Lists and tuples are flattened in order. Sets are flattened in sorted
  order when their items can be sorted.
- Mappings become key, value, key, value… in key order, which suits
  `HMSET`-style commands. Every key and every value must each be a single
  argument, or `ValueError` is raised.
- Any other type raises `TypeError`.

`is_single_arg(value)` tells from the shape of `value` whether it is exactly
one argument:

- a tuple is single when it has one element;
- a list is single when it has one item that is itself single;
- a set or mapping is single when it has at most one entry;
- `None` is never single;
- any other value always is.

`describe_numeric_behavior(value)` returns a `NumericBehavior`:
`NUMBER_IS_INTEGER` for an `int`, `NUMBER_IS_FLOAT` for a `float`, and
`NON_NUMERIC` for everything else, `bool` included. This lets a caller pick,
for example, between `INCRBY` and `INCRBYFLOAT`.

```python
from respvalue.args import describe_numeric_behavior, is_single_arg, to_redis_args

to_redis_args(["key", 42, 1.5, True])   # [b"key", b"42", b"1.5", b"1"]
to_redis_args({"b": 2, "a": 1})         # [b"a", b"1", b"b", b"2"]
is_single_arg("foo")                    # True
is_single_arg([b"a", b"b"])             # False
describe_numeric_behavior(2.5)          # NumericBehavior.NUMBER_IS_FLOAT
```

## What this package does not do

- It does not open connections or send commands.
- It does not read or write the wire format.
- It does not convert reply values into Python types such as `int`, `str`,
  `dict` or tuples.
- It has no error type for server replies.

You supply `Value` objects yourself, and you send the argument lists it
produces through your own client.

## Installation

```
pip install respvalue
```

No third-party dependencies are needed.

## Running the tests

```
pip install -e ".[test]"
pytest
```