# jwtbase

Small building blocks for working with JSON Web Tokens:

- `jwtbase.base`: Base64 encoding and decoding over a choice of alphabet,
  each with its own padding fill, plus helpers that pad and trim encoded text.
- `jwtbase.traits`: helpers that sort parsed JSON values by kind and return
  them as typed Python values, plus `parse` and `serialize`.

The package has no runtime dependencies.

## Installation

```
pip install jwtbase
```

## Base64 and Base64URL

`jwtbase.base` defines three ready-made `Alphabet` instances:

- `BASE64`: the standard alphabet (`+` and `/`), padded with `=`;
- `BASE64URL`: the URL-safe alphabet (`-` and `_`), padded with `%3d`;
- `BASE64URL_PERCENT_ENCODING`: the URL-safe alphabet, padded with `%3D`.
  When decoding it accepts both `%3D` and `%3d`.

An `Alphabet` holds `data`, a string of 64 distinct symbols, and `fills`, a
tuple of non-empty fill patterns. Its `fill` property is the first of them, and
encoding and padding write that one. Decoding accepts any of the fills. If
either rule is broken, building an `Alphabet` raises `ValueError`.

```python
from jwtbase.base import BASE64, BASE64URL, decode, encode, pad, trim

encode("1234", BASE64)        # "MTIzNA=="
encode(b"1234", BASE64URL)    # "MTIzNA%3d%3d"
decode("MTI=", BASE64)        # b"12"

# JWT segments carry no padding: add it before decoding, strip it after encoding.
decode(pad("MTIzNA", BASE64URL), BASE64URL)   # b"1234"
trim(encode("1", BASE64URL), BASE64URL)       # "MQ"
```

`encode` takes bytes-like data or a `str`, which is encoded as UTF-8. It
returns text. `decode` returns `bytes`. Both use `BASE64` when you give no
alphabet, and so do `pad` and `trim`.

- `pad(base, alphabet)` appends the alphabet's fill until the length of `base`
  is a multiple of four.
- `trim(base, alphabet)` cuts `base` at the first fill pattern it contains.

`decode` raises `DecodeError`, a subclass of `ValueError`, in three cases:

- more than two fills end the input;
- the total size is wrong;
- a character is not in the alphabet.

The lower-level helpers are public as well:

- `index(alphabet, symbol)` gives the position of a symbol in an alphabet, for
  example `index(BASE64, "g") == 32`. It raises `DecodeError` for a symbol that
  is not in the alphabet.
- `count_padding(base, fills)` returns a `Padding(count, length)`: how many
  fill patterns end `base`, and how many characters they take up. At each step
  it tries the fills in order. For example,
  `count_padding("MTIzNA%3d%3D", ["%3d", "%3D"]) == Padding(2, 6)`.
  `Padding` values can be added together.

## JSON values

```python
from jwtbase.traits import JsonType, as_integer, get_type, parse, serialize

value = parse('{"exp": 1711706773, "set": {"only": {"one": "line"}}}')
get_type(value)               # JsonType.OBJECT
as_integer(value["exp"])      # 1711706773
serialize(value)              # '{"exp":1711706773,"set":{"only":{"one":"line"}}}'
```

`get_type` returns one of the `JsonType` members:

- `BOOLEAN`
- `INTEGER`
- `NUMBER` (a `float`)
- `STRING`
- `ARRAY` (a `list`)
- `OBJECT` (a `dict`)

It raises `TypeError` for `None` and for any other object.

The `as_object`, `as_array`, `as_string`, `as_boolean` and `as_number` helpers
return the value when it has the kind asked for. Otherwise they raise
`TypeError`.

`as_integer` returns a signed 64-bit value. Unsigned values from `2**63` up to
`2**64 - 1` wrap around to negative numbers. Integers outside that range raise
`OverflowError`.

`parse` reads strict JSON from `str` or `bytes`. It raises `ValueError` on
malformed text and on `NaN` and `Infinity`.

`serialize` writes compact JSON and leaves non-ASCII characters as they are. It
raises `ValueError` for non-finite floats.

## What this package does not do

The package does not create, sign, verify or decode whole tokens, and it has no
key handling or cryptographic algorithms. It offers only the encoding and
JSON-value pieces that such work is built on.

## Running the tests

```
pip install -e ".[test]"
pytest
```