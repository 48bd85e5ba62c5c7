# jsonvalue

A small, dependency-free library for building and manipulating JSON values
in memory. Objects remember the order in which keys were inserted, strings
are checked for valid UTF-8, and reals refuse NaN and infinity.

## Installation

```
pip install jsonvalue
```

## Building values

```python
from jsonvalue.value import (
    JsonObject, JsonArray, JsonString, JsonInteger, JsonReal,
    json_true, equal,
)

doc = JsonObject()
doc.set("name", JsonString("widget"))
doc.set("count", JsonInteger(3))
doc.set("ratio", JsonReal(0.5))
doc.set("enabled", json_true())

tags = JsonArray()
tags.append(JsonString("a"))
tags.insert(0, JsonString("b"))
doc.set("tags", tags)

for key, value in doc.items():
    print(key, value)

clone = doc.deep_copy()
assert equal(doc, clone)
```

`json_true()`, `json_false()` and `json_null()` return shared constant
values. Every value has a `type` property holding a `JsonType` member, and
`copy()` / `deep_copy()` methods; values compare structurally with `==` or
`equal()`.

## Rules and errors

- Object keys and string contents may be `str` or `bytes` and must be valid
  UTF-8, otherwise `JsonError` is raised. `JsonObject.set_nocheck` and
  `JsonString.set_nocheck` skip that check.
- Storing a container inside itself, or storing `None` or something that is
  not a JSON value, raises `JsonError`.
- `JsonReal` rejects NaN and infinities with `JsonError`.
- `JsonObject.get` returns `None` for a missing key; `JsonObject.delete`
  raises `KeyError` for one.
- `JsonArray.get` returns `None` for an index out of range; `set`, `insert`
  and `remove` raise `IndexError` for one (`insert` accepts an index equal
  to the length).
- `JsonObject.update`, `update_existing` and `update_missing` merge another
  object into this one, overwriting every key, only existing keys, or only
  adding missing keys respectively. `JsonArray.extend` appends the elements
  of another array. Passing anything else raises `JsonError`.
- `JsonObject.items()` and iteration work on a snapshot, so members may be
  removed while looping. `JsonObject.iter_at(key)` iterates from `key`
  onwards.

`number_value()` returns an integer or real as a float (0.0 for other
values), and `sprintf(fmt, *args)` builds a `JsonString` with %-formatting.

## Helpers

- `jsonvalue.utf` – UTF-8 helpers: `check_string`, `check_first`,
  `check_full`, `iterate` (yields code points) and `encode_codepoint`.
- `jsonvalue.strconv` – `parse_real(text)`, which raises `OverflowError` for
  out-of-range values, and `format_real(value, precision, fractional_digits)`,
  which always produces text containing a dot or an exponent so it reads back
  as a real rather than an integer.
- `jsonvalue.strbuffer` – `StringBuffer`, a growable byte buffer with
  `append`, `append_byte`, `pop`, `clear`, `value` and `steal`.
- `jsonvalue.version` – `version_str()` and `version_cmp(major, minor, micro)`.

## What this package does not do

It models JSON values in memory only. It does not parse JSON text into
values or serialise values back to JSON text, and it has no command-line
tool.

## Running the tests

```
pip install "jsonvalue[test]"
pytest
```