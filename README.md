# ankoconv

Loose conversions of arbitrary values to strings, booleans, floats and
integers, in the way a dynamically typed scripting language coerces its
operands.

## Installation

```
pip install ankoconv
```

## Usage

Everything lives in `ankoconv.convert`. Each conversion comes in two forms:

- `try_to_*` raises `ConversionError` (a subclass of `ValueError`) when the
  value cannot be converted.
- `to_*` never raises and falls back to a zero value (`False`, `0.0` or `0`).

```python
from ankoconv.convert import (
    ConversionError,
    to_string,
    to_bool, try_to_bool,
    to_float64, try_to_float64,
    to_int64, try_to_int64,
    to_int, try_to_int,
)

to_string("abc")          # 'abc'
to_string(1.5)            # '1.5'
to_string(None)           # '<nil>'
to_string(True)           # 'true'
to_string([1, 2])         # '[1 2]'
to_string({"a": 1})       # 'map[a:1]'

to_bool("")               # False
to_bool("false")          # False
to_bool("0.0")            # False
to_bool("yes")            # True
to_bool([1])              # True
to_bool({})               # False

to_float64("2.5")         # 2.5
to_float64(True)          # 1.0
to_float64("abc")         # 0.0

to_int64("42")            # 42
to_int64(3.9)             # 3
to_int64("0x1f")          # 0  (not a valid integer string)
to_int("-7")              # -7

try:
    try_to_int64("abc")
except ConversionError as err:
    print(err)            # couldn't convert to integer
```

## Rules

### `to_string`

Strings come back unchanged. `None` becomes `<nil>`, booleans `true` /
`false`. Floats use their shortest form, switching to exponent notation
(`1e+21`, `1e-05`) for very large or small magnitudes; infinities and NaN
print as `+Inf`, `-Inf` and `NaN`. Lists, tuples and bytes print as
space-separated items in brackets; dicts print as `map[key:value ...]` with
keys sorted. Anything else uses `str()`.

### `try_to_bool` / `to_bool`

- Numbers and booleans are true when non-zero.
- Strings are false when empty, when they are one of `0`, `f`, `F`,
  `false`, `FALSE`, `False`, or when they parse as the number zero; every
  other string is true.
- Lists, tuples, dicts, sets and bytes are true when non-empty.
- Any other type raises `ConversionError("unknown type")`.

### `try_to_float64` / `to_float64`

Numbers convert directly and booleans become `1.0` / `0.0`. Strings must
parse as a float: decimal or exponent notation, hexadecimal floats with a
`p` exponent (`0x1p-2`), and `inf` / `nan` spellings. Surrounding
whitespace, underscores, non-ASCII digits and values that overflow to
infinity are rejected.

### `try_to_int64`, `try_to_int` / `to_int64`, `to_int`

Booleans become `1` / `0`. Python integers wrap into the signed 64-bit
range. Floats are truncated toward zero; infinities, NaN and values outside
the 64-bit range become `-9223372036854775808`. Strings must be plain
decimal digits with an optional sign and fit in a signed 64-bit integer. A
string starting with `0x` is read as hexadecimal digits, but the `x` itself
is not a hex digit, so such strings are always rejected. `try_to_int` and
`to_int` behave exactly like their 64-bit counterparts.

## Scope

This package provides the value conversions only. It contains no parser,
interpreter or command-line tool for running scripts.