# wideint

Fixed-width 128-bit integers for Python. `UInt128` holds values in
`[0, 2**128)` and `Int128` holds two's complement values in
`[-2**127, 2**127)`. Arithmetic wraps around to the width of the type, shifts
by amounts outside `[0, 128)` give zero, and division truncates toward zero.

## Installation

```
pip install wideint
```

## Constructing values

```python
from wideint.integers import UInt128, Int128
from wideint.literals import u128, i128

a = UInt128(6)
b = UInt128.from_parts(0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF)
assert b == UInt128.max()

c = u128("36893488147419103232")      # values beyond 2**64 from text
d = UInt128.parse("340282366920938463463374607431768211455")
assert d == b

e = i128("-42")
assert e == Int128(-42)
assert Int128.from_parts(-(2**63), 0) == Int128.min()
```

- The constructors `UInt128(n)` and `Int128(n)` accept any int or 128-bit
  value and wrap it to the type's width.
- `parse(text)` reads a base-10 integer (optional sign, surrounding
  whitespace allowed) and raises `ValueError` for malformed text or values
  out of range.
- `u128(value)` and `i128(value)` take a decimal string or an int; an int out
  of range raises `ValueError`, any other type raises `TypeError`.
- `from_parts(high, low)` builds a value from two 64-bit halves.

Each value exposes its halves through `high` (signed for `Int128`) and `low`,
converts to `int`, `float`, `bool` and `str`, can be used as an index, and is
hashable. `max()` and `min()` give the type's limits.

## Arithmetic

The operators `+ - * // % & | ^ ~ << >>`, unary `-`, `+` and `abs()` work
between 128-bit values and plain Python integers and return a 128-bit value
that has wrapped to fit. Combining a `UInt128` with an `Int128` gives a
`UInt128`. Comparisons are numeric against ints and other 128-bit values.

```python
assert UInt128(0) - 1 == UInt128.max()
assert UInt128(2) * 3 == 6
assert Int128(-7) // 2 == -3          # truncates toward zero
assert Int128(-7) % 2 == -1           # remainder takes the dividend's sign
assert UInt128(5) // 0 == 0           # division by zero yields zero
assert (UInt128(1) << 130) == 0
```

## Saturating helpers

`wideint.numeric` offers operations that clamp to the type's limits instead of
wrapping, and conversion to narrower integer kinds:

```python
from wideint.numeric import add_sat, sub_sat, mul_sat, div_sat, saturate_cast, IntegerKind

assert add_sat(UInt128.max(), UInt128(1)) == UInt128.max()
assert sub_sat(UInt128(0), UInt128(1)) == 0
assert div_sat(Int128.min(), Int128(-1)) == Int128.max()
assert saturate_cast(UInt128(300), IntegerKind.UINT8) == 255
```

- `add_sat`, `sub_sat`, `mul_sat` and `div_sat` need at least one 128-bit
  operand; both 128-bit operands must be of the same type.
- `mul_sat` saturates when the sum of the operands' bit widths exceeds the
  type's value bits (128 unsigned, 127 signed), so a product that would just
  fit may still saturate.
- `saturate_cast(value, kind)` clamps to an `IntegerKind` (`INT8` …
  `UINT128`); 128-bit kinds return `UInt128` or `Int128`, narrower kinds
  return a plain `int`.
- `bit_width(value)` gives the number of bits in the unsigned 128-bit pattern
  of a value.

## Division routines

`wideint.division` holds the word-based long-division routines the types are
built on, working on plain ints that hold unsigned 128-bit magnitudes:

- `divmod128(dividend, divisor)` returns quotient and remainder.
- `knuth_div(dividend, divisor)` returns only the quotient.
- `one_word_div` and `half_word_div` handle divisors of at most 64 and 32 bits.
- `knuth_divide(dividend_words, divisor_words, need_remainder)` divides
  little-endian lists of 32-bit words; `to_words` and `from_words` convert
  between ints and such lists.

These raise `ZeroDivisionError` for a zero divisor and `ValueError` for
operands out of range.

## Scope

This is a library only; it provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```