"""Fixed-width 128-bit integers with wrap-around arithmetic.

``UInt128`` holds values in ``[0, 2**128)`` and ``Int128`` holds two's
complement values in ``[-2**127, 2**127)``. Every result wraps to the width
of its type. Division truncates toward zero, the remainder takes the sign of
the dividend, and dividing by zero yields zero for both quotient and
remainder.
"""

from __future__ import annotations

import re
from typing import Callable, ClassVar

from wideint.division import divmod128

__all__ = ["FixedInt128", "UInt128", "Int128"]

_BITS = 128
_MOD = 1 << _BITS
_MASK128 = _MOD - 1
_MASK64 = (1 << 64) - 1
_SIGN_BIT = 1 << (_BITS - 1)
_DECIMAL = re.compile(r"[+-]?[0-9]+")

_Op = Callable[[type, int, int], int]


class FixedInt128:
    """Common behaviour of the signed and unsigned 128-bit integer types."""

    __slots__ = ("_value",)

    _signed: ClassVar[bool] = False

    def __init__(self, value: int | FixedInt128 = 0) -> None:
        if type(self) is FixedInt128:
            raise TypeError("FixedInt128 is abstract; use UInt128 or Int128")
        if isinstance(value, FixedInt128):
            raw = value._value
        elif isinstance(value, int):
            raw = value
        else:
            raise TypeError(f"cannot build {type(self).__name__} from {type(value).__name__}")
        self._value = self._wrap(raw)

    @classmethod
    def _wrap(cls, value: int) -> int:
        wrapped = value & _MASK128
        if cls._signed and wrapped & _SIGN_BIT:
            wrapped -= _MOD
        return wrapped

    @classmethod
    def from_parts(cls, high: int, low: int) -> FixedInt128:
        """Build a value from its high and low 64-bit halves."""
        high, low = int(high), int(low)
        if not 0 <= low <= _MASK64:
            raise ValueError(f"low word {low} does not fit in 64 bits")
        if not -(1 << 63) <= high <= _MASK64:
            raise ValueError(f"high word {high} does not fit in 64 bits")
        return cls(((high & _MASK64) << 64) | low)

    @property
    def high(self) -> int:
        """The upper 64 bits; signed for ``Int128``."""
        word = (self._value & _MASK128) >> 64
        if self._signed and word >> 63:
            word -= 1 << 64
        return word

    @property
    def low(self) -> int:
        """The lower 64 bits as an unsigned value."""
        return self._value & _MASK64

    @classmethod
    def max(cls) -> FixedInt128:
        """The largest representable value."""
        return cls(_SIGN_BIT - 1 if cls._signed else _MASK128)

    @classmethod
    def min(cls) -> FixedInt128:
        """The smallest representable value."""
        return cls(-_SIGN_BIT if cls._signed else 0)

    @classmethod
    def parse(cls, text: str) -> FixedInt128:
        """Parse a base-10 integer, rejecting values out of range."""
        stripped = text.strip()
        if not _DECIMAL.fullmatch(stripped):
            raise ValueError(f"invalid decimal integer: {text!r}")
        number = int(stripped)
        if not int(cls.min()) <= number <= int(cls.max()):
            raise ValueError(f"{stripped} is out of range for {cls.__name__}")
        return cls(number)

    # Conversions

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    # Comparisons are numeric against ints and other 128-bit values.

    @staticmethod
    def _number(other: object) -> int | None:
        if isinstance(other, (FixedInt128, int)):
            return int(other)
        return None

    def __eq__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self._value == number

    def __lt__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self._value < number

    def __le__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self._value <= number

    def __gt__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self._value > number

    def __ge__(self, other: object) -> bool:
        number = self._number(other)
        if number is None:
            return NotImplemented
        return self._value >= number

    # Unary operators

    def __pos__(self) -> FixedInt128:
        return type(self)(self._value)

    def __neg__(self) -> FixedInt128:
        return type(self)(-self._value)

    def __invert__(self) -> FixedInt128:
        return type(self)(~self._value)

    def __abs__(self) -> FixedInt128:
        return type(self)(abs(self._value))

    # Binary arithmetic

    @classmethod
    def _divmod(cls, a: int, b: int) -> tuple[int, int]:
        if b == 0:
            return 0, 0
        if not cls._signed:
            return divmod128(a, b)
        quotient, remainder = divmod128(abs(a), abs(b))
        if (a < 0) != (b < 0):
            quotient = -quotient
        if a < 0:
            remainder = -remainder
        return quotient, remainder

    def _binary(self, other: object, op: _Op, reflected: bool = False) -> FixedInt128:
        if isinstance(other, FixedInt128):
            cls = type(self) if type(other) is type(self) else UInt128
        elif isinstance(other, int):
            cls = type(self)
        else:
            return NotImplemented
        a, b = cls._wrap(self._value), cls._wrap(int(other))
        if reflected:
            a, b = b, a
        return cls(op(cls, a, b))

    def __add__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a + b)

    def __radd__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a + b, reflected=True)

    def __sub__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a - b)

    def __rsub__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a - b, reflected=True)

    def __mul__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a * b)

    def __rmul__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a * b, reflected=True)

    def __floordiv__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda cls, a, b: cls._divmod(a, b)[0])

    def __rfloordiv__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda cls, a, b: cls._divmod(a, b)[0], reflected=True)

    def __mod__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda cls, a, b: cls._divmod(a, b)[1])

    def __rmod__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda cls, a, b: cls._divmod(a, b)[1], reflected=True)

    def __and__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a & b)

    def __rand__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a & b, reflected=True)

    def __or__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a | b)

    def __ror__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a | b, reflected=True)

    def __xor__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a ^ b)

    def __rxor__(self, other: object) -> FixedInt128:
        return self._binary(other, lambda _cls, a, b: a ^ b, reflected=True)

    # Shifts: amounts outside [0, 128) give zero.

    def _shift_amount(self, other: object) -> int | None:
        if isinstance(other, (FixedInt128, int)):
            return int(other)
        return None

    def __lshift__(self, other: object) -> FixedInt128:
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        if not 0 <= amount < _BITS:
            return type(self)(0)
        return type(self)(self._value << amount)

    def __rshift__(self, other: object) -> FixedInt128:
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        if not 0 <= amount < _BITS:
            return type(self)(0)
        return type(self)(self._value >> amount)


class UInt128(FixedInt128):
    """Unsigned 128-bit integer."""

    __slots__ = ()
    _signed: ClassVar[bool] = False


class Int128(FixedInt128):
    """Signed two's complement 128-bit integer."""

    __slots__ = ()
    _signed: ClassVar[bool] = True