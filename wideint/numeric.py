"""Saturating arithmetic and saturating conversions for 128-bit values."""

from __future__ import annotations

import enum

from wideint.integers import FixedInt128, Int128, UInt128

__all__ = [
    "IntegerKind",
    "bit_width",
    "add_sat",
    "sub_sat",
    "mul_sat",
    "div_sat",
    "saturate_cast",
]


class IntegerKind(enum.Enum):
    """Target integer types for :func:`saturate_cast`."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)
    INT128 = (128, True)
    UINT128 = (128, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


def bit_width(value: FixedInt128 | int) -> int:
    """Number of bits needed to hold the unsigned 128-bit pattern of ``value``."""
    return int(UInt128(value)).bit_length()


def _operand_type(x: object, y: object) -> type[FixedInt128]:
    fixed = [type(v) for v in (x, y) if isinstance(v, FixedInt128)]
    if not fixed:
        raise TypeError("at least one operand must be a UInt128 or Int128")
    if len(set(fixed)) > 1:
        raise TypeError("operands must both be UInt128 or both be Int128")
    for v in (x, y):
        if not isinstance(v, (FixedInt128, int)) or isinstance(v, bool):
            raise TypeError(f"unsupported operand type {type(v).__name__}")
    return fixed[0]


def _clamp(cls: type[FixedInt128], number: int) -> FixedInt128:
    low, high = int(cls.min()), int(cls.max())
    return cls(min(max(number, low), high))


def add_sat(x: FixedInt128 | int, y: FixedInt128 | int) -> FixedInt128:
    """Add, clamping to the type's range instead of wrapping."""
    cls = _operand_type(x, y)
    return _clamp(cls, int(cls(x)) + int(cls(y)))


def sub_sat(x: FixedInt128 | int, y: FixedInt128 | int) -> FixedInt128:
    """Subtract, clamping to the type's range instead of wrapping."""
    cls = _operand_type(x, y)
    return _clamp(cls, int(cls(x)) - int(cls(y)))


def mul_sat(x: FixedInt128 | int, y: FixedInt128 | int) -> FixedInt128:
    """Multiply, saturating when the operands' bit widths could overflow.

    The decision is made on the sum of the operands' bit widths, so a
    product that would just fit may still saturate.
    """
    cls = _operand_type(x, y)
    a, b = cls(x), cls(y)
    if cls is UInt128:
        if bit_width(a) + bit_width(b) > 128:
            return cls.max()
        return a * b
    if bit_width(abs(a)) + bit_width(abs(b)) > 127:
        return cls.min() if (a < 0) != (b < 0) else cls.max()
    return a * b


def div_sat(x: FixedInt128 | int, y: FixedInt128 | int) -> FixedInt128:
    """Divide, mapping the one overflowing signed case to the maximum."""
    cls = _operand_type(x, y)
    a, b = cls(x), cls(y)
    if cls is Int128 and a == cls.min() and b == -1:
        return cls.max()
    return a // b


def saturate_cast(value: FixedInt128, target: IntegerKind) -> FixedInt128 | int:
    """Convert ``value`` to ``target``, clamping to the target's range.

    128-bit targets give ``UInt128`` or ``Int128``; narrower ones give ``int``.
    """
    if not isinstance(value, FixedInt128):
        raise TypeError(f"expected UInt128 or Int128, got {type(value).__name__}")
    if not isinstance(target, IntegerKind):
        raise TypeError(f"expected an IntegerKind, got {type(target).__name__}")
    number = min(max(int(value), target.min), target.max)
    if target is IntegerKind.UINT128:
        return UInt128(number)
    if target is IntegerKind.INT128:
        return Int128(number)
    return number