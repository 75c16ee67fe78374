"""Shorthand constructors for 128-bit values from decimal text or ints."""

from __future__ import annotations

from wideint.integers import FixedInt128, Int128, UInt128

__all__ = ["u128", "i128"]


def _build(cls: type[FixedInt128], value: str | int) -> FixedInt128:
    if isinstance(value, str):
        return cls.parse(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"expected str or int for {cls.__name__}, got {type(value).__name__}"
        )
    if not int(cls.min()) <= value <= int(cls.max()):
        raise ValueError(f"{value} is out of range for {cls.__name__}")
    return cls(value)


def u128(value: str | int) -> UInt128:
    """Build a ``UInt128`` from a base-10 string or an in-range int."""
    result = _build(UInt128, value)
    assert isinstance(result, UInt128)
    return result


def i128(value: str | int) -> Int128:
    """Build an ``Int128`` from a base-10 string or an in-range int."""
    result = _build(Int128, value)
    assert isinstance(result, Int128)
    return result