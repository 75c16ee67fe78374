"""Fixed-width 128-bit signed and unsigned integers with saturating helpers."""

__version__ = "0.1.0"
__all__ = ["division", "integers", "literals", "numeric"]