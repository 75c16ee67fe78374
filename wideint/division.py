"""Unsigned 128-bit division built from 32-bit and 64-bit word operations.

Values are Python ints holding unsigned magnitudes in ``[0, 2**128)``.
Small divisors take a short-division path. Larger divisors use Knuth's
Algorithm D (The Art of Computer Programming, Vol. 2, section 4.3.1) on
32-bit digits.
"""

from __future__ import annotations

from collections.abc import Sequence

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
HALF_MASK = (1 << 64) - 1
LIMIT = 1 << 128

__all__ = [
    "to_words",
    "from_words",
    "half_word_div",
    "knuth_divide",
    "one_word_div",
    "knuth_div",
    "divmod128",
]


def _check_operand(value: int, name: str) -> None:
    if not 0 <= value < LIMIT:
        raise ValueError(f"{name} must be an unsigned 128-bit value, got {value}")


def _split(value: int, count: int) -> list[int]:
    """Split ``value`` into exactly ``count`` little-endian 32-bit words."""
    return [(value >> (WORD_BITS * i)) & WORD_MASK for i in range(count)]


def _trim(words: Sequence[int]) -> list[int]:
    trimmed = list(words)
    while trimmed and trimmed[-1] == 0:
        trimmed.pop()
    return trimmed


def to_words(value: int) -> list[int]:
    """Return the little-endian 32-bit words of ``value`` without leading zero words."""
    _check_operand(value, "value")
    return _trim(_split(value, 4))


def from_words(words: Sequence[int]) -> int:
    """Combine little-endian 32-bit words into an integer."""
    result = 0
    for position, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"word {word} does not fit in 32 bits")
        result |= word << (WORD_BITS * position)
    return result


def half_word_div(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide a 128-bit value by a non-zero divisor of at most 32 bits.

    Returns ``(quotient, remainder)``.
    """
    _check_operand(dividend, "dividend")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if not 0 < divisor <= WORD_MASK:
        raise ValueError(f"divisor {divisor} does not fit in 32 bits")

    high, low = dividend >> 64, dividend & HALF_MASK

    q_high, rem = divmod(high, divisor)
    rem = (rem << WORD_BITS) | (low >> WORD_BITS)
    q_mid, rem = divmod(rem, divisor)
    rem = (rem << WORD_BITS) | (low & WORD_MASK)
    q_low, rem = divmod(rem, divisor)

    return (q_high << 64) | (q_mid << WORD_BITS) | q_low, rem


def knuth_divide(
    dividend_words: Sequence[int],
    divisor_words: Sequence[int],
    need_remainder: bool = True,
) -> tuple[list[int], list[int] | None]:
    """Divide multi-word numbers given as little-endian 32-bit words.

    Returns ``(quotient_words, remainder_words)``; the remainder is ``None``
    when ``need_remainder`` is false.
    """
    u = _trim(dividend_words)
    v = _trim(divisor_words)
    for word in (*u, *v):
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"word {word} does not fit in 32 bits")
    if not v:
        raise ZeroDivisionError("division by zero")

    m, n = len(u), len(v)
    if m < n:
        return [], (u if need_remainder else None)

    if n == 1:
        quotient, remainder = divmod(from_words(u), v[0])
        return _split(quotient, m), ([remainder] if need_remainder else None)

    # D1: normalise so the top divisor word has its high bit set.
    shift = WORD_BITS - v[-1].bit_length()
    un = _split(from_words(u) << shift, m + 1)
    vn = _split(from_words(v) << shift, n)
    divisor_value = from_words(vn)
    top, second = vn[-1], vn[-2]

    quotient = [0] * (m - n + 1)

    # D2..D7
    for j in reversed(range(m - n + 1)):
        # D3: estimate the quotient digit.
        q_hat, r_hat = divmod((un[j + n] << WORD_BITS) | un[j + n - 1], top)
        while q_hat > WORD_MASK or q_hat * second > ((r_hat << WORD_BITS) | un[j + n - 2]):
            q_hat -= 1
            r_hat += top
            if r_hat > WORD_MASK:
                break

        # D4: multiply and subtract.
        window = from_words(un[j:j + n + 1]) - q_hat * divisor_value

        # D5/D6: the estimate was one too large; add the divisor back.
        if window < 0:
            q_hat -= 1
            window += divisor_value

        un[j:j + n + 1] = _split(window, n + 1)
        quotient[j] = q_hat

    if not need_remainder:
        return quotient, None

    # D8: undo the normalisation.
    return quotient, _split(from_words(un[:n]) >> shift, n)


def one_word_div(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide a 128-bit value by a non-zero divisor of at most 64 bits.

    Returns ``(quotient, remainder)``.
    """
    _check_operand(dividend, "dividend")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if not 0 < divisor <= HALF_MASK:
        raise ValueError(f"divisor {divisor} does not fit in 64 bits")

    if divisor <= WORD_MASK:
        return half_word_div(dividend, divisor)

    quotient, remainder = knuth_divide(to_words(dividend), to_words(divisor), True)
    return from_words(quotient), from_words(remainder or [])


def knuth_div(dividend: int, divisor: int) -> int:
    """Return the quotient of two 128-bit values using Algorithm D."""
    _check_operand(dividend, "dividend")
    _check_operand(divisor, "divisor")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient, _ = knuth_divide(to_words(dividend), to_words(divisor), False)
    return from_words(quotient)


def divmod128(dividend: int, divisor: int) -> tuple[int, int]:
    """Return ``(quotient, remainder)`` of two unsigned 128-bit values."""
    _check_operand(dividend, "dividend")
    _check_operand(divisor, "divisor")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend < divisor:
        return 0, dividend
    if divisor <= HALF_MASK:
        return one_word_div(dividend, divisor)
    quotient, remainder = knuth_divide(to_words(dividend), to_words(divisor), True)
    return from_words(quotient), from_words(remainder or [])