import pytest
from hypothesis import given, strategies as st

from wideint.integers import FixedInt128, Int128, UInt128

UINT64_MAX = (1 << 64) - 1
UINT32_MAX = (1 << 32) - 1
INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)
U128_MAX = (1 << 128) - 1

u128_values = st.integers(min_value=0, max_value=U128_MAX)
i128_values = st.integers(min_value=-(1 << 127), max_value=(1 << 127) - 1)


# Construction (examples)

def test_construction_examples():
    assert UInt128(6) == 6
    assert UInt128.from_parts(UINT64_MAX, UINT64_MAX) == UInt128.max()
    from_text = UInt128.parse("36893488147419103232")
    assert from_text == 36893488147419103232
    assert UInt128.parse("340282366920938463463374607431768211455") == UInt128.max()
    assert Int128(-42) == -42
    assert Int128.from_parts(INT64_MIN, 0) == Int128.min()
    assert Int128.parse("-42") == Int128(-42)
    assert Int128.parse("-170141183460469231731687303715884105728") == Int128.min()


def test_abstract_base_cannot_be_built():
    with pytest.raises(TypeError):
        FixedInt128(3)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        UInt128(1.5)


def test_parse_errors():
    with pytest.raises(ValueError):
        UInt128.parse("-1")
    with pytest.raises(ValueError):
        UInt128.parse("abc")
    with pytest.raises(ValueError):
        UInt128.parse(str(1 << 128))
    with pytest.raises(ValueError):
        Int128.parse("170141183460469231731687303715884105728")


def test_from_parts_range_checks():
    with pytest.raises(ValueError):
        UInt128.from_parts(0, 1 << 64)
    with pytest.raises(ValueError):
        UInt128.from_parts(1 << 64, 0)


def test_constructor_wraps():
    assert UInt128(-1) == U128_MAX
    assert Int128(1 << 127) == -(1 << 127)
    assert UInt128(Int128(-32)) == (1 << 128) - 32


def test_high_and_low():
    value = UInt128.from_parts(3, 4)
    assert (value.high, value.low) == (3, 4)
    negative = Int128(-1)
    assert negative.high == -1
    assert negative.low == UINT64_MAX


def test_limits():
    assert UInt128.max() == U128_MAX
    assert UInt128.min() == 0
    assert Int128.max() == (1 << 127) - 1
    assert Int128.min() == -(1 << 127)


def test_repr_str_hash():
    assert repr(UInt128(5)) == "UInt128(5)"
    assert repr(Int128(-5)) == "Int128(-5)"
    assert str(Int128(-42)) == "-42"
    assert hash(UInt128(5)) == hash(5)
    assert {UInt128(7): "x"}[7] == "x"


def test_bool_conversion():
    assert not UInt128(0)
    assert UInt128(1)
    assert Int128.from_parts(5, 0)
    assert bool(Int128.from_parts(-1, 0)) is True


def test_float_conversion():
    value = 123456789
    emulated = UInt128.from_parts(value, value)
    assert abs(float(emulated) / 1e27 - (value * 2**64 + value) / 1e27) < 1e-15
    assert float(UInt128(UINT64_MAX)) == float(UINT64_MAX)


# Consteval cases

@pytest.mark.parametrize("cls", [UInt128, Int128])
def test_small_arithmetic(cls):
    x, y = cls(2), cls(3)
    assert x < y and x <= y and y > x and y >= x
    assert y == 3 and x != 3 and x != y
    assert x + y == 5
    assert y - x == 1
    assert y * x == 6
    assert y // x == 1
    assert y % x == 1
    assert x + 2 == 4
    assert x - 2 == 0
    assert x * 2 == 4
    assert x // 2 == 1
    assert x % 2 == 0


@pytest.mark.parametrize("cls", [UInt128, Int128])
def test_bigger_numbers(cls):
    x = cls.from_parts(1, 2)
    y = cls.from_parts(0, UINT64_MAX - 2)
    assert x > y and x >= y and y < x and y <= x
    assert x == x and x != y
    assert x + y == cls.from_parts(1, UINT64_MAX)
    assert x - y == cls.from_parts(0, 5)
    assert x // y == cls.from_parts(0, 1)


# Sign-compare cases

def test_u128_with_signed_ints():
    x = UInt128(5)
    assert x > 4 and x >= 4 and x == 5 and x != 0 and x <= 5 and x < 10
    x *= 2
    assert x == 10
    x += 2
    assert x == 12
    x -= 2
    assert x == 10
    x //= 2
    assert x == 5


def test_i128_with_unsigned_ints():
    x = Int128(5)
    assert x > 4 and x >= 4 and x == 5 and x != 3 and x <= 5 and x < 10
    x *= 2
    assert x == 10
    x += 2
    assert x == 12
    x -= 2
    assert x == 10
    x //= 2
    assert x == 5


# Unsigned cases

@pytest.mark.parametrize(
    "lhs,rhs",
    [
        ((0, 1), (0, 2)),
        ((0, UINT32_MAX), (0, UINT32_MAX + 1)),
        ((1, UINT64_MAX), (2, UINT64_MAX)),
        ((UINT32_MAX, UINT64_MAX), (UINT32_MAX + 1, UINT64_MAX)),
    ],
)
def test_word_ordering(lhs, rhs):
    a, b = UInt128.from_parts(*lhs), UInt128.from_parts(*rhs)
    assert a < b and not b < a
    assert a <= b and not b <= a and a <= a
    assert b > a and not a > b
    assert b >= a and not a >= b and a >= a


@pytest.mark.parametrize("cls", [UInt128, Int128])
def test_shift_edge_cases(cls):
    val = cls(UINT64_MAX)
    assert val << 130 == 0
    assert val << -5 == 0
    assert val >> 130 == 0
    assert val >> -5 == 0
    assert val << UInt128(128) == 0
    assert val >> UInt128(128) == 0
    assert val << UInt128(0) == val
    assert val >> UInt128(0) == val


def test_shift_matches_multiplication():
    shifted, multiplied = UInt128(1), UInt128(1)
    for _ in range(1, 128):
        assert shifted == multiplied
        shifted <<= 1
        multiplied *= 2


def test_increment_across_word_boundary():
    value = UInt128(UINT64_MAX - 512)
    reference = UINT64_MAX - 512
    for _ in range(1024):
        value += 1
        reference += 1
        assert value == reference
    assert value.high == 1


def test_decrement_across_word_boundary():
    value = UInt128(UINT64_MAX) + 2
    reference = UINT64_MAX + 2
    for _ in range(16):
        value -= 1
        reference -= 1
        assert value == reference


def test_unary_operators_unsigned():
    assert -UInt128(1) == U128_MAX
    assert +UInt128(9) == 9
    assert ~UInt128(0) == U128_MAX
    assert abs(UInt128(9)) == 9


@pytest.mark.parametrize(
    "value,divisor",
    [(1, -32), (15, -91), (39, -100),
     (-888610053741375541, 3110266252672496347),
     (-3237361348456748317, 8011834041509972187)],
)
def test_spot_div_unsigned(value, divisor):
    emulated = UInt128(value)
    wrapped_value = value % (1 << 128)
    wrapped_divisor = divisor % (1 << 128)
    assert emulated // divisor == wrapped_value // wrapped_divisor
    assert divisor // emulated == wrapped_divisor // wrapped_value


def test_division_by_zero_yields_zero():
    assert UInt128(7) // 0 == 0
    assert 7 // UInt128(0) == 0
    assert UInt128(7) % 0 == 0
    assert Int128(-7) // Int128(0) == 0
    assert Int128(-7) % 0 == 0


def test_two_word_by_one_word():
    value = 123456789
    big = UInt128.from_parts(value, value)
    small = UInt128.from_parts(0, value)
    assert small // big == 0
    assert small // small == 1
    assert small % big == small
    assert small % small == 0
    assert big // 7 == big // UInt128(7)


@given(u128_values, u128_values)
def test_unsigned_matches_modular_arithmetic(a, b):
    x, y = UInt128(a), UInt128(b)
    assert x + y == (a + b) % (1 << 128)
    assert x - y == (a - b) % (1 << 128)
    assert x * y == (a * b) % (1 << 128)
    assert x & y == a & b
    assert x | y == a | b
    assert x ^ y == a ^ b
    if b:
        assert x // y == a // b
        assert x % y == a % b


# Signed cases

@pytest.mark.parametrize(
    "lhs,rhs,lhs_mod_rhs,rhs_mod_lhs",
    [
        (-7986186155808038790, -1184271995001643447, -880554185798178108, -1184271995001643447),
        (81, -22, 15, -22),
        (6627510689879126116, -1358166911733890047, 1194843042943565928, -1358166911733890047),
        (3120322666916965645, -1024852460939099211, 45765284099668012, -1024852460939099211),
    ],
)
def test_spot_mod_signed(lhs, rhs, lhs_mod_rhs, rhs_mod_lhs):
    value = Int128(lhs)
    result = value
    result %= rhs
    assert result == lhs_mod_rhs
    assert rhs % value == rhs_mod_lhs


def test_signed_division_truncates():
    assert Int128(-7) // 2 == -3
    assert Int128(7) // -2 == -3
    assert Int128(-7) % 2 == -1
    assert Int128(7) % -2 == 1


def test_signed_negation_and_abs():
    assert -Int128(5) == -5
    assert abs(Int128(-5)) == 5
    assert -Int128.min() == Int128.min()
    assert ~Int128(0) == -1


def test_signed_never_equal_high_word():
    for value in (0, 1, 255, INT64_MAX):
        emulated = Int128.from_parts(1, value)
        assert emulated != value
        assert (value == emulated) == (emulated == value)


def test_signed_negative_high_word_ordering():
    for value in (0, 1, 255, UINT64_MAX):
        emulated = Int128.from_parts(-1, value)
        assert emulated < value
        assert (value < emulated) != (emulated < value)


def test_signed_increment_across_int64():
    value = Int128(INT64_MAX - 512)
    reference = INT64_MAX - 512
    for _ in range(1024):
        value += 1
        reference += 1
        assert value == reference


def test_signed_right_shift_is_arithmetic():
    assert Int128(-16) >> 2 == -4
    assert Int128(-1) >> 127 == -1


def test_mixed_signedness_gives_unsigned():
    result = Int128(-1) + UInt128(2)
    assert isinstance(result, UInt128) and result == 1
    wrapped = Int128(-1) * UInt128(1)
    assert wrapped == U128_MAX


@given(i128_values, i128_values)
def test_signed_division_invariants(a, b):
    x, y = Int128(a), Int128(b)
    if b == 0 or (a == -(1 << 127) and b == -1):
        return_value = x // y
        assert return_value == (0 if b == 0 else Int128.min())
    else:
        q, r = x // y, x % y
        assert int(q) * b + int(r) == a
        assert abs(int(r)) < abs(b)
        assert int(r) == 0 or (int(r) < 0) == (a < 0)


@given(i128_values, i128_values)
def test_signed_wraps_like_twos_complement(a, b):
    x, y = Int128(a), Int128(b)
    total = (a + b) % (1 << 128)
    expected = total - (1 << 128) if total >= 1 << 127 else total
    assert x + y == expected
    assert UInt128(x - y) == (a - b) % (1 << 128)
    assert UInt128(x * y) == (a * b) % (1 << 128)