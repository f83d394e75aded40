import pytest

from snckit.int96 import Int96

VALUES = [0, 1, -1, 123456789, -987654321, 2**63 + 5, -(2**80), 2**94 - 3]
HALF = Int96.from_parts(0x40000000, 0, 0)


def test_from_parts_exposes_words():
    value = Int96.from_parts(0x2AAAAAAA, 0xAB000000, 0)
    assert (value.hi, value.mid, value.lo) == (0x2AAAAAAA, 0xAB000000, 0)


def test_from_parts_rejects_wide_word():
    with pytest.raises(ValueError):
        Int96.from_parts(1 << 32, 0, 0)


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        Int96("5")


@pytest.mark.parametrize("value", VALUES)
def test_int_round_trip(value):
    assert int(Int96(value)) == value


def test_minus_one_is_all_ones():
    minus_one = Int96(-1)
    assert minus_one == Int96.from_parts(0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF)
    assert minus_one.is_negative()
    assert not minus_one.is_positive()


def test_wraps_at_96_bits():
    assert Int96(2**96).is_zero()
    assert Int96(2**95).is_negative()


def test_equal_values_hash_alike():
    assert len({Int96(5), Int96(5 + 2**96)}) == 1


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", [0, 7, -3, 2**70])
def test_add_then_subtract_round_trip(a, b):
    assert (Int96(a) + Int96(b)) - Int96(b) == Int96(a)


@pytest.mark.parametrize("value", VALUES)
def test_negation(value):
    x = Int96(value)
    assert x.negate().negate() == x
    assert (x + (-x)).is_zero()


@pytest.mark.parametrize("value", VALUES)
def test_invert_plus_one_is_negation(value):
    x = Int96(value)
    assert (~x) + Int96(1) == -x


@pytest.mark.parametrize(
    "a, b", [(12345, 6789), (-40000, 3), (-(2**40), -(2**30)), (2**60, 0)]
)
def test_multiplication(a, b):
    assert int(Int96(a) * Int96(b)) == a * b


@pytest.mark.parametrize(
    "a, b", [(10**25, 10**9), (2**64 + 17, 3), (999999, 1000), (2**90, 7)]
)
def test_division_with_small_divisor_is_exact(a, b):
    assert int(Int96(a) / Int96(b)) == a // b
    assert int(Int96(-a) / Int96(b)) == -(a // b)
    assert int(Int96(a) / Int96(-b)) == -(a // b)


def test_modulus_gives_quotient():
    assert Int96(10**20).modulus(Int96(12345)) == Int96(10**20) / Int96(12345)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        Int96(5) / Int96(0)


def test_shift_round_trip():
    for value in (1, 123456789, 2**63 + 5):
        assert (Int96(value) << 32) >> 32 == Int96(value)
        assert Int96(value) << 0 == Int96(value)


def test_shift_edges():
    assert (Int96(1) << 95).is_negative()
    assert (Int96(1) << 96).is_zero()
    assert int(Int96(-1) >> 95) == 1
    assert (Int96(-1) >> 96).is_zero()


def test_negative_shift_rejected():
    with pytest.raises(ValueError):
        Int96(1) << -1


@pytest.mark.parametrize("value", VALUES)
def test_bitwise_identities(value):
    x = Int96(value)
    assert (x ^ x).is_zero()
    assert (x & ~x).is_zero()
    assert (x | ~x) == Int96(-1)
    assert (x | Int96(0)) == x


def test_get_bit_counts_from_top():
    assert Int96(-1).get_bit(0)
    assert Int96(1).get_bit(95)
    assert not Int96(1).get_bit(94)


@pytest.mark.parametrize("index", [0, 31, 32, 63, 64, 95])
def test_set_bit_round_trip(index):
    with_bit = Int96(0).set_bit(index, True)
    assert with_bit.get_bit(index)
    assert with_bit.set_bit(index, False).is_zero()


def test_bit_index_out_of_range():
    with pytest.raises(IndexError):
        Int96(0).get_bit(96)
    with pytest.raises(IndexError):
        Int96(0).set_bit(-1, True)


def test_comparisons():
    assert Int96(5) < Int96(7)
    assert Int96(7) > Int96(5)
    assert Int96(5) <= Int96(5)
    assert Int96(5) >= Int96(5)
    assert Int96(-3) < Int96(2)
    assert Int96(2) > Int96(-3)
    assert Int96(2**70) > Int96(2**40)
    assert Int96(42) == 42


@pytest.mark.parametrize("value", [10, 12345678901, 2**70 + 1])
def test_mul_div95_by_half(value):
    assert Int96(value).mul_div95(HALF) == Int96(value // 2)
    assert Int96(-value).mul_div95(HALF) == -Int96(value // 2)


def test_div_3_scales_argument():
    assert HALF.div_3(Int96(10)) == Int96(10 // 2)


@pytest.mark.parametrize("n", [0, 1, 7, 8, 26, 27, 1000, 10**18, 2**80])
def test_icbrt_brackets_root(n):
    root = int(Int96(n).icbrt())
    assert root**3 <= n < (root + 1) ** 3


def test_icbrt_of_negative_is_zero():
    assert Int96(-8).icbrt().is_zero()


def test_cbrt_rejects_zero_estimate():
    with pytest.raises(ValueError):
        Int96(27).cbrt(Int96(0))