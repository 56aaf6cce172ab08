import pytest

from schoolnum.decimal_core import (
    MAX_MANTISSA,
    Decimal96,
    DecimalDivisionByZero,
    DecimalError,
    align_scales,
    clamp_scale,
    round_scale,
    shrink_to_fit,
)


@pytest.mark.parametrize(
    "mantissa, scale, negative",
    [(0, 0, False), (1, 3, True), (MAX_MANTISSA, 28, False), (123456789012345, 10, True)],
)
def test_from_parts_round_trip(mantissa, scale, negative):
    value = Decimal96.from_parts(mantissa, scale, negative)
    assert value.mantissa == mantissa
    assert value.scale == scale
    assert value.negative is negative


def test_bits_layout_follows_format():
    value = Decimal96.from_parts(1, 3, True)
    assert value.bits == (1, 0, 0, (3 << 16) | 0x80000000)


def test_bits_split_mantissa_into_words():
    value = Decimal96.from_parts(MAX_MANTISSA, 0, False)
    assert value.bits == (0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0)


def test_raw_words_give_mantissa_and_scale():
    value = Decimal96(0x80000000, 0x80000000, 0x80000000, 28 << 16)
    assert value.mantissa == (0x80000000 << 64) | (0x80000000 << 32) | 0x80000000
    assert value.scale == 28
    assert value.negative is False


def test_raw_scale_above_limit_is_reported_as_stored():
    value = Decimal96(2, 0, 0, 0xFFFFFFFF)
    assert value.scale == 0xFF
    assert value.negative is True


def test_str_places_decimal_point():
    assert str(Decimal96.from_parts(12345, 2, True)) == "-123.45"
    assert str(Decimal96.from_parts(5, 3, False)) == "0.005"


@pytest.mark.parametrize("word", [-1, 1 << 32])
def test_word_out_of_range_rejected(word):
    with pytest.raises(ValueError):
        Decimal96(word, 0, 0, 0)


@pytest.mark.parametrize(
    "mantissa, scale", [(MAX_MANTISSA + 1, 0), (-1, 0), (1, -1), (1, 256)]
)
def test_from_parts_rejects_out_of_range(mantissa, scale):
    with pytest.raises(ValueError):
        Decimal96.from_parts(mantissa, scale, False)


def test_values_are_equal_by_words():
    assert Decimal96.from_parts(7, 1, False) == Decimal96(7, 0, 0, 1 << 16)


@pytest.mark.parametrize("digit", range(10))
def test_round_scale_half_up_on_first_dropped_digit(digit):
    result = round_scale(12345 * 10 + digit, 1, 0)
    assert result == (12345 + 1 if digit >= 5 else 12345)


def test_round_scale_only_first_dropped_digit_counts():
    assert round_scale(12349, 2, 0) == 123
    assert round_scale(12350, 2, 0) == 124


def test_round_scale_without_drop_keeps_mantissa():
    assert round_scale(987, 3, 3) == 987
    assert round_scale(987, 2, 5) == 987


def test_align_scales_multiplies_smaller_scale():
    assert align_scales(5, 7, 2, 0) == (5, 7 * 100)
    assert align_scales(5, 7, 0, 3) == (5 * 1000, 7)
    assert align_scales(5, 7, 4, 4) == (5, 7)


def test_clamp_scale_caps_at_28():
    assert clamp_scale(Decimal96(1, 0, 0, 30 << 16)) == (1, 28)
    assert clamp_scale(Decimal96.from_parts(42, 5, True)) == (42, 5)


def test_shrink_to_fit_leaves_fitting_values():
    assert shrink_to_fit(12, 5) == (12, 5)
    assert shrink_to_fit(MAX_MANTISSA, 28) == (MAX_MANTISSA, 28)


def test_shrink_to_fit_reduces_scale_until_it_fits():
    mantissa, exp = shrink_to_fit(MAX_MANTISSA * 1000, 10)
    assert mantissa <= MAX_MANTISSA
    assert exp < 10
    assert mantissa == round_scale(MAX_MANTISSA * 1000, 10, exp)


def test_shrink_to_fit_stops_at_zero_scale():
    assert shrink_to_fit(MAX_MANTISSA + 1, 0) == (MAX_MANTISSA + 1, 0)


def test_division_by_zero_error_is_both_kinds():
    error = DecimalDivisionByZero("division by zero")
    assert isinstance(error, ZeroDivisionError)
    assert isinstance(error, DecimalError)
    assert str(error) == "division by zero"
    with pytest.raises(ZeroDivisionError):
        raise error