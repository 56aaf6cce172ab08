"""Arithmetic, comparison, conversion and rounding on Decimal96 values."""

from __future__ import annotations

import math
import struct
from fractions import Fraction

from schoolnum.decimal_core import (
    MAX_MANTISSA,
    MAX_SCALE,
    SIGN_BIT,
    Decimal96,
    DecimalConversionError,
    DecimalDivisionByZero,
    DecimalOverflowError,
    DecimalUnderflowError,
    align_scales,
    clamp_scale,
    round_scale,
    shrink_to_fit,
)

_INT_MAX = 0x7FFFFFFF
_FLOAT_STEP_LIMIT = 1 << 22
_DIVISION_DIGITS = 30


def _f32(value: float) -> float:
    """Round a float to single precision; out of range becomes infinity."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_FLOAT_MIN = _f32(1e-28)
_FLOAT_MAX = float(2**96)


def _out_of_range(negative: bool) -> ArithmeticError:
    if negative:
        return DecimalUnderflowError("result is too small")
    return DecimalOverflowError("result is too large")


def _finish(mantissa: int, exp: int, negative: bool, error_negative: bool) -> Decimal96:
    mantissa, exp = shrink_to_fit(mantissa, exp)
    if mantissa > MAX_MANTISSA:
        raise _out_of_range(error_negative)
    return Decimal96.from_parts(mantissa, exp, negative)


def _signed_sum(a: int, neg_a: bool, b: int, neg_b: bool) -> tuple[int, bool]:
    if neg_a != neg_b:
        if a > b:
            return a - b, neg_a
        return b - a, not neg_a
    return a + b, neg_a


def add(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Sum of two decimals."""
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    a, b = align_scales(m1, m2, e1, e2)
    total, negative = _signed_sum(a, value_1.negative, b, value_2.negative)
    return _finish(total, max(e1, e2), negative, negative)


def sub(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Difference value_1 - value_2."""
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    a, b = align_scales(m1, m2, e1, e2)
    total, negative = _signed_sum(a, value_1.negative, b, not value_2.negative)
    return _finish(total, max(e1, e2), negative, negative)


def mul(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Product of two decimals."""
    negative = value_1.negative != value_2.negative
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    if m1 == 0 or m2 == 0:
        return Decimal96()
    product, exp = m1 * m2, e1 + e2
    if exp == 0 and product > MAX_MANTISSA:
        raise _out_of_range(negative)
    if exp > MAX_SCALE:
        product = round_scale(product, exp, MAX_SCALE)
        exp = MAX_SCALE
        if product == 0:
            return Decimal96()
    return _finish(product, exp, negative, negative)


def _check_divisor(value: Decimal96) -> None:
    if value.mantissa == 0:
        raise DecimalDivisionByZero("division by zero")


def div(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Quotient value_1 / value_2, up to 28 decimal places."""
    _check_divisor(value_2)
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    a, b = align_scales(m1, m2, e1, e2)
    quotient, remainder = divmod(a, b)
    if quotient > MAX_MANTISSA:
        raise _out_of_range(value_1.negative)
    exp = 0
    while remainder and exp < _DIVISION_DIGITS:
        digit, remainder = divmod(remainder * 10, b)
        quotient = quotient * 10 + digit
        exp += 1
    if exp > MAX_SCALE:
        quotient = round_scale(quotient, exp, MAX_SCALE)
        exp = MAX_SCALE
        if quotient == 0:
            return Decimal96()
    negative = value_1.negative != value_2.negative
    return _finish(quotient, exp, negative, value_1.negative)


def mod(value_1: Decimal96, value_2: Decimal96) -> Decimal96:
    """Remainder of value_1 / value_2, carrying the sign of value_1."""
    _check_divisor(value_2)
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    a, b = align_scales(m1, m2, e1, e2)
    return _finish(a % b, max(e1, e2), value_1.negative, value_1.negative)


def is_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    """True when all 128 bits of both values match."""
    return value_1.bits == value_2.bits


def is_not_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    return not is_equal(value_1, value_2)


def is_greater(value_1: Decimal96, value_2: Decimal96) -> bool:
    """value_1 > value_2."""
    if is_equal(value_1, value_2):
        return False
    n1, n2 = value_1.negative, value_2.negative
    if n1 and not n2:
        return False
    if n2 and not n1:
        return True
    m1, e1 = clamp_scale(value_1)
    m2, e2 = clamp_scale(value_2)
    a, b = align_scales(m1, m2, e1, e2)
    return not a > b if n1 else a > b


def is_less(value_1: Decimal96, value_2: Decimal96) -> bool:
    """value_1 < value_2."""
    return not is_equal(value_1, value_2) and not is_greater(value_1, value_2)


def is_less_or_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    return is_less(value_1, value_2) or is_equal(value_1, value_2)


def is_greater_or_equal(value_1: Decimal96, value_2: Decimal96) -> bool:
    return is_greater(value_1, value_2) or is_equal(value_1, value_2)


def from_int(src: int) -> Decimal96:
    """Convert a 32-bit signed integer."""
    if not -_INT_MAX - 1 <= src <= _INT_MAX:
        raise DecimalConversionError(f"{src!r} is not a 32-bit integer")
    return Decimal96.from_parts(abs(src) & _INT_MAX, 0, src < 0)


def from_float(src: float) -> Decimal96:
    """Convert a single-precision float, keeping about seven significant digits."""
    src = _f32(float(src))
    if math.isnan(src) or math.isinf(src) or not _FLOAT_MIN <= abs(src) <= _FLOAT_MAX:
        raise DecimalConversionError(f"{src!r} cannot be represented")
    negative = src < 0
    scaled = abs(src)
    scale = 0
    while scale <= MAX_SCALE and int(scaled) < _FLOAT_STEP_LIMIT and int(scaled) != scaled:
        scaled *= 10
        scale += 1
    single = _f32(math.floor(scaled + 0.5))
    while scale > 0 and int(single) % 10 == 0:
        single = _f32(single / 10)
        scale -= 1
    return Decimal96.from_parts(int(single), scale, negative)


def to_int(src: Decimal96) -> int:
    """Integer part, truncated toward zero."""
    value = Fraction(src.mantissa, 10**src.scale)
    if value > _INT_MAX:
        raise DecimalConversionError("value does not fit in a 32-bit integer")
    whole = src.mantissa // 10**src.scale
    return -whole if src.negative else whole


def to_float(src: Decimal96) -> float:
    """Nearest single-precision float."""
    value = _f32(float(Fraction(src.mantissa, 10**src.scale)))
    return -value if src.negative else value


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits."""
    return Decimal96.from_parts(value.mantissa // 10**value.scale, 0, value.negative)


def _add_one(value: Decimal96) -> Decimal96:
    if value.mantissa + 1 > MAX_MANTISSA:
        return Decimal96()
    return Decimal96.from_parts(value.mantissa + 1, value.scale, value.negative)


def floor(value: Decimal96) -> Decimal96:
    """Round toward minus infinity; negative values always step one further."""
    result = truncate(value)
    return _add_one(result) if value.negative else result


def round_half_up(value: Decimal96) -> Decimal96:
    """Round to the nearest whole number, halves away from zero."""
    result = truncate(value)
    exp = value.scale
    if exp == 0:
        return result
    digit = (value.mantissa % 10**exp) // 10 ** (exp - 1)
    return _add_one(result) if digit > 4 else result


def negate(value: Decimal96) -> Decimal96:
    """Flip the sign bit."""
    return Decimal96(value.lo, value.mid, value.hi, value.flags ^ SIGN_BIT)