"""Elementary math functions computed from series expansions and iterations."""

from __future__ import annotations

import math
from decimal import Decimal, localcontext

LN10 = 2.30258509299404568401799145468436421
PI = 3.141592653589793238462643383279502884197169399375105820974944
E = 2.718281828459045235360287471352662497757247093699959574966967
ACCURACY = 1e-17

# Truncated constants used by the trigonometric routines.
PI_6 = 0.52359877559
PI_2 = 1.57079632679
PI_APPROX = 3.14159265358

_NAN = float("nan")
_INF = float("inf")
_DECIMAL_ACCURACY = Decimal("1e-17")
_SERIES_PRECISION = 50


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics for a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return _NAN
        return math.copysign(_INF, numerator) * math.copysign(1.0, denominator)


def _is_integral(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()


def factorial(x: float) -> float:
    """Return x * (x - 1) * ... down to the first factor not above 1."""
    result = 1.0
    while x > 1:
        result *= x
        x -= 1
    return result


def int_power(base: float, exp: int) -> float:
    """Raise base to a whole exponent; non-positive exponents give 1."""
    exp = int(exp)
    if exp <= 0:
        return 1.0
    try:
        return float(base) ** exp
    except OverflowError:
        return -_INF if base < 0 and exp % 2 else _INF


def iabs(num: int) -> int:
    """Absolute value of an integer."""
    return -num if num < 0 else num


def fabs(num: float) -> float:
    """Absolute value of a floating point number."""
    num = float(num)
    return -num if num < 0 else num


def atan(x: float) -> float:
    """Arc tangent by argument reduction and a rational approximation."""
    x = float(x)
    negative = x < 0
    if negative:
        x = -x
    inverted = x > 1
    if inverted:
        x = 1.0 / x
    root3 = sqrt(3)
    shifts = 0
    while x > PI_APPROX / 12:
        shifts += 1
        x = (x * root3 - 1.0) * (1.0 / (x + root3))
    square = x * x
    x = x * ((0.55913709 / (1.4087812 + square)) + 0.60310579 - 0.05160454 * square)
    for _ in range(shifts):
        x += PI_6
    if inverted:
        x = PI_2 - x
    return -x if negative else x


def asin(x: float) -> float:
    """Arc sine expressed through the arc tangent."""
    x = float(x)
    return atan(_divide(x, sqrt(1 - x * x)))


def acos(x: float) -> float:
    """Arc cosine expressed through the arc sine."""
    return PI_2 - asin(x)


def ceil(num: float) -> float:
    """Smallest whole number not less than num."""
    num = float(num)
    if not math.isfinite(num):
        return num
    whole = int(num)
    return float(whole + 1 if whole < num else whole)


def floor(x: float) -> float:
    """Largest whole number not greater than x."""
    x = float(x)
    if not math.isfinite(x):
        return x
    whole = int(x)
    return float(whole if whole <= x else whole - 1)


def _reduce(x: float) -> tuple[float, int]:
    turns = int(fabs(x) / PI_APPROX)
    if turns > 1:
        x -= (PI_APPROX * turns) * (-1 if x < 0 else 1)
    return x, turns


def _restore_sign(value: float, turns: int) -> float:
    return value if turns == 1 or turns % 2 == 0 else -value


def cos(x: float) -> float:
    """Cosine by a Taylor series after reduction by multiples of pi."""
    x = float(x)
    if not math.isfinite(x):
        return _NAN
    x, turns = _reduce(x)
    series = sum(
        ((-1) ** k * (int_power(x, 2 * k) / factorial(2 * k)) for k in range(1, 51)),
        1.0,
    )
    return _restore_sign(series, turns)


def sin(x: float) -> float:
    """Sine by a Taylor series after reduction by multiples of pi."""
    x = float(x)
    if not math.isfinite(x):
        return _NAN
    x, turns = _reduce(x)
    series = sum(
        (
            (-1) ** k * (int_power(x, 2 * k + 1) / factorial(2 * k + 1))
            for k in range(1, 50)
        ),
        x,
    )
    return _restore_sign(series, turns)


def tan(x: float) -> float:
    """Tangent as the ratio of sine and cosine."""
    return _divide(sin(x), cos(x))


def exp(x: float) -> float:
    """Exponential by its power series, summed until a term drops below 1e-17."""
    x = float(x)
    if math.isnan(x):
        return _NAN
    if x == _INF:
        return _INF
    if x == -_INF:
        return 0.0
    with localcontext() as ctx:
        ctx.prec = _SERIES_PRECISION
        argument = Decimal(x)
        total = Decimal(1)
        term = Decimal(1)
        n = 1
        while True:
            term = term * argument / n
            if abs(term) <= _DECIMAL_ACCURACY:
                break
            total += term
            n += 1
    return float(total)


def log(x: float) -> float:
    """Natural logarithm by scaling into a decade and a series for ln(1 + t)."""
    x = float(x)
    if x < 0:
        return _NAN
    if x == 0:
        return -_INF
    if math.isinf(x):
        return _INF
    decades = 0
    while x >= 10 or 0 < x < 1:
        if x < 1:
            x *= 10.0
            decades -= 1
        else:
            x *= 0.1
            decades += 1
    x = x / 10.0 - 1.0
    term = total = x
    z = 2
    while fabs(term) > ACCURACY:
        term *= -x * (z - 1) / z
        z += 1
        total += term
    return total + (decades + 1) * LN10


def power(base: float, exponent: float) -> float:
    """Raise base to a real exponent."""
    base = float(base)
    exponent = float(exponent)
    if _is_integral(exponent) and exponent > 0:
        result = int_power(base, int(exponent))
    elif exponent == 0:
        result = 1.0
    elif base < 0 and not _is_integral(exponent):
        result = _NAN
    else:
        result = 0.0
    if result == 0:
        odd = math.isfinite(exponent) and int(exponent) % 2 != 0
        sign = -1.0 if base < 0 and odd else 1.0
        result = sign * exp(fabs(exponent) * log(fabs(base)))
        if exponent < 0:
            result = _divide(1.0, result)
    return result


def sqrt(x: float) -> float:
    """Square root by Newton's iteration; 0 for zero and NaN, NaN below zero."""
    x = float(x)
    if x < 0:
        return _NAN
    if not x > 0:
        return 0.0
    if math.isinf(x):
        return x
    root = x / 2.0 or x
    previous = None
    while True:
        following = (root + x / root) / 2.0
        if following == root or following == previous:
            return min(following, root)
        previous, root = root, following


def fmod(x: float, y: float) -> float:
    """Remainder of x / y carrying the sign of x, by repeated addition of y."""
    x = float(x)
    y = float(y)
    if math.isnan(x) or math.isnan(y) or y == 0.0:
        return _NAN
    if y > x > 0:
        return x
    if y == x:
        return 0.0
    if math.isinf(x):
        return _NAN
    dividend, step = fabs(x), fabs(y)
    multiple = step
    while multiple <= dividend:
        multiple += step
    remainder = dividend - (multiple - step)
    return -remainder if x < 0 else remainder