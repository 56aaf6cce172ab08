"""A 96-bit scaled decimal value and the integer helpers its arithmetic uses."""

from __future__ import annotations

from dataclasses import dataclass

WORD_MASK = 0xFFFFFFFF
SIGN_BIT = 0x80000000
SCALE_MASK = 0x00FF0000
SCALE_SHIFT = 16
MAX_SCALE = 28
MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
_MAX_RAW_SCALE = SCALE_MASK >> SCALE_SHIFT


class DecimalError(Exception):
    """Base class for decimal errors."""


class DecimalOverflowError(DecimalError, ArithmeticError):
    """The result is too large to be represented."""


class DecimalUnderflowError(DecimalError, ArithmeticError):
    """The result is too small (a negative value too large in magnitude)."""


class DecimalDivisionByZero(DecimalError, ZeroDivisionError):
    """The divisor is zero."""


class DecimalConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


@dataclass(frozen=True)
class Decimal96:
    """Four 32-bit words: a 96-bit mantissa (low, middle, high) and a flags word.

    The flags word holds the scale in bits 16-23 and the sign in bit 31.
    """

    lo: int = 0
    mid: int = 0
    hi: int = 0
    flags: int = 0

    def __post_init__(self) -> None:
        for name in ("lo", "mid", "hi", "flags"):
            word = getattr(self, name)
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"{name} word {word!r} does not fit in 32 bits")

    @classmethod
    def from_parts(cls, mantissa: int, scale: int, negative: bool) -> "Decimal96":
        """Build a value from its mantissa, scale and sign."""
        if not 0 <= mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa {mantissa!r} does not fit in 96 bits")
        if not 0 <= scale <= _MAX_RAW_SCALE:
            raise ValueError(f"scale {scale!r} out of range")
        flags = (scale << SCALE_SHIFT) | (SIGN_BIT if negative else 0)
        return cls(
            mantissa & WORD_MASK,
            (mantissa >> 32) & WORD_MASK,
            (mantissa >> 64) & WORD_MASK,
            flags,
        )

    @property
    def mantissa(self) -> int:
        """The unsigned 96-bit integer part."""
        return self.lo | (self.mid << 32) | (self.hi << 64)

    @property
    def scale(self) -> int:
        """The power of ten the mantissa is divided by, as stored."""
        return (self.flags & SCALE_MASK) >> SCALE_SHIFT

    @property
    def negative(self) -> bool:
        """Whether the sign bit is set."""
        return bool(self.flags & SIGN_BIT)

    @property
    def bits(self) -> tuple[int, int, int, int]:
        """The four raw words, lowest first."""
        return (self.lo, self.mid, self.hi, self.flags)

    def __str__(self) -> str:
        digits = str(self.mantissa)
        scale = self.scale
        if scale:
            digits = digits.rjust(scale + 1, "0")
            digits = f"{digits[:-scale]}.{digits[-scale:]}"
        return f"-{digits}" if self.negative else digits


def round_scale(mantissa: int, exp: int, new_exp: int) -> int:
    """Rescale a mantissa from exp to fewer decimal places, rounding half up.

    Only the first discarded digit decides the rounding. When new_exp is not
    below exp the mantissa is returned unchanged.
    """
    drop = exp - new_exp
    if drop <= 0:
        return mantissa
    quotient, remainder = divmod(mantissa, 10**drop)
    first_dropped = remainder // 10 ** (drop - 1)
    return quotient + 1 if first_dropped > 4 else quotient


def align_scales(a: int, b: int, e1: int, e2: int) -> tuple[int, int]:
    """Multiply the mantissa with the smaller scale so both share the larger one."""
    if e1 > e2:
        b *= 10 ** (e1 - e2)
    elif e2 > e1:
        a *= 10 ** (e2 - e1)
    return a, b


def clamp_scale(value: Decimal96) -> tuple[int, int]:
    """Return the mantissa and the working scale of value, the scale capped at 28.

    A scale above 28 is treated as 28; the mantissa itself is left as it is.
    """
    return value.mantissa, min(value.scale, MAX_SCALE)


def shrink_to_fit(mantissa: int, exp: int) -> tuple[int, int]:
    """Drop decimal places one at a time until the mantissa fits in 96 bits.

    Stops when the scale reaches zero; the caller checks whether it fits.
    """
    while mantissa > MAX_MANTISSA and exp:
        mantissa = round_scale(mantissa, exp, exp - 1)
        exp -= 1
    return mantissa, exp