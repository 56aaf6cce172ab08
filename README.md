# schoolnum

`schoolnum` is a small numeric toolkit in plain Python with no dependencies.
It has four modules:

- `schoolnum.mathfuncs` holds elementary functions that are computed from
  series and iterations. These are `sin`, `cos`, `tan`, `asin`, `acos`,
  `atan`, `exp`, `log`, `sqrt`, `power`, `fmod`, `floor`, `ceil`, `fabs` and
  `iabs`, plus the helpers `factorial` and `int_power`.
- `schoolnum.matrix` holds a dense `Matrix` of floats and its error classes.
- `schoolnum.decimal_core` holds `Decimal96`, a signed 96-bit integer mantissa
  with a decimal scale. It also holds the error classes and the integer helpers
  `round_scale`, `align_scales`, `clamp_scale` and `shrink_to_fit`.
- `schoolnum.decimal_ops` holds the arithmetic, comparison, conversion and
  rounding functions that work on `Decimal96`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Elementary functions

```python
from schoolnum import mathfuncs

mathfuncs.sin(1.0)          # about 0.841471
mathfuncs.log(100)          # about 4.605170
mathfuncs.power(15, -3)     # about 0.000296
mathfuncs.fmod(-12.67, 3.4) # about -2.47, same sign as x
mathfuncs.sqrt(-1)          # nan
mathfuncs.log(0)            # -inf
mathfuncs.fmod(1, 0)        # nan
```

These functions never raise for an argument outside their domain. They
return `nan` or an infinity in that case, for example `asin(2)`, `log(-1)` or
`power(-15, 3.45)`.

The trigonometric functions use truncated constants for pi, so expect
accuracy to about six decimal places.

## Matrices

```python
from schoolnum.matrix import Matrix, CalculationError, IncorrectMatrixError

a = Matrix.from_rows([[2, 5, 7], [6, 3, 4], [5, -2, -3]])
a.determinant()             # -1.0
a.transpose().to_lists()
a.minor(0, 0).to_lists()    # [[3.0, 4.0], [-2.0, -3.0]]
a.calc_complements()        # matrix of cofactors
a[0, 1] = 4.0
a[0, 1]                     # 4.0
```

Matrix operations:

- `Matrix(rows, columns)` creates a matrix filled with zeros. If either size
  is 0, the result is an empty 0 x 0 matrix.
- `rows`, `columns` and `is_empty` are read-only properties.
- `sum`, `sub`, `mult_number` and `mult_matrix` each return a new matrix.
- `eq` compares elements to seven decimal places. Any comparison that
  involves an empty matrix gives `True`.
- `inverse` returns the transposed cofactor matrix, which is the adjugate. The
  adjugate is not divided by the determinant, so `a.mult_matrix(a.inverse())`
  equals the determinant times the identity.

Errors are raised as exceptions. Both classes below derive from `MatrixError`.

- `IncorrectMatrixError` is raised for:
  - a negative size;
  - rows of different lengths in `from_rows`;
  - an empty operand;
  - a matrix that is not square where a square one is needed;
  - a 1 x 1 matrix passed to `calc_complements`.
- `CalculationError` is raised for:
  - sizes that do not match in `sum`, `sub` or `mult_matrix`;
  - `inverse` called on a matrix whose determinant is 0.

`minor` raises `IndexError` for a row or column that is out of range.

## 96-bit decimals

```python
from schoolnum import decimal_ops as dec
from schoolnum.decimal_core import Decimal96

x = dec.from_int(-1234)
y = dec.from_float(1.234)
dec.to_float(dec.add(x, y))   # -1232.766

d = Decimal96.from_parts(123456, 3, True)
str(d)                        # "-123.456"
str(dec.floor(d))             # "-124"
str(dec.truncate(d))          # "-123"
str(dec.round_half_up(d))     # "-123"
dec.is_less(d, x)             # False
d.mantissa, d.scale, d.negative, d.bits
```

`Decimal96` is a frozen dataclass made of four 32-bit words: `lo`, `mid`,
`hi` and `flags`. The scale is stored in bits 16-23 of `flags` and the sign in
bit 31. A scale above 28 is accepted in storage, but arithmetic and
comparisons treat it as 28.

Functions in `decimal_ops`:

- `add`, `sub`, `mul`, `div` and `mod` do the arithmetic.
  - Results that do not fit in 96 bits lose decimal places, rounding half up,
    until they fit.
  - `div` produces up to 28 decimal places.
  - The result of `mod` carries the sign of the dividend.
- `is_equal` and `is_not_equal` compare all 128 bits. As a result, `1.0` and
  `1.00` are not equal.
- `is_less`, `is_less_or_equal`, `is_greater` and `is_greater_or_equal`
  compare the values.
- `from_int`, `from_float`, `to_int` and `to_float` convert to and from
  Python numbers.
  - `from_int` accepts 32-bit signed integers only.
  - `from_float` rounds its argument to single precision first. It keeps
    about seven significant digits.
- `truncate` drops the fraction.
- `round_half_up` rounds to a whole number.
- `floor` truncates, then steps a negative value one further down. It does
  this even when the value is already whole.
- `negate` flips the sign bit.

Errors are raised as exceptions. All of them derive from `DecimalError`.

- `DecimalOverflowError` is raised when a result is too large.
- `DecimalUnderflowError` is raised when a negative result is too large in
  magnitude.
- `DecimalDivisionByZero` is raised for a zero divisor in `div` or `mod`. It is
  also a `ZeroDivisionError`.
- `DecimalConversionError` is raised for:
  - an integer outside 32 bits;
  - a float that is NaN, infinite, smaller than 1e-28 or larger than 2**96;
  - `to_int` on a value whose magnitude exceeds 2147483647.

It is also a `ValueError`.

## What the package does not do

The package is a library only. It has no command-line tool and no printing
or formatting helpers beyond `str()` on a `Decimal96`.