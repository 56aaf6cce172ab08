"""Elementary math functions, dense matrices and a 96-bit scaled decimal type."""

__version__ = "0.1.0"
__all__ = ["mathfuncs", "matrix", "decimal_core", "decimal_ops"]