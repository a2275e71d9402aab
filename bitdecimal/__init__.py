"""A 96-bit fixed-scale decimal type with bit-exact arithmetic, comparison, rounding and conversion."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "bigdecimal", "compare", "convert", "rounding", "value"]