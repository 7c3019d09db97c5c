"""A decimal type with a 96-bit mantissa and scale 0 to 28, with numeric comparisons and arithmetic."""

__version__ = "0.1.0"
__all__ = ["core", "comparison", "arithmetic"]