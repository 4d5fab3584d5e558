"""Unsigned 256-bit integer arithmetic: plain, modular and Montgomery, with benchmarks."""

__version__ = "0.1.0"
__all__ = ["fp256", "mont", "modarith", "bench"]