"""Timing comparison of classic sorting algorithms: sorts, benchmark runner and command line."""

__version__ = "0.1.0"
__all__ = ["cli", "runtimes", "sorting"]