"""Character, number, string, memory and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "output", "memory", "search", "transform", "printf"]