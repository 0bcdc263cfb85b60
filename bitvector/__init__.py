"""A set of non-negative integers backed by a vector of 64-bit words."""

__version__ = "0.1.5"
__all__ = ["core", "words"]