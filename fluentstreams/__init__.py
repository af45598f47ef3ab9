"""Chainable collections (``slices``) and lazily evaluated, thread-backed streams (``streams``)."""

__version__ = "0.1.0"
__all__ = ["slices", "streams"]