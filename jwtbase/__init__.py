"""Base64/Base64URL codecs with configurable alphabets, and JSON value helpers for token claims."""

__version__ = "0.1.0"
__all__ = ["base", "traits"]