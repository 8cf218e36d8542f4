"""Plain-text layout stage for natural-language generation output."""

__version__ = "1.0.0"
