"""Realisers that lay out document trees as text."""

from nlg_formatter.formatting.text_formatter import TextFormatter

__all__ = ["TextFormatter"]
