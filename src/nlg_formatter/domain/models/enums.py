"""Enumerations for document-structure categories."""

from enum import Enum


class DocumentCategory(str, Enum):
    """Structural roles a document node can take in the layout stage."""

    DOCUMENT = "document"
    SECTION = "section"
    LIST = "list"
    PARAGRAPH = "paragraph"
    SENTENCE = "sentence"
    LIST_ITEM = "list_item"
