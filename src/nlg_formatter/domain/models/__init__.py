"""Domain models — public API.

Provides convenient imports for the document tree types and factories.
"""

from nlg_formatter.domain.models.document import (
    DocumentElement,
    Node,
    StringElement,
)
from nlg_formatter.domain.models.enums import DocumentCategory
from nlg_formatter.domain.models.factory import (
    create_document,
    create_list,
    create_list_item,
    create_paragraph,
    create_section,
    create_sentence,
    create_text,
)

__all__ = [
    # Tree
    "DocumentElement",
    "Node",
    "StringElement",
    # Enums
    "DocumentCategory",
    # Factories
    "create_document",
    "create_list",
    "create_list_item",
    "create_paragraph",
    "create_section",
    "create_sentence",
    "create_text",
]
