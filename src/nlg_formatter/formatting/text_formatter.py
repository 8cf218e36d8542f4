"""Plain-text formatter: the final layout stage of the realisation pipeline.

Walks a document tree depth-first and flattens it into a single string:

  • Document, section and list titles go on their own line
  • Sentences inside a paragraph are joined with a single space
  • Every paragraph ends with a blank line
  • List items are prefixed with `` * ``

Wording is never touched; only whitespace and ordering are decided here.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from nlg_formatter.domain.errors import MalformedNodeError, StructureTooDeepError
from nlg_formatter.domain.models.document import DocumentElement, Node, StringElement
from nlg_formatter.domain.models.enums import DocumentCategory
from nlg_formatter.domain.ports.realiser import RealiserPort
from nlg_formatter.rules.constants import (
    DEFAULT_MAX_DEPTH,
    LIST_ITEM_BULLET,
    PARAGRAPH_TERMINATOR,
    SENTENCE_SEPARATOR,
    TITLE_SEPARATOR,
    TITLED_CATEGORIES,
)

logger = logging.getLogger(__name__)


class TextFormatter(RealiserPort):
    """Lay out a document tree as plain text.

    Usage::

        formatter = TextFormatter()
        leaf = formatter.realise(document)
        print(leaf.realisation)

    The formatter holds no per-call state, so one instance can serve any
    number of trees, including from several threads at once.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._max_depth = max_depth
        self._rules: dict[DocumentCategory, Callable[[DocumentElement, int], str]] = {
            category: self._realise_container for category in TITLED_CATEGORIES
        }
        self._rules.update(
            {
                DocumentCategory.PARAGRAPH: self._realise_paragraph,
                DocumentCategory.SENTENCE: self._realise_sentence,
                DocumentCategory.LIST_ITEM: self._realise_list_item,
            }
        )

    @property
    def max_depth(self) -> int:
        return self._max_depth

    # -- Public API ------------------------------------------------------

    def initialise(self) -> None:
        """Nothing to prepare; the formatter is ready on construction."""

    def realise(self, element: Optional[Node]) -> StringElement:
        """Realise *element* and return a text leaf holding the result.

        ``None`` and unrecognised categories yield an empty leaf. A text
        leaf is returned as-is.

        Raises:
            MalformedNodeError: If *element* is not a node at all.
            StructureTooDeepError: If the tree nests deeper than ``max_depth``.
        """
        return self._realise(element, 0)

    def realise_all(self, elements: Optional[Sequence[Optional[Node]]]) -> list[StringElement]:
        """Realise every element independently; results are not merged."""
        if elements is None:
            return []
        return [self.realise(element) for element in elements]

    # -- Traversal -------------------------------------------------------

    def _realise(self, element: Optional[Node], depth: int) -> StringElement:
        if element is None:
            return StringElement()
        if isinstance(element, StringElement):
            return element
        self._check_node(element, depth)

        rule = self._rules.get(element.category)
        if rule is None:
            logger.debug("Dropping element with unrecognised category %r", element.category)
            return StringElement()
        return StringElement(realisation=rule(element, depth))

    def _realise_children(self, element: DocumentElement, depth: int) -> list[str]:
        texts = []
        for component in element.components:
            texts.append(self._realise(component, depth + 1).realisation)
        return texts

    def _check_node(self, element: object, depth: int) -> None:
        if not isinstance(element, DocumentElement):
            raise MalformedNodeError(
                f"Cannot realise {type(element).__name__!r}: "
                "expected a DocumentElement or StringElement"
            )
        if depth > self._max_depth:
            raise StructureTooDeepError(
                f"Document tree is cyclic or nested deeper than {self._max_depth} levels"
            )

    def _own_text(self, element: DocumentElement, depth: int) -> str:
        """Text of a sentence or list item.

        Uses ``realisation`` when upstream set it, otherwise the non-empty
        own text of each component, space-joined. Each component is visited
        once and is subject to the same depth limit as the main walk.
        """
        if element.realisation is not None:
            return element.realisation
        texts = []
        for component in element.components:
            if isinstance(component, StringElement):
                text = component.realisation
            else:
                self._check_node(component, depth + 1)
                text = self._own_text(component, depth + 1)
            if text:
                texts.append(text)
        return SENTENCE_SEPARATOR.join(texts)

    # -- Layout rules ----------------------------------------------------

    def _realise_container(self, element: DocumentElement, depth: int) -> str:
        parts = []
        if element.title is not None:
            parts.append(element.title + TITLE_SEPARATOR)
        parts.extend(self._realise_children(element, depth))
        return "".join(parts)

    def _realise_paragraph(self, element: DocumentElement, depth: int) -> str:
        # Empty realisations never pull in a separator of their own.
        sentences = [text for text in self._realise_children(element, depth) if text]
        return SENTENCE_SEPARATOR.join(sentences) + PARAGRAPH_TERMINATOR

    def _realise_sentence(self, element: DocumentElement, depth: int) -> str:
        return self._own_text(element, depth)

    def _realise_list_item(self, element: DocumentElement, depth: int) -> str:
        return LIST_ITEM_BULLET + self._own_text(element, depth)
