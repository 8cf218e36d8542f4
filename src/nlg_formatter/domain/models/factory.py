"""Convenience constructors for document trees.

Upstream stages and tests build trees through these helpers instead of
spelling out ``DocumentElement(category=...)`` every time. A plain
``str`` is accepted wherever a component is expected and wrapped in a
``StringElement``.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from nlg_formatter.domain.models.document import DocumentElement, Node, StringElement
from nlg_formatter.domain.models.enums import DocumentCategory

ComponentLike = Union[Node, str]


def _wrap(component: ComponentLike) -> Node:
    if isinstance(component, str):
        return StringElement(realisation=component)
    return component


def _container(
    category: DocumentCategory,
    title: Optional[str],
    components: Optional[Iterable[ComponentLike]],
) -> DocumentElement:
    return DocumentElement(
        category=category,
        title=title,
        components=[_wrap(c) for c in components or []],
    )


def create_text(text: str) -> StringElement:
    return StringElement(realisation=text)


def create_document(
    title: Optional[str] = None, components: Optional[Iterable[ComponentLike]] = None
) -> DocumentElement:
    return _container(DocumentCategory.DOCUMENT, title, components)


def create_section(
    title: Optional[str] = None, components: Optional[Iterable[ComponentLike]] = None
) -> DocumentElement:
    return _container(DocumentCategory.SECTION, title, components)


def create_list(
    title: Optional[str] = None, components: Optional[Iterable[ComponentLike]] = None
) -> DocumentElement:
    return _container(DocumentCategory.LIST, title, components)


def create_paragraph(components: Optional[Iterable[ComponentLike]] = None) -> DocumentElement:
    return _container(DocumentCategory.PARAGRAPH, None, components)


def create_sentence(text: str) -> DocumentElement:
    """A sentence whose wording has already been realised upstream."""
    return DocumentElement(category=DocumentCategory.SENTENCE, realisation=text)


def create_list_item(item: ComponentLike) -> DocumentElement:
    """A list item wrapping a single component (usually a sentence)."""
    return DocumentElement(category=DocumentCategory.LIST_ITEM, components=[_wrap(item)])
