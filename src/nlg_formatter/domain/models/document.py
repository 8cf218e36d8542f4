"""Document tree models consumed by the layout stage.

Contains StringElement (a text leaf) and DocumentElement (a structural
node). Both carry a ``kind`` discriminator so a tree survives a JSON
round-trip unchanged.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation)
- Domain enums
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from nlg_formatter.domain.models.enums import DocumentCategory


# ---------------------------------------------------------------------------
# Text Leaf
# ---------------------------------------------------------------------------


class StringElement(BaseModel):
    """A node that already carries its final realised text."""

    kind: Literal["text"] = "text"
    realisation: str = ""


# ---------------------------------------------------------------------------
# Structural Node
# ---------------------------------------------------------------------------


class DocumentElement(BaseModel):
    """A structural node: document, section, list, paragraph, sentence or list item.

    ``category`` accepts any string so that trees produced by newer
    upstream stages still validate; values outside ``DocumentCategory``
    are kept as plain strings and render as nothing.

    Sentences and list items without a ``realisation`` take their text
    from their components when formatted.
    """

    kind: Literal["document"] = "document"
    category: Union[DocumentCategory, str] = Field(
        ..., union_mode="left_to_right", description="Layout role of this node"
    )
    title: Optional[str] = Field(
        None, description="Heading line (document, section and list only)"
    )
    components: list[Node] = Field(default_factory=list)
    realisation: Optional[str] = Field(
        None, description="Text supplied by the upstream realiser, if any"
    )

    def add_component(self, component: Node) -> None:
        """Append *component* as the last child."""
        self.components.append(component)

    def add_components(self, components: list[Node]) -> None:
        """Append every item of *components*, preserving order."""
        self.components.extend(components)


Node = Annotated[Union[DocumentElement, StringElement], Field(discriminator="kind")]

DocumentElement.model_rebuild()
