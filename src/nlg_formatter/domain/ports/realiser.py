"""Port: Realiser — turns document nodes into realised text leaves.

This is a domain-level contract. The plain-text formatter implements it;
other output styles would implement it the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from nlg_formatter.domain.models.document import Node, StringElement


class RealiserPort(ABC):
    """Contract for a processing module in the realisation pipeline."""

    @abstractmethod
    def initialise(self) -> None:
        """Prepare the module before first use."""
        ...

    @abstractmethod
    def realise(self, element: Optional[Node]) -> StringElement:
        """Realise a single element into a text leaf."""
        ...

    @abstractmethod
    def realise_all(self, elements: Optional[Sequence[Optional[Node]]]) -> list[StringElement]:
        """Realise each element independently, preserving order."""
        ...
