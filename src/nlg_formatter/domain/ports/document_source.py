"""Port: Document source — loads and stores serialized document trees."""

from abc import ABC, abstractmethod
from pathlib import Path

from nlg_formatter.domain.models.document import Node


class DocumentSourcePort(ABC):
    """Contract for reading and writing document trees."""

    @abstractmethod
    def load(self, path: Path) -> list[Node]:
        """Load every root node stored at *path*, in file order."""
        ...

    @abstractmethod
    def save(self, nodes: list[Node], path: Path) -> None:
        """Persist *nodes* to *path*."""
        ...
