"""Port: Text sink — writes realised text somewhere."""

from abc import ABC, abstractmethod
from pathlib import Path


class TextSinkPort(ABC):
    """Contract for persisting realised text."""

    @abstractmethod
    def write(self, text: str, path: Path) -> Path:
        """Write *text* to *path* and return the final path."""
        ...
