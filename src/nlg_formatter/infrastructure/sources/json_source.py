"""JSON document source — implements DocumentSourcePort using JSON files.

A file holds either a single serialized node or a list of them. Nodes
are discriminated by their ``kind`` field (``"document"`` or ``"text"``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from nlg_formatter.domain.errors import DocumentLoadError
from nlg_formatter.domain.models.document import Node
from nlg_formatter.domain.ports.document_source import DocumentSourcePort

logger = logging.getLogger(__name__)

_NODE_ADAPTER: TypeAdapter[Node] = TypeAdapter(Node)


class JsonDocumentSource(DocumentSourcePort):
    """Load document trees serialized as JSON."""

    def load(self, path: Path) -> list[Node]:
        """Load the root node(s) stored in *path*."""
        if not path.exists():
            raise DocumentLoadError(f"Document file not found: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DocumentLoadError(f"Could not read {path}: {exc}") from exc

        items = data if isinstance(data, list) else [data]
        try:
            nodes = [_NODE_ADAPTER.validate_python(item) for item in items]
        except ValidationError as exc:
            raise DocumentLoadError(f"Invalid document tree in {path}: {exc}") from exc

        logger.info("Loaded %d root node(s) from %s", len(nodes), path)
        return nodes

    def save(self, nodes: list[Node], path: Path) -> None:
        """Serialize *nodes* to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = [_NODE_ADAPTER.dump_python(node, mode="json") for node in nodes]
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
