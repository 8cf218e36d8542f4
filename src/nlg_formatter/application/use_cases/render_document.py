"""Use Case: Render Document.

Loads a serialized document tree, lays it out through an injected
realiser, and optionally hands the text to a sink.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from nlg_formatter.domain.errors import DocumentGenerationError, FormatterError
from nlg_formatter.domain.ports.document_source import DocumentSourcePort
from nlg_formatter.domain.ports.realiser import RealiserPort
from nlg_formatter.domain.ports.text_sink import TextSinkPort

logger = logging.getLogger(__name__)


class RenderDocumentUseCase:
    """Orchestrate load → realise → write."""

    def __init__(
        self,
        source: DocumentSourcePort,
        realiser: RealiserPort,
        sink: Optional[TextSinkPort] = None,
    ) -> None:
        self._source = source
        self._realiser = realiser
        self._sink = sink

    def execute(self, path: Path, output_path: Optional[Path] = None) -> str:
        """Render every root node stored at *path* and return the text.

        Root nodes are realised one by one and concatenated in file order.

        Args:
            path: Serialized document tree to read.
            output_path: Where to write the text. Nothing is written when
                omitted.

        Returns:
            The realised text.

        Raises:
            DocumentLoadError: If *path* cannot be loaded.
            DocumentGenerationError: If realisation or writing fails.
        """
        nodes = self._source.load(path)

        self._realiser.initialise()
        try:
            leaves = self._realiser.realise_all(nodes)
        except FormatterError:
            raise
        except Exception as exc:
            raise DocumentGenerationError(f"Failed to realise {path}: {exc}") from exc

        text = "".join(leaf.realisation for leaf in leaves)

        if output_path is not None:
            if self._sink is None:
                raise DocumentGenerationError("No output sink configured.")
            try:
                self._sink.write(text, output_path)
            except OSError as exc:
                raise DocumentGenerationError(
                    f"Failed to write {output_path}: {exc}"
                ) from exc

        logger.debug("Rendered %s (%d characters)", path, len(text))
        return text
