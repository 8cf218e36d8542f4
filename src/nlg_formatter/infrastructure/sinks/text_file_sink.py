"""Text file sink — implements TextSinkPort by writing UTF-8 files."""

from __future__ import annotations

import logging
from pathlib import Path

from nlg_formatter.domain.ports.text_sink import TextSinkPort

logger = logging.getLogger(__name__)


class TextFileSink(TextSinkPort):
    """Write realised text to a file, creating parent directories."""

    def write(self, text: str, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(text), path)
        return path
