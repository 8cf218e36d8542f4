"""Plain-text layout constants.

Separators are part of the output contract and are not configurable.
"""

from __future__ import annotations

from nlg_formatter.domain.models.enums import DocumentCategory

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

TITLE_SEPARATOR = "\n"
SENTENCE_SEPARATOR = " "
PARAGRAPH_TERMINATOR = "\n\n"
LIST_ITEM_BULLET = " * "

# ---------------------------------------------------------------------------
# Category groups
# ---------------------------------------------------------------------------

TITLED_CATEGORIES = frozenset(
    {DocumentCategory.DOCUMENT, DocumentCategory.SECTION, DocumentCategory.LIST}
)

# Nesting limit used when no configuration is supplied.
DEFAULT_MAX_DEPTH = 100

# Highest configurable limit. Each level costs about three interpreter
# frames, so this keeps a full-depth walk under the default recursion limit.
MAX_DEPTH_CEILING = 200
