"""Pydantic models for formatter configuration.

These models validate and type the JSON configuration file that tunes
the realisation stage.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from nlg_formatter.rules.constants import DEFAULT_MAX_DEPTH, MAX_DEPTH_CEILING


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the configuration file."""

    name: str = "plain-text"
    version: str = "1"
    description: str = "Plain-text layout for realised documents"


# ---------------------------------------------------------------------------
# Realisation
# ---------------------------------------------------------------------------


class RealisationSettings(BaseModel):
    """Limits applied while walking a document tree."""

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=1,
        le=MAX_DEPTH_CEILING,
        description="Deepest nesting accepted before the tree is treated as cyclic",
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class FormatterConfig(BaseModel):
    """Root configuration object."""

    metadata: MetaData = Field(default_factory=MetaData)
    realisation: RealisationSettings = Field(default_factory=RealisationSettings)
