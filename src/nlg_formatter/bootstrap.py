"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from typing import Any

from nlg_formatter.domain.ports.config_provider import ConfigProviderPort
from nlg_formatter.domain.ports.document_source import DocumentSourcePort
from nlg_formatter.domain.ports.realiser import RealiserPort
from nlg_formatter.domain.ports.text_sink import TextSinkPort

from nlg_formatter.formatting.text_formatter import TextFormatter
from nlg_formatter.infrastructure.config.json_config_provider import JsonConfigProvider
from nlg_formatter.infrastructure.sinks.text_file_sink import TextFileSink
from nlg_formatter.infrastructure.sources.json_source import JsonDocumentSource

from nlg_formatter.application.use_cases.generate_demo import GenerateDemoUseCase
from nlg_formatter.application.use_cases.render_document import RenderDocumentUseCase


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        text = container.render_document().execute(Path("tree.json"))
    """

    def __init__(self, config_path: str | None = None) -> None:
        self._config_provider = JsonConfigProvider(config_path)
        self._config: Any = self._config_provider.get_config()

        self._formatter = TextFormatter(max_depth=self._config.realisation.max_depth)
        self._source = JsonDocumentSource()
        self._sink = TextFileSink()

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> Any:
        return self._config

    @property
    def source(self) -> DocumentSourcePort:
        return self._source

    @property
    def sink(self) -> TextSinkPort:
        return self._sink

    def formatter(self) -> RealiserPort:
        """Return the configured plain-text realiser."""
        return self._formatter

    # -- Use Case factories --------------------------------------------------

    def render_document(self) -> RenderDocumentUseCase:
        """Create a use case for rendering a serialized tree."""
        return RenderDocumentUseCase(
            source=self._source, realiser=self._formatter, sink=self._sink
        )

    def generate_demo(self) -> GenerateDemoUseCase:
        """Create a use case for demo tree generation."""
        return GenerateDemoUseCase()
