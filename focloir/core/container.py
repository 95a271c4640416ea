"""Dependency injection container for managing service dependencies"""

from collections.abc import Callable
from typing import Any

from .interfaces import (
    DictionaryFetcherInterface,
    EntryParserInterface,
    EntryRendererInterface,
    TextProcessorInterface,
)


class DIContainer:
    """Simple dependency injection container"""

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}
        self._factories: dict[type, Callable[[], Any]] = {}
        self._singletons: dict[type, Any] = {}

    def register_instance(self, interface: type[Any], instance: Any) -> None:
        """Register a specific instance for an interface"""
        self._services[interface] = instance

    def register_singleton(
        self, interface: type[Any], factory: Callable[[], Any]
    ) -> None:
        """Register a singleton factory for an interface"""
        self._factories[interface] = factory
        # Value set on first access
        if interface not in self._singletons:
            self._singletons[interface] = None

    def get(self, interface: type[Any]) -> Any | None:
        """Get an instance of the requested interface"""
        if interface in self._services:
            return self._services[interface]

        if interface in self._singletons and self._singletons[interface] is not None:
            return self._singletons[interface]

        if interface in self._factories:
            instance = self._factories[interface]()
            if interface in self._singletons:
                self._singletons[interface] = instance
            return instance

        return None

    def has(self, interface: type[Any]) -> bool:
        """Check if the container can provide an instance of the interface"""
        return (
            interface in self._services
            or interface in self._factories
            or (
                interface in self._singletons
                and self._singletons[interface] is not None
            )
        )


def setup_default_container(
    keep_unclassified: bool | None = None,
    template_dir: str | None = None,
) -> DIContainer:
    """Setup container with default implementations"""
    from ..templates.markdown_renderer import MarkdownRenderer
    from .dictionary_fetcher import DictionaryFetcher
    from .entry_parser import EntryParser
    from .text_processor import TextProcessor

    container = DIContainer()

    container.register_singleton(TextProcessorInterface, lambda: TextProcessor())
    container.register_singleton(
        EntryParserInterface,
        lambda: EntryParser(
            keep_unclassified=keep_unclassified,
            text_processor=container.get(TextProcessorInterface),
        ),
    )
    container.register_singleton(
        DictionaryFetcherInterface, lambda: DictionaryFetcher()
    )
    container.register_singleton(
        EntryRendererInterface, lambda: MarkdownRenderer(template_dir)
    )

    return container
