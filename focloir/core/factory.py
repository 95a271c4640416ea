"""Factory functions for creating configured instances"""

from typing import cast

from .container import DIContainer, setup_default_container
from .interfaces import (
    DictionaryFetcherInterface,
    EntryParserInterface,
    EntryRendererInterface,
    TextProcessorInterface,
)
from .lookup_service import DictionaryLookupService


class LookupServiceFactory:
    """Factory for creating DictionaryLookupService instances"""

    @staticmethod
    def create_from_container(
        container: DIContainer, locale: str | None = None
    ) -> DictionaryLookupService:
        """Create service from DI container"""
        fetcher = cast(
            DictionaryFetcherInterface, container.get(DictionaryFetcherInterface)
        )
        parser = cast(EntryParserInterface, container.get(EntryParserInterface))
        renderer = cast(EntryRendererInterface, container.get(EntryRendererInterface))
        text_processor = cast(
            TextProcessorInterface, container.get(TextProcessorInterface)
        )

        if not all([fetcher, parser, renderer, text_processor]):
            raise RuntimeError(
                "Some required dependencies are not registered in the container"
            )

        return DictionaryLookupService(
            fetcher=fetcher,
            parser=parser,
            renderer=renderer,
            text_processor=text_processor,
            locale=locale,
        )


def create_lookup_service(
    locale: str | None = None,
    keep_unclassified: bool | None = None,
    template_dir: str | None = None,
    container: DIContainer | None = None,
) -> DictionaryLookupService:
    """Convenience function to create a lookup service"""
    if container is None:
        container = setup_default_container(
            keep_unclassified=keep_unclassified, template_dir=template_dir
        )
    return LookupServiceFactory.create_from_container(container, locale)
