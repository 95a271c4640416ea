"""Dictionary lookups: fetch a result page, extract entries, render them"""

import time
from dataclasses import dataclass, field
from typing import Any

from ..config.settings import settings
from ..exceptions import FocloirError, WordValidationError
from ..logging_config import get_logger
from ..models.entry import DictionaryEntry
from ..utils.error_handler import ErrorCollector
from .interfaces import (
    DictionaryFetcherInterface,
    EntryParserInterface,
    EntryRendererInterface,
    TextProcessorInterface,
)

logger = get_logger(__name__)


@dataclass
class LookupResult:
    """Result of looking up one headword"""

    word: str
    locale: str
    entries: list[DictionaryEntry] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class BatchLookupResult:
    """Result of looking up several headwords"""

    results: list[LookupResult]
    errors: list[str]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return self.total - self.successful


class DictionaryLookupService:
    """Main lookup service with dependency injection.

    Each lookup starts from a fresh page; entries from earlier lookups are
    never reused or merged.
    """

    def __init__(
        self,
        fetcher: DictionaryFetcherInterface,
        parser: EntryParserInterface,
        renderer: EntryRendererInterface,
        text_processor: TextProcessorInterface,
        locale: str | None = None,
    ):
        self.fetcher = fetcher
        self.parser = parser
        self.renderer = renderer
        self.text_processor = text_processor
        self.locale = locale or settings.fetch.locale

        self._stats = {
            "lookups": 0,
            "pages_parsed": 0,
            "entries_found": 0,
            "failures": 0,
        }

    def lookup(self, word: str, locale: str | None = None) -> LookupResult:
        """Fetch and parse the result page for a headword.

        Raises:
            WordValidationError: If the headword is not a plausible word.
            LookupFailedError: If the page cannot be retrieved.
        """
        clean = self.text_processor.clean_word(word)
        if not clean:
            raise WordValidationError(word, "not a valid headword")

        locale = locale or self.locale
        self._stats["lookups"] += 1
        raw = self.fetcher.fetch_page(clean, locale)
        return self.lookup_page(raw, clean, locale)

    def lookup_page(
        self, raw: str | bytes, word: str = "", locale: str | None = None
    ) -> LookupResult:
        """Parse an already retrieved result page"""
        entries = self.parser.parse(raw)
        self._stats["pages_parsed"] += 1
        self._stats["entries_found"] += len(entries)
        logger.debug(f"Found {len(entries)} entries for '{word}'")
        return LookupResult(word=word, locale=locale or self.locale, entries=entries)

    def batch_lookup(
        self,
        words: list[str],
        locale: str | None = None,
        delay: float | None = None,
    ) -> BatchLookupResult:
        """Look up several headwords, continuing past failures"""
        delay = settings.fetch.rate_limit_delay if delay is None else delay
        collector = ErrorCollector()
        results: list[LookupResult] = []

        for i, word in enumerate(words, 1):
            logger.info(f"Looking up ({i}/{len(words)}): {word}")
            try:
                result = self.lookup(word, locale)
                if not result.entries:
                    collector.add_warning(f"No entries found for '{word}'")
                results.append(result)
            except FocloirError as e:
                self._stats["failures"] += 1
                collector.add_error(e)
                results.append(
                    LookupResult(word=word, locale=locale or self.locale, error=str(e))
                )

            if i < len(words) and delay > 0:
                time.sleep(delay)

        collector.log_all(logger)
        return BatchLookupResult(
            results=results, errors=[str(e) for e in collector.errors]
        )

    def render(self, result: LookupResult) -> str:
        """Render a lookup result in its interface language"""
        return self.renderer.render(result.word, result.entries, result.locale)

    def get_statistics(self) -> dict[str, Any]:
        """Get lookup statistics"""
        return dict(self._stats)
