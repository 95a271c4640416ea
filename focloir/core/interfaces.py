"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.entry import DictionaryEntry


class EntryParserInterface(ABC):
    """Interface for turning result page markup into dictionary entries"""

    @abstractmethod
    def parse(self, raw: str | bytes) -> list[DictionaryEntry]:
        """Extract the ordered, filtered entries from one result page"""
        pass


class DictionaryFetcherInterface(ABC):
    """Interface for retrieving dictionary result pages"""

    @abstractmethod
    def build_url(self, word: str, locale: str | None = None) -> str:
        """Build the lookup URL for a headword"""
        pass

    @abstractmethod
    def fetch_page(self, word: str, locale: str | None = None) -> str:
        """Fetch the raw result page markup for a headword"""
        pass


class EntryRendererInterface(ABC):
    """Interface for presenting extracted entries"""

    @abstractmethod
    def render(
        self, word: str, entries: Sequence[DictionaryEntry], locale: str = "en"
    ) -> str:
        """Render entries for display in the given interface language"""
        pass


class TextProcessorInterface(ABC):
    """Interface for text processing operations"""

    @abstractmethod
    def clean_word(self, word: str) -> str | None:
        """Clean and validate word input"""
        pass

    @abstractmethod
    def clean_text(self, text: str) -> str:
        """Clean and normalize text content"""
        pass

    @abstractmethod
    def split_translation(self, text: str) -> tuple[str, str | None]:
        """Split unstructured translation text into word and gender"""
        pass
