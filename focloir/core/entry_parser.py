"""Extract dictionary entries from a focloir.ie result page.

The pipeline runs in four stages, each node passing through once:

1. ``MarkupLoader`` turns the raw page into a tree.
2. ``SenseSelector`` picks the sense nodes and skips phrase fragments.
3. ``FieldExtractor`` builds one entry per remaining sense.
4. The entry policy drops senses without a part of speech, unless the
   parser was configured to keep them.

Parsing is pure: it touches no shared state, so one parser instance can
serve any number of lookups, concurrently or not.
"""

from ..config.settings import settings
from ..logging_config import get_logger
from ..models.entry import DictionaryEntry
from ..models.markup_schema import FragmentMarker, MarkupSchema
from .field_extractor import FieldExtractor
from .interfaces import EntryParserInterface, TextProcessorInterface
from .markup_loader import MarkupLoader
from .sense_selector import SenseSelector
from .text_processor import TextProcessor

logger = get_logger(__name__)


class EntryParser(EntryParserInterface):
    """Turns result page markup into an ordered list of entries"""

    def __init__(
        self,
        schema: MarkupSchema | None = None,
        fragment_marker: FragmentMarker | None = None,
        keep_unclassified: bool | None = None,
        backend: str | None = None,
        text_processor: TextProcessorInterface | None = None,
    ):
        self.schema = schema or MarkupSchema(sense=settings.parser.sense_class)
        self.fragment_marker = fragment_marker or FragmentMarker(
            attribute=settings.parser.fragment_marker_attribute,
            value=settings.parser.fragment_marker_value,
        )
        self.keep_unclassified = (
            keep_unclassified
            if keep_unclassified is not None
            else settings.parser.keep_unclassified
        )
        self.loader = MarkupLoader(backend)
        self.selector = SenseSelector(self.schema.sense, self.fragment_marker)
        self.extractor = FieldExtractor(self.schema, text_processor or TextProcessor())

    def parse(self, raw: str | bytes) -> list[DictionaryEntry]:
        """Extract entries in the document order of their sense nodes"""
        tree = self.loader.load(raw)
        senses = self.selector.select(tree)
        entries = [self.extractor.extract(node) for node in senses]
        return self.apply_policy(entries)

    def apply_policy(self, entries: list[DictionaryEntry]) -> list[DictionaryEntry]:
        """Drop unclassified entries unless configured to keep them"""
        if self.keep_unclassified:
            return list(entries)

        kept = [entry for entry in entries if not entry.is_unclassified]
        if len(kept) != len(entries):
            logger.debug(
                f"Dropped {len(entries) - len(kept)} entries without a part of speech"
            )
        return kept


def parse_entries(raw: str | bytes, **options) -> list[DictionaryEntry]:
    """Convenience function to parse a page with a one-off parser"""
    return EntryParser(**options).parse(raw)
