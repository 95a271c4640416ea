"""Markdown presentation of extracted entries"""

from collections.abc import Sequence
from pathlib import Path

from ..core.constants import DisplayStrings, get_display_strings
from ..core.interfaces import EntryRendererInterface
from ..exceptions import ConfigurationError
from ..models.entry import DictionaryEntry
from .loader import load_environment


class MarkdownRenderer(EntryRendererInterface):
    """Renders entries as a Markdown document with localized headings"""

    TEMPLATE_NAME = "entries.md.j2"

    def __init__(self, template_dir: str | Path | None = None):
        self.template_dir = template_dir

    def render(
        self, word: str, entries: Sequence[DictionaryEntry], locale: str = "en"
    ) -> str:
        if locale not in DisplayStrings.SUPPORTED_LOCALES:
            raise ConfigurationError(
                "locale",
                locale,
                f"must be one of {list(DisplayStrings.SUPPORTED_LOCALES)}",
            )
        template = load_environment(self.template_dir).get_template(
            self.TEMPLATE_NAME
        )
        return template.render(
            word=word, entries=list(entries), strings=get_display_strings(locale)
        )
