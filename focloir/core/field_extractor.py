"""Derive dictionary entry fields from a single sense node"""

from typing import Any

from bs4.element import NavigableString, Tag

from ..models.entry import AudioFile, DictionaryEntry, Example, Translation
from ..models.markup_schema import MarkupSchema
from .constants import EntryConstants
from .dialect import derive_dialect
from .interfaces import TextProcessorInterface


class FieldExtractor:
    """Builds one DictionaryEntry per sense node.

    Every field starts from its empty value and is then populated from the
    node; a field whose markup is missing simply stays empty. The entry is
    constructed once all fields are known.
    """

    def __init__(self, schema: MarkupSchema, text_processor: TextProcessorInterface):
        self.schema = schema
        self.text_processor = text_processor

    @staticmethod
    def _empty_fields() -> dict[str, Any]:
        return {
            "number": "",
            "part_of_speech": EntryConstants.UNCLASSIFIED_PART_OF_SPEECH,
            "domains": (),
            "editorial_meaning": "",
            "translations": (),
            "examples": (),
            "audio_files": (),
        }

    def extract(self, node: Tag) -> DictionaryEntry:
        """Extract all fields of a sense node into an entry"""
        fields = self._empty_fields()

        fields["number"] = self._first_text(node, self.schema.sense_number)

        pos = node.find(class_=self.schema.part_of_speech)
        if pos is not None:
            fields["part_of_speech"] = self._text(pos)

        fields["domains"] = tuple(
            self._text(el) for el in node.find_all(class_=self.schema.domain_label)
        )
        fields["editorial_meaning"] = self._first_text(
            node, self.schema.editorial_meaning
        )
        fields["translations"] = self._extract_translations(node)
        fields["examples"] = self._extract_examples(node)
        fields["audio_files"] = self._extract_audio_files(node)

        return DictionaryEntry(**fields)

    def _text(self, el: Tag) -> str:
        return self.text_processor.clean_text(el.get_text())

    def _first_text(self, node: Tag, class_name: str) -> str:
        el = node.find(class_=class_name)
        return self._text(el) if el is not None else ""

    def _has_class(self, el: Tag, class_name: str) -> bool:
        classes = el.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        return class_name in classes

    def _adjacent_gender_label(self, el: Tag) -> Tag | None:
        """Gender label placed right after the translation node"""
        for sibling in el.next_siblings:
            if isinstance(sibling, Tag):
                return (
                    sibling
                    if self._has_class(sibling, self.schema.gender_label)
                    else None
                )
            if isinstance(sibling, NavigableString) and sibling.strip():
                return None
        return None

    def _extract_translations(self, node: Tag) -> tuple[Translation, ...]:
        translations: list[Translation] = []
        for el in node.find_all(class_=self.schema.translation):
            quote = el.find(class_=self.schema.quote)
            if quote is None:
                # No quoted structure: "word gender" as plain text
                word, gender = self.text_processor.split_translation(
                    el.get_text(" ")
                )
            else:
                word = self._text(quote)
                label = el.find(class_=self.schema.gender_label)
                if label is None:
                    label = self._adjacent_gender_label(el)
                gender = self._text(label) if label is not None else None
            translations.append(Translation(word=word, gender=gender))
        return tuple(translations)

    def _extract_examples(self, node: Tag) -> tuple[Example, ...]:
        examples: list[Example] = []
        for el in node.find_all(class_=self.schema.example):
            source = el.find(class_=self.schema.quote, recursive=False)
            target_el = el.find(class_=self.schema.example_translation)
            target = ""
            if target_el is not None:
                target_quote = target_el.find(class_=self.schema.quote)
                target = self._text(
                    target_quote if target_quote is not None else target_el
                )
            examples.append(
                Example(
                    source=self._text(source) if source is not None else "",
                    target=target,
                )
            )
        return tuple(examples)

    def _extract_audio_files(self, node: Tag) -> tuple[AudioFile, ...]:
        audio_files: list[AudioFile] = []
        for el in node.find_all(class_=self.schema.audio_button):
            url = el.get(self.schema.audio_url_attribute)
            if url is None:
                continue
            if isinstance(url, list):
                url = " ".join(url)
            audio_files.append(AudioFile(url=url, dialect=derive_dialect(url)))
        return tuple(audio_files)
