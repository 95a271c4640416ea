"""Tests for per-sense field extraction"""

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from focloir.core.field_extractor import FieldExtractor
from focloir.core.text_processor import TextProcessor
from focloir.models.entry import AudioFile, Dialect, Example, Translation
from focloir.models.markup_schema import MarkupSchema


def sense(html: str):
    soup = BeautifulSoup(f'<div class="sense">{html}</div>', "html.parser")
    return soup.find(class_="sense")


class TestFieldExtractor:
    """Test class for FieldExtractor."""

    def setup_method(self):
        """Set up test fixtures."""
        self.extractor = FieldExtractor(MarkupSchema(), TextProcessor())

    def test_empty_sense_has_every_field_default_filled(self):
        entry = self.extractor.extract(sense(""))

        assert entry.number == ""
        assert entry.part_of_speech == "Phrase"
        assert entry.domains == ()
        assert entry.editorial_meaning == ""
        assert entry.translations == ()
        assert entry.examples == ()
        assert entry.audio_files == ()

    def test_first_number_and_part_of_speech_win(self):
        entry = self.extractor.extract(
            sense(
                '<span class="span_sensenum"> 2a </span>'
                '<span class="pos">noun</span>'
                '<span class="span_sensenum">3</span>'
                '<span class="pos">verb</span>'
            )
        )

        assert entry.number == "2a"
        assert entry.part_of_speech == "noun"

    def test_domains_keep_document_order(self):
        entry = self.extractor.extract(
            sense(
                '<span class="lbl_purple_sc_i"> Sport </span>'
                '<span class="lbl_purple_sc_i">Law</span>'
                '<span class="lbl_purple_sc_i">Botany</span>'
            )
        )
        assert entry.domains == ("Sport", "Law", "Botany")

    def test_editorial_meaning_whitespace_is_collapsed(self):
        entry = self.extractor.extract(
            sense('<span class="EDMEANING">\n  (of\n   animal)  </span>')
        )
        assert entry.editorial_meaning == "(of animal)"

    def test_translation_with_gender_inside(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_translation"><span class="quote">cat</span> '
                '<span class="lbl_black_i">masc1</span></span>'
            )
        )
        assert entry.translations == (Translation(word="cat", gender="masc1"),)

    def test_translation_with_adjacent_gender_label(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_translation"><span class="quote">bean</span></span>\n'
                '<span class="lbl_black_i">fem2</span>'
            )
        )
        assert entry.translations == (Translation(word="bean", gender="fem2"),)

    def test_gender_label_separated_by_text_is_not_adjacent(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_translation"><span class="quote">bean</span></span>'
                ', <span class="lbl_black_i">fem2</span>'
            )
        )
        assert entry.translations == (Translation(word="bean", gender=None),)

    def test_translation_without_quote_falls_back_to_text_split(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_translation">madra fir.</span>'
                '<span class="cit_translation">lean</span>'
                '<span class="cit_translation">  </span>'
            )
        )
        assert entry.translations == (
            Translation(word="madra", gender="fir."),
            Translation(word="lean", gender=None),
            Translation(word="", gender=None),
        )

    def test_example_translation_is_not_a_sense_translation(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_translation"><span class="quote">madra</span></span>'
                '<span class="cit_example"><span class="quote">the dog</span>'
                '<span class="cit_translation_noline"><span class="quote">an madra</span>'
                "</span></span>"
            )
        )
        assert [t.word for t in entry.translations] == ["madra"]
        assert entry.examples == (Example(source="the dog", target="an madra"),)

    def test_example_missing_parts_yield_empty_strings(self):
        entry = self.extractor.extract(
            sense(
                '<span class="cit_example"><span class="quote">only source</span></span>'
                '<span class="cit_example"><span class="cit_translation_noline">'
                "sprioc amháin</span></span>"
                '<span class="cit_example"><b><span class="quote">nested</span></b></span>'
            )
        )
        assert entry.examples == (
            Example(source="only source", target=""),
            Example(source="", target="sprioc amháin"),
            Example(source="", target=""),
        )

    def test_audio_files_with_dialects(self):
        entry = self.extractor.extract(
            sense(
                '<a class="audio_play_button" data-src-mp3="/s/cat_u.mp3"></a>'
                '<a class="audio_play_button" data-src-mp3="/s/cat_c.mp3"></a>'
                '<a class="audio_play_button" data-src-mp3="/s/cat.mp3"></a>'
                '<a class="audio_play_button"></a>'
            )
        )
        assert entry.audio_files == (
            AudioFile(url="/s/cat_u.mp3", dialect=Dialect.ULSTER),
            AudioFile(url="/s/cat_c.mp3", dialect=Dialect.CONNACHT),
            AudioFile(url="/s/cat.mp3", dialect=Dialect.UNKNOWN),
        )

    def test_audio_url_is_kept_verbatim(self):
        url = "not a url at all m"
        entry = self.extractor.extract(
            sense(f'<span class="audio_play_button" data-src-mp3="{url}"></span>')
        )
        assert entry.audio_files[0].url == url
        assert entry.audio_files[0].dialect == Dialect.MUNSTER

    def test_entries_are_immutable(self):
        entry = self.extractor.extract(sense('<span class="pos">noun</span>'))
        with pytest.raises(ValidationError):
            entry.part_of_speech = "verb"  # type: ignore[misc]
