"""Tests for sense selection and fragment filtering"""

from bs4 import BeautifulSoup

from focloir.core.sense_selector import SenseSelector
from focloir.models.markup_schema import FragmentMarker


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestSenseSelector:
    """Test class for SenseSelector."""

    def setup_method(self):
        """Set up test fixtures."""
        self.selector = SenseSelector("sense", FragmentMarker())

    def test_candidates_in_document_order(self):
        tree = soup(
            '<div class="sense" id="a"></div>'
            '<section><span class="sense big" id="b"></span></section>'
            '<div class="span_sensenum" id="not"></div>'
            '<div class="sense" id="c"></div>'
        )
        assert [n["id"] for n in self.selector.candidates(tree)] == ["a", "b", "c"]

    def test_empty_language_descendant_marks_fragment(self):
        tree = soup('<div class="sense"><span><i xml:lang="">idiom</i></span></div>')
        assert self.selector.is_fragment(tree.find(class_="sense"))

    def test_valueless_language_attribute_marks_fragment(self):
        tree = soup('<div class="sense"><span xml:lang>idiom</span></div>')
        assert self.selector.is_fragment(tree.find(class_="sense"))

    def test_non_empty_language_is_not_fragment(self):
        tree = soup('<div class="sense"><span xml:lang="ga">madra</span></div>')
        assert not self.selector.is_fragment(tree.find(class_="sense"))

    def test_marker_on_sense_itself_is_not_a_descendant(self):
        tree = soup('<div class="sense" xml:lang=""><span>madra</span></div>')
        assert not self.selector.is_fragment(tree.find(class_="sense"))

    def test_select_skips_fragments(self):
        tree = soup(
            '<div class="sense" id="1"></div>'
            '<div class="sense" id="2"><span xml:lang=""></span></div>'
            '<div class="sense" id="3"></div>'
        )
        assert [n["id"] for n in self.selector.select(tree)] == ["1", "3"]

    def test_configured_marker(self):
        selector = SenseSelector(
            "sense", FragmentMarker(attribute="DATA-KIND", value="phrase")
        )
        tree = soup(
            '<div class="sense" id="1"><span data-kind="phrase"></span></div>'
            '<div class="sense" id="2"><span data-kind="sense"></span></div>'
        )
        assert [n["id"] for n in selector.select(tree)] == ["2"]
