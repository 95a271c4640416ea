"""Tests for dialect classification of pronunciation files"""

import pytest

from focloir.core.dialect import derive_dialect
from focloir.models.entry import Dialect


class TestDeriveDialect:
    """Test class for derive_dialect."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("path/word_c.mp3", Dialect.CONNACHT),
            ("path/word_m.mp3", Dialect.MUNSTER),
            ("path/word_u.mp3", Dialect.ULSTER),
            ("path/word_x.mp3", Dialect.UNKNOWN),
            ("path/word.mp3", Dialect.UNKNOWN),
        ],
    )
    def test_suffix_table(self, url, expected):
        assert derive_dialect(url) == expected

    def test_absolute_url_with_query(self):
        url = "https://www.focloir.ie/media/ei/sounds/madra_c.mp3?v=2"
        assert derive_dialect(url) == Dialect.CONNACHT

    def test_other_known_extensions_are_stripped(self):
        assert derive_dialect("sounds/madra_u.ogg") == Dialect.ULSTER
        assert derive_dialect("sounds/madra_m.wav") == Dialect.MUNSTER

    def test_missing_extension_uses_last_character(self):
        assert derive_dialect("sounds/madra_c") == Dialect.CONNACHT

    def test_comparison_is_case_sensitive(self):
        assert derive_dialect("sounds/madra_C.mp3") == Dialect.UNKNOWN

    def test_degenerate_inputs_are_unknown(self):
        assert derive_dialect("") == Dialect.UNKNOWN
        assert derive_dialect(".mp3") == Dialect.UNKNOWN
        assert derive_dialect("sounds/") == Dialect.UNKNOWN
        assert derive_dialect("http://[broken") == Dialect.UNKNOWN

    def test_deterministic(self):
        urls = ["a/b_c.mp3", "a/b_m.mp3", "a/b_q.mp3"]
        assert [derive_dialect(u) for u in urls] == [derive_dialect(u) for u in urls]
