"""Unit tests for DictionaryFetcher"""

from unittest.mock import Mock, patch

import pytest
import requests  # type: ignore[import-untyped]

from focloir.core.dictionary_fetcher import DictionaryFetcher
from focloir.exceptions import ConfigurationError, LookupFailedError


class TestDictionaryFetcher:
    """Test class for DictionaryFetcher."""

    def setup_method(self):
        """Set up test fixtures."""
        self.fetcher = DictionaryFetcher(base_url="https://www.focloir.ie/")

    def test_build_url_english_interface(self):
        assert (
            self.fetcher.build_url("dog", "en")
            == "https://www.focloir.ie/en/dictionary/ei/dog"
        )

    def test_build_url_irish_interface(self):
        assert (
            self.fetcher.build_url("dog", "ga")
            == "https://www.focloir.ie/ga/focloir/ei/dog"
        )

    def test_build_url_quotes_word(self):
        assert self.fetcher.build_url("hot dog", "EN").endswith("/ei/hot%20dog")

    def test_build_url_rejects_unknown_locale(self):
        with pytest.raises(ConfigurationError):
            self.fetcher.build_url("dog", "fr")

    @patch("focloir.core.dictionary_fetcher.requests.Session.get")
    def test_fetch_page_success(self, mock_get):
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.headers = {"Content-Type": "text/html; charset=utf-8"}
        mock_response.encoding = "utf-8"
        mock_response.text = '<div class="sense"></div>'
        mock_get.return_value = mock_response

        page = self.fetcher.fetch_page("dog", "en")

        assert page == '<div class="sense"></div>'
        url = mock_get.call_args[0][0]
        assert url == "https://www.focloir.ie/en/dictionary/ei/dog"
        assert mock_get.call_args[1]["timeout"] == self.fetcher.timeout

    @patch("focloir.core.dictionary_fetcher.requests.Session.get")
    def test_fetch_page_defaults_unlabelled_pages_to_utf8(self, mock_get):
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.headers = {"Content-Type": "text/html"}
        mock_response.encoding = "ISO-8859-1"
        mock_response.text = "fáilte"
        mock_get.return_value = mock_response

        self.fetcher.fetch_page("welcome", "en")

        assert mock_response.encoding == "utf-8"

    @patch("focloir.core.dictionary_fetcher.requests.Session.get")
    def test_fetch_page_non_success_status(self, mock_get):
        mock_response = Mock()
        mock_response.status_code = 404
        mock_get.return_value = mock_response

        with pytest.raises(LookupFailedError) as exc:
            self.fetcher.fetch_page("nonexistent", "en")

        assert exc.value.status_code == 404
        assert exc.value.word == "nonexistent"
        assert "HTTP 404" in str(exc.value)

    @patch("focloir.core.dictionary_fetcher.requests.Session.get")
    def test_fetch_page_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(LookupFailedError) as exc:
            self.fetcher.fetch_page("dog", "en")

        assert exc.value.status_code is None
        assert isinstance(exc.value.original_error, requests.ConnectionError)

    def test_retries_are_mounted(self):
        adapter = self.fetcher.session.get_adapter("https://www.focloir.ie")
        assert adapter.max_retries.total == self.fetcher.max_retries
        assert 503 in adapter.max_retries.status_forcelist
