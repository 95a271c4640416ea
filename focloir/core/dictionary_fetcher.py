"""Fetch dictionary result pages from focloir.ie"""

from urllib.parse import quote

import requests  # type: ignore[import-untyped]
from requests.adapters import HTTPAdapter  # type: ignore[import-untyped]
from urllib3.util import Retry

from ..config.settings import settings
from ..exceptions import ConfigurationError, LookupFailedError
from ..logging_config import get_logger
from .constants import FetchConstants
from .interfaces import DictionaryFetcherInterface

logger = get_logger(__name__)


class DictionaryFetcher(DictionaryFetcherInterface):
    """Retrieves the English-Irish result page for a headword"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        max_retries: int | None = None,
    ):
        self.base_url = (base_url or settings.fetch.base_url).rstrip("/")
        self.timeout = int(
            timeout if timeout is not None else settings.fetch.request_timeout
        )
        self.max_retries = int(
            max_retries if max_retries is not None else settings.fetch.max_retries
        )
        self.session = requests.Session()
        headers = FetchConstants.DEFAULT_HEADERS.copy()
        headers["User-Agent"] = settings.fetch.user_agent
        self.session.headers.update(headers)
        self._configure_retries()

    def build_url(self, word: str, locale: str | None = None) -> str:
        """Build the lookup URL for a headword in the given interface language"""
        locale = (locale or settings.fetch.locale).lower()
        section = FetchConstants.DICTIONARY_SECTIONS.get(locale)
        if section is None:
            raise ConfigurationError(
                "locale",
                locale,
                f"must be one of {sorted(FetchConstants.DICTIONARY_SECTIONS)}",
            )
        return (
            f"{self.base_url}/{locale}/{section}/"
            f"{FetchConstants.DICTIONARY_CODE}/{quote(word)}"
        )

    def fetch_page(self, word: str, locale: str | None = None) -> str:
        """Fetch the raw page markup.

        Raises:
            LookupFailedError: On network errors or a non-200 response.
        """
        url = self.build_url(word, locale)
        logger.debug(f"Fetching {url}")
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LookupFailedError(word, url, original_error=e) from e

        if r.status_code != 200:
            raise LookupFailedError(word, url, status_code=r.status_code)

        # Unlabelled text/html would otherwise be decoded as ISO-8859-1
        if "charset" not in r.headers.get("Content-Type", "").lower():
            r.encoding = "utf-8"
        return r.text

    def _configure_retries(self) -> None:
        retry = Retry(
            total=self.max_retries,
            backoff_factor=0.3,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("GET",),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
