"""Load raw result page markup into a queryable tree"""

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from ..config.settings import settings
from ..exceptions import ConfigurationError, ParseError
from ..logging_config import get_logger

logger = get_logger(__name__)


class MarkupLoader:
    """Parses page markup with BeautifulSoup, always yielding a tree"""

    def __init__(self, backend: str | None = None):
        self.backend = backend or settings.parser.backend

    def load(self, raw: str | bytes) -> BeautifulSoup:
        """Parse markup into a best-effort tree.

        Unclosed tags and stray attributes are repaired by the tree builder.
        Markup the builder refuses outright yields an empty tree so that
        extraction degrades to no entries.

        Raises:
            ParseError: If ``raw`` is not text.
            ConfigurationError: If the configured tree builder is not installed.
        """
        if not isinstance(raw, (str, bytes)):
            raise ParseError(
                self.backend, type(raw).__name__, "markup must be str or bytes"
            )

        try:
            return BeautifulSoup(raw, self.backend)
        except FeatureNotFound as e:
            raise ConfigurationError(
                "parser.backend", self.backend, "tree builder is not available"
            ) from e
        except ParserRejectedMarkup as e:
            logger.warning(f"Markup rejected by {self.backend}, using empty tree: {e}")
            return BeautifulSoup("", self.backend)
