"""Dialect classification of pronunciation recordings"""

from urllib.parse import urlsplit

from ..models.entry import Dialect
from .constants import DialectConstants


def derive_dialect(url: str) -> Dialect:
    """Classify a recording by the last character of its file name stem.

    ``madra_c.mp3`` is Connacht, ``madra_m.mp3`` Munster and ``madra_u.mp3``
    Ulster. Anything else, including an empty stem, is Unknown. Comparison
    is exact, so ``madra_C.mp3`` is Unknown too.
    """
    if not url:
        return Dialect.UNKNOWN

    try:
        path = urlsplit(url).path
    except ValueError:
        path = url

    name = path.rsplit("/", 1)[-1]
    for extension in DialectConstants.AUDIO_EXTENSIONS:
        if name.endswith(extension):
            name = name[: -len(extension)]
            break

    if not name:
        return Dialect.UNKNOWN

    dialect = DialectConstants.SUFFIX_DIALECTS.get(name[-1])
    return Dialect(dialect) if dialect else Dialect.UNKNOWN
