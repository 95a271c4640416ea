"""
focloir - English-Irish dictionary entries from focloir.ie result pages
"""

__version__ = "1.0.0"
__description__ = "Structured bilingual dictionary entries from focloir.ie markup"

from .core.dialect import derive_dialect
from .core.entry_parser import EntryParser, parse_entries
from .core.factory import create_lookup_service

__all__ = ["EntryParser", "create_lookup_service", "derive_dialect", "parse_entries"]
