"""Data models for the focloir dictionary tool"""

from .entry import AudioFile, Dialect, DictionaryEntry, Example, Translation
from .markup_schema import FragmentMarker, MarkupSchema

__all__ = [
    "AudioFile",
    "Dialect",
    "DictionaryEntry",
    "Example",
    "FragmentMarker",
    "MarkupSchema",
    "Translation",
]
