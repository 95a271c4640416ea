"""Text processing utilities for dictionary markup and headwords"""

import re

from .constants import TextConstants
from .interfaces import TextProcessorInterface


class TextProcessor(TextProcessorInterface):
    """Handles all text cleaning and validation operations"""

    WHITESPACE_RE = re.compile(TextConstants.WHITESPACE_PATTERN)
    VALID_WORD_RE = re.compile(TextConstants.VALID_WORD_PATTERN)

    @classmethod
    def is_valid_word(cls, word: str) -> bool:
        """Check if the input is a valid headword or phrase"""
        if not word or not word.strip():
            return False

        word = word.strip()

        if not (
            TextConstants.MIN_WORD_LENGTH <= len(word) <= TextConstants.MAX_WORD_LENGTH
        ):
            return False

        # Letters separated by single spaces, hyphens or apostrophes
        return bool(cls.VALID_WORD_RE.match(word))

    @classmethod
    def clean_word(cls, word: str) -> str | None:
        """Clean and validate word input"""
        if not word:
            return None

        word = cls.WHITESPACE_RE.sub(" ", word.strip())

        return word if cls.is_valid_word(word) else None

    @classmethod
    def clean_text(cls, text: str) -> str:
        """Trim text and collapse internal whitespace runs"""
        if not text:
            return ""
        return cls.WHITESPACE_RE.sub(" ", text.strip())

    @classmethod
    def split_translation(cls, text: str) -> tuple[str, str | None]:
        """Split unstructured translation text into (word, gender).

        The first whitespace-separated token is the word and the second,
        when present, the gender label.
        """
        tokens = cls.clean_text(text).split(" ")
        word = tokens[0] if tokens else ""
        gender = tokens[1] if len(tokens) > 1 else None
        return word, gender
