"""Shared constants across the application"""


class SelectorConstants:
    """Class and attribute markers used by focloir.ie result pages"""

    SENSE = "sense"
    SENSE_NUMBER = "span_sensenum"
    PART_OF_SPEECH = "pos"
    DOMAIN_LABEL = "lbl_purple_sc_i"
    EDITORIAL_MEANING = "EDMEANING"
    TRANSLATION = "cit_translation"
    QUOTE = "quote"
    GENDER_LABEL = "lbl_black_i"
    EXAMPLE = "cit_example"
    EXAMPLE_TRANSLATION = "cit_translation_noline"
    AUDIO_BUTTON = "audio_play_button"
    AUDIO_URL_ATTRIBUTE = "data-src-mp3"

    # Phrase sub-entries carry an explicit but empty language attribute
    FRAGMENT_MARKER_ATTRIBUTE = "xml:lang"
    FRAGMENT_MARKER_VALUE = ""


class EntryConstants:
    """Constants for entry construction"""

    # Reserved part of speech for senses that could not be classified
    UNCLASSIFIED_PART_OF_SPEECH = "Phrase"


class DialectConstants:
    """Constants for dialect classification of pronunciation files"""

    AUDIO_EXTENSIONS = (".mp3", ".ogg", ".wav", ".m4a")

    # Final character of the file stem -> dialect name
    SUFFIX_DIALECTS: dict[str, str] = {
        "c": "Connacht",
        "m": "Munster",
        "u": "Ulster",
    }


class FetchConstants:
    """Constants for fetching dictionary pages"""

    # Path segment of the English-Irish dictionary per interface language
    DICTIONARY_SECTIONS: dict[str, str] = {
        "en": "dictionary",
        "ga": "focloir",
    }
    DICTIONARY_CODE = "ei"

    DEFAULT_HEADERS = {
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/avif,image/webp,*/*;q=0.8"
        ),
        "Accept-Language": "en-IE,en;q=0.9,ga;q=0.8",
        "Connection": "keep-alive",
    }


class TextConstants:
    """Constants for text processing"""

    MIN_WORD_LENGTH = 1
    MAX_WORD_LENGTH = 60

    WHITESPACE_PATTERN = r"\s+"

    # Letters (any script, fadas included) joined by single spaces, hyphens or apostrophes
    VALID_WORD_PATTERN = r"^[^\W\d_]+(?:[\s\-'’][^\W\d_]+)*$"


class DisplayStrings:
    """User-facing strings for the rendered output, per interface language"""

    SUPPORTED_LOCALES = ("en", "ga")

    STRINGS: dict[str, dict[str, str]] = {
        "en": {
            "results": "Results",
            "translations": "Translations",
            "examples": "Examples",
            "pronunciation": "Pronunciation",
            "domains": "Domains",
            "no_results": "No results found",
            "Connacht": "Connacht",
            "Munster": "Munster",
            "Ulster": "Ulster",
            "Unknown": "Unknown dialect",
        },
        "ga": {
            "results": "Torthaí",
            "translations": "Aistriúcháin",
            "examples": "Samplaí",
            "pronunciation": "Fuaimniú",
            "domains": "Réimsí",
            "no_results": "Níor aimsíodh aon torthaí",
            "Connacht": "Connachta",
            "Munster": "An Mhumhain",
            "Ulster": "Ulaidh",
            "Unknown": "Canúint anaithnid",
        },
    }


def get_display_strings(locale: str) -> dict[str, str]:
    """Get the display strings for a locale, falling back to English"""
    return DisplayStrings.STRINGS.get(locale, DisplayStrings.STRINGS["en"])
