"""Pydantic models for extracted dictionary entries"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..core.constants import EntryConstants


class Dialect(str, Enum):
    """Regional pronunciation of an audio file"""

    CONNACHT = "Connacht"
    MUNSTER = "Munster"
    ULSTER = "Ulster"
    UNKNOWN = "Unknown"


class _Record(BaseModel):
    # Immutable once built; serialized with camelCase keys
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )


class Translation(_Record):
    """Model for a single translation of a sense"""

    word: str = Field(default="", description="Translated headword")
    gender: str | None = Field(None, description="Grammatical gender label")

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        return v.strip()

    @field_validator("gender")
    @classmethod
    def validate_gender(cls, v: str | None) -> str | None:
        """Blank gender labels mean no gender"""
        if not v or not v.strip():
            return None
        return v.strip()


class Example(_Record):
    """Model for a bilingual example sentence"""

    source: str = Field(default="", description="Sentence in the source language")
    target: str = Field(default="", description="Sentence in the target language")

    @field_validator("source", "target")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return v.strip()


class AudioFile(_Record):
    """Model for a pronunciation recording"""

    url: str = Field(description="Pronunciation URL as found in the page")
    dialect: Dialect = Field(default=Dialect.UNKNOWN, description="Regional dialect")


class DictionaryEntry(_Record):
    """Main model for one sense of a dictionary headword"""

    number: str = Field(default="", description="Sense label, e.g. '1' or '2a'")
    part_of_speech: str = Field(
        default=EntryConstants.UNCLASSIFIED_PART_OF_SPEECH,
        description="Part of speech (noun, verb, etc.)",
    )
    domains: tuple[str, ...] = Field(default=(), description="Subject domain tags")
    editorial_meaning: str = Field(default="", description="Editorial gloss")
    translations: tuple[Translation, ...] = Field(
        default=(), description="Translations in document order"
    )
    examples: tuple[Example, ...] = Field(
        default=(), description="Bilingual usage examples"
    )
    audio_files: tuple[AudioFile, ...] = Field(
        default=(), description="Pronunciation recordings"
    )

    @field_validator("number", "editorial_meaning")
    @classmethod
    def validate_text_fields(cls, v: str) -> str:
        return v.strip()

    @field_validator("part_of_speech")
    @classmethod
    def validate_part_of_speech(cls, v: str) -> str:
        """Missing part of speech falls back to the unclassified sentinel"""
        if not v or not v.strip():
            return EntryConstants.UNCLASSIFIED_PART_OF_SPEECH
        return v.strip()

    @property
    def is_unclassified(self) -> bool:
        """Check if the part of speech is the unclassified sentinel"""
        return self.part_of_speech == EntryConstants.UNCLASSIFIED_PART_OF_SPEECH
