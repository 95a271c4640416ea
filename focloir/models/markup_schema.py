"""Markers describing the structure of a dictionary result page.

The page schema is owned by focloir.ie and not versioned. Every class and
attribute name the extractor depends on lives here so that an upstream
markup change can be absorbed by passing a different schema instead of
editing the extractor.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constants import SelectorConstants


class FragmentMarker(BaseModel):
    """Attribute/value pair that flags phrase fragments nested in a sense"""

    model_config = ConfigDict(frozen=True)

    attribute: str = Field(default=SelectorConstants.FRAGMENT_MARKER_ATTRIBUTE)
    value: str = Field(default=SelectorConstants.FRAGMENT_MARKER_VALUE)

    @field_validator("attribute")
    @classmethod
    def validate_attribute(cls, v: str) -> str:
        """HTML parsers lowercase attribute names"""
        if not v or not v.strip():
            raise ValueError("Marker attribute cannot be empty")
        return v.strip().lower()

    def matches(self, tag: Any) -> bool:
        """Check if a tag carries the marker attribute with the marker value"""
        attrs = getattr(tag, "attrs", None)
        if not attrs or self.attribute not in attrs:
            return False
        actual = attrs[self.attribute]
        if isinstance(actual, list):
            actual = " ".join(actual)
        # Valueless attributes are reported as None by some tree builders
        return (actual or "") == self.value


class MarkupSchema(BaseModel):
    """Class names and attributes used to locate sense fields"""

    model_config = ConfigDict(frozen=True)

    sense: str = SelectorConstants.SENSE
    sense_number: str = SelectorConstants.SENSE_NUMBER
    part_of_speech: str = SelectorConstants.PART_OF_SPEECH
    domain_label: str = SelectorConstants.DOMAIN_LABEL
    editorial_meaning: str = SelectorConstants.EDITORIAL_MEANING
    translation: str = SelectorConstants.TRANSLATION
    quote: str = SelectorConstants.QUOTE
    gender_label: str = SelectorConstants.GENDER_LABEL
    example: str = SelectorConstants.EXAMPLE
    example_translation: str = SelectorConstants.EXAMPLE_TRANSLATION
    audio_button: str = SelectorConstants.AUDIO_BUTTON
    audio_url_attribute: str = SelectorConstants.AUDIO_URL_ATTRIBUTE
