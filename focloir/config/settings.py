"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """Markup extraction settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    backend: str = Field(
        default="html.parser", validation_alias=AliasChoices("FOCLOIR_PARSER")
    )
    sense_class: str = Field(
        default="sense", validation_alias=AliasChoices("FOCLOIR_SENSE_CLASS")
    )
    fragment_marker_attribute: str = Field(
        default="xml:lang",
        validation_alias=AliasChoices("FOCLOIR_FRAGMENT_MARKER_ATTRIBUTE"),
    )
    fragment_marker_value: str = Field(
        default="", validation_alias=AliasChoices("FOCLOIR_FRAGMENT_MARKER_VALUE")
    )
    keep_unclassified: bool = Field(
        default=False,
        validation_alias=AliasChoices("FOCLOIR_KEEP_UNCLASSIFIED"),
        description="Surface senses without a part of speech instead of dropping them",
    )

    @field_validator("sense_class", "fragment_marker_attribute")
    @classmethod
    def validate_marker_names(cls, v: str) -> str:
        """Class and attribute names cannot be blank"""
        if not v or not v.strip():
            raise ValueError("Marker name cannot be empty")
        return v.strip()


class FetchSettings(BaseSettings):
    """Dictionary page fetching configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    base_url: str = Field(
        default="https://www.focloir.ie",
        validation_alias=AliasChoices("FOCLOIR_BASE_URL"),
    )
    locale: str = Field(default="en", validation_alias=AliasChoices("FOCLOIR_LOCALE"))
    request_timeout: int = Field(
        default=10, validation_alias=AliasChoices("FOCLOIR_REQUEST_TIMEOUT")
    )
    max_retries: int = Field(
        default=3, validation_alias=AliasChoices("FOCLOIR_MAX_RETRIES")
    )
    rate_limit_delay: float = Field(
        default=1.0, validation_alias=AliasChoices("FOCLOIR_RATE_LIMIT_DELAY")
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        validation_alias=AliasChoices("FOCLOIR_USER_AGENT"),
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Only the English and Irish interfaces exist"""
        v = v.strip().lower()
        if v not in ("en", "ga"):
            raise ValueError("Locale must be one of: ['en', 'ga']")
        return v

    @field_validator("request_timeout", "max_retries")
    @classmethod
    def validate_positive_integers(cls, v: int) -> int:
        """Validate positive integer values"""
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator("rate_limit_delay")
    @classmethod
    def validate_rate_limit(cls, v: float) -> float:
        """Validate rate limit delay"""
        if v < 0:
            raise ValueError("Rate limit delay cannot be negative")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))
    verbose: bool = Field(default=False, validation_alias=AliasChoices("VERBOSE"))


# Global settings instance
settings = AppSettings()
