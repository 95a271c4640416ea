"""Custom exceptions for the focloir dictionary tool"""

from typing import Any


class FocloirError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordValidationError(FocloirError):
    """Raised when a headword is rejected before lookup"""

    def __init__(self, word: str, reason: str):
        super().__init__(
            f"Invalid word '{word}': {reason}", {"word": word, "reason": reason}
        )
        self.word = word
        self.reason = reason


class LookupFailedError(FocloirError):
    """Raised when the dictionary page cannot be retrieved"""

    def __init__(
        self,
        word: str,
        url: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        reason = (
            f"HTTP {status_code}"
            if status_code is not None
            else str(original_error or "unknown error")
        )
        super().__init__(
            f"Lookup failed for '{word}': {reason}",
            {
                "word": word,
                "url": url,
                "status_code": status_code,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.word = word
        self.url = url
        self.status_code = status_code
        self.original_error = original_error


class ConfigurationError(FocloirError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason


class ParseError(FocloirError):
    """Raised when markup cannot be handed to the parser at all"""

    def __init__(self, parser_type: str, content_type: str, reason: str):
        super().__init__(
            f"Failed to parse {content_type} with {parser_type}: {reason}",
            {
                "parser_type": parser_type,
                "content_type": content_type,
                "reason": reason,
            },
        )
        self.parser_type = parser_type
        self.content_type = content_type
        self.reason = reason
