"""Configuration module for the focloir dictionary tool"""

from .settings import (
    AppSettings,
    FetchSettings,
    LoggingSettings,
    ParserSettings,
    settings,
)

__all__ = [
    "AppSettings",
    "FetchSettings",
    "LoggingSettings",
    "ParserSettings",
    "settings",
]
