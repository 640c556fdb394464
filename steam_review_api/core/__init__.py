"""Core domain types.

Barrel export for clean imports across the package.
"""

from .language import (
    AnyLanguage,
    Language,
    LanguageInfo,
    UnknownLanguage,
    parse_lenient,
)
from .newtypes import Minutes, UnixTimestamp

__all__ = [
    "AnyLanguage",
    "Language",
    "LanguageInfo",
    "UnknownLanguage",
    "parse_lenient",
    "Minutes",
    "UnixTimestamp",
]
