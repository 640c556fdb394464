"""steam_review_api - typed data model for the Steam review endpoint.

Language catalog, integer newtypes, response records and their JSON codec.
"""

__version__ = "0.1.0"

from steam_review_api.core import (
    AnyLanguage,
    Language,
    LanguageInfo,
    Minutes,
    UnixTimestamp,
    UnknownLanguage,
    parse_lenient,
)
from steam_review_api.errors import (
    SteamReviewError,
    ErrorCode,
    ErrorDetail,
    LangParseError,
    DecodeError,
    PayloadError,
)
from steam_review_api.records import Author, Review
from steam_review_api.wire import decode, decode_language, encode

__all__ = [
    # Version
    "__version__",
    # Core types
    "AnyLanguage",
    "Language",
    "LanguageInfo",
    "Minutes",
    "UnixTimestamp",
    "UnknownLanguage",
    "parse_lenient",
    # Records
    "Author",
    "Review",
    # Wire
    "decode",
    "decode_language",
    "encode",
    # Errors
    "SteamReviewError",
    "ErrorCode",
    "ErrorDetail",
    "LangParseError",
    "DecodeError",
    "PayloadError",
]
