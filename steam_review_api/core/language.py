"""Language catalog as represented by the Steam API.

Source: https://partner.steamgames.com/doc/store/localization

Each member carries one immutable record with its three string projections.
Lookup tables for parsing are derived from those records once, at import.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Annotated, NamedTuple, Union

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from pydantic_core import PydanticCustomError, core_schema

from steam_review_api.errors import LangParseError


class LanguageInfo(NamedTuple):
    """String projections of one language."""
    wire_form: str
    short_code: str
    native_name: str


@total_ordering
class Language(Enum):
    """Languages accepted and returned by the review endpoint.

    Members are ordered by declaration. New members may be appended when
    Valve adds languages; callers that need to survive that should decode
    with ``AnyLanguage`` instead.
    """

    ALL = LanguageInfo("all", "all", "All")
    ARABIC = LanguageInfo("arabic", "ar", "العربية")
    BULGARIAN = LanguageInfo("bulgarian", "bg", "български език")
    SIMPLIFIED_CHINESE = LanguageInfo("schinese", "zh-CN", "简体中文")
    TRADITIONAL_CHINESE = LanguageInfo("tchinese", "zh-TW", "繁體中文")
    CZECH = LanguageInfo("czech", "cs", "Čeština")
    DANISH = LanguageInfo("danish", "da", "Dansk")
    DUTCH = LanguageInfo("dutch", "nl", "Nederlands")
    ENGLISH = LanguageInfo("english", "en", "English")
    FINNISH = LanguageInfo("finnish", "fi", "Suomi")
    FRENCH = LanguageInfo("french", "fr", "Français")
    GERMAN = LanguageInfo("german", "de", "Deutsch")
    # Steam publishes "el el"; keep it verbatim.
    GREEK = LanguageInfo("greek", "el el", "Ελληνικά")
    HUNGARIAN = LanguageInfo("hungarian", "hu", "Magyar")
    ITALIAN = LanguageInfo("italian", "it", "Italiano")
    JAPANESE = LanguageInfo("japanese", "ja", "日本語")
    KOREAN = LanguageInfo("koreana", "ko", "한국어")
    NORWEGIAN = LanguageInfo("norwegian", "no", "Norsk")
    POLISH = LanguageInfo("polish", "pl", "Polski")
    PORTUGUESE = LanguageInfo("portuguese", "pt", "Português")
    PORTUGUESE_BRAZILIAN = LanguageInfo("brazilian", "pt-BR", "Português-Brasil")
    ROMANIAN = LanguageInfo("romanian", "ro", "Română")
    RUSSIAN = LanguageInfo("russian", "ru", "Русский")
    SPANISH_SPAIN = LanguageInfo("spanish", "es", "Español-España")
    SPANISH_LATAM = LanguageInfo("latam", "es-419", "Español-Latinoamérica")
    SWEDISH = LanguageInfo("swedish", "sv", "Svenska")
    THAI = LanguageInfo("thai", "th", "ไทย")
    TURKISH = LanguageInfo("turkish", "tr", "Türkçe")
    UKRAINIAN = LanguageInfo("ukrainian", "uk", "Українська")
    VIETNAMESE = LanguageInfo("vietnamese", "vn", "Tiếng Việt")

    @property
    def wire_form(self) -> str:
        """Token used in queries and responses."""
        return self.value.wire_form

    @property
    def short_code(self) -> str:
        """Shorthand language code as published by Steam."""
        return self.value.short_code

    @property
    def native_name(self) -> str:
        """The language's name for itself."""
        return self.value.native_name

    @classmethod
    def parse(cls, text: str) -> "Language":
        """Parse a wire form, native name or short code.

        Tables are tried in that order and matching is exact: no case
        folding and no trimming.

        Raises:
            LangParseError: If ``text`` matches no known language.
        """
        for table in _LOOKUP_TABLES:
            language = table.get(text)
            if language is not None:
                return language
        raise LangParseError()

    def __str__(self) -> str:
        return self.value.wire_form

    def __format__(self, format_spec: str) -> str:
        return format(self.value.wire_form, format_spec)

    def __lt__(self, other):
        if not isinstance(other, Language):
            return NotImplemented
        return _POSITION[self] < _POSITION[other]

    # ─────────────────────────────────────────────────────────────────────
    # pydantic integration
    # ─────────────────────────────────────────────────────────────────────

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        return core_schema.no_info_plain_validator_function(
            _validate_language,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_language, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "string", "enum": [member.wire_form for member in cls]}


def _build_table(members, field: str, unique: bool = False) -> dict:
    """Map one projection of ``members`` back to the member."""
    table = {}
    for member in members:
        key = getattr(member.value, field)
        if key in table:
            if unique:
                raise ValueError(
                    f"{member.name} reuses {field} {key!r} of {table[key].name}"
                )
            # Earlier declaration wins.
            continue
        table[key] = member
    return table


_POSITION = {member: index for index, member in enumerate(Language)}

_BY_WIRE_FORM = _build_table(Language, "wire_form", unique=True)
_BY_NATIVE_NAME = _build_table(Language, "native_name")
_BY_SHORT_CODE = _build_table(Language, "short_code")

_LOOKUP_TABLES = (_BY_WIRE_FORM, _BY_NATIVE_NAME, _BY_SHORT_CODE)


def _validate_language(value: object) -> Language:
    if isinstance(value, Language):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            "language_type", "Language must be given as a string"
        )
    try:
        return Language.parse(value)
    except LangParseError:
        raise PydanticCustomError(
            "unknown_language", LangParseError.MESSAGE
        ) from None


def _serialize_language(value) -> str:
    return str(value)


# ═════════════════════════════════════════════════════════════════════════════
# Forward-compatible boundary
# ═════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class UnknownLanguage:
    """A language token this catalog does not know yet."""

    wire_form: str

    def __str__(self) -> str:
        return self.wire_form


def parse_lenient(text: str) -> Union[Language, UnknownLanguage]:
    """Parse ``text``, keeping unknown tokens instead of failing."""
    try:
        return Language.parse(text)
    except LangParseError:
        return UnknownLanguage(text)


def _validate_any_language(value: object) -> Union[Language, UnknownLanguage]:
    if isinstance(value, (Language, UnknownLanguage)):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            "language_type", "Language must be given as a string"
        )
    return parse_lenient(value)


AnyLanguage = Annotated[
    Union[Language, UnknownLanguage],
    PlainValidator(_validate_any_language),
    PlainSerializer(_serialize_language, return_type=str),
    WithJsonSchema({"type": "string"}),
]
"""Language field that tolerates languages added after this release."""
