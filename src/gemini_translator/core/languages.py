"""Language catalog - the fixed set of languages offered for translation."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Language:
    """A supported language: short code plus display name."""

    code: str
    name: str


class UnknownLanguageError(KeyError):
    """Raised when a language code is not part of the catalog."""


LANGUAGES: tuple[Language, ...] = (
    Language("en", "English"),
    Language("ja", "Japanese"),
    Language("ko", "Korean"),
    Language("ar", "Arabic"),
    Language("id", "Bahasa Indonesia"),
    Language("bn", "Bengali"),
    Language("bg", "Bulgarian"),
    Language("zh", "Chinese (Simplified)"),
    Language("zh-TW", "Chinese (Traditional)"),
    Language("hr", "Croatian"),
    Language("cs", "Czech"),
    Language("da", "Danish"),
    Language("nl", "Dutch"),
    Language("et", "Estonian"),
    Language("fa", "Farsi"),
    Language("fi", "Finnish"),
    Language("fr", "French"),
    Language("de", "German"),
    Language("gu", "Gujarati"),
    Language("el", "Greek"),
    Language("he", "Hebrew"),
    Language("hi", "Hindi"),
    Language("hu", "Hungarian"),
    Language("it", "Italian"),
    Language("kn", "Kannada"),
    Language("lv", "Latvian"),
    Language("lt", "Lithuanian"),
    Language("ml", "Malayalam"),
    Language("mr", "Marathi"),
    Language("no", "Norwegian"),
    Language("pl", "Polish"),
    Language("pt", "Portuguese"),
    Language("ro", "Romanian"),
    Language("ru", "Russian"),
    Language("sr", "Serbian"),
    Language("sk", "Slovak"),
    Language("sl", "Slovenian"),
    Language("es", "Spanish"),
    Language("sw", "Swahili"),
    Language("sv", "Swedish"),
    Language("ta", "Tamil"),
    Language("te", "Telugu"),
    Language("th", "Thai"),
    Language("tr", "Turkish"),
    Language("uk", "Ukrainian"),
    Language("ur", "Urdu"),
    Language("vi", "Vietnamese"),
)

LANGUAGES_BY_CODE = MappingProxyType({lang.code: lang for lang in LANGUAGES})


def get_language(code: str) -> Language:
    """
    Look up a catalog entry by code.

    Raises:
        UnknownLanguageError: If the code is not in the catalog.
    """
    try:
        return LANGUAGES_BY_CODE[code]
    except KeyError:
        raise UnknownLanguageError(code) from None


def language_name(code: str) -> str:
    """Display name for a language code."""
    return get_language(code).name
