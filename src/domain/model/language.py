"""Language Value Object.

Encapsulates the per-language dictionary metadata used across the domain:
which dictionary serves the language, its language code, and the
infinitive markers stripped before a retry lookup.
"""

from dataclasses import dataclass
from enum import Enum


class SourceLanguage(str, Enum):
    """Languages that have a dictionary parser behind them."""

    DANISH = "Danish"
    SPANISH = "Spanish"


@dataclass(frozen=True)
class Language:
    """Immutable value object representing a supported source language."""

    source: SourceLanguage
    code: str
    dictionary: str
    infinitive_markers: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.source.value

    def strip_infinitive_marker(self, word: str) -> str:
        """Strip a leading infinitive marker from a verb (e.g., "at kigge" → "kigge").

        Args:
            word: The search term.

        Returns:
            The term without the marker, or unchanged if it has none.
        """
        word_lower = word.lower()
        for marker in self.infinitive_markers:
            if word_lower.startswith(marker) and len(word) > len(marker):
                return word[len(marker):].lstrip()
        return word


# ── Language instances ────────────────────────────────────────

DANISH = Language(
    source=SourceLanguage.DANISH,
    code="da",
    dictionary="DDO",
    infinitive_markers=("at ",),
)

SPANISH = Language(
    source=SourceLanguage.SPANISH,
    code="es",
    dictionary="SpanishDict",
)


# ── Registry ──────────────────────────────────────────────────

LANGUAGES: dict[SourceLanguage, Language] = {
    lang.source: lang for lang in (DANISH, SPANISH)
}


def get_language(name: "str | SourceLanguage") -> Language | None:
    """Look up a Language by its name, case-insensitively (e.g., "danish").

    Returns None for unsupported or unknown language names.
    """
    if isinstance(name, SourceLanguage):
        return LANGUAGES[name]
    if not isinstance(name, str):
        return None
    for source, lang in LANGUAGES.items():
        if source.value.lower() == name.strip().lower():
            return lang
    return None


def other_languages(language: Language) -> list[Language]:
    """Supported languages other than ``language``, in registry order."""
    return [lang for lang in LANGUAGES.values() if lang.source != language.source]
