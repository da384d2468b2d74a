"""Map UI locale codes to the language names the inference service expects."""

from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "English"

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "te": "Telugu",
}


def resolve_language(locale: str | None) -> str:
    """Return the service language name for *locale*, ``English`` if unknown."""
    if not locale:
        return DEFAULT_LANGUAGE
    return LANGUAGE_NAMES.get(locale, DEFAULT_LANGUAGE)


def locale_index(locale: str | None) -> int:
    """Position of *locale* among ``LANGUAGE_NAMES``; ``0`` (English) if unknown."""
    codes = list(LANGUAGE_NAMES)
    return codes.index(locale) if locale in codes else 0
