"""Message lookup for assertion failures and console output."""

from __future__ import annotations

import logging

from testy.errors import MissingTranslationError, UnknownLanguageError
from testy.i18n.translations import DEFAULT_LANGUAGE, TRANSLATIONS

logger = logging.getLogger(__name__)


def available_languages() -> list[str]:
    return sorted(TRANSLATIONS)


class I18n:
    """Translates message keys into one of the bundled languages."""

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        if language not in TRANSLATIONS:
            raise UnknownLanguageError(language, available_languages())
        self.language = language

    @staticmethod
    def default_language() -> str:
        return DEFAULT_LANGUAGE

    def translate(self, key: str) -> str:
        """Return the message for ``key``, falling back to the default language."""
        messages = TRANSLATIONS[self.language]
        if key in messages:
            return messages[key]

        fallback = TRANSLATIONS[DEFAULT_LANGUAGE]
        if key in fallback:
            logger.warning(
                "Missing %r translation for %r, using %r", self.language, key, DEFAULT_LANGUAGE
            )
            return fallback[key]

        raise MissingTranslationError(key)


__all__ = ["DEFAULT_LANGUAGE", "I18n", "available_languages"]
