"""Language utilities for the skill.

This module centralizes the spoken languages supported by the skill. Keeping
it in the domain layer lets the orchestrator and the response builder share a
single source of truth without importing adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for spoken output."""

    GERMAN = "de"
    ENGLISH = "en"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language (the skill ships for de-DE)."""

        return cls.GERMAN

    @classmethod
    def from_locale(cls, locale: str | None, default: "Language | None" = None) -> "Language":
        """Derive a language from a platform locale such as ``de-DE``.

        Missing or unsupported locales resolve to ``default`` (or the skill
        default when none is given).
        """

        fallback = default or cls.default()
        if not locale:
            return fallback
        prefix = locale.split("-", 1)[0].strip().lower()
        for member in cls:
            if member.value == prefix:
                return member
        return fallback

    def label(self) -> str:
        """Human readable label for diagnostics."""

        return "German" if self is Language.GERMAN else "English"
