"""
Turns free text (a title, a path typed by an editor) into a url path.

Replacers run first (``&`` becomes a word in the locale's language, German
umlauts become two letters), then dashes and slashes are normalized and
every path segment is transliterated (`Unidecode`, emoji names via
`emoji`) and slugified to lowercase ASCII.

Examples:
    >>> PathCleanup().cleanup("Hallo & Welt", "de")
    'hallo-und-welt'
    >>> PathCleanup().cleanup("/News / Hello World", "en")
    '/news/hello-world'

Tags:
    routing, slug, transliteration, dimcontent
"""

from __future__ import annotations

import re
from collections.abc import Mapping

import emoji
from unidecode import unidecode

DEFAULT_REPLACERS: dict[str, str] = {
    "Ä": "AE",
    "ä": "ae",
    "Ö": "OE",
    "ö": "oe",
    "Ü": "UE",
    "ü": "ue",
}

LOCALE_REPLACERS: dict[str, dict[str, str]] = {
    "de": {"&": "und"},
    "en": {"&": "and"},
    "fr": {"&": "et"},
    "it": {"&": "e"},
    "nl": {"&": "en"},
    "es": {"&": "y"},
    "bg": {"&": "и"},
}

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")


def _transliterate(text: str) -> str:
    # Emoji become their CLDR short names, e.g. "pizza"
    text = emoji.demojize(text, delimiters=(" ", " "))
    return unidecode(text)


def slugify(text: str, separator: str = "-") -> str:
    """Lowercase ASCII slug of a single path segment."""
    ascii_text = _transliterate(text)
    return _NON_ALPHANUMERIC.sub(separator, ascii_text).strip(separator).lower()


class PathCleanup:
    """Cleans up url paths with default and per-locale replacers."""

    def __init__(self, replacers: Mapping[str, Mapping[str, str]] | None = None) -> None:
        if replacers is None:
            replacers = {"default": DEFAULT_REPLACERS, **LOCALE_REPLACERS}
        self._replacers = {key: dict(value) for key, value in replacers.items()}

    def cleanup(self, path: str, locale: str) -> str:
        replacers = {
            **self._replacers.get("default", {}),
            **self._replacers.get(locale, {}),
        }
        for search, replace in replacers.items():
            path = path.replace(search, replace)

        path = re.sub(r"-+", "-", path)
        path = re.sub(r"-+/", "/", path)
        path = re.sub(r"/-+", "/", path)
        path = re.sub(r"^-", "", path)
        path = re.sub(r"-$", "", path)
        path = re.sub(r"/+", "/", path)

        parts = path.split("/")
        last = len(parts) - 1
        new_parts = []
        for index, part in enumerate(parts):
            slug = slugify(part)
            # Leading and trailing empty segments keep the surrounding slashes
            if index == 0 or index == last or slug:
                new_parts.append(slug)

        return "/".join(new_parts)


__all__ = ["DEFAULT_REPLACERS", "LOCALE_REPLACERS", "PathCleanup", "slugify"]
