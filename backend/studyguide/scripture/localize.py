"""Localized display names and variant-to-English book resolution."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from . import books
from .registry import Registry, RegistryConfigError, book_key, collapse_spaces, default_registry

ENGLISH = "en-US"


def _build_english_index(registry: Registry) -> dict[str, str]:
    english = registry.lookup_canonical(ENGLISH)
    index: dict[str, str] = {}

    def add(name: str, target: str) -> None:
        index.setdefault(book_key(name), target)

    for name in english:
        add(name, name)
    for locale in registry.locales:
        tables = registry.tables(locale)
        for name in tables.canonical:
            add(name, english[tables.position(name)])
        for alias, target in tables.aliases.items():
            add(alias, english[tables.position(target)])

    for locale, names in books.DISPLAY_NAMES.items():
        for book, shown in names.items():
            if book not in english:
                raise RegistryConfigError(locale, f"display name keyed by non-canonical book {book!r}")
            add(shown, book)
    for variant, book in books.LOCALIZED_VARIANTS_TO_ENGLISH.items():
        if book not in english:
            raise RegistryConfigError(ENGLISH, f"variant {variant!r} points at non-canonical {book!r}")
        add(variant, book)
    return index


@lru_cache(maxsize=1)
def _english_index() -> dict[str, str]:
    return _build_english_index(default_registry())


def to_english(name: str) -> Optional[str]:
    """English canonical book for a name in any supported locale, or None."""
    return _english_index().get(book_key(name))


def display_name(book: str, locale: Optional[str]) -> str:
    """Full localized name for an English book; unknown books pass through."""
    resolved = default_registry().resolve_locale(locale)
    names = books.DISPLAY_NAMES.get(resolved)
    if not names:
        return book
    english = to_english(book)
    if english is None:
        return book
    return names.get(english, collapse_spaces(book))
