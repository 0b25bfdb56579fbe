"""Canonical book registry.

Builds immutable per-locale lookup tables from the static data in ``books.py``
and refuses to serve a locale whose tables break the registry invariants
(66 unique canonical names, every alias pointing at one of them).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ..env import ENV
from . import books

logger = logging.getLogger("studyguide.scripture")

BOOK_COUNT = 66

_NUMBERED_BOOK_RE = re.compile(r"^(?P<num>[1-3]) (?P<name>.+)$")
_WS_RE = re.compile(r"\s+")


class RegistryConfigError(ValueError):
    """A locale's tables violate the registry invariants."""

    kind = "CONFIG_ERROR"

    def __init__(self, locale: str, detail: str):
        self.locale = locale
        self.detail = detail
        super().__init__(f"[{locale}] {detail}")


def collapse_spaces(token: str) -> str:
    return _WS_RE.sub(" ", (token or "").strip())


def book_key(token: str) -> str:
    """Comparison key: single spaces, no trailing period, case-folded."""
    cleaned = collapse_spaces(token)
    if cleaned.endswith("."):
        cleaned = cleaned[:-1]
    return cleaned.casefold()


@dataclass(frozen=True)
class LocaleTables:
    locale: str
    canonical: tuple[str, ...]
    aliases: Mapping[str, str]
    letters: str
    prose_words: frozenset[str] = frozenset()
    max_prefix_words: int = 0
    _by_key: Mapping[str, str] = field(default_factory=dict, repr=False)
    _folded_aliases: Mapping[str, str] = field(default_factory=dict, repr=False)

    def canonical_for(self, token: str) -> Optional[str]:
        return self._by_key.get(book_key(token))

    def alias_for(self, token: str, *, fold_case: bool = False) -> Optional[str]:
        surface = collapse_spaces(token)
        forms = [surface]
        if surface.endswith("."):
            forms.append(surface[:-1])
        for form in forms:
            target = self.aliases.get(form)
            if target is not None:
                return target
            if fold_case:
                target = self._folded_aliases.get(form.casefold())
                if target is not None:
                    return target
        return None

    def is_prose_word(self, token: str) -> bool:
        return collapse_spaces(token).rstrip(".") in self.prose_words

    def position(self, book: str) -> Optional[int]:
        canonical = self.canonical_for(book)
        if canonical is None:
            return None
        return self.canonical.index(canonical)


def _numeral_aliases(
    canonical: Iterable[str], aliases: Mapping[str, str], ordinals: Mapping[str, tuple[str, ...]]
) -> dict[str, str]:
    """Glued ("1John") and ordinal ("1st John", "First John") spellings.

    Numbered aliases such as "1 Jn" get the same treatment and point at the
    alias target. Canonical names win when two sources produce one spelling.
    """
    generated: dict[str, str] = {}
    sources = [(name, name) for name in canonical] + list(aliases.items())
    for surface, target in sources:
        match = _NUMBERED_BOOK_RE.match(surface)
        if not match:
            continue
        num, rest = match.group("num"), match.group("name")
        generated.setdefault(f"{num}{rest}", target)
        for ordinal in ordinals.get(num, ()):
            generated.setdefault(f"{ordinal} {rest}", target)
    return generated


def build_locale_tables(
    locale: str,
    canonical: Iterable[str],
    aliases: Mapping[str, str],
    letters: str,
    *,
    ordinals: Optional[Mapping[str, tuple[str, ...]]] = None,
    prose_words: Iterable[str] = (),
) -> LocaleTables:
    names = tuple(canonical)
    if len(names) != BOOK_COUNT:
        raise RegistryConfigError(locale, f"expected {BOOK_COUNT} canonical books, found {len(names)}")

    by_key: dict[str, str] = {}
    for name in names:
        key = book_key(name)
        if not key:
            raise RegistryConfigError(locale, "empty canonical book name")
        if key in by_key:
            raise RegistryConfigError(locale, f"duplicate canonical book {name!r}")
        by_key[key] = name

    merged = dict(aliases)
    for alias, target in _numeral_aliases(names, aliases, ordinals or {}).items():
        existing = merged.setdefault(alias, target)
        if existing != target:
            raise RegistryConfigError(
                locale, f"alias {alias!r} declared as {existing!r} but generated as {target!r}"
            )

    folded: dict[str, str] = {}
    for alias, target in merged.items():
        if target not in names:
            raise RegistryConfigError(locale, f"alias {alias!r} points at non-canonical {target!r}")
        if alias == target:
            raise RegistryConfigError(locale, f"alias {alias!r} maps to itself")
        if book_key(alias) in by_key:
            raise RegistryConfigError(locale, f"alias {alias!r} shadows canonical {by_key[book_key(alias)]!r}")
        folded.setdefault(alias.casefold(), target)

    prose = frozenset(prose_words)
    stray = sorted(prose - set(merged))
    if stray:
        raise RegistryConfigError(locale, f"prose words are not aliases: {', '.join(stray)}")

    longest = max(len(collapse_spaces(term).split(" ")) for term in (*names, *merged))
    return LocaleTables(
        locale=locale,
        canonical=names,
        aliases=MappingProxyType(merged),
        letters=letters,
        prose_words=prose,
        max_prefix_words=longest - 1,
        _by_key=MappingProxyType(by_key),
        _folded_aliases=MappingProxyType(folded),
    )


def _primary_subtag(locale: str) -> str:
    return (locale or "").strip().lower().replace("_", "-").split("-")[0]


class Registry:
    """Read-only set of locale tables, shared freely across threads."""

    def __init__(self, tables: Iterable[LocaleTables], default_locale: str = "en-US"):
        self._tables: Mapping[str, LocaleTables] = MappingProxyType({t.locale: t for t in tables})
        if default_locale not in self._tables:
            raise RegistryConfigError(default_locale, "default locale has no tables")
        self.default_locale = default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def resolve_locale(self, locale: Optional[str]) -> str:
        """Exact code, then primary language subtag, then the default locale."""
        raw = (locale or "").strip()
        if raw in self._tables:
            return raw
        primary = _primary_subtag(raw)
        if primary:
            for code in self._tables:
                if _primary_subtag(code) == primary:
                    return code
        if raw:
            logger.warning("unsupported locale, using default", extra={"locale": raw, "default": self.default_locale})
        return self.default_locale

    def tables(self, locale: Optional[str]) -> LocaleTables:
        return self._tables[self.resolve_locale(locale)]

    def lookup_canonical(self, locale: Optional[str]) -> tuple[str, ...]:
        return self.tables(locale).canonical

    def lookup_alias(self, locale: Optional[str], surface_form: str) -> Optional[str]:
        return self.tables(locale).alias_for(surface_form)


def build_registry(
    canonical_books: Mapping[str, Iterable[str]] = books.CANONICAL_BOOKS,
    aliases: Mapping[str, Mapping[str, str]] = books.INCORRECT_TO_CORRECT,
    *,
    default_locale: str = "en-US",
) -> Registry:
    tables = []
    for locale, names in canonical_books.items():
        tables.append(
            build_locale_tables(
                locale,
                names,
                aliases.get(locale, {}),
                books.SCRIPT_LETTERS.get(locale, books.LATIN_LETTERS),
                ordinals=books.ORDINAL_WORDS.get(locale),
                prose_words=books.PROSE_WORDS.get(locale, ()),
            )
        )
    registry = Registry(tables, default_locale=default_locale)
    logger.info("scripture registry loaded", extra={"locales": list(registry.locales)})
    return registry


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    return build_registry(default_locale=ENV.SCRIPTURE_DEFAULT_LOCALE)
