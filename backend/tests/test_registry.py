"""
Tests for the canonical book registry (studyguide/scripture/registry.py)

Run: pytest backend/tests/test_registry.py -v
"""

import pytest

from studyguide.scripture import books
from studyguide.scripture.registry import (
    Registry,
    RegistryConfigError,
    build_locale_tables,
    build_registry,
    book_key,
)

LOCALES = ["en-US", "hi-IN", "ml-IN"]


def _tables(locale="xx-XX", names=None, aliases=None, **kw):
    names = names if names is not None else [f"Book{i}" for i in range(66)]
    return build_locale_tables(locale, names, aliases or {}, books.LATIN_LETTERS, **kw)


# ═══════════════════════════════════════════════════════════════════════════
# Shipped tables
# ═══════════════════════════════════════════════════════════════════════════

class TestShippedTables:
    @pytest.mark.parametrize("locale", LOCALES)
    def test_sixty_six_unique_books(self, registry, locale):
        names = registry.lookup_canonical(locale)
        assert len(names) == 66
        assert len(set(names)) == 66

    @pytest.mark.parametrize("locale", LOCALES)
    def test_alias_targets_are_canonical(self, registry, locale):
        tables = registry.tables(locale)
        for alias, target in tables.aliases.items():
            assert target in tables.canonical
            assert alias != target

    def test_biblical_order(self, registry):
        names = registry.lookup_canonical("en-US")
        assert names[0] == "Genesis"
        assert names[38] == "Malachi"
        assert names[39] == "Matthew"
        assert names[-1] == "Revelation"

    @pytest.mark.parametrize("surface, expected", [
        ("1 John", None),
        ("1John", "1 John"),
        ("1st John", "1 John"),
        ("First John", "1 John"),
        ("2nd Timothy", "2 Timothy"),
        ("Second Peter", "2 Peter"),
        ("3rd John", "3 John"),
        ("Third John", "3 John"),
        ("1Chronicles", "1 Chronicles"),
    ])
    def test_numeral_styles(self, registry, surface, expected):
        assert registry.lookup_alias("en-US", surface) == expected

    @pytest.mark.parametrize("surface, expected", [
        ("1st Jn", "1 John"),
        ("First Jn", "1 John"),
        ("Second Co", "2 Corinthians"),
        ("2nd Tim", "2 Timothy"),
        ("Third Jo", "3 John"),
    ])
    def test_ordinals_on_numbered_aliases(self, registry, surface, expected):
        assert registry.lookup_alias("en-US", surface) == expected

    def test_numbered_alias_gets_glued_form(self):
        names = [f"Book{i}" for i in range(65)] + ["1 Thing"]
        tables = _tables(names=names, aliases={"1 Th": "1 Thing"}, ordinals={"1": ("First",)})
        assert tables.alias_for("1Th", fold_case=False) == "1 Thing"
        assert tables.alias_for("First Th", fold_case=False) == "1 Thing"

    @pytest.mark.parametrize("surface, expected", [
        ("Jn", "John"),
        ("Rom", "Romans"),
        ("Revelations", "Revelation"),
        ("The Gospel of John", "John"),
        ("Ps", "Psalms"),
    ])
    def test_declared_aliases(self, registry, surface, expected):
        assert registry.lookup_alias("en-US", surface) == expected

    def test_alias_keys_are_case_sensitive(self, registry):
        assert registry.lookup_alias("en-US", "jn") is None
        assert registry.tables("en-US").alias_for("jn", fold_case=True) == "John"

    def test_alias_trailing_period(self, registry):
        assert registry.lookup_alias("en-US", "Gen.") == "Genesis"

    def test_localized_aliases(self, registry):
        assert registry.lookup_alias("hi-IN", "भज") == "भजन संहिता"
        assert registry.lookup_alias("ml-IN", "യോഹന്നാൻ") == "യോഹ."

    def test_unknown_alias(self, registry):
        assert registry.lookup_alias("en-US", "Foobar") is None


# ═══════════════════════════════════════════════════════════════════════════
# Canonical matching
# ═══════════════════════════════════════════════════════════════════════════

class TestCanonicalMatching:
    def test_case_and_period_folded(self, registry):
        tables = registry.tables("en-US")
        assert tables.canonical_for("john") == "John"
        assert tables.canonical_for("JOHN.") == "John"
        assert tables.canonical_for("song  of solomon") == "Song of Solomon"

    def test_malayalam_period_optional(self, registry):
        tables = registry.tables("ml-IN")
        assert tables.canonical_for("യോഹ.") == "യോഹ."
        assert tables.canonical_for("യോഹ") == "യോഹ."

    def test_book_key(self):
        assert book_key("  1   Samuel. ") == "1 samuel"

    def test_position(self, registry):
        assert registry.tables("hi-IN").position("यूहन्ना") == 42
        assert registry.tables("en-US").position("Nope") is None


# ═══════════════════════════════════════════════════════════════════════════
# Locale resolution
# ═══════════════════════════════════════════════════════════════════════════

class TestLocaleResolution:
    def test_exact(self, registry):
        assert registry.resolve_locale("ml-IN") == "ml-IN"

    def test_primary_subtag(self, registry):
        assert registry.resolve_locale("hi") == "hi-IN"
        assert registry.resolve_locale("ml_in") == "ml-IN"

    def test_fallback_to_default(self, registry, caplog):
        with caplog.at_level("WARNING", logger="studyguide.scripture"):
            assert registry.resolve_locale("ko-KR") == "en-US"
        assert "unsupported locale" in caplog.text

    def test_empty_is_default(self, registry):
        assert registry.resolve_locale(None) == "en-US"
        assert registry.resolve_locale("") == "en-US"


# ═══════════════════════════════════════════════════════════════════════════
# Configuration errors
# ═══════════════════════════════════════════════════════════════════════════

class TestConfigErrors:
    def test_wrong_count(self):
        with pytest.raises(RegistryConfigError, match="expected 66"):
            _tables(names=["Genesis"] * 3)

    def test_duplicate_book(self):
        names = [f"Book{i}" for i in range(65)] + ["book0"]
        with pytest.raises(RegistryConfigError, match="duplicate"):
            _tables(names=names)

    def test_alias_target_not_canonical(self):
        with pytest.raises(RegistryConfigError, match="non-canonical"):
            _tables(aliases={"Bk": "Missing"})

    def test_alias_maps_to_itself(self):
        with pytest.raises(RegistryConfigError):
            _tables(aliases={"Book1": "Book1"})

    def test_alias_shadows_canonical(self):
        with pytest.raises(RegistryConfigError, match="shadows"):
            _tables(aliases={"BOOK1": "Book2"})

    def test_prose_word_must_be_alias(self):
        with pytest.raises(RegistryConfigError, match="prose"):
            _tables(prose_words={"So"})

    def test_error_kind_and_locale(self):
        with pytest.raises(RegistryConfigError) as info:
            _tables(locale="zz-ZZ", names=[])
        assert info.value.kind == "CONFIG_ERROR"
        assert info.value.locale == "zz-ZZ"

    def test_build_registry_rejects_bad_locale(self):
        canonical = dict(books.CANONICAL_BOOKS)
        canonical["xx-XX"] = canonical["en-US"][:-1]
        with pytest.raises(RegistryConfigError):
            build_registry(canonical)

    def test_missing_default_locale(self):
        with pytest.raises(RegistryConfigError, match="default locale"):
            Registry([_tables()], default_locale="en-US")

    def test_tables_are_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.tables("en-US").aliases["Xyz"] = "John"
