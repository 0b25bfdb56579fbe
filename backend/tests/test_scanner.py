"""
Tests for the reference scanner (studyguide/scripture/scanner.py)

Run: pytest backend/tests/test_scanner.py -v
"""

import pytest

from studyguide.scripture.scanner import ReferenceCandidate, scan


def _scan(text, locale="en-US"):
    return list(scan(text, locale))


class TestStructure:
    def test_book_chapter_verse(self):
        (c,) = _scan("See John 3:16 today.")
        assert c.book_token == "John"
        assert (c.chapter, c.start_verse, c.end_verse) == (3, 16, None)
        assert "See John 3:16 today."[c.span_start:c.span_end] == "John 3:16"
        assert c.book_end == c.span_start + len("John")

    def test_verse_range(self):
        (c,) = _scan("Romans 8:28-30")
        assert (c.chapter, c.start_verse, c.end_verse) == (8, 28, 30)

    def test_en_dash_range(self):
        (c,) = _scan("Romans 8:28–30")
        assert c.end_verse == 30

    def test_chapter_only(self):
        (c,) = _scan("Psalm 23 is a comfort")
        assert c.book_token == "Psalm"
        assert c.chapter == 23
        assert c.start_verse is None

    def test_leading_numeral(self):
        tokens = [c.book_token for c in _scan("1 John 4:8, 2Tim 3:16 and 1st Corinthians 13:4")]
        assert tokens == ["1 John", "2Tim", "1st Corinthians"]

    def test_numbered_book_after_word(self):
        (c,) = _scan("Read 1 Corinthians 13:4")
        assert c.book_token == "1 Corinthians"
        assert (c.chapter, c.start_verse) == (13, 4)

    def test_numbered_books_after_words(self):
        tokens = [c.book_token for c in _scan("Study 2 Tim 3:16 and 1 Cor 13:4.")]
        assert tokens == ["2 Tim", "1 Cor"]

    def test_word_before_plain_number_keeps_chapter(self):
        (c,) = _scan("Psalm 1 is short")
        assert (c.book_token, c.chapter) == ("Psalm", 1)

    def test_trailing_period_kept_in_token(self):
        (c,) = _scan("Gen. 1:1")
        assert c.book_token == "Gen."

    def test_left_to_right_order(self):
        tokens = [c.book_token for c in _scan("Gen 1:1, Ex 20:1-17, Ps 23, and Rev 22:21")]
        assert tokens == ["Gen", "Ex", "Ps", "Rev"]

    def test_lead_words_recorded(self):
        text = "I love Song of Solomon 2:4"
        (c,) = _scan(text)
        assert c.book_token == "Solomon"
        widest = next(c.widenings())
        assert widest.book_token == "love Song of Solomon"
        tokens = [w.book_token for w in c.widenings()]
        assert "Song of Solomon" in tokens
        assert tokens[-1] == "Solomon"

    def test_widened_span_starts_at_lead_word(self):
        text = "Read Song of Solomon 2:4"
        (c,) = _scan(text)
        song = [w for w in c.widenings() if w.book_token == "Song of Solomon"][0]
        assert text[song.span_start:song.book_end] == "Song of Solomon"


class TestUnicode:
    def test_devanagari_word(self):
        (c,) = _scan("देखें यूहन्ना 3:16", "hi-IN")
        assert c.book_token == "यूहन्ना"

    def test_malayalam_with_period(self):
        (c,) = _scan("യോഹ. 3:16 വായിക്കുക", "ml-IN")
        assert c.book_token == "യോഹ."

    def test_malayalam_chillu(self):
        (c,) = _scan("യോഹന്നാൻ 3:16", "ml-IN")
        assert c.book_token == "യോഹന്നാൻ"

    def test_hindi_numbered_book_after_word(self):
        (c,) = _scan("और 1 राजा 3:1", "hi-IN")
        assert c.book_token == "1 राजा"
        assert (c.chapter, c.start_verse) == (3, 1)

    def test_latin_inside_hindi_text(self):
        (c,) = _scan("पढ़ें John 3:16", "hi-IN")
        assert c.book_token == "John"


class TestRejections:
    @pytest.mark.parametrize("text", [
        "",
        "No references here at all.",
        "Call 555 1234 now",
        "Page 200 of the report",
        "John 151:1",
        "John 3:177",
        "John 3:0",
        "Chapter 0 is missing",
        "John3:16",
        "a 3:16",
    ])
    def test_no_candidates(self, text):
        assert _scan(text) == []

    def test_verse_range_end_out_of_bounds_dropped(self):
        assert _scan("Romans 8:28-200") == []

    def test_scan_is_lazy_and_restartable(self):
        gen = scan("Jn 3:16 and Jn 3:17", "en-US")
        first = next(gen)
        assert first.start_verse == 16
        assert len(list(scan("Jn 3:16 and Jn 3:17", "en-US"))) == 2

    def test_reference_rendering(self):
        c = ReferenceCandidate("Jn", 3, 16, 18, 0, 10, 2)
        assert c.reference() == "Jn 3:16-18"
        assert c.reference("John") == "John 3:16-18"
