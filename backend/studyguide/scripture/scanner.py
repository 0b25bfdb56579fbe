from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, Optional

from .registry import Registry, default_registry

MAX_CHAPTER = 150
MAX_VERSE = 176

# Longest run of letters accepted as one book word.
_MAX_WORD = 40
_LEAD_WINDOW = _MAX_WORD + 8


@dataclass(frozen=True)
class ReferenceCandidate:
    """A "<book> <chapter>[:<verse>[-<verse>]]" match found in free text.

    ``span_start``/``book_end`` bracket the book token; ``span_end`` closes the
    whole reference. ``lead_starts`` holds the offsets of up to N words
    immediately before the book token, so a multi-word book ("Song of
    Solomon") can be recognised from its last word.
    """

    book_token: str
    chapter: int
    start_verse: Optional[int]
    end_verse: Optional[int]
    span_start: int
    span_end: int
    book_end: int
    lead_text: str = ""
    lead_starts: tuple[int, ...] = ()

    @property
    def has_verse(self) -> bool:
        return self.start_verse is not None

    def reference(self, book: Optional[str] = None) -> str:
        out = f"{book or self.book_token} {self.chapter}"
        if self.start_verse is not None:
            out += f":{self.start_verse}"
            if self.end_verse is not None:
                out += f"-{self.end_verse}"
        elif self.end_verse is not None:
            out += f"-{self.end_verse}"
        return out

    def widenings(self) -> Iterator["ReferenceCandidate"]:
        """Yield this candidate with leading words folded in, widest first."""
        if self.lead_starts:
            base = self.lead_starts[0]
            for idx, start in enumerate(self.lead_starts):
                yield ReferenceCandidate(
                    book_token=self.lead_text[start - base:] + self.book_token,
                    chapter=self.chapter,
                    start_verse=self.start_verse,
                    end_verse=self.end_verse,
                    span_start=start,
                    span_end=self.span_end,
                    book_end=self.book_end,
                    lead_text=self.lead_text[: start - base],
                    lead_starts=self.lead_starts[:idx],
                )
        yield self


@lru_cache(maxsize=16)
def _patterns(letters: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    reference = re.compile(
        rf"(?<![0-9_{letters}])"
        rf"(?P<book>(?P<num>[1-3](?:st|nd|rd)?[ \t]?(?=[{letters}]))?[{letters}]{{1,{_MAX_WORD}}}\.?)"
        r"[ \t\u00a0]{1,3}"
        r"(?P<chapter>[0-9]{1,3})"
        r"(?:[ \t]{0,2}:[ \t]{0,2}(?P<start>[0-9]{1,3})"
        r"(?:[ \t]{0,2}[-\u2013][ \t]{0,2}(?P<end>[0-9]{1,3}))?)?"
        rf"(?![0-9{letters}]|:[0-9])"
    )
    lead_word = re.compile(rf"(?<![0-9_.{letters}])[{letters}]{{1,{_MAX_WORD}}}[ \t]$")
    return reference, lead_word


def _lead_words(text: str, pos: int, pattern: re.Pattern[str], limit: int) -> tuple[int, ...]:
    starts: list[int] = []
    while len(starts) < limit:
        match = pattern.search(text, max(0, pos - _LEAD_WINDOW), pos)
        if not match:
            break
        starts.append(match.start())
        pos = match.start()
    return tuple(reversed(starts))


def _in_range(value: Optional[int], upper: int) -> bool:
    return value is None or 1 <= value <= upper


def scan(text: str, locale: Optional[str] = None, registry: Optional[Registry] = None) -> Iterator[ReferenceCandidate]:
    """Lazily yield reference candidates in left-to-right order.

    Matches whose chapter or verse numbers fall outside the plausible bounds
    are dropped here; nothing in them can be a reference.
    """
    if not text:
        return
    tables = (registry or default_registry()).tables(locale)
    reference_re, lead_re = _patterns(tables.letters)

    pos = 0
    while True:
        match = reference_re.search(text, pos)
        if not match:
            return
        pos = match.end()

        # "Read 1 Corinthians 13:4": the digit belongs to the numbered book
        # that follows, not to "Read" as a chapter.
        if match.group("start") is None:
            numbered = reference_re.match(text, match.start("chapter"))
            if numbered and numbered.group("num"):
                pos = match.start("chapter")
                continue

        book = match.group("book")
        letters_only = book[len(match.group("num") or ""):].rstrip(".")
        if not match.group("num") and len(letters_only) < 2:
            continue

        chapter = int(match.group("chapter"))
        start = int(match.group("start")) if match.group("start") else None
        end = int(match.group("end")) if match.group("end") else None
        if not (1 <= chapter <= MAX_CHAPTER and _in_range(start, MAX_VERSE) and _in_range(end, MAX_VERSE)):
            continue

        span_start = match.start("book")
        lead_starts = _lead_words(text, span_start, lead_re, tables.max_prefix_words)
        yield ReferenceCandidate(
            book_token=book,
            chapter=chapter,
            start_verse=start,
            end_verse=end,
            span_start=span_start,
            span_end=match.end(),
            book_end=match.end("book"),
            lead_text=text[lead_starts[0]:span_start] if lead_starts else "",
            lead_starts=lead_starts,
        )

