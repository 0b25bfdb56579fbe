from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .registry import Registry, collapse_spaces, default_registry
from .scanner import MAX_CHAPTER, MAX_VERSE, ReferenceCandidate, scan


class ReasonCode(str, Enum):
    CANONICAL = "CANONICAL"
    CORRECTED = "CORRECTED"
    UNKNOWN_BOOK = "UNKNOWN_BOOK"
    CHAPTER_OUT_OF_RANGE = "CHAPTER_OUT_OF_RANGE"
    VERSE_OUT_OF_RANGE = "VERSE_OUT_OF_RANGE"
    VERSE_ORDER_INVALID = "VERSE_ORDER_INVALID"


RANGE_CODES = frozenset(
    {ReasonCode.CHAPTER_OUT_OF_RANGE, ReasonCode.VERSE_OUT_OF_RANGE, ReasonCode.VERSE_ORDER_INVALID}
)


@dataclass(frozen=True)
class ValidationPolicy:
    """Per-consumer switches.

    ``accept_unlisted_scripts`` lets a non-ASCII book name through unchecked;
    only the input-safety path turns it on. ``fold_alias_case`` matches
    aliases case-insensitively, for user-typed input.
    """

    accept_unlisted_scripts: bool = False
    fold_alias_case: bool = False


OUTPUT_POLICY = ValidationPolicy()
INPUT_POLICY = ValidationPolicy(accept_unlisted_scripts=True, fold_alias_case=True)


@dataclass(frozen=True)
class ValidationVerdict:
    is_valid: bool
    book: str
    reason_code: ReasonCode
    message: str
    corrected_to: Optional[str] = None
    # The candidate as resolved, widened over leading words when the book
    # name spans several words.
    candidate: Optional[ReferenceCandidate] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class BookCorrection:
    original: str
    corrected: str


@dataclass
class ValidationReport:
    is_valid: bool = True
    invalid_books: list[str] = field(default_factory=list)
    corrected_books: list[BookCorrection] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "invalid_books": list(self.invalid_books),
            "corrected_books": [{"original": c.original, "corrected": c.corrected} for c in self.corrected_books],
            "warnings": list(self.warnings),
        }


def _range_problem(candidate: ReferenceCandidate) -> Optional[tuple[ReasonCode, str]]:
    ref = candidate.reference()
    if not 1 <= candidate.chapter <= MAX_CHAPTER:
        return (
            ReasonCode.CHAPTER_OUT_OF_RANGE,
            f'Chapter {candidate.chapter} is outside 1-{MAX_CHAPTER} in "{ref}"',
        )
    for verse in (candidate.start_verse, candidate.end_verse):
        if verse is not None and not 1 <= verse <= MAX_VERSE:
            return ReasonCode.VERSE_OUT_OF_RANGE, f'Verse {verse} is outside 1-{MAX_VERSE} in "{ref}"'
    start, end = candidate.start_verse, candidate.end_verse
    if start is not None and end is not None and end <= start:
        return (
            ReasonCode.VERSE_ORDER_INVALID,
            f'End verse {end} must be greater than start verse {start} in "{ref}"',
        )
    return None


class Validator:
    """Classifies reference candidates for one locale against an immutable registry."""

    def __init__(self, registry: Optional[Registry] = None, locale: Optional[str] = None,
                 policy: ValidationPolicy = OUTPUT_POLICY):
        self.registry = registry or default_registry()
        self.locale = self.registry.resolve_locale(locale)
        self.tables = self.registry.tables(self.locale)
        self.policy = policy

    def candidates(self, text: str) -> Iterator[ReferenceCandidate]:
        return scan(text, self.locale, self.registry)

    def _judge_book(self, candidate: ReferenceCandidate) -> ValidationVerdict:
        for option in candidate.widenings():
            canonical = self.tables.canonical_for(option.book_token)
            if canonical is not None:
                return ValidationVerdict(
                    True, canonical, ReasonCode.CANONICAL, f'"{canonical}" is canonical', candidate=option
                )
            target = self.tables.alias_for(option.book_token, fold_case=self.policy.fold_alias_case)
            if target is not None:
                original = collapse_spaces(option.book_token)
                return ValidationVerdict(
                    True, original, ReasonCode.CORRECTED, f'"{original}" should be "{target}"',
                    corrected_to=target, candidate=option,
                )

        token = collapse_spaces(candidate.book_token)
        if self.policy.accept_unlisted_scripts and not token.isascii():
            return ValidationVerdict(
                True, token, ReasonCode.CANONICAL,
                f'"{token}" accepted without registry check (non-Latin script)', candidate=candidate,
            )
        return ValidationVerdict(
            False, token, ReasonCode.UNKNOWN_BOOK, f'Unknown Bible book "{token}"', candidate=candidate
        )

    def validate(self, candidate: ReferenceCandidate) -> ValidationVerdict:
        verdict = self._judge_book(candidate)
        problem = _range_problem(candidate)
        if problem is None:
            return verdict
        code, message = problem
        return ValidationVerdict(False, verdict.book, code, message, candidate=verdict.candidate)

    def looks_like_prose(self, verdict: ValidationVerdict) -> bool:
        """True for matches that are ordinary words followed by a number.

        Chapter-only matches on an unknown word or on an alias that doubles
        as an everyday word ("So 5 of them"), and unknown lower-case words
        before a time ("at 3:30"), are not treated as references.
        """
        candidate = verdict.candidate
        if candidate is None:
            return False
        if verdict.reason_code is ReasonCode.UNKNOWN_BOOK:
            return not candidate.has_verse or verdict.book[:1].islower()
        if verdict.reason_code is ReasonCode.CORRECTED and not candidate.has_verse:
            return self.tables.is_prose_word(candidate.book_token)
        return False

    def verdicts(self, text: str) -> Iterator[ValidationVerdict]:
        """Verdicts for every reference-like candidate in ``text``."""
        for candidate in self.candidates(text):
            verdict = self.validate(candidate)
            if not self.looks_like_prose(verdict):
                yield verdict

    def validate_text(self, text: str) -> ValidationReport:
        report = ValidationReport()
        for verdict in self.verdicts(text):
            code = verdict.reason_code
            if code is ReasonCode.CANONICAL:
                continue
            elif code is ReasonCode.CORRECTED:
                report.corrected_books.append(BookCorrection(verdict.book, verdict.corrected_to))
                report.warnings.append(verdict.message)
            elif code is ReasonCode.UNKNOWN_BOOK:
                report.is_valid = False
                if verdict.book not in report.invalid_books:
                    report.invalid_books.append(verdict.book)
                    report.warnings.append(verdict.message)
            elif code in RANGE_CODES:
                report.is_valid = False
                report.warnings.append(verdict.message)
            else:
                raise ValueError(f"Unhandled reason code: {code!r}")
        return report


def validate(candidate: ReferenceCandidate, locale: Optional[str] = None,
             registry: Optional[Registry] = None) -> ValidationVerdict:
    return Validator(registry, locale).validate(candidate)


def validate_text(text: str, locale: Optional[str] = None, registry: Optional[Registry] = None) -> ValidationReport:
    return Validator(registry, locale).validate_text(text)
