"""Pre-request checks for user-supplied text (length, injection, scripture format)."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Optional

from studyguide.env import ENV
from studyguide.scripture import books
from studyguide.scripture.registry import Registry, default_registry
from studyguide.scripture.scanner import MAX_CHAPTER, ReferenceCandidate
from studyguide.scripture.validator import INPUT_POLICY, ReasonCode, Validator

logger = logging.getLogger("studyguide.security")

EXPECTED_FORMAT = 'Book Chapter[:Verse][-Verse] (e.g., "John 3:16", "Romans 8:28-30", "Ps 23")'
BOOK_SUGGESTION = 'Use standard Bible book names or abbreviations (e.g., "John", "1 Cor", "Ps")'
HIGH_RISK_THRESHOLD = 0.8

SUSPICIOUS_PATTERNS = [
    # prompt injection
    re.compile(r"ignore\s+(previous|above|all)\s+(instructions?|prompts?)", re.I),
    re.compile(r"forget\s+(everything|all|previous)", re.I),
    re.compile(r"new\s+(instructions?|prompts?|rules?)", re.I),
    re.compile(r"system\s*:", re.I),
    re.compile(r"assistant\s*:", re.I),
    re.compile(r"\[INST\]", re.I),
    re.compile(r"\[/INST\]", re.I),
    re.compile(r"<\|im_start\|>", re.I),
    re.compile(r"<\|im_end\|>", re.I),
    # code
    re.compile(r"<script>", re.I),
    re.compile(r"javascript:", re.I),
    re.compile(r"eval\s*\(", re.I),
    re.compile(r"function\s*\(", re.I),
    # sql
    re.compile(r"union\s+select", re.I),
    re.compile(r"drop\s+table", re.I),
    re.compile(r"delete\s+from", re.I),
    # xss
    re.compile(r"<[^>]*on\w+\s*=", re.I),
    re.compile(r"<iframe", re.I),
    re.compile(r"<object", re.I),
    re.compile(r"<embed", re.I),
]

_ALL_LETTERS = books.LATIN_LETTERS + books.DEVANAGARI_LETTERS + books.MALAYALAM_LETTERS + books.JOINERS
_WORD = rf"[{_ALL_LETTERS}]{{1,40}}\.?"
# Whole-string reference: "<book> <chapter>[:<verse>][-<verse>]", book up to four words.
_REFERENCE_RE = re.compile(
    rf"^(?P<book>(?:[1-3][ \t]?)?{_WORD}(?:[ \t]{_WORD}){{0,3}})"
    r"[ \t]+(?P<chapter>[0-9]{1,3})(?::(?P<start>[0-9]{1,3}))?(?:-(?P<end>[0-9]{1,3}))?$"
)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_TAG_RE = re.compile(r"<[^>]*>")
_DANGEROUS_RE = re.compile(r"[<>&\"']")
_SPECIAL_RE = re.compile(r"[^a-zA-Z0-9\s]")
_UPPER_RE = re.compile(r"[A-Z]")
_REPEATED_RE = re.compile(r"(.{3,})\1{2,}")


class InvalidScriptureFormat(ValueError):
    """A user-supplied scripture reference was rejected."""

    kind = "INVALID_SCRIPTURE_FORMAT"

    def __init__(self, message: str, *, input: str, expected_format: str = EXPECTED_FORMAT,
                 details: Optional[dict[str, Any]] = None):
        self.message = message
        self.input = input
        self.expected_format = expected_format
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.kind,
            "message": self.message,
            "expected_format": self.expected_format,
            "input": self.input,
            "details": dict(self.details),
        }


@dataclass
class SecurityValidationResult:
    is_valid: bool = True
    event_type: str = "INPUT_VALIDATION"
    risk_score: float = 0.0
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)


def parse_scripture_reference(value: str) -> Optional[ReferenceCandidate]:
    """Parse a whole string as one reference; None when it is not shaped like one."""
    match = _REFERENCE_RE.match(value)
    if not match:
        return None
    chapter = int(match.group("chapter"))
    start = int(match.group("start")) if match.group("start") else None
    end = int(match.group("end")) if match.group("end") else None
    if not 1 <= chapter <= MAX_CHAPTER:
        return None
    if (start is not None and start < 1) or (end is not None and end < 1):
        return None
    book = match.group("book").strip()
    return ReferenceCandidate(
        book_token=book,
        chapter=chapter,
        start_verse=start,
        end_verse=end,
        span_start=0,
        span_end=len(value),
        book_end=match.end("book"),
    )


class SecurityValidator:
    def __init__(self, registry: Optional[Registry] = None, locale: str = "en-US",
                 max_input_length: Optional[int] = None):
        self.validator = Validator(registry or default_registry(), locale, INPUT_POLICY)
        self.max_input_length = max_input_length or ENV.SCRIPTURE_MAX_INPUT_LENGTH

    def check_scripture_reference(self, value: str) -> tuple[bool, str, dict[str, Any]]:
        """Returns (is_valid, message, details) for a single reference string."""
        candidate = parse_scripture_reference(value)
        if candidate is None:
            return False, "Invalid scripture reference format", {
                "expected_format": EXPECTED_FORMAT,
                "input": value,
            }

        verdict = self.validator.validate(candidate)
        code = verdict.reason_code
        if code is ReasonCode.UNKNOWN_BOOK:
            return False, f'Unknown Bible book: "{verdict.book}"', {
                "book": verdict.book,
                "suggestion": BOOK_SUGGESTION,
            }
        if code in (ReasonCode.CHAPTER_OUT_OF_RANGE, ReasonCode.VERSE_OUT_OF_RANGE, ReasonCode.VERSE_ORDER_INVALID):
            return False, verdict.message, {
                "reason_code": code.value,
                "chapter": candidate.chapter,
                "start_verse": candidate.start_verse,
                "end_verse": candidate.end_verse,
            }
        if code not in (ReasonCode.CANONICAL, ReasonCode.CORRECTED):
            raise ValueError(f"Unhandled reason code: {code!r}")

        details: dict[str, Any] = {
            "book": verdict.corrected_to or verdict.book,
            "chapter": candidate.chapter,
            "start_verse": candidate.start_verse,
            "end_verse": candidate.end_verse,
        }
        if not candidate.book_token.isascii() and self.validator.tables.canonical_for(candidate.book_token) is None:
            details["is_non_english"] = True
        return True, "Valid scripture reference", details

    def require_scripture_reference(self, value: str) -> dict[str, Any]:
        """Like ``check_scripture_reference`` but raises on rejection."""
        text = (value or "").strip()
        ok, message, details = self.check_scripture_reference(text)
        if not ok:
            raise InvalidScriptureFormat(message, input=text, details=details)
        return details

    def validate_input(self, value: str, input_type: str) -> SecurityValidationResult:
        result = SecurityValidationResult()
        value = value or ""

        if len(value) > self.max_input_length:
            result.is_valid = False
            result.event_type = "INPUT_TOO_LONG"
            result.risk_score = 0.8
            result.message = f"Input exceeds maximum length of {self.max_input_length} characters"
            result.details = {"input_length": len(value), "max_length": self.max_input_length}
            return result

        if not value.strip():
            result.is_valid = False
            result.event_type = "EMPTY_INPUT"
            result.risk_score = 0.3
            result.message = "Input cannot be empty"
            return result

        for pattern in SUSPICIOUS_PATTERNS:
            match = pattern.search(value)
            if match:
                logger.warning("suspicious input rejected", extra={"pattern": pattern.pattern, "input_type": input_type})
                result.is_valid = False
                result.event_type = "PROMPT_INJECTION_DETECTED"
                result.risk_score = 0.9
                result.message = "Suspicious pattern detected in input"
                result.details = {"pattern": pattern.pattern, "matched_text": match.group(0)}
                return result

        if input_type == "scripture":
            ok, message, details = self.check_scripture_reference(value.strip())
            if not ok:
                result.is_valid = False
                result.event_type = InvalidScriptureFormat.kind
                result.risk_score = 0.5
                result.message = message
                result.details = details
                return result
            result.details = details

        risk = 0.0
        if len(_SPECIAL_RE.findall(value)) > len(value) * 0.6:
            risk += 0.2
        if len(_UPPER_RE.findall(value)) > len(value) * 0.8:
            risk += 0.1
        if _REPEATED_RE.search(value):
            risk += 0.4
        result.risk_score = round(min(risk, 1.0), 2)

        if result.risk_score > HIGH_RISK_THRESHOLD:
            result.is_valid = False
            result.event_type = "HIGH_RISK_INPUT"
            result.message = "Input flagged as high risk"
            result.details = {"risk_score": result.risk_score}
        return result

    def sanitize_input(self, value: str) -> str:
        cleaned = _CONTROL_RE.sub("", value or "")
        cleaned = unicodedata.normalize("NFKC", cleaned)
        cleaned = _TAG_RE.sub("", cleaned)
        cleaned = _DANGEROUS_RE.sub("", cleaned)
        return cleaned.strip()[: self.max_input_length]


security_validator = SecurityValidator()
