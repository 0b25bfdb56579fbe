from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from ..env import ENV
from .registry import Registry, default_registry
from .validator import OUTPUT_POLICY, ReasonCode, ValidationReport, Validator

logger = logging.getLogger("studyguide.scripture.normalizer")


class Normalizer:
    """Rewrites non-canonical book names in generated text for one locale.

    Only alias hits are rewritten. Unknown books, canonical names and every
    other character of the input are left exactly as they were.
    """

    def __init__(self, registry: Optional[Registry] = None, locale: Optional[str] = None,
                 *, max_passes: Optional[int] = None):
        self.validator = Validator(registry, locale, OUTPUT_POLICY)
        self.locale = self.validator.locale
        self.max_passes = max_passes or ENV.SCRIPTURE_NORMALIZE_MAX_PASSES

    def _rewrite_once(self, text: str) -> str:
        edits: list[tuple[int, int, str]] = []
        for verdict in self.validator.verdicts(text):
            if verdict.reason_code is not ReasonCode.CORRECTED:
                continue
            resolved = verdict.candidate
            edits.append((resolved.span_start, resolved.book_end, verdict.corrected_to))
            if ENV.SCRIPTURE_DEBUG:
                logger.debug(
                    "book corrected",
                    extra={"locale": self.locale, "original": verdict.book, "corrected": verdict.corrected_to},
                )

        out = text
        for start, end, replacement in sorted(edits, reverse=True):
            out = out[:start] + replacement + out[end:]
        return out

    def normalize(self, text: str) -> str:
        if not text:
            return text or ""
        current = text
        for _ in range(self.max_passes):
            rewritten = self._rewrite_once(current)
            if rewritten == current:
                return current
            current = rewritten
        logger.warning(
            "normalization still changing after max passes",
            extra={"locale": self.locale, "max_passes": self.max_passes},
        )
        return current

    def validate(self, text: str) -> ValidationReport:
        return self.validator.validate_text(text)

    def extract_references(self, text: str) -> list[str]:
        """Valid references in ``text`` with canonical book names, first occurrence order."""
        refs: list[str] = []
        for verdict in self.validator.verdicts(text):
            if not verdict.is_valid:
                continue
            book = verdict.corrected_to or verdict.book
            ref = verdict.candidate.reference(book)
            if ref not in refs:
                refs.append(ref)
        return refs

    def log_validation_warnings(self, report: ValidationReport, conversation_id: str) -> None:
        if report.is_valid and not report.warnings:
            return
        logger.warning(
            "scripture references need attention",
            extra={
                "conversation_id": conversation_id,
                "locale": self.locale,
                "invalid_books": list(report.invalid_books),
                "corrections": [f"{c.original} -> {c.corrected}" for c in report.corrected_books],
                "warnings": list(report.warnings),
            },
        )


def normalize(text: str, locale: Optional[str] = None, registry: Optional[Registry] = None) -> str:
    return Normalizer(registry, locale).normalize(text)


@lru_cache(maxsize=8)
def normalizer_for(locale: Optional[str]) -> Normalizer:
    """Shared normalizer over the default registry."""
    return Normalizer(default_registry(), locale)
