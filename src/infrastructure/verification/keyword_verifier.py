"""Keyword check over text extracted from a registration screenshot."""

from collections.abc import Sequence

from domain.entities.verification import VerificationOutcome


class KeywordVerifier:
    """Decides a verification outcome from OCR text.

    Matching is case-insensitive. The outcome is ``matched`` when at least
    ``min_keywords`` distinct keywords appear.
    """

    def __init__(self, keywords: Sequence[str], min_keywords: int = 2) -> None:
        if min_keywords < 1:
            raise ValueError("min_keywords must be at least 1")
        self._keywords = [kw for kw in keywords if kw.strip()]
        self._min_keywords = min_keywords

    def evaluate(self, text: str) -> VerificationOutcome:
        haystack = text.casefold()
        found = [kw for kw in self._keywords if kw.casefold() in haystack]
        return VerificationOutcome(matched=len(found) >= self._min_keywords, tags=found)
