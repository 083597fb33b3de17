"""Regex-driven replacement of generic PII with numbered placeholders.

Detectors run one after another over the progressively scrubbed text, so a
substring replaced by an earlier detector is invisible to later ones. PHONE is
deliberately last: its pattern is the most permissive and would otherwise
swallow IBAN, CVR and CPR numbers.
"""

import re
from typing import ClassVar

from aigate.redaction.models import ScrubResult


class PiiScrubber:
    """Replaces emails, national ids, bank and registration numbers,
    postal addresses and phone numbers with ``[CATEGORY_n]`` placeholders.

    The same string within a category always gets the same placeholder.
    """

    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    )
    _CPR_RE: ClassVar[re.Pattern[str]] = re.compile(r"\b\d{6}-\d{4}\b")
    _IBAN_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Z]{2}\d{2}\s?\d{4}\s?\d{4}\s?\d{4}(?:\s?\d{1,4})?(?:\s?\d{1,2})?\b"
    )
    _CVR_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\bDK[\s-]?\d{8}\b", re.IGNORECASE
    )
    _POSTAL_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b\d{4}\s+[A-ZÆØÅ][a-zæøåA-ZÆØÅ]+\b"
    )
    _PHONE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?:\+\d{1,3}[\s-]?)?\(?\d{2,4}\)?[\s.-]?\d{2,4}[\s.-]?\d{2,4}"
        r"(?:[\s.-]?\d{2,4})?"
    )

    # Bare 4-6 digit runs are far more often amounts or hour counts.
    _BARE_NUMBER_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d{4,6}")

    # Order is load-bearing: PHONE must stay last.
    _RULES: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        ("EMAIL", _EMAIL_RE),
        ("CPR", _CPR_RE),
        ("IBAN", _IBAN_RE),
        ("CVR", _CVR_RE),
        ("POSTAL", _POSTAL_RE),
        ("PHONE", _PHONE_RE),
    ]

    def scrub(self, text: str) -> ScrubResult:
        """Run every detector in order.

        Returns:
            ScrubResult with the scrubbed text and the number of unique
            values replaced (repeats of one value count once).
        """
        total = 0
        for category, pattern in self._RULES:
            text, found = self._apply_rule(text, category, pattern)
            total += found
        return ScrubResult(scrubbed_text=text, count=total)

    def _apply_rule(
        self,
        text: str,
        category: str,
        pattern: re.Pattern[str],
    ) -> tuple[str, int]:
        seen: dict[str, str] = {}

        def _replace(match: re.Match[str]) -> str:
            value = match.group(0)
            if category == "PHONE" and self._BARE_NUMBER_RE.fullmatch(value.strip()):
                return value
            placeholder = seen.get(value)
            if placeholder is None:
                placeholder = f"[{category}_{len(seen) + 1}]"
                seen[value] = placeholder
            return placeholder

        return pattern.sub(_replace, text), len(seen)
