"""Plain-string substitution shared by the scrubbers and the (de)anonymizer."""

import re
from collections.abc import Iterable

Replacement = tuple[str, str]


def longest_first(replacements: Iterable[Replacement]) -> list[Replacement]:
    """Order (source, target) pairs so longer sources are substituted first.

    The sort is stable, so pairs of equal length keep their insertion order.
    """
    return sorted(replacements, key=lambda pair: len(pair[0]), reverse=True)


def substitute(text: str, replacements: Iterable[Replacement]) -> tuple[str, int]:
    """Replace every occurrence of each source string in a single pass.

    Sources are escaped, so names containing special characters are matched
    literally. Where several sources match at the same position the earliest
    pair in *replacements* wins; pass them through longest_first() to prefer
    the longest. Text produced by a replacement is never matched again.
    Blank sources are skipped.

    Returns:
        (new_text, number of distinct sources that were found).
    """
    lookup: dict[str, str] = {}
    for source, target in replacements:
        if source.strip():
            lookup.setdefault(source, target)
    if not lookup:
        return text, 0

    pattern = re.compile("|".join(re.escape(source) for source in lookup))
    matched: set[str] = set()

    def _replace(match: re.Match[str]) -> str:
        source = match.group(0)
        matched.add(source)
        return lookup[source]

    return pattern.sub(_replace, text), len(matched)
