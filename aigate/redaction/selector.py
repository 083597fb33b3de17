from dataclasses import dataclass

SMALL_DOCUMENT_CHUNKS = 15
MAX_SELECTED_CHUNKS = 12

KEYWORD_GROUPS: dict[str, list[str]] = {
    "budget": [
        "budget", "fee", "cap", "invoice", "cost", "price", "payment", "rate",
        "compensation", "amount", "billing", "remuneration",
    ],
    "hours": [
        "hours", "hourly", "maximum", "limit", "time", "duration", "period",
        "man-hours", "work hours", "working hours",
    ],
    "deadline": [
        "deadline", "term", "expires", "expiration", "termination", "completion",
        "delivery", "effective date", "commencement",
    ],
    "scope": [
        "scope", "services", "deliverables", "obligations", "responsibilities",
        "shall", "undertake", "perform", "provide",
    ],
    "exclusions": [
        "exclusion", "excluded", "not included", "limitation", "restriction",
        "shall not", "does not include", "outside scope",
    ],
}


@dataclass(frozen=True)
class _ScoredChunk:
    index: int
    score: int
    chunk: str


def score_chunk(chunk: str) -> int:
    """Count the keywords (across all groups) that appear in *chunk*.

    Case-insensitive substring test; overlapping keywords such as "hours" and
    "work hours" each count.
    """
    lower = chunk.lower()
    return sum(
        1
        for keywords in KEYWORD_GROUPS.values()
        for keyword in keywords
        if keyword in lower
    )


def select_relevant_chunks(
    chunks: list[str],
    max_chunks: int = MAX_SELECTED_CHUNKS,
) -> list[str]:
    """Keep the highest-scoring chunks, returned in original document order.

    Documents with at most SMALL_DOCUMENT_CHUNKS chunks are returned whole.
    """
    if len(chunks) <= SMALL_DOCUMENT_CHUNKS:
        return list(chunks)

    scored = [
        _ScoredChunk(index=i, score=score_chunk(chunk), chunk=chunk)
        for i, chunk in enumerate(chunks)
    ]
    # sorted() is stable: equal scores keep document order.
    top = sorted(scored, key=lambda s: s.score, reverse=True)[:max_chunks]
    return [s.chunk for s in sorted(top, key=lambda s: s.index)]
