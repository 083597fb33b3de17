import re

MIN_CHUNK_LENGTH = 20

# Blank-line runs, a numbered section ("1." / "2)") at line start, or an
# all-caps heading line.
_CHUNK_BOUNDARY_RE = re.compile(
    r"\n{2,}"
    r"|(?=\n\d+[.)]\s)"
    r"|(?=\n[A-ZÆØÅ][A-ZÆØÅ\s]{2,}:?\n)"
)


def split_into_chunks(text: str) -> list[str]:
    """Split extracted document text into trimmed chunks in document order.

    Fragments shorter than MIN_CHUNK_LENGTH characters are dropped as noise.
    """
    pieces = (piece.strip() for piece in _CHUNK_BOUNDARY_RE.split(text))
    return [piece for piece in pieces if len(piece) >= MIN_CHUNK_LENGTH]
