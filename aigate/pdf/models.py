from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedDocument:
    """Plain text pulled out of a document plus its page count."""

    text: str
    page_count: int
