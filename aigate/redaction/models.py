from dataclasses import dataclass, field


@dataclass(frozen=True)
class KnownNames:
    """Real-world identifiers that must not leave the system.

    Supplied fresh per call from the caller's current roster.
    """

    company_name: str = ""
    employee_names: list[str] = field(default_factory=list)
    project_names: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ScrubResult:
    """Output of a single scrubbing pass."""

    scrubbed_text: str
    count: int = 0


@dataclass(frozen=True)
class RedactionStats:
    original_length: int
    chunks_kept: int = 0
    chunks_total: int = 0
    redactions_applied: int = 0


@dataclass(frozen=True)
class RedactionResult:
    """Redacted document text ready to embed in an LLM prompt."""

    redacted_text: str
    is_scanned_pdf: bool
    stats: RedactionStats
