from dataclasses import dataclass, field

from aigate.redaction.models import RedactionStats


@dataclass(frozen=True)
class ContractTerms:
    """Key commercial terms extracted from a redacted contract."""

    max_hours: float | None = None
    max_budget: float | None = None
    budget_currency: str | None = None
    deadline: str | None = None
    scope_description: str | None = None
    scope_keywords: list[str] = field(default_factory=list)
    exclusions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ContractExtraction:
    """Outcome of one extraction call.

    A scanned document yields ``is_scanned_pdf=True`` and no terms so the
    caller can fall back to manual entry.
    """

    is_scanned_pdf: bool
    stats: RedactionStats
    terms: ContractTerms | None = None
    cost_cents: float = 0.0
