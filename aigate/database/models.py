from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UsageRecord:
    """Represents a row from the ai_api_usage table (append-only)."""

    company_id: str
    endpoint: str
    model: str
    input_tokens: int
    output_tokens: int
    cost_cents: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class CompanyUsageSummary:
    """Aggregated spend for one company over the reporting windows."""

    company_id: str
    daily_cost_cents: float
    monthly_cost_cents: float
    total_cost_cents: float
