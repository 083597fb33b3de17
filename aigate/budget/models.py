from dataclasses import dataclass, field

from aigate.database.models import CompanyUsageSummary


@dataclass(frozen=True)
class ModelPricing:
    """Price in cents per 1000 tokens."""

    input: float
    output: float


@dataclass(frozen=True)
class BudgetStatus:
    """Spend against the caps, computed on demand. Never persisted."""

    allowed: bool
    daily_used: float
    monthly_used: float
    daily_limit: float
    monthly_limit: float


@dataclass(frozen=True)
class UsageReport:
    companies: list[CompanyUsageSummary] = field(default_factory=list)
    daily_limit: float = 0.0
    monthly_limit: float = 0.0

    @property
    def daily_cost_cents(self) -> float:
        return sum(c.daily_cost_cents for c in self.companies)

    @property
    def monthly_cost_cents(self) -> float:
        return sum(c.monthly_cost_cents for c in self.companies)

    @property
    def total_cost_cents(self) -> float:
        return sum(c.total_cost_cents for c in self.companies)
