from collections.abc import Callable
from datetime import datetime, timezone

from aigate.budget.models import BudgetStatus, UsageReport
from aigate.budget.pricing import compute_cost_cents
from aigate.database.models import UsageRecord
from aigate.database.repositories.usage_repository import UsageRepository
from aigate.logging.logger import Log

DAILY_LIMIT_CENTS = 500
MONTHLY_LIMIT_CENTS = 5000


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BudgetGate:
    """Per-company spend caps for paid external AI calls.

    Callers must call check_budget() before incurring spend and
    track_usage() after the external call succeeded. The gate never calls
    the external API itself.
    """

    def __init__(
        self,
        usage_repo: UsageRepository,
        daily_limit_cents: float = DAILY_LIMIT_CENTS,
        monthly_limit_cents: float = MONTHLY_LIMIT_CENTS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._usage_repo = usage_repo
        self._daily_limit = daily_limit_cents
        self._monthly_limit = monthly_limit_cents
        self._clock = clock

    def check_budget(self, company_id: str) -> BudgetStatus:
        """Report current-day and current-month spend. Never raises on overspend."""
        day_start, month_start = self._windows()
        daily_used, monthly_used = self._usage_repo.sum_costs(
            company_id, day_start, month_start
        )
        status = BudgetStatus(
            allowed=daily_used < self._daily_limit and monthly_used < self._monthly_limit,
            daily_used=daily_used,
            monthly_used=monthly_used,
            daily_limit=self._daily_limit,
            monthly_limit=self._monthly_limit,
        )
        Log.debug(
            f"Budget for company {company_id}: daily {daily_used:.2f}/{self._daily_limit}, "
            f"monthly {monthly_used:.2f}/{self._monthly_limit}"
        )
        return status

    def track_usage(
        self,
        company_id: str,
        endpoint: str,
        model: str,
        input_tokens: int,
        output_tokens: int,
    ) -> float:
        """Persist one usage record and return its cost in cents."""
        cost_cents = compute_cost_cents(model, input_tokens, output_tokens)
        self._usage_repo.insert(
            UsageRecord(
                company_id=company_id,
                endpoint=endpoint,
                model=model,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                cost_cents=cost_cents,
                created_at=self._clock(),
            )
        )
        Log.info(
            f"Tracked {endpoint} usage for company {company_id}: "
            f"{input_tokens}+{output_tokens} tokens on {model}, {cost_cents:.4f} cents"
        )
        return cost_cents

    def summarize_usage(self) -> UsageReport:
        """Spend of every company for today, this month and all time."""
        day_start, month_start = self._windows()
        return UsageReport(
            companies=self._usage_repo.usage_by_company(day_start, month_start),
            daily_limit=self._daily_limit,
            monthly_limit=self._monthly_limit,
        )

    def _windows(self) -> tuple[datetime, datetime]:
        now = self._clock()
        day_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        month_start = day_start.replace(day=1)
        return day_start, month_start
