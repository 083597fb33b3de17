from aigate.budget.models import BudgetStatus


class BudgetExceededError(Exception):
    """Raised by callers that refuse an external call because a cap is hit."""

    def __init__(self, company_id: str, status: BudgetStatus) -> None:
        self.company_id = company_id
        self.status = status
        super().__init__(
            f"AI budget exceeded for company {company_id}. "
            f"Daily: {status.daily_used:.2f}/{status.daily_limit}, "
            f"Monthly: {status.monthly_used:.2f}/{status.monthly_limit}"
        )
