from aigate.budget.gate import BudgetGate
from aigate.config.settings import Settings
from aigate.database.repositories.usage_repository import UsageRepository


class BudgetGateFactory:
    """Creates a budget gate using the configured spend caps."""

    @classmethod
    def create(cls, settings: Settings) -> BudgetGate:
        return BudgetGate(
            usage_repo=UsageRepository(),
            daily_limit_cents=settings.budget_daily_limit_cents,
            monthly_limit_cents=settings.budget_monthly_limit_cents,
        )
