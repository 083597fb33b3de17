import argparse
import json
import sys
from dataclasses import asdict

from aigate.budget.factory import BudgetGateFactory
from aigate.config.settings import Settings
from aigate.database.connection import close_pool, init_pool
from aigate.logging.logger import Log


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aigate", description="AI spend overview")
    commands = parser.add_subparsers(dest="command", required=True)
    budget = commands.add_parser("budget", help="Show a company's budget status")
    budget.add_argument("company_id")
    commands.add_parser("usage", help="Show spend across all companies")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point: parse args -> initialize pool -> report -> close pool."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        gate = BudgetGateFactory.create(settings)
        if args.command == "budget":
            output: dict[str, object] = asdict(gate.check_budget(args.company_id))
        else:
            report = gate.summarize_usage()
            output = {
                "usage": [asdict(c) for c in report.companies],
                "totals": {
                    "daily_cost_cents": report.daily_cost_cents,
                    "monthly_cost_cents": report.monthly_cost_cents,
                    "total_cost_cents": report.total_cost_cents,
                    "daily_limit_cents": report.daily_limit,
                    "monthly_limit_cents": report.monthly_limit,
                },
            }
        json.dump(output, sys.stdout, indent=2)
        sys.stdout.write("\n")
    finally:
        close_pool()


if __name__ == "__main__":
    main()
