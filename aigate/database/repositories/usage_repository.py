from datetime import datetime

from psycopg.rows import dict_row

from aigate.database.connection import get_connection
from aigate.database.models import CompanyUsageSummary, UsageRecord


class UsageRepository:
    """Database operations for the ai_api_usage table."""

    def insert(self, record: UsageRecord) -> None:
        """Append one usage row. created_at defaults to NOW() when not given."""
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO ai_api_usage
                    (company_id, endpoint, model, input_tokens, output_tokens,
                     cost_cents, created_at)
                VALUES (%s, %s, %s, %s, %s, %s, COALESCE(%s, NOW()))
                """,
                (
                    record.company_id,
                    record.endpoint,
                    record.model,
                    record.input_tokens,
                    record.output_tokens,
                    record.cost_cents,
                    record.created_at,
                ),
            )
            conn.commit()

    def sum_costs(
        self,
        company_id: str,
        day_start: datetime,
        month_start: datetime,
    ) -> tuple[float, float]:
        """Return (daily, monthly) cost in cents for a company.

        Both windows are aggregated in a single statement so the two figures
        come from the same snapshot.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT
                        COALESCE(SUM(cost_cents) FILTER (WHERE created_at >= %s), 0),
                        COALESCE(SUM(cost_cents) FILTER (WHERE created_at >= %s), 0)
                    FROM ai_api_usage
                    WHERE company_id = %s AND created_at >= %s
                    """,
                    (day_start, month_start, company_id, month_start),
                )
                row = cur.fetchone()

        if row is None:
            return 0.0, 0.0
        return float(row[0]), float(row[1])

    def usage_by_company(
        self,
        day_start: datetime,
        month_start: datetime,
    ) -> list[CompanyUsageSummary]:
        """Per-company daily, monthly and all-time spend, highest total first."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT
                        company_id,
                        COALESCE(SUM(cost_cents) FILTER (WHERE created_at >= %s), 0)
                            AS daily_cost_cents,
                        COALESCE(SUM(cost_cents) FILTER (WHERE created_at >= %s), 0)
                            AS monthly_cost_cents,
                        COALESCE(SUM(cost_cents), 0) AS total_cost_cents
                    FROM ai_api_usage
                    GROUP BY company_id
                    ORDER BY total_cost_cents DESC
                    """,
                    (day_start, month_start),
                )
                rows = cur.fetchall()

        return [
            CompanyUsageSummary(
                company_id=str(row["company_id"]),
                daily_cost_cents=float(row["daily_cost_cents"]),
                monthly_cost_cents=float(row["monthly_cost_cents"]),
                total_cost_cents=float(row["total_cost_cents"]),
            )
            for row in rows
        ]
