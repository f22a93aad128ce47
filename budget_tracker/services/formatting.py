"""Display formatting applied at the presentation boundary only."""

from __future__ import annotations

from budget_tracker.services.budget_service import BudgetSummaryResult
from budget_tracker.services.task_service import ProjectSummary

# ISO 4217 currencies without minor units that the front-end renders.
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY", "KRW", "VND", "CLP", "ISK"})


def currency_decimals(currency: str) -> int:
    return 0 if currency.upper() in ZERO_DECIMAL_CURRENCIES else 2


def format_currency(amount: float, currency: str = "JPY") -> str:
    """Format an amount with thousands separators and an ISO code prefix.

    >>> format_currency(1234567.4, "JPY")
    'JPY 1,234,567'
    >>> format_currency(-12.5, "EUR")
    '-EUR 12.50'
    """

    code = currency.upper()
    decimals = currency_decimals(code)
    rounded = round(amount, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{code} {abs(rounded):,.{decimals}f}"


def _one_decimal(value: float) -> float:
    # Adding 0.0 turns -0.0 into 0.0.
    return round(value, 1) + 0.0


def format_percentage(value: float) -> str:
    return f"{_one_decimal(value):.1f}%"


def format_hours(value: float) -> str:
    return f"{_one_decimal(value):.1f}h"


def format_signed(value: float, suffix: str = "") -> str:
    rounded = _one_decimal(value)
    prefix = "+" if rounded > 0 else ""
    return f"{prefix}{rounded:.1f}{suffix}"


def budget_summary_display(result: BudgetSummaryResult) -> dict[str, object]:
    currency = result.budget.currency
    return {
        "revenue": format_currency(result.budget.revenue, currency),
        "total_cost": format_currency(result.budget.total_cost, currency),
        "profit": format_currency(result.budget.profit, currency),
        "profit_rate": format_percentage(result.budget.profit_rate),
        "total_hours": format_hours(result.cost_breakdown.total_hours),
        "average_rate": format_currency(result.cost_breakdown.average_rate, currency),
        "member_costs": [
            {
                "member_id": str(row.member_id),
                "hours": format_hours(row.hours),
                "hourly_rate": format_currency(row.hourly_rate, currency),
                "cost": format_currency(row.cost, currency),
                "percentage": format_percentage(row.percentage),
            }
            for row in result.member_costs
        ],
    }


def project_summary_display(summary: ProjectSummary) -> dict[str, str]:
    return {
        "total_planned_hours": format_hours(summary.total_planned_hours),
        "total_actual_hours": format_hours(summary.total_actual_hours),
        "variance_hours": format_signed(summary.variance_hours, "h"),
        "variance_percentage": format_signed(summary.variance_percentage, "%"),
        "completion_rate": format_percentage(summary.completion_rate),
    }
