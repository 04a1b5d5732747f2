"""
Rich table builders for comparison reports.

Each builder returns a `rich.table.Table`; callers decide where to print it.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table

from .comparison import ComparisonRecord, ComparisonSummary
from .profile import Profile
from .simulation import YearlyRecord
from .utils import format_currency, format_percent

__all__ = [
    "profile_parameters_table",
    "yearly_records_table",
    "yearly_comparison_table",
    "roi_summary_table",
    "break_even_text",
    "conclusion_text",
]


def _location(profile: Profile) -> str:
    return str(profile.location)


def profile_parameters_table(*profiles: Profile) -> Table:
    """Side-by-side table of the profiles' assumptions (one column each)."""
    table = Table(title="Profile Parameters", show_header=True)
    table.add_column("Parameter", style="cyan")
    for p in profiles:
        table.add_column(p.name, justify="right")

    def cost(p: Profile) -> str:
        if p.cost_params is None:
            return "-"
        return f"${p.cost_params.total_cost_usd:,.0f} / {p.cost_params.cost_duration}y"

    def limit(p: Profile) -> str:
        d = p.work_params.duration_limit
        return "unlimited" if d is None else f"{d} years"

    def opportunity(p: Profile) -> str:
        o = p.first_year_opportunity_cost
        return "-" if o is None else f"${o:,.0f}"

    rows = [
        ("Type", lambda p: str(p.profile_type)),
        ("Location", _location),
        ("Work start delay", lambda p: f"{p.work_params.start_delay} years"),
        ("Work duration", limit),
        ("Initial salary", lambda p: f"${p.financial_params.initial_salary_usd:,.0f}/yr"),
        ("Salary growth", lambda p: f"{p.financial_params.salary_growth_rate * 100:.1f}%/yr"),
        ("Living cost", lambda p: f"${p.financial_params.living_cost_usd:,.0f}/yr"),
        ("Living cost growth", lambda p: f"{p.financial_params.living_cost_growth * 100:.1f}%/yr"),
        ("Tax rate", lambda p: f"{p.financial_params.tax_rate * 100:.1f}%"),
        ("One-time cost", cost),
        ("Year-1 opportunity cost", opportunity),
    ]
    for label, render in rows:
        table.add_row(label, *(render(p) for p in profiles))
    return table


def yearly_records_table(records: Sequence[YearlyRecord], title: str = "Yearly Projection") -> Table:
    table = Table(title=title, show_header=True)
    for name in ("Year", "Status", "Gross", "Net", "Living", "Invested", "Return", "Cash", "Net Worth"):
        table.add_column(name, justify="right" if name not in ("Status",) else "left")
    for r in records:
        table.add_row(
            str(r.year),
            str(r.work_status),
            format_currency(r.gross_income),
            format_currency(r.net_income),
            format_currency(r.living_cost),
            format_currency(r.investment_contribution_this_year),
            format_currency(r.investment_return_this_year),
            format_currency(r.cumulative_cash),
            format_currency(r.net_worth),
        )
    return table


def yearly_comparison_table(records: Sequence[ComparisonRecord]) -> Table:
    """Net worth per year for both paths and the gap (second - first)."""
    table = Table(title="Yearly Net Worth Comparison", show_header=True)
    table.add_column("Year", justify="right")
    if records:
        table.add_column(f"{records[0].first_label}", justify="right")
        table.add_column(f"{records[0].second_label}", justify="right")
    table.add_column("Difference", justify="right")
    for r in records:
        table.add_row(
            str(r.year),
            format_currency(r.first.net_worth),
            format_currency(r.second.net_worth),
            format_currency(r.net_worth_gap),
        )
    return table


def roi_summary_table(summary: ComparisonSummary) -> Table:
    """Final ROI (shown as a gain over 1.0) and net worth per path."""
    table = Table(title="Final ROI", show_header=True)
    table.add_column("Profile", style="cyan")
    table.add_column("Final ROI", justify="right")
    table.add_column("Net Worth", justify="right")

    table.add_row(
        summary.first_label,
        format_percent(summary.roi.roi_first - 1.0),
        format_currency(summary.final_net_worth_first),
    )
    table.add_row(
        summary.second_label,
        format_percent(summary.roi.roi_second - 1.0),
        format_currency(summary.final_net_worth_second),
    )
    table.add_row(
        "Difference",
        format_percent(summary.roi.roi_difference),
        format_currency(summary.final_net_worth_second - summary.final_net_worth_first),
    )
    return table


def break_even_text(summary: ComparisonSummary) -> str:
    if summary.break_even_year is not None:
        return (
            f"{summary.first_label} catches up with {summary.second_label} "
            f"in year {summary.break_even_year}"
        )
    return (
        f"{summary.first_label} does not catch up with {summary.second_label} "
        f"within {summary.total_years} years"
    )


def conclusion_text(summary: ComparisonSummary) -> str:
    return f"Under current assumptions, {summary.better_label} has the better financial return"
