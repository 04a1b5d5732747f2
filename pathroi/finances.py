"""
Per-year work status and income/cost figures.

Purpose
-------
Two pure building blocks of the path simulation:

- `resolve_work_status(year, params)` decides whether a calendar year is a
  working year and, if so, which working-year ordinal it is.
- `compute_year_finances(year, status, params, cost_paid)` derives gross
  income, after-tax income, living cost (including the amortized one-time
  cost in non-working years) and disposable income for that year.

Conventions
-----------
- Years and ordinals are 1-based.
- Salary growth compounds on the working-year ordinal; living-cost growth
  compounds on the calendar year.
- Disposable income is floored at zero.
- Non-working years without a one-time cost (e.g., retirement) track no
  cost at all: every figure is zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .params import PathParameters

__all__ = [
    "Working",
    "NotWorking",
    "NOT_WORKING",
    "WorkStatus",
    "YearFinances",
    "resolve_work_status",
    "compute_year_finances",
]


# ---------------------------------------------------------------------------
# Work status
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Working:
    """Active employment in working year `ordinal` (1-based)."""
    ordinal: int

    @property
    def is_working(self) -> bool:
        return True

    @property
    def ordinal_or_none(self) -> Optional[int]:
        return self.ordinal

    def __str__(self) -> str:
        return f"work year {self.ordinal}"


@dataclass(frozen=True)
class NotWorking:
    """Studying, or past the working-duration cap."""

    @property
    def is_working(self) -> bool:
        return False

    @property
    def ordinal_or_none(self) -> Optional[int]:
        return None

    def __str__(self) -> str:
        return "not working"


NOT_WORKING = NotWorking()

WorkStatus = Union[Working, NotWorking]


def resolve_work_status(year: int, params: PathParameters) -> WorkStatus:
    """Return Working(ordinal) or NOT_WORKING for calendar `year`."""
    if year <= params.work_start_delay:
        return NOT_WORKING
    ordinal = year - params.work_start_delay
    limit = params.work_duration_limit
    if limit is not None and ordinal > limit:
        return NOT_WORKING
    return Working(ordinal)


# ---------------------------------------------------------------------------
# Yearly finances
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearFinances:
    gross_income: float
    net_income: float
    living_cost: float
    disposable_income: float
    amortized_cost: float = 0.0  # one-time cost charged this year (part of living_cost)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(gross_income, net_income, living_cost, disposable_income)."""
        return (self.gross_income, self.net_income, self.living_cost, self.disposable_income)


ZERO_FINANCES = YearFinances(0.0, 0.0, 0.0, 0.0)


def _base_living_cost(year: int, params: PathParameters) -> float:
    return params.living_cost * (1.0 + params.living_cost_growth) ** (year - 1)


def compute_year_finances(
    year: int,
    status: WorkStatus,
    params: PathParameters,
    cost_paid: float = 0.0,
    *,
    amortize: bool = True,
) -> Tuple[YearFinances, float]:
    """
    Compute one year's income and cost figures.

    Parameters
    ----------
    year : int
        Calendar year of the simulation (>= 1).
    status : WorkStatus
        Result of `resolve_work_status` for this year.
    params : PathParameters
        Path being simulated.
    cost_paid : float, default 0.0
        One-time cost charged in earlier years.
    amortize : bool, default True
        Whether a non-working year of a path with a one-time cost is charged
        the annual amortized amount. The simulator passes False once a
        bounded amortization period is exhausted.

    Returns
    -------
    (YearFinances, float)
        This year's figures and the updated cumulative cost paid.

    Examples
    --------
    >>> params = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.2)
    >>> finances, cost_paid = compute_year_finances(1, Working(1), params)
    >>> finances.as_tuple()
    (60000.0, 48000.0, 30000.0, 18000.0)
    """
    if isinstance(status, Working):
        gross = params.initial_salary * (1.0 + params.salary_growth_rate) ** (status.ordinal - 1)
        living = _base_living_cost(year, params)
        net = gross * (1.0 - params.tax_rate)
        disposable = max(0.0, net - living)
        return YearFinances(float(gross), float(net), float(living), float(disposable)), cost_paid

    if not params.has_one_time_cost:
        return ZERO_FINANCES, cost_paid

    annual_cost = params.annual_amortized_cost if amortize else 0.0
    living = _base_living_cost(year, params) + annual_cost
    finances = YearFinances(0.0, 0.0, float(living), 0.0, amortized_cost=float(annual_cost))
    return finances, cost_paid + annual_cost
