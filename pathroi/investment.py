"""
Investment allocation and return model.

Purpose
-------
Splits each year's disposable income between new investment and cash, and
computes the year's investment return.

Key Mathematical Framework
--------------------------
- Contribution:  C_y = D_y * p  (+ O in year 1 when an opportunity cost O exists)
- Cash saved:    S_y = D_y - D_y * p   (O is never counted as cash)
- Return:        R_y = B_{y-1} * r + C_y * r * 0.5
- Balance:       B_y = B_{y-1} + R_y + C_y

where D_y is disposable income, p the investment portion, r the annual
return rate and B_{y-1} the balance carried in from the previous year.
Prior balance earns a full year of return; new money earns half a year,
approximating an even monthly deployment. Nothing else compounds inside
the year.
"""

from __future__ import annotations

from typing import Tuple

from .constants import NEW_CONTRIBUTION_RETURN_FACTOR
from .params import PathParameters

__all__ = [
    "allocate_investment",
    "investment_returns",
]


def allocate_investment(
    year: int,
    disposable_income: float,
    params: PathParameters,
    investment_portion: float,
) -> Tuple[float, float]:
    """
    Split disposable income into (investment_contribution, cash_saved).

    In year 1 the path's first_year_opportunity_cost, when present, is added
    to the contribution. It is new capital and does not reduce cash saved.

    Examples
    --------
    >>> params = PathParameters(first_year_opportunity_cost=20_000)
    >>> allocate_investment(1, 2_000, params, 0.5)
    (21000.0, 1000.0)
    >>> allocate_investment(2, 2_000, params, 0.5)
    (1000.0, 1000.0)
    """
    invested_share = disposable_income * investment_portion
    contribution = invested_share
    if year == 1 and params.first_year_opportunity_cost is not None:
        contribution += params.first_year_opportunity_cost
    cash_saved = disposable_income - invested_share
    return float(contribution), float(cash_saved)


def investment_returns(
    prior_balance: float,
    new_contribution: float,
    annual_return_rate: float,
) -> Tuple[float, float]:
    """
    Return (return_on_existing, return_on_new) for one year.

    `prior_balance` must be the balance before this year's contribution is
    added; the contribution itself only earns the half-year credit.
    """
    return_on_existing = prior_balance * annual_return_rate
    return_on_new = new_contribution * annual_return_rate * NEW_CONTRIBUTION_RETURN_FACTOR
    return float(return_on_existing), float(return_on_new)
