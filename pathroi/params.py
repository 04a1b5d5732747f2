"""
Calculation-ready path parameters.

Purpose
-------
PathParameters is the normalized, immutable view of a Profile that the
simulation core consumes: work timing, salary and living-cost growth, tax,
the optional one-time cost with its amortization period, and the optional
first-year opportunity-cost investment.

Validation happens once, at construction. A PathParameters instance that
exists is always simulatable: the per-year loop never has to guard against
division by zero or half-specified costs.

Example
-------
>>> params = PathParameters(
...     work_start_delay=2,
...     initial_salary=90_000,
...     salary_growth_rate=0.05,
...     living_cost=25_000,
...     living_cost_growth=0.03,
...     tax_rate=0.25,
...     total_one_time_cost=80_000,
...     cost_amortization_years=2,
... )
>>> params.annual_amortized_cost
40000.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .exceptions import ConfigurationError
from .utils import check_finite, check_non_negative

if TYPE_CHECKING:
    from .profile import Profile

__all__ = ["PathParameters"]


@dataclass(frozen=True)
class PathParameters:
    """
    Normalized parameters of one life path.

    Parameters
    ----------
    work_start_delay : int, default 0
        Years before work can begin (e.g., years in school).
    work_duration_limit : int, optional
        Cap on working years counted from the first working year.
        None means unlimited.
    initial_salary : float, default 0.0
        Gross salary in the first working year.
    salary_growth_rate : float, default 0.0
        Salary growth per working year (fractional, must be > -1).
    living_cost : float, default 0.0
        Living cost in calendar year 1.
    living_cost_growth : float, default 0.0
        Living cost growth per calendar year (fractional, must be > -1).
    tax_rate : float, default 0.0
        Effective tax rate applied to gross income. Not range-checked.
    total_one_time_cost : float, optional
        Lump cost (e.g., tuition) spread over non-working years.
    cost_amortization_years : int, optional
        Divisor for the lump cost. Required (and positive) whenever
        total_one_time_cost is given, forbidden otherwise.
    first_year_opportunity_cost : float, optional
        Capital invested in year 1 on top of ordinary contributions
        (non-negative).

    Raises
    ------
    ConfigurationError
        On half-specified or zero-length amortization, negative amounts,
        delays or limits, non-finite values, or growth rates <= -1.
    """

    work_start_delay: int = 0
    work_duration_limit: Optional[int] = None
    initial_salary: float = 0.0
    salary_growth_rate: float = 0.0
    living_cost: float = 0.0
    living_cost_growth: float = 0.0
    tax_rate: float = 0.0
    total_one_time_cost: Optional[float] = None
    cost_amortization_years: Optional[int] = None
    first_year_opportunity_cost: Optional[float] = None

    def __post_init__(self) -> None:
        for name in (
            "initial_salary",
            "salary_growth_rate",
            "living_cost",
            "living_cost_growth",
            "tax_rate",
            "total_one_time_cost",
            "first_year_opportunity_cost",
        ):
            check_finite(name, getattr(self, name))

        check_non_negative("work_start_delay", self.work_start_delay)
        check_non_negative("work_duration_limit", self.work_duration_limit)
        check_non_negative("initial_salary", self.initial_salary)
        check_non_negative("living_cost", self.living_cost)
        check_non_negative("total_one_time_cost", self.total_one_time_cost)
        check_non_negative("first_year_opportunity_cost", self.first_year_opportunity_cost)

        for name in ("salary_growth_rate", "living_cost_growth"):
            rate = getattr(self, name)
            if rate <= -1:
                raise ConfigurationError(
                    f"{name} must be > -1, got {rate}. "
                    f"Value <= -1 would drive the amount to zero or below."
                )

        has_total = self.total_one_time_cost is not None
        has_years = self.cost_amortization_years is not None
        if has_total != has_years:
            raise ConfigurationError(
                "total_one_time_cost and cost_amortization_years must be given together "
                f"(got total_one_time_cost={self.total_one_time_cost}, "
                f"cost_amortization_years={self.cost_amortization_years})."
            )
        if has_years and self.cost_amortization_years <= 0:
            raise ConfigurationError(
                f"cost_amortization_years must be positive, got {self.cost_amortization_years}."
            )

    @property
    def has_one_time_cost(self) -> bool:
        return self.total_one_time_cost is not None

    @property
    def annual_amortized_cost(self) -> float:
        """Flat cost charged per amortized non-working year (0.0 without a cost)."""
        if not self.has_one_time_cost:
            return 0.0
        return self.total_one_time_cost / self.cost_amortization_years

    @classmethod
    def from_profile(cls, profile: Profile) -> "PathParameters":
        """Pure mapping from a Profile to calculation parameters."""
        cost = profile.cost_params
        return cls(
            work_start_delay=profile.work_params.start_delay,
            work_duration_limit=profile.work_params.duration_limit,
            initial_salary=profile.financial_params.initial_salary_usd,
            salary_growth_rate=profile.financial_params.salary_growth_rate,
            living_cost=profile.financial_params.living_cost_usd,
            living_cost_growth=profile.financial_params.living_cost_growth,
            tax_rate=profile.financial_params.tax_rate,
            total_one_time_cost=cost.total_cost_usd if cost is not None else None,
            cost_amortization_years=cost.cost_duration if cost is not None else None,
            first_year_opportunity_cost=profile.first_year_opportunity_cost,
        )
