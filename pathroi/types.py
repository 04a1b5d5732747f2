"""
Type definitions for PathROI.

Purpose
-------
TypedDict definitions for the dictionary shapes PathROI writes to disk or
hands to pandas: exported yearly records and profile files.

Type Definitions
----------------
YearlyRecordDict
    Flat export of a YearlyRecord: {"year", "work_year", "net_worth", ...}

ProfileDict
    Profile file layout: {"schema_version", "name", "location", "financial", ...}
"""

from typing import Optional
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "YearlyRecordDict",
    "LocationDict",
    "WorkDict",
    "FinancialDict",
    "CostDict",
    "ProfileDict",
]


class YearlyRecordDict(TypedDict):
    """
    One simulated year, as returned by YearlyRecord.to_dict().

    `work_year` is the working-year ordinal, or None in a non-working year.
    """

    year: int
    work_year: Optional[int]
    gross_income: float
    net_income: float
    living_cost: float
    disposable_income: float
    cash_saved_this_year: float
    investment_contribution_this_year: float
    investment_return_this_year: float
    cumulative_investment_balance: float
    cumulative_investment_principal: float
    cumulative_cash: float
    cumulative_cost_paid: float
    net_worth: float


class LocationDict(TypedDict):
    country: str
    city: Optional[str]
    currency: str


class WorkDict(TypedDict):
    start_delay: int
    duration_limit: Optional[int]


class FinancialDict(TypedDict):
    initial_salary_usd: float
    salary_growth_rate: float
    living_cost_usd: float
    living_cost_growth: float
    tax_rate: float


class CostDict(TypedDict):
    total_cost_usd: float
    cost_duration: int


class ProfileDict(TypedDict):
    """
    Profile file layout written by serialization.profile_to_dict().

    Optional sections are omitted rather than written as null.

    Examples
    --------
    >>> data: ProfileDict = profile_to_dict(profile)
    >>> data["financial"]["initial_salary_usd"]
    90000
    """

    schema_version: str
    id: str
    name: str
    profile_type: str
    location: LocationDict
    work: WorkDict
    financial: FinancialDict
    created_at: str
    updated_at: str
    cost: NotRequired[CostDict]
    first_year_opportunity_cost: NotRequired[float]
    description: NotRequired[str]
