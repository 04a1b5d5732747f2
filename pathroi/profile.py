"""
Profile domain model for PathROI.

Purpose
-------
A Profile is a named set of career and financial assumptions describing
one life path ("study abroad then work", "start working now"). Profiles are
what users create, store and compare; the simulation core only sees the
PathParameters derived from them via `Profile.to_path_params()`.

Key components
--------------
- ProfileType: Education or Work path.
- Location, WorkParams, FinancialParams, CostParams: grouped fields.
- Profile: immutable aggregate with identity (uuid) and timestamps.
  Builder-style helpers (`with_cost_params`, `with_opportunity_cost`,
  `with_description`, `touched`) return updated copies.

Example
-------
>>> profile = Profile.create(
...     name="Work in Shanghai",
...     profile_type=ProfileType.WORK,
...     location=Location(country="China", city="Shanghai", currency="CNY"),
...     work_params=WorkParams(start_delay=0),
...     financial_params=FinancialParams(
...         initial_salary_usd=30_000, salary_growth_rate=0.08,
...         living_cost_usd=12_000, living_cost_growth=0.03, tax_rate=0.2,
...     ),
... ).with_opportunity_cost(50_000)
>>> params = profile.to_path_params()
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .constants import DEFAULT_CURRENCY
from .params import PathParameters

__all__ = [
    "ProfileType",
    "Location",
    "WorkParams",
    "FinancialParams",
    "CostParams",
    "Profile",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileType(str, Enum):
    EDUCATION = "Education"
    WORK = "Work"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    country: str
    city: Optional[str] = None
    currency: str = DEFAULT_CURRENCY

    def __str__(self) -> str:
        return f"{self.city}, {self.country}" if self.city else self.country


@dataclass(frozen=True)
class WorkParams:
    start_delay: int = 0
    duration_limit: Optional[int] = None


@dataclass(frozen=True)
class FinancialParams:
    initial_salary_usd: float
    living_cost_usd: float
    salary_growth_rate: float = 0.0
    living_cost_growth: float = 0.0
    tax_rate: float = 0.0


@dataclass(frozen=True)
class CostParams:
    total_cost_usd: float
    cost_duration: int


@dataclass(frozen=True)
class Profile:
    """
    Named life-path assumptions.

    Parameters
    ----------
    name : str
        Display name, also used as the comparison label.
    profile_type : ProfileType
        Education or Work path.
    location : Location
        Country/city/currency. Amounts are always stored in USD.
    work_params : WorkParams
        Start delay and optional working-year cap.
    financial_params : FinancialParams
        Salary, living cost, growth rates and tax.
    cost_params : CostParams, optional
        One-time cost and its amortization period.
    first_year_opportunity_cost : float, optional
        Extra capital invested in year 1.
    description : str, optional
    id : uuid.UUID
        Generated on creation.
    created_at, updated_at : datetime
        Timezone-aware UTC timestamps.

    Notes
    -----
    Validation of the numeric fields is delegated to PathParameters, so
    `to_path_params()` raises ConfigurationError for inconsistent profiles.
    """

    name: str
    profile_type: ProfileType
    location: Location
    work_params: WorkParams
    financial_params: FinancialParams
    cost_params: Optional[CostParams] = None
    first_year_opportunity_cost: Optional[float] = None
    description: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        name: str,
        profile_type: ProfileType,
        location: Location,
        work_params: WorkParams,
        financial_params: FinancialParams,
    ) -> "Profile":
        now = _utcnow()
        return cls(
            name=name,
            profile_type=ProfileType(profile_type),
            location=location,
            work_params=work_params,
            financial_params=financial_params,
            created_at=now,
            updated_at=now,
        )

    def with_cost_params(self, cost_params: CostParams) -> "Profile":
        return replace(self, cost_params=cost_params)

    def with_opportunity_cost(self, cost: float) -> "Profile":
        return replace(self, first_year_opportunity_cost=cost)

    def with_description(self, description: str) -> "Profile":
        return replace(self, description=description)

    def touched(self) -> "Profile":
        """Return a copy with `updated_at` set to now."""
        return replace(self, updated_at=_utcnow())

    @property
    def total_cost_usd(self) -> Optional[float]:
        return self.cost_params.total_cost_usd if self.cost_params is not None else None

    def to_path_params(self) -> PathParameters:
        return PathParameters.from_profile(self)
