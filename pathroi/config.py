"""
Configuration management module for PathROI.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation, and serialization. Covers the calculator knobs
shared by every simulation, the on-disk profile schema, and environment
settings.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation, so sweep variants
  derived from one base configuration never alias each other
- Serializable: Easy conversion to/from JSON for profile files
- Environment-aware: Supports .env files and PATHROI_ variables

Example
-------
>>> from pathroi.config import CalculatorConfig
>>> config = CalculatorConfig(total_years=15, annual_return_rate=0.07)
>>>
>>> # Serialize to dict/JSON
>>> config_dict = config.model_dump()
>>> json_str = config.model_dump_json()
>>>
>>> # Load from dict/JSON
>>> loaded = CalculatorConfig.model_validate(config_dict)
"""

from __future__ import annotations
from typing import Optional, Literal
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_TOTAL_YEARS,
    DEFAULT_INVESTMENT_PORTION,
    DEFAULT_ANNUAL_RETURN_RATE,
    DEFAULT_AMORTIZATION_POLICY,
    DEFAULT_CURRENCY,
    MAX_TOTAL_YEARS,
)

__all__ = [
    "AmortizationPolicy",
    "CalculatorConfig",
    "LocationConfig",
    "WorkConfig",
    "FinancialConfig",
    "CostConfig",
    "ProfileConfig",
    "AppSettings",
]


AmortizationPolicy = Literal["unbounded", "bounded"]


# ---------------------------------------------------------------------------
# Calculator Configuration
# ---------------------------------------------------------------------------

class CalculatorConfig(BaseModel):
    """
    Scalar knobs shared by every path in a simulation or comparison.

    Attributes
    ----------
    total_years : int
        Analysis horizon in years (0-500). Zero yields empty results.
    investment_portion : float
        Share of disposable income invested each year (0-1).
    annual_return_rate : float
        Annual investment return as a fraction (e.g., 0.10 for 10%), 0-1.
        Losses are not modelled; balances never decrease.
    amortization_policy : {"unbounded", "bounded"}
        "unbounded" charges the amortized one-time cost in every non-working
        year; "bounded" stops after cost_amortization_years charges.

    Examples
    --------
    >>> config = CalculatorConfig(total_years=20, investment_portion=0.5)
    >>> config.annual_return_rate
    0.1
    >>> variant = config.model_copy(update={"annual_return_rate": 0.05})
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_years: int = Field(
        default=DEFAULT_TOTAL_YEARS,
        ge=0,
        le=MAX_TOTAL_YEARS,
        description="Analysis horizon (years)"
    )
    investment_portion: float = Field(
        default=DEFAULT_INVESTMENT_PORTION,
        ge=0,
        le=1,
        description="Share of disposable income invested"
    )
    annual_return_rate: float = Field(
        default=DEFAULT_ANNUAL_RETURN_RATE,
        ge=0,
        le=1,
        description="Annual investment return"
    )
    amortization_policy: AmortizationPolicy = Field(
        default=DEFAULT_AMORTIZATION_POLICY,
        description="How long a one-time cost keeps being charged"
    )


# ---------------------------------------------------------------------------
# Profile Configuration (file schema)
# ---------------------------------------------------------------------------

class LocationConfig(BaseModel):
    """Where a path takes place. Currency is informational only."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    country: str = Field(min_length=1, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        """Normalize currency codes to upper case."""
        return v.upper()


class WorkConfig(BaseModel):
    """Work timing: delay before the first working year and optional cap."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_delay: int = Field(
        default=0,
        ge=0,
        description="Years before work begins (e.g., years in school)"
    )
    duration_limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of working years (None = unlimited)"
    )


class FinancialConfig(BaseModel):
    """Salary, living cost and tax assumptions (amounts in USD per year)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_salary_usd: float = Field(ge=0, description="First-year gross salary")
    salary_growth_rate: float = Field(
        default=0.0,
        gt=-1,
        description="Annual salary growth per working year"
    )
    living_cost_usd: float = Field(ge=0, description="First-year living cost")
    living_cost_growth: float = Field(
        default=0.0,
        gt=-1,
        description="Annual living cost growth per calendar year"
    )
    tax_rate: float = Field(default=0.0, description="Effective income tax rate")


class CostConfig(BaseModel):
    """One-time cost (e.g., tuition) spread over non-working years."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_cost_usd: float = Field(ge=0, description="Total one-time cost")
    cost_duration: int = Field(gt=0, description="Years over which the cost is spread")


class ProfileConfig(BaseModel):
    """
    On-disk representation of a Profile.

    Examples
    --------
    >>> config = ProfileConfig(
    ...     name="Masters abroad",
    ...     profile_type="Education",
    ...     location=LocationConfig(country="USA", city="Tempe"),
    ...     work=WorkConfig(start_delay=2),
    ...     financial=FinancialConfig(
    ...         initial_salary_usd=90_000, salary_growth_rate=0.05,
    ...         living_cost_usd=25_000, living_cost_growth=0.03, tax_rate=0.25,
    ...     ),
    ...     cost=CostConfig(total_cost_usd=80_000, cost_duration=2),
    ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: Optional[str] = Field(default=None, description="UUID (generated when missing)")
    name: str = Field(min_length=1, max_length=100)
    profile_type: Literal["Education", "Work"] = Field(default="Work")
    location: LocationConfig
    work: WorkConfig = Field(default_factory=WorkConfig)
    financial: FinancialConfig
    cost: Optional[CostConfig] = Field(default=None)
    first_year_opportunity_cost: Optional[float] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=500)
    created_at: Optional[str] = Field(default=None, description="ISO-8601 timestamp")
    updated_at: Optional[str] = Field(default=None, description="ISO-8601 timestamp")


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Environment variables are prefixed with PATHROI_ (e.g.,
    PATHROI_LOG_LEVEL=DEBUG). A local .env file is honoured.

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    profiles_dir : Path
        Directory used by ProfileStore
    chart_dir : Path
        Directory where comparison charts are written

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHROI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    profiles_dir: Path = Field(
        default=Path.home() / ".local" / "share" / "pathroi" / "profiles",
        description="Directory holding stored profiles"
    )
    chart_dir: Path = Field(
        default=Path("."),
        description="Directory for generated charts"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
