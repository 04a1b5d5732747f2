"""
Serialization module for PathROI persistence.

Purpose
-------
Provides JSON serialization and deserialization for Profiles and CSV/JSON
export of comparison results, enabling profile sharing, version control
and downstream reporting.

Design Principles
-----------------
- Type-safe: Uses Pydantic configs (ProfileConfig) for validation
- Human-readable: JSON files for easy editing
- Versioned: Every profile file carries a schema_version

Example
-------
>>> from pathlib import Path
>>> save_profile(profile, Path("profiles/study.json"))
>>> loaded = load_profile(Path("profiles/study.json"))
"""

from __future__ import annotations
from typing import Dict, Any, Sequence, TYPE_CHECKING
from pathlib import Path
from datetime import datetime, timezone
import json
import uuid
import warnings

from .config import ProfileConfig
from .profile import (
    Profile,
    ProfileType,
    Location,
    WorkParams,
    FinancialParams,
    CostParams,
)
from .types import ProfileDict

if TYPE_CHECKING:
    from .comparison import ComparisonRecord

__all__ = [
    "SCHEMA_VERSION",
    "profile_to_dict",
    "profile_from_dict",
    "save_profile",
    "load_profile",
    "save_comparison",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


def _check_schema_version(data: Dict[str, Any], source: str) -> None:
    schema_version = data.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"{source}: schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )


def _parse_timestamp(value: str | None) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ---------------------------------------------------------------------------
# Profile Serialization
# ---------------------------------------------------------------------------

def profile_to_dict(profile: Profile) -> ProfileDict:
    """
    Convert Profile to dictionary representation.

    Parameters
    ----------
    profile : Profile
        Profile instance to serialize

    Returns
    -------
    dict
        Dictionary matching the ProfileConfig schema (plus schema_version)
    """
    result: ProfileDict = {
        "schema_version": SCHEMA_VERSION,
        "id": str(profile.id),
        "name": profile.name,
        "profile_type": profile.profile_type.value,
        "location": {
            "country": profile.location.country,
            "city": profile.location.city,
            "currency": profile.location.currency,
        },
        "work": {
            "start_delay": profile.work_params.start_delay,
            "duration_limit": profile.work_params.duration_limit,
        },
        "financial": {
            "initial_salary_usd": profile.financial_params.initial_salary_usd,
            "salary_growth_rate": profile.financial_params.salary_growth_rate,
            "living_cost_usd": profile.financial_params.living_cost_usd,
            "living_cost_growth": profile.financial_params.living_cost_growth,
            "tax_rate": profile.financial_params.tax_rate,
        },
        "created_at": profile.created_at.isoformat(),
        "updated_at": profile.updated_at.isoformat(),
    }

    if profile.cost_params is not None:
        result["cost"] = {
            "total_cost_usd": profile.cost_params.total_cost_usd,
            "cost_duration": profile.cost_params.cost_duration,
        }
    if profile.first_year_opportunity_cost is not None:
        result["first_year_opportunity_cost"] = profile.first_year_opportunity_cost
    if profile.description is not None:
        result["description"] = profile.description

    return result


def profile_from_dict(data: Dict[str, Any]) -> Profile:
    """
    Create Profile from dictionary representation.

    Parameters
    ----------
    data : dict
        Dictionary with profile configuration. A `schema_version` key is
        accepted and ignored here (see load_profile).

    Returns
    -------
    Profile
        Reconstructed profile. A missing id is generated.

    Raises
    ------
    pydantic.ValidationError
        If the dictionary does not match the ProfileConfig schema.
    """
    payload = {k: v for k, v in data.items() if k != "schema_version"}

    # Validate using Pydantic config
    config = ProfileConfig.model_validate(payload)

    cost = None
    if config.cost is not None:
        cost = CostParams(
            total_cost_usd=config.cost.total_cost_usd,
            cost_duration=config.cost.cost_duration,
        )

    return Profile(
        id=uuid.UUID(config.id) if config.id else uuid.uuid4(),
        name=config.name,
        profile_type=ProfileType(config.profile_type),
        location=Location(
            country=config.location.country,
            city=config.location.city,
            currency=config.location.currency,
        ),
        work_params=WorkParams(
            start_delay=config.work.start_delay,
            duration_limit=config.work.duration_limit,
        ),
        financial_params=FinancialParams(
            initial_salary_usd=config.financial.initial_salary_usd,
            salary_growth_rate=config.financial.salary_growth_rate,
            living_cost_usd=config.financial.living_cost_usd,
            living_cost_growth=config.financial.living_cost_growth,
            tax_rate=config.financial.tax_rate,
        ),
        cost_params=cost,
        first_year_opportunity_cost=config.first_year_opportunity_cost,
        description=config.description,
        created_at=_parse_timestamp(config.created_at),
        updated_at=_parse_timestamp(config.updated_at),
    )


def save_profile(profile: Profile, path: Path) -> None:
    """
    Save Profile to JSON file.

    Examples
    --------
    >>> from pathlib import Path
    >>> save_profile(profile, Path("study.json"))
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(profile_to_dict(profile), f, indent=2)


def load_profile(path: Path) -> Profile:
    """
    Load Profile from JSON file.

    Warns (UserWarning) when the file's schema_version differs from
    SCHEMA_VERSION.

    Examples
    --------
    >>> from pathlib import Path
    >>> profile = load_profile(Path("study.json"))
    """
    with open(path, "r") as f:
        data = json.load(f)

    _check_schema_version(data, str(path))
    return profile_from_dict(data)


# ---------------------------------------------------------------------------
# Comparison export
# ---------------------------------------------------------------------------

def save_comparison(records: Sequence[ComparisonRecord], path: Path) -> None:
    """
    Export comparison records to CSV (".csv") or JSON (any other suffix).

    CSV holds one row per year with both paths' net worth and the gap.
    JSON holds the full YearlyRecord of each path per year.
    """
    from .comparison import comparison_to_frame

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        comparison_to_frame(records).to_csv(path)
        return

    payload = {
        "schema_version": SCHEMA_VERSION,
        "labels": [records[0].first_label, records[0].second_label] if records else [],
        "years": [
            {
                "year": r.year,
                "first": r.first.to_dict(),
                "second": r.second.to_dict(),
            }
            for r in records
        ],
    }
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)
