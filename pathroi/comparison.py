"""
Comparison engine for PathROI.

Purpose
-------
Simulates two paths over the same horizon, pairs their yearly records, and
derives the figures a user actually decides on:

- final ROI of each path and the ROI difference,
- the break-even year (first year the first path's net worth catches up
  with the second path's),
- final net worths and the better path.

ROI normalization
-----------------
Each path's ROI is its final net worth expressed as a multiple of a cost
basis:

    basis_X = cost_X            if path X has a one-time cost
            = cost_other        if only the other path has one (shared denominator)
            = 1                 if neither path has one

    roi_X   = (net_worth_X + basis_X) / basis_X   when path X has a cost
            = net_worth_X / basis_X               otherwise

The cost basis is added back for a path with a cost because its net worth
already subtracts the amortized cost paid.

Example
-------
>>> from pathroi.config import CalculatorConfig
>>> from pathroi.params import PathParameters
>>> study = PathParameters(
...     work_start_delay=2, initial_salary=80_000, living_cost=20_000, tax_rate=0.25,
...     total_one_time_cost=100_000, cost_amortization_years=2,
... )
>>> work = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.25)
>>> engine = ComparisonEngine(CalculatorConfig(total_years=5, annual_return_rate=0.0))
>>> summary = engine.summarize(study, work, labels=("Study", "Work"))
>>> summary.final_net_worth_first, summary.final_net_worth_second
(20000.0, 75000.0)
>>> summary.break_even_year is None, summary.better_label
(True, 'Work')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .config import AmortizationPolicy, CalculatorConfig
from .exceptions import EmptyHorizonError, ValidationError
from .params import PathParameters
from .profile import Profile
from .simulation import PathSimulator, YearlyRecord

__all__ = [
    "ComparisonRecord",
    "RoiResult",
    "ComparisonSummary",
    "ComparisonEngine",
    "compare_paths",
    "cost_bases",
    "final_roi",
    "break_even_year",
    "comparison_to_frame",
]

logger = logging.getLogger(__name__)

DEFAULT_LABELS: Tuple[str, str] = ("Path A", "Path B")


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComparisonRecord:
    """Two YearlyRecords for the same `year`, with their path labels."""
    year: int
    first: YearlyRecord
    second: YearlyRecord
    first_label: str
    second_label: str

    @property
    def net_worth_gap(self) -> float:
        """second net worth minus first net worth."""
        return self.second.net_worth - self.first.net_worth


@dataclass(frozen=True)
class RoiResult:
    roi_first: float
    roi_second: float
    roi_difference: float  # roi_second - roi_first


@dataclass(frozen=True)
class ComparisonSummary:
    records: Tuple[ComparisonRecord, ...]
    roi: RoiResult
    break_even_year: Optional[int]
    first_label: str
    second_label: str

    @property
    def final_net_worth_first(self) -> float:
        return self.records[-1].first.net_worth

    @property
    def final_net_worth_second(self) -> float:
        return self.records[-1].second.net_worth

    @property
    def better_label(self) -> str:
        """Label of the path with the higher final net worth (first wins ties)."""
        if self.final_net_worth_second > self.final_net_worth_first:
            return self.second_label
        return self.first_label

    @property
    def total_years(self) -> int:
        return len(self.records)


# ---------------------------------------------------------------------------
# Derived figures
# ---------------------------------------------------------------------------

def cost_bases(cost_a: Optional[float], cost_b: Optional[float]) -> Tuple[float, float]:
    """
    Resolve the ROI denominators for two paths.

    Raises
    ------
    ValidationError
        If a resolved basis is not positive (e.g., a one-time cost of 0).
    """
    if cost_a is not None:
        basis_a = cost_a
    else:
        basis_a = cost_b if cost_b is not None else 1.0
    if cost_b is not None:
        basis_b = cost_b
    else:
        basis_b = cost_a if cost_a is not None else 1.0

    for name, basis in (("first", basis_a), ("second", basis_b)):
        if basis <= 0:
            raise ValidationError(
                f"Cost basis of the {name} path must be positive, got {basis}. "
                f"ROI is undefined for a zero one-time cost."
            )
    return float(basis_a), float(basis_b)


def _roi(net_worth: float, basis: float, has_cost: bool) -> float:
    if has_cost:
        return (net_worth + basis) / basis
    return net_worth / basis


def final_roi(
    records: Sequence[ComparisonRecord],
    cost_a: Optional[float],
    cost_b: Optional[float],
) -> RoiResult:
    """
    ROI of both paths at the end of the horizon.

    Parameters
    ----------
    records : sequence of ComparisonRecord
        Output of `ComparisonEngine.compare`.
    cost_a, cost_b : float, optional
        One-time cost of each path (None when the path has none).

    Raises
    ------
    EmptyHorizonError
        If `records` is empty.

    Examples
    --------
    A path that paid 100,000 and ends with net worth 20,000 has ROI 1.2;
    the other path shares its cost basis:

    >>> study = PathParameters(
    ...     work_start_delay=2, initial_salary=80_000, living_cost=20_000, tax_rate=0.25,
    ...     total_one_time_cost=100_000, cost_amortization_years=2,
    ... )
    >>> work = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.25)
    >>> engine = ComparisonEngine(CalculatorConfig(total_years=5, annual_return_rate=0.0))
    >>> roi = final_roi(engine.compare(study, work), 100_000, None)
    >>> roi.roi_first, roi.roi_second
    (1.2, 0.75)
    """
    if not records:
        raise EmptyHorizonError(
            "final_roi requires at least one comparison record (total_years=0)."
        )
    basis_a, basis_b = cost_bases(cost_a, cost_b)
    last = records[-1]
    roi_a = _roi(last.first.net_worth, basis_a, cost_a is not None)
    roi_b = _roi(last.second.net_worth, basis_b, cost_b is not None)
    return RoiResult(roi_first=roi_a, roi_second=roi_b, roi_difference=roi_b - roi_a)


def break_even_year(records: Sequence[ComparisonRecord]) -> Optional[int]:
    """
    First year in which the first path's net worth >= the second path's.

    Returns None when the first path never catches up within the horizon.

    Raises
    ------
    EmptyHorizonError
        If `records` is empty (no data is not the same as "never").
    """
    if not records:
        raise EmptyHorizonError(
            "break_even_year requires at least one comparison record (total_years=0)."
        )
    for record in records:
        if record.first.net_worth >= record.second.net_worth:
            return record.year
    return None


def comparison_to_frame(records: Sequence[ComparisonRecord]) -> pd.DataFrame:
    """Net worth of both paths and their gap, indexed by year.

    Columns are named after the path labels: "<label> net worth", plus "gap".
    """
    if not records:
        return pd.DataFrame(index=pd.Index([], name="year"))
    first_label = records[0].first_label
    second_label = records[0].second_label
    df = pd.DataFrame(
        {
            "year": [r.year for r in records],
            f"{first_label} net worth": [r.first.net_worth for r in records],
            f"{second_label} net worth": [r.second.net_worth for r in records],
            "gap": [r.net_worth_gap for r in records],
        }
    )
    return df.set_index("year")


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class ComparisonEngine:
    """Side-by-side simulation of two paths under one CalculatorConfig."""

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config if config is not None else CalculatorConfig()
        self.simulator = PathSimulator(self.config)

    def compare(
        self,
        params_a: PathParameters,
        params_b: PathParameters,
        labels: Tuple[str, str] = DEFAULT_LABELS,
    ) -> List[ComparisonRecord]:
        """Simulate both paths independently and pair the records by year."""
        first_label, second_label = labels
        data_a = self.simulator.simulate(params_a)
        data_b = self.simulator.simulate(params_b)
        return [
            ComparisonRecord(
                year=a.year,
                first=a,
                second=b,
                first_label=first_label,
                second_label=second_label,
            )
            for a, b in zip(data_a, data_b)
        ]

    def final_roi(self, params_a: PathParameters, params_b: PathParameters) -> RoiResult:
        records = self.compare(params_a, params_b)
        return final_roi(records, params_a.total_one_time_cost, params_b.total_one_time_cost)

    def summarize(
        self,
        params_a: PathParameters,
        params_b: PathParameters,
        labels: Tuple[str, str] = DEFAULT_LABELS,
    ) -> ComparisonSummary:
        """Comparison records plus ROI, break-even year and final net worths.

        Raises EmptyHorizonError when the configured horizon is zero.
        """
        records = self.compare(params_a, params_b, labels)
        roi = final_roi(records, params_a.total_one_time_cost, params_b.total_one_time_cost)
        breakeven = break_even_year(records)
        logger.info(
            "%s vs %s over %d years: ROI %.4f vs %.4f, break-even year %s",
            labels[0],
            labels[1],
            len(records),
            roi.roi_first,
            roi.roi_second,
            breakeven,
        )
        return ComparisonSummary(
            records=tuple(records),
            roi=roi,
            break_even_year=breakeven,
            first_label=labels[0],
            second_label=labels[1],
        )

    # -------------------- Profile conveniences --------------------
    def compare_profiles(self, profile_a: Profile, profile_b: Profile) -> List[ComparisonRecord]:
        return self.compare(
            profile_a.to_path_params(),
            profile_b.to_path_params(),
            labels=(profile_a.name, profile_b.name),
        )

    def summarize_profiles(self, profile_a: Profile, profile_b: Profile) -> ComparisonSummary:
        return self.summarize(
            profile_a.to_path_params(),
            profile_b.to_path_params(),
            labels=(profile_a.name, profile_b.name),
        )


def compare_paths(
    params_a: PathParameters,
    params_b: PathParameters,
    total_years: int,
    investment_portion: float,
    annual_return_rate: float,
    labels: Tuple[str, str] = DEFAULT_LABELS,
    amortization_policy: AmortizationPolicy = "unbounded",
) -> List[ComparisonRecord]:
    """Functional entry point: compare two paths with explicit scalar knobs."""
    config = CalculatorConfig(
        total_years=total_years,
        investment_portion=investment_portion,
        annual_return_rate=annual_return_rate,
        amortization_policy=amortization_policy,
    )
    return ComparisonEngine(config).compare(params_a, params_b, labels)
