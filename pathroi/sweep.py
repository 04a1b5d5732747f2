"""
Sensitivity sweeps over calculator settings.

Re-runs a two-path comparison while varying one CalculatorConfig field
(e.g., the annual return rate) and tabulates the outcome per value. Every
variant is a freshly validated copy of the base configuration, so no run
can observe another run's setting.

Example
-------
>>> from pathroi.params import PathParameters
>>> study = PathParameters(
...     work_start_delay=2, initial_salary=80_000, living_cost=20_000, tax_rate=0.25,
...     total_one_time_cost=100_000, cost_amortization_years=2,
... )
>>> work = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.25)
>>> df = sensitivity_sweep(
...     study, work, CalculatorConfig(annual_return_rate=0.0),
...     "total_years", [5, 10],
...     labels=("Study", "Work"),
... )
>>> df["final_net_worth_first"].tolist()
[20000.0, 220000.0]
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .comparison import DEFAULT_LABELS, ComparisonEngine
from .config import CalculatorConfig
from .exceptions import EmptyHorizonError, ValidationError
from .params import PathParameters

__all__ = ["SWEEPABLE_FIELDS", "config_variant", "sensitivity_sweep"]

logger = logging.getLogger(__name__)

SWEEPABLE_FIELDS: Tuple[str, ...] = (
    "total_years",
    "investment_portion",
    "annual_return_rate",
    "amortization_policy",
)

SWEEP_COLUMNS: Tuple[str, ...] = (
    "final_net_worth_first",
    "final_net_worth_second",
    "roi_first",
    "roi_second",
    "roi_difference",
    "break_even_year",
)


def config_variant(base: CalculatorConfig, field: str, value: Any) -> CalculatorConfig:
    """Validated copy of `base` with `field` replaced by `value`."""
    if field not in SWEEPABLE_FIELDS:
        raise ValidationError(
            f"Cannot sweep '{field}'. Valid fields: {', '.join(SWEEPABLE_FIELDS)}"
        )
    if isinstance(value, np.generic):
        value = value.item()
    return CalculatorConfig.model_validate({**base.model_dump(), field: value})


def _run_variant(
    params_a: PathParameters,
    params_b: PathParameters,
    config: CalculatorConfig,
    labels: Tuple[str, str],
) -> Dict[str, Any]:
    try:
        summary = ComparisonEngine(config).summarize(params_a, params_b, labels)
    except EmptyHorizonError:
        return {col: np.nan for col in SWEEP_COLUMNS}
    return {
        "final_net_worth_first": summary.final_net_worth_first,
        "final_net_worth_second": summary.final_net_worth_second,
        "roi_first": summary.roi.roi_first,
        "roi_second": summary.roi.roi_second,
        "roi_difference": summary.roi.roi_difference,
        "break_even_year": summary.break_even_year,
    }


def sensitivity_sweep(
    params_a: PathParameters,
    params_b: PathParameters,
    base_config: CalculatorConfig,
    field: str,
    values: Iterable[Any],
    labels: Tuple[str, str] = DEFAULT_LABELS,
    max_workers: Optional[int] = None,
) -> pd.DataFrame:
    """
    Compare two paths once per value of `field`.

    Parameters
    ----------
    params_a, params_b : PathParameters
        Paths being compared (first, second).
    base_config : CalculatorConfig
        Configuration every variant starts from. Never modified.
    field : str
        One of SWEEPABLE_FIELDS.
    values : iterable
        Values substituted for `field`. Each is validated by CalculatorConfig.
    labels : (str, str)
        Path labels passed through to the comparison.
    max_workers : int, optional
        Run variants on a thread pool of this size. None or 1 runs serially.

    Returns
    -------
    pd.DataFrame
        Indexed by the swept value (index name = `field`) with columns
        final_net_worth_first/second, roi_first/second, roi_difference and
        break_even_year. A zero-year variant yields a row of NaN.
    """
    variants: List[CalculatorConfig] = [config_variant(base_config, field, v) for v in values]
    logger.debug("Sweeping %s over %d values", field, len(variants))

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            rows = list(pool.map(lambda cfg: _run_variant(params_a, params_b, cfg, labels), variants))
    else:
        rows = [_run_variant(params_a, params_b, cfg, labels) for cfg in variants]

    index = pd.Index([getattr(cfg, field) for cfg in variants], name=field)
    return pd.DataFrame(rows, index=index, columns=list(SWEEP_COLUMNS))
