"""Path simulator for PathROI

Turns one path's PathParameters into a year-by-year financial trajectory:
income, cost, savings, investment growth and net worth.

The simulation is an explicit fold. An immutable `SimulationState` (cash,
investment balance, investment principal, one-time cost paid) is threaded
through the pure `step` function, which returns the next state and the
year's `YearlyRecord`:

    state_0 = SimulationState()
    state_y, record_y = step(state_{y-1}, y, params, config)

Per-year order inside `step`:
1. resolve work status
2. compute income/cost figures (advancing cost paid)
3. allocate disposable income into contribution and cash
4. compute returns on the balance *before* this year's contribution
5. update cumulative balance, principal and cash
6. net worth = cash + balance - cost paid (when the path has a one-time cost)

Step 4 must use the pre-update balance; otherwise new contributions would
earn returns on themselves beyond the half-year credit.

Typical usage
-------------
>>> from pathroi.config import CalculatorConfig
>>> from pathroi.params import PathParameters
>>> params = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.25)
>>> config = CalculatorConfig(total_years=5, investment_portion=0.5, annual_return_rate=0.0)
>>> records = PathSimulator(config).simulate(params)
>>> records[-1].net_worth
75000.0
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .config import AmortizationPolicy, CalculatorConfig
from .finances import WorkStatus, compute_year_finances, resolve_work_status
from .investment import allocate_investment, investment_returns
from .params import PathParameters
from .types import YearlyRecordDict

__all__ = [
    "SimulationState",
    "YearlyRecord",
    "PathSimulator",
    "step",
    "simulate_path",
    "records_to_frame",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State and records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SimulationState:
    cash: float = 0.0
    investment_balance: float = 0.0
    investment_principal: float = 0.0
    cost_paid: float = 0.0
    cost_years_charged: int = 0


@dataclass(frozen=True)
class YearlyRecord:
    """
    One simulated year of a path.

    Flow figures (`gross_income` .. `investment_return_this_year`) describe
    the year itself; `cumulative_*` figures and `net_worth` are the values
    after the year's update. All amounts are in the reference currency (USD).
    """
    year: int
    work_status: WorkStatus
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

    @property
    def work_year(self) -> Optional[int]:
        """Working-year ordinal, or None when not working."""
        return self.work_status.ordinal_or_none

    @property
    def is_working(self) -> bool:
        return self.work_status.is_working

    def to_dict(self) -> YearlyRecordDict:
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "work_status"}
        data["work_year"] = self.work_year
        return data


RECORD_COLUMNS: Tuple[str, ...] = (
    "work_year",
    "gross_income",
    "net_income",
    "living_cost",
    "disposable_income",
    "cash_saved_this_year",
    "investment_contribution_this_year",
    "investment_return_this_year",
    "cumulative_investment_balance",
    "cumulative_investment_principal",
    "cumulative_cash",
    "cumulative_cost_paid",
    "net_worth",
)


# ---------------------------------------------------------------------------
# Step function
# ---------------------------------------------------------------------------

def _amortizes_this_year(
    state: SimulationState,
    params: PathParameters,
    policy: AmortizationPolicy,
) -> bool:
    if policy == "unbounded":
        return True
    return state.cost_years_charged < (params.cost_amortization_years or 0)


def step(
    state: SimulationState,
    year: int,
    params: PathParameters,
    config: CalculatorConfig,
) -> Tuple[SimulationState, YearlyRecord]:
    """Advance one year. Pure: `state` is not modified."""
    status = resolve_work_status(year, params)

    amortize = _amortizes_this_year(state, params, config.amortization_policy)
    finances, cost_paid = compute_year_finances(
        year, status, params, state.cost_paid, amortize=amortize
    )
    charged = params.has_one_time_cost and not status.is_working and amortize

    contribution, cash_saved = allocate_investment(
        year, finances.disposable_income, params, config.investment_portion
    )

    on_existing, on_new = investment_returns(
        state.investment_balance, contribution, config.annual_return_rate
    )
    total_return = on_existing + on_new

    new_state = SimulationState(
        cash=state.cash + cash_saved,
        investment_balance=state.investment_balance + total_return + contribution,
        investment_principal=state.investment_principal + contribution,
        cost_paid=cost_paid,
        cost_years_charged=state.cost_years_charged + (1 if charged else 0),
    )

    cost_term = new_state.cost_paid if params.has_one_time_cost else 0.0
    net_worth = new_state.cash + new_state.investment_balance - cost_term

    record = YearlyRecord(
        year=year,
        work_status=status,
        gross_income=finances.gross_income,
        net_income=finances.net_income,
        living_cost=finances.living_cost,
        disposable_income=finances.disposable_income,
        cash_saved_this_year=cash_saved,
        investment_contribution_this_year=contribution,
        investment_return_this_year=total_return,
        cumulative_investment_balance=new_state.investment_balance,
        cumulative_investment_principal=new_state.investment_principal,
        cumulative_cash=new_state.cash,
        cumulative_cost_paid=new_state.cost_paid,
        net_worth=net_worth,
    )
    return new_state, record


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

class PathSimulator:
    """Runs `step` over the configured horizon for one path at a time.

    The simulator holds only the immutable CalculatorConfig, so one instance
    can be shared across threads.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config if config is not None else CalculatorConfig()

    def simulate(self, params: PathParameters) -> List[YearlyRecord]:
        """Return exactly `config.total_years` records for years 1..N."""
        state = SimulationState()
        records: List[YearlyRecord] = []
        for year in range(1, self.config.total_years + 1):
            state, record = step(state, year, params, self.config)
            records.append(record)

        if records:
            logger.debug(
                "Simulated %d years: final net worth %.2f, balance %.2f, cash %.2f",
                len(records),
                records[-1].net_worth,
                records[-1].cumulative_investment_balance,
                records[-1].cumulative_cash,
            )
        else:
            logger.debug("Simulated an empty horizon (total_years=0)")
        return records

    def simulate_frame(self, params: PathParameters) -> pd.DataFrame:
        return records_to_frame(self.simulate(params))


def simulate_path(
    params: PathParameters,
    total_years: int,
    investment_portion: float,
    annual_return_rate: float,
    amortization_policy: AmortizationPolicy = "unbounded",
) -> List[YearlyRecord]:
    """Functional entry point: simulate one path with explicit scalar knobs."""
    config = CalculatorConfig(
        total_years=total_years,
        investment_portion=investment_portion,
        annual_return_rate=annual_return_rate,
        amortization_policy=amortization_policy,
    )
    return PathSimulator(config).simulate(params)


def records_to_frame(records: Sequence[YearlyRecord]) -> pd.DataFrame:
    """Tabulate records as a DataFrame indexed by `year`."""
    if not records:
        return pd.DataFrame(columns=list(RECORD_COLUMNS), index=pd.Index([], name="year"))
    df = pd.DataFrame([r.to_dict() for r in records]).set_index("year")
    return df[list(RECORD_COLUMNS)]
