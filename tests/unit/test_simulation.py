"""
Unit tests for simulation.py module.

Tests the step fold, PathSimulator, functional entry point and DataFrame
export, using hand-computed reference trajectories (see conftest.py).
"""

import pandas as pd
import pytest

from pathroi.config import CalculatorConfig
from pathroi.finances import NOT_WORKING, Working
from pathroi.params import PathParameters
from pathroi.simulation import (
    RECORD_COLUMNS,
    SimulationState,
    YearlyRecord,
    PathSimulator,
    step,
    simulate_path,
    records_to_frame,
)


# ============================================================================
# STEP FUNCTION
# ============================================================================

class TestStep:
    """Tests for the pure step function."""

    def test_first_year(self, work_params, zero_return_config):
        """Test one step from the empty state."""
        state = SimulationState()
        new_state, record = step(state, 1, work_params, zero_return_config)

        assert record.year == 1
        assert record.work_status == Working(1)
        assert record.investment_contribution_this_year == pytest.approx(9_000)
        assert record.cash_saved_this_year == pytest.approx(9_000)
        assert record.net_worth == pytest.approx(18_000)
        assert new_state.cash == pytest.approx(9_000)
        assert new_state.investment_balance == pytest.approx(9_000)

    def test_state_not_modified(self, work_params, zero_return_config):
        """Test step leaves its input state untouched."""
        state = SimulationState(cash=1.0, investment_balance=2.0)
        step(state, 1, work_params, zero_return_config)

        assert state == SimulationState(cash=1.0, investment_balance=2.0)

    def test_returns_use_prior_balance(self, work_params):
        """Test returns are computed on the balance before this year's contribution."""
        config = CalculatorConfig(total_years=1, investment_portion=0.5, annual_return_rate=0.1)
        state = SimulationState(investment_balance=9_450, investment_principal=9_000)

        new_state, record = step(state, 2, work_params, config)

        assert record.investment_return_this_year == pytest.approx(1_395)
        assert new_state.investment_balance == pytest.approx(19_845)
        assert new_state.investment_principal == pytest.approx(18_000)


# ============================================================================
# PATH SIMULATOR
# ============================================================================

class TestPathSimulator:
    """Tests for PathSimulator.simulate()."""

    def test_record_count_and_years(self, work_params, zero_return_config):
        """Test exactly total_years records numbered 1..N."""
        records = PathSimulator(zero_return_config).simulate(work_params)

        assert len(records) == 5
        assert [r.year for r in records] == [1, 2, 3, 4, 5]
        assert all(isinstance(r, YearlyRecord) for r in records)

    def test_zero_return_linear_net_worth(self, work_params, zero_return_config):
        """Test net worth grows by disposable income each year without returns."""
        records = PathSimulator(zero_return_config).simulate(work_params)

        for k, record in enumerate(records, start=1):
            assert record.net_worth == pytest.approx(18_000 * k)
            assert record.cumulative_investment_balance == pytest.approx(9_000 * k)
            assert record.cumulative_investment_principal == pytest.approx(9_000 * k)
            assert record.cumulative_cash == pytest.approx(9_000 * k)
            assert record.investment_return_this_year == 0.0

    def test_quarter_tax_zero_return(self):
        """Test a 25% tax, 30,000 living cost path saves 15,000 a year."""
        params = PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.25)
        config = CalculatorConfig(total_years=5, investment_portion=0.5, annual_return_rate=0.0)
        records = PathSimulator(config).simulate(params)

        assert records[-1].net_worth == pytest.approx(75_000)

    def test_compounding(self, work_params):
        """Test the half-year credit and full-year return on prior balance."""
        config = CalculatorConfig(total_years=2, investment_portion=0.5, annual_return_rate=0.1)
        records = PathSimulator(config).simulate(work_params)

        assert records[0].investment_return_this_year == pytest.approx(450)
        assert records[0].cumulative_investment_balance == pytest.approx(9_450)
        assert records[0].net_worth == pytest.approx(18_450)
        assert records[1].investment_return_this_year == pytest.approx(1_395)
        assert records[1].cumulative_investment_balance == pytest.approx(19_845)

    def test_study_path(self, study_params, study_config):
        """Test the reference study path: cost years, then catching up."""
        records = PathSimulator(study_config).simulate(study_params)

        assert records[0].work_status == NOT_WORKING
        assert records[0].living_cost == pytest.approx(70_000)
        assert records[0].net_worth == pytest.approx(-50_000)
        assert records[1].net_worth == pytest.approx(-100_000)
        assert records[1].cumulative_cost_paid == pytest.approx(100_000)

        year3 = records[2]
        assert year3.work_year == 1
        assert year3.gross_income == pytest.approx(80_000)
        assert year3.net_income == pytest.approx(60_000)
        assert year3.disposable_income == pytest.approx(40_000)
        assert year3.investment_contribution_this_year == pytest.approx(8_000)
        assert year3.cash_saved_this_year == pytest.approx(32_000)
        assert year3.investment_return_this_year == pytest.approx(400)
        assert year3.cumulative_investment_balance == pytest.approx(8_400)
        assert year3.net_worth == pytest.approx(-59_600)

        assert records[3].net_worth == pytest.approx(-18_360)
        assert records[4].net_worth == pytest.approx(23_804)

    def test_first_year_opportunity_cost(self):
        """Test opportunity cost is invested in year 1 and never counted as cash."""
        params = PathParameters(
            initial_salary=40_000,
            living_cost=38_000,
            first_year_opportunity_cost=20_000,
        )
        config = CalculatorConfig(total_years=2, investment_portion=0.5, annual_return_rate=0.1)
        records = PathSimulator(config).simulate(params)

        year1 = records[0]
        assert year1.investment_contribution_this_year == pytest.approx(21_000)
        assert year1.cash_saved_this_year == pytest.approx(1_000)
        assert year1.investment_return_this_year == pytest.approx(1_050)
        assert year1.cumulative_investment_principal == pytest.approx(21_000)
        assert year1.net_worth == pytest.approx(23_050)

        assert records[1].investment_contribution_this_year == pytest.approx(1_000)

    def test_retirement_without_cost_is_all_zero(self):
        """Test a path that never works and has no cost tracks nothing."""
        params = PathParameters(work_start_delay=10, initial_salary=50_000, living_cost=20_000)
        records = PathSimulator(CalculatorConfig(total_years=5)).simulate(params)

        for record in records:
            assert record.gross_income == 0.0
            assert record.living_cost == 0.0
            assert record.net_worth == 0.0

    def test_net_worth_without_cost_ignores_cost_paid(self, work_params, zero_return_config):
        """Test net worth equals cash plus balance for a cost-free path."""
        for record in PathSimulator(zero_return_config).simulate(work_params):
            assert record.cumulative_cost_paid == 0.0
            assert record.net_worth == pytest.approx(
                record.cumulative_cash + record.cumulative_investment_balance
            )

    def test_net_worth_identity(self, study_params, study_config):
        """Test net worth = cash + balance - cost paid for every year."""
        for record in PathSimulator(study_config).simulate(study_params):
            assert record.net_worth == pytest.approx(
                record.cumulative_cash
                + record.cumulative_investment_balance
                - record.cumulative_cost_paid
            )

    def test_balances_never_decrease(self, study_params, study_config):
        """Test cumulative balance, principal and cash are non-decreasing."""
        records = PathSimulator(study_config).simulate(study_params)
        for prev, cur in zip(records, records[1:]):
            assert cur.cumulative_investment_balance >= prev.cumulative_investment_balance
            assert cur.cumulative_investment_principal >= prev.cumulative_investment_principal
            assert cur.cumulative_cash >= prev.cumulative_cash

    def test_zero_years(self, work_params):
        """Test a zero horizon yields no records."""
        assert PathSimulator(CalculatorConfig(total_years=0)).simulate(work_params) == []

    def test_default_config(self, work_params):
        """Test the simulator falls back to the default configuration."""
        sim = PathSimulator()
        assert sim.config == CalculatorConfig()
        assert len(sim.simulate(work_params)) == 10

    def test_deterministic(self, study_params, study_config):
        """Test identical inputs produce identical records."""
        sim = PathSimulator(study_config)
        assert sim.simulate(study_params) == sim.simulate(study_params)


# ============================================================================
# AMORTIZATION POLICY
# ============================================================================

class TestAmortizationPolicy:
    """Tests for unbounded vs bounded one-time cost charging."""

    @pytest.fixture
    def long_study(self) -> PathParameters:
        """Cost amortized over 2 years but 4 years without work."""
        return PathParameters(
            work_start_delay=4,
            initial_salary=50_000,
            living_cost=10_000,
            total_one_time_cost=100_000,
            cost_amortization_years=2,
        )

    def test_unbounded_charges_every_non_working_year(self, long_study):
        """Test the default policy keeps charging past the amortization period."""
        records = simulate_path(long_study, 4, 0.2, 0.1)

        assert records[3].cumulative_cost_paid == pytest.approx(200_000)
        assert records[3].living_cost == pytest.approx(60_000)
        assert records[3].net_worth == pytest.approx(-200_000)

    def test_bounded_stops_after_amortization_years(self, long_study):
        """Test the bounded policy charges the cost only cost_amortization_years times."""
        records = simulate_path(long_study, 4, 0.2, 0.1, amortization_policy="bounded")

        assert records[1].cumulative_cost_paid == pytest.approx(100_000)
        assert records[3].cumulative_cost_paid == pytest.approx(100_000)
        assert records[2].living_cost == pytest.approx(10_000)
        assert records[3].net_worth == pytest.approx(-100_000)

    def test_policies_agree_within_amortization_period(self, study_params):
        """Test both policies match when study lasts exactly the amortization period."""
        unbounded = simulate_path(study_params, 5, 0.2, 0.1)
        bounded = simulate_path(study_params, 5, 0.2, 0.1, amortization_policy="bounded")
        assert unbounded == bounded


# ============================================================================
# FUNCTIONAL ENTRY POINT AND EXPORT
# ============================================================================

class TestSimulatePath:
    """Tests for simulate_path()."""

    def test_matches_simulator(self, study_params, study_config):
        """Test simulate_path is equivalent to PathSimulator with the same knobs."""
        expected = PathSimulator(study_config).simulate(study_params)
        assert simulate_path(study_params, 5, 0.2, 0.1) == expected

    def test_invalid_portion(self, work_params):
        """Test out-of-range knobs are rejected by CalculatorConfig."""
        with pytest.raises(ValueError):
            simulate_path(work_params, 5, 1.5, 0.1)


class TestRecordsToFrame:
    """Tests for records_to_frame() and YearlyRecord.to_dict()."""

    def test_frame_shape(self, study_params, study_config):
        """Test one row per year, indexed by year, with all record columns."""
        df = records_to_frame(PathSimulator(study_config).simulate(study_params))

        assert isinstance(df, pd.DataFrame)
        assert df.index.name == "year"
        assert list(df.index) == [1, 2, 3, 4, 5]
        assert list(df.columns) == list(RECORD_COLUMNS)
        assert df.loc[3, "net_worth"] == pytest.approx(-59_600)

    def test_work_year_column(self, study_params, study_config):
        """Test work status is exported as the working-year ordinal."""
        df = records_to_frame(PathSimulator(study_config).simulate(study_params))
        assert pd.isna(df.loc[1, "work_year"])
        assert df.loc[3, "work_year"] == 1

    def test_empty(self):
        """Test empty records give an empty frame with the record columns."""
        df = records_to_frame([])
        assert df.empty
        assert list(df.columns) == list(RECORD_COLUMNS)

    def test_simulate_frame(self, work_params, zero_return_config):
        """Test PathSimulator.simulate_frame wraps records_to_frame."""
        df = PathSimulator(zero_return_config).simulate_frame(work_params)
        assert df["net_worth"].iloc[-1] == pytest.approx(90_000)

    def test_to_dict(self, work_params, zero_return_config):
        """Test to_dict replaces work_status with work_year."""
        record = PathSimulator(zero_return_config).simulate(work_params)[0]
        data = record.to_dict()

        assert "work_status" not in data
        assert data["work_year"] == 1
        assert data["net_worth"] == pytest.approx(18_000)
