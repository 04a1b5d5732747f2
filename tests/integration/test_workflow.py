"""
Integration tests for complete PathROI workflows.

Tests end-to-end flows: profile files → store → comparison → export,
and sweeps built on stored profiles.
"""

import json

import numpy as np
import pandas as pd
import pytest

from pathroi import (
    CalculatorConfig,
    ComparisonEngine,
    PathParameters,
    sensitivity_sweep,
)
from pathroi.serialization import load_profile, save_comparison, save_profile
from pathroi.store import ProfileStore


class TestProfileToComparisonWorkflow:
    """Files on disk through to exported comparison."""

    def test_full_workflow(self, tmp_path, study_profile_file, work_profile_file):
        """Test load → store → resolve → summarize → export."""
        store = ProfileStore(tmp_path / "store")
        store.save(load_profile(study_profile_file))
        store.save(load_profile(work_profile_file))

        study = store.resolve("Study Abroad")
        work = store.resolve("Work Now")

        config = CalculatorConfig(total_years=5, investment_portion=0.2, annual_return_rate=0.1)
        summary = ComparisonEngine(config).summarize_profiles(study, work)

        assert summary.final_net_worth_first == pytest.approx(23_804)
        assert summary.final_net_worth_second == pytest.approx(95_077.278)
        assert summary.break_even_year is None

        csv_path = tmp_path / "exports" / "comparison.csv"
        save_comparison(summary.records, csv_path)
        df = pd.read_csv(csv_path, index_col="year")
        assert df["gap"].iloc[-1] == pytest.approx(95_077.278 - 23_804)

    def test_profile_edit_changes_outcome(self, tmp_path, study_profile):
        """Test a cheaper program improves the study path's final ROI."""
        path = tmp_path / "study.json"
        save_profile(study_profile, path)

        data = json.loads(path.read_text())
        data["cost"]["total_cost_usd"] = 50_000
        path.write_text(json.dumps(data))

        cheaper = load_profile(path)
        engine = ComparisonEngine(CalculatorConfig(total_years=10))
        baseline = PathParameters()
        full_price_nw = engine.summarize(study_profile.to_path_params(), baseline).final_net_worth_first
        cheaper_nw = engine.summarize(cheaper.to_path_params(), baseline).final_net_worth_first

        assert cheaper_nw == pytest.approx(full_price_nw + 50_000)


class TestSweepWorkflow:
    """Sensitivity analysis over realistic settings."""

    def test_higher_returns_favour_early_investor(self, study_params):
        """Test the opportunity-cost path gains relative ROI as returns rise."""
        investor = PathParameters(
            initial_salary=30_000,
            salary_growth_rate=0.08,
            living_cost=12_000,
            living_cost_growth=0.03,
            tax_rate=0.2,
            first_year_opportunity_cost=100_000,
        )
        base = CalculatorConfig(total_years=20)
        df = sensitivity_sweep(
            study_params, investor, base, "annual_return_rate", np.linspace(0.0, 0.12, 4)
        )

        gaps = df["final_net_worth_second"] - df["final_net_worth_first"]
        assert gaps.is_monotonic_increasing

    def test_longer_horizon_never_shrinks_balances(self, study_params, work_params):
        """Test final net worth of a cost-free path grows with the horizon."""
        df = sensitivity_sweep(
            study_params, work_params, CalculatorConfig(), "total_years", [5, 10, 20]
        )
        assert df["final_net_worth_second"].is_monotonic_increasing
