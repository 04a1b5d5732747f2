"""
Unit tests for investment.py module.
"""

import pytest

from pathroi.investment import allocate_investment, investment_returns
from pathroi.params import PathParameters


class TestAllocateInvestment:
    """Tests for allocate_investment()."""

    def test_split(self, work_params):
        """Test disposable income is split by the investment portion."""
        contribution, cash = allocate_investment(1, 18_000, work_params, 0.5)
        assert contribution == pytest.approx(9_000)
        assert cash == pytest.approx(9_000)

    def test_zero_portion(self, work_params):
        """Test portion 0 keeps everything as cash."""
        contribution, cash = allocate_investment(2, 10_000, work_params, 0.0)
        assert contribution == 0.0
        assert cash == pytest.approx(10_000)

    def test_full_portion(self, work_params):
        """Test portion 1 invests everything."""
        contribution, cash = allocate_investment(2, 10_000, work_params, 1.0)
        assert contribution == pytest.approx(10_000)
        assert cash == 0.0

    def test_opportunity_cost_year_one(self):
        """Test opportunity cost is added to the year-1 contribution only."""
        params = PathParameters(first_year_opportunity_cost=20_000)

        contribution, cash = allocate_investment(1, 2_000, params, 0.5)
        assert contribution == pytest.approx(21_000)
        assert cash == pytest.approx(1_000)

        contribution, cash = allocate_investment(2, 2_000, params, 0.5)
        assert contribution == pytest.approx(1_000)
        assert cash == pytest.approx(1_000)

    def test_opportunity_cost_with_zero_disposable(self):
        """Test opportunity cost is invested even with no disposable income."""
        params = PathParameters(first_year_opportunity_cost=5_000)
        contribution, cash = allocate_investment(1, 0.0, params, 0.2)
        assert contribution == pytest.approx(5_000)
        assert cash == 0.0


class TestInvestmentReturns:
    """Tests for investment_returns()."""

    def test_prior_balance_full_year(self):
        """Test prior balance earns a full year of return."""
        on_existing, on_new = investment_returns(10_000, 0.0, 0.1)
        assert on_existing == pytest.approx(1_000)
        assert on_new == 0.0

    def test_new_money_half_year(self):
        """Test new contributions earn half a year of return."""
        on_existing, on_new = investment_returns(0.0, 9_000, 0.1)
        assert on_existing == 0.0
        assert on_new == pytest.approx(450)

    def test_combined(self):
        """Test year-2 returns of the 9,000/yr reference path at 10%."""
        on_existing, on_new = investment_returns(9_450, 9_000, 0.1)
        assert on_existing + on_new == pytest.approx(1_395)

    def test_zero_rate(self):
        """Test zero rate yields no return."""
        assert investment_returns(50_000, 10_000, 0.0) == (0.0, 0.0)
