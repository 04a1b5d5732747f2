"""
Pytest configuration and fixtures for PathROI test suite.

This module provides reusable fixtures for testing all PathROI components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.

Reference numbers
-----------------
work_params (salary 60,000, living 30,000, tax 20%, portion 0.5, rate 0):
    every year gross 60,000 / net 48,000 / disposable 18,000,
    contribution 9,000, cash 9,000; net worth after year k = 18,000 * k.

study_params (cost 100,000 over 2 years, delay 2, salary 80,000,
living 20,000, tax 25%, portion 0.2, rate 0.1):
    years 1-2 living cost 70,000, net worth -50,000 then -100,000;
    year 3 contribution 8,000, cash 32,000, return 400, net worth -59,600.
"""

import json
from pathlib import Path

import pytest

from pathroi.config import CalculatorConfig
from pathroi.params import PathParameters
from pathroi.profile import (
    Profile,
    ProfileType,
    Location,
    WorkParams,
    FinancialParams,
    CostParams,
)


# ---------------------------------------------------------------------------
# Calculator Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def zero_return_config() -> CalculatorConfig:
    """Half of disposable income invested, no market return."""
    return CalculatorConfig(total_years=5, investment_portion=0.5, annual_return_rate=0.0)


@pytest.fixture
def study_config() -> CalculatorConfig:
    """Default-like configuration used with study_params."""
    return CalculatorConfig(total_years=5, investment_portion=0.2, annual_return_rate=0.1)


# ---------------------------------------------------------------------------
# Path Parameter Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def work_params() -> PathParameters:
    """
    Immediate work, flat salary.

    Salary: 60,000/yr, no growth
    Living cost: 30,000/yr, no growth
    Tax: 20%
    """
    return PathParameters(initial_salary=60_000, living_cost=30_000, tax_rate=0.2)


@pytest.fixture
def study_params() -> PathParameters:
    """
    Two years of study with a 100,000 one-time cost, then work.

    Salary: 80,000/yr from year 3
    Living cost: 20,000/yr (plus 50,000/yr amortized cost while studying)
    Tax: 25%
    """
    return PathParameters(
        work_start_delay=2,
        initial_salary=80_000,
        living_cost=20_000,
        tax_rate=0.25,
        total_one_time_cost=100_000,
        cost_amortization_years=2,
    )


# ---------------------------------------------------------------------------
# Profile Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def study_profile() -> Profile:
    """Education profile matching study_params."""
    return Profile.create(
        name="Study Abroad",
        profile_type=ProfileType.EDUCATION,
        location=Location(country="USA", city="Tempe"),
        work_params=WorkParams(start_delay=2),
        financial_params=FinancialParams(
            initial_salary_usd=80_000,
            living_cost_usd=20_000,
            tax_rate=0.25,
        ),
    ).with_cost_params(CostParams(total_cost_usd=100_000, cost_duration=2))


@pytest.fixture
def work_profile() -> Profile:
    """Work profile matching work_params."""
    return Profile.create(
        name="Work Now",
        profile_type=ProfileType.WORK,
        location=Location(country="China", city="Shanghai", currency="CNY"),
        work_params=WorkParams(start_delay=0),
        financial_params=FinancialParams(
            initial_salary_usd=60_000,
            living_cost_usd=30_000,
            tax_rate=0.2,
        ),
    )


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def study_profile_dict() -> dict:
    """Profile file content for the study path."""
    return {
        "schema_version": "0.1.0",
        "name": "Study Abroad",
        "profile_type": "Education",
        "location": {"country": "USA", "city": "Tempe", "currency": "usd"},
        "work": {"start_delay": 2},
        "financial": {
            "initial_salary_usd": 80000,
            "living_cost_usd": 20000,
            "tax_rate": 0.25,
        },
        "cost": {"total_cost_usd": 100000, "cost_duration": 2},
    }


@pytest.fixture
def work_profile_dict() -> dict:
    """Profile file content for the work path."""
    return {
        "schema_version": "0.1.0",
        "name": "Work Now",
        "profile_type": "Work",
        "location": {"country": "China", "city": "Shanghai", "currency": "CNY"},
        "financial": {
            "initial_salary_usd": 60000,
            "living_cost_usd": 30000,
            "tax_rate": 0.2,
        },
    }


@pytest.fixture
def study_profile_file(tmp_path, study_profile_dict) -> Path:
    path = tmp_path / "study.json"
    path.write_text(json.dumps(study_profile_dict))
    return path


@pytest.fixture
def work_profile_file(tmp_path, work_profile_dict) -> Path:
    path = tmp_path / "work.json"
    path.write_text(json.dumps(work_profile_dict))
    return path
