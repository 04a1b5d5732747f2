"""
Global constants for PathROI.

Purpose
-------
Centralizes default values and magic numbers used throughout the PathROI
codebase.

Usage
-----
>>> from pathroi.constants import DEFAULT_TOTAL_YEARS, DEFAULT_FIGSIZE
>>>
>>> config = CalculatorConfig(total_years=DEFAULT_TOTAL_YEARS)
>>> fig, ax = plt.subplots(figsize=DEFAULT_FIGSIZE)

Categories
----------
- Calculator: horizon, investment share, market return
- Investment: intra-year contribution credit
- Plotting: figure sizes, line widths
"""

from typing import Tuple

__all__ = [
    # Calculator
    "DEFAULT_TOTAL_YEARS",
    "DEFAULT_INVESTMENT_PORTION",
    "DEFAULT_ANNUAL_RETURN_RATE",
    "DEFAULT_AMORTIZATION_POLICY",
    "MAX_TOTAL_YEARS",
    # Investment
    "NEW_CONTRIBUTION_RETURN_FACTOR",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_DPI",
    # Profiles
    "DEFAULT_CURRENCY",
]


# =============================================================================
# Calculator Defaults
# =============================================================================

DEFAULT_TOTAL_YEARS: int = 10
"""Default analysis horizon in years."""

DEFAULT_INVESTMENT_PORTION: float = 0.20
"""Default share of disposable income that is invested (20%)."""

DEFAULT_ANNUAL_RETURN_RATE: float = 0.10
"""Default annual market return (long-run S&P 500 approximation)."""

DEFAULT_AMORTIZATION_POLICY: str = "unbounded"
"""Default one-time cost amortization policy.

Options: "unbounded" (charge every non-working year), "bounded" (charge only
the first cost_amortization_years non-working years).
"""

MAX_TOTAL_YEARS: int = 500
"""Upper bound accepted for the analysis horizon."""


# =============================================================================
# Investment
# =============================================================================

NEW_CONTRIBUTION_RETURN_FACTOR: float = 0.5
"""Fraction of a year of return credited to contributions made this year.

Approximates monthly deployment: on average new money is held six months.
"""


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 8)
"""Default figure size (width, height) in inches for comparison charts."""

DEFAULT_LINEWIDTH: float = 2.5
"""Line width for net worth trajectories."""

DEFAULT_DPI: int = 150
"""Resolution used when saving charts."""


# =============================================================================
# Profiles
# =============================================================================

DEFAULT_CURRENCY: str = "USD"
"""Reference currency for all monetary values."""
