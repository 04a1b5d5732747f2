"""General utilities for PathROI

Contents
--------
- Validation helpers
- Finance helpers (simple ROI, CAGR, years to target)
- Formatting helpers (format_currency, format_percent)
- Matplotlib formatters (millions_formatter)
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from .exceptions import ConfigurationError, ValidationError

__all__ = [
    # Validation
    "check_non_negative",
    "check_finite",
    # Finance
    "simple_roi",
    "compute_cagr",
    "years_to_target",
    # Formatting
    "format_currency",
    "format_percent",
    "millions_formatter",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: Optional[float]) -> None:
    """Raise ConfigurationError if *value* is negative (None is accepted)."""
    if value is not None and value < 0:
        raise ConfigurationError(f"{name} must be non-negative (got {value}).")


def check_finite(name: str, value: Optional[float]) -> None:
    """Raise ConfigurationError if *value* is NaN or infinite (None is accepted)."""
    if value is not None and not np.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number (got {value}).")


# ---------------------------------------------------------------------------
# Finance helpers
# ---------------------------------------------------------------------------

def simple_roi(initial_investment: float, final_value: float) -> float:
    """Return on investment as a fraction: (final - initial) / initial.

    Raises
    ------
    ValidationError
        If *initial_investment* is zero or negative.

    Examples
    --------
    >>> simple_roi(100_000, 150_000)
    0.5
    """
    if initial_investment <= 0:
        raise ValidationError(
            f"initial_investment must be positive, got {initial_investment}. "
            f"ROI is undefined without capital deployed."
        )
    return float((final_value - initial_investment) / initial_investment)


def compute_cagr(initial_value: float, final_value: float, years: float) -> float:
    """Compound annual growth rate between two positive values.

    Uses: (final / initial) ** (1 / years) - 1.

    Raises
    ------
    ValidationError
        If *initial_value* or *final_value* is not positive, or *years* is
        not positive. A non-positive ratio would produce a complex root.
    """
    if years <= 0:
        raise ValidationError(
            f"years must be positive, got {years}. "
            f"CAGR is undefined over a zero-length period."
        )
    if initial_value <= 0:
        raise ValidationError(f"initial_value must be positive, got {initial_value}.")
    if final_value <= 0:
        raise ValidationError(f"final_value must be positive, got {final_value}.")
    return float((final_value / initial_value) ** (1.0 / years) - 1.0)


def years_to_target(current_value: float, target_value: float, annual_rate: float) -> float:
    """Years of compounding at *annual_rate* needed to grow current into target.

    Returns 0.0 when the target is already reached.

    Raises
    ------
    ValidationError
        If either value is not positive, or if the target lies above the
        current value while *annual_rate* <= 0 (never reached).
    """
    if current_value <= 0:
        raise ValidationError(f"current_value must be positive, got {current_value}.")
    if target_value <= 0:
        raise ValidationError(f"target_value must be positive, got {target_value}.")
    if target_value <= current_value:
        return 0.0
    if annual_rate <= 0:
        raise ValidationError(
            f"annual_rate must be positive to reach a higher target, got {annual_rate}."
        )
    return float(math.log(target_value / current_value) / math.log1p(annual_rate))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_currency(amount: float, symbol: str = "$") -> str:
    """
    Format a monetary amount compactly for tables and annotations.

    Rules
    -----
    - |amount| < 0.01        → "$0"
    - |amount| >= 1,000,000  → "$1.2M"
    - |amount| >= 1,000      → "$45.3K"
    - otherwise              → "$512"

    Negative amounts keep their sign after the symbol ("$-50.0K").

    Examples
    --------
    >>> format_currency(1_250_000)
    '$1.2M'
    >>> format_currency(-50_000)
    '$-50.0K'
    """
    if abs(amount) < 0.01:
        return f"{symbol}0"
    if abs(amount) >= 1_000_000:
        return f"{symbol}{amount / 1_000_000:.1f}M"
    if abs(amount) >= 1_000:
        return f"{symbol}{amount / 1_000:.1f}K"
    return f"{symbol}{amount:.0f}"


def format_percent(fraction: float, decimals: int = 2) -> str:
    """Format a fractional value as a percentage string (0.125 → '12.50%')."""
    return f"{fraction * 100:.{decimals}f}%"


def millions_formatter(x, pos):
    """
    Format axis values as millions for matplotlib FuncFormatter.

    - 2_500_000 → "2.5M"
    - 3_000_000 → "3M"
    - 0 → "0"

    Examples
    --------
    >>> from matplotlib.ticker import FuncFormatter
    >>> ax.yaxis.set_major_formatter(FuncFormatter(millions_formatter))
    """
    if x == 0:
        return '0'
    val = x / 1e6
    return f'{val:.0f}M' if val == int(val) else f'{val:.1f}M'
