"""
Custom exceptions for PathROI.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all PathROI modules. All exceptions inherit from PathROIError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
PathROIError (base)
├── ConfigurationError - Invalid path parameters or profile fields
├── ValidationError - Numeric domain or input validation failures
│   └── EmptyHorizonError - Derived figures requested from zero records
└── ProfileNotFoundError - Profile lookup failed in a ProfileStore

Usage
-----
>>> from pathroi.exceptions import ConfigurationError, EmptyHorizonError
>>>
>>> # Raise specific exception
>>> raise ConfigurationError("cost_amortization_years must be positive, got 0")
>>>
>>> # Catch all PathROI exceptions
>>> try:
...     summary = engine.summarize(params_a, params_b)
>>> except PathROIError as e:
...     print(f"PathROI error: {e}")
"""


class PathROIError(Exception):
    """
    Base exception for all PathROI errors.

    Examples
    --------
    >>> try:
    ...     engine.final_roi(params_a, params_b)
    ... except PathROIError as e:
    ...     logger.error(f"Comparison failed: {e}")
    """
    pass


class ConfigurationError(PathROIError):
    """
    Invalid configuration or parameters.

    Raised eagerly when PathParameters (or a Profile) cannot describe a
    well-defined simulation, such as:
    - One-time cost given without an amortization-year count (or vice versa)
    - Amortization-year count of zero while a cost is present
    - Negative amounts, delays or limits; growth rates <= -1

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "total_one_time_cost and cost_amortization_years must be given "
    ...     "together (got total_one_time_cost=100000.0, cost_amortization_years=None)"
    ... )
    """
    pass


class ValidationError(PathROIError):
    """
    Input validation failures.

    Raised when numeric inputs fall outside the domain of a calculation:
    - Non-positive initial investment for ROI
    - Non-positive duration for CAGR
    - Non-positive current/target values

    Examples
    --------
    >>> raise ValidationError(
    ...     f"years must be positive, got {years}. "
    ...     f"CAGR is undefined over a zero-length period."
    ... )
    """
    pass


class EmptyHorizonError(ValidationError):
    """
    Derived figures requested from an empty record sequence.

    A zero-year horizon is valid and simulates to an empty sequence, but
    final ROI and break-even analysis need at least one year of data.

    Examples
    --------
    >>> raise EmptyHorizonError(
    ...     "final_roi requires at least one comparison record (total_years=0)"
    ... )
    """
    pass


class ProfileNotFoundError(PathROIError):
    """
    Profile lookup failure.

    Raised by ProfileStore when no stored profile matches an id or name.
    """
    pass
