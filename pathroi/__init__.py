"""
PathROI: Life Path Financial Comparison

Simulates the long-horizon financial outcome of alternative life paths
(e.g., studying abroad versus working immediately) and compares them by
net worth, ROI and break-even year.

Modules
-------
- params       : Validated, calculation-ready path parameters
- finances     : Work status and yearly income/cost figures
- investment   : Contribution split and return model
- simulation   : Year-by-year path simulation (step fold, PathSimulator)
- comparison   : Two-path comparison, ROI, break-even (ComparisonEngine)
- sweep        : Sensitivity sweeps over calculator settings
- profile      : Profile domain model
- serialization: Profile JSON files, comparison export
- store        : Directory-backed profile repository
- reporting    : Rich tables for terminal reports
- plotting     : Net worth comparison charts
- config       : Pydantic configuration and environment settings
- types        : TypedDicts for exported records and profile files
- utils        : Shared utilities (validation, finance helpers, formatting)

"""

__version__ = "0.1.0"

from .exceptions import (
    PathROIError,
    ConfigurationError,
    ValidationError,
    EmptyHorizonError,
    ProfileNotFoundError,
)
from .config import CalculatorConfig, AppSettings
from .params import PathParameters
from .finances import Working, NotWorking, resolve_work_status, compute_year_finances
from .investment import allocate_investment, investment_returns
from .simulation import YearlyRecord, PathSimulator, simulate_path, records_to_frame
from .comparison import (
    ComparisonRecord,
    ComparisonSummary,
    ComparisonEngine,
    RoiResult,
    compare_paths,
    final_roi,
    break_even_year,
)
from .sweep import sensitivity_sweep
from .profile import Profile, ProfileType, Location, WorkParams, FinancialParams, CostParams
from . import utils

__all__ = [
    "__version__",
    "PathROIError",
    "ConfigurationError",
    "ValidationError",
    "EmptyHorizonError",
    "ProfileNotFoundError",
    "CalculatorConfig",
    "AppSettings",
    "PathParameters",
    "Working",
    "NotWorking",
    "resolve_work_status",
    "compute_year_finances",
    "allocate_investment",
    "investment_returns",
    "YearlyRecord",
    "PathSimulator",
    "simulate_path",
    "records_to_frame",
    "ComparisonRecord",
    "ComparisonSummary",
    "ComparisonEngine",
    "RoiResult",
    "compare_paths",
    "final_roi",
    "break_even_year",
    "sensitivity_sweep",
    "Profile",
    "ProfileType",
    "Location",
    "WorkParams",
    "FinancialParams",
    "CostParams",
    "utils",
]
