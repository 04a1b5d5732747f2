"""
Command-Line Interface for PathROI.

Purpose
-------
Runs path simulations, two-path comparisons and sensitivity sweeps on
profile files (or profiles kept in a ProfileStore) without writing Python
code.

Commands
--------
- simulate: Year-by-year projection of one profile
- compare: Compare two profiles (tables, ROI, break-even year, chart)
- sweep: Re-run a comparison over values of one calculator setting
- profile: Create, show, validate, list, import and delete profiles
- info: Version and dependency information

Example Usage
-------------
    # Compare two profile files over 15 years at 7% return
    $ pathroi compare study.json work.json --years 15 --return-rate 0.07

    # Compare stored profiles by name and save a chart
    $ pathroi compare "Study Abroad" "Work Now" --chart

    # Sweep the return rate
    $ pathroi sweep study.json work.json --field annual_return_rate --values 0.04,0.07,0.10

    # Create a starter profile
    $ pathroi profile create study.json --template education
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config import AppSettings, CalculatorConfig
from .constants import (
    DEFAULT_ANNUAL_RETURN_RATE,
    DEFAULT_INVESTMENT_PORTION,
    DEFAULT_TOTAL_YEARS,
)
from .exceptions import PathROIError

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings, verbose: bool = False) -> None:
    level = "DEBUG" if verbose else settings.effective_log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> None:
    click.echo(message, err=True)
    sys.exit(1)


def calculator_options(func):
    """Shared --years/--portion/--return-rate/--policy options."""
    options = [
        click.option("--years", "-y", type=int, default=DEFAULT_TOTAL_YEARS,
                     show_default=True, help="Analysis horizon in years"),
        click.option("--portion", "-p", type=float, default=DEFAULT_INVESTMENT_PORTION,
                     show_default=True, help="Share of disposable income invested"),
        click.option("--return-rate", "-r", type=float, default=DEFAULT_ANNUAL_RETURN_RATE,
                     show_default=True, help="Annual investment return (fraction)"),
        click.option("--policy", type=click.Choice(["unbounded", "bounded"]),
                     default="unbounded", show_default=True,
                     help="One-time cost amortization policy"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _calculator_config(years: int, portion: float, return_rate: float, policy: str) -> CalculatorConfig:
    try:
        return CalculatorConfig(
            total_years=years,
            investment_portion=portion,
            annual_return_rate=return_rate,
            amortization_policy=policy,
        )
    except ValueError as e:
        _fail(f"Invalid calculator settings: {e}")


def _load_profile_ref(ref: str, settings: AppSettings):
    """Load a profile from a file path, or from the profile store by id/name."""
    from .serialization import load_profile
    from .store import ProfileStore

    path = Path(ref)
    if path.exists():
        return load_profile(path)
    return ProfileStore(settings.profiles_dir).resolve(ref)


@click.group()
@click.version_option(version=__version__, prog_name="pathroi")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    PathROI - compare long-horizon financial outcomes of life paths.

    Simulates income, cost, savings and investment growth year by year
    and reports net worth, ROI and break-even year for two profiles.

    Use 'pathroi COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    configure_logging(settings, verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


@main.command()
@click.argument("profile_ref")
@calculator_options
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the yearly records as CSV"
)
@click.pass_context
def simulate(
    ctx: click.Context,
    profile_ref: str,
    years: int,
    portion: float,
    return_rate: float,
    policy: str,
    output: Optional[Path],
) -> None:
    """
    Project one profile year by year.

    PROFILE_REF is a profile JSON file or the id/name of a stored profile.

    Example:
        pathroi simulate study.json --years 20
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]

    from .reporting import yearly_records_table
    from .simulation import PathSimulator, records_to_frame

    config = _calculator_config(years, portion, return_rate, policy)
    try:
        profile = _load_profile_ref(profile_ref, ctx.obj["settings"])
        records = PathSimulator(config).simulate(profile.to_path_params())
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error during simulation: {e}")

    if not quiet:
        console.print(yearly_records_table(records, title=f"{profile.name}: {years}-Year Projection"))

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        records_to_frame(records).to_csv(output)
        if not quiet:
            click.echo(f"Records saved to {output}")


@main.command()
@click.argument("first_ref")
@click.argument("second_ref")
@calculator_options
@click.option("--chart", is_flag=True, help="Save a net worth comparison chart (PNG)")
@click.option(
    "--chart-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Chart file (default: <chart_dir>/<A>_vs_<B>_comparison.png)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save comparison records (.csv for net worth table, otherwise JSON)"
)
@click.pass_context
def compare(
    ctx: click.Context,
    first_ref: str,
    second_ref: str,
    years: int,
    portion: float,
    return_rate: float,
    policy: str,
    chart: bool,
    chart_path: Optional[Path],
    output: Optional[Path],
) -> None:
    """
    Compare two profiles.

    Prints the parameter table, yearly net worth of both paths, final ROI
    and the year (if any) in which the first path catches up.

    Example:
        pathroi compare study.json work.json -y 15 -r 0.07 --chart
    """
    console = ctx.obj["console"]
    quiet = ctx.obj["quiet"]
    settings = ctx.obj["settings"]

    from .comparison import ComparisonEngine
    from .reporting import (
        profile_parameters_table,
        yearly_comparison_table,
        roi_summary_table,
        break_even_text,
        conclusion_text,
    )
    from .serialization import save_comparison

    config = _calculator_config(years, portion, return_rate, policy)
    try:
        first = _load_profile_ref(first_ref, settings)
        second = _load_profile_ref(second_ref, settings)
        summary = ComparisonEngine(config).summarize_profiles(first, second)
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error during comparison: {e}")

    if not quiet:
        console.print(f"[bold]=== {first.name} vs {second.name} ROI Analysis ===[/bold]")
        console.print(profile_parameters_table(first, second))
        console.print(yearly_comparison_table(summary.records))
        console.print(roi_summary_table(summary))
        console.print(break_even_text(summary))
    click.echo(conclusion_text(summary))

    if output:
        save_comparison(summary.records, output)
        if not quiet:
            click.echo(f"Comparison saved to {output}")

    if chart:
        from .plotting import chart_filename, plot_net_worth_comparison

        target = chart_path or settings.chart_dir / chart_filename(first.name, second.name)
        target.parent.mkdir(parents=True, exist_ok=True)
        plot_net_worth_comparison(summary.records, save_path=str(target))
        if not quiet:
            click.echo(f"Chart saved to {target}")


@main.command()
@click.argument("first_ref")
@click.argument("second_ref")
@calculator_options
@click.option(
    "--field", "-f",
    type=click.Choice(["total_years", "investment_portion", "annual_return_rate", "amortization_policy"]),
    required=True,
    help="Calculator setting to vary"
)
@click.option("--values", required=True, help="Comma-separated values (e.g., '0.04,0.07,0.10')")
@click.option("--workers", type=int, default=None, help="Run variants on a thread pool")
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Save the sweep table as CSV"
)
@click.pass_context
def sweep(
    ctx: click.Context,
    first_ref: str,
    second_ref: str,
    years: int,
    portion: float,
    return_rate: float,
    policy: str,
    field: str,
    values: str,
    workers: Optional[int],
    output: Optional[Path],
) -> None:
    """
    Sensitivity sweep over one calculator setting.

    Example:
        pathroi sweep study.json work.json -f annual_return_rate --values 0.04,0.07,0.10
    """
    quiet = ctx.obj["quiet"]
    settings = ctx.obj["settings"]

    from .sweep import sensitivity_sweep

    base = _calculator_config(years, portion, return_rate, policy)
    raw_values = [v.strip() for v in values.split(",") if v.strip()]
    if not raw_values:
        _fail("Error: --values must contain at least one value")

    try:
        first = _load_profile_ref(first_ref, settings)
        second = _load_profile_ref(second_ref, settings)
        df = sensitivity_sweep(
            first.to_path_params(),
            second.to_path_params(),
            base,
            field,
            raw_values,
            labels=(first.name, second.name),
            max_workers=workers,
        )
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error during sweep: {e}")

    if not quiet:
        click.echo(df.to_string())

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output)
        if not quiet:
            click.echo(f"Sweep saved to {output}")


# ---------------------------------------------------------------------------
# Profile management
# ---------------------------------------------------------------------------

PROFILE_TEMPLATES = {
    "education": {
        "name": "Study Abroad",
        "profile_type": "Education",
        "location": {"country": "USA", "city": "Tempe", "currency": "USD"},
        "work": {"start_delay": 2, "duration_limit": None},
        "financial": {
            "initial_salary_usd": 90000,
            "salary_growth_rate": 0.05,
            "living_cost_usd": 25000,
            "living_cost_growth": 0.03,
            "tax_rate": 0.25,
        },
        "cost": {"total_cost_usd": 80000, "cost_duration": 2},
        "description": "Two-year master's degree, then work locally",
    },
    "work": {
        "name": "Work Now",
        "profile_type": "Work",
        "location": {"country": "China", "city": "Shanghai", "currency": "CNY"},
        "work": {"start_delay": 0, "duration_limit": None},
        "financial": {
            "initial_salary_usd": 30000,
            "salary_growth_rate": 0.08,
            "living_cost_usd": 12000,
            "living_cost_growth": 0.03,
            "tax_rate": 0.2,
        },
        "first_year_opportunity_cost": 80000,
        "description": "Start working immediately and invest the saved tuition",
    },
}


@main.group()
def profile() -> None:
    """
    Profile management commands.

    Create, inspect, validate and store profile files.
    """
    pass


@profile.command("create")
@click.argument("output_file", type=click.Path(path_type=Path))
@click.option("--template", "-t", type=click.Choice(["education", "work"]), default="education")
@click.option("--name", "-n", default=None, help="Override the template's profile name")
@click.pass_context
def profile_create(ctx: click.Context, output_file: Path, template: str, name: Optional[str]) -> None:
    """
    Create a new profile file from a template.

    Example:
        pathroi profile create study.json --template education --name "ASU Masters"
    """
    quiet = ctx.obj["quiet"]

    from .serialization import profile_from_dict, save_profile

    data = dict(PROFILE_TEMPLATES[template])
    if name:
        data["name"] = name
    new_profile = profile_from_dict(data)
    save_profile(new_profile, output_file)

    if not quiet:
        click.echo(f"Created profile file: {output_file}")


@profile.command("show")
@click.argument("profile_ref")
@click.option("--format", "-f", "fmt", type=click.Choice(["json", "table"]), default="table")
@click.pass_context
def profile_show(ctx: click.Context, profile_ref: str, fmt: str) -> None:
    """
    Display a profile's details.

    Example:
        pathroi profile show study.json --format json
    """
    console = ctx.obj["console"]

    from .serialization import profile_to_dict
    from .reporting import profile_parameters_table

    try:
        loaded = _load_profile_ref(profile_ref, ctx.obj["settings"])
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error loading profile: {e}")

    if fmt == "json":
        click.echo(json.dumps(profile_to_dict(loaded), indent=2))
        return

    table = profile_parameters_table(loaded)
    table.title = f"Profile: {loaded.name}"
    console.print(table)
    if loaded.description:
        console.print(f"[italic]{loaded.description}[/italic]")


@profile.command("validate")
@click.argument("profile_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def profile_validate(ctx: click.Context, profile_file: Path) -> None:
    """
    Validate a profile file.

    Checks the JSON schema and that the profile yields valid path
    parameters (e.g., a one-time cost with a positive amortization period).
    """
    from .serialization import load_profile

    try:
        loaded = load_profile(profile_file)
        loaded.to_path_params()
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Profile validation failed: {e}")

    if not ctx.obj["quiet"]:
        click.echo(f"Profile '{loaded.name}' is valid")


@profile.command("import")
@click.argument("profile_file", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def profile_import(ctx: click.Context, profile_file: Path) -> None:
    """Validate a profile file and add it to the profile store."""
    from .serialization import load_profile
    from .store import ProfileStore

    try:
        loaded = load_profile(profile_file)
        loaded.to_path_params()
        path = ProfileStore(ctx.obj["settings"].profiles_dir).save(loaded)
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Import failed: {e}")

    if not ctx.obj["quiet"]:
        click.echo(f"Stored profile '{loaded.name}' ({loaded.id}) at {path}")


@profile.command("list")
@click.option(
    "--name", "name_pattern", default=None, help="Only names containing this text (case-insensitive)"
)
@click.option(
    "--type",
    "profile_type",
    type=click.Choice(["Education", "Work"]),
    default=None,
    help="Only profiles of this type",
)
@click.pass_context
def profile_list(
    ctx: click.Context, name_pattern: Optional[str], profile_type: Optional[str]
) -> None:
    """List profiles in the profile store."""
    console = ctx.obj["console"]
    settings = ctx.obj["settings"]

    from rich.table import Table
    from .store import ProfileStore

    store = ProfileStore(settings.profiles_dir)
    try:
        if name_pattern is not None:
            profiles = store.search(name_pattern)
        elif profile_type is not None:
            profiles = store.by_type(profile_type)
        else:
            profiles = store.list()
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error reading profile store: {e}")

    if name_pattern is not None and profile_type is not None:
        profiles = [p for p in profiles if p.profile_type.value == profile_type]

    if not profiles:
        if name_pattern is None and profile_type is None:
            click.echo(f"No profiles stored in {settings.profiles_dir}")
        else:
            click.echo("No matching profiles")
        return

    table = Table(title="Stored Profiles", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Location")
    table.add_column("ID")
    for p in profiles:
        table.add_row(p.name, str(p.profile_type), str(p.location), str(p.id))
    console.print(table)


@profile.command("delete")
@click.argument("profile_ref")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def profile_delete(ctx: click.Context, profile_ref: str, yes: bool) -> None:
    """Delete a stored profile by id or name."""
    from .store import ProfileStore

    store = ProfileStore(ctx.obj["settings"].profiles_dir)
    try:
        target = store.resolve(profile_ref)
    except (PathROIError, ValueError, OSError) as e:
        _fail(f"Error: {e}")

    if not yes and not click.confirm(f"Delete profile '{target.name}'?"):
        click.echo("Aborted")
        return
    store.delete(target.id)
    if not ctx.obj["quiet"]:
        click.echo(f"Deleted profile '{target.name}'")


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """
    Display system and package information.
    """
    console = ctx.obj["console"]
    settings = ctx.obj["settings"]

    info_lines = [
        f"PathROI Version: {__version__}",
        f"Python: {sys.version.split()[0]}",
        f"Profiles directory: {settings.profiles_dir}",
    ]

    for name in ("numpy", "pandas", "pydantic", "click", "rich", "matplotlib"):
        mod = __import__(name)
        info_lines.append(f"{name}: {getattr(mod, '__version__', 'installed')}")

    from rich.panel import Panel
    console.print(Panel("\n".join(info_lines), title="System Information"))


if __name__ == "__main__":
    main()
