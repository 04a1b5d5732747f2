"""
Plotting utilities for PathROI comparisons.

Purpose
-------
Draws net worth trajectories of two compared paths on one chart and
optionally saves it as an image, mirroring the PNG chart produced after
each profile comparison.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .comparison import ComparisonRecord
from .constants import DEFAULT_DPI, DEFAULT_FIGSIZE, DEFAULT_LINEWIDTH
from .exceptions import EmptyHorizonError
from .utils import millions_formatter

__all__ = ["plot_net_worth_comparison", "chart_filename"]


def chart_filename(first_label: str, second_label: str) -> str:
    """'Study Abroad', 'Work' -> 'Study_Abroad_vs_Work_comparison.png'."""
    return f"{first_label.replace(' ', '_')}_vs_{second_label.replace(' ', '_')}_comparison.png"


def plot_net_worth_comparison(
    records: Sequence[ComparisonRecord],
    *,
    figsize: Tuple[int, int] = DEFAULT_FIGSIZE,
    title: Optional[str] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Plot both paths' net worth by year.

    Parameters
    ----------
    records : sequence of ComparisonRecord
        Output of ComparisonEngine.compare (must be non-empty).
    figsize : (int, int)
        Figure size in inches.
    title : str, optional
        Defaults to "<first> vs <second> Net Worth".
    save_path : str, optional
        Save the figure to this path (PNG by extension).
    return_fig_ax : bool, default False
        Return (fig, ax) instead of None.

    Raises
    ------
    EmptyHorizonError
        If `records` is empty.
    """
    if not records:
        raise EmptyHorizonError("Cannot plot a comparison with no records (total_years=0).")

    import matplotlib.pyplot as plt
    from matplotlib.ticker import FuncFormatter

    first_label = records[0].first_label
    second_label = records[0].second_label
    years = [r.year for r in records]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(years, [r.first.net_worth for r in records],
            color="tab:red", label=first_label, linewidth=DEFAULT_LINEWIDTH)
    ax.plot(years, [r.second.net_worth for r in records],
            color="tab:blue", label=second_label, linewidth=DEFAULT_LINEWIDTH)
    ax.axhline(0.0, color="gray", linewidth=0.8, linestyle="--")

    ax.yaxis.set_major_formatter(FuncFormatter(millions_formatter))
    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Net Worth (USD)", fontsize=11)
    ax.set_title(title or f"{first_label} vs {second_label} Net Worth",
                 fontsize=14, fontweight='bold')
    ax.legend(loc='best', fontsize=10)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches='tight', dpi=DEFAULT_DPI)

    if return_fig_ax:
        return fig, ax
    plt.close(fig)
    return None
