"""Shared plotting utilities and styles for frc_streams charts.

This module provides:
- Color scheme
- Common axis styling
- Figure creation and saving helpers

Figures are built directly from ``matplotlib.figure.Figure`` rather than
pyplot, so rendering a chart never touches the importing application's
backend or opens a window.

All chart rendering should go through this module to ensure consistency.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config import (
    CHART_DPI,
    CHART_FIGSIZE,
    STREAM_BLUE,
    STREAM_CREAM,
    STREAM_DARK_BLUE,
    STREAM_GREY,
    STREAM_RED,
)

__all__ = [
    "STREAM_RED",
    "STREAM_BLUE",
    "STREAM_CREAM",
    "STREAM_GREY",
    "STREAM_DARK_BLUE",
    "style_axis",
    "create_figure",
    "save_figure",
]


def style_axis(
    ax: Axes,
    title: str = "",
    xlabel: str = "",
    ylabel: str = "",
    grid: bool = True,
    dark_mode: bool = False,
) -> None:
    """Apply consistent styling to a matplotlib axis.

    Args:
        ax: Matplotlib axis to style.
        title: Plot title (optional).
        xlabel: X-axis label (optional).
        ylabel: Y-axis label (optional).
        grid: Whether to show grid lines (default: True).
        dark_mode: Whether to use dark mode styling (default: False).
    """
    # Light mode keeps matplotlib's default text color
    text_kwargs: Dict[str, Any] = {"color": STREAM_CREAM} if dark_mode else {}

    if title:
        ax.set_title(title, fontweight="bold", **text_kwargs)
    if xlabel:
        ax.set_xlabel(xlabel, **text_kwargs)
    if ylabel:
        ax.set_ylabel(ylabel, **text_kwargs)

    if grid:
        ax.grid(True, alpha=0.3, linestyle="--", linewidth=0.5)

    if dark_mode:
        ax.set_facecolor(STREAM_DARK_BLUE)
        ax.tick_params(colors=STREAM_CREAM)
        for spine in ax.spines.values():
            spine.set_edgecolor(STREAM_GREY)


def create_figure(
    figsize: Tuple[float, float] = CHART_FIGSIZE, dark_mode: bool = False
) -> Tuple[Figure, Axes]:
    """Create a figure with a single axis.

    Args:
        figsize: Figure size in inches (width, height).
        dark_mode: Whether to use a dark background (default: False).

    Returns:
        Tuple of (figure, axes).
    """
    if dark_mode:
        fig = Figure(figsize=figsize, facecolor=STREAM_DARK_BLUE)
    else:
        fig = Figure(figsize=figsize)
    ax = fig.add_subplot()
    return fig, ax


def save_figure(fig: Figure, filepath: Path, dpi: int = CHART_DPI) -> Path:
    """Save a figure to disk.

    Args:
        fig: Matplotlib figure to save.
        filepath: Destination path; parent directories are created.
        dpi: Resolution in dots per inch.

    Returns:
        The path written.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(filepath, dpi=dpi, facecolor=fig.get_facecolor(), bbox_inches="tight")
    logging.debug(f"Saved figure to {filepath}")
    return filepath
