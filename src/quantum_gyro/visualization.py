"""
Gyroscope Visualization Tools
=============================

Plotting functions for rotation-rate and parameter sweeps.

Key Functions
-------------
- plot_phase_vs_rotation(): Δφ vs Ω for one model, with the ±π wrap limits
- plot_model_comparison(): |Δφ| vs |Ω| for several models on log axes
- plot_parameter_sweep(): Δφ vs one configuration parameter
"""

from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Tuple

from .models import MODEL_LABELS
from .sweeps import SweepResult


PARAMETER_LABELS = {
    "angular_velocity": "Rotation rate Ω (rad/s)",
    "area": "Enclosed area (m²)",
    "wavelength": "Wavelength (m)",
    "n_turns": "Number of turns",
    "velocity": "Velocity (m/s)",
    "pulse_separation": "Pulse separation T (s)",
    "interrogation_time": "Interrogation time (s)",
    "finesse": "Finesse",
    "diameter": "Ring diameter (m)",
    "mass": "Mass (kg)",
    "mechanical_frequency": "Mechanical frequency (rad/s)",
    "cavity_linewidth": "Cavity linewidth κ (rad/s)",
}


def plot_phase_vs_rotation(
    result: SweepResult,
    ax: Optional[plt.Axes] = None,
    show_wrap_limits: bool = True,
    title: Optional[str] = None,
    figsize: Tuple[float, float] = (8, 6),
    color: str = "C0",
) -> plt.Axes:
    """
    Plot phase shift against rotation rate for a single model.

    Parameters
    ----------
    result : SweepResult
        Output of sweep_rotation_rate()
    ax : plt.Axes, optional
        Axes to plot on. If None, creates new figure.
    show_wrap_limits : bool
        Draw dashed lines at Δφ = ±π when the data reach them
    title : str, optional
        Plot title. Auto-generated if None.
    figsize : tuple
        Figure size (width, height) in inches
    color : str
        Line color

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if result.values.size == 0:
        print("No points to plot!")
        return None

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    ax.plot(result.values, result.phase_shifts, '-', color=color, linewidth=2,
            label=MODEL_LABELS.get(result.model, result.model))

    if show_wrap_limits and result.wraps:
        ax.axhline(np.pi, color='gray', linestyle='--', linewidth=1, label='±π (wrap)')
        ax.axhline(-np.pi, color='gray', linestyle='--', linewidth=1)

    ax.set_xlabel(PARAMETER_LABELS["angular_velocity"], fontsize=12)
    ax.set_ylabel("Phase shift Δφ (rad)", fontsize=12)

    if title is None:
        title = (f"{MODEL_LABELS.get(result.model, result.model)}: "
                 f"S = {result.scale_factor:.3g} rad/(rad/s)")
    ax.set_title(title, fontsize=14)

    ax.grid(True, alpha=0.3)
    ax.set_axisbelow(True)
    ax.legend(loc='upper left')

    plt.tight_layout()
    return ax


def plot_model_comparison(
    results: Dict[str, SweepResult],
    ax: Optional[plt.Axes] = None,
    log_scale: bool = True,
    figsize: Tuple[float, float] = (10, 7),
    colors: Optional[List[str]] = None,
) -> plt.Axes:
    """
    Compare the phase response of several gyroscope models.

    Models differ in scale factor by many orders of magnitude, so by default
    |Δφ| is plotted against |Ω| on log-log axes. Zero rates are dropped
    there.

    Parameters
    ----------
    results : dict of SweepResult
        Output of compare_models()
    ax : plt.Axes, optional
        Axes to plot on
    log_scale : bool
        Use log-log axes
    figsize : tuple
        Figure size
    colors : list of str, optional
        Colors for each model

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if not results:
        print("No results to plot!")
        return None

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    if colors is None:
        colors = plt.cm.tab10(np.linspace(0, 1, len(results)))

    for (name, result), color in zip(results.items(), colors):
        x = result.values
        y = result.phase_shifts
        if log_scale:
            mask = (x != 0) & (y != 0)
            x = np.abs(x[mask])
            y = np.abs(y[mask])
        ax.plot(x, y, '-', color=color, linewidth=2,
                label=MODEL_LABELS.get(name, name))

    ax.axhline(np.pi, color='gray', linestyle='--', linewidth=1, label='π (wrap)')

    if log_scale:
        ax.set_xscale('log')
        ax.set_yscale('log')
        ax.set_xlabel("|Ω| (rad/s)", fontsize=12)
        ax.set_ylabel("|Δφ| (rad)", fontsize=12)
    else:
        ax.set_xlabel(PARAMETER_LABELS["angular_velocity"], fontsize=12)
        ax.set_ylabel("Phase shift Δφ (rad)", fontsize=12)

    ax.set_title("Gyroscope Phase Response Comparison", fontsize=14)
    ax.legend(loc='upper left', fontsize=10)
    ax.grid(True, alpha=0.3, which='both')

    plt.tight_layout()
    return ax


def plot_parameter_sweep(
    result: SweepResult,
    ax: Optional[plt.Axes] = None,
    log_x: bool = False,
    figsize: Tuple[float, float] = (8, 6),
    color: str = "C1",
) -> plt.Axes:
    """
    Plot phase shift against one configuration parameter at fixed Ω.

    Parameters
    ----------
    result : SweepResult
        Output of sweep_parameter()
    ax : plt.Axes, optional
        Axes to plot on
    log_x : bool
        Logarithmic x axis
    figsize : tuple
        Figure size
    color : str
        Line/marker color

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if result.values.size == 0:
        print("No points to plot!")
        return None

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    ax.plot(result.values, result.phase_shifts, 'o-', color=color,
            linewidth=2, markersize=5)

    if log_x:
        ax.set_xscale('log')

    ax.set_xlabel(PARAMETER_LABELS.get(result.parameter, result.parameter), fontsize=12)
    ax.set_ylabel("Phase shift Δφ (rad)", fontsize=12)

    omega_label = f" at Ω = {result.angular_velocity:.3g} rad/s" if result.angular_velocity is not None else ""
    ax.set_title(f"{MODEL_LABELS.get(result.model, result.model)}{omega_label}",
                 fontsize=14)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return ax


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    "plot_phase_vs_rotation",
    "plot_model_comparison",
    "plot_parameter_sweep",
]
