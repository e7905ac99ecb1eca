"""
Rotation-Rate and Parameter Sweeps
==================================

Evaluate the gyroscope models over a range of rotation rates or over a
range of one configuration parameter. These are the data behind the
comparison plots in ``visualization``.

Key Functions
-------------
- sweep_rotation_rate(): Δφ vs Ω for one model
- sweep_parameter(): Δφ vs one config field at fixed Ω
- compare_models(): Δφ vs Ω for several models on the same rate grid

PHASE WRAPPING
--------------

An interferometer reads out cos(Δφ). Once |Δφ| exceeds π the reading is
ambiguous: rotations differing by 2π/S (S the scale factor) give the same
signal. The sweeps emit a RuntimeWarning when this happens so that the
result is not mistaken for a measurable range.
"""

from __future__ import annotations

import dataclasses
import time
import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from .configurations import get_default_config
from .models import compute_phase_shift, scale_factor, list_available_models


@dataclass
class SweepResult:
    """Container for sweep results."""
    model: str
    parameter: str
    values: np.ndarray
    phase_shifts: np.ndarray
    scale_factor: float
    angular_velocity: Optional[float] = None
    metadata: Dict[str, float] = field(default_factory=dict)  # e.g. elapsed_s

    @property
    def max_abs_phase(self) -> float:
        if self.phase_shifts.size == 0:
            return 0.0
        return float(np.max(np.abs(self.phase_shifts)))

    @property
    def wraps(self) -> bool:
        """True if any phase lies outside the unambiguous range [-π, π]."""
        return self.max_abs_phase > np.pi


def _warn_if_wrapped(result: SweepResult):
    if result.wraps:
        warnings.warn(
            f"{result.model}: |Δφ| reaches {result.max_abs_phase:.3g} rad > π; "
            f"read-out phase wraps and the rotation is ambiguous.",
            RuntimeWarning,
        )


def sweep_rotation_rate(
    model: str,
    rates: Sequence[float],
    config=None,
    verbose: bool = False,
) -> SweepResult:
    """
    Compute Δφ(Ω) for one model over a grid of rotation rates.

    Parameters
    ----------
    model : str
        Registered model name
    rates : array-like
        Rotation rates in rad/s
    config : dataclass, optional
        Model configuration. Uses defaults if None.
    verbose : bool
        Print a one-line summary

    Returns
    -------
    SweepResult
        With parameter = "angular_velocity"
    """
    if config is None:
        config = get_default_config(model)
    rates = np.asarray(rates, dtype=float)

    t_start = time.time()
    phases = np.asarray(compute_phase_shift(model, rates, config), dtype=float)
    result = SweepResult(
        model=model.lower(),
        parameter="angular_velocity",
        values=rates,
        phase_shifts=phases,
        scale_factor=scale_factor(model, config),
        metadata={"elapsed_s": time.time() - t_start},
    )

    if verbose:
        print(f"  {result.model}: {rates.size} rates, "
              f"S = {result.scale_factor:.4g} rad/(rad/s), "
              f"max |Δφ| = {result.max_abs_phase:.4g} rad "
              f"({result.metadata['elapsed_s']:.3f} s)")

    _warn_if_wrapped(result)
    return result


def sweep_parameter(
    model: str,
    parameter: str,
    values: Sequence[float],
    angular_velocity: float,
    config=None,
    verbose: bool = False,
) -> SweepResult:
    """
    Compute Δφ at fixed Ω while varying one configuration field.

    Parameters
    ----------
    model : str
        Registered model name
    parameter : str
        Name of a field of the model's config dataclass (e.g. "area")
    values : array-like
        Values to assign to that field
    angular_velocity : float
        Rotation rate in rad/s
    config : dataclass, optional
        Base configuration. Uses defaults if None.
    verbose : bool
        Print each evaluated point

    Returns
    -------
    SweepResult
        The scale_factor field holds the base configuration's scale factor.

    Raises
    ------
    ValueError
        If ``parameter`` is not a numeric field of the config, or a value is
        physically invalid for it
    """
    if config is None:
        config = get_default_config(model)

    # only numeric fields can be swept
    field_names = [
        f.name for f in dataclasses.fields(config)
        if isinstance(getattr(config, f.name), (int, float))
        and not isinstance(getattr(config, f.name), bool)
    ]
    if parameter not in field_names:
        raise ValueError(
            f"Unknown parameter '{parameter}' for {type(config).__name__}. "
            f"Available: {field_names}"
        )

    t_start = time.time()
    values = np.asarray(values, dtype=float)
    phases: List[float] = []
    for v in values:
        point_config = dataclasses.replace(config, **{parameter: v})
        phase = float(compute_phase_shift(model, angular_velocity, point_config))
        phases.append(phase)
        if verbose:
            print(f"  {parameter}={v:.4g}: Δφ = {phase:.4g} rad")

    result = SweepResult(
        model=model.lower(),
        parameter=parameter,
        values=values,
        phase_shifts=np.array(phases),
        scale_factor=scale_factor(model, config),
        angular_velocity=angular_velocity,
        metadata={"elapsed_s": time.time() - t_start},
    )
    _warn_if_wrapped(result)
    return result


def compare_models(
    rates: Sequence[float],
    models: Optional[Sequence[str]] = None,
    configs: Optional[Dict[str, object]] = None,
    verbose: bool = False,
) -> Dict[str, SweepResult]:
    """
    Sweep several models over the same rotation-rate grid.

    Parameters
    ----------
    rates : array-like
        Rotation rates in rad/s
    models : list of str, optional
        Model names. All registered models if None.
    configs : dict, optional
        Per-model configuration overrides keyed by model name
    verbose : bool
        Print a summary line per model

    Returns
    -------
    dict
        Model name → SweepResult, in the order requested
    """
    if models is None:
        models = list_available_models()
    configs = configs or {}

    if verbose:
        print(f"Comparing {len(models)} models over {len(rates)} rotation rates")

    return {
        name: sweep_rotation_rate(name, rates, configs.get(name), verbose=verbose)
        for name in models
    }


__all__ = [
    "SweepResult",
    "sweep_rotation_rate",
    "sweep_parameter",
    "compare_models",
]
