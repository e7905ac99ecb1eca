"""
Scale-Factor Calibration
========================

Offline helpers for relating a gyroscope's read-out phase to rotation rate.

Every model in this package is linear in Ω:

    Δφ = S · Ω + b

where S is the scale factor and b a bias (zero for the ideal models). This
module fits S and b from a table of known rotation rates and measured
phases, for example turntable steps plus the Earth-rate reference. It also
inverts the linear model.

These are pure functions over arrays that are already in memory. There is
no acquisition or feedback loop.

References
----------
[1] IEEE Std 952-1997, "Specification Format Guide and Test Procedure for
    Single-Axis Interferometric Fiber Optic Gyros"
"""

import warnings
from dataclasses import dataclass

import numpy as np
from scipy.optimize import curve_fit, OptimizeWarning

from .constants import OMEGA_EARTH
from .utils.validation import require_finite


@dataclass
class CalibrationResult:
    """Result of a linear scale-factor fit Δφ = S·Ω + b."""
    scale_factor: float
    bias: float
    scale_factor_std: float
    bias_std: float
    residual_rms: float
    n_points: int

    def rotation_from_phase(self, phase):
        """Invert the fitted model to get Ω from Δφ."""
        return rotation_from_phase(phase, self.scale_factor, self.bias)


def wrap_phase(phase):
    """
    Wrap a phase into the interval (-π, π].

    This is what an interferometer actually reports: the true phase modulo 2π.
    """
    wrapped = np.mod(np.asarray(phase, dtype=float) + np.pi, 2 * np.pi) - np.pi
    # np.mod maps +π to -π; keep the half-open interval (-π, π]
    wrapped = np.where(wrapped == -np.pi, np.pi, wrapped)
    if np.ndim(phase) == 0:
        return float(wrapped)
    return wrapped


def rotation_from_phase(phase, scale_factor: float, bias: float = 0.0):
    """
    Rotation rate implied by a measured phase, Ω = (Δφ - b) / S.

    Raises
    ------
    ValueError
        If scale_factor is zero or not finite
    """
    require_finite(scale_factor, "scale_factor")
    if scale_factor == 0:
        raise ValueError("scale_factor must be non-zero")
    if np.ndim(phase):
        phase = np.asarray(phase, dtype=float)
    return (phase - bias) / scale_factor


def max_unambiguous_rate(scale_factor: float) -> float:
    """
    Largest |Ω| whose phase stays inside (-π, π], i.e. π/|S|.
    """
    require_finite(scale_factor, "scale_factor")
    if scale_factor == 0:
        raise ValueError("scale_factor must be non-zero")
    return np.pi / abs(scale_factor)


def earth_rate_component(latitude_deg):
    """
    Vertical component of the Earth rotation seen by a stationary sensor.

        Ω_z = Ω_E · sin(latitude)

    Parameters
    ----------
    latitude_deg : float or array
        Geographic latitude in degrees (-90 to 90)

    Returns
    -------
    float or array
        Rotation rate in rad/s
    """
    lat = np.asarray(latitude_deg, dtype=float)
    if np.any(np.abs(lat) > 90):
        raise ValueError(f"latitude must lie in [-90, 90] degrees, got {latitude_deg!r}")
    result = OMEGA_EARTH * np.sin(np.deg2rad(lat))
    if np.ndim(latitude_deg) == 0:
        return float(result)
    return result


def _linear(omega, s, b):
    return s * omega + b


def fit_scale_factor(rates, phases) -> CalibrationResult:
    """
    Fit Δφ = S·Ω + b to a calibration table by linear least squares.

    Parameters
    ----------
    rates : array-like
        Reference rotation rates in rad/s
    phases : array-like
        Measured (unwrapped) phases in radians

    Returns
    -------
    CalibrationResult

    Raises
    ------
    ValueError
        If fewer than two points are given, shapes differ, or all rates
        are identical (scale factor unidentifiable)
    """
    rates = np.asarray(rates, dtype=float).ravel()
    phases = np.asarray(phases, dtype=float).ravel()

    if rates.shape != phases.shape:
        raise ValueError(
            f"rates and phases must have the same length, "
            f"got {rates.size} and {phases.size}"
        )
    if rates.size < 2:
        raise ValueError("At least two calibration points are required")
    require_finite(rates, "rates")
    require_finite(phases, "phases")
    if np.ptp(rates) == 0:
        raise ValueError("Calibration rates must not all be equal")

    # start from the polyfit solution
    s0, b0 = np.polyfit(rates, phases, 1)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", OptimizeWarning)
        popt, pcov = curve_fit(_linear, rates, phases, p0=[s0, b0])

    residuals = phases - _linear(rates, *popt)
    if rates.size > 2 and np.all(np.isfinite(pcov)):
        perr = np.sqrt(np.diag(pcov))
    else:
        perr = np.zeros(2)

    return CalibrationResult(
        scale_factor=float(popt[0]),
        bias=float(popt[1]),
        scale_factor_std=float(perr[0]),
        bias_std=float(perr[1]),
        residual_rms=float(np.sqrt(np.mean(residuals**2))),
        n_points=int(rates.size),
    )


__all__ = [
    "CalibrationResult",
    "wrap_phase",
    "rotation_from_phase",
    "max_unambiguous_rate",
    "earth_rate_component",
    "fit_scale_factor",
]
