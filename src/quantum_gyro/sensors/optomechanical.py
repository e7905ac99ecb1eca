"""
Optomechanical Gyroscopes
=========================

A vibrating mechanical element (proof mass, membrane, or microtoroid mode)
is driven along one axis. Rotation couples that motion into the orthogonal
axis through the Coriolis force, and an optical cavity reads out the tiny
displacement as a phase shift of the reflected light.

THE SIGNAL CHAIN
----------------

1. **Coriolis force** on a mass m moving at velocity v in a frame rotating
   at Ω:

        F = 2 m Ω v

2. **Mechanical response**. Well below resonance the sense mode behaves as a
   spring of stiffness k = m ω_m², so

        x = F / (m ω_m²) = 2 Ω v / ω_m²

3. **Optomechanical transduction**. The displacement changes the cavity
   length and pulls the optical resonance by

        δω = G x,    G = ω_c / L

4. **Phase readout**. Near resonance the reflected phase of a one-sided
   cavity has slope 4/κ (κ = energy-decay rate), so

        Δφ = 4 δω / κ = 4 G x / κ

The linear readout only holds while |δω| ≲ κ/2. Beyond that the cavity
response saturates.

References
----------
[1] Aspelmeyer, Kippenberg & Marquardt, RMP 86, 1391 (2014)
[2] Li et al., "Optomechanical gyroscope", Optica / APL (2018-2021)
"""

import warnings

import numpy as np

from ..constants import C
from ..utils.validation import require_positive, require_finite


def coriolis_force(mass, angular_velocity, velocity):
    """
    Coriolis force on a moving proof mass, F = 2mΩv.

    Parameters
    ----------
    mass : float
        Effective mass of the mechanical mode in kg
    angular_velocity : float or array
        Rotation rate in rad/s
    velocity : float
        Drive-mode velocity amplitude in m/s

    Returns
    -------
    float or array
        Force in Newtons
    """
    require_positive(mass, "mass")
    require_finite(angular_velocity, "angular_velocity")
    require_positive(velocity, "velocity")
    return 2 * mass * angular_velocity * velocity


def static_displacement(force, mass, mechanical_frequency):
    """
    Quasi-static displacement of the sense mode, x = F/(mω_m²).

    Parameters
    ----------
    force : float or array
        Applied force in N
    mass : float
        Effective mass in kg
    mechanical_frequency : float
        Sense-mode angular frequency ω_m in rad/s

    Returns
    -------
    float or array
        Displacement in meters
    """
    require_positive(mass, "mass")
    require_positive(mechanical_frequency, "mechanical_frequency")
    return force / (mass * mechanical_frequency**2)


def cavity_frequency_pull(cavity_frequency, cavity_length):
    """Optomechanical frequency pull G = ω_c / L in rad/(s·m)."""
    require_positive(cavity_frequency, "cavity_frequency")
    require_positive(cavity_length, "cavity_length")
    return cavity_frequency / cavity_length


def cavity_frequency_from_wavelength(wavelength: float) -> float:
    """Optical angular frequency ω = 2πc/λ in rad/s."""
    require_positive(wavelength, "wavelength")
    return 2 * np.pi * C / wavelength


def optomechanical_phase_shift(
    mass,
    velocity,
    angular_velocity,
    mechanical_frequency,
    cavity_frequency,
    cavity_length,
    cavity_linewidth,
):
    """
    Calculate the cavity-readout phase shift of an optomechanical gyroscope.

        Δφ = 4 G x / κ,   x = 2 m Ω v / (m ω_m²),   G = ω_c / L

    Parameters
    ----------
    mass : float
        Effective mass of the sense mode in kg
    velocity : float
        Drive-mode velocity amplitude in m/s
    angular_velocity : float or array
        Rotation rate in rad/s
    mechanical_frequency : float
        Sense-mode angular frequency ω_m in rad/s
    cavity_frequency : float
        Optical resonance angular frequency ω_c in rad/s
    cavity_length : float
        Cavity length in meters
    cavity_linewidth : float
        Cavity energy-decay rate κ in rad/s

    Returns
    -------
    float or array
        Reflected-light phase shift in radians

    Warns
    -----
    RuntimeWarning
        If the cavity frequency shift exceeds κ/2. The linear phase
        readout is no longer accurate there.
    """
    require_positive(cavity_linewidth, "cavity_linewidth")

    force = coriolis_force(mass, angular_velocity, velocity)
    displacement = static_displacement(force, mass, mechanical_frequency)
    frequency_shift = cavity_frequency_pull(cavity_frequency, cavity_length) * displacement

    if np.any(np.abs(frequency_shift) > cavity_linewidth / 2):
        warnings.warn(
            "Cavity frequency shift exceeds half the linewidth; "
            "linear phase readout is saturated.",
            RuntimeWarning,
        )

    return 4 * frequency_shift / cavity_linewidth


__all__ = [
    "coriolis_force",
    "static_displacement",
    "cavity_frequency_pull",
    "cavity_frequency_from_wavelength",
    "optomechanical_phase_shift",
]
