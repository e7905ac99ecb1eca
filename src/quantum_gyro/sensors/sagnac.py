"""
Optical Sagnac Effect
=====================

This module implements the rotation-induced phase difference between two
light waves counter-propagating around a closed loop. It is the principle
behind ring-laser gyroscopes (RLG) and fiber-optic gyroscopes (FOG).

THE SAGNAC EFFECT
-----------------

Two beams are split at a beamsplitter and sent in opposite directions around
a loop of area A. If the loop rotates at Ω about its normal, the co-rotating
beam must travel slightly farther than the counter-rotating one before the
two meet again. The resulting phase difference is

    Δφ = 4πAΩ / (λc)

for a single turn. A fiber coil with N turns multiplies the area by N:

    Δφ = 4πNAΩ / (λc)

with N = L/(πD) for a fiber of length L wound on a coil of diameter D.

**Phase convention**: 4πAΩ/(λc) is the phase shift of each beam relative
to the stationary loop. The two counter-propagating beams shift in opposite
directions, so the fringe phase between them is twice this,
8πAΩ/(λc) = 2πLDΩ/(λc) for a coil. Every optical model in this package
uses the single-beam convention.

**Why is it so small?**

For a 1 m² loop at Earth rate (7.3×10⁻⁵ rad/s) with λ = 633 nm:

    Δφ ≈ 4π × 1 × 7.3×10⁻⁵ / (633×10⁻⁹ × 3×10⁸) ≈ 4.8×10⁻⁶ rad

This is why FOGs use kilometres of fiber.

RING LASER GYROSCOPES
---------------------

In an active ring laser the cavity supports two counter-propagating modes.
Rotation splits their frequencies, and the beat note is

    Δf = 4AΩ / (λP)

with P the perimeter. Readout is a frequency rather than a phase, which
gives the RLG its large dynamic range.

References
----------
[1] Post, "Sagnac effect", Rev. Mod. Phys. 39, 475 (1967)
[2] Lefèvre, "The Fiber-Optic Gyroscope", 2nd ed., Artech House (2014)
[3] Chow et al., "The ring laser gyro", Rev. Mod. Phys. 57, 61 (1985)
"""

import numpy as np

from ..constants import C
from ..utils.validation import require_positive, require_finite


def sagnac_phase_shift(
    area,
    angular_velocity,
    wavelength: float,
    speed_of_light: float = C,
    n_turns: int = 1,
):
    """
    Calculate the Sagnac phase shift of an optical interferometer.

        Δφ = 4π N A Ω / (λ c)

    Parameters
    ----------
    area : float or array
        Area enclosed by one turn of the loop in m²
    angular_velocity : float or array
        Rotation rate about the loop normal in rad/s. The sign of Ω sets
        the sign of Δφ.
    wavelength : float
        Vacuum wavelength of the light in meters
    speed_of_light : float
        Speed of light in m/s. The default is the exact SI value. The
        illustrative examples often use the rounded 3×10⁸.
    n_turns : int
        Number of turns of the loop (1 for a free-space ring)

    Returns
    -------
    float or array
        Phase difference in radians

    Example
    -------
    >>> dphi = sagnac_phase_shift(1.0, 0.01, 633e-9, 3e8)
    >>> print(f"Δφ = {dphi:.3e} rad")
    Δφ = 6.617e-04 rad
    """
    require_positive(area, "area")
    require_finite(angular_velocity, "angular_velocity")
    require_positive(wavelength, "wavelength")
    require_positive(speed_of_light, "speed_of_light")
    require_positive(n_turns, "n_turns")

    return 4 * np.pi * n_turns * area * angular_velocity / (wavelength * speed_of_light)


def sagnac_scale_factor(
    area,
    wavelength: float,
    speed_of_light: float = C,
    n_turns: int = 1,
):
    """
    Phase response per unit rotation rate, dΔφ/dΩ, in rad/(rad/s).

    Because the Sagnac phase is linear in Ω this is simply the phase at
    Ω = 1 rad/s.
    """
    return sagnac_phase_shift(area, 1.0, wavelength, speed_of_light, n_turns)


def ring_laser_beat_frequency(area, perimeter, angular_velocity, wavelength: float):
    """
    Beat frequency between the counter-propagating modes of a ring laser.

        Δf = 4 A Ω / (λ P)

    Parameters
    ----------
    area : float
        Enclosed area in m²
    perimeter : float
        Optical path length around the ring in meters
    angular_velocity : float or array
        Rotation rate in rad/s
    wavelength : float
        Lasing wavelength in meters

    Returns
    -------
    float or array
        Beat frequency in Hz (signed)

    Example
    -------
    >>> # 4 m × 4 m ring (G-ring class) at Earth rate, He-Ne laser
    >>> print(f"{ring_laser_beat_frequency(16.0, 16.0, 7.29e-5, 633e-9):.1f} Hz")
    460.7 Hz
    """
    require_positive(area, "area")
    require_positive(perimeter, "perimeter")
    require_finite(angular_velocity, "angular_velocity")
    require_positive(wavelength, "wavelength")

    return 4 * area * angular_velocity / (wavelength * perimeter)


def shot_noise_phase(n_photons):
    """
    Shot-noise-limited phase uncertainty, δφ = 1/√N, for N detected photons.
    """
    require_positive(n_photons, "n_photons")
    return 1.0 / np.sqrt(n_photons)


__all__ = [
    "sagnac_phase_shift",
    "sagnac_scale_factor",
    "ring_laser_beat_frequency",
    "shot_noise_phase",
]
