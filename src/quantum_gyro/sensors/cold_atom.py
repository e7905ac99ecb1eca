"""
Cold-Atom Spin-Precession Gyroscopes
====================================

An ensemble of polarized atomic (or nuclear) spins precesses about a bias
magnetic field at the Larmor frequency ω_L = γB. In the rotating frame of
the sensor the observed precession frequency is shifted by the rotation
rate itself:

    ω = γB + Ω

After an interrogation time t the spins have picked up the extra phase

    Δφ = Ω t

which is read out optically. This is the principle of NMR gyroscopes and
alkali-noble-gas comagnetometers.

PROJECTION NOISE
----------------

Reading out N uncorrelated spins measures the phase with uncertainty 1/√N.
The rotation sensitivity per shot is therefore

    δΩ = 1 / (√N · t)

and the signal-to-noise ratio of a rotation Ω is

    SNR = Ω t √N

Longer coherent interrogation and more atoms both help. Interrogation time
is limited by the spin coherence time T₂.

References
----------
[1] Kornack, Ghosh & Romalis, PRL 95, 230801 (2005) - K-³He comagnetometer
[2] Walker & Larsen, Adv. At. Mol. Opt. Phys. 65, 373 (2016) - NMR gyros
"""

import numpy as np

from ..utils.validation import (
    require_positive, require_non_negative, require_finite,
)


def spin_precession_phase_shift(angular_velocity, interrogation_time):
    """
    Extra precession phase accumulated by a rotating spin ensemble.

        Δφ = Ω t

    Parameters
    ----------
    angular_velocity : float or array
        Rotation rate about the bias-field axis in rad/s
    interrogation_time : float or array
        Free-precession time in seconds

    Returns
    -------
    float or array
        Phase shift in radians
    """
    require_finite(angular_velocity, "angular_velocity")
    require_non_negative(interrogation_time, "interrogation_time")
    return angular_velocity * interrogation_time


def precession_frequency(gyromagnetic_ratio, magnetic_field, angular_velocity):
    """
    Spin precession frequency observed in a rotating frame, ω = γB + Ω.

    Parameters
    ----------
    gyromagnetic_ratio : float
        γ in rad/(s·T)
    magnetic_field : float
        Bias field in Tesla
    angular_velocity : float or array
        Rotation rate in rad/s

    Returns
    -------
    float or array
        Precession angular frequency in rad/s
    """
    require_finite(gyromagnetic_ratio, "gyromagnetic_ratio")
    require_finite(magnetic_field, "magnetic_field")
    require_finite(angular_velocity, "angular_velocity")
    return gyromagnetic_ratio * magnetic_field + angular_velocity


def projection_noise_sensitivity(n_atoms, interrogation_time):
    """
    Projection-noise limited rotation sensitivity per shot.

        δΩ = 1 / (√N t)

    Parameters
    ----------
    n_atoms : float or array
        Number of atoms read out
    interrogation_time : float or array
        Free-precession time in seconds

    Returns
    -------
    float or array
        Minimum resolvable rotation rate in rad/s
    """
    require_positive(n_atoms, "n_atoms")
    require_positive(interrogation_time, "interrogation_time")
    return 1.0 / (np.sqrt(n_atoms) * interrogation_time)


def collective_phase_snr(angular_velocity, n_atoms, interrogation_time):
    """
    Signal-to-noise ratio of a rotation measurement, Ω t √N.

    Parameters
    ----------
    angular_velocity : float or array
        Rotation rate in rad/s
    n_atoms : float or array
        Number of atoms read out
    interrogation_time : float or array
        Free-precession time in seconds
    """
    require_positive(n_atoms, "n_atoms")
    phase = spin_precession_phase_shift(angular_velocity, interrogation_time)
    return phase * np.sqrt(n_atoms)


__all__ = [
    "spin_precession_phase_shift",
    "precession_frequency",
    "projection_noise_sensitivity",
    "collective_phase_snr",
]
