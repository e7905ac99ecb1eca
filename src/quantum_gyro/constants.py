"""
Physical Constants for Gyroscope Phase-Shift Models
===================================================

This module defines the fundamental physical constants used by every
gyroscope model in the package. All values are in SI units unless otherwise
noted.

WHY THESE CONSTANTS MATTER FOR ROTATION SENSING
-----------------------------------------------

**c (C) - Speed of light**
    Sets the scale of the optical Sagnac effect:

        Δφ = 4πAΩ / (λc)

    The 1/c suppression is why optical gyroscopes need large enclosed areas
    (long fiber coils) to reach navigation-grade sensitivity.

**ℏ (HBAR) - Reduced Planck constant**
    Sets the scale of the matter-wave Sagnac effect:

        Δφ = 2mAΩ / ℏ

    Replacing the photon energy ℏω = ℏck with the atom rest energy mc²
    boosts the phase by mc²/(ℏω) ~ 10¹⁰ for the same area. This is the
    reason atom interferometers are attractive gyroscopes.

**m_e, e (M_ELECTRON, E_CHARGE) - Electron mass and charge**
    Enter the superconducting gyroscope through the Cooper-pair mass
    m* = 2mₑ and the London moment B = 2mₑΩ/e.

**Φ₀ (FLUX_QUANTUM) - Superconducting flux quantum**
    Φ₀ = h/2e. A SQUID reads rotation-induced flux in units of Φ₀.

**Ω_E (OMEGA_EARTH) - Earth rotation rate**
    The natural calibration reference. A stationary gyroscope at latitude
    θ sees the vertical component Ω_E·sin(θ).

References
----------
CODATA 2018 recommended values:
https://physics.nist.gov/cuu/Constants/

IERS Conventions (2010), nominal mean angular velocity of the Earth.
"""

import numpy as np

# =============================================================================
# FUNDAMENTAL CONSTANTS (CODATA 2018)
# =============================================================================

C = 299792458.0  # Speed of light [m/s] (exact by definition)

HBAR = 1.054571817e-34  # Reduced Planck constant [J·s]
"""
The fundamental quantum of action.

**For atom gyroscopes**: The de Broglie wavevector of an atom is k = mv/ℏ.
The matter-wave Sagnac phase 2mAΩ/ℏ is the rotation-induced difference in
accumulated de Broglie phase around the enclosed area.
"""

H_PLANCK = 2 * np.pi * HBAR  # Planck constant [J·s]

E_CHARGE = 1.602176634e-19  # Elementary charge [C] (exact by definition)

M_ELECTRON = 9.1093837015e-31  # Electron mass [kg]

AMU = 1.66053906660e-27  # Atomic mass unit [kg]

FLUX_QUANTUM = H_PLANCK / (2 * E_CHARGE)  # Superconducting flux quantum [Wb]
"""
The magnetic flux quantum Φ₀ = h/2e ≈ 2.068×10⁻¹⁵ Wb.

**Physical meaning**: Flux through a superconducting ring is quantized in
units of Φ₀ because the Cooper-pair wavefunction must be single-valued.
A flux Φ corresponds to a phase winding of 2πΦ/Φ₀.
"""

# =============================================================================
# GEOPHYSICAL CONSTANTS
# =============================================================================

OMEGA_EARTH = 7.2921150e-5  # Earth rotation rate [rad/s]
"""
Nominal mean angular velocity of the Earth (IERS).

**Numerical value**: 7.292×10⁻⁵ rad/s = 15.04 °/h

**For gyroscope calibration**: A navigation-grade gyroscope must resolve
~0.01 °/h, i.e. roughly 1/1500 of the Earth rate.
"""

# =============================================================================
# ATOMIC MASSES
# =============================================================================

ATOM_MASSES = {
    "Rb87": 86.909180527 * AMU,   # kg, the workhorse of cold-atom sensors
    "Cs133": 132.905451961 * AMU,  # kg, used in the Stanford/Kasevich gyroscopes
    "He4": 4.002603254 * AMU,      # kg, superfluid helium gyroscopes
}

# =============================================================================
# UNIT CONVERSION HELPERS
# =============================================================================

def deg_per_hour_to_rad_per_s(rate_deg_h):
    """
    Convert a rotation rate from degrees per hour to rad/s.

    Gyroscope performance is conventionally quoted in °/h, while all models
    in this package take Ω in rad/s.

    Examples
    --------
    >>> print(f"{deg_per_hour_to_rad_per_s(15.041):.3e}")  # ≈ Earth rate
    7.292e-05
    """
    return np.deg2rad(rate_deg_h) / 3600.0


def rad_per_s_to_deg_per_hour(rate_rad_s):
    """Convert a rotation rate from rad/s to degrees per hour."""
    return np.rad2deg(rate_rad_s) * 3600.0


def wavelength_to_wavevector(wavelength_m: float) -> float:
    """
    Convert wavelength (m) to wavevector magnitude (rad/m).

    k = 2π / λ

    Examples
    --------
    >>> print(f"{wavelength_to_wavevector(780e-9):.3e}")  # Rb D2 line
    8.055e+06
    """
    return 2 * np.pi / wavelength_m


def get_atom_mass(species: str) -> float:
    """
    Look up the mass of an atomic species.

    Raises
    ------
    ValueError
        If species is not in ATOM_MASSES
    """
    if species not in ATOM_MASSES:
        raise ValueError(f"Unknown species: {species}. "
                         f"Available: {list(ATOM_MASSES.keys())}")
    return ATOM_MASSES[species]


# =============================================================================
# EXPORT ALL
# =============================================================================

__all__ = [
    # Fundamental constants
    "C", "HBAR", "H_PLANCK", "E_CHARGE", "M_ELECTRON", "AMU", "FLUX_QUANTUM",
    # Geophysical
    "OMEGA_EARTH",
    # Atomic masses
    "ATOM_MASSES", "get_atom_mass",
    # Unit conversions
    "deg_per_hour_to_rad_per_s", "rad_per_s_to_deg_per_hour",
    "wavelength_to_wavevector",
]
