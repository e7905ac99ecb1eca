"""
Configuration Dataclasses for Gyroscope Models
==============================================

This module defines one dataclass per gyroscope model. Each groups the
physical parameters of that model (everything except the rotation rate Ω,
which is the quantity being measured).

The default values are the illustrative numbers used throughout the
documentation. They give order-of-magnitude sensible devices, not the
specifications of any particular instrument.

CONFIGURATION HIERARCHY
-----------------------

Model configs (one per sensing principle):
    - SagnacConfig: optical ring / fiber coil
    - AtomInterferometerConfig: light-pulse atom interferometer
    - OptomechanicalConfig: Coriolis resonator with cavity readout
    - SuperconductingLoopConfig: superconducting pickup loop
    - ColdAtomConfig: spin-precession ensemble
    - PhotonicConfig: integrated ring resonator

Every config validates itself on construction, so invalid values raise
ValueError at the point they are introduced. This also applies to
``dataclasses.replace`` during parameter sweeps.

PRESET CONFIGURATIONS
---------------------

- `get_navigation_grade_fog_config()`: 1 km fiber coil at 1550 nm
- `get_rb87_interferometer_config()`: Rb87 atomic-beam gyroscope
- `get_default_config(model)`: Default config for a registered model name
"""

from dataclasses import dataclass
from typing import Dict, Any

import numpy as np

from .constants import C, HBAR, get_atom_mass
from .utils.validation import (
    require_positive, require_fraction, require_finite,
)


# =============================================================================
# OPTICAL SAGNAC
# =============================================================================

@dataclass
class SagnacConfig:
    """
    Parameters for an optical Sagnac interferometer.

    Attributes
    ----------
    area : float
        Area enclosed by one turn in m². Default 1 m².
    wavelength : float
        Vacuum wavelength in meters. Default 633 nm (He-Ne).
    speed_of_light : float
        Speed of light in m/s. The illustrative default is the rounded 3×10⁸.
    n_turns : int
        Number of turns (fiber coil) or 1 for a free-space ring.

    Example
    -------
    >>> cfg = SagnacConfig(area=1.0, wavelength=633e-9, speed_of_light=3e8)
    >>> print(f"{cfg.scale_factor():.4g}")  # rad per rad/s
    0.06617
    """
    area: float = 1.0
    wavelength: float = 633e-9
    speed_of_light: float = 3e8
    n_turns: int = 1

    def __post_init__(self):
        self.validate()

    def validate(self):
        require_positive(self.area, "area")
        require_positive(self.wavelength, "wavelength")
        require_positive(self.speed_of_light, "speed_of_light")
        require_positive(self.n_turns, "n_turns")

    def scale_factor(self) -> float:
        """Phase per unit rotation rate, 4πNA/(λc)."""
        return 4 * np.pi * self.n_turns * self.area / (self.wavelength * self.speed_of_light)


# =============================================================================
# ATOM INTERFEROMETRY
# =============================================================================

@dataclass
class AtomInterferometerConfig:
    """
    Parameters for a Mach-Zehnder light-pulse atom interferometer.

    Attributes
    ----------
    species : str
        Atomic species, one of ATOM_MASSES ("Rb87", "Cs133", "He4").
    wavelength : float
        Raman laser wavelength in meters. Default 780 nm (Rb D2).
    velocity : float
        Atomic velocity perpendicular to k_eff in m/s.
    pulse_separation : float
        Time T between the π/2, π and π/2 pulses in seconds.
    n_atoms : float
        Detected atoms per shot (sets the shot-noise limit).
    contrast : float
        Fringe contrast in (0, 1].
    """
    species: str = "Rb87"
    wavelength: float = 780e-9
    velocity: float = 10.0
    pulse_separation: float = 5e-3
    n_atoms: float = 1e6
    contrast: float = 1.0

    def __post_init__(self):
        self.validate()

    def validate(self):
        get_atom_mass(self.species)
        require_positive(self.wavelength, "wavelength")
        require_positive(self.velocity, "velocity")
        require_positive(self.pulse_separation, "pulse_separation")
        require_positive(self.n_atoms, "n_atoms")
        require_fraction(self.contrast, "contrast")

    @property
    def mass(self) -> float:
        """Atomic mass in kg."""
        return get_atom_mass(self.species)

    @property
    def k_eff(self) -> float:
        """Effective two-photon wavevector 4π/λ in rad/m."""
        return 4 * np.pi / self.wavelength

    @property
    def enclosed_area(self) -> float:
        """Area (ℏk_eff/m)·v·T² enclosed by the interferometer arms in m²."""
        return HBAR * self.k_eff / self.mass * self.velocity * self.pulse_separation**2


# =============================================================================
# OPTOMECHANICS
# =============================================================================

@dataclass
class OptomechanicalConfig:
    """
    Parameters for an optomechanical Coriolis gyroscope.

    Attributes
    ----------
    mass : float
        Effective mass of the sense mode in kg.
    velocity : float
        Drive-mode velocity amplitude in m/s.
    mechanical_frequency : float
        Sense-mode angular frequency in rad/s. Default 2π × 10 kHz.
    wavelength : float
        Readout laser wavelength in meters.
    cavity_length : float
        Optical cavity length in meters.
    cavity_linewidth : float
        Cavity energy-decay rate κ in rad/s. Default 2π × 1 MHz.
    """
    mass: float = 1e-9
    velocity: float = 1e-3
    mechanical_frequency: float = 2 * np.pi * 10e3
    wavelength: float = 1550e-9
    cavity_length: float = 1e-3
    cavity_linewidth: float = 2 * np.pi * 1e6

    def __post_init__(self):
        self.validate()

    def validate(self):
        require_positive(self.mass, "mass")
        require_positive(self.velocity, "velocity")
        require_positive(self.mechanical_frequency, "mechanical_frequency")
        require_positive(self.wavelength, "wavelength")
        require_positive(self.cavity_length, "cavity_length")
        require_positive(self.cavity_linewidth, "cavity_linewidth")

    @property
    def cavity_frequency(self) -> float:
        """Optical resonance angular frequency 2πc/λ in rad/s."""
        return 2 * np.pi * C / self.wavelength


# =============================================================================
# SUPERCONDUCTING LOOP
# =============================================================================

@dataclass
class SuperconductingLoopConfig:
    """
    Parameters for a superconducting pickup loop.

    Attributes
    ----------
    area : float
        Area of one turn in m². Default 1 cm².
    n_turns : int
        Number of turns.
    """
    area: float = 1e-4
    n_turns: int = 1

    def __post_init__(self):
        self.validate()

    def validate(self):
        require_positive(self.area, "area")
        require_positive(self.n_turns, "n_turns")


# =============================================================================
# COLD-ATOM SPIN PRECESSION
# =============================================================================

@dataclass
class ColdAtomConfig:
    """
    Parameters for a spin-precession (NMR / comagnetometer) gyroscope.

    Attributes
    ----------
    n_atoms : float
        Number of spins read out per shot.
    interrogation_time : float
        Free-precession time in seconds.
    gyromagnetic_ratio : float
        γ in rad/(s·T). Default is ³He, -2π × 32.43 MHz/T.
    magnetic_field : float
        Bias field in Tesla. Default 1 μT.
    """
    n_atoms: float = 1e6
    interrogation_time: float = 1.0
    gyromagnetic_ratio: float = -2 * np.pi * 32.434e6
    magnetic_field: float = 1e-6

    def __post_init__(self):
        self.validate()

    def validate(self):
        require_positive(self.n_atoms, "n_atoms")
        require_positive(self.interrogation_time, "interrogation_time")
        require_finite(self.gyromagnetic_ratio, "gyromagnetic_ratio")
        require_finite(self.magnetic_field, "magnetic_field")

    @property
    def larmor_frequency(self) -> float:
        """Bias precession frequency γB in rad/s."""
        return self.gyromagnetic_ratio * self.magnetic_field


# =============================================================================
# INTEGRATED PHOTONICS
# =============================================================================

@dataclass
class PhotonicConfig:
    """
    Parameters for a resonant integrated ring gyroscope.

    The ring is circular, so area and perimeter follow from the diameter.

    Attributes
    ----------
    diameter : float
        Ring diameter in meters. Default 1 cm.
    wavelength : float
        Vacuum wavelength in meters.
    group_index : float
        Waveguide group index.
    finesse : float
        Resonator finesse.
    speed_of_light : float
        Speed of light in m/s.
    """
    diameter: float = 1e-2
    wavelength: float = 1550e-9
    group_index: float = 1.5
    finesse: float = 1000.0
    speed_of_light: float = C

    def __post_init__(self):
        self.validate()

    def validate(self):
        require_positive(self.diameter, "diameter")
        require_positive(self.wavelength, "wavelength")
        require_positive(self.group_index, "group_index")
        require_positive(self.finesse, "finesse")
        require_positive(self.speed_of_light, "speed_of_light")

    @property
    def area(self) -> float:
        return np.pi * self.diameter**2 / 4

    @property
    def perimeter(self) -> float:
        return np.pi * self.diameter


# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

def get_navigation_grade_fog_config(
    fiber_length: float = 1000.0,
    coil_diameter: float = 0.1,
) -> SagnacConfig:
    """
    Return a fiber-optic gyroscope with a navigation-grade coil.

    A fiber of length L wound on a coil of diameter D has N = L/(πD) turns
    of area πD²/4.

    Parameters
    ----------
    fiber_length : float
        Fiber length in meters (default 1 km)
    coil_diameter : float
        Coil diameter in meters (default 10 cm)
    """
    require_positive(fiber_length, "fiber_length")
    require_positive(coil_diameter, "coil_diameter")
    return SagnacConfig(
        area=np.pi * coil_diameter**2 / 4,
        wavelength=1550e-9,
        speed_of_light=C,
        n_turns=fiber_length / (np.pi * coil_diameter),
    )


def get_rb87_interferometer_config(
    interrogation_length: float = 1.0,
    velocity: float = 290.0,
) -> AtomInterferometerConfig:
    """
    Return an Rb87 thermal-beam interferometer (Gustavson et al. geometry).

    The pulse separation is the flight time between the Raman beams,
    T = L / v.
    """
    require_positive(interrogation_length, "interrogation_length")
    require_positive(velocity, "velocity")
    return AtomInterferometerConfig(
        species="Rb87",
        wavelength=780e-9,
        velocity=velocity,
        pulse_separation=interrogation_length / velocity,
        n_atoms=1e9,
        contrast=0.3,
    )


DEFAULT_CONFIGS: Dict[str, Any] = {
    "sagnac": SagnacConfig,
    "atom_interferometer": AtomInterferometerConfig,
    "optomechanical": OptomechanicalConfig,
    "superconducting": SuperconductingLoopConfig,
    "cold_atom": ColdAtomConfig,
    "photonic": PhotonicConfig,
}
"""Registry of model name → config class (called with no arguments for defaults)."""


def get_default_config(model: str):
    """
    Return a fresh default configuration for a model.

    Raises
    ------
    ValueError
        If the model name is not registered
    """
    key = model.lower()
    if key not in DEFAULT_CONFIGS:
        raise ValueError(f"Unknown model: {model}. "
                         f"Available: {list(DEFAULT_CONFIGS.keys())}")
    return DEFAULT_CONFIGS[key]()


__all__ = [
    "SagnacConfig",
    "AtomInterferometerConfig",
    "OptomechanicalConfig",
    "SuperconductingLoopConfig",
    "ColdAtomConfig",
    "PhotonicConfig",
    "get_navigation_grade_fog_config",
    "get_rb87_interferometer_config",
    "DEFAULT_CONFIGS",
    "get_default_config",
]
