"""
Quantum Gyroscope Phase-Shift Models
====================================

Closed-form models of rotation sensing with interferometric and quantum
sensors. Each model maps a few physical parameters and a rotation rate Ω to
the phase shift Δφ the sensor reads out.

PHYSICS OVERVIEW
----------------

**Optical Sagnac effect** (ring lasers, fiber-optic gyroscopes)
    Δφ = 4πNAΩ / (λc)

**Atom interferometry** (matter-wave Sagnac)
    Δφ = 2mAΩ / ℏ = 2k_eff v Ω T²

**Optomechanics** (Coriolis force read out by a cavity)
    Δφ = 4Gx/κ,  x = 2Ωv/ω_m²

**Superconducting loops** (Cooper-pair phase / London moment)
    Δφ = 4mₑAΩ / ℏ

**Cold-atom spin precession** (NMR gyroscopes, comagnetometers)
    Δφ = Ωt

**Integrated photonics** (resonant ring gyroscopes)
    Δφ = (2F/π) · 4πAΩ / (λc)

MODULE STRUCTURE
----------------

Physics:
    - constants: Physical constants and unit conversions
    - sensors: One module per sensing principle

Configuration:
    - configurations: Dataclasses with example parameters and presets
    - models: Name → phase-function registry

Analysis:
    - sweeps: Rotation-rate and parameter sweeps
    - calibration: Scale-factor fits, phase wrapping, Earth-rate reference
    - visualization: Matplotlib plots
"""

from .constants import (
    C, HBAR, H_PLANCK, E_CHARGE, M_ELECTRON, AMU, FLUX_QUANTUM,
    OMEGA_EARTH, ATOM_MASSES, get_atom_mass,
    deg_per_hour_to_rad_per_s, rad_per_s_to_deg_per_hour,
    wavelength_to_wavevector,
)

from .sensors import (
    # Sagnac
    sagnac_phase_shift, sagnac_scale_factor,
    ring_laser_beat_frequency, shot_noise_phase,
    # Atom interferometry
    effective_wavevector, atom_sagnac_phase_shift,
    light_pulse_enclosed_area, light_pulse_phase_shift, atom_shot_noise_phase,
    # Optomechanical
    coriolis_force, static_displacement, optomechanical_phase_shift,
    # Superconducting
    cooper_pair_phase_shift, london_moment_field, london_flux, flux_to_phase,
    # Cold atom
    spin_precession_phase_shift, precession_frequency,
    projection_noise_sensitivity, collective_phase_snr,
    # Photonic
    free_spectral_range, resonator_finesse, resonance_splitting,
    photonic_phase_shift,
)

from .configurations import (
    SagnacConfig,
    AtomInterferometerConfig,
    OptomechanicalConfig,
    SuperconductingLoopConfig,
    ColdAtomConfig,
    PhotonicConfig,
    get_navigation_grade_fog_config,
    get_rb87_interferometer_config,
    get_default_config,
)

from .models import (
    GYROSCOPE_MODELS,
    compute_phase_shift,
    scale_factor,
    list_available_models,
)

from .sweeps import (
    SweepResult,
    sweep_rotation_rate,
    sweep_parameter,
    compare_models,
)

from .calibration import (
    CalibrationResult,
    wrap_phase,
    rotation_from_phase,
    max_unambiguous_rate,
    earth_rate_component,
    fit_scale_factor,
)

from .visualization import (
    plot_phase_vs_rotation,
    plot_model_comparison,
    plot_parameter_sweep,
)

__version__ = "0.1.0"
__all__ = [
    # =========================================================================
    # PHASE-SHIFT MODELS
    # =========================================================================
    "GYROSCOPE_MODELS", "compute_phase_shift", "scale_factor",
    "list_available_models",
    "sagnac_phase_shift", "sagnac_scale_factor",
    "ring_laser_beat_frequency", "shot_noise_phase",
    "effective_wavevector", "atom_sagnac_phase_shift",
    "light_pulse_enclosed_area", "light_pulse_phase_shift",
    "atom_shot_noise_phase",
    "coriolis_force", "static_displacement", "optomechanical_phase_shift",
    "cooper_pair_phase_shift", "london_moment_field", "london_flux",
    "flux_to_phase",
    "spin_precession_phase_shift", "precession_frequency",
    "projection_noise_sensitivity", "collective_phase_snr",
    "free_spectral_range", "resonator_finesse", "resonance_splitting",
    "photonic_phase_shift",

    # =========================================================================
    # CONFIGURATION
    # =========================================================================
    "SagnacConfig", "AtomInterferometerConfig", "OptomechanicalConfig",
    "SuperconductingLoopConfig", "ColdAtomConfig", "PhotonicConfig",
    "get_navigation_grade_fog_config", "get_rb87_interferometer_config",
    "get_default_config",

    # =========================================================================
    # CONSTANTS
    # =========================================================================
    "C", "HBAR", "H_PLANCK", "E_CHARGE", "M_ELECTRON", "AMU", "FLUX_QUANTUM",
    "OMEGA_EARTH", "ATOM_MASSES", "get_atom_mass",
    "deg_per_hour_to_rad_per_s", "rad_per_s_to_deg_per_hour",
    "wavelength_to_wavevector",

    # =========================================================================
    # SWEEPS, CALIBRATION, VISUALIZATION
    # =========================================================================
    "SweepResult", "sweep_rotation_rate", "sweep_parameter", "compare_models",
    "CalibrationResult", "wrap_phase", "rotation_from_phase",
    "max_unambiguous_rate", "earth_rate_component", "fit_scale_factor",
    "plot_phase_vs_rotation", "plot_model_comparison", "plot_parameter_sweep",
]
