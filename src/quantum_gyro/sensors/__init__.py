# Sensor Physics Layer
#
# Closed-form phase-shift models for each gyroscope sensing principle.
# Every function is a pure function of scalar (or numpy array) inputs.
#
# Submodules:
#   - sagnac: Ring-laser and fiber-optic Sagnac interferometers
#   - atom_interferometry: Matter-wave Sagnac, light-pulse interferometers
#   - optomechanical: Coriolis-driven resonators with cavity readout
#   - superconducting: Cooper-pair phase and London moment
#   - cold_atom: Spin-precession (NMR / comagnetometer) gyroscopes
#   - photonic: Resonant integrated ring gyroscopes

from .sagnac import (
    sagnac_phase_shift,
    sagnac_scale_factor,
    ring_laser_beat_frequency,
    shot_noise_phase,
)

from .atom_interferometry import (
    effective_wavevector,
    atom_sagnac_phase_shift,
    light_pulse_enclosed_area,
    light_pulse_phase_shift,
    atom_shot_noise_phase,
)

from .optomechanical import (
    coriolis_force,
    static_displacement,
    cavity_frequency_pull,
    cavity_frequency_from_wavelength,
    optomechanical_phase_shift,
)

from .superconducting import (
    COOPER_PAIR_MASS,
    cooper_pair_phase_shift,
    london_moment_field,
    london_flux,
    flux_to_phase,
    flux_quanta,
)

from .cold_atom import (
    spin_precession_phase_shift,
    precession_frequency,
    projection_noise_sensitivity,
    collective_phase_snr,
)

from .photonic import (
    free_spectral_range,
    resonator_finesse,
    resonance_splitting,
    resonant_enhancement,
    photonic_phase_shift,
)

__all__ = [
    # Sagnac
    "sagnac_phase_shift", "sagnac_scale_factor",
    "ring_laser_beat_frequency", "shot_noise_phase",
    # Atom interferometry
    "effective_wavevector", "atom_sagnac_phase_shift",
    "light_pulse_enclosed_area", "light_pulse_phase_shift",
    "atom_shot_noise_phase",
    # Optomechanical
    "coriolis_force", "static_displacement", "cavity_frequency_pull",
    "cavity_frequency_from_wavelength", "optomechanical_phase_shift",
    # Superconducting
    "COOPER_PAIR_MASS", "cooper_pair_phase_shift", "london_moment_field",
    "london_flux", "flux_to_phase", "flux_quanta",
    # Cold atom
    "spin_precession_phase_shift", "precession_frequency",
    "projection_noise_sensitivity", "collective_phase_snr",
    # Photonic
    "free_spectral_range", "resonator_finesse", "resonance_splitting",
    "resonant_enhancement", "photonic_phase_shift",
]
