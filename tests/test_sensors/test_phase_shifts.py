"""
Test Suite: Gyroscope Phase-Shift Physics
=========================================

Verifies the closed-form phase-shift models against their textbook
expressions, and checks that independent routes to the same physics agree.

Test Categories:
1. Optical Sagnac: formula, linearity, sign, ring-laser beat note
2. Atom interferometry: matter-wave Sagnac vs light-pulse consistency
3. Optomechanics: Coriolis → displacement → cavity phase chain
4. Superconducting loops: Cooper-pair phase vs London-moment flux
5. Cold-atom spin precession: phase, projection noise, SNR
6. Integrated photonics: resonant enhancement, splitting
7. Input validation: physically meaningless inputs are rejected
"""

import warnings

import pytest
import numpy as np

from quantum_gyro.constants import (
    C, HBAR, M_ELECTRON, E_CHARGE, FLUX_QUANTUM, OMEGA_EARTH, ATOM_MASSES,
)
from quantum_gyro.sensors import (
    sagnac_phase_shift,
    sagnac_scale_factor,
    ring_laser_beat_frequency,
    shot_noise_phase,
    effective_wavevector,
    atom_sagnac_phase_shift,
    light_pulse_enclosed_area,
    light_pulse_phase_shift,
    atom_shot_noise_phase,
    coriolis_force,
    static_displacement,
    cavity_frequency_pull,
    cavity_frequency_from_wavelength,
    optomechanical_phase_shift,
    COOPER_PAIR_MASS,
    cooper_pair_phase_shift,
    london_moment_field,
    london_flux,
    flux_to_phase,
    flux_quanta,
    spin_precession_phase_shift,
    precession_frequency,
    projection_noise_sensitivity,
    collective_phase_snr,
    free_spectral_range,
    resonator_finesse,
    resonance_splitting,
    resonant_enhancement,
    photonic_phase_shift,
)


# =============================================================================
# CATEGORY 1: OPTICAL SAGNAC
# =============================================================================

class TestSagnac:
    """Δφ = 4πNAΩ/(λc)."""

    def test_documented_example_value(self):
        """The 1 m², 0.01 rad/s, 633 nm example matches the closed form."""
        expected = 4 * np.pi * 1.0 * 0.01 / (633e-9 * 3e8)
        assert sagnac_phase_shift(1.0, 0.01, 633e-9, 3e8) == pytest.approx(expected, rel=1e-12)

    def test_default_speed_of_light_is_exact_si_value(self):
        dphi = sagnac_phase_shift(1.0, 0.01, 633e-9)
        assert dphi == pytest.approx(4 * np.pi * 0.01 / (633e-9 * C))

    def test_phase_is_linear_in_rotation(self):
        rates = np.array([0.0, 1e-3, 2e-3, 4e-3])
        phases = sagnac_phase_shift(1.0, rates, 633e-9)
        assert phases[0] == 0.0
        np.testing.assert_allclose(phases[2], 2 * phases[1], rtol=1e-12)
        np.testing.assert_allclose(phases[3], 4 * phases[1], rtol=1e-12)

    def test_reversing_rotation_reverses_phase(self):
        assert sagnac_phase_shift(1.0, -0.01, 633e-9) == pytest.approx(
            -sagnac_phase_shift(1.0, 0.01, 633e-9)
        )

    def test_n_turns_multiplies_phase(self):
        single = sagnac_phase_shift(0.01, 0.01, 1550e-9)
        coil = sagnac_phase_shift(0.01, 0.01, 1550e-9, n_turns=500)
        assert coil == pytest.approx(500 * single)

    def test_scale_factor_is_phase_per_unit_rate(self):
        S = sagnac_scale_factor(2.0, 633e-9, 3e8)
        assert sagnac_phase_shift(2.0, 0.123, 633e-9, 3e8) == pytest.approx(S * 0.123)

    def test_earth_rate_phase_is_tiny_for_unit_area(self):
        """At Earth rate a 1 m² single loop gives only a few μrad."""
        dphi = sagnac_phase_shift(1.0, OMEGA_EARTH, 633e-9)
        assert 1e-6 < dphi < 1e-5, f"Expected a few μrad, got {dphi:.3e} rad"

    def test_ring_laser_beat_frequency(self):
        """Square 4 m ring at Earth rate: Δf = 4AΩ/(λP) ≈ 460 Hz."""
        df = ring_laser_beat_frequency(16.0, 16.0, OMEGA_EARTH, 633e-9)
        assert df == pytest.approx(4 * 16.0 * OMEGA_EARTH / (633e-9 * 16.0))
        assert 400 < df < 500

    def test_shot_noise_phase(self):
        assert shot_noise_phase(1e6) == pytest.approx(1e-3)


# =============================================================================
# CATEGORY 2: ATOM INTERFEROMETRY
# =============================================================================

class TestAtomInterferometry:
    """Matter-wave Sagnac effect and Mach-Zehnder light-pulse interferometers."""

    @pytest.fixture
    def rb87(self):
        return {
            "mass": ATOM_MASSES["Rb87"],
            "k_eff": effective_wavevector(780e-9),
            "velocity": 10.0,
            "T": 5e-3,
        }

    def test_effective_wavevector(self):
        assert effective_wavevector(780e-9) == pytest.approx(4 * np.pi / 780e-9)

    def test_atom_sagnac_formula(self):
        m = ATOM_MASSES["Cs133"]
        assert atom_sagnac_phase_shift(m, 1e-6, 1e-3) == pytest.approx(
            2 * m * 1e-6 * 1e-3 / HBAR
        )

    def test_light_pulse_formula(self, rb87):
        dphi = light_pulse_phase_shift(rb87["k_eff"], rb87["velocity"], 1e-4, rb87["T"])
        expected = 2 * rb87["k_eff"] * rb87["velocity"] * 1e-4 * rb87["T"] ** 2
        assert dphi == pytest.approx(expected)

    def test_light_pulse_matches_sagnac_through_enclosed_area(self, rb87):
        """
        2k_eff vΩT² must equal 2mAΩ/ℏ with A = (ℏk_eff/m)vT².
        Two independent derivations of the same phase.
        """
        area = light_pulse_enclosed_area(rb87["mass"], rb87["k_eff"], rb87["velocity"], rb87["T"])
        via_area = atom_sagnac_phase_shift(rb87["mass"], area, OMEGA_EARTH)
        via_pulses = light_pulse_phase_shift(rb87["k_eff"], rb87["velocity"], OMEGA_EARTH, rb87["T"])
        assert via_area == pytest.approx(via_pulses, rel=1e-10)

    def test_atoms_beat_light_for_equal_area(self):
        """Matter-wave phase exceeds the optical phase by ~mc²/ℏω ≫ 10⁹."""
        area = 1e-4
        atom = atom_sagnac_phase_shift(ATOM_MASSES["Rb87"], area, OMEGA_EARTH)
        light = sagnac_phase_shift(area, OMEGA_EARTH, 780e-9)
        assert atom / light > 1e9

    def test_enclosed_area_scales_with_pulse_separation_squared(self, rb87):
        a1 = light_pulse_enclosed_area(rb87["mass"], rb87["k_eff"], rb87["velocity"], 1e-3)
        a2 = light_pulse_enclosed_area(rb87["mass"], rb87["k_eff"], rb87["velocity"], 2e-3)
        assert a2 == pytest.approx(4 * a1)

    def test_shot_noise_with_contrast(self):
        assert atom_shot_noise_phase(1e4) == pytest.approx(1e-2)
        assert atom_shot_noise_phase(1e4, contrast=0.5) == pytest.approx(2e-2)

    def test_contrast_above_one_rejected(self):
        with pytest.raises(ValueError, match="contrast"):
            atom_shot_noise_phase(1e4, contrast=1.5)


# =============================================================================
# CATEGORY 3: OPTOMECHANICS
# =============================================================================

class TestOptomechanical:
    """Coriolis force → static displacement → cavity frequency pull → phase."""

    @pytest.fixture
    def device(self):
        return dict(
            mass=1e-9,
            velocity=1e-3,
            mechanical_frequency=2 * np.pi * 10e3,
            cavity_frequency=cavity_frequency_from_wavelength(1550e-9),
            cavity_length=1e-3,
            cavity_linewidth=2 * np.pi * 1e6,
        )

    def test_coriolis_force(self):
        assert coriolis_force(2e-9, 0.5, 1e-3) == pytest.approx(2 * 2e-9 * 0.5 * 1e-3)

    def test_displacement_is_force_over_stiffness(self):
        k = 1e-9 * (2 * np.pi * 1e3) ** 2
        assert static_displacement(1e-12, 1e-9, 2 * np.pi * 1e3) == pytest.approx(1e-12 / k)

    def test_displacement_independent_of_mass(self):
        """x = 2Ωv/ω_m²: the mass cancels between force and stiffness."""
        x_light = static_displacement(coriolis_force(1e-12, 0.1, 1e-3), 1e-12, 1e4)
        x_heavy = static_displacement(coriolis_force(1e-6, 0.1, 1e-3), 1e-6, 1e4)
        assert x_light == pytest.approx(x_heavy)
        assert x_light == pytest.approx(2 * 0.1 * 1e-3 / 1e4 ** 2)

    def test_phase_chain(self, device):
        omega = 0.01
        x = 2 * omega * device["velocity"] / device["mechanical_frequency"] ** 2
        G = device["cavity_frequency"] / device["cavity_length"]
        expected = 4 * G * x / device["cavity_linewidth"]
        assert optomechanical_phase_shift(angular_velocity=omega, **device) == pytest.approx(expected)

    def test_frequency_pull(self):
        assert cavity_frequency_pull(1e15, 1e-3) == pytest.approx(1e18)

    def test_no_warning_in_linear_regime(self, device):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            optomechanical_phase_shift(angular_velocity=0.01, **device)

    def test_saturated_readout_warns(self, device):
        with pytest.warns(RuntimeWarning, match="saturated"):
            optomechanical_phase_shift(angular_velocity=100.0, **device)


# =============================================================================
# CATEGORY 4: SUPERCONDUCTING LOOPS
# =============================================================================

class TestSuperconducting:
    """Cooper-pair Sagnac phase and the London moment."""

    def test_cooper_pair_mass(self):
        assert COOPER_PAIR_MASS == pytest.approx(2 * M_ELECTRON)

    def test_cooper_pair_phase_formula(self):
        assert cooper_pair_phase_shift(1e-4, 1.0) == pytest.approx(
            4 * M_ELECTRON * 1e-4 * 1.0 / HBAR
        )

    def test_london_moment_field(self):
        """B/Ω = 2mₑ/e ≈ 1.137×10⁻¹¹ T per rad/s."""
        assert london_moment_field(1.0) == pytest.approx(2 * M_ELECTRON / E_CHARGE)
        assert london_moment_field(1.0) == pytest.approx(1.137e-11, rel=1e-3)

    def test_london_flux_phase_equals_cooper_pair_phase(self):
        """
        2πΦ_L/Φ₀ and 2m*AΩ/ℏ are the same physics seen two ways.
        """
        area, omega = 3e-4, 0.2
        via_flux = flux_to_phase(london_flux(area, omega))
        via_sagnac = cooper_pair_phase_shift(area, omega)
        assert via_flux == pytest.approx(via_sagnac, rel=1e-10)

    def test_one_flux_quantum_is_two_pi(self):
        assert flux_to_phase(FLUX_QUANTUM) == pytest.approx(2 * np.pi)
        assert flux_quanta(3 * FLUX_QUANTUM) == pytest.approx(3.0)

    def test_n_turns(self):
        assert cooper_pair_phase_shift(1e-4, 1.0, n_turns=10) == pytest.approx(
            10 * cooper_pair_phase_shift(1e-4, 1.0)
        )


# =============================================================================
# CATEGORY 5: COLD-ATOM SPIN PRECESSION
# =============================================================================

class TestColdAtom:
    """Δφ = Ωt, δΩ = 1/(√N t), SNR = Ωt√N."""

    def test_precession_phase(self):
        assert spin_precession_phase_shift(0.01, 2.0) == pytest.approx(0.02)

    def test_zero_time_gives_zero_phase(self):
        assert spin_precession_phase_shift(0.01, 0.0) == 0.0

    def test_precession_frequency_adds_rotation(self):
        gamma, B = 2 * np.pi * 7e9, 1e-6
        assert precession_frequency(gamma, B, 0.5) == pytest.approx(gamma * B + 0.5)

    def test_projection_noise(self):
        assert projection_noise_sensitivity(1e6, 1.0) == pytest.approx(1e-3)
        assert projection_noise_sensitivity(4e6, 1.0) == pytest.approx(0.5e-3)

    def test_snr(self):
        """SNR is the ratio of the phase to the projection-noise phase 1/√N."""
        omega, n, t = 1e-3, 1e6, 2.0
        assert collective_phase_snr(omega, n, t) == pytest.approx(omega * t * np.sqrt(n))
        assert collective_phase_snr(omega, n, t) == pytest.approx(
            omega / projection_noise_sensitivity(n, t)
        )

    def test_negative_time_rejected(self):
        with pytest.raises(ValueError, match="interrogation_time"):
            spin_precession_phase_shift(0.01, -1.0)


# =============================================================================
# CATEGORY 6: INTEGRATED PHOTONICS
# =============================================================================

class TestPhotonic:
    """Resonant enhancement of the Sagnac phase in a ring resonator."""

    def test_free_spectral_range(self):
        assert free_spectral_range(0.03, group_index=1.5) == pytest.approx(C / (1.5 * 0.03))

    def test_centimetre_ring_headline_value(self):
        """1 cm ring, F = 1000, Ω = 1 rad/s: about 1.35 mrad, not radians."""
        dphi = photonic_phase_shift(np.pi * 0.005 ** 2, 1.0, 1550e-9, finesse=1000)
        assert dphi == pytest.approx(1.352e-3, rel=1e-3)

    def test_finesse(self):
        assert resonator_finesse(10e9, 10e6) == pytest.approx(1000.0)

    def test_splitting_independent_of_index(self):
        """Δf = 4AΩ/(λP) contains no refractive index."""
        d = 0.01
        area, perimeter = np.pi * d ** 2 / 4, np.pi * d
        df = resonance_splitting(area, perimeter, 1.0, 1550e-9)
        assert df == pytest.approx(d * 1.0 / 1550e-9)

    def test_unit_finesse_reduces_to_single_pass(self):
        assert photonic_phase_shift(1e-4, 1.0, 1550e-9, finesse=1.0) == pytest.approx(
            sagnac_phase_shift(1e-4, 1.0, 1550e-9)
        )

    def test_enhancement_is_two_finesse_over_pi(self):
        single = sagnac_phase_shift(1e-4, 1.0, 1550e-9)
        resonant = photonic_phase_shift(1e-4, 1.0, 1550e-9, finesse=1000.0)
        assert resonant / single == pytest.approx(2 * 1000.0 / np.pi)

    def test_enhancement_clamped_to_one(self):
        assert resonant_enhancement(0.5) == pytest.approx(1.0)
        assert resonant_enhancement(np.pi / 2) == pytest.approx(1.0)


# =============================================================================
# CATEGORY 7: INPUT VALIDATION
# =============================================================================

class TestValidation:
    """Physically meaningless inputs raise ValueError naming the parameter."""

    @pytest.mark.parametrize("kwargs, name", [
        (dict(area=0.0, angular_velocity=0.01, wavelength=633e-9), "area"),
        (dict(area=1.0, angular_velocity=0.01, wavelength=-633e-9), "wavelength"),
        (dict(area=1.0, angular_velocity=np.nan, wavelength=633e-9), "angular_velocity"),
        (dict(area=1.0, angular_velocity=0.01, wavelength=633e-9, n_turns=0), "n_turns"),
    ])
    def test_sagnac_rejects_bad_inputs(self, kwargs, name):
        with pytest.raises(ValueError, match=name):
            sagnac_phase_shift(**kwargs)

    def test_array_with_one_bad_element_rejected(self):
        with pytest.raises(ValueError, match="area"):
            sagnac_phase_shift(np.array([1.0, -1.0]), 0.01, 633e-9)

    def test_zero_atoms_rejected(self):
        with pytest.raises(ValueError, match="n_atoms"):
            projection_noise_sensitivity(0, 1.0)

    def test_negative_mass_rejected(self):
        with pytest.raises(ValueError, match="mass"):
            atom_sagnac_phase_shift(-1.0, 1e-6, 1e-3)
