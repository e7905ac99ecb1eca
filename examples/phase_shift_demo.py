#!/usr/bin/env python3
"""
Gyroscope Phase-Shift Demo
==========================

Prints the phase shift of each gyroscope model at a reference rotation rate
and at the Earth rate, then draws the comparison figures:

1. |Δφ| vs |Ω| for all six models (log-log)
2. Sagnac phase vs rotation for a navigation-grade fiber coil
3. Atom-interferometer phase vs pulse separation
"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
import warnings

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quantum_gyro import (
    compute_phase_shift,
    scale_factor,
    list_available_models,
    compare_models,
    sweep_rotation_rate,
    sweep_parameter,
    get_navigation_grade_fog_config,
    get_rb87_interferometer_config,
    max_unambiguous_rate,
    earth_rate_component,
    rad_per_s_to_deg_per_hour,
    plot_model_comparison,
    plot_phase_vs_rotation,
    plot_parameter_sweep,
    OMEGA_EARTH,
)
from quantum_gyro.models import MODEL_LABELS


REFERENCE_RATE = 0.01  # rad/s


def print_phase_table():
    """Phase at the reference rate and at the Earth rate for each model."""
    print(f"{'Model':<28} {'S (rad/(rad/s))':>16} {'Δφ @ 0.01 rad/s':>16} "
          f"{'Δφ @ Ω_E':>12} {'Ω_max (°/h)':>12}")
    print("-" * 88)
    for name in list_available_models():
        S = scale_factor(name)
        phase = compute_phase_shift(name, REFERENCE_RATE)
        phase_earth = compute_phase_shift(name, OMEGA_EARTH)
        omega_max = rad_per_s_to_deg_per_hour(max_unambiguous_rate(S))
        print(f"{MODEL_LABELS[name]:<28} {S:>16.4g} {phase:>16.4g} "
              f"{phase_earth:>12.4g} {omega_max:>12.4g}")


def main():
    """Print the phase table and generate figures"""

    output_dir = Path(__file__).parent.parent / "figures" / "phase_shifts"
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("Quantum Gyroscope Phase Shifts")
    print("=" * 60)

    print("\n" + "=" * 40)
    print("1. Phase Shift per Model")
    print("=" * 40)
    print_phase_table()

    print("\n" + "=" * 40)
    print("2. Model Comparison")
    print("=" * 40)
    rates = np.logspace(-9, 0, 60)
    with warnings.catch_warnings():
        # the high-rate end wraps for the matter-wave models
        warnings.simplefilter("ignore", RuntimeWarning)
        results = compare_models(rates, verbose=True)
    plot_model_comparison(results)
    output_path = output_dir / "01_model_comparison.png"
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  Saved: {output_path}")

    print("\n" + "=" * 40)
    print("3. Navigation-Grade Fiber Coil")
    print("=" * 40)
    fog = get_navigation_grade_fog_config()
    lat = 52.0
    omega_lat = earth_rate_component(lat)
    print(f"  {fog.n_turns:.0f} turns, S = {fog.scale_factor():.4g} rad/(rad/s)")
    print(f"  Earth rate at {lat}°N: {omega_lat:.4g} rad/s "
          f"→ Δφ = {compute_phase_shift('sagnac', omega_lat, fog):.4g} rad")
    fog_rates = np.linspace(-5, 5, 101) * OMEGA_EARTH
    plot_phase_vs_rotation(sweep_rotation_rate("sagnac", fog_rates, fog),
                           title="1 km fiber coil, 1550 nm")
    output_path = output_dir / "02_fog_phase.png"
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  Saved: {output_path}")

    print("\n" + "=" * 40)
    print("4. Atom Interferometer Pulse Separation")
    print("=" * 40)
    atom = get_rb87_interferometer_config()
    print(f"  Rb87 beam: T = {atom.pulse_separation * 1e3:.3g} ms, "
          f"A = {atom.enclosed_area * 1e6:.3g} mm²")
    separations = np.logspace(-4, -2, 30)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        result = sweep_parameter("atom_interferometer", "pulse_separation",
                                 separations, OMEGA_EARTH, config=atom)
    plot_parameter_sweep(result, log_x=True)
    output_path = output_dir / "03_atom_pulse_separation.png"
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  Saved: {output_path}")

    print("\n" + "=" * 60)
    print(f"All figures saved to {output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
