"""
Gyroscope Model Registry
========================

Uniform access to the six phase-shift models. Each registered model is a
function ``(config, angular_velocity) -> Δφ`` that unpacks its config
dataclass into the closed-form expression from the ``sensors`` package.

    >>> print(f"{compute_phase_shift('sagnac', 0.01):.3e}")
    6.617e-04
    >>> print(f"{scale_factor('superconducting'):.3f}")  # rad per rad/s
    3.455

Every model is linear in Ω, so the scale factor is simply the phase at
Ω = 1 rad/s.
"""

from typing import Callable, Dict, Optional

from .configurations import (
    SagnacConfig,
    AtomInterferometerConfig,
    OptomechanicalConfig,
    SuperconductingLoopConfig,
    ColdAtomConfig,
    PhotonicConfig,
    DEFAULT_CONFIGS,
    get_default_config,
)
from .sensors import (
    sagnac_phase_shift,
    light_pulse_phase_shift,
    optomechanical_phase_shift,
    cooper_pair_phase_shift,
    spin_precession_phase_shift,
    photonic_phase_shift,
)


def _sagnac(config: SagnacConfig, angular_velocity):
    return sagnac_phase_shift(
        config.area, angular_velocity, config.wavelength,
        speed_of_light=config.speed_of_light, n_turns=config.n_turns,
    )


def _atom_interferometer(config: AtomInterferometerConfig, angular_velocity):
    return light_pulse_phase_shift(
        config.k_eff, config.velocity, angular_velocity, config.pulse_separation,
    )


def _optomechanical(config: OptomechanicalConfig, angular_velocity):
    return optomechanical_phase_shift(
        config.mass,
        config.velocity,
        angular_velocity,
        config.mechanical_frequency,
        config.cavity_frequency,
        config.cavity_length,
        config.cavity_linewidth,
    )


def _superconducting(config: SuperconductingLoopConfig, angular_velocity):
    return cooper_pair_phase_shift(config.area, angular_velocity, n_turns=config.n_turns)


def _cold_atom(config: ColdAtomConfig, angular_velocity):
    return spin_precession_phase_shift(angular_velocity, config.interrogation_time)


def _photonic(config: PhotonicConfig, angular_velocity):
    return photonic_phase_shift(
        config.area, angular_velocity, config.wavelength,
        finesse=config.finesse, speed_of_light=config.speed_of_light,
    )


GYROSCOPE_MODELS: Dict[str, Callable] = {
    "sagnac": _sagnac,
    "atom_interferometer": _atom_interferometer,
    "optomechanical": _optomechanical,
    "superconducting": _superconducting,
    "cold_atom": _cold_atom,
    "photonic": _photonic,
}
"""Registry of available phase-shift models."""

MODEL_LABELS: Dict[str, str] = {
    "sagnac": "Optical Sagnac",
    "atom_interferometer": "Atom interferometer",
    "optomechanical": "Optomechanical",
    "superconducting": "Superconducting loop",
    "cold_atom": "Cold-atom spin precession",
    "photonic": "Integrated photonic",
}


def _resolve(model: str, config=None):
    key = model.lower()
    if key not in GYROSCOPE_MODELS:
        available = list(GYROSCOPE_MODELS.keys())
        raise ValueError(
            f"Unknown model: {model}. "
            f"Available models: {available}"
        )
    if config is None:
        config = get_default_config(key)
    elif not isinstance(config, DEFAULT_CONFIGS[key]):
        raise ValueError(
            f"Model '{key}' expects a {DEFAULT_CONFIGS[key].__name__}, "
            f"got {type(config).__name__}"
        )
    return key, config


def compute_phase_shift(model: str, angular_velocity, config: Optional[object] = None):
    """
    Evaluate a gyroscope model's phase shift.

    This is the main interface for the models. Use it rather than the
    private per-model wrappers.

    Parameters
    ----------
    model : str
        Model name: "sagnac", "atom_interferometer", "optomechanical",
        "superconducting", "cold_atom", "photonic"
    angular_velocity : float or array
        Rotation rate in rad/s
    config : dataclass, optional
        Model configuration. Uses the model's defaults if None.

    Returns
    -------
    float or array
        Phase shift in radians

    Raises
    ------
    ValueError
        If the model is unknown or the config has the wrong type
    """
    key, config = _resolve(model, config)
    return GYROSCOPE_MODELS[key](config, angular_velocity)


def scale_factor(model: str, config: Optional[object] = None) -> float:
    """Phase response per unit rotation rate, dΔφ/dΩ, in rad/(rad/s)."""
    return float(compute_phase_shift(model, 1.0, config))


def list_available_models() -> list:
    """Return list of available model names."""
    return list(GYROSCOPE_MODELS.keys())


__all__ = [
    "GYROSCOPE_MODELS",
    "MODEL_LABELS",
    "compute_phase_shift",
    "scale_factor",
    "list_available_models",
]
