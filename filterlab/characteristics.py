"""
Scalar filter characteristics derived from topology and component values.

    RC:                       fc = 1 / (2π·R·C),   Q = 0.5
    RL:                       fc = R / (2π·L),     Q = 0.5
    RLC/butterworth/chebyshev: fc = 1 / (2π·√(LC)), Q = (1/R)·√(L/C)

    bandwidth = fc / Q
    damping   = 1 / (2Q)

First-order filters have no resonance; Q = 0.5 is a fixed convention.
Component values are not validated: zero or negative R, L or C give
NaN/inf results rather than errors.
"""

import numpy as np

from filterlab.params import (
    DampingRegime,
    FilterCharacteristics,
    FilterParams,
    FilterTopology,
)

FIRST_ORDER_TOPOLOGIES = (FilterTopology.RC, FilterTopology.RL)
SECOND_ORDER_TOPOLOGIES = (
    FilterTopology.RLC,
    FilterTopology.BUTTERWORTH,
    FilterTopology.CHEBYSHEV,
)

FIRST_ORDER_Q = 0.5


def _rlc(params: FilterParams):
    return np.float64(params.R), np.float64(params.L), np.float64(params.C)


def cutoff_frequency(params: FilterParams) -> float:
    """Cutoff frequency (Hz)."""
    R, L, C = _rlc(params)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if params.topology == FilterTopology.RL:
            return float(R / (2 * np.pi * L))
        if params.topology in SECOND_ORDER_TOPOLOGIES:
            return float(1.0 / (2 * np.pi * np.sqrt(L * C)))
        return float(1.0 / (2 * np.pi * R * C))


def resonant_frequency(params: FilterParams) -> float:
    """Resonant frequency (Hz). No peak shift is modelled, so this is fc."""
    return cutoff_frequency(params)


def q_factor(params: FilterParams) -> float:
    """Static quality factor of the filter."""
    if params.topology not in SECOND_ORDER_TOPOLOGIES:
        return FIRST_ORDER_Q
    R, L, C = _rlc(params)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float((1.0 / R) * np.sqrt(L / C))


def bandwidth(params: FilterParams) -> float:
    """Bandwidth (Hz) = fc / Q."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(cutoff_frequency(params)) / np.float64(q_factor(params)))


def damping_factor(params: FilterParams) -> float:
    """Damping ratio ζ = 1 / (2Q)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(1.0 / (2 * np.float64(q_factor(params))))


def classify_q(Q: float) -> DampingRegime:
    """
    Damping regime for a quality factor.

    Q == 0.5 is kept as its own branch: the critically damped step and
    impulse formulas differ structurally from the other two.
    """
    if Q > 0.5:
        return DampingRegime.UNDERDAMPED
    if Q == 0.5:
        return DampingRegime.CRITICAL
    return DampingRegime.OVERDAMPED


def damping_regime(params: FilterParams) -> DampingRegime:
    return classify_q(q_factor(params))


def filter_characteristics(params: FilterParams) -> FilterCharacteristics:
    """Compute all scalar characteristics for a parameter set."""
    return FilterCharacteristics(
        cutoff_frequency=cutoff_frequency(params),
        resonant_frequency=resonant_frequency(params),
        q_factor=q_factor(params),
        bandwidth=bandwidth(params),
        damping_factor=damping_factor(params),
    )
