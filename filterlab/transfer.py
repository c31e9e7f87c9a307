"""
Transfer function H(jω) evaluation.

Each topology resolves to one section variant:

    FirstOrderSection (RC, RL), x = jωτ:
        LP: H = 1 / (1 + x)       HP: H = x / (1 + x)
        cascaded by repeating the same factor `order` times.

    SecondOrderSection (RLC, butterworth, chebyshev), s = jω:
        D  = s² + (ω₀/Q)·s + ω₀²
        LP: H = ω₀² / D           HP: H = s² / D
        BP: H = (ω₀/Q)·s / D      BS: H = (s² + ω₀²) / D
        LP/HP add one identical section per step of range(2, order, 2);
        BP/BS ignore order.

Stages reuse one pole/denominator factor; no per-stage Butterworth or
Chebyshev pole placement is done, and the Chebyshev ripple is unused.
Combinations with no matching section or filter type evaluate to 1 + 0j.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

import numpy as np

from filterlab import complex_math as cm
from filterlab.characteristics import q_factor
from filterlab.complex_math import Complex
from filterlab.params import FilterParams, FilterTopology, FilterType


@dataclass(frozen=True)
class FirstOrderSection:
    """Single real pole with time constant tau (seconds)."""
    tau: float

    def evaluate(self, filter_type: FilterType, order: int, omega: float) -> Complex:
        x = cm.scale(cm.J, omega * self.tau)
        denom = cm.add(cm.ONE, x)

        if filter_type == FilterType.LOWPASS:
            H = cm.divide(cm.ONE, denom)
            for _ in range(1, order):
                H = cm.divide(H, denom)
            return H

        if filter_type == FilterType.HIGHPASS:
            stage = cm.divide(x, denom)
            H = stage
            for _ in range(1, order):
                H = cm.multiply(H, stage)
            return H

        return cm.ONE


@dataclass(frozen=True)
class SecondOrderSection:
    """Second-order section with natural frequency omega_0 (rad/s) and Q."""
    omega_0: float
    q: float

    def evaluate(self, filter_type: FilterType, order: int, omega: float) -> Complex:
        s = cm.scale(cm.J, omega)
        s2 = cm.multiply(s, s)
        w0_sq = cm.create(self.omega_0 * self.omega_0, 0.0)
        with np.errstate(divide='ignore', invalid='ignore'):
            coeff = np.float64(self.omega_0) / np.float64(self.q)
        denom = cm.add(cm.add(s2, cm.scale(s, coeff)), w0_sq)

        if filter_type == FilterType.LOWPASS:
            return _cascade(cm.divide(w0_sq, denom), order)
        if filter_type == FilterType.HIGHPASS:
            return _cascade(cm.divide(s2, denom), order)
        if filter_type == FilterType.BANDPASS:
            return cm.divide(cm.scale(s, coeff), denom)
        if filter_type == FilterType.BANDSTOP:
            return cm.divide(cm.add(s2, w0_sq), denom)
        return cm.ONE


Section = Union[FirstOrderSection, SecondOrderSection]


def _cascade(stage: Complex, order: int) -> Complex:
    H = stage
    for _ in range(2, order, 2):
        H = cm.multiply(H, stage)
    return H


def _rc_section(params: FilterParams) -> FirstOrderSection:
    return FirstOrderSection(tau=np.float64(params.R) * params.C)


def _rl_section(params: FilterParams) -> FirstOrderSection:
    with np.errstate(divide='ignore', invalid='ignore'):
        return FirstOrderSection(tau=np.float64(params.L) / params.R)


def _rlc_section(params: FilterParams) -> SecondOrderSection:
    with np.errstate(divide='ignore', invalid='ignore'):
        omega_0 = 1.0 / np.sqrt(np.float64(params.L) * params.C)
    return SecondOrderSection(omega_0=omega_0, q=q_factor(params))


# One builder per topology
SECTION_BUILDERS: Dict[FilterTopology, Callable[[FilterParams], Section]] = {
    FilterTopology.RC: _rc_section,
    FilterTopology.RL: _rl_section,
    FilterTopology.RLC: _rlc_section,
    FilterTopology.BUTTERWORTH: _rlc_section,
    FilterTopology.CHEBYSHEV: _rlc_section,
}


def build_section(params: FilterParams) -> Optional[Section]:
    """Resolve the section variant for params, or None for unknown topologies."""
    builder = SECTION_BUILDERS.get(params.topology)
    if builder is None:
        return None
    return builder(params)


def transfer_function(params: FilterParams, omega: float) -> Complex:
    """
    Evaluate H(jω).

    Args:
        params: Filter configuration
        omega: Angular frequency (rad/s)

    Returns:
        Complex transfer function value.
    """
    section = build_section(params)
    if section is None:
        return cm.ONE
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return section.evaluate(params.type, params.order, omega)


def transfer_function_array(params: FilterParams, omegas: np.ndarray) -> np.ndarray:
    """Evaluate H(jω) over an array of angular frequencies (complex ndarray)."""
    section = build_section(params)
    H = np.ones(len(omegas), dtype=complex)
    if section is None:
        return H
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        for i, omega in enumerate(omegas):
            H[i] = complex(section.evaluate(params.type, params.order, float(omega)))
    return H
