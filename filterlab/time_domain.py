"""
Closed-form step and impulse responses.

RC:  step    = 1 - e^(-t/τ),  τ = RC
     impulse = (1/τ)·e^(-t/τ), normalized back by τ

RLC / butterworth, ω₀ = 1/√(LC), α = R/(2L):
    underdamped (Q > 0.5), ωd = ω₀·√(1 - 1/(4Q²)):
        step    = 1 - e^(-αt)·(cos(ωd·t) + (α/ωd)·sin(ωd·t))
        impulse = (ω₀/ωd)·e^(-αt)·sin(ωd·t)
    critically damped (Q == 0.5):
        step    = 1 - (1 + αt)·e^(-αt)
    overdamped (Q < 0.5), s₁,₂ = -α ± √(α² - ω₀²):
        step    = 1 + (s₂·e^(s₁t) - s₁·e^(s₂t)) / (s₁ - s₂)
    critical and overdamped share impulse = ω₀·t·e^(-αt)

Every other topology (RL, chebyshev) uses the RC exponential with τ = RC,
or τ = 0.001 s when RC is zero.

Samples are taken at t = i·dt for i = 0..num_points with
dt = duration / num_points, so num_points + 1 samples are returned.
Time is reported in milliseconds.
"""

from typing import List

import numpy as np

from filterlab.characteristics import classify_q, q_factor
from filterlab.params import DampingRegime, FilterParams, FilterTopology, TimeDomainSample

STEP_CLAMP = (0.0, 2.0)
FALLBACK_TAU = 0.001

_RESONANT_TOPOLOGIES = (FilterTopology.RLC, FilterTopology.BUTTERWORTH)


def _time_axis(duration: float, num_points: int) -> np.ndarray:
    with np.errstate(divide='ignore', invalid='ignore'):
        dt = np.float64(duration) / num_points
        return np.arange(num_points + 1) * dt


def _samples(t: np.ndarray, amplitude: np.ndarray) -> List[TimeDomainSample]:
    return [
        TimeDomainSample(time=float(ti * 1000), amplitude=float(a))
        for ti, a in zip(t, amplitude)
    ]


def _resonant_terms(params: FilterParams):
    L = np.float64(params.L)
    omega_0 = 1.0 / np.sqrt(L * params.C)
    alpha = params.R / (2 * L)
    Q = q_factor(params)
    return omega_0, alpha, Q


def _damped_frequency(omega_0, Q):
    return omega_0 * np.sqrt(1 - 1 / (4 * Q * Q))


def step_response(
    params: FilterParams,
    duration: float = 0.01,
    num_points: int = 500,
) -> List[TimeDomainSample]:
    """
    Unit-step response.

    Args:
        params: Filter configuration
        duration: Simulated time span in seconds
        num_points: Number of time steps

    Returns:
        num_points + 1 samples, amplitude clamped to [0, 2].
    """
    t = _time_axis(duration, num_points)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if params.topology == FilterTopology.RC:
            tau = np.float64(params.R) * params.C
            amplitude = 1 - np.exp(-t / tau)

        elif params.topology in _RESONANT_TOPOLOGIES:
            omega_0, alpha, Q = _resonant_terms(params)
            regime = classify_q(Q)

            if regime == DampingRegime.UNDERDAMPED:
                omega_d = _damped_frequency(omega_0, Q)
                amplitude = 1 - np.exp(-alpha * t) * (
                    np.cos(omega_d * t) + (alpha / omega_d) * np.sin(omega_d * t)
                )
            elif regime == DampingRegime.CRITICAL:
                amplitude = 1 - (1 + alpha * t) * np.exp(-alpha * t)
            else:
                root = np.sqrt(alpha * alpha - omega_0 * omega_0)
                s1 = -alpha + root
                s2 = -alpha - root
                amplitude = 1 + (s2 * np.exp(s1 * t) - s1 * np.exp(s2 * t)) / (s1 - s2)

        else:
            tau = params.R * params.C or FALLBACK_TAU
            amplitude = 1 - np.exp(-t / np.float64(tau))

    return _samples(t, np.clip(amplitude, *STEP_CLAMP))


def impulse_response(
    params: FilterParams,
    duration: float = 0.01,
    num_points: int = 500,
) -> List[TimeDomainSample]:
    """Impulse response, same time axis as step_response(); not clamped."""
    t = _time_axis(duration, num_points)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if params.topology == FilterTopology.RC:
            tau = np.float64(params.R) * params.C
            amplitude = (1 / tau) * np.exp(-t / tau)
            # Normalize to unit peak
            amplitude = amplitude * tau

        elif params.topology in _RESONANT_TOPOLOGIES:
            omega_0, alpha, Q = _resonant_terms(params)

            if classify_q(Q) == DampingRegime.UNDERDAMPED:
                omega_d = _damped_frequency(omega_0, Q)
                amplitude = (omega_0 / omega_d) * np.exp(-alpha * t) * np.sin(omega_d * t)
            else:
                amplitude = omega_0 * t * np.exp(-alpha * t)

        else:
            tau = params.R * params.C or FALLBACK_TAU
            amplitude = np.exp(-t / np.float64(tau))

    return _samples(t, amplitude)
