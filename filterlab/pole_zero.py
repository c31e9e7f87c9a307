"""
Pole and zero locations in the s-plane.

First order (RC, RL): one real pole at -1/τ; highpass adds a zero at 0.
Second order (RLC, butterworth): conjugate pair (-α, ±ωd) when
underdamped, otherwise two real poles -α ± √(α² - ω₀²). Highpass adds a
double zero at the origin, bandstop a conjugate pair at ±jω₀.

Chebyshev is not modelled and returns an empty set.
"""

import numpy as np

from filterlab import complex_math as cm
from filterlab.characteristics import classify_q, q_factor
from filterlab.params import DampingRegime, FilterParams, FilterTopology, FilterType, PoleZeroSet


def pole_zero(params: FilterParams) -> PoleZeroSet:
    """Compute poles and zeros for params."""
    poles = []
    zeros = []
    R, L, C = np.float64(params.R), np.float64(params.L), np.float64(params.C)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if params.topology in (FilterTopology.RC, FilterTopology.RL):
            tau = R * C if params.topology == FilterTopology.RC else L / R
            poles.append(cm.create(float(-1 / tau), 0.0))

            if params.type == FilterType.HIGHPASS:
                zeros.append(cm.create(0.0, 0.0))

        elif params.topology in (FilterTopology.RLC, FilterTopology.BUTTERWORTH):
            omega_0 = 1.0 / np.sqrt(L * C)
            alpha = R / (2 * L)
            Q = q_factor(params)

            if classify_q(Q) == DampingRegime.UNDERDAMPED:
                omega_d = float(omega_0 * np.sqrt(1 - 1 / (4 * Q * Q)))
                poles.append(cm.create(float(-alpha), omega_d))
                poles.append(cm.create(float(-alpha), -omega_d))
            else:
                root = np.sqrt(alpha * alpha - omega_0 * omega_0)
                poles.append(cm.create(float(-alpha + root), 0.0))
                poles.append(cm.create(float(-alpha - root), 0.0))

            if params.type == FilterType.HIGHPASS:
                zeros.append(cm.create(0.0, 0.0))
                zeros.append(cm.create(0.0, 0.0))
            elif params.type == FilterType.BANDSTOP:
                zeros.append(cm.create(0.0, float(omega_0)))
                zeros.append(cm.create(0.0, float(-omega_0)))

    return PoleZeroSet(poles=poles, zeros=zeros)
