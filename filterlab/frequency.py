"""
Frequency-domain sweeps.

frequency_response() gives the Bode data (magnitude dB, phase degrees) from
the transfer function. q_factor_vs_frequency() is a reactance-based display
heuristic and is independent of both the transfer function and the static
Q factor in filterlab.characteristics.
"""

from typing import List

import numpy as np

from filterlab import complex_math as cm
from filterlab.params import FilterParams, FrequencyResponseSample, QFactorSample
from filterlab.transfer import transfer_function

MAGNITUDE_FLOOR = 1e-10
Q_PROXY_FLOOR = 0.01


def generate_frequencies(
    start: float = 1.0,
    end: float = 1e6,
    num_points: int = 500,
) -> np.ndarray:
    """Generate logarithmically-spaced frequency array (Hz), endpoints inclusive."""
    return np.logspace(np.log10(start), np.log10(end), num_points)


def frequency_response(
    params: FilterParams,
    start_freq: float = 1.0,
    end_freq: float = 1e6,
    num_points: int = 500,
) -> List[FrequencyResponseSample]:
    """
    Sweep H(jω) over log-spaced frequencies.

    Magnitude is floored at 1e-10 before conversion to dB so a zero in the
    passband reads -200 dB instead of -inf.

    Args:
        params: Filter configuration
        start_freq: Start frequency in Hz
        end_freq: End frequency in Hz
        num_points: Number of frequency points

    Returns:
        List of samples in ascending frequency order.
    """
    response = []
    for freq in generate_frequencies(start_freq, end_freq, num_points):
        omega = 2 * np.pi * freq
        H = transfer_function(params, omega)
        mag = cm.magnitude(H)
        response.append(FrequencyResponseSample(
            frequency=float(freq),
            magnitude=float(20 * np.log10(max(mag, MAGNITUDE_FLOOR))),
            phase=float(np.degrees(cm.phase(H))),
            magnitude_linear=float(mag),
        ))
    return response


def q_factor_vs_frequency(
    params: FilterParams,
    start_freq: float = 1.0,
    end_freq: float = 1e6,
    num_points: int = 200,
) -> List[QFactorSample]:
    """
    Frequency-varying Q proxy.

        X_L = ωL,  X_C = 1/(ωC)
        energy_stored     = |X_L - X_C|
        energy_dissipated = R
        q_factor          = max(energy_stored / (2R), 0.01)
    """
    frequencies = generate_frequencies(start_freq, end_freq, num_points)
    omega = 2 * np.pi * frequencies
    R = np.float64(params.R)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        X_L = omega * params.L
        X_C = 1.0 / (omega * params.C)
        energy_stored = np.abs(X_L - X_C)
        q = np.maximum(energy_stored / (2 * R), Q_PROXY_FLOOR)

    return [
        QFactorSample(
            frequency=float(f),
            q_factor=float(qf),
            energy_stored=float(es),
            energy_dissipated=float(R),
        )
        for f, qf, es in zip(frequencies, q, energy_stored)
    ]
