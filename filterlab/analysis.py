"""
One-call analysis of a filter: everything a dashboard shows for one
parameter set.

Time-domain responses span five periods of the cutoff frequency.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, List

from filterlab.characteristics import filter_characteristics
from filterlab.formatting import format_frequency
from filterlab.frequency import frequency_response, q_factor_vs_frequency
from filterlab.params import (
    FilterCharacteristics,
    FilterParams,
    FilterTopology,
    FilterType,
    FrequencyResponseSample,
    PoleZeroSet,
    QFactorSample,
    TimeDomainSample,
)
from filterlab.pole_zero import pole_zero
from filterlab.time_domain import impulse_response, step_response

DEFAULT_PARAMS = FilterParams(
    type=FilterType.LOWPASS,
    topology=FilterTopology.RLC,
    order=2,
    R=1000.0,
    C=1e-6,
    L=0.01,
)

DEFAULT_FREQ_START = 10.0
DEFAULT_FREQ_END = 100000.0
TIME_WINDOW_PERIODS = 5


@dataclass(frozen=True)
class FilterAnalysis:
    characteristics: FilterCharacteristics
    frequency_response: List[FrequencyResponseSample]
    q_factor_response: List[QFactorSample]
    step_response: List[TimeDomainSample]
    impulse_response: List[TimeDomainSample]
    pole_zero: PoleZeroSet
    cutoff_display: str
    bandwidth_display: str

    def as_dict(self) -> Dict:
        return {
            'characteristics': self.characteristics.as_dict(),
            'frequency_response': [asdict(s) for s in self.frequency_response],
            'q_factor_response': [asdict(s) for s in self.q_factor_response],
            'step_response': [asdict(s) for s in self.step_response],
            'impulse_response': [asdict(s) for s in self.impulse_response],
            'pole_zero': self.pole_zero.as_dict(),
            'cutoff_display': self.cutoff_display,
            'bandwidth_display': self.bandwidth_display,
        }


def time_window(cutoff_frequency: float) -> float:
    """Duration (s) covering TIME_WINDOW_PERIODS periods of the cutoff frequency."""
    if cutoff_frequency == 0:
        return math.inf
    return TIME_WINDOW_PERIODS / cutoff_frequency


def analyze_filter(
    params: FilterParams = DEFAULT_PARAMS,
    freq_start: float = DEFAULT_FREQ_START,
    freq_end: float = DEFAULT_FREQ_END,
) -> FilterAnalysis:
    """
    Run every generator for params.

    Args:
        params: Filter configuration
        freq_start: Sweep start frequency (Hz)
        freq_end: Sweep end frequency (Hz)

    Returns:
        FilterAnalysis bundling characteristics and all response data.
    """
    characteristics = filter_characteristics(params)
    duration = time_window(characteristics.cutoff_frequency)

    return FilterAnalysis(
        characteristics=characteristics,
        frequency_response=frequency_response(params, freq_start, freq_end),
        q_factor_response=q_factor_vs_frequency(params, freq_start, freq_end),
        step_response=step_response(params, duration),
        impulse_response=impulse_response(params, duration),
        pole_zero=pole_zero(params),
        cutoff_display=format_frequency(characteristics.cutoff_frequency),
        bandwidth_display=format_frequency(characteristics.bandwidth),
    )
