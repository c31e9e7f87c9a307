"""
FilterLab Compute Engine

Analog filter analysis: transfer functions, characteristics, frequency
sweeps, closed-form time-domain responses and pole-zero locations for
RC, RL, RLC, Butterworth and Chebyshev topologies.

All functions are pure; results are freshly allocated on every call.
"""

from filterlab.complex_math import Complex
from filterlab.params import (
    DampingRegime,
    FilterCharacteristics,
    FilterParams,
    FilterTopology,
    FilterType,
    FrequencyResponseSample,
    PoleZeroSet,
    QFactorSample,
    TimeDomainSample,
)
from filterlab.characteristics import (
    bandwidth,
    cutoff_frequency,
    damping_factor,
    damping_regime,
    filter_characteristics,
    q_factor,
    resonant_frequency,
)
from filterlab.transfer import transfer_function, transfer_function_array
from filterlab.frequency import frequency_response, q_factor_vs_frequency, generate_frequencies
from filterlab.time_domain import step_response, impulse_response
from filterlab.pole_zero import pole_zero
from filterlab.formatting import format_frequency, format_component_value
from filterlab.topology import TopologyDefinition, get_topology, list_topologies
from filterlab.analysis import FilterAnalysis, analyze_filter, DEFAULT_PARAMS

__version__ = "0.1.0"
