"""
Filter parameter and result types.

All types are frozen dataclasses: they are produced fresh by each
generator call and never mutated afterwards.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, Optional, Union

from filterlab.complex_math import Complex


class FilterType(str, Enum):
    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"


class FilterTopology(str, Enum):
    RC = "RC"
    RL = "RL"
    RLC = "RLC"
    BUTTERWORTH = "butterworth"
    CHEBYSHEV = "chebyshev"


class DampingRegime(str, Enum):
    UNDERDAMPED = "underdamped"
    CRITICAL = "critical"
    OVERDAMPED = "overdamped"


def _coerce(enum_cls, value):
    # Unknown names stay plain strings so evaluation falls through to identity
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class FilterParams:
    """
    Filter configuration.

    R (Ohms), C (Farads) and L (Henries) must be strictly positive; this is
    not checked here; invalid values propagate as NaN/inf through the math.
    ripple (dB) is accepted for Chebyshev filters but not used by any
    calculation.
    """
    type: Union[FilterType, str] = FilterType.LOWPASS
    topology: Union[FilterTopology, str] = FilterTopology.RLC
    order: int = 2
    R: float = 1000.0
    C: float = 1e-6
    L: float = 0.01
    ripple: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, 'type', _coerce(FilterType, self.type))
        object.__setattr__(self, 'topology', _coerce(FilterTopology, self.topology))


@dataclass(frozen=True)
class FrequencyResponseSample:
    frequency: float         # Hz
    magnitude: float         # dB
    phase: float             # degrees
    magnitude_linear: float


@dataclass(frozen=True)
class QFactorSample:
    """Frequency-varying Q proxy, distinct from the static Q factor."""
    frequency: float
    q_factor: float
    energy_stored: float
    energy_dissipated: float


@dataclass(frozen=True)
class FilterCharacteristics:
    cutoff_frequency: float
    resonant_frequency: float
    q_factor: float
    bandwidth: float
    damping_factor: float

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TimeDomainSample:
    time: float        # ms
    amplitude: float


@dataclass(frozen=True)
class PoleZeroSet:
    poles: List[Complex] = field(default_factory=list)
    zeros: List[Complex] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            'poles': [p.as_dict() for p in self.poles],
            'zeros': [z.as_dict() for z in self.zeros],
        }
