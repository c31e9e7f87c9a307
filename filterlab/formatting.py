"""
Display formatting for frequencies and component values.

    format_frequency(1591.55)           → '1.59 kHz'
    format_component_value(0.01, 'H')   → '10.000 mH'
    format_component_value(1e-6, 'F')   → '1.000 µF'
"""

# (threshold, divisor, suffix), checked top to bottom
_FREQUENCY_SCALES = [
    (1e9, 1e9, 'GHz'),
    (1e6, 1e6, 'MHz'),
    (1e3, 1e3, 'kHz'),
]

_SUBUNIT_PREFIXES = [
    (1e0,   1e0,  ''),
    (1e-3,  1e3,  'm'),
    (1e-6,  1e6,  'µ'),
    (1e-9,  1e9,  'n'),
    (1e-12, 1e12, 'p'),
]


def format_frequency(freq: float) -> str:
    """Format a frequency (Hz) with a GHz/MHz/kHz/Hz suffix and two decimals."""
    for threshold, divisor, suffix in _FREQUENCY_SCALES:
        if freq >= threshold:
            return f"{freq / divisor:.2f} {suffix}"
    return f"{freq:.2f} Hz"


def format_component_value(value: float, unit: str) -> str:
    """
    Format a component value with a sub-unit SI prefix.

    Values of 1 and above are printed as-is; smaller values are scaled
    to m, µ, n or p. Anything below 1p falls back to exponential notation.
    """
    for threshold, multiplier, prefix in _SUBUNIT_PREFIXES:
        if value >= threshold:
            return f"{value * multiplier:.3f} {prefix}{unit}"
    return f"{value:.2e} {unit}"
