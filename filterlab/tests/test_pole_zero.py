"""
Tests for pole-zero locations.
"""

import math
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from filterlab.complex_math import Complex
from filterlab.params import FilterParams
from filterlab.pole_zero import pole_zero


def params(filter_type, topology, R=1000.0, C=1e-6, L=0.01):
    return FilterParams(type=filter_type, topology=topology, order=2, R=R, C=C, L=L)


class TestFirstOrder:
    """Test single real pole placement."""

    def test_rc_lowpass_pole(self):
        """τ = 1 ms places the pole at -1000 rad/s."""
        pz = pole_zero(params('lowpass', 'RC'))
        assert len(pz.poles) == 1
        assert pz.poles[0].real == pytest.approx(-1000.0)
        assert pz.poles[0].imag == 0.0
        assert pz.zeros == []

    def test_rc_highpass_zero_at_origin(self):
        pz = pole_zero(params('highpass', 'RC'))
        assert pz.zeros == [Complex(0.0, 0.0)]

    def test_rl_pole(self):
        pz = pole_zero(params('lowpass', 'RL', R=100.0, L=0.01))
        assert pz.poles[0].real == pytest.approx(-1e4)

    def test_bandpass_has_no_zero(self):
        assert pole_zero(params('bandpass', 'RC')).zeros == []


class TestSecondOrder:
    """Test RLC pole pairs."""

    def test_underdamped_conjugate_pair(self):
        pz = pole_zero(params('lowpass', 'RLC', R=10.0))
        wd = 1e4 * math.sqrt(1 - 1 / 400)
        assert len(pz.poles) == 2
        assert pz.poles[0].real == pytest.approx(-500.0)
        assert pz.poles[0].imag == pytest.approx(wd)
        assert pz.poles[1].real == pytest.approx(-500.0)
        assert pz.poles[1].imag == pytest.approx(-wd)

    def test_overdamped_real_poles(self):
        pz = pole_zero(params('lowpass', 'butterworth'))
        p1, p2 = pz.poles
        assert p1.imag == 0.0 and p2.imag == 0.0
        assert p1.real < 0 and p2.real < p1.real
        # s1·s2 = ω0², s1 + s2 = -2α
        assert p1.real * p2.real == pytest.approx(1e8)
        assert p1.real + p2.real == pytest.approx(-1e5)

    def test_critical_double_pole(self):
        pz = pole_zero(params('lowpass', 'RLC', R=4.0, C=1.0, L=4.0))
        assert pz.poles == [Complex(-0.5, 0.0), Complex(-0.5, 0.0)]

    def test_poles_in_left_half_plane(self):
        for R in (1.0, 10.0, 150.0, 1000.0):
            for p in pole_zero(params('lowpass', 'RLC', R=R)).poles:
                assert p.real < 0

    def test_highpass_double_zero(self):
        pz = pole_zero(params('highpass', 'RLC'))
        assert pz.zeros == [Complex(0.0, 0.0), Complex(0.0, 0.0)]

    def test_bandstop_zeros_on_imaginary_axis(self):
        pz = pole_zero(params('bandstop', 'RLC'))
        assert len(pz.zeros) == 2
        assert pz.zeros[0].real == 0.0
        assert pz.zeros[0].imag == pytest.approx(1e4)
        assert pz.zeros[1].imag == pytest.approx(-1e4)

    @pytest.mark.parametrize('filter_type', ['lowpass', 'bandpass'])
    def test_no_zeros(self, filter_type):
        assert pole_zero(params(filter_type, 'RLC')).zeros == []


class TestUnmodelled:
    """Chebyshev and unknown topologies have no pole-zero model."""

    @pytest.mark.parametrize('topology', ['chebyshev', 'elliptic'])
    def test_empty(self, topology):
        pz = pole_zero(params('lowpass', topology))
        assert pz.poles == []
        assert pz.zeros == []

    def test_as_dict(self):
        d = pole_zero(params('highpass', 'RC')).as_dict()
        assert d['zeros'] == [{'real': 0.0, 'imag': 0.0}]
        assert d['poles'][0]['real'] == pytest.approx(-1000.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
