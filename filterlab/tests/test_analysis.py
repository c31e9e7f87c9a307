"""
Tests for the topology catalog and the one-call analysis bundle.
"""

import math
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from filterlab.analysis import DEFAULT_PARAMS, analyze_filter, time_window
from filterlab.params import FilterParams, FilterTopology
from filterlab.topology import TOPOLOGIES, get_topology, list_filter_types, list_topologies
from filterlab.transfer import FirstOrderSection, build_section


class TestTopologyCatalog:
    """Test the catalog used by selector UIs."""

    def test_every_topology_listed(self):
        names = {t['name'] for t in list_topologies()}
        assert names == {t.value for t in FilterTopology}

    def test_section_order_matches_dispatch(self):
        for name, topo in TOPOLOGIES.items():
            section = build_section(FilterParams(topology=name))
            expected = 1 if isinstance(section, FirstOrderSection) else 2
            assert topo.section_order == expected

    def test_get_topology(self):
        topo = get_topology('RL')
        assert topo.label == 'RL (1st Order)'
        assert [s.symbol for s in topo.component_slots] == ['R', 'L']

    def test_unknown_topology_raises(self):
        with pytest.raises(ValueError):
            get_topology('elliptic')

    def test_filter_types(self):
        assert [t['name'] for t in list_filter_types()] == ['lowpass', 'highpass', 'bandpass', 'bandstop']


class TestAnalyzeFilter:
    """Test the dashboard bundle."""

    def test_default_params(self):
        assert DEFAULT_PARAMS.topology is FilterTopology.RLC
        assert DEFAULT_PARAMS.R == 1000.0
        assert DEFAULT_PARAMS.C == 1e-6
        assert DEFAULT_PARAMS.L == 0.01

    def test_bundle_shapes(self):
        result = analyze_filter()
        assert len(result.frequency_response) == 500
        assert len(result.q_factor_response) == 200
        assert len(result.step_response) == 501
        assert len(result.impulse_response) == 501
        assert len(result.pole_zero.poles) == 2
        assert result.frequency_response[0].frequency == pytest.approx(10.0)
        assert result.frequency_response[-1].frequency == pytest.approx(100000.0)

    def test_time_window_is_five_periods(self):
        result = analyze_filter()
        fc = result.characteristics.cutoff_frequency
        assert result.step_response[-1].time == pytest.approx(5 / fc * 1000)

    def test_display_strings(self):
        result = analyze_filter()
        assert result.cutoff_display == '1.59 kHz'
        # Q = 0.1, so bandwidth = 10·fc
        assert result.bandwidth_display == '15.92 kHz'

    def test_as_dict(self):
        d = analyze_filter(FilterParams(type='highpass', topology='RC', order=1)).as_dict()
        assert set(d) == {
            'characteristics', 'frequency_response', 'q_factor_response', 'step_response',
            'impulse_response', 'pole_zero', 'cutoff_display', 'bandwidth_display',
        }
        assert d['pole_zero']['zeros'] == [{'real': 0.0, 'imag': 0.0}]
        assert set(d['step_response'][0]) == {'time', 'amplitude'}

    def test_time_window_zero_cutoff(self):
        assert time_window(0.0) == math.inf
        assert time_window(100.0) == pytest.approx(0.05)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
