"""
Tests for the FilterLab HTTP API.

Validates request validation, response shapes and that each route returns
the same numbers as the engine.
"""

import sys
import os

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from backend.main import app


client = TestClient(app)

RC_HP = {'type': 'highpass', 'topology': 'RC', 'order': 1, 'R': 1000.0, 'C': 1e-6, 'L': 0.01}


class TestHealthAndLibrary:
    """Test health check and topology catalog."""

    def test_health(self):
        resp = client.get('/api/health')
        assert resp.status_code == 200
        assert resp.json()['status'] == 'healthy'

    def test_list_topologies(self):
        data = client.get('/api/topologies').json()
        assert len(data['topologies']) == 5
        assert len(data['filter_types']) == 4

    def test_get_topology(self):
        data = client.get('/api/topologies/butterworth').json()
        assert data['section_order'] == 2
        assert data['label'] == 'Butterworth'

    def test_unknown_topology_404(self):
        assert client.get('/api/topologies/elliptic').status_code == 404


class TestValidation:
    """Test parameter validation at the API boundary."""

    @pytest.mark.parametrize('field,value', [('R', 0), ('C', -1e-6), ('L', 0), ('order', 0)])
    def test_rejects_non_positive(self, field, value):
        params = dict(RC_HP, **{field: value})
        resp = client.post('/api/characteristics', json={'params': params})
        assert resp.status_code == 422

    def test_rejects_unknown_topology(self):
        params = dict(RC_HP, topology='elliptic')
        assert client.post('/api/characteristics', json={'params': params}).status_code == 422

    def test_rejects_inverted_range(self):
        body = {'params': RC_HP, 'freq_start': 1000.0, 'freq_end': 10.0}
        assert client.post('/api/frequency-response', json=body).status_code == 422


class TestAnalysisRoutes:
    """Test the analysis endpoints."""

    def test_characteristics_defaults(self):
        data = client.post('/api/characteristics', json={}).json()
        assert data['cutoff_frequency'] == pytest.approx(1591.549, rel=1e-5)
        assert data['q_factor'] == pytest.approx(0.1)
        assert data['damping_regime'] == 'overdamped'
        assert data['cutoff_display'] == '1.59 kHz'

    def test_frequency_response(self):
        body = {'params': RC_HP, 'freq_start': 10.0, 'freq_end': 1e5, 'num_points': 50}
        data = client.post('/api/frequency-response', json=body).json()
        assert len(data['frequency']) == 50
        assert data['frequency'][0] == pytest.approx(10.0)
        assert data['magnitude'][-1] == pytest.approx(0.0, abs=0.01)

    def test_q_factor_default_points(self):
        data = client.post('/api/q-factor', json={'params': RC_HP}).json()
        assert len(data['q_factor']) == 200
        assert min(data['q_factor']) >= 0.01

    def test_step_response_default_window(self):
        data = client.post('/api/step-response', json={'params': RC_HP}).json()
        assert len(data['time']) == 501
        # Five periods of fc = 159.15 Hz
        assert data['time'][-1] == pytest.approx(5 / 159.1549 * 1000, rel=1e-5)

    def test_impulse_response_explicit_duration(self):
        body = {'params': RC_HP, 'duration': 0.01, 'num_points': 100}
        data = client.post('/api/impulse-response', json=body).json()
        assert len(data['amplitude']) == 101
        assert data['amplitude'][0] == pytest.approx(1.0)

    def test_pole_zero(self):
        data = client.post('/api/pole-zero', json={'params': RC_HP}).json()
        assert data['poles'][0]['real'] == pytest.approx(-1000.0)
        assert data['zeros'] == [{'real': 0.0, 'imag': 0.0}]

    def test_analyze(self):
        data = client.post('/api/analyze', json={}).json()
        assert len(data['frequency_response']['frequency']) == 500
        assert len(data['q_factor_response']['frequency']) == 200
        assert len(data['step_response']['time']) == 501
        assert len(data['pole_zero']['poles']) == 2
        assert data['characteristics']['bandwidth_display'] == '15.92 kHz'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
