"""Analysis routes — FilterParams → characteristics and response data."""

import logging
import math
from typing import Iterable, List, Optional

from fastapi import APIRouter, HTTPException

from backend.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    CharacteristicsResponse,
    ComplexModel,
    FrequencyResponseModel,
    ParamsRequest,
    PoleZeroResponse,
    QFactorResponseModel,
    SweepRequest,
    TimeResponseModel,
    TimeResponseRequest,
)
from filterlab.analysis import analyze_filter, time_window
from filterlab.characteristics import classify_q, filter_characteristics
from filterlab.formatting import format_frequency
from filterlab.frequency import frequency_response, q_factor_vs_frequency
from filterlab.pole_zero import pole_zero
from filterlab.time_domain import impulse_response, step_response

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_SWEEP_POINTS = 500
DEFAULT_Q_SWEEP_POINTS = 200


def _finite(values: Iterable[float], label: str) -> List[Optional[float]]:
    """JSON has no NaN/inf; report them as null and log once per series."""
    result = [v if math.isfinite(v) else None for v in values]
    dropped = sum(1 for v in result if v is None)
    if dropped:
        logger.warning("%d non-finite values in %s replaced with null", dropped, label)
    return result


def _characteristics_model(chars) -> CharacteristicsResponse:
    return CharacteristicsResponse(
        **chars.as_dict(),
        damping_regime=classify_q(chars.q_factor).value,
        cutoff_display=format_frequency(chars.cutoff_frequency),
        bandwidth_display=format_frequency(chars.bandwidth),
    )


def _frequency_model(samples) -> FrequencyResponseModel:
    return FrequencyResponseModel(
        frequency=_finite((s.frequency for s in samples), "frequency"),
        magnitude=_finite((s.magnitude for s in samples), "magnitude"),
        phase=_finite((s.phase for s in samples), "phase"),
        magnitude_linear=_finite((s.magnitude_linear for s in samples), "magnitude_linear"),
    )


def _q_model(samples) -> QFactorResponseModel:
    return QFactorResponseModel(
        frequency=_finite((s.frequency for s in samples), "frequency"),
        q_factor=_finite((s.q_factor for s in samples), "q_factor"),
        energy_stored=_finite((s.energy_stored for s in samples), "energy_stored"),
        energy_dissipated=_finite((s.energy_dissipated for s in samples), "energy_dissipated"),
    )


def _time_model(samples, label: str) -> TimeResponseModel:
    return TimeResponseModel(
        time=_finite((s.time for s in samples), f"{label} time"),
        amplitude=_finite((s.amplitude for s in samples), f"{label} amplitude"),
    )


def _pole_zero_model(pz) -> PoleZeroResponse:
    return PoleZeroResponse(
        poles=[ComplexModel(real=p.real, imag=p.imag) for p in pz.poles],
        zeros=[ComplexModel(real=z.real, imag=z.imag) for z in pz.zeros],
    )


@router.post("/characteristics", response_model=CharacteristicsResponse)
async def characteristics_endpoint(request: ParamsRequest):
    """Cutoff, resonance, Q, bandwidth and damping for a filter."""
    params = request.params.to_params()
    return _characteristics_model(filter_characteristics(params))


@router.post("/frequency-response", response_model=FrequencyResponseModel)
async def frequency_response_endpoint(request: SweepRequest):
    """Bode magnitude/phase sweep."""
    params = request.params.to_params()
    num_points = request.num_points or DEFAULT_SWEEP_POINTS
    logger.debug("Frequency sweep %s %s, %d points", params.topology, params.type, num_points)
    try:
        samples = frequency_response(params, request.freq_start, request.freq_end, num_points)
    except Exception as e:
        logger.error(f"Frequency sweep failed: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Frequency response calculation failed. Check the filter parameters.")
    return _frequency_model(samples)


@router.post("/q-factor", response_model=QFactorResponseModel)
async def q_factor_endpoint(request: SweepRequest):
    """Frequency-varying Q proxy sweep."""
    params = request.params.to_params()
    num_points = request.num_points or DEFAULT_Q_SWEEP_POINTS
    try:
        samples = q_factor_vs_frequency(params, request.freq_start, request.freq_end, num_points)
    except Exception as e:
        logger.error(f"Q sweep failed: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Q factor calculation failed. Check the filter parameters.")
    return _q_model(samples)


def _duration(request: TimeResponseRequest, params) -> float:
    if request.duration is not None:
        return request.duration
    return time_window(filter_characteristics(params).cutoff_frequency)


@router.post("/step-response", response_model=TimeResponseModel)
async def step_response_endpoint(request: TimeResponseRequest):
    """Closed-form unit-step response."""
    params = request.params.to_params()
    try:
        samples = step_response(params, _duration(request, params), request.num_points)
    except Exception as e:
        logger.error(f"Step response failed: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Step response calculation failed. Check the filter parameters.")
    return _time_model(samples, "step")


@router.post("/impulse-response", response_model=TimeResponseModel)
async def impulse_response_endpoint(request: TimeResponseRequest):
    """Closed-form impulse response."""
    params = request.params.to_params()
    try:
        samples = impulse_response(params, _duration(request, params), request.num_points)
    except Exception as e:
        logger.error(f"Impulse response failed: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Impulse response calculation failed. Check the filter parameters.")
    return _time_model(samples, "impulse")


@router.post("/pole-zero", response_model=PoleZeroResponse)
async def pole_zero_endpoint(request: ParamsRequest):
    """Pole and zero locations in the s-plane."""
    return _pole_zero_model(pole_zero(request.params.to_params()))


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_endpoint(request: AnalyzeRequest):
    """Characteristics plus every response dataset in one call."""
    params = request.params.to_params()
    logger.debug("Full analysis %s %s order=%d", params.topology, params.type, params.order)
    try:
        result = analyze_filter(params, request.freq_start, request.freq_end)
    except Exception as e:
        logger.error(f"Filter analysis failed: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail="Filter analysis failed. Check the filter parameters.")

    return AnalyzeResponse(
        characteristics=_characteristics_model(result.characteristics),
        frequency_response=_frequency_model(result.frequency_response),
        q_factor_response=_q_model(result.q_factor_response),
        step_response=_time_model(result.step_response, "step"),
        impulse_response=_time_model(result.impulse_response, "impulse"),
        pole_zero=_pole_zero_model(result.pole_zero),
    )
