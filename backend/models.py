"""Pydantic models for FilterLab API requests and responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from backend.config import MAX_POINTS
from filterlab.params import FilterParams, FilterTopology, FilterType


# --- Filter parameters ---

class FilterParamsModel(BaseModel):
    """Filter configuration as accepted over the API."""
    type: FilterType = Field(FilterType.LOWPASS, description="Filter type")
    topology: FilterTopology = Field(FilterTopology.RLC, description="Circuit topology")
    order: int = Field(2, ge=1, le=8, description="Filter order")
    R: float = Field(1000.0, gt=0, description="Resistance (Ohms)")
    C: float = Field(1e-6, gt=0, description="Capacitance (Farads)")
    L: float = Field(0.01, gt=0, description="Inductance (Henries)")
    ripple: Optional[float] = Field(None, ge=0, description="Passband ripple (dB), Chebyshev only, currently unused")

    def to_params(self) -> FilterParams:
        return FilterParams(
            type=self.type,
            topology=self.topology,
            order=self.order,
            R=self.R,
            C=self.C,
            L=self.L,
            ripple=self.ripple,
        )


# --- Requests ---

class SweepRequest(BaseModel):
    params: FilterParamsModel = FilterParamsModel()
    freq_start: float = Field(1.0, gt=0)
    freq_end: float = Field(1e6, gt=0)
    num_points: Optional[int] = Field(None, ge=2, le=MAX_POINTS)

    @model_validator(mode="after")
    def check_range(self):
        if self.freq_end <= self.freq_start:
            raise ValueError("freq_end must be greater than freq_start")
        return self


class TimeResponseRequest(BaseModel):
    params: FilterParamsModel = FilterParamsModel()
    duration: Optional[float] = Field(None, gt=0, description="Time span (s); defaults to 5 cutoff periods")
    num_points: int = Field(500, ge=1, le=MAX_POINTS)


class ParamsRequest(BaseModel):
    params: FilterParamsModel = FilterParamsModel()


class AnalyzeRequest(BaseModel):
    params: FilterParamsModel = FilterParamsModel()
    freq_start: float = Field(10.0, gt=0)
    freq_end: float = Field(100000.0, gt=0)

    @model_validator(mode="after")
    def check_range(self):
        if self.freq_end <= self.freq_start:
            raise ValueError("freq_end must be greater than freq_start")
        return self


# --- Responses ---

class CharacteristicsResponse(BaseModel):
    cutoff_frequency: float
    resonant_frequency: float
    q_factor: float
    bandwidth: float
    damping_factor: float
    damping_regime: str
    cutoff_display: str
    bandwidth_display: str


class FrequencyResponseModel(BaseModel):
    frequency: list[Optional[float]]
    magnitude: list[Optional[float]]
    phase: list[Optional[float]]
    magnitude_linear: list[Optional[float]]


class QFactorResponseModel(BaseModel):
    frequency: list[Optional[float]]
    q_factor: list[Optional[float]]
    energy_stored: list[Optional[float]]
    energy_dissipated: list[Optional[float]]


class TimeResponseModel(BaseModel):
    time: list[Optional[float]]
    amplitude: list[Optional[float]]


class ComplexModel(BaseModel):
    real: float
    imag: float


class PoleZeroResponse(BaseModel):
    poles: list[ComplexModel]
    zeros: list[ComplexModel]


class AnalyzeResponse(BaseModel):
    characteristics: CharacteristicsResponse
    frequency_response: FrequencyResponseModel
    q_factor_response: QFactorResponseModel
    step_response: TimeResponseModel
    impulse_response: TimeResponseModel
    pole_zero: PoleZeroResponse


class ComponentSlotModel(BaseModel):
    symbol: str
    type: str
    unit: str


class TopologyInfo(BaseModel):
    name: str
    label: str
    description: str
    section_order: int
    filter_types: list[str]
    component_slots: list[ComponentSlotModel]


class FilterTypeInfo(BaseModel):
    name: str
    label: str


class TopologyListResponse(BaseModel):
    topologies: list[TopologyInfo]
    filter_types: list[FilterTypeInfo]
