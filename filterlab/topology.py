"""
Catalog of supported filter topologies and filter types.

Used by front ends to populate selectors; the numeric dispatch lives in
filterlab.transfer.SECTION_BUILDERS.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from filterlab.params import FilterTopology, FilterType


@dataclass
class ComponentSlot:
    """A component the topology consumes."""
    symbol: str        # 'R', 'C' or 'L'
    comp_type: str     # 'resistor', 'capacitor', 'inductor'
    unit: str


@dataclass
class TopologyDefinition:
    """Description of one supported topology."""
    name: str
    label: str
    description: str
    section_order: int
    component_slots: List[ComponentSlot]
    filter_types: List[FilterType] = field(default_factory=list)


_R = ComponentSlot('R', 'resistor', 'Ω')
_C = ComponentSlot('C', 'capacitor', 'F')
_L = ComponentSlot('L', 'inductor', 'H')

_FIRST_ORDER_TYPES = [FilterType.LOWPASS, FilterType.HIGHPASS]
_ALL_TYPES = list(FilterType)

TOPOLOGIES: Dict[str, TopologyDefinition] = {
    FilterTopology.RC.value: TopologyDefinition(
        name='RC',
        label='RC (1st Order)',
        description='Simple RC filter',
        section_order=1,
        component_slots=[_R, _C],
        filter_types=_FIRST_ORDER_TYPES,
    ),
    FilterTopology.RL.value: TopologyDefinition(
        name='RL',
        label='RL (1st Order)',
        description='Simple RL filter',
        section_order=1,
        component_slots=[_R, _L],
        filter_types=_FIRST_ORDER_TYPES,
    ),
    FilterTopology.RLC.value: TopologyDefinition(
        name='RLC',
        label='RLC (2nd Order)',
        description='Second-order RLC filter',
        section_order=2,
        component_slots=[_R, _L, _C],
        filter_types=_ALL_TYPES,
    ),
    FilterTopology.BUTTERWORTH.value: TopologyDefinition(
        name='butterworth',
        label='Butterworth',
        description='Maximally flat response',
        section_order=2,
        component_slots=[_R, _L, _C],
        filter_types=_ALL_TYPES,
    ),
    FilterTopology.CHEBYSHEV.value: TopologyDefinition(
        name='chebyshev',
        label='Chebyshev',
        description='Steeper rolloff with ripple (ripple is not yet applied; evaluated as RLC)',
        section_order=2,
        component_slots=[_R, _L, _C],
        filter_types=_ALL_TYPES,
    ),
}

FILTER_TYPE_LABELS: Dict[FilterType, str] = {
    FilterType.LOWPASS: 'Low-Pass',
    FilterType.HIGHPASS: 'High-Pass',
    FilterType.BANDPASS: 'Band-Pass',
    FilterType.BANDSTOP: 'Band-Stop',
}


def get_topology(name: str) -> TopologyDefinition:
    """Get a topology definition by name."""
    if name not in TOPOLOGIES:
        raise ValueError(f"Unknown topology '{name}'. Available: {list(TOPOLOGIES.keys())}")
    return TOPOLOGIES[name]


def describe_topology(topo: TopologyDefinition) -> Dict:
    return {
        'name': topo.name,
        'label': topo.label,
        'description': topo.description,
        'section_order': topo.section_order,
        'filter_types': [t.value for t in topo.filter_types],
        'component_slots': [
            {'symbol': s.symbol, 'type': s.comp_type, 'unit': s.unit}
            for s in topo.component_slots
        ],
    }


def list_topologies() -> List[Dict]:
    """List all supported topologies."""
    return [describe_topology(topo) for topo in TOPOLOGIES.values()]


def list_filter_types() -> List[Dict]:
    return [{'name': t.value, 'label': label} for t, label in FILTER_TYPE_LABELS.items()]
