"""Library routes — supported topologies and filter types."""

from fastapi import APIRouter, HTTPException

from backend.models import TopologyInfo, TopologyListResponse
from filterlab.topology import describe_topology, get_topology, list_filter_types, list_topologies

router = APIRouter()


@router.get("/topologies", response_model=TopologyListResponse)
async def list_topologies_endpoint():
    """List supported topologies and filter types for selector UIs."""
    return TopologyListResponse(
        topologies=list_topologies(),
        filter_types=list_filter_types(),
    )


@router.get("/topologies/{name}", response_model=TopologyInfo)
async def get_topology_endpoint(name: str):
    """Get one topology's description and component slots."""
    try:
        topo = get_topology(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return describe_topology(topo)
