# app/api/routers/locations.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_location_group_service, get_location_service
from app.models.location import LocationGroup
from app.schemas.locations import LocationGroupNode, LocationGroupOut, LocationOut
from app.services.location_group_service import LocationGroupService
from app.services.location_service import LocationService
from app.utils.tree import TreeNode

router = APIRouter(tags=["locations"])


def _to_node(node: TreeNode[LocationGroup]) -> LocationGroupNode:
    return LocationGroupNode(
        group=LocationGroupOut.model_validate(node.data) if node.data is not None else None,
        children=[_to_node(child) for _, child in node.children()],
    )


@router.get("/locations", response_model=List[LocationOut])
async def get_all_locations(svc: LocationService = Depends(get_location_service)):
    """全部库位（按 id 升序，只读）。"""
    return await svc.get_all_locations()


@router.get("/location-groups/tree", response_model=LocationGroupNode)
async def get_location_group_tree(
    svc: LocationGroupService = Depends(get_location_group_service),
):
    """库位组层级树；根节点 group 为空。"""
    return _to_node(await svc.get_group_tree())
