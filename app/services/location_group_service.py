# app/services/location_group_service.py
from __future__ import annotations

from typing import Dict, List, Optional

from app.db.uow import UnitOfWork
from app.models.location import LocationGroup
from app.services.entity_service import EntityService
from app.services.location_repo import LocationGroupRepo
from app.utils.tree import TreeNode


def build_group_tree(groups: List[LocationGroup]) -> TreeNode[LocationGroup]:
    """
    把扁平的库位组列表组装成树：
    - 返回的根节点 data=None，子节点为顶层组（parent_id 为空）
    - 父组不在列表中的组挂到根下，避免丢节点
    - 子节点按 id 升序
    """
    nodes: Dict[int, TreeNode[LocationGroup]] = {g.id: TreeNode(g) for g in groups}
    root: TreeNode[LocationGroup] = TreeNode()
    for g in sorted(groups, key=lambda x: x.id):
        parent: Optional[TreeNode[LocationGroup]] = (
            nodes.get(g.parent_id) if g.parent_id is not None else None
        )
        if parent is None or g.parent_id == g.id:
            root.add_child(g.name, nodes[g.id])
        else:
            parent.add_child(g.name, nodes[g.id])
    return root


class LocationGroupService(EntityService[LocationGroup]):
    model = LocationGroup
    repo_class = LocationGroupRepo

    async def get_group_tree(self) -> TreeNode[LocationGroup]:
        async with UnitOfWork(self.session, read_only=True):
            groups = await self.repo.find_all()
        self.logger.debug("building location group tree from %d groups", len(groups))
        return build_group_tree(groups)
