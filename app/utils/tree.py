# app/utils/tree.py
from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class TreeNode(Generic[T]):
    """
    通用树节点：
    - data    : 节点承载的数据
    - parent  : 父节点（根为 None）
    - children: 按插入顺序保存，key 为调用方给定的标识
    """

    def __init__(self, data: Optional[T] = None) -> None:
        self.data: Optional[T] = data
        self.parent: Optional[TreeNode[T]] = None
        self._children: Dict[Hashable, TreeNode[T]] = {}

    def get_child(self, identifier: Hashable) -> Optional["TreeNode[T]"]:
        return self._children.get(identifier)

    def add_child(self, identifier: Hashable, child: "TreeNode[T]") -> None:
        child.parent = self
        self._children[identifier] = child

    def remove_child(self, identifier: Hashable) -> None:
        node = self._children.pop(identifier, None)
        if node is not None:
            node.parent = None

    def children(self) -> Iterator[Tuple[Hashable, "TreeNode[T]"]]:
        return iter(list(self._children.items()))

    @property
    def is_leaf(self) -> bool:
        return not self._children

    def walk(self) -> Iterator["TreeNode[T]"]:
        """深度优先（先序）遍历，包含自身。"""
        yield self
        for _, child in self.children():
            yield from child.walk()

    def to_dict(self, render=None) -> Dict[str, Any]:
        render = render or (lambda d: d)
        return {
            "data": render(self.data) if self.data is not None else None,
            "children": [child.to_dict(render) for _, child in self.children()],
        }

    def __repr__(self) -> str:
        return f"<TreeNode data={self.data!r} children={len(self._children)}>"
