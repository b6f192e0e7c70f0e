"""A multi-way hierarchy of territorial units and a cursor that walks it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from uzemie.territorial_unit import UnitType


@dataclass(eq=False)
class HierarchyNode:
    """A node holding data, a link to its parent and an ordered list of sons."""

    data: Any = None
    parent: Optional["HierarchyNode"] = None
    sons: List["HierarchyNode"] = field(default_factory=list)


class Hierarchy:
    """A rooted tree in which every node may have any number of sons."""

    def __init__(self, root_data: Any = None) -> None:
        self.root = HierarchyNode(root_data)

    def emplace_son(self, parent: HierarchyNode, index: int, data: Any = None) -> HierarchyNode:
        """Insert a new son of ``parent`` at position ``index`` and return it."""
        if not 0 <= index <= len(parent.sons):
            raise IndexError("son index out of range")
        son = HierarchyNode(data, parent)
        parent.sons.insert(index, son)
        return son

    def access_son(self, node: HierarchyNode, index: int) -> Optional[HierarchyNode]:
        return node.sons[index] if 0 <= index < len(node.sons) else None

    def degree(self, node: HierarchyNode) -> int:
        return len(node.sons)

    def _post_order(self, node: HierarchyNode) -> Iterator[HierarchyNode]:
        for son in node.sons:
            yield from self._post_order(son)
        yield node


class HierarchyNavigator:
    """A cursor that moves between a node, its parent and its sons."""

    def __init__(self, hierarchy: Hierarchy) -> None:
        self._hierarchy = hierarchy
        self._current = hierarchy.root

    def current(self) -> HierarchyNode:
        return self._current

    def move_to_parent(self) -> bool:
        """Move to the parent; return False if already at the root."""
        if self._current.parent is None:
            return False
        self._current = self._current.parent
        return True

    def move_to_child(self, index: int) -> HierarchyNode:
        """Move to the son at ``index`` and return it."""
        if not 0 <= index < self._hierarchy.degree(self._current):
            raise IndexError("Invalid son index.")
        son = self._hierarchy.access_son(self._current, index)
        self._current = son
        return son

    def list_children(self) -> List[Tuple[int, str]]:
        """Return (index, name) for each son of the current node that holds data."""
        return [
            (index, son.data.name)
            for index, son in enumerate(self._current.sons)
            if son.data is not None
        ]

    def clear_hierarchy(self) -> None:
        """Drop the data of every node except villages."""
        for node in self._hierarchy._post_order(self._hierarchy.root):
            if node.data is not None and node.data.unit_type is not UnitType.OBEC:
                node.data = None