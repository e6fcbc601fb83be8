"""
Hierarchy navigation over parent-code links.

This module provides the HierarchyNavigator class for ancestor chains,
children, siblings and descendant closures. Every operation tolerates a
corrupt dataset: dangling parents end a walk, and visited-set guards stop
cycles from looping.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Set

from ..models import AdminLevel, AdministrativeUnit
from .hierarchy_index import HierarchyIndex


class HierarchyNavigator:
    """
    Traverses ancestor, child, sibling and descendant relationships.

    Unknown codes yield empty results everywhere; nothing here raises.
    """

    def __init__(self, index: HierarchyIndex, logger: Optional[logging.Logger] = None):
        """
        Initialize the navigator.

        Args:
            index: Index to navigate
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.index = index
        self._children_by_parent = self._create_children_mapping()

    def _create_children_mapping(self) -> Dict[str, List[AdministrativeUnit]]:
        """Group units by parent code, preserving store order."""
        mapping: Dict[str, List[AdministrativeUnit]] = {}
        for unit in self.index:
            if unit.parent_code is not None:
                mapping.setdefault(unit.parent_code, []).append(unit)
        return mapping

    def ancestor_chain(self, code: str) -> List[AdministrativeUnit]:
        """
        Get the chain from the root province down to the unit itself.

        The walk follows ``parent_code`` until it is absent, stopping early on
        a dangling parent or a code that was already visited.

        Args:
            code: Code of the unit

        Returns:
            Root-first list ending with the unit; empty if the code is unknown
        """
        unit = self.index.lookup(code)
        if unit is None:
            return []

        chain = [unit]
        visited = {unit.code}
        current = unit
        while current.parent_code is not None:
            parent = self.index.lookup(current.parent_code)
            if parent is None or parent.code in visited:
                break
            chain.append(parent)
            visited.add(parent.code)
            current = parent

        chain.reverse()
        return chain

    def parent(self, code: str) -> Optional[AdministrativeUnit]:
        unit = self.index.lookup(code)
        if unit is None or unit.parent_code is None:
            return None
        return self.index.lookup(unit.parent_code)

    def children(self, code: str) -> List[AdministrativeUnit]:
        """Every unit whose parent code is ``code``, whatever its level."""
        if not isinstance(code, str):
            return []
        return list(self._children_by_parent.get(code.strip(), ()))

    def direct_children(self, code: str) -> List[AdministrativeUnit]:
        """
        Units one level below ``code`` whose parent code is ``code``.

        Args:
            code: Code of the parent unit

        Returns:
            Children in store order; empty for villages and unknown codes
        """
        unit = self.index.lookup(code)
        if unit is None or unit.level.child_level is None:
            return []

        child_level = unit.level.child_level
        return [child for child in self._children_by_parent.get(unit.code, ())
                if child.level is child_level]

    def siblings(self, code: str) -> List[AdministrativeUnit]:
        """Units at the same level sharing the parent, excluding the unit itself."""
        unit = self.index.lookup(code)
        if unit is None or unit.parent_code is None:
            return []

        return [other for other in self._children_by_parent.get(unit.parent_code, ())
                if other.level is unit.level and other.code != unit.code]

    def descendants(self, code: str) -> List[AdministrativeUnit]:
        """
        Breadth-first closure of ``direct_children``.

        Args:
            code: Code of the root of the subtree (excluded from the result)

        Returns:
            Descendants level by level; empty for unknown codes
        """
        root = self.index.lookup(code)
        if root is None:
            return []

        result: List[AdministrativeUnit] = []
        visited: Set[str] = {root.code}
        queue = deque([root.code])
        while queue:
            for child in self.direct_children(queue.popleft()):
                if child.code in visited:
                    continue
                visited.add(child.code)
                result.append(child)
                queue.append(child.code)
        return result

    def units_under(self, code: str, level: AdminLevel) -> List[AdministrativeUnit]:
        """
        Direct children of ``code`` provided ``code`` sits at ``level``.

        Backs the level-specific helpers (districts of a province, sectors of a
        district, ...); a code at the wrong level yields an empty list.
        """
        unit = self.index.lookup(code)
        if unit is None or unit.level is not AdminLevel(level):
            return []
        return self.direct_children(code)
