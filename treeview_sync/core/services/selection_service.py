from __future__ import annotations

"""Tri-state selection with optional parent/child cascading.

In :attr:`SelectionType.INDEPENDENT` mode a selection change touches the
target node only. In :attr:`SelectionType.LEAF` mode it runs two passes:

1. Downward: every descendant is forced to the target's value and loses
   its indeterminate flag.
2. Upward: each ancestor, from the parent to the root, is recomputed from
   its direct children. All selected -> selected; all unselected and none
   partial -> unselected; anything else -> indeterminate, with
   ``is_selected`` left untouched. An ancestor reached from an
   indeterminate child is indeterminate regardless of that test.
"""

import logging
from typing import Any, Iterable, List, Optional

from treeview_sync.core.models import SelectionType
from treeview_sync.core.registry import NodeRegistry

__all__ = ["SelectionService"]

logger = logging.getLogger(__name__)


class SelectionService:
    """Apply selection changes to the records of a :class:`NodeRegistry`."""

    def __init__(self, registry: NodeRegistry, selection_type: SelectionType = SelectionType.INDEPENDENT) -> None:
        self._registry = registry
        self.selection_type: SelectionType = SelectionType.from_value(selection_type)

    @property
    def cascading(self) -> bool:
        return self.selection_type is SelectionType.LEAF

    # --------------------------------------------------------------------- API

    def set_selected(self, key: Any, value: Optional[bool] = None) -> bool:
        """Toggle (``value`` None) or set the selection of ``key``.

        Returns
        -------
        bool
            False if the key is unknown, True otherwise.
        """
        node = self._registry.get(key)
        if node is None:
            logger.debug("Select noop: unknown key=%r", key)
            return False

        node.is_selected = (not node.is_selected) if value is None else bool(value)
        node.is_indeterminate = False

        if self.cascading:
            self._force_descendants(node.children, node.is_selected)
            self._recompute_ancestors(node.parent)
        return True

    def apply(self, keys: Iterable[Any]) -> None:
        """Full-replace sync: clear everything, then select each key in turn."""
        for node in self._registry:
            node.is_selected = False
            node.is_indeterminate = False
        count = 0
        for key in keys:
            if self.set_selected(key, True):
                count += 1
        logger.debug("Select sync OK: applied=%d", count)

    def refresh(self, keys: Iterable[Any]) -> None:
        """Recompute the tri-state of ``keys`` and their ancestors from their children.

        Used after a rebuild changed the child lists of ``keys``. A no-op in
        independent mode.
        """
        if not self.cascading:
            return
        for key in keys:
            node = self._registry.get(key)
            if node is None:
                continue
            if node.children:
                self._recompute_ancestors(key)
            else:
                node.is_indeterminate = False
                self._recompute_ancestors(node.parent)

    def selected_keys(self) -> List[Any]:
        return self._registry.keys_where(lambda node: node.is_selected)

    def selected_items(self) -> List[Any]:
        return self._registry.items_where(lambda node: node.is_selected)

    # --------------------------------------------------------------- Internals

    def _force_descendants(self, children: Iterable[Any], value: bool) -> None:
        stack = list(children)
        seen = set()
        while stack:
            key = stack.pop()
            child = self._registry.get(key)
            if child is None or key in seen:
                continue
            seen.add(key)
            child.is_selected = value
            child.is_indeterminate = False
            stack.extend(child.children)

    def _recompute_ancestors(self, parent_key: Any) -> None:
        child_indeterminate = False
        key = parent_key
        # Duplicate keys can produce a parent chain that loops
        seen = set()
        while key is not None and key not in seen:
            seen.add(key)
            node = self._registry.get(key)
            if node is None:
                return

            if child_indeterminate:
                node.is_indeterminate = True
            else:
                children = [c for c in (self._registry.get(k) for k in node.children) if c is not None]
                if any(c.is_indeterminate for c in children):
                    node.is_indeterminate = True
                elif all(c.is_selected for c in children):
                    node.is_selected = True
                    node.is_indeterminate = False
                elif not any(c.is_selected for c in children):
                    node.is_selected = False
                    node.is_indeterminate = False
                else:
                    node.is_indeterminate = True

            child_indeterminate = node.is_indeterminate
            key = node.parent
