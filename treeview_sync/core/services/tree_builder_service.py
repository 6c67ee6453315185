from __future__ import annotations

"""Build the node registry from a caller-supplied forest.

The builder keeps the last forest reference and a structural signature of
it. A rebuild happens when either one changes, so callers that mutate their
list in place are still picked up while repeated update cycles with the
same content cost a single signature pass.

Rules applied on every rebuild:
- Records are recreated, never patched; keys missing from the new forest
  are dropped.
- Every flag (selected, indeterminate, active, open) carries over from
  the previous record with the same key. New branch keys and keys whose
  child list changed are collected in :attr:`TreeBuilderService.reshaped`
  so a cascading selection can recompute them.
- Records are inserted after their children (post-order).
- Duplicate keys: the later-visited record wins and a warning is logged.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from treeview_sync.core.models import NodeState, TreeAccessors
from treeview_sync.core.registry import NodeRegistry

__all__ = ["TreeBuilderService"]

logger = logging.getLogger(__name__)

_UNSET = object()


class TreeBuilderService:
    """(Re)construct a :class:`NodeRegistry` from a forest of items.

    Parameters
    ----------
    registry : NodeRegistry
        Registry that receives each freshly built mapping.
    accessors : TreeAccessors
        Caller functions used to read keys and children.
    open_all : bool, default=False
        Open every branch node the first time a build sees its key.
    """

    def __init__(self, registry: NodeRegistry, accessors: TreeAccessors, open_all: bool = False) -> None:
        self._registry = registry
        self._accessors = accessors
        self.open_all: bool = bool(open_all)
        self.forest: List[Any] = []
        self.version: int = 0
        self.reshaped: List[Any] = []
        self._last_forest: Any = _UNSET
        self._last_signature: Optional[str] = None

    # --------------------------------------------------------------------- API

    def signature(self, forest: Optional[Sequence[Any]]) -> str:
        """Return the depth-first concatenation of every key in ``forest``.

        Child groups are bracketed so that moving a node under a different
        parent changes the signature even when the key order does not.
        """
        parts: List[str] = []
        self._collect_signature(forest or [], parts)
        return "".join(parts)

    def sync(self, forest: Optional[Sequence[Any]]) -> bool:
        """Rebuild only if the forest reference or its signature changed.

        Returns
        -------
        bool
            True if a rebuild happened.
        """
        if forest is not self._last_forest:
            self._last_signature = self.signature(forest)
            self._last_forest = forest
            self.build(forest)
            return True

        signature = self.signature(forest)
        if signature == self._last_signature:
            return False
        logger.debug("Build: signature changed on same forest reference")
        self._last_signature = signature
        self.build(forest)
        return True

    def build(self, forest: Optional[Sequence[Any]]) -> None:
        """Unconditionally rebuild the registry from ``forest``."""
        self.forest = list(forest or [])
        previous = self._registry.snapshot()
        nodes: Dict[Any, NodeState] = {}
        duplicates: List[Any] = []
        reshaped: List[Any] = []

        self._build_level(self.forest, None, previous, nodes, duplicates, reshaped)

        self.reshaped = reshaped
        self._registry.replace(nodes)
        self.version += 1
        if duplicates:
            logger.warning("Build: duplicate keys overwritten (last wins) keys=%r", duplicates)
        logger.debug(
            "Build OK: nodes=%d dropped=%d reshaped=%d version=%d",
            len(nodes),
            sum(1 for key in previous if key not in nodes),
            len(reshaped),
            self.version,
        )

    # --------------------------------------------------------------- Internals

    def _collect_signature(self, items: Sequence[Any], parts: List[str]) -> None:
        for item in items:
            parts.append(repr(self._accessors.key(item)))
            children = self._accessors.children(item)
            if children:
                parts.append("[")
                self._collect_signature(children, parts)
                parts.append("]")
            parts.append(",")

    def _build_level(
        self,
        items: Sequence[Any],
        parent: Any,
        previous: Dict[Any, NodeState],
        nodes: Dict[Any, NodeState],
        duplicates: List[Any],
        reshaped: List[Any],
    ) -> None:
        for item in items:
            key = self._accessors.key(item)
            child_items = self._accessors.children(item)

            node = NodeState(
                key=key,
                item=item,
                parent=parent,
                children=[self._accessors.key(child) for child in child_items],
            )
            old = previous.get(key)
            if old is not None:
                node.is_selected = old.is_selected
                node.is_indeterminate = old.is_indeterminate
                node.is_active = old.is_active
                node.is_open = old.is_open
                if old.children != node.children:
                    reshaped.append(key)
            elif child_items:
                node.is_open = self.open_all
                reshaped.append(key)

            self._build_level(child_items, key, previous, nodes, duplicates, reshaped)

            # Children are registered first, so iteration order is post-order
            if key in nodes:
                duplicates.append(key)
            nodes[key] = node
