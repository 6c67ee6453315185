from __future__ import annotations

"""Flat key -> NodeState mapping, the single source of truth for node state.

Iteration follows build order (depth-first, post-order: children before their parent). Every query accepts
unknown keys and answers with the falsy default instead of raising.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional

from treeview_sync.core.models import NodeState

__all__ = ["NodeRegistry"]


class NodeRegistry:
    """Mapping of key to :class:`NodeState`, replaced wholesale on rebuild."""

    def __init__(self) -> None:
        self._nodes: Dict[Any, NodeState] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: Any) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[NodeState]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return f"NodeRegistry({list(self._nodes.keys())!r})"

    # ------------------------------------------------------------------ access

    def get(self, key: Any) -> Optional[NodeState]:
        return self._nodes.get(key)

    def keys(self) -> List[Any]:
        return list(self._nodes.keys())

    def snapshot(self) -> Dict[Any, NodeState]:
        """Return a shallow copy of the mapping (records are shared)."""
        return dict(self._nodes)

    def replace(self, nodes: Dict[Any, NodeState]) -> None:
        """Swap in a freshly built mapping in one step."""
        self._nodes = nodes

    def clear(self) -> None:
        self._nodes = {}

    def keys_where(self, predicate: Callable[[NodeState], bool]) -> List[Any]:
        return [node.key for node in self._nodes.values() if predicate(node)]

    def items_where(self, predicate: Callable[[NodeState], bool]) -> List[Any]:
        return [node.item for node in self._nodes.values() if predicate(node)]

    # ----------------------------------------------------------------- queries

    def is_selected(self, key: Any) -> bool:
        node = self._nodes.get(key)
        return node.is_selected if node is not None else False

    def is_indeterminate(self, key: Any) -> bool:
        node = self._nodes.get(key)
        return node.is_indeterminate if node is not None else False

    def is_active(self, key: Any) -> bool:
        node = self._nodes.get(key)
        return node.is_active if node is not None else False

    def is_open(self, key: Any) -> bool:
        node = self._nodes.get(key)
        return node.is_open if node is not None else False
