"""Data structures used by the tree-state engine.

`NodeState` is the per-key record stored in the registry, `SelectionType`
selects how selection spreads, and `TreeAccessors` bundles the caller's
item accessor functions.
"""

from .accessors import TreeAccessors
from .node_state import NodeState, SelectionType

__all__ = [
    "NodeState",
    "SelectionType",
    "TreeAccessors",
]
