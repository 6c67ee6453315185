"""GUI-agnostic core of the tree-state engine.

Front-ends should go through :class:`treeview_sync.TreeviewController`
rather than wiring the services below by hand.
"""

from .exceptions import AccessorError, ConfigurationError, TreeviewError
from .models import NodeState, SelectionType, TreeAccessors
from .registry import NodeRegistry

__all__: list[str] = [
    "AccessorError",
    "ConfigurationError",
    "NodeRegistry",
    "NodeState",
    "SelectionType",
    "TreeAccessors",
    "TreeviewError",
]
