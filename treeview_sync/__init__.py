"""Top-level package of the treeview_sync tree-state engine.

The engine turns a flat, caller-supplied forest into a key-indexed node
registry and keeps selection (tri-state, optionally cascading), active and
open state consistent with externally bound key sequences. Front-ends
should depend on the public API exposed here.
"""

__version__ = "0.1.0"

from .core.exceptions import AccessorError, ConfigurationError, TreeviewError
from .core.models import NodeState, SelectionType, TreeAccessors
from .core.registry import NodeRegistry
from .ui.controllers.treeview_controller import TreeviewController

__all__: list[str] = [
    "AccessorError",
    "ConfigurationError",
    "NodeRegistry",
    "NodeState",
    "SelectionType",
    "TreeAccessors",
    "TreeviewController",
    "TreeviewError",
]
