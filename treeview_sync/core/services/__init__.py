from __future__ import annotations

"""Services of the tree-state engine, one per concern.

Each service is UI-agnostic, works on a shared :class:`NodeRegistry` and
never raises for unknown keys.
"""

from .active_service import ActiveService  # noqa: F401
from .change_emitter import ChangeEmitter, sequence_equal  # noqa: F401
from .open_service import OpenService  # noqa: F401
from .search_service import SearchService  # noqa: F401
from .selection_service import SelectionService  # noqa: F401
from .tree_builder_service import TreeBuilderService  # noqa: F401

__all__: list[str] = [
    "ActiveService",
    "ChangeEmitter",
    "OpenService",
    "SearchService",
    "SelectionService",
    "TreeBuilderService",
    "sequence_equal",
]
