"""Per-node state record and selection mode."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from treeview_sync.core.exceptions import ConfigurationError


class SelectionType(str, Enum):
    """How a selection change spreads through the tree."""

    INDEPENDENT = "independent"
    LEAF = "leaf"

    @classmethod
    def from_value(cls, value: Any) -> "SelectionType":
        """Coerce a config value (enum member or case-insensitive name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ConfigurationError("selection_type", value, [m.value for m in cls])


@dataclass
class NodeState:
    """Internal record tracking one item's state and its position in the tree.

    Links to other nodes are keys only (``parent`` and ``children``), never
    object references, so a registry can be rebuilt wholesale.

    Attributes
    ----------
    key :
        Unique identity of the node across the whole forest.
    item :
        The caller's item instance for this key, never mutated.
    parent :
        Key of the parent node, or None for a root.
    children :
        Keys of the direct children, in item order.
    """

    key: Any
    item: Any = None
    parent: Optional[Any] = None
    children: List[Any] = field(default_factory=list)
    is_selected: bool = False
    is_indeterminate: bool = False
    is_active: bool = False
    is_open: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children
