from __future__ import annotations

"""Controller that keeps tree-view state in sync with externally bound values."""

import logging
from typing import Any, Callable, FrozenSet, List, Optional, Sequence

from treeview_sync.config import ConfigManager
from treeview_sync.core.models import SelectionType, TreeAccessors
from treeview_sync.core.registry import NodeRegistry
from treeview_sync.core.services import (
    ActiveService,
    ChangeEmitter,
    OpenService,
    SearchService,
    SelectionService,
    TreeBuilderService,
)

__all__ = ["TreeviewController"]

logger = logging.getLogger(__name__)


class TreeviewController:
    """Coordinate the tree-state services behind one tree-view component.

    The controller owns the node registry, the three bound key sequences
    (selected, active, open) and their change callbacks. It contains no UI
    toolkit code and never renders anything.

    Parameters
    ----------
    accessors : TreeAccessors
        Caller functions reading key, children, text and disabled state.
    selection_type : SelectionType or str, optional
        ``independent`` or ``leaf``. Defaults to the configured value.
    multiple_active : bool, optional
        Allow more than one active node. Defaults to the configured value.
    open_all : bool, optional
        Open branch nodes the first time they are built. Defaults to the
        configured value.

    Notes
    -----
    - The usual cycle is ``set_parameters(...)`` whenever the caller's
      inputs change, then a toggle followed by the matching ``emit_*``.
    - Emits notify only when the computed sequence differs (ordered
      equality) from the last known bound value.
    - Queries and toggles never raise for unknown keys.

    Examples
    --------
    >>> acc = TreeAccessors.for_mappings()
    >>> ctrl = TreeviewController(acc, selection_type="leaf")
    >>> ctrl.set_parameters(items=[{"id": 1, "name": "root", "children": [{"id": 2, "name": "leaf"}]}])
    >>> ctrl.update_selected(2)
    >>> ctrl.emit_selected()
    True
    >>> ctrl.value
    [2, 1]
    """

    def __init__(
        self,
        accessors: TreeAccessors,
        selection_type: Optional[SelectionType | str] = None,
        multiple_active: Optional[bool] = None,
        open_all: Optional[bool] = None,
    ) -> None:
        defaults = ConfigManager().get_engine_defaults()
        if selection_type is None:
            selection_type = defaults.get("selection_type", SelectionType.INDEPENDENT)
        if multiple_active is None:
            multiple_active = bool(defaults.get("multiple_active", False))
        if open_all is None:
            open_all = bool(defaults.get("open_all", False))

        self.accessors: TreeAccessors = accessors
        self.registry: NodeRegistry = NodeRegistry()

        # Services
        self.builder = TreeBuilderService(self.registry, accessors, open_all=open_all)
        self.selection = SelectionService(self.registry, SelectionType.from_value(selection_type))
        self.activation = ActiveService(self.registry, multiple_active=multiple_active)
        self.expansion = OpenService(self.registry)
        self.search_service = SearchService(accessors)

        # Change channels
        self.selected_channel = ChangeEmitter("selected", fallback=self._state_has_changed)
        self.active_channel = ChangeEmitter("active", fallback=self._state_has_changed)
        self.open_channel = ChangeEmitter("open", fallback=self._state_has_changed)

        # Transient state
        self.items: Optional[Sequence[Any]] = None
        self.search: str = ""
        self.on_state_changed: Optional[Callable[[], Any]] = None

    # ---------------------------------------------------------------------------------
    # Bound values and callbacks
    # ---------------------------------------------------------------------------------

    @property
    def selection_type(self) -> SelectionType:
        return self.selection.selection_type

    @property
    def multiple_active(self) -> bool:
        return self.activation.multiple_active

    @property
    def open_all(self) -> bool:
        return self.builder.open_all

    @property
    def value(self) -> Optional[List[Any]]:
        """Last known selected-key sequence."""
        return self.selected_channel.current

    @property
    def active(self) -> Optional[List[Any]]:
        """Last known active-key sequence."""
        return self.active_channel.current

    @property
    def open(self) -> Optional[List[Any]]:
        """Last known open-key sequence."""
        return self.open_channel.current

    def bind(
        self,
        on_value_changed: Optional[Callable[[List[Any]], Any]] = None,
        on_input: Optional[Callable[[List[Any]], Any]] = None,
        on_active_changed: Optional[Callable[[List[Any]], Any]] = None,
        on_active_update: Optional[Callable[[List[Any]], Any]] = None,
        on_open_changed: Optional[Callable[[List[Any]], Any]] = None,
        on_open_update: Optional[Callable[[List[Any]], Any]] = None,
        on_state_changed: Optional[Callable[[], Any]] = None,
    ) -> None:
        """Register change callbacks. Arguments left as None keep their current value.

        ``on_*_changed`` receive key lists; ``on_input``, ``on_active_update``
        and ``on_open_update`` receive the matching items.
        """
        if on_value_changed is not None:
            self.selected_channel.on_changed = on_value_changed
        if on_input is not None:
            self.selected_channel.on_items = on_input
        if on_active_changed is not None:
            self.active_channel.on_changed = on_active_changed
        if on_active_update is not None:
            self.active_channel.on_items = on_active_update
        if on_open_changed is not None:
            self.open_channel.on_changed = on_open_changed
        if on_open_update is not None:
            self.open_channel.on_items = on_open_update
        if on_state_changed is not None:
            self.on_state_changed = on_state_changed

    # ---------------------------------------------------------------------------------
    # Parameters cycle
    # ---------------------------------------------------------------------------------

    def set_parameters(
        self,
        items: Optional[Sequence[Any]] = None,
        value: Optional[Sequence[Any]] = None,
        active: Optional[Sequence[Any]] = None,
        open: Optional[Sequence[Any]] = None,
        search: Optional[str] = None,
    ) -> None:
        """Apply the caller's current inputs.

        The forest is rebuilt only when its reference or key signature
        changed. Each bound sequence is applied only when it differs from
        the last known one; ``None`` means not bound and is skipped. Omitted
        ``items`` keep the current forest, which is still checked for
        in-place changes. The search exclusion set is recomputed on the
        first query after each call.
        """
        self.search_service.invalidate()
        self.set_items(self.items if items is None else items)
        if search is not None:
            self.search = search
        self.sync_selected(value)
        self.sync_active(active)
        self.sync_open(open)

    def set_items(self, items: Optional[Sequence[Any]]) -> bool:
        """Point the controller at ``items``, rebuilding if needed."""
        self.items = items
        if not self.builder.sync(items):
            return False
        self._after_rebuild()
        return True

    def rebuild_tree(self) -> None:
        """Force a rebuild from the current forest."""
        self.builder.build(self.items)
        self._after_rebuild()

    def sync_selected(self, value: Optional[Sequence[Any]]) -> bool:
        if value is None or not self.selected_channel.accept(value):
            return False
        self.selection.apply(value)
        return True

    def sync_active(self, active: Optional[Sequence[Any]]) -> bool:
        if active is None or not self.active_channel.accept(active):
            return False
        self.activation.apply(active)
        return True

    def sync_open(self, open: Optional[Sequence[Any]]) -> bool:
        if open is None or not self.open_channel.accept(open):
            return False
        self.expansion.apply(open)
        return True

    # ---------------------------------------------------------------------------------
    # Toggles
    # ---------------------------------------------------------------------------------

    def update_selected(self, key: Any, is_selected: Optional[bool] = None) -> bool:
        return self.selection.set_selected(key, is_selected)

    def update_active(self, key: Any) -> bool:
        return self.activation.set_active(key)

    def update_open(self, key: Any) -> bool:
        return self.expansion.toggle_open(key)

    # ---------------------------------------------------------------------------------
    # Emits
    # ---------------------------------------------------------------------------------

    def emit_selected(self) -> bool:
        return self.selected_channel.emit(self.selection.selected_keys(), self.selection.selected_items)

    def emit_active(self) -> bool:
        return self.active_channel.emit(self.activation.active_keys(), self.activation.active_items)

    def emit_open(self) -> bool:
        return self.open_channel.emit(self.expansion.open_keys(), self.expansion.open_items)

    # ---------------------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------------------

    def is_selected(self, key: Any) -> bool:
        return self.registry.is_selected(key)

    def is_indeterminate(self, key: Any) -> bool:
        return self.registry.is_indeterminate(key)

    def is_active(self, key: Any) -> bool:
        return self.registry.is_active(key)

    def is_open(self, key: Any) -> bool:
        return self.registry.is_open(key)

    def is_disabled(self, key: Any) -> bool:
        node = self.registry.get(key)
        if node is None:
            return False
        return self.accessors.disabled(node.item)

    def is_excluded(self, key: Any, search: Optional[str] = None) -> bool:
        """True if ``key`` is pruned by ``search`` (default: the current search)."""
        term = self.search if search is None else search
        return self.search_service.is_excluded(key, self.builder.forest, term, self.builder.version)

    @property
    def excluded_items(self) -> FrozenSet[Any]:
        return self.search_service.compute_excluded(self.builder.forest, self.search, self.builder.version)

    @property
    def computed_items(self) -> List[Any]:
        """Root items that survive the current search."""
        if not self.search:
            return list(self.builder.forest)
        excluded = self.excluded_items
        return [item for item in self.builder.forest if self.accessors.key(item) not in excluded]

    # ---------------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------------

    def _after_rebuild(self) -> None:
        self.search_service.invalidate()
        self.selection.refresh(reversed(self.builder.reshaped))
        logger.debug("Rebuild OK: nodes=%d version=%d", len(self.registry), self.builder.version)

    def _state_has_changed(self) -> None:
        if self.on_state_changed is not None:
            self.on_state_changed()
