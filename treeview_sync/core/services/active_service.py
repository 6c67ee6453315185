from __future__ import annotations

"""Active (focus) tracking with single- or multi-active exclusivity."""

import logging
from typing import Any, Iterable, List

from treeview_sync.core.registry import NodeRegistry

__all__ = ["ActiveService"]

logger = logging.getLogger(__name__)


class ActiveService:
    """Maintain ``is_active`` flags on registry records.

    Parameters
    ----------
    registry : NodeRegistry
        Registry whose records are updated in place.
    multiple_active : bool, default=False
        When False, at most one node is active after any update.
    """

    def __init__(self, registry: NodeRegistry, multiple_active: bool = False) -> None:
        self._registry = registry
        self.multiple_active: bool = bool(multiple_active)

    def set_active(self, key: Any) -> bool:
        """Flip the active flag of ``key``, enforcing exclusivity if needed.

        Deactivating the active node in single-active mode leaves nothing
        active; no replacement is chosen.
        """
        node = self._registry.get(key)
        if node is None:
            logger.debug("Activate noop: unknown key=%r", key)
            return False

        if self.multiple_active or node.is_active:
            node.is_active = not node.is_active
            return True

        node.is_active = True
        for other in self._registry:
            if other is not node and other.is_active:
                other.is_active = False
        return True

    def apply(self, keys: Iterable[Any]) -> None:
        """Full-replace sync from an external active-key sequence.

        In single-active mode the first listed key met in registry order
        wins; every other node is forced inactive.
        """
        wanted = set(keys)
        has_active = False
        for node in self._registry:
            if node.key in wanted and (self.multiple_active or not has_active):
                node.is_active = True
                has_active = True
            else:
                node.is_active = False
        logger.debug("Activate sync OK: requested=%d multiple=%s", len(wanted), self.multiple_active)

    def active_keys(self) -> List[Any]:
        return self._registry.keys_where(lambda node: node.is_active)

    def active_items(self) -> List[Any]:
        return self._registry.items_where(lambda node: node.is_active)
