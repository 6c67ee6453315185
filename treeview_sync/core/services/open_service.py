from __future__ import annotations

"""Expand/collapse flags. No cascade, no exclusivity."""

import logging
from typing import Any, Iterable, List

from treeview_sync.core.registry import NodeRegistry

__all__ = ["OpenService"]

logger = logging.getLogger(__name__)


class OpenService:
    """Maintain ``is_open`` flags on registry records."""

    def __init__(self, registry: NodeRegistry) -> None:
        self._registry = registry

    def toggle_open(self, key: Any) -> bool:
        node = self._registry.get(key)
        if node is None:
            logger.debug("Open noop: unknown key=%r", key)
            return False
        node.is_open = not node.is_open
        return True

    def apply(self, keys: Iterable[Any]) -> None:
        """Overwrite every flag: open iff the key is listed."""
        wanted = set(keys)
        for node in self._registry:
            node.is_open = node.key in wanted
        logger.debug("Open sync OK: requested=%d", len(wanted))

    def open_keys(self) -> List[Any]:
        return self._registry.keys_where(lambda node: node.is_open)

    def open_items(self) -> List[Any]:
        return self._registry.items_where(lambda node: node.is_open)
