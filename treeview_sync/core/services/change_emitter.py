from __future__ import annotations

"""Diff-based change notification for one externally bound key sequence.

An emitter remembers the last known value of its bound sequence, whether
that value was emitted by the engine or received from the caller. A
notification fires only when a freshly computed sequence differs from it
under ordered equality, which breaks the emit -> bind -> sync loop.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence

__all__ = ["ChangeEmitter", "sequence_equal"]

logger = logging.getLogger(__name__)

KeysCallback = Callable[[List[Any]], Any]
ItemsCallback = Callable[[List[Any]], Any]


def sequence_equal(left: Optional[Sequence[Any]], right: Optional[Sequence[Any]]) -> bool:
    """Ordered equality: same length and same element at every position.

    ``None`` (not bound) only equals ``None``.
    """
    if left is None or right is None:
        return left is None and right is None
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


class ChangeEmitter:
    """Notifier for one bound sequence (selected, active or open keys).

    Parameters
    ----------
    name : str
        Channel name used in log messages.
    fallback : callable, optional
        Called with no arguments when a change is emitted and neither
        ``on_changed`` nor ``on_items`` is registered.

    Attributes
    ----------
    on_changed :
        Receives the new key sequence.
    on_items :
        Receives the materialized items for the new key sequence.
    current :
        Last known bound sequence, or None when nothing was bound yet.
    """

    def __init__(self, name: str, fallback: Optional[Callable[[], Any]] = None) -> None:
        self.name = name
        self.on_changed: Optional[KeysCallback] = None
        self.on_items: Optional[ItemsCallback] = None
        self._fallback = fallback
        self.current: Optional[List[Any]] = None
        self.emit_count: int = 0

    def differs(self, keys: Optional[Sequence[Any]]) -> bool:
        return not sequence_equal(self.current, keys)

    def accept(self, keys: Optional[Sequence[Any]]) -> bool:
        """Record an incoming bound sequence.

        Returns
        -------
        bool
            True if it differs from the last known value and must be applied.
        """
        if not self.differs(keys):
            return False
        self.current = None if keys is None else list(keys)
        return True

    def emit(self, keys: Sequence[Any], items: Callable[[], List[Any]]) -> bool:
        """Publish ``keys`` if they differ from the last known sequence.

        ``items`` is only invoked when an item observer is registered.

        Returns
        -------
        bool
            True if a notification was raised.
        """
        if not self.differs(keys):
            logger.debug("Emit noop: channel=%s unchanged", self.name)
            return False

        self.current = list(keys)
        self.emit_count += 1
        logger.debug("Emit OK: channel=%s keys=%d", self.name, len(self.current))

        if self.on_items is None and self.on_changed is None:
            if self._fallback is not None:
                self._fallback()
            return True

        if self.on_items is not None:
            self.on_items(items())
        if self.on_changed is not None:
            self.on_changed(list(self.current))
        return True
