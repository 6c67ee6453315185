"""Accessor functions the caller supplies to read its items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Sequence

from treeview_sync.core.exceptions import AccessorError


@dataclass(frozen=True)
class TreeAccessors:
    """Bundle of pure functions used to read caller-owned items.

    ``item_key``, ``item_children`` and ``item_text`` are required;
    ``item_disabled`` is optional. The wrappers below normalise the soft
    cases: a None children result is a leaf and a None text is ``""``.
    """

    item_key: Callable[[Any], Any]
    item_children: Callable[[Any], Optional[Sequence[Any]]]
    item_text: Callable[[Any], Optional[str]]
    item_disabled: Optional[Callable[[Any], bool]] = None

    def __post_init__(self) -> None:
        for name in ("item_key", "item_children", "item_text"):
            if not callable(getattr(self, name)):
                raise AccessorError(name)
        if self.item_disabled is not None and not callable(self.item_disabled):
            raise AccessorError("item_disabled")

    @classmethod
    def for_mappings(
        cls,
        key_field: str = "id",
        children_field: str = "children",
        text_field: str = "name",
        disabled_field: Optional[str] = None,
    ) -> "TreeAccessors":
        """Build accessors for dict-like items.

        Example
        -------
        >>> acc = TreeAccessors.for_mappings(key_field="id", text_field="title")
        >>> acc.key({"id": 3, "title": "Docs"})
        3
        """
        def _disabled(item: Mapping[str, Any]) -> bool:
            return bool(item.get(disabled_field))

        return cls(
            item_key=lambda item: item.get(key_field),
            item_children=lambda item: item.get(children_field),
            item_text=lambda item: item.get(text_field),
            item_disabled=_disabled if disabled_field else None,
        )

    def key(self, item: Any) -> Any:
        return self.item_key(item)

    def children(self, item: Any) -> List[Any]:
        return list(self.item_children(item) or [])

    def text(self, item: Any) -> str:
        text = self.item_text(item)
        return "" if text is None else str(text)

    def disabled(self, item: Any) -> bool:
        if self.item_disabled is None:
            return False
        return bool(self.item_disabled(item))
