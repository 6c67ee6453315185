"""UI controllers package for treeview_sync.

Controllers mediate between a tree-view component and the engine services.
They hold no toolkit code, so any front-end can drive them.
"""

from .treeview_controller import TreeviewController  # noqa: F401

__all__: list[str] = ["TreeviewController"]
