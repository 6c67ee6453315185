"""treeview_sync UI package.

Front-end facing layer. Rendering stays with the caller; this package only
exposes the controller a tree-view component drives.
"""

from .controllers.treeview_controller import TreeviewController  # noqa: F401

__all__: list[str] = ["TreeviewController"]
