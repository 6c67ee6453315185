"""Test configuration and shared fixtures for the treeview_sync engine.

Items are plain dicts (``id``, ``name``, ``children``, ``disabled``) read
through ``TreeAccessors.for_mappings``. Every test gets its own user config
directory and a fresh ``ConfigManager`` singleton.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from treeview_sync.config import ConfigManager
from treeview_sync.core.models import TreeAccessors

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def make_item(key, name=None, *children, disabled=False):
    """Build a dict item; ``name`` defaults to the key as text."""
    item = {"id": key, "name": key if name is None else name, "children": list(children)}
    if disabled:
        item["disabled"] = True
    return item


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config at a temp dir and reset the singleton."""
    config_dir = tmp_path / "user_config"
    monkeypatch.setenv("TREEVIEW_SYNC_CONFIG_DIR", str(config_dir))
    ConfigManager._instance = None
    yield config_dir
    ConfigManager._instance = None


@pytest.fixture
def item():
    """Factory for dict items, see :func:`make_item`."""
    return make_item


@pytest.fixture
def accessors():
    return TreeAccessors.for_mappings(disabled_field="disabled")


@pytest.fixture
def chain_forest():
    """A -> B -> C, a single chain."""
    return [make_item("A", None, make_item("B", None, make_item("C")))]


@pytest.fixture
def branching_forest():
    """A -> B -> [C, D], plus a sibling root E."""
    return [
        make_item("A", None, make_item("B", None, make_item("C"), make_item("D"))),
        make_item("E"),
    ]


@pytest.fixture
def fruit_forest():
    """root -> [A("apple"), B("banana") -> [C("cherry")]]."""
    return [
        make_item(
            "root",
            "root",
            make_item("A", "apple"),
            make_item("B", "banana", make_item("C", "cherry")),
        )
    ]
