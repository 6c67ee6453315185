import pytest

from treeview_sync.core.models import SelectionType
from treeview_sync.core.registry import NodeRegistry
from treeview_sync.core.services import (
    ActiveService,
    OpenService,
    SelectionService,
    TreeBuilderService,
)


@pytest.fixture
def registry():
    return NodeRegistry()


@pytest.fixture
def builder(registry, accessors):
    return TreeBuilderService(registry, accessors)


@pytest.fixture
def built(builder, registry):
    """Build ``forest`` into the shared registry and return it."""
    def _build(forest):
        builder.build(forest)
        return registry
    return _build


@pytest.fixture
def leaf_selection(registry):
    return SelectionService(registry, SelectionType.LEAF)


@pytest.fixture
def independent_selection(registry):
    return SelectionService(registry, SelectionType.INDEPENDENT)


@pytest.fixture
def single_active(registry):
    return ActiveService(registry, multiple_active=False)


@pytest.fixture
def multi_active(registry):
    return ActiveService(registry, multiple_active=True)


@pytest.fixture
def expansion(registry):
    return OpenService(registry)
