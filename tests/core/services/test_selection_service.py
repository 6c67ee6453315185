import pytest

from treeview_sync.core.exceptions import ConfigurationError
from treeview_sync.core.models import SelectionType
from treeview_sync.core.services import SelectionService


class TestIndependentSelection:
    """Selection touches the target node only."""

    def test_toggle_and_explicit_value(self, built, independent_selection, branching_forest):
        registry = built(branching_forest)

        assert independent_selection.set_selected("B") is True
        assert registry.is_selected("B")
        independent_selection.set_selected("B")
        assert not registry.is_selected("B")
        independent_selection.set_selected("B", True)
        independent_selection.set_selected("B", True)
        assert registry.is_selected("B")

    def test_no_cascade(self, built, independent_selection, branching_forest):
        registry = built(branching_forest)
        independent_selection.set_selected("C", True)

        assert not registry.is_selected("B")
        assert not registry.is_indeterminate("B")
        assert not registry.is_selected("A")

    def test_clears_indeterminate_on_target(self, built, independent_selection, branching_forest):
        registry = built(branching_forest)
        registry.get("B").is_indeterminate = True
        independent_selection.set_selected("B", False)
        assert not registry.is_indeterminate("B")

    def test_unknown_key_is_noop(self, built, independent_selection, branching_forest):
        built(branching_forest)
        assert independent_selection.set_selected("missing") is False
        assert independent_selection.selected_keys() == []


class TestLeafCascade:
    """Downward force and upward tri-state recompute."""

    def test_single_chain_selects_ancestors(self, built, leaf_selection, chain_forest):
        registry = built(chain_forest)
        leaf_selection.set_selected("C", True)

        for key in ("A", "B", "C"):
            assert registry.is_selected(key)
            assert not registry.is_indeterminate(key)

    def test_partial_children_make_ancestors_indeterminate(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("C", True)

        assert registry.is_indeterminate("B") is True
        assert registry.is_selected("B") is False
        assert registry.is_indeterminate("A") is True
        assert registry.is_selected("A") is False
        assert not registry.is_indeterminate("E")

    def test_all_children_selected_resolves_parent(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("C", True)
        leaf_selection.set_selected("D", True)

        assert registry.is_selected("B") and not registry.is_indeterminate("B")
        assert registry.is_selected("A") and not registry.is_indeterminate("A")

    def test_all_children_unselected_resolves_parent(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("C", True)
        leaf_selection.set_selected("C", False)

        for key in ("A", "B"):
            assert not registry.is_selected(key)
            assert not registry.is_indeterminate(key)

    def test_downward_cascade_forces_descendants(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        registry.get("B").is_indeterminate = True

        leaf_selection.set_selected("A", True)

        assert [registry.is_selected(k) for k in ("A", "B", "C", "D")] == [True] * 4
        assert not any(registry.is_indeterminate(k) for k in ("A", "B", "C", "D"))
        assert not registry.is_selected("E")

        leaf_selection.set_selected("A")
        assert not any(registry.is_selected(k) for k in ("A", "B", "C", "D"))

    def test_indeterminate_sibling_keeps_parent_partial(self, built, leaf_selection, item):
        registry = built([
            item("R", None,
                 item("P", None, item("P1"), item("P2")),
                 item("Q")),
        ])
        leaf_selection.set_selected("P1", True)
        leaf_selection.set_selected("Q", True)
        leaf_selection.set_selected("Q", False)

        # Q is unselected but P is still partial, so R stays partial
        assert registry.is_indeterminate("P")
        assert registry.is_indeterminate("R")

    def test_selected_keys_in_registry_order(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("E", True)
        leaf_selection.set_selected("D", True)

        assert leaf_selection.selected_keys() == ["D", "E"]
        assert leaf_selection.selected_items() == [registry.get("D").item, registry.get("E").item]


class TestFullReplaceSync:

    def test_apply_replaces_previous_selection(self, built, independent_selection, branching_forest):
        registry = built(branching_forest)
        independent_selection.set_selected("A", True)

        independent_selection.apply(["C", "E"])

        assert independent_selection.selected_keys() == ["C", "E"]
        assert not registry.is_selected("A")

    def test_apply_runs_cascades_in_leaf_mode(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.apply(["C"])

        assert registry.is_indeterminate("B")
        assert registry.is_indeterminate("A")

    def test_apply_empty_clears_everything(self, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("C", True)

        leaf_selection.apply([])

        assert leaf_selection.selected_keys() == []
        assert not any(registry.is_indeterminate(k) for k in registry.keys())

    def test_apply_ignores_unknown_keys(self, built, independent_selection, branching_forest):
        built(branching_forest)
        independent_selection.apply(["nope", "E"])
        assert independent_selection.selected_keys() == ["E"]


def test_selection_type_from_string(registry):
    assert SelectionService(registry, "Leaf").selection_type is SelectionType.LEAF


def test_selection_type_rejects_unknown_value(registry):
    with pytest.raises(ConfigurationError, match="selection_type"):
        SelectionService(registry, "cascade")


class TestRefreshAfterRebuild:
    """Carried-over selection is recomputed for branches whose children changed."""

    def test_new_child_makes_selected_branch_partial(self, builder, built, leaf_selection, branching_forest, item):
        registry = built(branching_forest)
        leaf_selection.set_selected("B", True)

        branching_forest[0]["children"][0]["children"].append(item("X"))
        builder.build(branching_forest)
        leaf_selection.refresh(builder.reshaped)

        assert registry.is_selected("C") and registry.is_selected("D")
        assert not registry.is_selected("X")
        assert registry.is_indeterminate("B")
        assert registry.is_indeterminate("A")

    def test_branch_that_lost_children_is_no_longer_partial(self, builder, built, leaf_selection, branching_forest):
        registry = built(branching_forest)
        leaf_selection.set_selected("C", True)

        branching_forest[0]["children"][0]["children"] = []
        builder.build(branching_forest)
        leaf_selection.refresh(builder.reshaped)

        assert not registry.is_indeterminate("B")
        assert not registry.is_selected("A")
        assert not registry.is_indeterminate("A")

    def test_independent_mode_leaves_flags_alone(self, builder, built, independent_selection, branching_forest, item):
        registry = built(branching_forest)
        independent_selection.set_selected("B", True)

        branching_forest[0]["children"][0]["children"].append(item("X"))
        builder.build(branching_forest)
        independent_selection.refresh(builder.reshaped)

        assert registry.is_selected("B")
        assert not registry.is_indeterminate("B")
