from treeview_sync.core.services import ActiveService


def test_single_active_is_exclusive(built, single_active, item):
    registry = built([item("X"), item("Y")])

    single_active.set_active("X")
    single_active.set_active("Y")

    assert registry.is_active("Y")
    assert not registry.is_active("X")
    assert single_active.active_keys() == ["Y"]


def test_single_active_deactivate_has_no_replacement(built, single_active, item):
    built([item("X"), item("Y")])
    single_active.set_active("X")
    single_active.set_active("X")
    assert single_active.active_keys() == []


def test_multi_active_toggles_independently(built, multi_active, item):
    built([item("X"), item("Y"), item("Z")])
    multi_active.set_active("X")
    multi_active.set_active("Z")
    assert multi_active.active_keys() == ["X", "Z"]
    multi_active.set_active("X")
    assert multi_active.active_keys() == ["Z"]


def test_unknown_key_is_noop(built, single_active, item):
    built([item("X")])
    single_active.set_active("X")
    assert single_active.set_active("ghost") is False
    assert single_active.active_keys() == ["X"]


def test_apply_single_mode_first_in_registry_order_wins(built, single_active, branching_forest):
    built(branching_forest)
    # listed order differs from registry order (C, D, B, A, E)
    single_active.apply(["B", "D"])
    assert single_active.active_keys() == ["D"]


def test_apply_multi_mode_activates_all_listed(built, multi_active, branching_forest):
    built(branching_forest)
    multi_active.apply(["D", "B", "missing"])
    assert multi_active.active_keys() == ["D", "B"]


def test_apply_is_full_replace(built, multi_active, branching_forest):
    registry = built(branching_forest)
    multi_active.apply(["A", "C"])
    multi_active.apply(["E"])
    assert not registry.is_active("A")
    assert multi_active.active_keys() == ["E"]
    assert multi_active.active_items() == [registry.get("E").item]


def test_mode_flag_is_mutable(registry):
    service = ActiveService(registry)
    assert service.multiple_active is False
    service.multiple_active = True
    assert service.multiple_active is True
