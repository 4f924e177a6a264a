"""Tests for layout catalog merge."""
import copy

import pytest

from confkit.layout_catalog.models import RawLayout, RawLayoutGroup
from confkit.layout_catalog.service import layout_label, merge_layout_catalog


LAYOUTS = [
    {"type": "layout", "name": "2x2_grid", "resIDS": ["presenter"]},
    {"type": "layout", "name": "room-1"},
    {"type": "layout", "name": "solo", "displayName": "Solo Speaker"},
    {"type": "layout", "name": "1up_top_left+5"},
]

GROUPS = [
    {"type": "layoutGroup", "name": "grid", "groupLayouts": ["room-1", "2x2_grid"]},
    {"type": "layoutGroup", "name": "empty_group"},
]


def test_catalog_contains_every_input():
    catalog = merge_layout_catalog(LAYOUTS, GROUPS)
    assert len(catalog) == len(LAYOUTS) + len(GROUPS)
    assert {entry.id for entry in catalog} == {item["name"] for item in LAYOUTS + GROUPS}


@pytest.mark.parametrize(
    "layouts, groups, expected",
    [
        ([], [], 0),
        (LAYOUTS, [], 4),
        ([], GROUPS, 2),
    ],
)
def test_catalog_completeness_with_empty_sides(layouts, groups, expected):
    assert len(merge_layout_catalog(layouts, groups)) == expected


def test_membership_flag():
    catalog = {entry.id: entry for entry in merge_layout_catalog(LAYOUTS, GROUPS)}
    assert catalog["room-1"].belongs_to_a_group is True
    assert catalog["2x2_grid"].belongs_to_a_group is True
    assert catalog["solo"].belongs_to_a_group is False
    assert catalog["grid"].belongs_to_a_group is False
    assert catalog["empty_group"].belongs_to_a_group is False


def test_groups_never_flagged_even_when_nested():
    groups = [
        {"type": "layoutGroup", "name": "outer", "groupLayouts": ["inner"]},
        {"type": "layoutGroup", "name": "inner", "groupLayouts": ["solo"]},
    ]
    catalog = {entry.id: entry for entry in merge_layout_catalog([{"type": "layout", "name": "solo"}], groups)}
    assert catalog["inner"].belongs_to_a_group is False
    assert catalog["solo"].belongs_to_a_group is True


def test_duplicate_membership_counts_once():
    groups = [
        {"type": "layoutGroup", "name": "a", "groupLayouts": ["room-1"]},
        {"type": "layoutGroup", "name": "b", "groupLayouts": ["room-1", "room-1"]},
    ]
    catalog = merge_layout_catalog([{"type": "layout", "name": "room-1"}], groups)
    assert [entry.belongs_to_a_group for entry in catalog if entry.id == "room-1"] == [True]


def test_label_derivation():
    assert layout_label(RawLayout(name="2x2_grid")) == "2x2 grid"
    assert layout_label(RawLayout(name="2x2_grid", displayName="Grid View")) == "Grid View"
    assert layout_label(RawLayout(name="a-b_c-d")) == "a b c d"
    assert layout_label(RawLayout(name="x_y", displayName="")) == "x y"


def test_sorted_case_insensitive_and_stable():
    layouts = [
        {"type": "layout", "name": "first", "displayName": "Beta"},
        {"type": "layout", "name": "second", "displayName": "alpha"},
        {"type": "layout", "name": "third", "displayName": "Beta"},
    ]
    catalog = merge_layout_catalog(layouts, [])
    assert [entry.label for entry in catalog] == ["alpha", "Beta", "Beta"]
    assert [entry.id for entry in catalog] == ["second", "first", "third"]


def test_groups_precede_layouts_on_equal_labels():
    layouts = [{"type": "layout", "name": "grid"}]
    groups = [{"type": "layoutGroup", "name": "GRID"}]
    catalog = merge_layout_catalog(layouts, groups)
    assert [entry.type for entry in catalog] == ["layoutGroup", "layout"]


def test_sort_uses_code_unit_order():
    layouts = [
        {"type": "layout", "name": "emoji", "displayName": "\U0001F600 party"},
        {"type": "layout", "name": "private", "displayName": "Ａ wide"},
        {"type": "layout", "name": "plain", "displayName": "zeta"},
    ]
    catalog = merge_layout_catalog(layouts, [])
    # surrogate pair (0xD83D) sorts before fullwidth letters in UTF-16
    assert [entry.id for entry in catalog] == ["plain", "emoji", "private"]


def test_duplicate_ids_are_kept():
    layouts = [{"type": "layout", "name": "dup"}, {"type": "layout", "name": "dup"}]
    catalog = merge_layout_catalog(layouts, [{"type": "layoutGroup", "name": "dup"}])
    assert [entry.id for entry in catalog] == ["dup", "dup", "dup"]


def test_reservation_ids_and_serialized_shape():
    catalog = merge_layout_catalog(LAYOUTS, GROUPS)
    grid = next(entry for entry in catalog if entry.id == "2x2_grid")
    assert grid.model_dump(by_alias=True) == {
        "id": "2x2_grid",
        "label": "2x2 grid",
        "type": "layout",
        "reservationIds": ["presenter"],
        "belongsToAGroup": True,
    }
    room = next(entry for entry in catalog if entry.id == "room-1")
    assert room.reservation_ids == []


def test_null_optional_lists_default_to_empty():
    catalog = merge_layout_catalog(
        [{"type": "layout", "name": "a", "resIDS": None}],
        [{"type": "layoutGroup", "name": "g", "groupLayouts": None}],
    )
    assert all(entry.reservation_ids == [] for entry in catalog)
    assert all(entry.belongs_to_a_group is False for entry in catalog)


def test_accepts_models_and_leaves_inputs_untouched():
    layouts = copy.deepcopy(LAYOUTS)
    groups = [RawLayoutGroup.model_validate(item) for item in GROUPS]
    merge_layout_catalog([RawLayout.model_validate(item) for item in layouts], groups)
    assert layouts == LAYOUTS
    assert groups[0].group_layouts == ["room-1", "2x2_grid"]


def test_plain_layout_model_accepted_as_group():
    catalog = merge_layout_catalog([], [RawLayout(type="layoutGroup", name="bare")])
    assert catalog[0].id == "bare"
    assert catalog[0].belongs_to_a_group is False
