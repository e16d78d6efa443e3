"""Tests for jsonschemadoc.grouping."""

from jsonschemadoc import PropertyDescriptor
from jsonschemadoc.grouping import group_properties, order_groups


def prop(name, group="", first=False):
    return PropertyDescriptor(name=name, group_name=group, sorts_first=first)


def test_one_group_per_name():
    groups = group_properties([prop("a", "G2"), prop("b"), prop("c", "G2"), prop("d", "G1")])
    assert [g.name for g in groups] == ["G2", "", "G1"]
    assert [p.name for p in groups[0].properties] == ["a", "c"]


def test_empty_input():
    assert group_properties([]) == []
    assert order_groups([]) == []


def test_groups_sorted_by_name_with_ungrouped_first():
    ordered = order_groups(group_properties([prop("a", "b"), prop("b", "B"), prop("c"), prop("d", "a")]))
    assert [g.name for g in ordered] == ["", "B", "a", "b"]


def test_const_first_then_name():
    ordered = order_groups(group_properties([
        prop("d"),
        prop("c", first=True),
        prop("a"),
        prop("b", first=True),
    ]))
    assert [p.name for p in ordered[0].properties] == ["b", "c", "a", "d"]


def test_ordering_ignores_input_order():
    descriptors = [prop("x", "G", True), prop("y", "G"), prop("a"), prop("z", "H")]
    forward = order_groups(group_properties(descriptors))
    backward = order_groups(group_properties(list(reversed(descriptors))))
    assert forward == backward


def test_order_groups_does_not_mutate_input():
    groups = group_properties([prop("b"), prop("a")])
    order_groups(groups)
    assert [p.name for p in groups[0].properties] == ["b", "a"]


def test_same_name_ordered_by_content():
    first = PropertyDescriptor(name="a", value=1, comment="from allOf/0")
    second = PropertyDescriptor(name="a", value=2, comment="from allOf/1")
    third = PropertyDescriptor(name="a", value=2, comment="from allOf/2")

    forward = order_groups(group_properties([first, second, third]))
    backward = order_groups(group_properties([third, second, first]))

    assert forward == backward
    assert [p.comment for p in forward[0].properties] == ["from allOf/0", "from allOf/1", "from allOf/2"]
