import math

from apollonian.circle import Circle
from apollonian.descartes import initial_config
from apollonian.kissing import (
    KissingSet,
    flip_selected,
    is_kissing,
    kissing_sets,
    select,
    select_others,
)


def test_select_keeps_order():
    assert list(select("abc")) == [
        ("a", ("b", "c")),
        ("b", ("a", "c")),
        ("c", ("a", "b")),
    ]
    assert list(select([])) == []


def test_kissing_sets_select_each_item():
    assert kissing_sets([1, 2, 3, 4]) == [
        KissingSet(1, (2, 3, 4)),
        KissingSet(2, (1, 3, 4)),
        KissingSet(3, (1, 2, 4)),
        KissingSet(4, (1, 2, 3)),
    ]


def test_flip_selected_uses_dual():
    ks = KissingSet(4, (1, 2, 3))
    flipped = flip_selected(ks)
    assert flipped.selected == 8
    assert flipped.others == ks.others


def test_flip_twice_restores_selection():
    ks = KissingSet(4, (1, 2, 3))
    assert flip_selected(flip_selected(ks)) == ks


def test_flip_bends_between_descartes_solutions():
    ks = KissingSet(6 + 4 * math.sqrt(3), (2, 2, 2))
    assert math.isclose(flip_selected(ks).selected, 6 - 4 * math.sqrt(3))


def test_select_others_demotes_selected():
    ks = KissingSet(1, (2, 3, 4))
    assert select_others(ks) == [
        KissingSet(2, (1, 3, 4)),
        KissingSet(3, (1, 2, 4)),
        KissingSet(4, (1, 2, 3)),
    ]
    for child in select_others(ks):
        assert sorted(child.items()) == [1, 2, 3, 4]


def test_is_kissing():
    cs = initial_config(2, 3, 3)
    for ks in kissing_sets(cs):
        assert is_kissing(ks)
        assert is_kissing(flip_selected(ks), tol=1e-9)
    moved = KissingSet(cs[0] + Circle(0.0, 0.1 + 0j), tuple(cs[1:]))
    assert not is_kissing(moved)
