import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummiset.colors import AllowanceSet
from rummiset.tiles import Color


def test_builders():
    assert AllowanceSet.all().count() == 4
    assert AllowanceSet.none().count() == 0

    only_red = AllowanceSet.only(Color.RED)
    assert only_red.allowed_colors() == [Color.RED]

    not_blue = AllowanceSet.all_except(Color.BLUE)
    assert not_blue.count() == 3
    assert not not_blue[Color.BLUE]
    assert not_blue.allowed_colors() == [Color.BLACK, Color.RED, Color.ORANGE]


def test_point_mutation_and_copy_are_independent():
    allow = AllowanceSet.all()
    snapshot = allow.copy()
    allow.set(Color.ORANGE, False)

    assert not allow.allows(Color.ORANGE)
    assert allow.count() == 3
    assert snapshot == AllowanceSet.all()


def test_intersect_removes_both_colors():
    allow = AllowanceSet.all_except(Color.RED).intersect(AllowanceSet.all_except(Color.BLACK))
    assert allow.allowed_colors() == [Color.BLUE, Color.ORANGE]


def test_builders_return_fresh_instances():
    first = AllowanceSet.all()
    first.set(Color.RED, False)
    assert AllowanceSet.all().count() == 4


@pytest.mark.parametrize("flags", [[], [True] * 3, [False] * 5])
def test_allowance_set_must_cover_all_four_colors(flags):
    with pytest.raises(ValueError):
        AllowanceSet(flags)
