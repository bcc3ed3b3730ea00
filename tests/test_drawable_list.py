import pytest

from swapview.components.drawable_list import DrawableList
from swapview.errors import DrawableIndexError


def test_replace_all_discards_previous_contents():
    drawables = DrawableList()
    drawables.replace_all([1, 2, 3])
    drawables.replace_all(("a", "b"))
    assert drawables.as_tuple() == ("a", "b")
    assert len(drawables) == 2


def test_insert_at_shifts_following_items_and_clamps_position():
    drawables = DrawableList([1, 2, 3])
    assert drawables.insert_at(1, 9) == 1
    assert drawables.as_tuple() == (1, 9, 2, 3)
    assert drawables.insert_at(99, 7) == 4
    assert drawables.insert_at(-5, 0) == 0
    assert drawables.as_tuple() == (0, 1, 9, 2, 3, 7)


def test_duplicates_are_allowed():
    drawables = DrawableList()
    drawables.insert_at(0, "x")
    drawables.insert_at(1, "x")
    assert list(drawables) == ["x", "x"]


def test_get_out_of_range_fails_fast():
    drawables = DrawableList([1, 2])
    assert drawables.get(1) == 2
    with pytest.raises(DrawableIndexError) as info:
        drawables.get(2)
    assert info.value.index == 2 and info.value.length == 2
    with pytest.raises(IndexError):
        drawables.get(-1)
    with pytest.raises(IndexError):
        DrawableList().get(0)


def test_snapshot_is_not_an_alias():
    drawables = DrawableList([1, 2])
    snapshot = drawables.as_tuple()
    drawables.insert_at(0, 0)
    assert snapshot == (1, 2)
