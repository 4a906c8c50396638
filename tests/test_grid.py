import pytest

from dropfour.core.grid import Grid


def test_new_grid_is_filled_with_default():
    g = Grid(3, 2, ".")
    assert g.rows() == [[".", ".", "."], [".", ".", "."]]


def test_set_and_get_address_column_then_row():
    g = Grid(3, 2, 0)
    g.set(2, 1, 9)
    assert g.get(2, 1) == 9
    assert g.rows()[1] == [0, 0, 9]


@pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_access_fails_fast(x, y):
    g = Grid(3, 2, 0)
    with pytest.raises(IndexError):
        g.get(x, y)


def test_copy_is_independent_and_equal():
    g = Grid(2, 2, 0)
    h = g.copy()
    assert h == g and hash(h) == hash(g)
    h.set(0, 0, 1)
    assert g.get(0, 0) == 0
    assert h != g
