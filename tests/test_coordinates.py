"""Unit tests for grid coordinates."""

import pytest

from gridtactics.environment import GridCoordinate


def test_linear_index_is_row_major():
    assert GridCoordinate(0, 0).to_linear_index(5) == 0
    assert GridCoordinate(0, 4).to_linear_index(5) == 4
    assert GridCoordinate(1, 0).to_linear_index(5) == 5
    assert GridCoordinate(3, 2).to_linear_index(5) == 17


def test_from_linear_index_inverts_to_linear_index():
    dimension = 6
    for index in range(dimension * dimension):
        coord = GridCoordinate.from_linear_index(index, dimension)
        assert coord.in_bounds(dimension)
        assert coord.to_linear_index(dimension) == index


def test_equality_and_hashing_are_structural():
    assert GridCoordinate(2, 3) == GridCoordinate(2, 3)
    assert GridCoordinate(2, 3) != GridCoordinate(3, 2)
    assert len({GridCoordinate(1, 1), GridCoordinate(1, 1), GridCoordinate(1, 2)}) == 2


def test_negative_components_rejected():
    with pytest.raises(ValueError):
        GridCoordinate(-1, 0)


def test_in_bounds():
    assert GridCoordinate(3, 3).in_bounds(4)
    assert not GridCoordinate(4, 3).in_bounds(4)
    assert not GridCoordinate(0, 4).in_bounds(4)


def test_manhattan_distance():
    assert GridCoordinate(0, 0).manhattan_distance(GridCoordinate(4, 4)) == 8
    assert GridCoordinate(3, 1).manhattan_distance(GridCoordinate(1, 2)) == 3


def test_coerce_accepts_tuples_lists_and_dicts():
    expected = GridCoordinate(2, 1)
    assert GridCoordinate.coerce(expected) is expected
    assert GridCoordinate.coerce((2, 1)) == expected
    assert GridCoordinate.coerce([2, 1]) == expected
    assert GridCoordinate.coerce({"row": 2, "col": 1}) == expected


def test_coerce_rejects_other_shapes():
    with pytest.raises(TypeError):
        GridCoordinate.coerce("2,1")
    with pytest.raises(TypeError):
        GridCoordinate.coerce((1, 2, 3))


def test_coerce_requires_integer_components():
    # Truncating 1.9 or parsing "1" would silently address another cell.
    for value in [(1.9, 0.2), ("1", "0"), (True, 0), {"row": 2.0, "col": 1}]:
        with pytest.raises(TypeError):
            GridCoordinate.coerce(value)
