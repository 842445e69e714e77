import pytest

from sudokulite.models import Grid, InvalidInputError, box_size_of
from tests.tools import FOUR_SOLVED, TELEGRAPH, TELEGRAPH_SOLUTION

# ---------- Construction ----------


def test_from_string_placeholders_get_all_candidates():
    grid = Grid.from_string(9, TELEGRAPH)

    assert grid.length == 9
    assert len(grid.cells) == 81
    assert grid.cells[0] == [8]
    assert grid.cells[1] == list(range(1, 10))


def test_zero_is_a_placeholder_too():
    grid = Grid.from_string(4, "0234341221434321")
    assert grid.cells[0] == [1, 2, 3, 4]


def test_length_mismatch_raises_invalid_input():
    with pytest.raises(InvalidInputError):
        Grid.from_string(9, TELEGRAPH[:-1])


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        Grid.from_string(4, "123")


@pytest.mark.parametrize("length", [0, 2, 3, 5, 8])
def test_non_square_size_rejected(length):
    with pytest.raises(InvalidInputError):
        Grid.from_string(length, "." * (length * length))


def test_16x16_letters_parse_above_nine():
    grid = Grid.from_string(16, "G" + "." * 255)
    assert grid.cells[0] == [16]
    assert grid.cells[1] == list(range(1, 17))
    assert grid.to_string()[0] == "G"


def test_box_size():
    assert box_size_of(4) == 2
    assert box_size_of(9) == 3
    assert box_size_of(16) == 4


# ---------- State queries ----------


def test_is_solved():
    assert Grid.from_string(9, TELEGRAPH_SOLUTION).is_solved()
    assert not Grid.from_string(9, TELEGRAPH).is_solved()


def test_is_contradictory():
    grid = Grid.from_string(4, FOUR_SOLVED)
    assert not grid.is_contradictory()
    grid.cells[5] = []
    assert grid.is_contradictory()


def test_value_at():
    grid = Grid.from_string(9, TELEGRAPH)
    assert grid.value_at(0) == 8
    assert grid.value_at(1) is None


def test_to_string_round_trips_givens():
    assert Grid.from_string(9, TELEGRAPH).to_string() == TELEGRAPH


# ---------- Copy isolation ----------


def test_copy_is_deep():
    grid = Grid.from_string(9, TELEGRAPH)
    clone = grid.copy()

    assert clone == grid
    clone.cells[1].remove(5)
    clone.cells[0] = [1]

    assert grid.cells[1] == list(range(1, 10))
    assert grid.cells[0] == [8]
    assert all(a is not b for a, b in zip(grid.cells, clone.cells))


def test_empty_grid():
    grid = Grid.empty(4)
    assert grid.cells == [[1, 2, 3, 4]] * 16
    assert grid.cells[0] is not grid.cells[1]
