import pytest

from hackpuzzles.grids import cavity_map, grid_search, mark_nines

SAMPLE = ["1112", "1912", "1892", "1234"]


def test_cavity_map_worked_example():
    assert cavity_map(SAMPLE) == ["1112", "1X12", "18X2", "1234"]


def test_cavity_map_keeps_border():
    result = cavity_map(SAMPLE)
    assert result[0] == SAMPLE[0]
    assert result[-1] == SAMPLE[-1]
    assert [row[0] for row in result] == [row[0] for row in SAMPLE]
    assert [row[-1] for row in result] == [row[-1] for row in SAMPLE]


def test_cavity_map_only_changes_to_x():
    grid = ["98765", "19191", "27372", "19991", "55555"]
    result = cavity_map(grid)
    for old_row, new_row in zip(grid, result):
        for old, new in zip(old_row, new_row):
            assert new == old or new == "X"


def test_cavity_map_flat_grid_unchanged():
    grid = ["555", "555", "555"]
    assert cavity_map(grid) == grid


@pytest.mark.parametrize("grid", [["1"], ["12", "34"], []])
def test_cavity_map_small_grids_unchanged(grid):
    assert cavity_map(grid) == list(grid)


def test_cavity_map_rejects_non_square():
    with pytest.raises(ValueError):
        cavity_map(["123", "45"])


def test_mark_nines_interior_only():
    grid = ["999", "999", "999"]
    result = mark_nines(grid)
    assert result[1][1] == "X"
    assert result[0] == grid[0]
    assert result[2] == grid[2]
    assert result[1][0] == grid[1][0]
    assert result[1][2] == grid[1][2]


def test_mark_nines_leaves_other_digits():
    grid = ["1234", "5678", "8765", "4321"]
    assert mark_nines(grid) == grid


def test_mark_nines_ignores_neighbours():
    grid = ["1111", "1991", "1991", "1111"]
    result = mark_nines(grid)
    assert result[1][1:3] == "XX"
    assert result[2][1:3] == "XX"


def test_mark_nines_rejects_non_square():
    with pytest.raises(ValueError):
        mark_nines(["99", "999"])


def test_grid_search_missing_row():
    grid = ["1234", "5678"]
    assert not grid_search(grid, ["123", "999"])
    assert not grid_search(grid, ["000"])


def test_grid_search_every_grid_row_is_found():
    grid = ["abc", "def", "ghi"]
    assert grid_search(grid, grid)
    assert grid_search(grid, [row[1:] for row in grid])


def test_grid_search_empty_pattern():
    assert grid_search(["123"], [])