import copy

import pytest

from graphalgos.grids import (
    capture_regions,
    clear_enclosed,
    count_enclaves,
    count_rotted_by_spread,
    flood_fill,
    minutes_to_rot,
)


def _border(grid):
    last = len(grid) - 1
    return [
        (r, c, v)
        for r, line in enumerate(grid)
        for c, v in enumerate(line)
        if r in (0, last) or c in (0, len(line) - 1)
    ]


def _count(grid, value):
    return sum(line.count(value) for line in grid)


# flood_fill

def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_same_color_returns_equal_copy():
    image = [[1, 0], [0, 1]]
    result = flood_fill(image, 0, 0, 1)
    assert result == image
    assert result is not image


def test_flood_fill_does_not_touch_input():
    image = [[3, 3], [3, 4]]
    before = copy.deepcopy(image)
    flood_fill(image, 0, 0, 9)
    assert image == before


def test_flood_fill_leaves_other_values_alone():
    image = [[5, 6, 5], [6, 5, 6], [5, 6, 5]]
    result = flood_fill(image, 1, 1, 7)
    for r, line in enumerate(image):
        for c, value in enumerate(line):
            if value != 5:
                assert result[r][c] == value
    assert result[1][1] == 7
    # diagonal cells are not joined
    assert result[0][0] == 5


def test_flood_fill_whole_uniform_image():
    image = [[4] * 3 for _ in range(3)]
    assert flood_fill(image, 2, 2, 8) == [[8] * 3 for _ in range(3)]


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 0)])
def test_flood_fill_outside_raises(row, col):
    with pytest.raises(IndexError):
        flood_fill([[1, 1, 1]] * 3, row, col, 2)


# count_enclaves

def test_count_enclaves_example():
    grid = [[0, 0, 0, 0], [1, 0, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    assert count_enclaves(grid) == 3


def test_count_enclaves_all_connected_to_border():
    grid = [[0, 1, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0]]
    assert count_enclaves(grid) == 0


def test_count_enclaves_matches_clear_enclosed():
    grid = [
        [1, 0, 0, 0, 0],
        [0, 1, 1, 0, 1],
        [0, 0, 0, 1, 1],
        [0, 1, 0, 0, 0],
        [0, 0, 0, 0, 1],
    ]
    assert _count(clear_enclosed(grid), 1) == _count(grid, 1) - count_enclaves(grid)


# minutes_to_rot

def test_minutes_to_rot_example():
    assert minutes_to_rot([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) is not None
    assert minutes_to_rot([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_minutes_to_rot_unreachable():
    assert minutes_to_rot([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) is None


def test_minutes_to_rot_no_fresh():
    assert minutes_to_rot([[0, 2]]) == 0


def test_minutes_to_rot_fresh_without_rotten():
    assert minutes_to_rot([[1, 1]]) is None


def test_minutes_to_rot_line_takes_one_minute_per_cell():
    width = 6
    grid = [[2] + [1] * (width - 1)]
    assert minutes_to_rot(grid) == width - 1


def test_minutes_to_rot_does_not_touch_input():
    grid = [[2, 1], [1, 1]]
    before = copy.deepcopy(grid)
    minutes_to_rot(grid)
    assert grid == before


# count_rotted_by_spread

def test_count_rotted_by_spread_counts_all_fresh():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    assert count_rotted_by_spread(grid) == _count(grid, 1)


def test_count_rotted_by_spread_unreachable():
    assert count_rotted_by_spread([[2, 1, 1], [0, 1, 1], [1, 0, 1]]) is None


def test_count_rotted_by_spread_no_fresh():
    assert count_rotted_by_spread([[2, 0], [0, 2]]) == 0


def test_count_rotted_by_spread_agrees_with_minutes():
    grids = [
        [[2, 1, 0], [0, 1, 1], [1, 0, 2]],
        [[2, 1, 1], [1, 1, 1], [1, 1, 2]],
        [[1, 0], [0, 2]],
    ]
    for grid in grids:
        assert (count_rotted_by_spread(grid) is None) == (minutes_to_rot(grid) is None)


def test_count_rotted_by_spread_does_not_touch_input():
    grid = [[2, 1], [1, 1]]
    before = copy.deepcopy(grid)
    count_rotted_by_spread(grid)
    assert grid == before


# capture_regions

def test_capture_regions_interior_captured():
    board = [
        ["X", "X", "X", "X"],
        ["X", "O", "O", "X"],
        ["X", "X", "O", "X"],
        ["X", "X", "X", "X"],
    ]
    assert capture_regions(board) == [["X"] * 4 for _ in range(4)]


def test_capture_regions_border_connected_kept():
    board = [
        ["X", "X", "X", "X"],
        ["X", "O", "O", "X"],
        ["X", "X", "O", "X"],
        ["X", "O", "X", "X"],
    ]
    result = capture_regions(board)
    assert _border(result) == _border(board)
    assert _count(result, "O") == 1
    assert result[3][1] == "O"


def test_capture_regions_keeps_chain_to_border():
    board = [
        ["X", "X", "X"],
        ["X", "O", "O"],
        ["X", "X", "X"],
    ]
    assert capture_regions(board) == board


def test_capture_regions_idempotent_and_pure():
    board = [
        ["O", "X", "X", "O"],
        ["X", "O", "X", "X"],
        ["X", "X", "O", "X"],
        ["O", "X", "X", "O"],
    ]
    before = copy.deepcopy(board)
    once = capture_regions(board)
    assert capture_regions(once) == once
    assert board == before


# clear_enclosed

def test_clear_enclosed_removes_interior_island():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    assert clear_enclosed(grid) == [[0] * 3 for _ in range(3)]


def test_clear_enclosed_keeps_border_connected():
    grid = [[0, 1, 0], [0, 1, 0], [0, 0, 0]]
    assert clear_enclosed(grid) == grid


def test_clear_enclosed_idempotent_and_leaves_border():
    grid = [
        [1, 0, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 1, 1],
        [1, 0, 0, 0],
    ]
    before = copy.deepcopy(grid)
    once = clear_enclosed(grid)
    assert clear_enclosed(once) == once
    assert _border(once) == _border(grid)
    assert count_enclaves(once) == 0
    assert grid == before