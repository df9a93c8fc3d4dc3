import pytest

from aocsolve.day16 import best_seat_count, lowest_score, parse

CORRIDOR = "#######\n#.#####\n#S...E#\n#######"
TURN = "###\n#E#\n#.#\n#S#\n###"
LOOP = "#######\n#.....#\n#S###E#\n#.....#\n#######"


def _open_count(grid):
    return sum(row.count(".") for row in grid)


def test_parse_replaces_markers():
    grid, start, end = parse(LOOP)
    assert start == (2, 1)
    assert end == (2, 5)
    assert grid[2][1] == "."
    assert grid[2][5] == "."
    assert all("S" not in row and "E" not in row for row in grid)


def test_parse_requires_start_and_end():
    with pytest.raises(ValueError):
        parse("#####\n#S..#\n#####")


def test_straight_corridor_costs_one_per_step():
    grid, start, end = parse(CORRIDOR)
    assert lowest_score(grid, start, end) == end[1] - start[1]


def test_dead_end_is_not_a_seat():
    grid, start, end = parse(CORRIDOR)
    seats = best_seat_count(grid, start, end)
    assert seats == end[1] - start[1] + 1
    assert seats < _open_count(grid)


def test_turning_costs_a_thousand():
    grid, start, end = parse(TURN)
    assert lowest_score(grid, start, end) == 1002


def test_two_equal_routes():
    grid, start, end = parse(LOOP)
    assert lowest_score(grid, start, end) == 3006
    assert best_seat_count(grid, start, end) == _open_count(grid)


def test_seats_include_start_and_end():
    grid, start, end = parse(TURN)
    assert best_seat_count(grid, start, end) == _open_count(grid)


def test_unreachable_end():
    grid, start, end = parse("#####\n#S#E#\n#####")
    with pytest.raises(ValueError):
        lowest_score(grid, start, end)
    with pytest.raises(ValueError):
        best_seat_count(grid, start, end)