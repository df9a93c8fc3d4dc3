import pytest

from aocsolve.day15 import Warehouse, WideWarehouse, parse, parse_wide, solve

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""


def _cells(warehouse, char):
    return {
        (i, j)
        for i, row in enumerate(warehouse.grid)
        for j, cell in enumerate(row)
        if cell == char
    }


def test_small_example_score():
    warehouse, moves = parse(SMALL)
    assert solve(warehouse, moves) == 2028


def test_example_preserves_boxes_and_walls():
    warehouse, moves = parse(SMALL)
    boxes = len(_cells(warehouse, "O"))
    walls = _cells(warehouse, "#")
    solve(warehouse, moves)
    assert len(_cells(warehouse, "O")) == boxes
    assert _cells(warehouse, "#") == walls
    assert warehouse.robot not in walls


def test_push_single_box():
    warehouse, moves = parse("#####\n#@O.#\n#####\n\n>")
    warehouse.apply(moves[0])
    assert warehouse.render() == "#####\n#.@O#\n#####"


def test_blocked_push_changes_nothing():
    warehouse, moves = parse("####\n#@O#\n####\n\n>")
    before = warehouse.render()
    start = warehouse.robot
    warehouse.apply(moves[0])
    assert warehouse.render() == before
    assert warehouse.robot == start


def test_robot_stops_at_wall():
    warehouse, moves = parse("###\n#@#\n###\n\n<")
    start = warehouse.robot
    warehouse.apply(moves[0])
    assert warehouse.robot == start


def test_parse_replaces_robot_and_reads_moves():
    warehouse, moves = parse("####\n#@.#\n####\n\n<^\nv>")
    assert warehouse.robot == (1, 1)
    assert warehouse.grid[1][1] == "."
    assert warehouse.render().count("@") == 1
    assert moves == [(0, -1), (-1, 0), (1, 0), (0, 1)]


def test_parse_rejects_unknown_move():
    with pytest.raises(ValueError):
        parse("####\n#@.#\n####\n\n<x")


def test_parse_requires_robot():
    with pytest.raises(ValueError):
        parse("####\n#..#\n####\n\n<")


def test_parse_wide_doubles_width():
    narrow, _ = parse(SMALL)
    wide, moves = parse_wide(SMALL)
    assert isinstance(wide, WideWarehouse)
    assert all(len(w) == 2 * len(n) for w, n in zip(wide.grid, narrow.grid))
    assert len(_cells(wide, "[")) == len(_cells(narrow, "O"))
    assert wide.robot == (narrow.robot[0], 2 * narrow.robot[1])
    assert len(moves) == len(SMALL.splitlines()[-1])


def test_wide_blocked_vertical_push():
    wide, moves = parse_wide("#####\n#.#.#\n#.O.#\n#.@.#\n#####\n\n^")
    before = wide.render()
    start = wide.robot
    wide.apply(moves[0])
    assert wide.render() == before
    assert wide.robot == start


def test_wide_vertical_push():
    wide, moves = parse_wide("#####\n##..#\n#.O.#\n#.@.#\n#####\n\n^")
    start = wide.robot
    wide.apply(moves[0])
    assert wide.robot == (start[0] - 1, start[1])
    assert "".join(wide.grid[start[0] - 2][start[1]:start[1] + 2]) == "[]"
    assert len(_cells(wide, "[")) == 1


def test_wide_horizontal_chain_push():
    wide, moves = parse_wide("######\n#@OO.#\n######\n\n>>")
    for move in moves:
        wide.apply(move)
    row = wide.render().splitlines()[1]
    assert "@[][]" in row
    assert len(_cells(wide, "[")) == 2
    assert len(_cells(wide, "]")) == 2


def test_wide_solve_matches_score():
    wide, moves = parse_wide(SMALL)
    result = solve(wide, moves)
    assert result == wide.score()
    assert len(_cells(wide, "[")) == len(_cells(wide, "]"))


def test_warehouse_constructor_copies_grid():
    grid = [list("###"), list("#.#"), list("###")]
    warehouse = Warehouse(grid, (1, 1))
    warehouse.grid[1][1] = "O"
    assert grid[1][1] == "."