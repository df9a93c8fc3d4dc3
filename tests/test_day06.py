import pytest

from aocsolve.day06 import count_loop_obstructions, has_loop, main, parse, walk

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

TRAP = """.#..
...#
#^..
..#.
"""


def test_parse_finds_guard():
    grid, loc, direction = parse(EXAMPLE)
    lines = EXAMPLE.splitlines()
    row = next(i for i, line in enumerate(lines) if "^" in line)
    assert loc == (row, lines[row].index("^"))
    assert direction == (-1, 0)
    assert grid[loc[0]][loc[1]] == "."


def test_example_walk():
    assert walk(*parse(EXAMPLE)) == 41


def test_example_obstructions():
    assert count_loop_obstructions(*parse(EXAMPLE)) == 6


def test_walk_bounded_by_floor():
    grid, loc, direction = parse(EXAMPLE)
    floor = sum(row.count(".") for row in grid)
    assert 1 <= walk(grid, loc, direction) <= floor


def test_example_has_no_loop():
    assert not has_loop(*parse(EXAMPLE))


def test_trap_is_a_loop():
    assert has_loop(*parse(TRAP))


def test_obstruction_count_leaves_grid_unchanged():
    grid, loc, direction = parse(EXAMPLE)
    before = [list(row) for row in grid]
    count_loop_obstructions(grid, loc, direction)
    assert grid == before


def test_missing_guard():
    with pytest.raises(ValueError):
        parse("...\n.#.\n")


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)

    main([str(path)])
    assert capsys.readouterr().out == f"{walk(*parse(EXAMPLE))}\n"

    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"{count_loop_obstructions(*parse(EXAMPLE))}\n"