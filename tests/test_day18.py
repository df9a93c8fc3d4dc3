import pytest

from aocsolve.day18 import first_blocking_byte, has_path, parse, shortest_path

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_parse_points():
    assert parse("1,2\n3,4") == [(1, 2), (3, 4)]


def test_parse_rejects_bad_line():
    with pytest.raises(ValueError):
        parse("1;2")


def test_example_shortest_path():
    points = parse(EXAMPLE)
    assert shortest_path(set(points[:12]), 7) == 22


def test_example_first_blocking_byte():
    assert first_blocking_byte(parse(EXAMPLE), 7) == (6, 1)


def test_blocking_byte_is_the_cut():
    points = parse(EXAMPLE)
    cut = first_blocking_byte(points, 7)
    index = points.index(cut)
    assert has_path(points[:index], 7)
    assert not has_path(points[:index + 1], 7)


@pytest.mark.parametrize("size", [1, 2, 5, 10])
def test_empty_grid_is_manhattan(size):
    assert shortest_path(set(), size) == 2 * (size - 1)


def test_wall_blocks_every_path():
    wall = {(1, y) for y in range(5)}
    assert not has_path(wall, 5)
    with pytest.raises(ValueError):
        shortest_path(wall, 5)


def test_more_bytes_never_shorten_path():
    points = parse(EXAMPLE)
    lengths = [shortest_path(points[:n], 7) for n in range(0, 13)]
    assert lengths == sorted(lengths)


def test_first_blocking_byte_needs_points():
    with pytest.raises(ValueError):
        first_blocking_byte([], 7)