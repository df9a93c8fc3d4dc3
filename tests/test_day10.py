from aocsolve.day10 import parse, trail_rating, trail_score

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_example_score():
    assert trail_score(parse(EXAMPLE)) == 36


def test_example_rating():
    assert trail_rating(parse(EXAMPLE)) == 81


def test_rating_at_least_score():
    heights = parse(EXAMPLE)
    assert trail_rating(heights) >= trail_score(heights)


def test_single_straight_trail():
    heights = parse("0123456789")
    assert trail_score(heights) == trail_rating(heights) == 1


def test_parse_skips_non_digits():
    heights = parse("0.\n.9")
    assert heights == {(0, 0): 0, (1, 1): 9}


def test_no_trailheads():
    heights = parse("123\n456")
    assert trail_score(heights) == trail_rating(heights) == 0


def test_score_is_symmetric_under_transpose():
    rows = EXAMPLE.splitlines()
    transposed = "\n".join("".join(col) for col in zip(*rows))
    assert trail_score(parse(transposed)) == trail_score(parse(EXAMPLE))
    assert trail_rating(parse(transposed)) == trail_rating(parse(EXAMPLE))