import pytest

from aocsolve.day08 import count_antinodes, count_harmonic_antinodes, main, parse

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_parse_antennas():
    antennas, rows, cols = parse(EXAMPLE)
    assert antennas["A"] == [(5, 6), (8, 8), (9, 9)]
    assert set(antennas) == {"0", "A"}
    assert (rows, cols) == (len(EXAMPLE.splitlines()), len("............"))


def test_example_antinodes():
    assert count_antinodes(*parse(EXAMPLE)) == 14


def test_example_harmonic_antinodes():
    assert count_harmonic_antinodes(*parse(EXAMPLE)) == 34


def test_harmonic_includes_plain_antinodes():
    assert count_harmonic_antinodes(*parse(EXAMPLE)) >= count_antinodes(*parse(EXAMPLE))


def test_lone_antenna_makes_nothing():
    assert count_antinodes(*parse("..a..\n.....\n")) == 0
    assert count_harmonic_antinodes(*parse("..a..\n.....\n")) == count_antinodes(
        *parse("..a..\n.....\n")
    )


def test_row_and_column_layouts_agree():
    row = "..a.a..\n"
    column = "\n".join("..a.a..") + "\n"
    assert count_antinodes(*parse(row)) == count_antinodes(*parse(column))
    assert count_harmonic_antinodes(*parse(row)) == count_harmonic_antinodes(
        *parse(column)
    )
    assert count_harmonic_antinodes(*parse(row)) >= count_antinodes(*parse(row))


def test_empty_map_is_an_error():
    with pytest.raises(ValueError):
        parse("")


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    parsed = parse(EXAMPLE)

    main([str(path)])
    assert capsys.readouterr().out == f"{count_antinodes(*parsed)}\n"

    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"{count_harmonic_antinodes(*parsed)}\n"