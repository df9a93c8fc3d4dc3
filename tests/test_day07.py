import pytest

from aocsolve.day07 import main, parse, solvable, total_calibration

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_equation():
    equations = parse(EXAMPLE)
    assert equations[0] == (190, [10, 19])
    assert len(equations) == 9


def test_example_total():
    assert total_calibration(parse(EXAMPLE)) == 3749


def test_example_total_with_concat():
    assert total_calibration(parse(EXAMPLE), concat=True) == 11387


def test_concat_only_adds_solutions():
    for target, args in parse(EXAMPLE):
        if solvable(target, args):
            assert solvable(target, args, concat=True)


def test_single_number_reaches_itself():
    assert solvable(42, [42])
    assert solvable(42, [42], concat=True)


def test_concatenation_is_needed():
    assert not solvable(156, [15, 6])
    assert solvable(156, [15, 6], concat=True)


def test_parse_requires_separator():
    with pytest.raises(ValueError):
        parse("5 1 2\n")


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    equations = parse(EXAMPLE)

    main([str(path)])
    assert capsys.readouterr().out == f"{total_calibration(equations)}\n"

    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"{total_calibration(equations, concat=True)}\n"