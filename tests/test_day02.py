import pytest

from aocsolve.day02 import is_maybe_safe, is_safe, main, parse

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports():
    reports = parse(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]
    assert len(reports) == len(EXAMPLE.splitlines())


def test_example_safe_count():
    assert sum(is_safe(r) for r in parse(EXAMPLE)) == 2


def test_example_maybe_safe_count():
    assert sum(is_maybe_safe(r) for r in parse(EXAMPLE)) == 4


def test_safe_reports_are_maybe_safe():
    for report in parse(EXAMPLE):
        if is_safe(report):
            assert is_maybe_safe(report)


def test_reversal_preserves_safety():
    for report in parse(EXAMPLE):
        assert is_safe(report) == is_safe(report[::-1])
        assert is_maybe_safe(report) == is_maybe_safe(report[::-1])


def test_flat_step_is_unsafe():
    assert not is_safe([5, 5])
    assert is_maybe_safe([5, 5])


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("1 x 3\n")


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    reports = parse(EXAMPLE)

    main([str(path)])
    assert capsys.readouterr().out == f"{sum(is_safe(r) for r in reports)}\n"

    main([str(path), "--part", "2"])
    assert capsys.readouterr().out == f"{sum(is_maybe_safe(r) for r in reports)}\n"