import pytest

from aocsolve.day21 import (
    directional_sequence,
    directional_sequences,
    main,
    numeric_sequences,
    shortest_length,
    shortest_two_robots,
    total_complexity,
)

EXAMPLE = ["029A", "980A", "179A", "456A", "379A"]

NUMERIC = {
    (0, 0): "7", (0, 1): "8", (0, 2): "9",
    (1, 0): "4", (1, 1): "5", (1, 2): "6",
    (2, 0): "1", (2, 1): "2", (2, 2): "3",
    (3, 1): "0", (3, 2): "A",
}
DIRECTIONAL = {(0, 1): "^", (0, 2): "A", (1, 0): "<", (1, 1): "v", (1, 2): ">"}
MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}


def press(presses, layout):
    """Decode presses on a keypad, failing if the arm leaves the keys."""
    pos = next(p for p, k in layout.items() if k == "A")
    typed = []
    for c in presses:
        if c == "A":
            typed.append(layout[pos])
        else:
            pos = (pos[0] + MOVES[c][0], pos[1] + MOVES[c][1])
            assert pos in layout
    return "".join(typed)


def test_numeric_sequences_for_example():
    assert set(numeric_sequences("029A")) == {"<A^A>^^AvvvA", "<A^A^^>AvvvA"}


@pytest.mark.parametrize("code", EXAMPLE)
def test_numeric_sequences_type_the_code(code):
    sequences = numeric_sequences(code)
    assert sequences
    assert all(press(s, NUMERIC) == code for s in sequences)


def test_directional_sequence_example():
    assert directional_sequence("<A") == "v<<A>>^A"


@pytest.mark.parametrize("code", ["<A^A>^^AvvvA", "v<<A>>^A", "^^>vA<"])
def test_directional_sequence_round_trip(code):
    assert press(directional_sequence(code), DIRECTIONAL) == code


@pytest.mark.parametrize("code", ["<A^A>^^AvvvA", "v<<A"])
def test_directional_sequences_round_trip(code):
    sequences = directional_sequences(code)
    assert directional_sequence(code) in sequences
    assert all(press(s, DIRECTIONAL) == code for s in sequences)


def test_unknown_key_rejected():
    with pytest.raises(ValueError):
        numeric_sequences("B")
    with pytest.raises(ValueError):
        directional_sequence("x")


@pytest.mark.parametrize("code", EXAMPLE)
def test_two_robot_sequence_decodes_to_code(code):
    top = shortest_two_robots(code)
    assert press(press(press(top, DIRECTIONAL), DIRECTIONAL), NUMERIC) == code


@pytest.mark.parametrize("code", EXAMPLE)
def test_exhaustive_no_longer_than_greedy(code):
    assert shortest_length(code, 2) <= len(shortest_two_robots(code))


def test_zero_robots_is_shortest_numeric():
    assert shortest_length("029A", 0) == min(len(s) for s in numeric_sequences("029A"))


def test_length_grows_with_robots():
    lengths = [shortest_length("379A", n) for n in range(5)]
    assert lengths == sorted(lengths)
    assert lengths[0] < lengths[-1]


def test_total_complexity_example():
    assert total_complexity(EXAMPLE, 2) == 126384


def test_main_part2(tmp_path, capsys):
    path = tmp_path / "21.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out.strip() == str(total_complexity(EXAMPLE, 25))