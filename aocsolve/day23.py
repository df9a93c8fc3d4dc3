"""LAN party: triangles of connected computers and the largest fully connected set."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence
from pathlib import Path

Edge = tuple[str, str]


def parse(text: str) -> list[Edge]:
    """Connections, one "a-b" per line."""
    edges = []
    for line in text.splitlines():
        a, b = line.split("-", 1)
        edges.append((a, b))
    return edges


def _graph(edges: Iterable[Edge]) -> dict[str, set[str]]:
    graph: defaultdict[str, set[str]] = defaultdict(set)
    for a, b in edges:
        graph[a].add(b)
        graph[b].add(a)
    return dict(graph)


def count_t_triangles(edges: Iterable[Edge]) -> int:
    """Triangles with at least one computer whose name starts with 't'."""
    graph = _graph(edges)
    count = sum(
        1
        for a, a_out in graph.items()
        for b in a_out
        for c in a_out & graph[b]
        if c != a and c != b and any(n.startswith("t") for n in (a, b, c))
    )
    if count % 6:
        raise ValueError("connections do not form a simple graph")
    return count // 6


def max_clique_password(edges: Iterable[Edge]) -> str:
    """Sorted, comma-joined names of the unique largest fully connected set."""
    graph = _graph(edges)
    if any(a in a_out for a, a_out in graph.items()):
        raise ValueError("a computer is connected to itself")

    cliques = [(v,) for v in sorted(graph)]
    while True:
        grown = []
        for clique in cliques:
            common = set.intersection(*(graph[v] for v in clique))
            grown.extend(clique + (v,) for v in sorted(common) if v > clique[-1])
        if not grown:
            break
        cliques = grown

    if len(cliques) != 1:
        raise ValueError("no unique largest set of connected computers")
    return ",".join(cliques[0])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find LAN party groups.")
    parser.add_argument("input", nargs="?", default="23.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    edges = parse(Path(args.input).read_text())
    print(count_t_triangles(edges) if args.part == 1 else max_clique_password(edges))
    return 0