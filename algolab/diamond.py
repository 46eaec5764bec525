"""Maximum-sum path through a diamond of coloured nodes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    color: str
    value: int


@dataclass
class DiamondPath:
    """The best path from the top node to the bottom node and its sum."""

    total: int
    nodes: list[Node]

    @property
    def colors(self) -> list[str]:
        return [node.color for node in self.nodes]

    @property
    def values(self) -> list[int]:
        return [node.value for node in self.nodes]


def parse_row(line: str) -> list[Node]:
    """Parse tokens such as ``R12 B-3``: a colour letter followed by a value."""
    return [Node(token[0], int(token[1:])) for token in line.split()]


def max_path(rows: Sequence[Sequence[Node]]) -> DiamondPath:
    """Find the top-to-bottom path of largest sum whose adjacent colours differ.

    The upper half widens, each node having parents at ``j - 1`` and ``j``;
    below the middle row the diamond narrows, with parents at ``j`` and ``j + 1``.
    """
    if not rows or not rows[0] or not rows[-1]:
        raise ValueError("the diamond needs a top and a bottom node")
    mid = len(rows) // 2
    best: list[list[int | None]] = [[None] * len(row) for row in rows]
    parent: list[list[int | None]] = [[None] * len(row) for row in rows]
    best[0][0] = rows[0][0].value

    for i in range(1, len(rows)):
        above = rows[i - 1]
        for j, node in enumerate(rows[i]):
            candidates = (j - 1, j) if i <= mid else (j, j + 1)
            top: int | None = None
            chosen: int | None = None
            for c in candidates:
                if not 0 <= c < len(above) or above[c].color == node.color:
                    continue
                score = best[i - 1][c]
                if score is not None and (top is None or score > top):
                    top, chosen = score, c
            if chosen is not None:
                best[i][j] = top + node.value
                parent[i][j] = chosen

    total = best[-1][0]
    if total is None:
        raise ValueError("no path reaches the bottom of the diamond")

    nodes: list[Node] = []
    j: int | None = 0
    for i in range(len(rows) - 1, -1, -1):
        nodes.append(rows[i][j])
        j = parent[i][j]
    nodes.reverse()
    return DiamondPath(total, nodes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the best path through a diamond.")
    parser.parse_args(argv)

    try:
        n = int(input("Total number of rows in the diamond (n): ").strip())
        print("Enter the diamond nodes (color and value) for each row, separated by spaces:")
        rows = [parse_row(input()) for _ in range(n)]
        path = max_path(rows)
    except EOFError:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, IndexError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Max path sum: {path.total}")
    print("Path colors sequence: " + " -> ".join(path.colors))
    print("Path values sequence: " + " -> ".join(str(v) for v in path.values))
    return 0


if __name__ == "__main__":
    sys.exit(main())