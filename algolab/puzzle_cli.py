"""Interactive menu running the eight-puzzle searches."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algolab.puzzle import END_STATE, START_STATE, format_path, format_state
from algolab.puzzle_search import SearchResult, bfs, ida_star, iddfs

ALGORITHMS = {
    "1": ("BFS", bfs),
    "2": ("IDDFS", iddfs),
    "3": ("IDA*", ida_star),
}

MENU = "Input your choice. (or 'q' to quit)\n\n1. BFS\n2. IDDFS\n3. IDA*\n"


def report(name: str, result: SearchResult, start: str, goal: str) -> str:
    """Describe a search run: boards, statistics and the solution path."""
    parts = [
        f"{name}\n",
        "Start status:\n",
        format_state(start),
        "Target status:\n",
        format_state(goal),
        "_" * 31 + "\n",
        f"Time used: {int(result.elapsed_ms)} ms\n",
        f"Total number of extended nodes: {result.expanded}\n",
        f"Length of path: {result.length}\n",
    ]
    if result.max_depth is not None:
        parts.append(f"Maximum depth reached: {result.max_depth}\n")
    parts.append("Path:\n")
    parts.append(format_path(result.path))
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the eight-puzzle interactively.")
    parser.add_argument("--start", default=START_STATE, help="start board, nine characters")
    parser.add_argument("--goal", default=END_STATE, help="goal board, nine characters")
    args = parser.parse_args(argv)

    while True:
        print(MENU)
        try:
            choice = input()
        except EOFError:
            break
        if choice == "q":
            break
        entry = ALGORITHMS.get(choice)
        if entry is None:
            continue
        name, search = entry
        try:
            result = search(args.start, args.goal)
        except ValueError as exc:
            print(exc)
            continue
        print(report(name, result, args.start, args.goal), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())