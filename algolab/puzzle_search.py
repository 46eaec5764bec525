"""Uninformed and heuristic searches over the eight-puzzle."""

from __future__ import annotations

import math
import time
from collections import deque
from dataclasses import dataclass

from algolab.puzzle import BLANK, END_STATE, SIZE, START_STATE, neighbors

INITIAL_DEPTH = 4
IDA_DEPTH_LIMIT = 100


@dataclass
class SearchResult:
    """A solution path from start to goal and search statistics."""

    path: list[str]
    expanded: int
    max_depth: int | None = None
    elapsed_ms: float = 0.0

    @property
    def length(self) -> int:
        return len(self.path) - 1


def _inversions(state: str) -> int:
    tiles = [tile for tile in state if tile != BLANK]
    return sum(1 for i, a in enumerate(tiles) for b in tiles[i + 1 :] if a > b)


def _check(start: str, goal: str) -> None:
    for state in (start, goal):
        if len(state) != SIZE * SIZE or state.count(BLANK) != 1:
            raise ValueError(f"invalid board {state!r}")
    if sorted(start) != sorted(goal):
        raise ValueError("start and goal hold different tiles")
    if _inversions(start) % 2 != _inversions(goal) % 2:
        raise ValueError("the goal cannot be reached from the start")


def _elapsed_ms(began: float) -> float:
    return (time.perf_counter() - began) * 1000


def bfs(start: str = START_STATE, goal: str = END_STATE) -> SearchResult:
    """Breadth-first search; returns a shortest path."""
    _check(start, goal)
    began = time.perf_counter()
    parents: dict[str, str | None] = {start: None}
    queue = deque([start])
    expanded = 0
    while queue:
        state = queue.popleft()
        if state == goal:
            path = []
            node: str | None = state
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return SearchResult(path, expanded, None, _elapsed_ms(began))
        expanded += 1
        for nxt in neighbors(state):
            if nxt not in parents:
                parents[nxt] = state
                queue.append(nxt)
    raise ValueError("the goal cannot be reached from the start")


def iddfs(start: str = START_STATE, goal: str = END_STATE) -> SearchResult:
    """Iterative deepening depth-first search starting at depth four."""
    _check(start, goal)
    began = time.perf_counter()
    expanded = 0

    def search(state: str, depth: int, limit: int, on_path: set[str]) -> list[str] | None:
        nonlocal expanded
        if depth > limit or state in on_path:
            return None
        on_path.add(state)
        expanded += 1
        if state == goal:
            return [state]
        for nxt in neighbors(state):
            tail = search(nxt, depth + 1, limit, on_path)
            if tail is not None:
                tail.append(state)
                return tail
        on_path.discard(state)
        return None

    limit = INITIAL_DEPTH
    while (found := search(start, 0, limit, set())) is None:
        limit += 1
    found.reverse()
    return SearchResult(found, expanded, limit, _elapsed_ms(began))


def _target_positions(goal: str) -> dict[str, tuple[int, int]]:
    return {tile: divmod(index, SIZE) for index, tile in enumerate(goal)}


def _manhattan(state: str, targets: dict[str, tuple[int, int]]) -> int:
    total = 0
    for index, tile in enumerate(state):
        if tile != BLANK:
            x1, y1 = divmod(index, SIZE)
            x2, y2 = targets[tile]
            total += abs(x1 - x2) + abs(y1 - y2)
    return total


def manhattan_distance(state: str, goal: str = END_STATE) -> int:
    """Sum of the tiles' grid distances from their places in ``goal``."""
    return _manhattan(state, _target_positions(goal))


def ida_star(start: str = START_STATE, goal: str = END_STATE) -> SearchResult:
    """Iterative deepening A* with the Manhattan heuristic."""
    _check(start, goal)
    began = time.perf_counter()
    targets = _target_positions(goal)
    expanded = 0

    def search(state: str, g: int, bound: int, on_path: set[str]) -> tuple[float, list[str] | None]:
        nonlocal expanded
        f = g + _manhattan(state, targets)
        if f > bound:
            return f, None
        if state == goal:
            return f, [state]
        on_path.add(state)
        expanded += 1
        smallest = math.inf
        for nxt in neighbors(state):
            if nxt in on_path:
                continue
            next_bound, found = search(nxt, g + 1, bound, on_path)
            if found is not None:
                found.append(state)
                return next_bound, found
            smallest = min(smallest, next_bound)
        on_path.discard(state)
        return smallest, None

    bound: float = INITIAL_DEPTH
    while bound < IDA_DEPTH_LIMIT:
        next_bound, found = search(start, 0, int(bound), set())
        if found is not None:
            found.reverse()
            return SearchResult(found, expanded, int(bound), _elapsed_ms(began))
        bound = max(bound + 1, next_bound)
    raise ValueError("no solution found within a reasonable depth")