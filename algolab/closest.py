"""Closest pair of points by divide and conquer."""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Pair = tuple[Point, Point]


def _brute(points: Sequence[Point]) -> tuple[Pair | None, float]:
    best: Pair | None = None
    best_dist = math.inf
    for p, q in combinations(points, 2):
        dist = p.distance_to(q)
        if dist < best_dist:
            best_dist = dist
            best = (p, q)
    return best, best_dist


def brute_force(points: Iterable[Point]) -> tuple[Pair, float]:
    """Return the closest pair and its distance by checking every pair."""
    points = list(points)
    if len(points) < 2:
        raise ValueError("at least two points are needed")
    pair, dist = _brute(points)
    assert pair is not None
    return pair, dist


def _strip_closest(strip: Sequence[Point], min_dist: float) -> tuple[Pair | None, float]:
    best: Pair | None = None
    for i, p in enumerate(strip):
        for q in strip[i + 1 : i + 6]:
            if q.y - p.y >= min_dist:
                break
            dist = p.distance_to(q)
            if dist < min_dist:
                min_dist = dist
                best = (p, q)
    return best, min_dist


def _closest_dc(
    by_x: Sequence[Point], by_y: Sequence[Point], threshold: int
) -> tuple[Pair | None, float]:
    if len(by_x) <= threshold:
        return _brute(by_x)

    mid = len(by_x) // 2
    mid_x = by_x[mid].x
    left_y = [p for p in by_y if p.x <= mid_x]
    right_y = [p for p in by_y if p.x > mid_x]

    left_pair, left_dist = _closest_dc(by_x[:mid], left_y, threshold)
    right_pair, right_dist = _closest_dc(by_x[mid:], right_y, threshold)
    if left_dist <= right_dist:
        pair, dist = left_pair, left_dist
    else:
        pair, dist = right_pair, right_dist

    strip = [p for p in by_y if abs(p.x - mid_x) < dist]
    strip_pair, strip_dist = _strip_closest(strip, dist)
    if strip_pair is not None:
        return strip_pair, strip_dist
    return pair, dist


def closest_pair(points: Iterable[Point], threshold: int) -> Pair:
    """Find the closest pair, switching to brute force at ``threshold`` points or fewer."""
    points = list(points)
    if threshold < 1:
        raise ValueError("the brute force threshold must be at least 1")
    if len(points) < 2:
        raise ValueError("at least two points are needed")
    by_x = sorted(points, key=lambda p: p.x)
    by_y = sorted(points, key=lambda p: p.y)
    pair, _ = _closest_dc(by_x, by_y, threshold)
    assert pair is not None
    return pair


def read_points(path: str | Path) -> list[Point]:
    """Read a point count followed by that many ``x y`` pairs."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    if not tokens:
        raise ValueError(f"{path}: empty point file")
    n = int(tokens[0])
    coords = [int(token) for token in tokens[1 : 1 + 2 * n]]
    if len(coords) < 2 * n:
        raise ValueError(f"{path}: expected {n} points, found {len(coords) // 2}")
    values = iter(coords)
    return [Point(x, y) for x, y in zip(values, values)]


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        filename = input("Please input the filename (e.g. points.txt): ").strip()
        threshold = int(input("Please input the brute force threshold: "))
    else:
        filename = args[0]
        if len(args) >= 2:
            threshold = int(args[1])
        else:
            threshold = int(input("Please input the brute force threshold: "))

    try:
        points = read_points(filename)
    except OSError:
        print(f"Cannot open file {filename} for reading!", file=sys.stderr)
        return 1

    print(f"Total points: {len(points)}")
    print(f"Brute force threshold: {threshold}")

    began = time.perf_counter()
    first, second = closest_pair(points, threshold)
    elapsed_ms = (time.perf_counter() - began) * 1000

    print(f"Closest pair: {first} and {second}")
    print(f"Minimum distance: {first.distance_to(second):g}")
    print(f"Time used: {elapsed_ms:g} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())