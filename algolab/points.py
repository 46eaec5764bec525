"""Generate files of unique random integer points."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

MIN_COORD = -10000
MAX_COORD = 10000
DEFAULT_FILENAME = "points.txt"


def normalize_filename(filename: str) -> str:
    """Append ``.txt`` to a filename that has no dot in it."""
    return filename if "." in filename else f"{filename}.txt"


def generate_points(n: int, rng: random.Random | None = None) -> list[tuple[int, int]]:
    """Return ``n`` distinct points with coordinates in the allowed range, sorted."""
    span = MAX_COORD - MIN_COORD + 1
    if n < 0:
        raise ValueError("the number of points must not be negative")
    if n > span * span:
        raise ValueError(f"cannot generate {n} distinct points in the coordinate range")
    rng = rng if rng is not None else random.SystemRandom()
    unique: set[tuple[int, int]] = set()
    while len(unique) < n:
        unique.add((rng.randint(MIN_COORD, MAX_COORD), rng.randint(MIN_COORD, MAX_COORD)))
    return sorted(unique)


def write_points(path: str | Path, points: Iterable[tuple[int, int]]) -> None:
    """Write the point count followed by one ``x y`` line per point."""
    points = list(points)
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"{len(points)}\n")
        out.writelines(f"{x} {y}\n" for x, y in points)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        n = int(input("Please input the number of points: "))
        filename = input("Please input the filename(e.g. points.txt): ").strip()
    else:
        n = int(args[0])
        filename = args[1] if len(args) >= 2 else DEFAULT_FILENAME

    filename = normalize_filename(filename)
    points = generate_points(n)
    try:
        write_points(filename, points)
    except OSError:
        print(f"Cannot open file {filename} for writing!", file=sys.stderr)
        return 1

    print(f"Successfully generated {n} unique points and saved to file {filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())