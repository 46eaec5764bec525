# algolab

A small collection of classic algorithm exercises. Each one can be used as a
library or run from the command line:

- **Closest pair of points** (`algolab.points`, `algolab.closest`). Generate
  random unique integer points and find the closest pair with divide and
  conquer. The brute-force cutoff can be set.
- **8-puzzle search** (`algolab.puzzle`, `algolab.puzzle_search`,
  `algolab.puzzle_cli`). Solve the sliding puzzle with breadth-first search,
  iterative-deepening depth-first search or IDA* with the Manhattan heuristic.
- **Online load balancing** (`algolab.scheduling`). Place static tasks with
  LPT, then place dynamically arriving tasks either at once (strategy A) or in
  delayed batches of size `k` (strategy B). Both strategies report the makespan.
- **Diamond path** (`algolab.diamond`). Find the maximum-sum path through a
  diamond of coloured nodes in which adjacent nodes on the path differ in
  colour.

No third-party packages are needed at runtime.

## Installation

```console
pip install .
```

To run the tests:

```console
pip install ".[test]"
pytest
```

## Command-line tools

### Generating points

```console
algolab-make-points 1000 points.txt
```

This writes the count on the first line, then one `x y` pair per line, sorted.
The coordinates are unique and lie in `[-10000, 10000]`. If the file name has
no dot in it, `.txt` is added. With no arguments the tool prompts for the count
and the file name. If only the count is given, the file name is `points.txt`.

### Closest pair

```console
algolab-closest points.txt 3
```

The second argument is the brute-force threshold: subproblems of that many
points or fewer are solved by checking every pair. The tool prompts for the
file name and the threshold when no arguments are given, and for the threshold
when only the file name is given. It prints the number of points, the pair, the
distance and the time used.

### 8-puzzle

```console
algolab-puzzle
algolab-puzzle --start "7425 6831" --goal " 24763815"
```

This opens a menu. Enter `1` for BFS, `2` for IDDFS, `3` for IDA*, or `q` to
quit (end of input also quits). Each run prints the start and goal boards, the
time used, the number of expanded nodes, the path length, the depth limit
reached (IDDFS and IDA*) and the path itself. `--start` and `--goal` default to
the boards shown above. A goal that cannot be reached from the start is
reported instead of searched for.

### Load balancing

```console
algolab-schedule
```

The tool prompts for:

1. the number of machines;
2. the number of static tasks and their processing times;
3. the number of dynamic tasks, then each as an `arrival processing` pair;
4. the batch threshold `k`.

Dynamic tasks are sorted by arrival time, and the tool then traces strategy A
and strategy B step by step.

### Diamond path

```console
algolab-diamond
```

First enter the number of rows. Then enter each row as space-separated nodes,
each written as a colour letter followed by a value, for example `R5 B-2 G7`.
The tool prints the best sum and the colours and values along the path.

## Library use

```python
import random

from algolab.points import generate_points
from algolab.closest import Point, closest_pair
from algolab.puzzle_search import bfs, ida_star
from algolab.puzzle import format_path
from algolab.scheduling import DynamicTask, strategy_a, strategy_b
from algolab.diamond import parse_row, max_path

pts = [Point(x, y) for x, y in generate_points(100, random.Random(1))]
a, b = closest_pair(pts, 3)
print(a, b, a.distance_to(b))

result = ida_star("7425 6831", " 24763815")
print(result.length, result.expanded)
print(format_path(result.path))

tasks = [DynamicTask(1, 4), DynamicTask(2, 6)]
print(strategy_a(3, [5, 3, 2], tasks).makespan)
print(strategy_b(3, 2, [5, 3, 2], tasks))  # the step-by-step trace

rows = [parse_row(line) for line in ["R1", "B2 G3", "R4"]]
path = max_path(rows)
print(path.total, path.colors, path.values)
```

Puzzle states are nine-character strings in row-major order. The blank is
written as a space. `bfs`, `iddfs` and `ida_star` return a `SearchResult` with
the path, the number of expanded nodes, the depth limit reached and the time
used, and raise `ValueError` for malformed boards or an unreachable goal.
`ida_star` gives up once its bound reaches 100.