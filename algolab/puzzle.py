"""Eight-puzzle board model and text rendering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

START_STATE = "7425 6831"
END_STATE = " 24763815"
BLANK = " "
SIZE = 3
MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))


def neighbors(state: str) -> Iterator[str]:
    """Yield the states reachable by sliding one tile into the blank."""
    blank = state.index(BLANK)
    x, y = divmod(blank, SIZE)
    for dx, dy in MOVES:
        nx, ny = x + dx, y + dy
        if 0 <= nx < SIZE and 0 <= ny < SIZE:
            target = nx * SIZE + ny
            cells = list(state)
            cells[blank], cells[target] = cells[target], cells[blank]
            yield "".join(cells)


def format_state(state: str) -> str:
    """Render a board as three rows followed by a blank line."""
    rows = (state[start : start + SIZE] for start in range(0, SIZE * SIZE, SIZE))
    return "".join("".join(f"{cell} " for cell in row) + "\n" for row in rows) + "\n"


def format_path(path: Iterable[str]) -> str:
    """Render every board of a path in order."""
    return "".join(format_state(state) for state in path)