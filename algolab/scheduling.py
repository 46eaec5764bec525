"""Online load balancing of static and dynamically arriving tasks."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DynamicTask:
    """A task that becomes available at ``arrival_time``."""

    arrival_time: int
    processing_time: int


@dataclass
class ScheduleResult:
    """Final machine loads and the narrative of how they were reached."""

    loads: list[int]
    log: list[str] = field(default_factory=list)

    @property
    def makespan(self) -> int:
        return max(self.loads)

    def __str__(self) -> str:
        return "\n".join(self.log)


def _check_machines(m: int) -> None:
    if m < 1:
        raise ValueError("the number of machines must be at least 1")


def _format_loads(prefix: str, loads: Sequence[int]) -> str:
    return prefix + ", ".join(f"Machine{i}={load}" for i, load in enumerate(loads, 1))


def _least_loaded(loads: Sequence[int]) -> int:
    return min(range(len(loads)), key=loads.__getitem__)


def _assign(loads: list[int], processing_time: int) -> tuple[int, int]:
    index = _least_loaded(loads)
    old = loads[index]
    loads[index] += processing_time
    return index, old


def assign_lpt(m: int, tasks: Iterable[int]) -> list[int]:
    """Assign tasks longest first, each to the least loaded machine."""
    _check_machines(m)
    loads = [0] * m
    for processing_time in sorted(tasks, reverse=True):
        _assign(loads, processing_time)
    return loads


def _start(title: str, m: int, static_tasks: Iterable[int]) -> tuple[list[int], list[str]]:
    loads = assign_lpt(m, static_tasks)
    log = [
        title,
        "---",
        "t=0: Static tasks assigned.",
        _format_loads("Initial loads: ", loads),
        "",
    ]
    return loads, log


def _finish(name: str, loads: list[int], log: list[str]) -> ScheduleResult:
    log.extend(
        [
            "---",
            f"** Strategy {name} finished **",
            _format_loads("Final loads: ", loads),
            f"Maximum Completion Time (Makespan): {max(loads)}",
        ]
    )
    return ScheduleResult(loads, log)


def _arrival_line(task: DynamicTask) -> str:
    return (
        f"Time={task.arrival_time}: Task (a={task.arrival_time}, "
        f"p={task.processing_time}) has arrived"
    )


def strategy_a(
    m: int, static_tasks: Iterable[int], dynamic_tasks: Iterable[DynamicTask]
) -> ScheduleResult:
    """Immediate greedy: each arriving task goes to the least loaded machine."""
    loads, log = _start("## Strategy A: Immediate Greedy", m, static_tasks)
    for task in dynamic_tasks:
        log.append(_arrival_line(task))
        log.append(_format_loads("Current machine loads: ", loads))
        index, old = _assign(loads, task.processing_time)
        log.append(f"Assigned to Machine{index + 1} (minimum load, {old} -> {loads[index]})")
        log.append("")
    return _finish("A", loads, log)


def strategy_b(
    m: int, k: int, static_tasks: Iterable[int], dynamic_tasks: Iterable[DynamicTask]
) -> ScheduleResult:
    """Delayed batch greedy: buffer ``k`` tasks, then dispatch them longest first."""
    loads, log = _start("## Strategy B: Delayed Batch Greedy", m, static_tasks)
    tasks = list(dynamic_tasks)
    buffer: list[DynamicTask] = []
    for position, task in enumerate(tasks, 1):
        log.append(_arrival_line(task))
        buffer.append(task)
        if len(buffer) == k or position == len(tasks):
            log.append(f"Buffer size reached {len(buffer)}, triggering batch dispatch...")
            buffer.sort(key=lambda t: t.processing_time, reverse=True)
            log.append(
                "Sorted buffer (descending by processing time): "
                + "".join(f"p={t.processing_time} " for t in buffer)
            )
            for buffered in buffer:
                log.append(_format_loads("Current loads: ", loads))
                index, old = _assign(loads, buffered.processing_time)
                log.append(
                    f"Assigning task p={buffered.processing_time} to Machine{index + 1} "
                    f"({old} -> {loads[index]})"
                )
            buffer.clear()
            log.append(_format_loads("Loads after this batch: ", loads))
        else:
            log.append(f"Threshold k={k} not reached, task is buffered.")
        log.append("")
    return _finish("B", loads, log)


class _Tokens:
    """Whitespace-separated integers read from standard input on demand."""

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def ask(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        return self.next()

    def next(self) -> int:
        while not self._pending:
            self._pending.extend(input().split())
        return int(self._pending.popleft())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare immediate and batched greedy scheduling."
    )
    parser.parse_args(argv)

    tokens = _Tokens()
    try:
        print("# Enter Experiment Parameters")
        m = tokens.ask("Enter the number of machines (m): ")
        n_static = tokens.ask("Enter the number of static tasks: ")
        print(
            f"Enter the processing time for each of the {n_static} static tasks "
            "(separated by spaces): ",
            end="",
            flush=True,
        )
        static_tasks = [tokens.next() for _ in range(n_static)]
        n_dynamic = tokens.ask("Enter the number of dynamic tasks: ")
        print(
            f"Enter {n_dynamic} dynamic tasks as 'arrival_time processing_time' pairs, "
            "one per line:"
        )
        dynamic_tasks = [DynamicTask(tokens.next(), tokens.next()) for _ in range(n_dynamic)]
        k = tokens.ask("Enter the delay threshold (k): ")

        dynamic_tasks.sort(key=lambda t: t.arrival_time)

        print("\n--- Experiment Start ---")
        first = strategy_a(m, static_tasks, dynamic_tasks)
        second = strategy_b(m, k, static_tasks, dynamic_tasks)
    except EOFError:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(first)
    print("\n\n============================================\n\n", end="")
    print(second)
    return 0


if __name__ == "__main__":
    sys.exit(main())