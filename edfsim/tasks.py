"""Periodic task model and the helper computations used by the EDF scheduler."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

# Absolute deadlines at or above this value are never selected.
NO_DEADLINE = 0x7FFF


@dataclass
class Task:
    """A periodic task and the state of its current job."""

    arrival: int
    execution: int
    deadline: int
    period: int
    remaining: int = field(init=False, default=0)
    instance: int = field(init=False, default=0)
    alive: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.remaining = self.execution

    @property
    def abs_arrival(self) -> int:
        """Release time of the current job."""
        return self.arrival + self.instance * self.period

    @property
    def abs_deadline(self) -> int:
        """Absolute deadline of the current job."""
        return self.abs_arrival + self.deadline

    def reset_execution(self) -> None:
        """Restore the remaining execution time to the full budget."""
        self.remaining = self.execution

    def start_next_instance(self) -> None:
        """Finish the current job and move on to the next one."""
        self.instance += 1
        self.alive = False
        self.reset_execution()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(values: Iterable[int]) -> int:
    """Least common multiple of the values; 1 for no values."""
    result = 1
    for value in values:
        divisor = gcd(result, value)
        if divisor == 0:
            raise ValueError("least common multiple is undefined for zero periods")
        result = result * value // divisor
    return result


def hyperperiod(tasks: Iterable[Task]) -> int:
    """Least common multiple of all task periods."""
    return lcm(task.period for task in tasks)


def utilization(tasks: Iterable[Task]) -> float:
    """Processor demand: the sum of execution time over deadline."""
    return sum(task.execution / task.deadline for task in tasks)


def release_arrivals(tasks: Sequence[Task], time: int) -> bool:
    """Mark tasks whose job arrives at ``time`` as alive.

    Returns True when this is a scheduling point: some job arrived, or no
    task is alive at all.
    """
    arrived = False
    for task in tasks:
        if task.abs_arrival == time:
            task.alive = True
            arrived = True
    return arrived or not any(task.alive for task in tasks)


def earliest_deadline_task(tasks: Sequence[Task]) -> int | None:
    """Index of the alive task with the earliest deadline, or None if idle."""
    best_deadline = NO_DEADLINE
    chosen: int | None = None
    for index, task in enumerate(tasks):
        if task.alive and task.abs_deadline < best_deadline:
            best_deadline = task.abs_deadline
            chosen = index
    return chosen


def format_periods(tasks: Iterable[Task]) -> str:
    """One-line summary of the task periods, numbered from 1."""
    parts = "".join(f" Task {number}={task.period}" for number, task in enumerate(tasks, 1))
    return f"Periods:{parts}"