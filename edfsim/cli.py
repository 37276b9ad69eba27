"""Interactive front end: read a task set, test it and print the EDF schedule."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from edfsim.scheduler import simulate
from edfsim.tasks import Task, format_periods, utilization


def _integers(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for word in line.split():
            try:
                yield int(word)
            except ValueError:
                raise ValueError(f"expected an integer, got {word!r}") from None


def _next_int(numbers: Iterator[int], what: str) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError(f"unexpected end of input while reading {what}") from None


def read_tasks(lines: Iterable[str], out: TextIO) -> list[Task]:
    """Prompt on ``out`` and read the task count and parameters from ``lines``."""
    numbers = _integers(lines)
    out.write("Enter number of tasks\n")
    count = _next_int(numbers, "the number of tasks")
    tasks = []
    for number in range(1, count + 1):
        out.write(f"Enter Task {number} parameters\n")
        out.write("Arrival time: ")
        arrival = _next_int(numbers, "the arrival time")
        out.write("Execution time: ")
        execution = _next_int(numbers, "the execution time")
        out.write("Deadline time: ")
        deadline = _next_int(numbers, "the deadline")
        out.write("Period: ")
        period = _next_int(numbers, "the period")
        tasks.append(Task(arrival, execution, deadline, period))
    return tasks


def run(lines: Iterable[str], out: TextIO) -> int:
    """Read a task set, report its utilization and print the schedule."""
    tasks = read_tasks(lines, out)
    load = utilization(tasks)
    out.write(f"CPU Utilization {load:f}\n")
    out.write("Tasks can be scheduled\n" if load < 1 else "Schedule is not feasible\n")
    schedule = simulate(tasks)
    out.write(format_periods(tasks) + "\n")
    for slot in schedule:
        out.write(f"{slot}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="edfsim", description="Simulate earliest-deadline-first scheduling."
    )
    parser.add_argument("input", nargs="?", help="file with the task set (default: standard input)")
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            return run(sys.stdin, sys.stdout)
        with open(args.input, encoding="utf-8") as handle:
            return run(handle, sys.stdout)
    except (ValueError, ZeroDivisionError, OSError) as error:
        print(f"edfsim: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())