"""Earliest-deadline-first simulation over one hyperperiod."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from edfsim.tasks import Task, earliest_deadline_task, hyperperiod, release_arrivals


@dataclass(frozen=True)
class Slot:
    """One unit of time: the index of the task that ran, or None when idle."""

    time: int
    task: int | None

    @property
    def idle(self) -> bool:
        return self.task is None

    def __str__(self) -> str:
        if self.task is None:
            return f"{self.time}  Idle"
        return f"{self.time}  Task {self.task + 1}"


def simulate(tasks: Sequence[Task]) -> Iterator[Slot]:
    """Run EDF from time 0 through the hyperperiod inclusive.

    The given tasks are left untouched; the simulation works on fresh jobs.
    A time unit in which a job completes without consuming time yields no slot.
    """
    jobs = [dataclasses.replace(task) for task in tasks]
    end = hyperperiod(jobs)
    active: int | None = None
    for time in range(end + 1):
        if release_arrivals(jobs, time):
            active = earliest_deadline_task(jobs)
        if active is None:
            yield Slot(time, None)
            continue
        job = jobs[active]
        if job.remaining != 0:
            job.remaining -= 1
            yield Slot(time, active)
        if job.remaining == 0:
            job.start_next_instance()
            active = earliest_deadline_task(jobs)