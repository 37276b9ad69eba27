# edfsim

edfsim simulates Earliest Deadline First (EDF) scheduling of periodic
real-time tasks on a single processor in discrete time. It reads a task set,
reports the CPU utilization and whether the set is schedulable, and prints
which task runs at each time unit over one hyperperiod.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Command line

```
edfsim [input]
```

With no argument the task set is read from standard input. Otherwise it is
read from the named file. The program prompts for the number of tasks. For
each task it then prompts for:

- arrival time
- execution time
- deadline
- period

The values are whole numbers separated by any whitespace, so they can be piped
in:

```
printf '2\n0\n1\n4\n4\n0\n2\n6\n6\n' | edfsim
```

The output starts with the CPU utilization. This is the sum of execution time
divided by deadline for each task. Next comes `Tasks can be scheduled` when the
utilization is below 1, and `Schedule is not feasible` otherwise. Then the
program lists the task periods. Last comes one line for each time unit from 0
up to and including the hyperperiod, either `<time>  Task <n>` (tasks numbered
from 1) or `<time>  Idle`.

The program exits with status 1 and prints `edfsim: <message>` on standard
error in three cases:

- the input is not a whole number or ends early
- a deadline is zero
- a period is zero
- the file cannot be opened

## Library use

```python
from edfsim.tasks import Task, hyperperiod, utilization
from edfsim.scheduler import simulate

tasks = [
    Task(arrival=0, execution=1, deadline=4, period=4),
    Task(arrival=0, execution=2, deadline=6, period=6),
]

print(utilization(tasks))   # sum of execution / deadline
print(hyperperiod(tasks))   # least common multiple of the periods

for slot in simulate(tasks):
    print(slot)             # e.g. "0  Task 1"
```

### `edfsim.tasks`

`Task(arrival, execution, deadline, period)` is a dataclass. It also keeps
the state of its current job:

- `remaining`: the execution time still to run
- `instance`: the job number
- `alive`: whether the job has been released

The properties `abs_arrival` and `abs_deadline` give the release time and the
absolute deadline of the current job. `reset_execution()` restores the full
execution budget. `start_next_instance()` finishes the current job and moves
on to the next one.

The module also provides these helpers:

- `gcd(a, b)` and `lcm(values)`. `lcm` raises `ValueError` for a zero period.
- `hyperperiod(tasks)` and `utilization(tasks)`.
- `release_arrivals(tasks, time)`. It marks the tasks whose job arrives at
  `time` as alive. It returns `True` at a scheduling point, which means a job
  arrived or no task is alive.
- `earliest_deadline_task(tasks)`. It returns the index of the alive task with
  the earliest absolute deadline, or `None` when the processor is idle. Jobs
  with an absolute deadline of 32767 (`NO_DEADLINE`) or later are never chosen.
- `format_periods(tasks)`. It returns a line such as
  `Periods: Task 1=4 Task 2=6`.

### `edfsim.scheduler`

`simulate(tasks)` yields one `Slot` for each time unit from 0 through the
hyperperiod. It works on copies of the tasks and leaves the given tasks
unchanged. A `Slot` has these members:

- `time`
- `task`: a 0-based index, or `None`
- `idle`

A time unit in which a job with no execution time left completes yields no
slot.

### `edfsim.cli`

`read_tasks(lines, out)` and `run(lines, out)` take any iterable of input
lines and any text output stream. `main(argv=None)` is the entry point of the
`edfsim` command.

## Limitations

- The simulator does not detect or report missed deadlines. It only shows
  which task runs in each time unit.
- The schedulability verdict is the utilization test described above and
  nothing more.
- Scheduling is on one processor only.
- A running job is preempted only at scheduling points.