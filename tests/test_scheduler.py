from collections import Counter

from edfsim.scheduler import Slot, simulate
from edfsim.tasks import Task, hyperperiod


def _classic():
    return [Task(0, 1, 4, 4), Task(0, 2, 6, 6), Task(0, 3, 8, 8)]


def test_slot_string_for_task_is_numbered_from_one():
    assert str(Slot(3, 1)) == "3  Task 2"


def test_slot_string_for_idle():
    assert str(Slot(3, None)) == "3  Idle"
    assert Slot(3, None).idle is True


def test_single_task_alternates_with_idle():
    slots = list(simulate([Task(0, 1, 2, 2)]))
    assert slots == [Slot(0, 0), Slot(1, None), Slot(2, 0)]


def test_feasible_set_gets_full_budget_within_hyperperiod():
    tasks = _classic()
    end = hyperperiod(tasks)
    counts = Counter(slot.task for slot in simulate(tasks) if slot.time < end)
    for index, task in enumerate(tasks):
        assert counts[index] == task.execution * end // task.period


def test_times_are_strictly_increasing_and_bounded():
    tasks = _classic()
    times = [slot.time for slot in simulate(tasks)]
    assert times == sorted(set(times))
    assert times[0] == 0
    assert times[-1] <= hyperperiod(tasks)


def test_every_unit_is_accounted_for_when_no_job_is_empty():
    tasks = _classic()
    slots = list(simulate(tasks))
    assert len(slots) == hyperperiod(tasks) + 1


def test_first_unit_goes_to_earliest_deadline():
    slots = list(simulate(_classic()))
    assert slots[0] == Slot(0, 0)


def test_simulation_leaves_input_tasks_untouched():
    tasks = _classic()
    list(simulate(tasks))
    assert [(t.instance, t.alive, t.remaining) for t in tasks] == [
        (0, False, t.execution) for t in tasks
    ]


def test_empty_job_consumes_no_time():
    slots = list(simulate([Task(0, 0, 2, 2)]))
    assert slots == [Slot(1, None)]


def test_no_tasks_is_idle_throughout():
    slots = list(simulate([]))
    assert all(slot.idle for slot in slots)
    assert [slot.time for slot in slots] == [0, 1]


def test_late_arrival_starts_idle():
    slots = list(simulate([Task(1, 1, 3, 3)]))
    assert slots[0] == Slot(0, None)
    assert slots[1] == Slot(1, 0)