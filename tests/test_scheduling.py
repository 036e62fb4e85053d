import math

import pytest

from dslab.scheduling import (
    Process,
    Schedule,
    fcfs,
    priority_scheduling,
    round_robin,
    sjf,
    srtf,
)

MIXED = [
    Process(1, 6, 2, 3),
    Process(2, 2, 5, 1),
    Process(3, 8, 1, 4),
    Process(4, 3, 0, 2),
    Process(5, 4, 4, 5),
]

AT_ZERO = [
    Process(1, 7, 0, 2),
    Process(2, 3, 0, 1),
    Process(3, 5, 0, 3),
    Process(4, 1, 0, 4),
]

ALGORITHMS = [
    fcfs,
    sjf,
    priority_scheduling,
    srtf,
    lambda ps: round_robin(ps, 2),
]


def _waits(schedule):
    return {p.pid: p.waiting_time for p in schedule.processes}


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_every_process_finishes_once(algorithm):
    schedule = algorithm(MIXED)
    assert sorted(p.pid for p in schedule.processes) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_turnaround_is_waiting_plus_burst(algorithm):
    for p in algorithm(MIXED).processes:
        assert p.turnaround_time == p.waiting_time + p.burst_time
        assert p.waiting_time >= 0


def test_fcfs_runs_in_arrival_order():
    schedule = fcfs(MIXED)
    arrivals = [p.arrival_time for p in schedule.processes]
    assert arrivals == sorted(arrivals)
    assert [pid for pid, _ in schedule.gantt] == [p.pid for p in schedule.processes]


def test_fcfs_gantt_times_are_completion_times():
    schedule = fcfs(AT_ZERO)
    assert schedule.gantt[-1][1] == sum(p.burst_time for p in AT_ZERO)
    for p, (_, finish) in zip(schedule.processes, schedule.gantt):
        assert finish == p.arrival_time + p.turnaround_time


def test_fcfs_idles_until_arrival():
    late = Process(1, 3, 10)
    schedule = fcfs([late])
    assert schedule.processes[0].waiting_time == 0
    assert schedule.gantt[0] == (1, late.arrival_time + late.burst_time)


def test_sjf_orders_by_burst_when_all_arrive_together():
    schedule = sjf(AT_ZERO)
    bursts = [p.burst_time for p in schedule.processes]
    assert bursts == sorted(bursts)


def test_sjf_never_worse_than_fcfs_when_all_arrive_together():
    assert sjf(AT_ZERO).average_waiting_time() <= fcfs(AT_ZERO).average_waiting_time()


def test_srtf_matches_sjf_when_all_arrive_together():
    assert _waits(srtf(AT_ZERO)) == _waits(sjf(AT_ZERO))


def test_srtf_keeps_input_order_and_one_slot_per_unit():
    schedule = srtf(MIXED)
    assert [p.pid for p in schedule.processes] == [p.pid for p in MIXED]
    assert len(schedule.gantt) == sum(p.burst_time for p in MIXED)
    starts = [t for _, t in schedule.gantt]
    assert starts == sorted(starts)


def test_srtf_preempts_for_shorter_arrival():
    schedule = srtf([Process(1, 5, 0), Process(2, 1, 1)])
    assert [pid for pid, _ in schedule.gantt][:3] == [1, 2, 1]


def test_priority_orders_by_priority_when_all_arrive_together():
    schedule = priority_scheduling(AT_ZERO)
    priorities = [p.priority for p in schedule.processes]
    assert priorities == sorted(priorities)


def test_round_robin_with_large_quantum_matches_fcfs():
    quantum = max(p.burst_time for p in AT_ZERO)
    assert _waits(round_robin(AT_ZERO, quantum)) == _waits(fcfs(AT_ZERO))


def test_round_robin_slices_are_at_most_quantum():
    quantum = 2
    schedule = round_robin(AT_ZERO, quantum)
    starts = [t for _, t in schedule.gantt]
    assert starts == sorted(starts)
    for earlier, later in zip(starts, starts[1:]):
        assert later - earlier <= quantum
    assert len(schedule.gantt) == sum(-(-p.burst_time // quantum) for p in AT_ZERO)


def test_round_robin_rejects_non_positive_quantum():
    with pytest.raises(ValueError):
        round_robin(AT_ZERO, 0)


def test_process_rejects_zero_burst():
    with pytest.raises(ValueError):
        Process(1, 0)


def test_empty_schedule_average_is_nan():
    assert math.isnan(fcfs([]).average_waiting_time())
    assert srtf([]).processes == ()


def test_format_table_header_and_row():
    schedule = fcfs([Process(1, 3, 0, 2)])
    lines = schedule.format_table().splitlines()
    assert lines[0] == (
        "PID\tBurst Time\tArrival Time\tPriority\tWaiting Time\tTurnaround Time"
    )
    assert lines[1] == "1\t3\t\t0\t\t2\t\t0\t\t3"


def test_format_gantt_layout():
    schedule = Schedule(processes=(), gantt=((1, 3), (2, 5)))
    assert schedule.format_gantt() == "Gantt Chart:\n| P1 | P2 |\n3\t5\t\n"


def test_str_combines_parts():
    schedule = fcfs(AT_ZERO)
    text = str(schedule)
    assert text.startswith("\n" + schedule.format_table())
    assert schedule.format_gantt() in text
    assert text.endswith(
        f"\nAverage Waiting Time: {schedule.average_waiting_time():g}\n"
    )