"""CPU scheduling algorithms and their schedules."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, List, Optional, Tuple

GanttEntry = Tuple[int, int]


@dataclass(frozen=True)
class Process:
    """A process waiting to be scheduled; a lower priority number runs first."""

    pid: int
    burst_time: int
    arrival_time: int = 0
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst_time < 1:
            raise ValueError("burst time must be at least 1")


@dataclass(frozen=True)
class ScheduledProcess:
    """A process together with the times it spent waiting and in the system."""

    pid: int
    burst_time: int
    arrival_time: int
    priority: int
    waiting_time: int
    turnaround_time: int

    @classmethod
    def _finished(cls, process: Process, waiting_time: int) -> "ScheduledProcess":
        return cls(
            pid=process.pid,
            burst_time=process.burst_time,
            arrival_time=process.arrival_time,
            priority=process.priority,
            waiting_time=waiting_time,
            turnaround_time=waiting_time + process.burst_time,
        )


@dataclass(frozen=True)
class Schedule:
    """The result of a scheduling run.

    Each Gantt entry pairs a process id with a time: the completion time for
    the non-preemptive algorithms, the start of the slice for round robin and
    shortest-remaining-time-first.
    """

    processes: Tuple[ScheduledProcess, ...]
    gantt: Tuple[GanttEntry, ...]

    def average_waiting_time(self) -> float:
        """Return the mean waiting time, or NaN when there are no processes."""
        if not self.processes:
            return math.nan
        return sum(p.waiting_time for p in self.processes) / len(self.processes)

    def format_table(self) -> str:
        """Return the per-process table, one tab-separated row per process."""
        lines = [
            "PID\tBurst Time\tArrival Time\tPriority\tWaiting Time\tTurnaround Time\n"
        ]
        lines.extend(
            f"{p.pid}\t{p.burst_time}\t\t{p.arrival_time}\t\t{p.priority}"
            f"\t\t{p.waiting_time}\t\t{p.turnaround_time}\n"
            for p in self.processes
        )
        return "".join(lines)

    def format_gantt(self) -> str:
        """Return the Gantt chart: a bar of process ids over a row of times."""
        bar = "".join(f"| P{pid} " for pid, _ in self.gantt) + "|\n"
        times = "".join(f"{time}\t" for _, time in self.gantt) + "\n"
        return "Gantt Chart:\n" + bar + times

    def __str__(self) -> str:
        return (
            "\n"
            + self.format_table()
            + "\n"
            + self.format_gantt()
            + f"\nAverage Waiting Time: {self.average_waiting_time():g}\n"
        )


def _by_arrival(processes: Iterable[Process]) -> Deque[Process]:
    return deque(sorted(processes, key=lambda p: p.arrival_time))


def _admit(pending: Deque[Process], ready: list, now: int, wrap: Callable) -> None:
    while pending and pending[0].arrival_time <= now:
        ready.append(wrap(pending.popleft()))


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served."""
    now = 0
    done: List[ScheduledProcess] = []
    gantt: List[GanttEntry] = []
    for process in sorted(processes, key=lambda p: p.arrival_time):
        now = max(now, process.arrival_time)
        waiting = now - process.arrival_time
        now += process.burst_time
        gantt.append((process.pid, now))
        done.append(ScheduledProcess._finished(process, waiting))
    return Schedule(tuple(done), tuple(gantt))


def _non_preemptive(
    processes: Iterable[Process], key: Callable[[Process], int]
) -> Schedule:
    pending = _by_arrival(processes)
    ready: List[Process] = []
    now = 0
    done: List[ScheduledProcess] = []
    gantt: List[GanttEntry] = []
    while pending or ready:
        _admit(pending, ready, now, lambda p: p)
        if not ready:
            now = pending[0].arrival_time
            continue
        ready.sort(key=key)
        process = ready.pop(0)
        waiting = max(0, now - process.arrival_time)
        now += process.burst_time
        gantt.append((process.pid, now))
        done.append(ScheduledProcess._finished(process, waiting))
    return Schedule(tuple(done), tuple(gantt))


def sjf(processes: Iterable[Process]) -> Schedule:
    """Shortest job first, without preemption."""
    return _non_preemptive(processes, lambda p: p.burst_time)


def priority_scheduling(processes: Iterable[Process]) -> Schedule:
    """Run the arrived process with the lowest priority number, without preemption."""
    return _non_preemptive(processes, lambda p: p.priority)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with a fixed time quantum."""
    if quantum < 1:
        raise ValueError("time quantum must be at least 1")
    pending = _by_arrival(processes)
    ready: List[List] = []
    queue: Deque[List] = deque()
    now = 0
    done: List[ScheduledProcess] = []
    gantt: List[GanttEntry] = []
    while pending or queue:
        _admit(pending, ready, now, lambda p: [p, p.burst_time])
        queue.extend(ready)
        ready.clear()
        if not queue:
            now = pending[0].arrival_time
            continue
        process, remaining = queue.popleft()
        ran = min(remaining, quantum)
        gantt.append((process.pid, now))
        now += ran
        remaining -= ran
        if remaining > 0:
            queue.append([process, remaining])
        else:
            waiting = max(0, now - process.arrival_time - process.burst_time)
            done.append(ScheduledProcess._finished(process, waiting))
    return Schedule(tuple(done), tuple(gantt))


def srtf(processes: Iterable[Process]) -> Schedule:
    """Shortest remaining time first, preempting one time unit at a time.

    Processes are reported in the order they were given.
    """
    procs = list(processes)
    remaining = [p.burst_time for p in procs]
    results: List[Optional[ScheduledProcess]] = [None] * len(procs)
    gantt: List[GanttEntry] = []
    now = 0
    completed = 0
    while completed < len(procs):
        candidates = [
            i
            for i, p in enumerate(procs)
            if p.arrival_time <= now and remaining[i] > 0
        ]
        if not candidates:
            now = min(
                p.arrival_time for i, p in enumerate(procs) if remaining[i] > 0
            )
            continue
        chosen = min(candidates, key=lambda i: remaining[i])
        process = procs[chosen]
        gantt.append((process.pid, now))
        remaining[chosen] -= 1
        now += 1
        if remaining[chosen] == 0:
            completed += 1
            turnaround = now - process.arrival_time
            results[chosen] = ScheduledProcess._finished(
                process, turnaround - process.burst_time
            )
    return Schedule(tuple(r for r in results if r is not None), tuple(gantt))