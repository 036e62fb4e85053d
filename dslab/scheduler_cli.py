"""An interactive CPU scheduling simulator."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO

from dslab.scheduling import (
    Process,
    Schedule,
    fcfs,
    priority_scheduling,
    round_robin,
    sjf,
    srtf,
)

MENU = (
    "\nCPU Scheduling Simulator\n"
    "1. First-Come, First-Served (FCFS)\n"
    "2. Shortest Job First (SJF)\n"
    "3. Priority Scheduling\n"
    "4. Round Robin (RR)\n"
    "5. Shortest Job First (Preemptive - SRTF)\n"
    "6. Exit\n"
    "Enter your choice: "
)

EXIT_CHOICE = 6


class _EndOfInput(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Read processes and menu choices from ``stdin`` and print schedules."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def ask(prompt: str) -> int:
        stdout.write(prompt)
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        return int(token)

    try:
        processes = _read_processes(ask)
    except _EndOfInput:
        return
    except ValueError:
        stdout.write("Invalid input\n")
        return

    algorithms: Dict[int, Callable[[Iterable[Process]], Schedule]] = {
        1: fcfs,
        2: sjf,
        3: priority_scheduling,
        5: srtf,
    }

    while True:
        try:
            choice = ask(MENU)
        except _EndOfInput:
            return
        except ValueError:
            stdout.write("Invalid choice! Please try again.\n")
            continue
        if choice == EXIT_CHOICE:
            stdout.write("Exiting...\n")
            return
        if choice == 4:
            try:
                quantum = ask("Enter time quantum for Round Robin: ")
                stdout.write(str(round_robin(processes, quantum)))
            except _EndOfInput:
                return
            except ValueError:
                stdout.write("Invalid time quantum!\n")
            continue
        algorithm = algorithms.get(choice)
        if algorithm is None:
            stdout.write("Invalid choice! Please try again.\n")
        else:
            stdout.write(str(algorithm(processes)))


def _read_processes(ask: Callable[[str], int]) -> List[Process]:
    count = ask("Enter the number of processes: ")
    processes = []
    for pid in range(1, count + 1):
        burst = ask(f"Enter burst time for process {pid}: ")
        arrival = ask(f"Enter arrival time for process {pid}: ")
        priority = ask(f"Enter priority for process {pid}: ")
        processes.append(Process(pid, burst, arrival, priority))
    return processes


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the scheduling simulator on standard input and output."""
    parser = argparse.ArgumentParser(description="Simulate CPU scheduling algorithms.")
    parser.parse_args(argv)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())