import io

from dslab.scheduler_cli import run
from dslab.scheduling import Process, fcfs, round_robin, sjf, srtf

PROCESS_INPUT = "3\n5 0 2\n3 1 1\n1 2 3\n"
PROCESSES = [Process(1, 5, 0, 2), Process(2, 3, 1, 1), Process(3, 1, 2, 3)]


def _run(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_prompts_for_each_process():
    output = _run(PROCESS_INPUT + "6\n")
    assert output.startswith("Enter the number of processes: ")
    assert "Enter burst time for process 3: " in output
    assert "Enter priority for process 2: " in output
    assert output.endswith("Exiting...\n")


def test_fcfs_choice_prints_schedule():
    output = _run(PROCESS_INPUT + "1\n6\n")
    assert str(fcfs(PROCESSES)) in output


def test_sjf_and_srtf_choices():
    output = _run(PROCESS_INPUT + "2\n5\n6\n")
    assert str(sjf(PROCESSES)) in output
    assert str(srtf(PROCESSES)) in output


def test_round_robin_asks_for_quantum():
    output = _run(PROCESS_INPUT + "4\n2\n6\n")
    assert "Enter time quantum for Round Robin: " in output
    assert str(round_robin(PROCESSES, 2)) in output


def test_invalid_choice_reports_and_continues():
    output = _run(PROCESS_INPUT + "9\n6\n")
    assert "Invalid choice! Please try again.\n" in output
    assert output.count("CPU Scheduling Simulator") == 2


def test_invalid_quantum_reported():
    output = _run(PROCESS_INPUT + "4\n0\n6\n")
    assert "Invalid time quantum!\n" in output


def test_end_of_input_stops_without_exit_message():
    output = _run(PROCESS_INPUT)
    assert "CPU Scheduling Simulator" in output
    assert "Exiting..." not in output


def test_bad_process_data_stops():
    output = _run("1\n0 0 0\n")
    assert output.endswith("Invalid input\n")
    assert "CPU Scheduling Simulator" not in output