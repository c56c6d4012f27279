"""Round-robin CPU scheduling simulation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

IDLE = -1


@dataclass
class Process:
    """A process: input fields id, arrival and burst; outputs start and finish times."""

    id: int = -1
    arrival: int = -1
    burst: int = -1
    start_time: int = -1
    finish_time: int = -1


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def simulate_rr(quantum: int, max_seq_len: int, processes: list[Process]) -> list[int]:
    """Simulate round-robin scheduling.

    Sets ``start_time`` and ``finish_time`` on each process in place and returns
    the execution sequence (process indices, with -1 for idle CPU), truncated to
    ``max_seq_len`` entries. Processes must be ordered by arrival time.
    """
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if max_seq_len < 0:
        raise ValueError("max_seq_len must not be negative")

    seq: list[int] = []
    remaining = [p.burst for p in processes]
    job_queue = deque(range(len(processes)))
    ready: deque[int] = deque()
    curr_time = 0

    while job_queue or ready:
        if not ready:
            curr_time = processes[job_queue[0]].arrival
            if curr_time != 0 and (not seq or seq[-1] != IDLE):
                seq.append(IDLE)
            ready.append(job_queue.popleft())
            continue

        front = ready[0]
        if processes[front].start_time == -1:
            processes[front].start_time = curr_time
        if not seq or seq[-1] != processes[front].id:
            seq.append(front)

        # Skipping whole rounds is only safe once every ready process has
        # started and the recorded sequence is already long enough.
        all_started = all(processes[n].start_time != -1 for n in ready) and len(seq) >= max_seq_len
        if len(ready) == 1 and processes[front].start_time != -1:
            all_started = True

        min_value = min(remaining[n] for n in ready)
        rounds = _cdiv(min_value, quantum)
        if _cmod(min_value, quantum) == 0:
            rounds -= 1

        jump = False
        if rounds > 0 and all_started:
            if job_queue:
                next_arrival = processes[job_queue[0]].arrival
                while rounds > 0:
                    if next_arrival > curr_time + rounds * len(ready) * quantum:
                        jump = True
                        break
                    rounds //= 2
            else:
                jump = True
        if rounds <= 0:
            jump = False

        if jump:
            curr_time += rounds * len(ready) * quantum
            for idx in ready:
                remaining[idx] -= rounds * quantum

        curr_time += quantum
        remaining[front] -= quantum
        if remaining[front] <= 0:
            curr_time += remaining[front]
            remaining[front] = 0
            if processes[front].finish_time == -1:
                processes[front].finish_time = curr_time

        while job_queue and processes[job_queue[0]].arrival < curr_time:
            ready.append(job_queue.popleft())

        ready.popleft()
        if remaining[front] > 0:
            ready.append(front)

    return seq[:max_seq_len]