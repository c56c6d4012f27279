"""Command-line driver: read processes from input and run the simulation."""

from __future__ import annotations

import re
import sys
from typing import Sequence, TextIO

from rrsched.common import FatalError, Timer, read_line, split
from rrsched.scheduler import Process, simulate_rr

PROG = "rrsched"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_BORDER = (
    "+---------------------------+----------------------+----------------------+------"
    "----------------+"
)
_HEADER = (
    "| Id |              Arrival |                Burst |                Start |      "
    "         Finish |"
)


def _parse_int(token: str) -> int:
    """Parse a leading 64-bit integer from a token, ignoring trailing text."""
    match = _INT_PREFIX.match(token)
    if match is None:
        raise FatalError(f"invalid integer '{token}'")
    value = int(match.group(1))
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise FatalError(f"integer out of range '{token}'")
    return value


def read_processes(stream: TextIO) -> list[Process]:
    """Read 'arrival burst' lines into processes; blank lines are skipped."""
    processes: list[Process] = []
    line_no = 0
    while line := read_line(stream):
        line_no += 1
        tokens = split(line)
        if not tokens:
            continue
        try:
            if len(tokens) != 2:
                raise FatalError("need 2 ints per line")
            arrival, burst = (_parse_int(t) for t in tokens)
        except FatalError as exc:
            raise FatalError(f"Error on line {line_no}: {exc}") from exc
        processes.append(Process(id=len(processes), arrival=arrival, burst=burst))
    return processes


def format_processes(processes: Sequence[Process], indent: int = 0) -> str:
    """Render processes as a text table."""
    pad = " " * indent
    lines = [pad + _BORDER, pad + _HEADER, pad + _BORDER]
    lines.extend(
        f"{pad}| {p.id:>2} | {p.arrival:>20} | {p.burst:>20} | "
        f"{p.start_time:>20} | {p.finish_time:>20} |"
        for p in processes
    )
    lines.append(pad + _BORDER)
    return "\n".join(lines) + "\n"


def run_sched(quantum: int, max_seq_len: int, stream: TextIO, out: TextIO) -> int:
    """Read processes from ``stream``, simulate, and report to ``out``."""
    out.write("Reading in lines from stdin...\n")
    try:
        processes = read_processes(stream)
    except FatalError as exc:
        out.write(f"{exc}\n")
        return -1

    out.write(f"Running simulate_rr(q={quantum},maxs={max_seq_len},procs=[{len(processes)}])\n")
    timer = Timer()
    try:
        seq = simulate_rr(quantum, max_seq_len, processes)
    except ValueError as exc:
        out.write(f"Error: {exc}\n")
        return -1
    out.write(f"Elapsed time  : {timer.elapsed():.4f}s\n\n")
    out.write("seq = [" + ",".join(str(s) for s in seq) + "]\n")
    out.write(format_processes(processes))
    return 0


def _usage(out: TextIO) -> int:
    out.write(f"Usage:\n    {PROG} quantum max_seq_len\n")
    return -1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``rrsched quantum max_seq_len`` with processes on stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout
    if len(args) != 2:
        return _usage(out)
    try:
        quantum, max_seq_len = (_parse_int(a) for a in args)
    except FatalError:
        out.write("Could not parse command line arguments.\n")
        return _usage(out)
    return run_sched(quantum, max_seq_len, sys.stdin, out)


if __name__ == "__main__":
    sys.exit(main())