# rrsched

A round-robin CPU scheduling simulator. You give it a list of processes, each with an
arrival time and a CPU burst length. It simulates round-robin scheduling with a fixed
time quantum. It reports when each process started and finished, and the order in which
processes ran on the CPU.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
rrsched QUANTUM MAX_SEQ_LEN < processes.txt
```

Both arguments are integers. `QUANTUM` must be positive and `MAX_SEQ_LEN` must not be
negative.

Standard input holds one process per line as two integers, the arrival time and the
burst length, separated by whitespace. Blank lines are skipped. Processes are numbered
from 0 in the order they appear, and must be listed in order of arrival.

Example input:

```
1 10
3 5
5 3
```

The program first prints `Reading in lines from stdin...`, then a line naming the
quantum, the sequence limit and the number of processes, and how long the simulation
took. It then prints the execution sequence, `seq = [...]`, and a table with each
process's id, arrival, burst, start and finish times. In the sequence, `-1` marks a
stretch of time when the CPU was idle, and consecutive repeats of the same process are
shown once. At most `MAX_SEQ_LEN` entries are reported.

Errors:

- A line that does not hold exactly two integers, or holds an integer outside the
  signed 64-bit range, is reported as `Error on line N: ...` and the command exits with
  an error status.
- A wrong number of arguments prints a usage message; arguments that are not integers
  print `Could not parse command line arguments.` followed by the usage message. Both
  exit with an error status.
- A non-positive quantum or a negative sequence limit is reported as `Error: ...` and
  the command exits with an error status.

## Library use

```python
from rrsched.scheduler import Process, simulate_rr

procs = [Process(id=0, arrival=1, burst=10), Process(id=1, arrival=3, burst=5)]
seq = simulate_rr(3, 20, procs)
for p in procs:
    print(p.id, p.start_time, p.finish_time)
print(seq)
```

`simulate_rr(quantum, max_seq_len, processes)` fills in `start_time` and `finish_time`
on each `Process` in place and returns the execution sequence as a list of process
indices, with `-1` for idle time. It raises `ValueError` for a non-positive quantum or a
negative sequence limit.

`rrsched.cli` provides:

- `read_processes(stream)`: parse `arrival burst` lines into `Process` objects, raising
  `rrsched.common.FatalError` with the line number on bad input;
- `format_processes(processes, indent=0)`: render the results table as a string;
- `run_sched(quantum, max_seq_len, stream, out)`: read, simulate and write the full
  report, returning 0 on success and -1 on error;
- `main(argv=None)`: the `rrsched` command.

`rrsched.common` holds small text helpers (`split`, `join`, `simplify`, `is_alnum`,
`read_line`), a `Word2Int` map from words to consecutive integers, a `Timer`, the
`FatalError` exception and ANSI colour codes in `Colors`.