import pytest

from rrsched.scheduler import Process, simulate_rr


def make(specs):
    return [Process(id=i, arrival=a, burst=b) for i, (a, b) in enumerate(specs)]


def times(procs):
    return [(p.start_time, p.finish_time) for p in procs]


def test_no_processes():
    assert simulate_rr(3, 10, []) == []


def test_single_process_from_zero():
    procs = make([(0, 10)])
    seq = simulate_rr(3, 10, procs)
    assert seq == [0]
    assert procs[0].start_time == 0
    assert procs[0].finish_time == procs[0].arrival + procs[0].burst


def test_single_late_process_has_idle_prefix():
    procs = make([(5, 4)])
    seq = simulate_rr(2, 10, procs)
    assert seq == [-1, 0]
    assert procs[0].start_time == 5
    assert procs[0].finish_time == procs[0].arrival + procs[0].burst


def test_two_processes_alternate():
    procs = make([(0, 3), (0, 3)])
    seq = simulate_rr(1, 100, procs)
    assert seq == [0, 1, 0, 1, 0, 1]
    assert [p.start_time for p in procs] == [0, 1]
    assert [p.finish_time for p in procs] == [5, 6]


def test_idle_gap_between_processes():
    procs = make([(0, 2), (10, 2)])
    seq = simulate_rr(5, 100, procs)
    assert seq == [0, -1, 1]
    for p in procs:
        assert p.start_time == p.arrival
        assert p.finish_time == p.arrival + p.burst


def test_sequence_is_truncated():
    procs = make([(0, 3), (0, 3)])
    seq = simulate_rr(1, 2, procs)
    assert seq == [0, 1]


def test_zero_max_seq_len_gives_empty_sequence():
    procs = make([(0, 4), (1, 4)])
    assert simulate_rr(2, 0, procs) == []
    assert all(p.finish_time >= p.start_time >= p.arrival for p in procs)


@pytest.mark.parametrize(
    "specs,quantum",
    [
        ([(0, 7), (2, 5), (3, 9)], 2),
        ([(0, 100), (0, 50), (10, 30), (400, 20)], 3),
        ([(1, 1000), (2, 999), (3, 17)], 7),
    ],
)
def test_short_sequence_does_not_change_timing(specs, quantum):
    full = make(specs)
    short = make(specs)
    full_seq = simulate_rr(quantum, 100000, full)
    short_seq = simulate_rr(quantum, 2, short)
    assert times(full) == times(short)
    assert short_seq == full_seq[:2]


@pytest.mark.parametrize("quantum", [1, 2, 3, 5, 10])
def test_busy_cpu_finishes_at_total_burst(quantum):
    procs = make([(0, 4), (0, 9), (0, 13)])
    simulate_rr(quantum, 1000, procs)
    assert max(p.finish_time for p in procs) == sum(p.burst for p in procs)


def test_timing_invariants():
    procs = make([(0, 5), (3, 8), (4, 2), (30, 6)])
    seq = simulate_rr(2, 1000, procs)
    for p in procs:
        assert p.start_time >= p.arrival
        assert p.finish_time - p.start_time >= p.burst
    assert set(seq) == {-1, 0, 1, 2, 3}
    assert all(a != b for a, b in zip(seq, seq[1:]))


def test_invalid_quantum():
    with pytest.raises(ValueError):
        simulate_rr(0, 10, make([(0, 1)]))


def test_negative_max_seq_len():
    with pytest.raises(ValueError):
        simulate_rr(1, -1, make([(0, 1)]))