import pytest

from schedsim.algorithms import (
    ALGORITHMS,
    schedule_fcfs,
    schedule_priority,
    schedule_priority_preemptive,
    schedule_rr,
    schedule_sjf,
    schedule_srtf,
)
from schedsim.errors import InvalidQuantum
from schedsim.models import Process


def _procs():
    return [
        Process(1, "P1", arrival_time=0, burst_time=5, priority=2),
        Process(2, "P2", arrival_time=1, burst_time=3, priority=1),
        Process(3, "P3", arrival_time=2, burst_time=8, priority=3),
        Process(4, "P4", arrival_time=3, burst_time=6, priority=2),
    ]


def _spans(timeline):
    return [(s.name, s.start, s.end) for s in timeline]


def _run(name, procs, quantum=2):
    func = ALGORITHMS[name]
    if name == "RR":
        return func(procs, quantum=quantum)
    return func(procs)


def test_fcfs_order():
    timeline = schedule_fcfs(_procs())
    assert _spans(timeline) == [("P1", 0, 5), ("P2", 5, 8), ("P3", 8, 16), ("P4", 16, 22)]


def test_fcfs_idle_gap_has_no_segment():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=2),
        Process(2, "B", arrival_time=5, burst_time=1),
    ]
    assert _spans(schedule_fcfs(procs)) == [("A", 0, 2), ("B", 5, 6)]


def test_fcfs_same_arrival_keeps_input_order():
    procs = [
        Process(7, "X", arrival_time=1, burst_time=2),
        Process(3, "Y", arrival_time=0, burst_time=1),
        Process(5, "Z", arrival_time=1, burst_time=1),
    ]
    assert [s.name for s in schedule_fcfs(procs)] == ["Y", "X", "Z"]


def test_sjf_order():
    timeline = schedule_sjf(_procs())
    # P1 is alone at t=0; at t=5 P2 is shortest, then P4 (6) beats P3 (8).
    assert _spans(timeline) == [("P1", 0, 5), ("P2", 5, 8), ("P4", 8, 14), ("P3", 14, 22)]


def test_sjf_tie_goes_to_input_order():
    procs = [
        Process(1, "Long", arrival_time=0, burst_time=2),
        Process(2, "B", arrival_time=1, burst_time=3),
        Process(3, "A", arrival_time=0, burst_time=3),
    ]
    assert [s.name for s in schedule_sjf(procs)] == ["Long", "B", "A"]


def test_sjf_idles_until_first_arrival():
    procs = [Process(1, "Late", arrival_time=4, burst_time=2)]
    assert _spans(schedule_sjf(procs)) == [("Late", 4, 6)]


def test_srtf_preempts_and_merges_segments():
    timeline = schedule_srtf(_procs())
    assert _spans(timeline) == [
        ("P1", 0, 1),
        ("P2", 1, 4),
        ("P1", 4, 8),
        ("P4", 8, 14),
        ("P3", 14, 22),
    ]


def test_srtf_tie_is_resolved_by_scan_order():
    a = Process(1, "A", arrival_time=0, burst_time=4)
    b = Process(2, "B", arrival_time=1, burst_time=3)
    # At t=1 both have 3 ticks left; the first one in the input list wins.
    assert _spans(schedule_srtf([a, b])) == [("A", 0, 4), ("B", 4, 7)]
    assert _spans(schedule_srtf([b, a])) == [("A", 0, 1), ("B", 1, 4), ("A", 4, 7)]


def test_srtf_does_not_merge_across_idle_time():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=1),
        Process(2, "B", arrival_time=3, burst_time=2),
    ]
    assert _spans(schedule_srtf(procs)) == [("A", 0, 1), ("B", 3, 5)]


def test_priority_static():
    timeline = schedule_priority(_procs())
    # P1 starts alone at 0; then P2 (1), P4 (2), P3 (3).
    assert _spans(timeline) == [("P1", 0, 5), ("P2", 5, 8), ("P4", 8, 14), ("P3", 14, 22)]


def test_priority_ties_favour_earlier_arrival():
    procs = [
        Process(1, "Blocker", arrival_time=0, burst_time=3, priority=1),
        Process(2, "X", arrival_time=2, burst_time=1, priority=2),
        Process(3, "Y", arrival_time=1, burst_time=1, priority=2),
    ]
    # X and Y are both waiting at t=3 with equal priority; Y arrived first.
    assert [s.name for s in schedule_priority(procs)] == ["Blocker", "Y", "X"]


def test_priority_preemptive():
    timeline = schedule_priority_preemptive(_procs())
    # At t=4 P1 and P4 share priority 2; P1 comes first in the input.
    assert _spans(timeline) == [
        ("P1", 0, 1),
        ("P2", 1, 4),
        ("P1", 4, 8),
        ("P4", 8, 14),
        ("P3", 14, 22),
    ]


def test_priority_preemptive_tie_uses_input_order_not_arrival():
    procs = [
        Process(1, "A", arrival_time=2, burst_time=2, priority=1),
        Process(2, "B", arrival_time=0, burst_time=3, priority=1),
    ]
    assert _spans(schedule_priority_preemptive(procs)) == [("B", 0, 2), ("A", 2, 4), ("B", 4, 5)]
    # The non-preemptive variant scans by arrival and never preempts.
    assert _spans(schedule_priority(procs)) == [("B", 0, 3), ("A", 3, 5)]


def test_rr_quantum_2():
    timeline = schedule_rr(_procs(), quantum=2)
    assert _spans(timeline) == [
        ("P1", 0, 2),
        ("P2", 2, 4),
        ("P3", 4, 6),
        ("P1", 6, 8),
        ("P4", 8, 10),
        ("P2", 10, 11),
        ("P3", 11, 13),
        ("P1", 13, 14),
        ("P4", 14, 16),
        ("P3", 16, 18),
        ("P4", 18, 20),
        ("P3", 20, 22),
    ]


def test_rr_queues_new_arrival_before_preempted_process():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=4),
        Process(2, "B", arrival_time=2, burst_time=2),
    ]
    # B arrives exactly when A's first slice ends, so B runs next.
    assert _spans(schedule_rr(procs, quantum=2)) == [("A", 0, 2), ("B", 2, 4), ("A", 4, 6)]


def test_rr_idles_between_bursts():
    procs = [
        Process(1, "A", arrival_time=0, burst_time=1),
        Process(2, "B", arrival_time=4, burst_time=3),
    ]
    assert _spans(schedule_rr(procs, quantum=2)) == [("A", 0, 1), ("B", 4, 6), ("B", 6, 7)]


def test_rr_large_quantum_matches_fcfs():
    procs = _procs()
    quantum = max(p.burst_time for p in procs)
    assert _spans(schedule_rr(procs, quantum=quantum)) == _spans(schedule_fcfs(procs))


@pytest.mark.parametrize("quantum", [None, 0, -1, 1.5, True])
def test_rr_rejects_bad_quantum(quantum):
    with pytest.raises(InvalidQuantum):
        schedule_rr(_procs(), quantum=quantum)


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_timeline_is_sorted_and_covers_all_work(name):
    procs = _procs() + [Process(9, "P9", arrival_time=30, burst_time=2, priority=1)]
    timeline = _run(name, procs)

    pids = {p.pid for p in procs}
    assert all(s.pid in pids for s in timeline)
    assert all(s.end > s.start for s in timeline)
    for prev, cur in zip(timeline, timeline[1:]):
        assert prev.end <= cur.start
    assert sum(s.duration for s in timeline) == sum(p.burst_time for p in procs)


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_every_process_finishes_after_arrival_plus_burst(name):
    procs = _procs()
    timeline = _run(name, procs)
    for p in procs:
        completion = max(s.end for s in timeline if s.pid == p.pid)
        assert completion >= p.arrival_time + p.burst_time


@pytest.mark.parametrize("name", list(ALGORITHMS))
def test_algorithms_leave_input_untouched(name):
    procs = _procs()
    before = list(procs)
    _run(name, procs)
    assert procs == before
