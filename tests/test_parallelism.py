import threading

import pytest

from turbolib.parallelism import nmap


def test_five_threads_receive_message(capsys):
    seen = []
    lock = threading.Lock()

    def print_message(msg):
        with lock:
            seen.append(msg)
        return 0

    results = nmap(5, print_message, "hello")
    assert seen == ["hello"] * 5
    assert results == [0] * 5

    lines = capsys.readouterr().out.splitlines()
    assert sorted(lines) == sorted(f"Thread {i} returns: 0" for i in range(5))


def test_results_returned_per_thread():
    assert nmap(3, str.upper, "abc") == ["ABC", "ABC", "ABC"]


def test_runs_on_distinct_threads():
    barrier = threading.Barrier(4)

    def record(_):
        barrier.wait(timeout=5)
        return threading.get_ident()

    results = nmap(4, record, None)
    assert len(results) == 4
    assert len(set(results)) == 4


def test_zero_threads():
    assert nmap(0, str.upper, "x") == []


def test_negative_threads_rejected():
    with pytest.raises(ValueError):
        nmap(-1, str.upper, "x")


def test_exception_propagates():
    def fail(msg):
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="boom"):
        nmap(2, fail, "boom")