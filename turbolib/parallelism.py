"""Run one function on several threads at once."""

from __future__ import annotations

import threading
from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar("T")


def nmap(n_threads: int, fun: Callable[[T], Any], msg: T) -> List[Any]:
    """Start `n_threads` threads each calling `fun(msg)`, wait for all, return their results.

    A line 'Thread i returns: 0' is printed as each thread starts. If any call
    raises, the first such exception is raised once every thread has finished.
    """
    if n_threads < 0:
        raise ValueError("n_threads must not be negative")

    results: List[Any] = [None] * n_threads
    errors: List[Optional[BaseException]] = [None] * n_threads

    def _run(slot: int) -> None:
        try:
            results[slot] = fun(msg)
        except BaseException as exc:  # re-raised in the calling thread
            errors[slot] = exc

    threads = []
    for slot in range(n_threads):
        thread = threading.Thread(target=_run, args=(slot,))
        thread.start()
        print(f"Thread {slot} returns: 0", flush=True)
        threads.append(thread)

    for thread in threads:
        thread.join()

    for error in errors:
        if error is not None:
            raise error
    return results