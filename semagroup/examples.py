"""Small demonstrations of Group usage, runnable from the command line."""

from __future__ import annotations

import argparse
import logging
import threading
from typing import Callable, List, Optional, Sequence, TypeVar

from .group import Group

log = logging.getLogger(__name__)

T = TypeVar("T")


class _Tally:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.count = 0

    def work(self) -> None:
        log.info("some work...")
        with self._lock:
            self.count += 1


def _run_and_free(group: Group, n: int, job: Callable[[], None]) -> None:
    try:
        job()
    finally:
        group.free_n(n)


def blocking_reserve_example(
    workers: int = 10, weight: int = 5, size: int = 10, timeout: float = 10.0
) -> int:
    """Run weighted jobs under a size limit; return how many jobs ran."""
    group = Group()
    group.set_size(size)
    done = threading.Event()
    timer = threading.Timer(timeout, done.set)
    timer.daemon = True
    timer.start()
    tally = _Tally()
    try:
        for _ in range(workers):
            if not group.reserve_n(done, weight):
                continue
            threading.Thread(target=_run_and_free, args=(group, weight, tally.work)).start()
        group.wait()
    finally:
        timer.cancel()
    return tally.count


def select_wait_example(workers: int = 10, timeout: float = 10.0) -> bool:
    """Start jobs and wait for them with a deadline; True if all finished in time."""
    group = Group()
    tally = _Tally()
    for _ in range(workers):
        group.reserve()
        threading.Thread(target=_run_and_free, args=(group, 1, tally.work)).start()
    return group.wait_event().wait(timeout)


def wait_group_example(workers: int = 10) -> int:
    """Use an unlimited group as a wait group; return how many jobs ran."""
    group = Group()
    tally = _Tally()
    for _ in range(workers):
        group.reserve()
        threading.Thread(target=_run_and_free, args=(group, 1, tally.work)).start()
    group.wait()
    return tally.count


def fetch_all(urls: Sequence[str], fetch: Callable[[str], T]) -> List[Optional[T]]:
    """Call ``fetch`` on every URL concurrently; results keep the URLs' order."""
    group = Group()
    results: List[Optional[T]] = [None] * len(urls)

    def fetch_one(index: int, url: str) -> None:
        try:
            results[index] = fetch(url)
        finally:
            group.free()

    for index, url in enumerate(urls):
        group.reserve_n(None, 1)
        threading.Thread(target=fetch_one, args=(index, url)).start()
    group.wait()
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a Group demonstration.")
    parser.add_argument("example", choices=["blocking-reserve", "select-wait", "wait-group"])
    parser.add_argument("--workers", type=int, default=10)
    parser.add_argument("--timeout", type=float, default=10.0)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if args.example == "blocking-reserve":
        result: object = blocking_reserve_example(args.workers, timeout=args.timeout)
    elif args.example == "select-wait":
        result = select_wait_example(args.workers, args.timeout)
    else:
        result = wait_group_example(args.workers)
    print(result)
    return 0