"""Threads: waiting for workers, sharing a counter and sending over a channel."""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any

_DONE = object()


def _check_delay(delay: float) -> None:
    if delay < 0:
        raise ValueError("delay must not be negative")


def run_threads(count: int, delay: float) -> int:
    """Start ``count`` sleeping threads, wait for all of them, return how many finished."""
    _check_delay(delay)

    def work(i: int) -> None:
        time.sleep(delay)
        print(f"thread {i} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    jobs_completed: int = 0


def complete_jobs(count: int, delay: float) -> JobStatus:
    """Have ``count`` threads each record one completed job in a shared status."""
    _check_delay(delay)
    status = JobStatus()
    lock = threading.Lock()

    def work() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Ten numbers split in two halves, sent with a pause after each."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    interval: float = 1.0


def send_tx(queue: Queue, channel: queue.Queue[Any]) -> list[threading.Thread]:
    """Send both halves from two threads; each ends its stream with a marker."""
    _check_delay(queue.interval)

    def sender(values: list[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(queue.interval)
        finally:
            channel.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue) -> list[int]:
    """Receive every number sent for ``queue`` and check the expected count."""
    channel: queue.Queue[Any] = _new_channel()
    senders = send_tx(queue, channel)
    received: list[int] = []
    remaining = len(senders)
    while remaining:
        item = channel.get()
        if item is _DONE:
            remaining -= 1
            continue
        print(f"Got: {item}")
        received.append(item)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but expected {queue.length}"
        )
    return received


def _new_channel() -> Any:
    import queue as queue_module

    return queue_module.Queue()