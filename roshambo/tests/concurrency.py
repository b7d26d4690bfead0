"""
Helpers for exercising the store from several threads at once.
"""

import threading
import time

from ..storage import MemoryKVStore


class SlowMemoryKVStore(MemoryKVStore):
    """Memory backend whose reads stall, widening check-then-write races."""

    def get(self, key: bytes) -> bytes | None:
        time.sleep(0.005)
        return super().get(key)


def run_concurrently(target, count: int) -> list:
    """
    Run target() on count threads released together.

    Returns what each call returned, or the exception it raised.
    """
    barrier = threading.Barrier(count)
    outcomes = []

    def worker():
        barrier.wait(timeout=5)
        try:
            outcomes.append(target())
        except Exception as e:
            outcomes.append(e)

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    return outcomes
