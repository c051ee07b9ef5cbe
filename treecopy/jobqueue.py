"""Copy jobs and the bounded queue that hands them out to worker threads."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from queue import Full

MAX_JOBS = 5000
PATH_MAX_LEN = 4096 + 255


@dataclass
class CopyJob:
    """A single file to copy from ``src_path`` to ``dest_path``."""

    src_path: str
    dest_path: str
    file_size: int = 0


class JobQueue:
    """A thread-safe FIFO of copy jobs.

    The capacity bounds the total number of jobs ever enqueued: claiming a
    job does not free room for another one.
    """

    def __init__(self, capacity=MAX_JOBS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._pending: deque[CopyJob] = deque()
        self._enqueued = 0
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._pending)

    def is_empty(self):
        """Return True when no unclaimed job is left."""
        return len(self) == 0

    def is_full(self):
        """Return True when no further job may be enqueued."""
        with self._lock:
            return self._enqueued >= self.capacity

    def enqueue(self, job):
        """Add a job; raise ``queue.Full`` once the capacity is used up."""
        with self._lock:
            if self._enqueued >= self.capacity:
                raise Full(f"job queue is full ({self.capacity} jobs)")
            self._pending.append(job)
            self._enqueued += 1

    def claim(self):
        """Take the oldest unclaimed job, or return None if there is none."""
        with self._lock:
            if not self._pending:
                return None
            return self._pending.popleft()