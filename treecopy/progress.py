"""Byte and failure counters with a single-line progress display."""

from __future__ import annotations

import sys
import threading


class Progress:
    """Shared copy statistics, safe to update from several threads."""

    def __init__(self, stream=None):
        self.stream = stream
        self.bytes_total = 0
        self.bytes_done = 0
        self.bytes_failed = 0
        self.files_failed = 0
        self.dirs_failed = 0
        self._lock = threading.Lock()

    def add_total(self, size):
        """Count ``size`` more bytes as scheduled for copying."""
        with self._lock:
            self.bytes_total += size

    def record_dir_failure(self):
        """Count a directory that could not be explored."""
        with self._lock:
            self.dirs_failed += 1

    def record_file_failure(self, size):
        """Count a file of ``size`` bytes that could not be copied."""
        with self._lock:
            self.bytes_failed += size
            self.files_failed += 1

    def on_job_finished(self, ok, size):
        """Record the outcome of a copy job and refresh the display."""
        with self._lock:
            if ok:
                self.bytes_done += size
            else:
                self.bytes_failed += size
                self.files_failed += 1
        self.print_update()

    def status_line(self):
        """Return the progress text, or None while nothing is scheduled."""
        with self._lock:
            total = self.bytes_total
            done = self.bytes_done
            failed = self.bytes_failed
        if total == 0:
            return None
        progress_rate = float(100 * (done + failed) // total)
        failure_rate = float(100 * failed // total)
        return f"Progress: {progress_rate:0.1f}% ({failure_rate:0.1f}% failed)"

    def print_update(self):
        """Overwrite the current terminal line with the progress text."""
        line = self.status_line()
        if line is None:
            return
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write("\r" + line)
        stream.flush()