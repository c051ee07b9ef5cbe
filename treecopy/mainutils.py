"""Argument checks, job creation and the worker loop."""

from __future__ import annotations

import contextlib
import os
import re
import sys

from treecopy.fileutils import copy_file
from treecopy.jobqueue import CopyJob

NUM_THREADS_MAX = 16
NUM_THREADS_DEFAULT = 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ArgumentError(Exception):
    """Invalid command-line arguments; ``code`` is the exit status to use."""

    def __init__(self, message, code):
        super().__init__(message)
        self.code = code


def _can_open_dir(path):
    try:
        with os.scandir(path):
            return True
    except OSError:
        return False


def verify_arguments(argv):
    """Check ``argv`` (program name first) and create the destination if needed."""
    if len(argv) < 3 or len(argv) > 4:
        prog = argv[0] if argv else "treecopy"
        raise ArgumentError(
            "Invalid argument count\n"
            f"Expected usage: {prog} <source_dir> <dest_dir> [<thread_count>]",
            -1,
        )
    if not _can_open_dir(argv[1]):
        raise ArgumentError(f"Invalid source directory: {argv[1]}", -2)
    if not _can_open_dir(argv[2]):
        with contextlib.suppress(OSError):
            os.mkdir(argv[2], 0o755)
        if not _can_open_dir(argv[2]):
            raise ArgumentError(
                f"Invalid destination or failed to create directory: {argv[2]}", -3
            )


def _leading_int(text):
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def get_thread_count(argv, stream=None):
    """Return the worker count requested in ``argv[3]``, clamped to the limits."""
    if len(argv) != 4:
        return NUM_THREADS_DEFAULT
    out = stream if stream is not None else sys.stdout
    requested = _leading_int(argv[3])
    if requested > NUM_THREADS_MAX:
        print(
            f"Warning: {requested} exceeds the thread limit of {NUM_THREADS_MAX}, "
            f"proceeding with {NUM_THREADS_MAX}.",
            file=out,
        )
        return NUM_THREADS_MAX
    if requested <= 0:
        print(
            f"Warning: Thread number {argv[3]} is invalid, "
            f"proceeding with {NUM_THREADS_DEFAULT}.",
            file=out,
        )
        return NUM_THREADS_DEFAULT
    return requested


def create_job(src_path, dest_path, size, queue):
    """Build a copy job and enqueue it; ``queue.Full`` propagates."""
    job = CopyJob(src_path, dest_path, size)
    queue.enqueue(job)
    return job


def worker_routine(queue, progress):
    """Claim and copy jobs until the queue runs dry."""
    while (job := queue.claim()) is not None:
        try:
            copy_file(job)
        except OSError:
            ok = False
        else:
            ok = True
        progress.on_job_finished(ok, job.file_size)