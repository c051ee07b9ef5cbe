"""Directory exploration and single-file copying."""

from __future__ import annotations

import contextlib
import os
from queue import Full

from treecopy.jobqueue import PATH_MAX_LEN, CopyJob

_CHUNK_SIZE = 8192


def explore_dir(src_path, dest_path, queue, progress):
    """Mirror the directory tree under ``dest_path`` and queue a job per file.

    Symbolic links and special files are skipped. A source directory that
    cannot be opened is ignored silently.
    """
    try:
        entries = os.scandir(src_path)
    except OSError:
        return
    with entries:
        for entry in entries:
            try:
                is_subdir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                continue

            if len(src_path) + 1 + len(entry.name) > PATH_MAX_LEN:
                if is_subdir:
                    progress.record_dir_failure()
                elif is_file:
                    progress.record_file_failure(0)
                continue

            src_full = f"{src_path}/{entry.name}"
            dest_full = f"{dest_path}/{entry.name}"

            if is_subdir:
                with contextlib.suppress(OSError):
                    os.mkdir(dest_full, 0o755)
                explore_dir(src_full, dest_full, queue, progress)
            elif is_file:
                try:
                    size = os.stat(src_full).st_size
                except OSError:
                    size = 0
                progress.add_total(size)
                try:
                    queue.enqueue(CopyJob(src_full, dest_full, size))
                except Full:
                    progress.record_file_failure(size)


def copy_file(job):
    """Copy ``job.src_path`` to ``job.dest_path`` and return the bytes copied.

    Raises OSError when either file cannot be opened, read or written.
    """
    if job is None:
        raise ValueError("no job to copy")
    copied = 0
    with open(job.src_path, "rb") as src, open(job.dest_path, "wb") as dst:
        while chunk := src.read(_CHUNK_SIZE):
            dst.write(chunk)
            copied += len(chunk)
    job.file_size = copied
    return copied