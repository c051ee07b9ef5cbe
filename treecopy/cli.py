"""Command-line entry point: copy a directory tree with worker threads."""

from __future__ import annotations

import sys
import threading
import time

from treecopy.fileutils import explore_dir
from treecopy.jobqueue import JobQueue
from treecopy.mainutils import (
    ArgumentError,
    get_thread_count,
    verify_arguments,
    worker_routine,
)
from treecopy.progress import Progress

_PROG = "treecopy"


def main(argv=None):
    """Run ``treecopy <source_dir> <dest_dir> [<thread_count>]``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    full_argv = [_PROG, *args]
    started = time.perf_counter()

    try:
        verify_arguments(full_argv)
    except ArgumentError as err:
        print(err, file=sys.stderr)
        return err.code

    thread_count = get_thread_count(full_argv)
    queue = JobQueue()
    progress = Progress()

    explore_dir(full_argv[1], full_argv[2], queue, progress)
    progress.print_update()

    workers = [
        threading.Thread(target=worker_routine, args=(queue, progress))
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    print()
    print(f"Time elapsed: {time.perf_counter() - started:0.2f} seconds")
    if progress.dirs_failed > 0 or progress.files_failed > 0:
        print(
            f"Failed to copy {progress.dirs_failed} directories "
            f"and {progress.files_failed} files"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())