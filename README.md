# treecopy

`treecopy` copies the regular files of a directory tree into another directory. It first walks the source tree, recreates each subdirectory under the destination and queues one copy job per file. A small pool of worker threads then copies the queued files. While the copy runs, a single progress line shows how much has been done.

## Installation

```
pip install .
```

## Usage

```
treecopy <source_dir> <dest_dir> [<thread_count>]
```

- `source_dir` must be a directory that can be opened.
- `dest_dir` is created if it does not exist.
- `thread_count` is optional and defaults to 1.
  - A value above 16 is capped at 16, with a warning.
  - A value that does not begin with a positive whole number, such as `0`, `-10` or `abc`, falls back to 1, with a warning.

If the number of arguments is wrong, the source cannot be opened or the destination cannot be created, a message is printed to standard error and the command exits with a non-zero status.

While copying, a line such as the following is rewritten in place:

```
Progress: 42.0% (0.0% failed)
```

The percentages are whole numbers, computed from bytes copied and bytes that failed out of all bytes queued.

When the copy is done, the elapsed time is printed. If any directories or files could not be copied, their counts are printed as well.

### What it does not do

- Only regular files and directories are copied. Symbolic links and special files are skipped.
- Only file contents are copied. Permissions, owners and timestamps are not carried over. New directories are created with mode `0755`.
- A subdirectory of the source that cannot be opened is skipped without being reported.
- A single run queues at most 5000 files. Files beyond that limit are counted as failures.
- An entry whose source path would be longer than 4351 characters is counted as a failure and is not copied.

## Library use

The building blocks can also be used from Python.

```python
import sys

from treecopy.jobqueue import JobQueue
from treecopy.progress import Progress
from treecopy.fileutils import explore_dir
from treecopy.mainutils import worker_routine

queue = JobQueue(5000)
progress = Progress(sys.stdout)
explore_dir("photos", "backup/photos", queue, progress)
worker_routine(queue, progress)
print()
print(progress.status_line())
```

- `treecopy.jobqueue.JobQueue` is a thread-safe FIFO of `CopyJob` entries, each holding `src_path`, `dest_path` and `file_size`. `enqueue()` raises `queue.Full` once its capacity is used up. The capacity counts every job ever enqueued, so claiming a job does not free room. `claim()` returns the oldest unclaimed job, or `None` when the queue is empty.
- `treecopy.progress.Progress` keeps the counters `bytes_total`, `bytes_done`, `bytes_failed`, `files_failed` and `dirs_failed`. `status_line()` returns the progress text, or `None` while no bytes are queued. `print_update()` writes that text to its stream.
- `treecopy.fileutils.explore_dir` creates the destination subdirectories and queues the files. `copy_file` copies one job and raises `OSError` on failure.
- `treecopy.mainutils.verify_arguments` takes an argument list whose first item is the program name. It raises `ArgumentError`, whose `code` is -1, -2 or -3, when the arguments cannot be used. It also creates the destination directory if that directory is missing.
- `treecopy.mainutils.get_thread_count` turns the optional fourth item of such a list into a thread count.
- `treecopy.mainutils.worker_routine` copies jobs until the queue is empty.
- `treecopy.cli.main` runs the whole command and returns its exit status.