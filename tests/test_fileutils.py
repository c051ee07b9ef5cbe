import io
import os

import pytest

from treecopy.fileutils import copy_file, explore_dir
from treecopy.jobqueue import CopyJob, JobQueue
from treecopy.progress import Progress


@pytest.fixture
def tree(tmp_path):
    src = tmp_path / "src"
    (src / "sub" / "deeper").mkdir(parents=True)
    (src / "a.txt").write_bytes(b"alpha")
    (src / "sub" / "b.bin").write_bytes(b"\x00\x01\x02" * 10)
    (src / "sub" / "deeper" / "c.txt").write_bytes(b"")
    dest = tmp_path / "dest"
    dest.mkdir()
    return src, dest


def _drain(queue):
    jobs = []
    while (job := queue.claim()) is not None:
        jobs.append(job)
    return jobs


def test_explore_queues_every_file(tree):
    src, dest = tree
    queue = JobQueue()
    progress = Progress(io.StringIO())
    explore_dir(str(src), str(dest), queue, progress)
    jobs = _drain(queue)
    rel = sorted(os.path.relpath(j.src_path, src) for j in jobs)
    expected = sorted(
        os.path.join(*parts)
        for parts in (("a.txt",), ("sub", "b.bin"), ("sub", "deeper", "c.txt"))
    )
    assert rel == expected


def test_explore_maps_dest_paths_and_sizes(tree):
    src, dest = tree
    queue = JobQueue()
    progress = Progress(io.StringIO())
    explore_dir(str(src), str(dest), queue, progress)
    for job in _drain(queue):
        assert os.path.relpath(job.src_path, src) == os.path.relpath(job.dest_path, dest)
        assert job.file_size == os.path.getsize(job.src_path)


def test_explore_creates_directories(tree):
    src, dest = tree
    explore_dir(str(src), str(dest), JobQueue(), Progress(io.StringIO()))
    assert (dest / "sub").is_dir()
    assert (dest / "sub" / "deeper").is_dir()
    assert not (dest / "a.txt").exists()


def test_explore_counts_total_bytes(tree):
    src, dest = tree
    progress = Progress(io.StringIO())
    explore_dir(str(src), str(dest), JobQueue(), progress)
    assert progress.bytes_total == len(b"alpha") + 30


def test_explore_missing_source_does_nothing(tmp_path):
    queue = JobQueue()
    progress = Progress(io.StringIO())
    explore_dir(str(tmp_path / "missing"), str(tmp_path / "out"), queue, progress)
    assert queue.is_empty()
    assert progress.bytes_total == 0


def test_explore_full_queue_counts_failures(tree):
    src, dest = tree
    queue = JobQueue(capacity=1)
    progress = Progress(io.StringIO())
    explore_dir(str(src), str(dest), queue, progress)
    assert len(queue) == 1
    assert progress.files_failed == 2
    queued = queue.claim()
    assert progress.bytes_failed == progress.bytes_total - queued.file_size


def test_explore_skips_symlinks(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "real.txt").write_bytes(b"data")
    os.symlink(src / "real.txt", src / "link.txt")
    dest = tmp_path / "dest"
    dest.mkdir()
    queue = JobQueue()
    explore_dir(str(src), str(dest), queue, Progress(io.StringIO()))
    names = [os.path.basename(j.src_path) for j in _drain(queue)]
    assert names == ["real.txt"]


def test_copy_file_copies_content(tmp_path):
    data = os.urandom(20000)
    src = tmp_path / "in.bin"
    src.write_bytes(data)
    dest = tmp_path / "out.bin"
    job = CopyJob(str(src), str(dest), 0)
    assert copy_file(job) == len(data)
    assert dest.read_bytes() == data
    assert job.file_size == len(data)


def test_copy_file_overwrites_destination(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"new")
    dest = tmp_path / "out.txt"
    dest.write_bytes(b"old content that is longer")
    copy_file(CopyJob(str(src), str(dest)))
    assert dest.read_bytes() == b"new"


def test_copy_file_missing_source(tmp_path):
    job = CopyJob(str(tmp_path / "nope"), str(tmp_path / "out"), 5)
    with pytest.raises(FileNotFoundError):
        copy_file(job)
    assert job.file_size == 5


def test_copy_file_bad_destination(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"x")
    job = CopyJob(str(src), str(tmp_path / "no" / "such" / "dir" / "out"))
    with pytest.raises(OSError):
        copy_file(job)


def test_copy_file_without_job():
    with pytest.raises(ValueError):
        copy_file(None)