"""Multi-threaded directory tree copying with progress reporting."""

__version__ = "0.1.0"
__all__ = ["cli", "fileutils", "jobqueue", "mainutils", "progress"]