[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treecopy"
version = "0.1.0"
description = "Copy a directory tree using a pool of worker threads, with a live progress line."
requires-python = ">=3.10"
dependencies = []
keywords = ["copy", "directory", "threads", "filesystem", "progress"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treecopy = "treecopy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treecopy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
