[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "procmux"
version = "0.1.0"
description = "An emulated process multiplexer: instructions, process sections, paged physical memory with a backing store, and an MMU."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "emulator",
    "operating-system",
    "paging",
    "mmu",
    "process",
    "virtual-memory",
    "lru",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["procmux*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
