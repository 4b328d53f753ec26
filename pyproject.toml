[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cachesim"
version = "0.1.0"
description = "Trace-driven simulator for set-associative LRU caches: unified L1, split I/D L1, and two-level hierarchies"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "simulator", "lru", "memory hierarchy", "computer architecture", "trace"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
simbasica = "cachesim.cli:main_basic"
simsplit = "cachesim.cli:main_split"
simniveis = "cachesim.cli:main_two_level"

[tool.hatch.build.targets.wheel]
packages = ["cachesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
