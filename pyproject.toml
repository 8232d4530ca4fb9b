[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heistsim"
version = "0.1.0"
description = "Simulation of processes competing for houses and fences with Lamport clocks and priority queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "distributed",
    "mutual exclusion",
    "lamport clock",
    "simulation",
    "concurrency",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heistsim = "heistsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["heistsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
