[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedsim"
version = "0.1.0"
description = "Cycle-by-cycle CPU scheduling and synchronization simulator for teaching operating systems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "fcfs",
    "sjf",
    "round-robin",
    "srtf",
    "priority",
    "mutex",
    "semaphore",
    "simulation",
    "operating-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedsim = "schedsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["schedsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
