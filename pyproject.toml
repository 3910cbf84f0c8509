[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasksched"
version = "0.1.0"
description = "Simulate non-preemptive priority and lottery CPU scheduling over a generated task set, with a CSV execution log"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "simulation", "lottery scheduling", "priority scheduling", "operating systems"]
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
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tasksched = "tasksched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tasksched"]

[tool.pytest.ini_options]
addopts = "-ra"
