[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashoff"
version = "0.1.0"
description = "Explore a chained hash table interactively and time it across load factors."
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "hashing", "chaining", "benchmark", "teaching", "data structures"]
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
hashoff = "hashoff.cli:main"
hashoff-perf = "hashoff.performance:main"
hashoff-repl = "hashoff.interactive:main"

[tool.hatch.build.targets.wheel]
packages = ["hashoff"]

[tool.pytest.ini_options]
addopts = "-ra"
