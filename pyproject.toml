[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "csi281"
version = "0.1.0"
description = "Classic collections, searches and sorts with timing benchmarks and a city temperature CSV reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "sorting", "searching", "linked list", "dynamic array", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
csi281-benchmarks = "csi281.benchmarks:main"

[tool.hatch.build.targets.wheel]
packages = ["csi281"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
