[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backtrack_kit"
version = "0.1.0"
description = "Backtracking solutions for classic combinatorial search problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["backtracking", "combinatorics", "search", "sudoku", "n-queens", "permutations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["backtrack_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
