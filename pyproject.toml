[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abcsolver"
version = "0.1.0"
description = "Solvers for a set of contest programming problems, with reusable data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "segment-tree",
    "disjoint-set-union",
    "prefix-sum",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abcsolver = "abcsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abcsolver"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
