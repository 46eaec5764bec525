[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolab"
version = "0.1.0"
description = "Classic algorithm exercises: closest pair of points, 8-puzzle search, online load balancing and a diamond path DP"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "closest-pair",
    "divide-and-conquer",
    "8-puzzle",
    "bfs",
    "iddfs",
    "ida-star",
    "scheduling",
    "dynamic-programming",
]
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algolab-make-points = "algolab.points:main"
algolab-closest = "algolab.closest:main"
algolab-puzzle = "algolab.puzzle_cli:main"
algolab-schedule = "algolab.scheduling:main"
algolab-diamond = "algolab.diamond:main"

[tool.hatch.build.targets.wheel]
packages = ["algolab"]

[tool.hatch.build.targets.sdist]
include = ["algolab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
