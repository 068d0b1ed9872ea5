[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackpuzzles"
version = "0.1.0"
description = "Solvers for classic programming-puzzle exercises on strings, grids, sequences and arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "exercises", "practice", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hackpuzzles = "hackpuzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
