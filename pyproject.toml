[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fillit"
version = "1.0.0"
description = "Fit tetrominoes into the smallest square, plus tools that generate random maps and compare fillit solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetromino", "tetris", "puzzle", "packing", "backtracking", "solver"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fillit = "fillit.solver:main"
fillit-bitsolve = "fillit.bitsolver:main"
fillit-tester = "fillit.tester.cli:main"
fillit-legacy-tester = "fillit.tester.legacy:main"

[tool.hatch.build.targets.wheel]
packages = ["fillit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
