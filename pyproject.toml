[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for a 25-day series of programming puzzles, one module and one command per day"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "solver", "algorithms", "grid", "pathfinding", "dynamic-programming"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocsolve-day01 = "aocsolve.day01:main"
aocsolve-day02 = "aocsolve.day02:main"
aocsolve-day03 = "aocsolve.day03:main"
aocsolve-day04 = "aocsolve.day04:main"
aocsolve-day05 = "aocsolve.day05:main"
aocsolve-day06 = "aocsolve.day06:main"
aocsolve-day07 = "aocsolve.day07:main"
aocsolve-day08 = "aocsolve.day08:main"
aocsolve-day09 = "aocsolve.day09:main"
aocsolve-day10 = "aocsolve.day10:main"
aocsolve-day11 = "aocsolve.day11:main"
aocsolve-day12 = "aocsolve.day12:main"
aocsolve-day13 = "aocsolve.day13:main"
aocsolve-day14 = "aocsolve.day14:main"
aocsolve-day15 = "aocsolve.day15:main"
aocsolve-day16 = "aocsolve.day16:main"
aocsolve-day17 = "aocsolve.day17:main"
aocsolve-day18 = "aocsolve.day18:main"
aocsolve-day19 = "aocsolve.day19:main"
aocsolve-day20 = "aocsolve.day20:main"
aocsolve-day21 = "aocsolve.day21:main"
aocsolve-day22 = "aocsolve.day22:main"
aocsolve-day23 = "aocsolve.day23:main"
aocsolve-day24 = "aocsolve.day24:main"
aocsolve-day25 = "aocsolve.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
