[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoitower"
version = "0.1.0"
description = "Tower of Hanoi solver and terminal game with text, array and animated views"
requires-python = ">=3.10"
dependencies = []
keywords = ["hanoi", "tower of hanoi", "puzzle", "game", "terminal", "ansi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
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
hanoitower = "hanoitower.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoitower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
