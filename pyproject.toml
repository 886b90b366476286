[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zoolworld"
version = "1.0.0"
description = "A small tile-based puzzle game played in the terminal: open every chest, then reach the exit."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "tiles", "maze", "ber"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zoolworld = "zoolworld.game:main"

[tool.hatch.build.targets.wheel]
packages = ["zoolworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
