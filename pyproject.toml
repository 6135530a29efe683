[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazechase"
version = "0.1.0"
description = "A tile-map maze game: collect every item, dodge the chasing mobs, reach the exit."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "puzzle", "xpm", "tile-map"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazechase = "mazechase.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazechase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
