[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubmap"
version = "0.1.0"
description = "Start-up side of a raycasting game: map-file argument checks, game state, a buffered line reader and C-style text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "cub", "map", "game", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubmap = "cubmap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
