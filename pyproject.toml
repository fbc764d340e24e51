[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nissy"
version = "0.1.0"
description = "Rubik's cube building blocks: cube encoding, move and transformation tables, text formats and pruning-table helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "puzzle", "pruning-table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["nissy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
