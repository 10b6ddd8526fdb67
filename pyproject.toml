[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubikscube"
version = "0.1.0"
description = "Rubik's Cube models: a sticker model with face, slice and whole-cube turns, and a cubie index model for fast face turns and pattern indexing."
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "cube", "cubie", "permutation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rubikscube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
