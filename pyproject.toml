[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lofz"
version = "0.1.0"
description = "Lights Out against a Sith flipper: a 4x4 lights-out puzzle with an opponent, text crawls and secret codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["lights-out", "puzzle", "game", "terminal"]
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
lofz = "lofz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lofz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
