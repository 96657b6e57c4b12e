[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hardwordle"
version = "1.0.0"
description = "A terminal word-guessing game played in hard mode, with hints and saved statistics."
requires-python = ">=3.10"
dependencies = [
    "colorama",
]
keywords = ["wordle", "word game", "puzzle", "terminal", "hard mode"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
test = [
    "pytest",
]

[project.scripts]
hardwordle = "hardwordle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hardwordle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
