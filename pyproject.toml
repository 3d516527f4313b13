[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plutonio"
version = "1.0.0"
description = "Terminal grid game: collect the plutonium bars in the dark before your energy runs out"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "puzzle", "grid", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: POSIX",
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
plutonio = "plutonio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plutonio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
